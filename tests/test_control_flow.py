import pytest

from codeprimer.control_flow import (
    age_category,
    day_message,
    evaluate_score,
    grade_letter,
    main,
)


@pytest.mark.parametrize(
    "age, expected",
    [(18, "You are an adult"), (40, "You are an adult"), (17, "You are a minor"), (0, "You are a minor")],
)
def test_age_category(age, expected):
    assert age_category(age) == expected


@pytest.mark.parametrize(
    "score, expected",
    [(95, "A"), (90, "A"), (89, "B"), (80, "B"), (79, "C or lower"), (0, "C or lower")],
)
def test_grade_letter(score, expected):
    assert grade_letter(score) == expected


@pytest.mark.parametrize(
    "day, expected",
    [
        ("Monday", "Start of work week"),
        ("Friday", "TGIF!"),
        ("Saturday", "Weekend!"),
        ("Sunday", "Weekend!"),
        ("Wednesday", "Midweek"),
        ("monday", "Midweek"),
    ],
)
def test_day_message(day, expected):
    assert day_message(day) == expected


@pytest.mark.parametrize(
    "score, expected",
    [
        (90, "Excellent"),
        (85, "Good"),
        (80, "Good"),
        (70, "Fair"),
        (69, "Needs improvement"),
    ],
)
def test_evaluate_score(score, expected):
    assert evaluate_score(score) == expected


def test_main_output(capsys):
    assert main() == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "You are an adult"
    assert "Grade: B" in out
    assert "Index: 1, Fruit: banana" in out
    assert "Start of work week" in out
    assert out[-1] == "Good"