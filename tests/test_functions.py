import pytest

from codeprimer.functions import (
    divide,
    get_min_max,
    greet,
    main,
    make_counter,
    process_string,
    sum_numbers,
)


def test_greet():
    assert greet("Gopher") == "Hello, Gopher!"


@pytest.mark.parametrize("a, b", [(10, 2), (7, 3), (-9, 4)])
def test_divide_round_trip(a, b):
    assert divide(a, b) * b == pytest.approx(a)


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError, match="cannot divide by zero"):
        divide(1, 0)


def test_get_min_max():
    numbers = [3, 1, 4, 1, 5, 9, 2, 6]
    low, high = get_min_max(numbers)
    assert low in numbers and high in numbers
    assert all(low <= n <= high for n in numbers)


def test_get_min_max_empty():
    assert get_min_max([]) == (0, 0)


def test_get_min_max_accepts_generators():
    assert get_min_max(n for n in [4, -2, 8]) == (-2, 8)


def test_sum_numbers():
    assert sum_numbers(1, 2, 3, 4, 5) == 15
    assert sum_numbers() == 0


def test_sum_numbers_is_additive():
    first, second = [3, 8, -1], [10, 20]
    assert sum_numbers(*first) + sum_numbers(*second) == sum_numbers(*first, *second)


def test_process_string():
    assert process_string("hello", str.upper) == "HELLO"
    assert process_string("abc", lambda s: s[::-1]) == "cba"


def test_counter_counts_up():
    counter = make_counter()
    assert [counter() for _ in range(3)] == [1, 2, 3]


def test_counters_are_independent():
    first, second = make_counter(), make_counter()
    first()
    first()
    assert second() == 1


def test_main_output(capsys):
    assert main() == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Hello, Gopher!"
    assert "Processed string: HELLO" in out