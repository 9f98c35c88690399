"""Conditionals, loops and multi-way branching."""

from __future__ import annotations

ADULT_AGE = 18

_DAY_MESSAGES = {
    "Monday": "Start of work week",
    "Friday": "TGIF!",
    "Saturday": "Weekend!",
    "Sunday": "Weekend!",
}


def age_category(age: int) -> str:
    """Describe whether the age is that of an adult or a minor."""
    if age >= ADULT_AGE:
        category = "an adult"
    else:
        category = "a minor"
    return f"You are {category}"


def grade_letter(score: int) -> str:
    """Return the letter grade for a score."""
    if score >= 90:
        return "A"
    if score >= 80:
        return "B"
    return "C or lower"


def day_message(day: str) -> str:
    """Return the message associated with a day of the week."""
    return _DAY_MESSAGES.get(day, "Midweek")


def evaluate_score(score: int) -> str:
    """Return a verbal evaluation of a score."""
    if score >= 90:
        return "Excellent"
    if score >= 80:
        return "Good"
    if score >= 70:
        return "Fair"
    return "Needs improvement"


def main(argv: list[str] | None = None) -> int:
    """Print the control-flow walkthrough."""
    print(age_category(18))
    print(f"Grade: {grade_letter(85)}")

    print("\nCounting to 5:")
    print("".join(f"{i} " for i in range(1, 6)))

    print("\nWhile-style loop:")
    count = 0
    parts = []
    while count < 3:
        parts.append(f"{count} ")
        count += 1
    print("".join(parts))

    print("\nIterating over slice:")
    for index, fruit in enumerate(["apple", "banana", "orange"]):
        print(f"Index: {index}, Fruit: {fruit}")

    print("\nSwitch example:")
    print(day_message("Monday"))

    print("\nGrade evaluation:")
    print(evaluate_score(85))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())