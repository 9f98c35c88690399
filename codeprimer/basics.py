"""Variables, basic data types, type conversion and integer arithmetic."""

from __future__ import annotations

from typing import NamedTuple

PI = 3.14159
STATUS_OK = 200
STATUS_ERROR = 500


class Arithmetic(NamedTuple):
    """Results of the four basic integer operations on two operands."""

    sum: int
    difference: int
    product: int
    quotient: int


def _truncated_division(x: int, y: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(x) // abs(y)
    return quotient if (x < 0) == (y < 0) else -quotient


def arithmetic(x: int, y: int) -> Arithmetic:
    """Add, subtract, multiply and divide two integers.

    Division truncates toward zero; a zero divisor raises ZeroDivisionError.
    """
    if y == 0:
        raise ZeroDivisionError("integer divide by zero")
    return Arithmetic(x + y, x - y, x * y, _truncated_division(x, y))


def greeting_report(name: str, age: int) -> str:
    """Return a personal greeting mentioning the age."""
    return f"Hello, {name}! You are {age} years old."


def data_type_report() -> list[str]:
    """Return the lines describing a handful of typed values and conversions."""
    integer = 42
    floating = 3.14
    unsigned = 123
    text = "Hello, Go!"
    is_gopher = True
    name, age, is_happy = "Gopher", 25, True

    converted_int = 42
    converted_float = float(converted_int)
    converted_unsigned = int(converted_float)

    return [
        f"Integer: {integer}",
        f"Float: {floating:.2f}",
        f"Unsigned: {unsigned}",
        f"Text: {text}",
        f"Is Gopher: {str(is_gopher).lower()}",
        f"Name: {name}, Age: {age}, Is Happy: {str(is_happy).lower()}",
        f"Pi: {PI:.5f}",
        f"Status OK: {STATUS_OK}, Status Error: {STATUS_ERROR}",
        "",
        "Type conversion:",
        f"int({converted_int}) -> float64({converted_float:.1f}) -> uint({converted_unsigned})",
    ]


def main(argv: list[str] | None = None) -> int:
    """Print the greeting, the arithmetic table and the data type report."""
    print("Hello, Go!")
    print(greeting_report("Gopher", 25))

    x, y = 10, 5
    result = arithmetic(x, y)
    print(f"Math with {x} and {y}:")
    print(f"Sum: {result.sum}")
    print(f"Difference: {result.difference}")
    print(f"Product: {result.product}")
    print(f"Quotient: {result.quotient}")

    print()
    for line in data_type_report():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())