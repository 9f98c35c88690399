"""Plain functions, multiple results, variadic arguments and closures."""

from __future__ import annotations

from collections.abc import Callable, Iterable


def greet(name: str) -> str:
    """Return a greeting for the given name."""
    return f"Hello, {name}!"


def divide(a: float, b: float) -> float:
    """Divide a by b, raising ZeroDivisionError when b is zero."""
    if b == 0:
        raise ZeroDivisionError("cannot divide by zero")
    return a / b


def get_min_max(numbers: Iterable[int]) -> tuple[int, int]:
    """Return the smallest and largest number, or (0, 0) when there are none."""
    values = list(numbers)
    if not values:
        return 0, 0
    return min(values), max(values)


def sum_numbers(*args: int) -> int:
    """Return the total of all arguments."""
    return sum(args)


def process_string(s: str, processor: Callable[[str], str]) -> str:
    """Apply the processor to the string."""
    return processor(s)


def make_counter() -> Callable[[], int]:
    """Return a function that yields 1, 2, 3, ... on successive calls."""
    count = 0

    def counter() -> int:
        nonlocal count
        count += 1
        return count

    return counter


def main(argv: list[str] | None = None) -> int:
    """Print the functions walkthrough."""
    print(greet("Gopher"))

    try:
        result = divide(10, 2)
    except ZeroDivisionError as exc:
        print("Error:", exc)
    else:
        print(f"10 ÷ 2 = {result:.2f}")

    low, high = get_min_max([3, 1, 4, 1, 5, 9, 2, 6])
    print(f"Min: {low}, Max: {high}")

    print(f"Sum: {sum_numbers(1, 2, 3, 4, 5)}")

    print("Processed string:", process_string("hello", str.upper))

    counter = make_counter()
    for _ in range(3):
        print("Count:", counter())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())