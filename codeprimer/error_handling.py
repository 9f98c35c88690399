"""Raising, wrapping, recovering from and reporting errors."""

from __future__ import annotations

import logging

_log = logging.getLogger(__name__)


class ValidationError(Exception):
    """A field failed validation."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Validation error on field {field}: {reason}")
        self.field = field
        self.reason = reason


class AgeProcessingError(Exception):
    """Processing an age failed because it did not validate."""

    def __init__(self, validation_error: ValidationError) -> None:
        super().__init__(f"age validation failed: {validation_error}")
        self.validation_error = validation_error


class _Panic(Exception):
    """An unrecoverable condition inside an operation."""


def divide(a: float, b: float) -> float:
    """Divide a by b, raising ZeroDivisionError when b is zero."""
    if b == 0:
        raise ZeroDivisionError("division by zero is not allowed")
    return a / b


def validate_age(age: int) -> None:
    """Raise ValidationError when the age is negative or above 150."""
    if age < 0:
        raise ValidationError("age", "age cannot be negative")
    if age > 150:
        raise ValidationError("age", "age seems unrealistic")


def process_age(age: int) -> None:
    """Validate the age, wrapping any failure in AgeProcessingError."""
    try:
        validate_age(age)
    except ValidationError as exc:
        raise AgeProcessingError(exc) from exc


def _risky(value: int) -> None:
    if value < 0:
        raise _Panic("negative value not allowed")


def perform_dangerous_operation(value: int) -> None:
    """Run the risky step and turn a panic into a RuntimeError."""
    try:
        _risky(value)
    except _Panic as exc:
        raise RuntimeError(f"recovered from panic: {exc}") from exc


def write_to_file(filename: str, content: str) -> None:
    """Write content to filename, raising OSError with context on failure."""
    try:
        handle = open(filename, "w", encoding="utf-8")
    except OSError as exc:
        raise OSError(f"failed to create file: {exc}") from exc
    with handle:
        try:
            handle.write(content)
        except OSError as exc:
            raise OSError(f"failed to write to file: {exc}") from exc


def main(argv: list[str] | None = None) -> int:
    """Run the error-handling walkthrough."""
    logging.basicConfig(format="%(asctime)s %(message)s", datefmt="%Y/%m/%d %H:%M:%S")

    try:
        result = divide(10, 0)
    except ZeroDivisionError as exc:
        _log.warning("Division error: %s", exc)
    else:
        print(f"Result: {result:.2f}")

    for age in (25, -5, 200):
        try:
            process_age(age)
        except AgeProcessingError as exc:
            if isinstance(exc.__cause__, ValidationError):
                _log.warning("Validation error: %s", exc.__cause__)
            else:
                _log.warning("Other error: %s", exc)
        else:
            print(f"Age {age} is valid")

    try:
        perform_dangerous_operation(-1)
    except RuntimeError as exc:
        _log.warning("Recovered error: %s", exc)

    try:
        write_to_file("test.txt", "Hello, Go!")
    except OSError as exc:
        _log.warning("File operation error: %s", exc)

    try:
        process_age(-5)
    except AgeProcessingError as exc:
        cause = exc.__cause__
        if isinstance(cause, ValidationError):
            print(f"Original error: {cause}")
        if isinstance(cause, FileNotFoundError):
            print("File does not exist")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())