"""A simple calculator with a single memory slot."""

from __future__ import annotations


class DivideByZeroError(ZeroDivisionError):
    """Raised when attempting to divide by zero."""

    def __init__(self, message: str = "division by zero") -> None:
        super().__init__(message)


class Calculator:
    """Basic arithmetic plus a memory that can be stored and cleared."""

    def __init__(self) -> None:
        self._memory = 0.0

    def add(self, a: float, b: float) -> float:
        return a + b

    def subtract(self, a: float, b: float) -> float:
        return a - b

    def multiply(self, a: float, b: float) -> float:
        return a * b

    def divide(self, a: float, b: float) -> float:
        """Divide a by b, raising DivideByZeroError when b is zero."""
        if b == 0:
            raise DivideByZeroError()
        return a / b

    def memory(self) -> float:
        """Return the value currently in memory."""
        return self._memory

    def store(self, value: float) -> None:
        self._memory = value

    def clear(self) -> None:
        self._memory = 0.0