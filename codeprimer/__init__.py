"""Runnable lessons on types, control flow, functions, data, concurrency, errors and a calculator."""

__version__ = "0.1.0"

__all__ = [
    "basics",
    "calculator",
    "concurrency",
    "control_flow",
    "error_handling",
    "functions",
    "shapes",
]