"""Shapes behind a common interface, and nested and composed records."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Shape(ABC):
    """Anything with an area and a perimeter."""

    @abstractmethod
    def area(self) -> float:
        """Return the enclosed area."""

    @abstractmethod
    def perimeter(self) -> float:
        """Return the length of the boundary."""


@dataclass(frozen=True)
class Rectangle(Shape):
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)


@dataclass(frozen=True)
class Circle(Shape):
    radius: float

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius


@dataclass
class Address:
    street: str = ""
    city: str = ""
    country: str = ""


@dataclass
class Person:
    first_name: str
    last_name: str
    age: int
    address: Address = field(default_factory=Address)

    def full_name(self) -> str:
        """Return the first and last name joined by a space."""
        return f"{self.first_name} {self.last_name}"


def new_person(first_name: str, last_name: str, age: int) -> Person:
    """Create a person with an empty address."""
    return Person(first_name=first_name, last_name=last_name, age=age)


@dataclass
class Employee:
    person: Person
    job_title: str
    salary: float

    def full_name(self) -> str:
        """Return the full name of the employed person."""
        return self.person.full_name()


def main(argv: list[str] | None = None) -> int:
    """Print the shapes and records walkthrough."""
    shapes: list[Shape] = [Rectangle(width=5, height=3), Circle(radius=2)]
    for shape in shapes:
        print(f"Area: {shape.area():.2f}, Perimeter: {shape.perimeter():.2f}")

    person = Person(
        first_name="John",
        last_name="Doe",
        age=30,
        address=Address(
            street="123 Main St",
            city="Example City",
            country="Example Country",
        ),
    )
    print(f"\nPerson: {person.full_name()}")
    print(f"Address: {person.address.street}, {person.address.city}")

    jane = new_person("Jane", "Smith", 25)
    print(f"New Person: {jane.full_name()}")

    employee = Employee(person=jane, job_title="Software Engineer", salary=75000)
    print(f"\nEmployee: {employee.full_name()}")
    print(f"Job Title: {employee.job_title}")
    print(f"Salary: ${employee.salary:.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())