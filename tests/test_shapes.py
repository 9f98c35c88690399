import math

import pytest

from codeprimer.shapes import (
    Address,
    Circle,
    Employee,
    Person,
    Rectangle,
    Shape,
    main,
    new_person,
)


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()


def test_square_of_side_four_has_equal_area_and_perimeter():
    square = Rectangle(4, 4)
    assert square.area() == square.perimeter()


def test_rectangle_is_symmetric():
    assert Rectangle(5, 3).area() == Rectangle(3, 5).area()
    assert Rectangle(5, 3).perimeter() == Rectangle(3, 5).perimeter()


def test_degenerate_rectangle_has_no_area():
    assert Rectangle(0, 7).area() == 0


def test_unit_circle_area_is_pi():
    assert Circle(1).area() == pytest.approx(math.pi)


@pytest.mark.parametrize("radius", [0.5, 2, 10])
def test_circle_area_relates_to_perimeter(radius):
    circle = Circle(radius)
    assert circle.area() == pytest.approx(circle.perimeter() * radius / 2)


def test_shapes_share_interface():
    shapes = [Rectangle(5, 3), Circle(2)]
    assert all(isinstance(s, Shape) and s.area() > 0 for s in shapes)


def test_person_full_name():
    person = Person("John", "Doe", 30, Address("123 Main St", "Example City", "Example Country"))
    assert person.full_name() == "John Doe"
    assert person.address.city == "Example City"


def test_new_person_has_empty_address():
    person = new_person("Jane", "Smith", 25)
    assert person.address == Address("", "", "")
    assert person.age == 25


def test_employee_full_name_comes_from_person():
    person = new_person("Jane", "Smith", 25)
    employee = Employee(person=person, job_title="Software Engineer", salary=75000)
    assert employee.full_name() == person.full_name()


def test_main_output(capsys):
    assert main() == 0
    out = capsys.readouterr().out.splitlines()
    assert "Person: John Doe" in out
    assert "Address: 123 Main St, Example City" in out
    assert "Employee: Jane Smith" in out
    assert "Job Title: Software Engineer" in out