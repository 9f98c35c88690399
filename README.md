# codeprimer

A set of short, runnable lessons covering the core ideas every programmer
meets early on. Each lesson is a module you can import and call, and most
also have a command that prints a walkthrough.

| Module | Topic |
| --- | --- |
| `codeprimer.basics` | values, types, formatting and arithmetic |
| `codeprimer.control_flow` | branching, loops and multi-way choices |
| `codeprimer.functions` | parameters, multiple results, variadic calls, closures |
| `codeprimer.shapes` | abstract interfaces, data classes, nesting and composition |
| `codeprimer.concurrency` | threads, queues as channels, locks and waiting |
| `codeprimer.error_handling` | custom exceptions, chaining, recovery, files |
| `codeprimer.calculator` | a small class built to be tested |

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running the lessons

Each command prints the lesson's walkthrough to standard output:

```
codeprimer-basics
codeprimer-control-flow
codeprimer-functions
codeprimer-shapes
codeprimer-concurrency
codeprimer-errors
```

`codeprimer-concurrency` sleeps between steps to make interleaving visible,
so it takes a few seconds. `codeprimer-errors` reports its handled errors
as log warnings on standard error, and writes a small `test.txt` into the
current directory as part of its file-handling example.

The calculator has no command of its own; it is meant to be imported.

## Using the modules

### Basics

```python
from codeprimer.basics import arithmetic, greeting_report, data_type_report

arithmetic(10, 5)              # Arithmetic(sum=15, difference=5, product=50, quotient=2)
arithmetic(-7, 2).quotient     # -3 (division truncates toward zero)
greeting_report("Gopher", 25)  # "Hello, Gopher! You are 25 years old."
data_type_report()             # list of report lines, e.g. "Integer: 42"
```

`arithmetic` raises `ZeroDivisionError` when the divisor is zero.

### Control flow

```python
from codeprimer.control_flow import age_category, grade_letter, day_message, evaluate_score

age_category(18)        # "You are an adult"
grade_letter(85)        # "B"
day_message("Sunday")   # "Weekend!"
day_message("Tuesday")  # "Midweek"
evaluate_score(85)      # "Good"
```

### Functions

```python
from codeprimer.functions import divide, greet, get_min_max, sum_numbers, process_string, make_counter

greet("Gopher")                          # "Hello, Gopher!"
divide(10, 2)                            # 5.0; divide(1, 0) raises ZeroDivisionError
get_min_max([3, 1, 4, 1, 5, 9, 2, 6])    # (1, 9)
get_min_max([])                          # (0, 0)
sum_numbers(1, 2, 3, 4, 5)               # 15
process_string("hello", str.upper)       # "HELLO"

counter = make_counter()
counter(), counter(), counter()          # (1, 2, 3)
```

### Shapes and people

```python
from codeprimer.shapes import Rectangle, Circle, Employee, new_person

for shape in (Rectangle(5, 3), Circle(2)):
    print(f"{shape.area():.2f} {shape.perimeter():.2f}")

jane = new_person("Jane", "Smith", 25)
jane.full_name()                         # "Jane Smith"

employee = Employee(person=jane, job_title="Software Engineer", salary=75000)
employee.full_name()                     # "Jane Smith"
```

`Rectangle` and `Circle` are immutable and both implement the abstract
`Shape`. A `Person` carries an `Address`, empty unless one is given.

### Concurrency

```python
import queue
import threading

from codeprimer.concurrency import Counter, generate_numbers, squares

counter = Counter()
counter.increment()
counter.value()                          # 1

numbers, squared = queue.Queue(), queue.Queue()
threading.Thread(target=generate_numbers, args=(numbers, 0)).start()
threading.Thread(target=squares, args=(numbers, squared)).start()
list(iter(squared.get, None))            # [1, 4, 9, 16, 25]
```

`Counter` is safe to increment from many threads at once. The queues play
the part of channels: putting `None` on one closes it. `worker(worker_id,
delay)` prints a start and a finish line around a sleep.

### Errors

```python
from codeprimer.error_handling import AgeProcessingError, ValidationError, process_age

try:
    process_age(-5)
except AgeProcessingError as err:
    print(err)             # age validation failed: Validation error on field age: age cannot be negative
    print(err.__cause__)   # Validation error on field age: age cannot be negative
```

`validate_age` raises `ValidationError` (with `field` and `reason`) for ages
below 0 or above 150; `process_age` wraps it in an `AgeProcessingError`,
which also keeps it as `validation_error`. `divide` raises
`ZeroDivisionError` for a zero divisor, `perform_dangerous_operation`
raises `RuntimeError` for a negative value, and `write_to_file` raises
`OSError` with context when the file cannot be created or written.

### Calculator

```python
from codeprimer.calculator import Calculator, DivideByZeroError

calc = Calculator()
calc.add(2, 3)        # 5
calc.divide(6, 2)     # 3.0

try:
    calc.divide(6, 0)
except DivideByZeroError:
    print("division by zero")

calc.store(42)
calc.memory()         # 42
calc.clear()
calc.memory()         # 0.0
```

`DivideByZeroError` is a subclass of `ZeroDivisionError`.