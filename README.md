# tpclases

Four small object-oriented exercises, each usable as a library module and
as a command that runs an interactive exercise or a demonstration.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `tpclases.clock`

`Clock` is a dataclass holding `hours` (0 to 11), `minutes`, `seconds` and a
`period` (`"a.m."` or `"p.m."`). Seconds and minutes beyond 59 carry into the
next unit, both on construction and through `set_seconds` and `set_minutes`.
A negative value, or hours that end up above 11, raise `ValueError`.
`set_hours` and `set_period` replace those parts.

`Clock.render(kind)` returns the time as text for a `DisplayKind`:
`HOURS` (hours with period), `MINUTES`, `SECONDS`, `PERIOD`, `FULL`
(everything together) or `TWENTY_FOUR` (hours on a 24-hour dial). Any other
kind raises `ValueError`. `Clock.show(kind)` prints the same text.

    from tpclases.clock import Clock, DisplayKind

    clock = Clock(11, 4, 59, "a.m.")
    clock.set_seconds(75)
    print(clock.render(DisplayKind.FULL))   # 11h, 05m, 15s a.m.

`prompt_in_range(low, high)` reads integers from standard input until the
user enters one in `[low, high]`, which it returns, or answers `0` to give
up, in which case it returns `None`.

### `tpclases.course`

`Student` holds a `name`, a `file_number` and `grades`, a tuple of
`(subject, grade)` pairs, and computes `average` (NaN when there are no
grades). Students order by name, and `str()` gives a one-line record.

`Course` holds up to 20 students:

- `enroll(student)` adds a student and returns `False` if the course is full;
- `unenroll(student)` removes the first student with the same file number and
  returns whether one was found;
- `contains(file_number)` and `is_full()` answer the obvious questions;
- `sorted_listing()` sorts the roster by name in place and returns it framed
  by separator lines; `print_sorted()` prints that listing;
- `copy()` returns a course with its own roster that shares the same student
  objects.

A course also supports `len()`, iteration and a read-only `students` tuple.

### `tpclases.arithmetic`

`IntegerOperation`, `RealOperation` and `ComplexOperation` share the
`Operation` interface: `add()`, `subtract()` and `multiply()` store the
result of applying the operation to the two operands and return it, and
`str()` renders the last result. Integer operands are truncated toward zero;
real results are shown with six decimals; complex operands are given as
`(real, imaginary)` pairs, anything else raising `ValueError`, and results
are shown as `a+bi`.

    from tpclases.arithmetic import ComplexOperation

    op = ComplexOperation((3, 2), (5, 6))
    op.multiply()
    print(op)   # 3.000000+28.000000i

### `tpclases.bank`

`SavingsAccount` and `CheckingAccount` are `Account`s with a `holder`, a
`balance`, `deposit(amount)`, `withdraw(amount)` and `info()`, which returns
a statement of the account.

- `SavingsAccount.withdraw` raises `InsufficientFundsError` (a `ValueError`)
  if the balance would go negative. Every statement after the second one
  costs 20; if that fee cannot be paid, `info()` raises
  `InsufficientFundsError`.
- `CheckingAccount.withdraw` draws whatever the account lacks from its linked
  savings account, leaves its own balance at zero in that case, and returns
  the amount taken from savings. If the savings account cannot cover it,
  `InsufficientFundsError` is raised.

## Commands

    tpclases-clock        # interactive clock exercise, reading from standard input
    tpclases-course       # course roster demonstration
    tpclases-arithmetic   # arithmetic operations demonstration
    tpclases-bank         # bank accounts demonstration

Accounts, courses and clocks live only in memory; nothing is saved between
runs.