"""Age Calculation — whole years elapsed between a date of birth and a reference date.

Invariants:
    - Pure: no IO, no state, no clock reads — reference date is always an argument
    - Birthday counts as occurred on the day itself
    - Comparison is on (month, day) ordinals, never on elapsed days
    - Feb 29 birthdays get no special casing (Feb 28 of a non-leap year is "before")

Design Decisions:
    - dob after reference_date is not rejected here: the formula yields <= 0.
      Future dates are rejected before writes by UserService, which owns the clock
"""

from datetime import date


def compute_age(date_of_birth: date, reference_date: date) -> int:
    """Return the number of completed years from date_of_birth to reference_date."""
    years = reference_date.year - date_of_birth.year
    if (reference_date.month, reference_date.day) < (
        date_of_birth.month, date_of_birth.day,
    ):
        years -= 1
    return years
