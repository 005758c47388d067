"""Age calculation — whole years from date of birth to an explicit reference date.

Invariants:
    - Birthday today counts as already occurred
    - One day before the birthday yields one year less
    - Leap-day birthdays compare by (month, day) with no special casing
    - Result depends only on the two arguments (no clock)
"""

from datetime import date, timedelta

import pytest

from user_api.core.age import compute_age

REFERENCE = date(2024, 12, 18)


def test_birthday_already_passed_this_year():
    assert compute_age(date(1990, 1, 15), REFERENCE) == 34


def test_birthday_later_this_month_not_yet_occurred():
    assert compute_age(date(1990, 12, 25), REFERENCE) == 33


def test_birthday_is_today():
    assert compute_age(date(1990, 12, 18), REFERENCE) == 34


def test_birthday_in_later_month_not_yet_occurred():
    assert compute_age(date(1990, 6, 1), date(2024, 5, 31)) == 33


@pytest.mark.parametrize("dob,birthday", [
    (date(1994, 12, 18), date(2024, 12, 18)),
    (date(1993, 3, 1), date(2023, 3, 1)),
    (date(1968, 2, 29), date(2000, 2, 29)),
    (date(1991, 7, 31), date(2021, 7, 31)),
])
def test_birthday_boundaries(dob, birthday):
    years = birthday.year - dob.year
    assert compute_age(dob, birthday) == years
    assert compute_age(dob, birthday - timedelta(days=1)) == years - 1
    assert compute_age(dob, birthday + timedelta(days=1)) == years


def test_day_before_birthday_is_one_year_less():
    assert compute_age(date(1994, 6, 15), date(2024, 6, 14)) == 29


def test_day_after_birthday_keeps_new_age():
    assert compute_age(date(1994, 6, 15), date(2024, 6, 16)) == 30


def test_leap_day_birthday_on_feb_28_of_common_year_not_yet_occurred():
    assert compute_age(date(2000, 2, 29), date(2023, 2, 28)) == 22


def test_leap_day_birthday_on_mar_1_of_common_year_has_occurred():
    assert compute_age(date(2000, 2, 29), date(2023, 3, 1)) == 23


def test_leap_day_birthday_on_leap_day():
    assert compute_age(date(2000, 2, 29), date(2024, 2, 29)) == 24


def test_born_today_is_zero():
    assert compute_age(REFERENCE, REFERENCE) == 0


def test_new_year_boundary():
    assert compute_age(date(1999, 12, 31), date(2000, 1, 1)) == 0
    assert compute_age(date(1999, 1, 1), date(1999, 12, 31)) == 0


def test_future_dob_is_not_clamped():
    assert compute_age(date(2025, 12, 18), REFERENCE) == -1
    assert compute_age(date(2024, 12, 19), REFERENCE) == -1


def test_deterministic_for_same_inputs():
    results = {compute_age(date(1985, 12, 25), REFERENCE) for _ in range(50)}
    assert results == {38}


def test_non_negative_for_past_dates():
    dob = date(1960, 7, 4)
    ref = dob
    while ref <= date(1964, 7, 4):
        assert compute_age(dob, ref) >= 0
        ref += timedelta(days=17)
