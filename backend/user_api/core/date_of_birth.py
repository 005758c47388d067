"""Date of Birth Parsing — strict YYYY-MM-DD parsing and formatting.

Invariants:
    - Only zero-padded YYYY-MM-DD strings are accepted (no times, no offsets)
    - Impossible calendar dates (2023-02-29, 2024-13-01) are rejected
    - Every rejection raises InvalidDateOfBirthError with the same fixed message

Design Decisions:
    - Regex shape check before strptime: strptime alone accepts "2024-1-5"
"""

import re
from datetime import date, datetime

from user_api.core.domain_types import DOB_FORMAT
from user_api.core.errors import InvalidDateOfBirthError

_DOB_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_date_of_birth(raw: str) -> date:
    """Parse a YYYY-MM-DD string into a date or raise InvalidDateOfBirthError."""
    if not isinstance(raw, str) or not _DOB_PATTERN.fullmatch(raw):
        raise InvalidDateOfBirthError()
    try:
        return datetime.strptime(raw, DOB_FORMAT).date()
    except ValueError:
        raise InvalidDateOfBirthError()


def format_date_of_birth(dob: date) -> str:
    return dob.isoformat()


def is_future_date_of_birth(dob: date, reference_date: date) -> bool:
    return dob > reference_date
