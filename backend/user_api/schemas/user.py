"""User Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - name: 1-255 chars after stripping, non-blank
    - dob: strict YYYY-MM-DD calendar date, parsed to datetime.date
    - UserResponse always carries a derived age; dob is echoed as YYYY-MM-DD

Design Decisions:
    - field_validator for side-effect-free transforms (strip, parse) — keeps models pure
    - Future-date check lives in the service: it needs the injected clock
"""

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

from user_api.core.date_of_birth import parse_date_of_birth
from user_api.core.domain_types import NAME_MAX_LENGTH
from user_api.core.errors import DOB_FORMAT_MESSAGE, InvalidDateOfBirthError


class UserWrite(BaseModel):
    """Shared shape of create and update payloads."""
    name: str = Field(min_length=1)
    dob: date

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        if len(v) > NAME_MAX_LENGTH:
            raise ValueError(f"name must be at most {NAME_MAX_LENGTH} characters")
        return v

    @field_validator("dob", mode="before")
    @classmethod
    def parse_dob(cls, v: object) -> date:
        if isinstance(v, date) and not isinstance(v, datetime):
            return v
        try:
            return parse_date_of_birth(v)
        except InvalidDateOfBirthError:
            raise ValueError(DOB_FORMAT_MESSAGE)


class UserCreate(UserWrite):
    """User creation payload."""


class UserUpdate(UserWrite):
    """Full replacement of a user's name and date of birth."""


class UserResponse(BaseModel):
    """User response — stored fields plus age derived at read time."""
    id: int
    name: str
    dob: str
    age: int
