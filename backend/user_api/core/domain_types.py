"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the integer primary key — never pass bare ints through services

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Constants ───────────────────────────────────────────────────

DOB_FORMAT = "%Y-%m-%d"
NAME_MAX_LENGTH = 255
