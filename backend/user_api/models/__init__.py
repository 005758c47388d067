"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Age is never a column: it is derived from dob at read time

Design Decisions:
    - All models imported here so Base.metadata is populated for create_all/alembic
"""

from user_api.models.user import User  # noqa: F401
