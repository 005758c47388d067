"""Database session manager — error classification and lifecycle."""

from sqlalchemy.exc import (
    IntegrityError, InvalidRequestError, OperationalError, ProgrammingError,
)

import user_api.infrastructure.database as db_module
from user_api.infrastructure.database import describe_db_error


def _orig() -> Exception:
    return Exception("driver detail")


def test_integrity_error_description():
    err = IntegrityError("INSERT", {}, _orig())
    assert describe_db_error(err) == "Integrity constraint violated"


def test_operational_error_description():
    err = OperationalError("SELECT", {}, _orig())
    assert describe_db_error(err) == "Connection or operational error"


def test_other_driver_error_description():
    err = ProgrammingError("SELECT", {}, _orig())
    assert describe_db_error(err) == "Database driver error"


def test_non_driver_error_description():
    assert describe_db_error(InvalidRequestError("bad")) == "Database operation failed"


async def test_init_and_close_db(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    db_module.init_db("sqlite+aiosqlite:///:memory:", pool_size=5, max_overflow=1)
    assert await db_module.db_manager.health_check() is True
    await db_module.close_db()
    assert db_module.db_manager is None
