"""UserService — orchestration around a fake repository and an injected clock.

Invariants:
    - age derived from stored dob and the injected "today"
    - "today" read once per call, shared by every user in a list
    - future dob rejected before the repository is touched
    - missing rows surface as UserNotFoundError
"""

from dataclasses import dataclass
from datetime import date

import pytest

from user_api.core.errors import UserNotFoundError, ValidationError
from user_api.schemas.user import UserCreate, UserUpdate
from user_api.services.user_service import UserService, current_date


@dataclass
class _Row:
    id: int
    name: str
    dob: date


class _FakeRepo:
    def __init__(self):
        self.rows: dict[int, _Row] = {}
        self.calls: list[str] = []
        self._next_id = 1

    async def create(self, name, dob):
        self.calls.append("create")
        row = _Row(self._next_id, name, dob)
        self.rows[row.id] = row
        self._next_id += 1
        return row

    async def get(self, user_id):
        return self.rows.get(user_id)

    async def list_page(self, limit, offset):
        self.calls.append(f"list_page:{limit}:{offset}")
        return sorted(self.rows.values(), key=lambda r: r.id)[offset:offset + limit]

    async def update(self, user_id, name, dob):
        self.calls.append("update")
        row = self.rows.get(user_id)
        if not row:
            return None
        row.name, row.dob = name, dob
        return row

    async def delete(self, user_id):
        return self.rows.pop(user_id, None) is not None

    async def count(self):
        return len(self.rows)


class _CountingClock:
    def __init__(self, today: date):
        self.today = today
        self.calls = 0

    def __call__(self) -> date:
        self.calls += 1
        return self.today


@pytest.fixture
def repo():
    return _FakeRepo()


@pytest.fixture
def clock():
    return _CountingClock(date(2024, 12, 18))


@pytest.fixture
def service(repo, clock):
    return UserService(repo, clock)


async def test_create_returns_age(service):
    resp = await service.create_user(UserCreate(name="Alice", dob="1990-12-25"))
    assert resp.id == 1
    assert resp.dob == "1990-12-25"
    assert resp.age == 33


async def test_create_rejects_future_dob_without_touching_repo(service, repo):
    with pytest.raises(ValidationError) as exc_info:
        await service.create_user(UserCreate(name="Zed", dob="2030-01-01"))
    assert exc_info.value.field == "dob"
    assert repo.calls == []


async def test_age_tracks_the_clock(service, clock):
    created = await service.create_user(UserCreate(name="Alice", dob="1990-12-25"))
    assert created.age == 33

    clock.today = date(2024, 12, 25)
    assert (await service.get_user(created.id)).age == 34


async def test_get_missing_raises(service):
    with pytest.raises(UserNotFoundError) as exc_info:
        await service.get_user(5)
    assert exc_info.value.user_id == 5


async def test_list_reads_clock_once(service, repo, clock):
    for i in range(5):
        await repo.create(f"user{i}", date(1990, 1, 1))
    clock.calls = 0

    users, total = await service.list_users(1, 10)

    assert total == 5
    assert len(users) == 5
    assert clock.calls == 1


async def test_list_normalizes_paging(service, repo):
    await service.list_users(0, 1000)
    assert repo.calls[-1] == "list_page:10:0"

    await service.list_users(3, 20)
    assert repo.calls[-1] == "list_page:20:40"


async def test_update_missing_raises(service):
    with pytest.raises(UserNotFoundError):
        await service.update_user(9, UserUpdate(name="X", dob="1990-01-01"))


async def test_update_rejects_future_dob(service, repo):
    created = await service.create_user(UserCreate(name="Alice", dob="1990-01-01"))
    with pytest.raises(ValidationError):
        await service.update_user(created.id, UserUpdate(name="Alice", dob="2025-01-01"))
    assert repo.rows[created.id].dob == date(1990, 1, 1)


async def test_delete_missing_raises(service):
    with pytest.raises(UserNotFoundError):
        await service.delete_user(1)


async def test_delete_existing(service, repo):
    created = await service.create_user(UserCreate(name="Alice", dob="1990-01-01"))
    await service.delete_user(created.id)
    assert repo.rows == {}


def test_current_date_returns_date_in_zone():
    today = current_date("Pacific/Kiritimati")
    assert isinstance(today, date)


def test_default_clock_is_current_date(repo):
    assert UserService(repo).today is current_date
