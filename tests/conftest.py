"""
Shared fixtures for the schedule service tests.

The store is in-memory SQLite, the cache runs on a small Redis double with a
controllable clock, and the notification queue is an AsyncMock pool.
"""

import fnmatch
import os
import uuid
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

# Set early so the import-time engine never touches a real database
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("REDIS_URL", None)
os.environ.pop("SMTP_HOST", None)

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from schedule_service import models  # noqa: F401
from schedule_service.cache import Cache
from schedule_service.database import Base
from schedule_service.domain.notifications.dispatcher import NotificationDispatcher
from schedule_service.models import Customer, Doctor, utcnow


class FakeClock:
    """Monotonic seconds that only move when a test says so"""

    def __init__(self, start: float = 1_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeRedis:
    """The slice of redis.Redis the cache uses: get, setex, keys, delete"""

    def __init__(self, clock: FakeClock):
        self.clock = clock
        self.store: dict[str, tuple[str, float]] = {}

    def _live(self, key):
        entry = self.store.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at <= self.clock():
            del self.store[key]
            return None
        return value

    def get(self, key):
        return self._live(key)

    def setex(self, key, ttl, value):
        self.store[key] = (value, self.clock() + ttl)
        return True

    def keys(self, pattern):
        return [
            key
            for key in list(self.store)
            if self._live(key) is not None and fnmatch.fnmatchcase(key, pattern)
        ]

    def delete(self, *keys):
        deleted = 0
        for key in keys:
            if self.store.pop(key, None) is not None:
                deleted += 1
        return deleted


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_redis(clock):
    return FakeRedis(clock)


@pytest.fixture
def cache(fake_redis):
    return Cache(client=fake_redis)


@pytest.fixture
def queue_pool():
    pool = AsyncMock()
    pool.enqueue_job.return_value = MagicMock(job_id="job-1")
    return pool


@pytest.fixture
def dispatcher(queue_pool):
    return NotificationDispatcher(pool=queue_pool)


@pytest.fixture
def make_customer(db):
    def _make(name="Ana Souza", email=None, created_at=None):
        customer = Customer(
            name=name,
            email=email or f"{uuid.uuid4().hex[:8]}@example.com",
            phone="+55 11 99999-0000",
        )
        if created_at is not None:
            customer.created_at = created_at
        db.add(customer)
        db.commit()
        db.refresh(customer)
        return customer

    return _make


@pytest.fixture
def make_doctor(db):
    def _make(name="Dr. Carlos Lima", specialization="cardiology", created_at=None):
        doctor = Doctor(name=name, specialization=specialization)
        if created_at is not None:
            doctor.created_at = created_at
        db.add(doctor)
        db.commit()
        db.refresh(doctor)
        return doctor

    return _make


@pytest.fixture
def tomorrow():
    """A future instant with whole seconds, stable under storage round-trips"""
    return (utcnow() + timedelta(days=1)).replace(microsecond=0)
