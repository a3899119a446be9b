"""Test configuration and fixtures"""

from datetime import datetime, timedelta
from typing import Iterable, List, Optional

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from frontdesk.database import init_db
from frontdesk.errors import TransportFailure
from frontdesk.main import app
from frontdesk.services import Frontdesk
from frontdesk.storage import BaseRecordStore, SQLAlchemyRecordStore
from frontdesk.storage.base import Record, RecordResult

# Noon, so that "later today" and "earlier today" both exist
NOW = datetime(2026, 10, 19, 12, 0, 0)


class FixedClock:
    """Controllable replacement for datetime.now"""

    def __init__(self, now: datetime):
        self.current = now

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


class BrokenStore(BaseRecordStore):
    """Delegates to a real store but fails every call on the given collections"""

    def __init__(self, inner: BaseRecordStore, broken: Iterable[str]):
        self.inner = inner
        self.broken = set(broken)

    def _check(self, collection: str) -> None:
        if collection in self.broken:
            raise TransportFailure(f"{collection} backend unavailable")

    async def fetch_all(self, collection: str, fields: Optional[Iterable[str]] = None) -> List[Record]:
        self._check(collection)
        return await self.inner.fetch_all(collection, fields)

    async def fetch_by_id(self, collection: str, record_id: int, fields=None) -> Optional[Record]:
        self._check(collection)
        return await self.inner.fetch_by_id(collection, record_id, fields)

    async def create_records(self, collection: str, records: List[Record]) -> List[RecordResult]:
        self._check(collection)
        return await self.inner.create_records(collection, records)

    async def update_records(self, collection: str, records: List[Record]) -> List[RecordResult]:
        self._check(collection)
        return await self.inner.update_records(collection, records)

    async def delete_records(self, collection: str, ids: List[int]) -> List[RecordResult]:
        self._check(collection)
        return await self.inner.delete_records(collection, ids)


@pytest.fixture
async def test_engine(tmp_path):
    """File-backed SQLite so that concurrent sessions see the same data"""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'frontdesk.db'}", echo=False)
    await init_db(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def store(session_factory):
    return SQLAlchemyRecordStore(session_factory)


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest.fixture
def frontdesk(store, clock):
    return Frontdesk(store, clock=clock)


@pytest.fixture
async def test_menu_items(frontdesk):
    """Create test menu items"""
    items = [
        {"name": "Margherita", "description": "Tomato, mozzarella and basil", "price": "9.50", "category": "Pizza"},
        {"name": "Pepperoni Pizza", "description": "Pepperoni with mozzarella", "price": "11.00", "category": "Pizza"},
        {"name": "Caesar Salad", "description": "Romaine with caesar dressing", "price": "7.25", "category": "Salads"},
    ]
    return [await frontdesk.menu.create(item) for item in items]


@pytest.fixture
async def client(frontdesk):
    """Test client wired to the test managers"""
    app.state.frontdesk = frontdesk

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.state.frontdesk = None
