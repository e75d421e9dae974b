from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from domain.entities import TransactionRecord
from infrastructure.db.database import init_db
from infrastructure.memory import InMemoryTransactionStore


NOW = datetime(2024, 1, 2, 0, 0, 0, tzinfo=timezone.utc)


def make_record(timestamp, amount: str = "500", type: str = "DEBIT", text: str = "A/C Debited LKR 500") -> TransactionRecord:
    """Build a stored record; timestamp may be a datetime or any raw value."""
    if isinstance(timestamp, datetime):
        timestamp = timestamp.isoformat()
    return TransactionRecord(amount=amount, type=type, original_text=text, timestamp=timestamp)


def hours_ago(hours: float, now: datetime = NOW) -> datetime:
    return now - timedelta(hours=hours)


@pytest.fixture
def memory_store():
    return InMemoryTransactionStore()


@pytest_asyncio.fixture
async def sqlite_session():
    """AsyncSession bound to a fresh in-memory SQLite database."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await init_db(engine)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()
