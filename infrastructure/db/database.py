"""
Async SQLAlchemy engine and sessions for the transaction store.
"""
from typing import AsyncIterator
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
import os

# Models must be registered on Base before create_all runs
from infrastructure.db.models import Base, TransactionModel  # noqa: F401


def build_database_url() -> str:
    """DATABASE_URL if set, otherwise a PostgreSQL (asyncpg) URL from the DB_* variables."""
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    user = os.getenv("DB_USER", "postgres")
    password = os.getenv("DB_PASSWORD", "postgres")
    host = os.getenv("DB_HOST", "localhost")
    port = os.getenv("DB_PORT", "5432")
    name = os.getenv("DB_NAME", "sms_gateway")
    return f"postgresql+asyncpg://{user}:{password}@{host}:{port}/{name}"


DATABASE_URL = build_database_url()

engine = create_async_engine(DATABASE_URL, echo=os.getenv("DB_ECHO", "") == "1")

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def init_db(bind: AsyncEngine = engine) -> None:
    """Create the sms_transaction table if it does not exist yet."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency yielding one session per request."""
    async with AsyncSessionLocal() as session:
        yield session
