"""
Wiring of stores and services for routes, the scheduler and scripts.
"""
from typing import AsyncIterator
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from application.service.sweep_transactions import SweepTransactionsService
from domain.entities import SweepResult
from domain.interfaces import TransactionStore
from infrastructure.db.database import AsyncSessionLocal, get_db_session
from infrastructure.db.repositories.transaction_store_sqlalchemy import TransactionStoreSqlalchemy
from infrastructure.logging.logging_adapter import LoggingAdapter
from infrastructure.metrics.metrics_adapter import MetricsAdapter


async def get_transaction_store(db: AsyncSession = Depends(get_db_session)) -> AsyncIterator[TransactionStore]:
    """Request-scoped store; override in tests via app.dependency_overrides."""
    yield TransactionStoreSqlalchemy(db)


async def run_scheduled_sweep() -> SweepResult:
    """One sweep against the configured database with a session of its own."""
    async with AsyncSessionLocal() as session:
        srv = SweepTransactionsService(
            store=TransactionStoreSqlalchemy(session),
            metrics_port=MetricsAdapter(),
            logging_port=LoggingAdapter(trigger="schedule"),
        )
        return await srv.execute()
