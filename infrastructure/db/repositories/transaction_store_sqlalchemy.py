from collections import defaultdict
from typing import Sequence
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, and_, or_
from sqlalchemy.exc import SQLAlchemyError
from domain.entities import TransactionRecord, TransactionKey
from domain.exceptions import StoreError
from domain.interfaces import TransactionStore
from infrastructure.db.models import TransactionModel


class TransactionStoreSqlalchemy(TransactionStore):
    """SQLAlchemy implementation of TransactionStore."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def append_transaction(self, account_id: str, record: TransactionRecord) -> str:
        """Insert a record under the account and return its generated id."""
        transaction_model = TransactionModel.from_domain(account_id, record)
        try:
            self.db.add(transaction_model)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StoreError(f"Could not store transaction for account {account_id}: {e}") from e
        return transaction_model.id

    async def list_accounts(self) -> list[str]:
        """Distinct account ids that own at least one transaction."""
        stmt = select(TransactionModel.account_id).distinct().order_by(TransactionModel.account_id)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreError(f"Could not list accounts: {e}") from e
        return list(result.scalars().all())

    async def list_transactions(self, account_id: str) -> list[tuple[str, TransactionRecord]]:
        """Transactions of an account in arrival order."""
        stmt = (
            select(TransactionModel)
            .where(TransactionModel.account_id == account_id)
            .order_by(TransactionModel.seq)
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreError(f"Could not list transactions for account {account_id}: {e}") from e
        return [(tm.id, tm.to_domain()) for tm in result.scalars().all()]

    async def delete_transactions(self, keys: Sequence[TransactionKey]) -> None:
        """
        Delete all given records in one statement and one commit.
        Keys that no longer exist are ignored.
        """
        if not keys:
            return
        by_account: dict[str, list[str]] = defaultdict(list)
        for account_id, record_id in keys:
            by_account[account_id].append(record_id)

        stmt = delete(TransactionModel).where(
            or_(*[
                and_(TransactionModel.account_id == account_id, TransactionModel.id.in_(record_ids))
                for account_id, record_ids in by_account.items()
            ])
        )
        try:
            await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StoreError(f"Could not delete {len(keys)} transactions: {e}") from e
