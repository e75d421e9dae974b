"""
In-memory TransactionStore.

Accounts map to insertion-ordered dicts of record_id -> TransactionRecord,
mirroring the shops/<account>/transactions/<record> layout of a hierarchical store.
"""
from typing import Optional, Sequence
from uuid import uuid4

from domain.entities import TransactionRecord, TransactionKey
from domain.exceptions import StoreError
from domain.interfaces import TransactionStore


class InMemoryTransactionStore(TransactionStore):

    def __init__(self):
        self._accounts: dict[str, dict[str, TransactionRecord]] = {}
        self.delete_calls = 0
        # Failure switches for exercising error paths
        self.fail_list_accounts = False
        self.fail_accounts: set[str] = set()
        self.fail_writes = False

    def seed(self, account_id: str, record: TransactionRecord, record_id: Optional[str] = None) -> str:
        """Insert a record as-is (no validation), e.g. one with a malformed timestamp."""
        record_id = record_id or str(uuid4())
        self._accounts.setdefault(account_id, {})[record_id] = record
        return record_id

    def get(self, account_id: str, record_id: str) -> Optional[TransactionRecord]:
        return self._accounts.get(account_id, {}).get(record_id)

    def records(self, account_id: str) -> list[TransactionRecord]:
        return list(self._accounts.get(account_id, {}).values())

    def count(self) -> int:
        return sum(len(records) for records in self._accounts.values())

    async def append_transaction(self, account_id: str, record: TransactionRecord) -> str:
        if self.fail_writes:
            raise StoreError(f"Could not store transaction for account {account_id}")
        return self.seed(account_id, record)

    async def list_accounts(self) -> list[str]:
        if self.fail_list_accounts:
            raise StoreError("Could not list accounts")
        return list(self._accounts.keys())

    async def list_transactions(self, account_id: str) -> list[tuple[str, TransactionRecord]]:
        if account_id in self.fail_accounts:
            raise StoreError(f"Could not list transactions for account {account_id}")
        return list(self._accounts.get(account_id, {}).items())

    async def delete_transactions(self, keys: Sequence[TransactionKey]) -> None:
        if self.fail_writes:
            raise StoreError(f"Could not delete {len(keys)} transactions")
        self.delete_calls += 1
        for account_id, record_id in keys:
            records = self._accounts.get(account_id)
            if records is None:
                continue
            records.pop(record_id, None)
            if not records:
                del self._accounts[account_id]
