from typing_extensions import Protocol
from typing import Sequence
from domain.entities import TransactionRecord, TransactionKey


class TransactionStore(Protocol):
    """Storage collaborator shared by ingestion and the retention sweep."""

    async def append_transaction(self, account_id: str, record: TransactionRecord) -> str: ...
    async def list_accounts(self) -> list[str]: ...
    async def list_transactions(self, account_id: str) -> list[tuple[str, TransactionRecord]]: ...
    async def delete_transactions(self, keys: Sequence[TransactionKey]) -> None: ...
