from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import NamedTuple, Optional

from .classification import ClassificationResult


class TransactionType(str, Enum):
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"
    UNKNOWN = "UNKNOWN"


@dataclass
class TransactionRecord:
    amount: str
    type: str
    original_text: str
    timestamp: Optional[str]
    read: bool = False

    @staticmethod
    def create(classification: ClassificationResult, original_text: str, now: Optional[datetime] = None) -> 'TransactionRecord':
        now = now or datetime.now(timezone.utc)
        return TransactionRecord(
            amount=classification.amount,
            type=classification.type.value,
            original_text=original_text,
            timestamp=now.isoformat(),
            read=False,
        )

    def to_payload(self) -> dict:
        return {
            "amount": self.amount,
            "type": self.type,
            "originalText": self.original_text,
            "timestamp": self.timestamp,
            "read": self.read,
        }


class TransactionKey(NamedTuple):
    account_id: str
    record_id: str


class StoredTransaction(NamedTuple):
    account_id: str
    record_id: str
    record: TransactionRecord

    @property
    def key(self) -> TransactionKey:
        return TransactionKey(self.account_id, self.record_id)
