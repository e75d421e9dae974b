from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .transaction import TransactionType


@dataclass(frozen=True)
class ClassificationResult:
    is_bank_message: bool
    type: 'TransactionType'
    amount: str

    def to_payload(self) -> dict:
        return {
            "isBankMessage": self.is_bank_message,
            "type": self.type.value,
            "amount": self.amount,
        }
