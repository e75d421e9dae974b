from typing_extensions import Protocol
from typing import Optional
from decimal import Decimal


class MetricsPort(Protocol):
    """Protocol for metrics operations."""
    
    def increment_ingest_total(self, outcome: str) -> None:
        """
        Increment the sms_ingest_total counter.
        
        Args:
            outcome: One of "accepted", "ignored", or "error"
        """
        ...
    
    def increment_transaction_type(self, transaction_type: str) -> None:
        """
        Increment the sms_transaction_type_total counter.
        
        Args:
            transaction_type: "CREDIT" or "DEBIT"
        """
        ...

    def observe_amount(self, amount: Optional[Decimal]) -> None:
        """
        Observe a parsed transaction amount. None is ignored.
        """
        ...

    def record_sweep(self, outcome: str, deleted: int = 0, skipped: int = 0) -> None:
        """
        Record one retention sweep run.
        
        Args:
            outcome: "success" or "error"
            deleted: Number of records deleted
            skipped: Number of records skipped because of unusable timestamps
        """
        ...
