# import
from .classification import ClassificationResult
from .transaction import TransactionType, TransactionRecord, TransactionKey, StoredTransaction
from .sweep import SweepResult

__all__ = ["ClassificationResult", "TransactionType", "TransactionRecord", "TransactionKey", "StoredTransaction", "SweepResult"]
