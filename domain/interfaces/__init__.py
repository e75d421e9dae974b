from .transaction_store import TransactionStore
from .metrics_port import MetricsPort
from .logging_port import LoggingPort, BoundLogger, NoOpLogger

__all__ = ["TransactionStore", "MetricsPort", "LoggingPort", "BoundLogger", "NoOpLogger"]
