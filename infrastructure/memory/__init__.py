from .transaction_store_memory import InMemoryTransactionStore

__all__ = ["InMemoryTransactionStore"]
