"""
Metrics adapter that implements MetricsPort protocol.

This adapter wraps the Prometheus metrics to provide a clean
interface for the application layer.
"""
from decimal import Decimal
from typing import Optional
from infrastructure.metrics.metrics import (
    sms_ingest_total,
    sms_transaction_type_total,
    sms_transaction_amount,
    retention_sweep_runs_total,
    retention_sweep_deleted_total,
    retention_sweep_skipped_total,
)

class MetricsAdapter:
    """Adapter that implements MetricsPort by incrementing Prometheus metrics."""

    def increment_ingest_total(self, outcome: str) -> None:
        """
        Increment the sms_ingest_total counter.
        
        Args:
            outcome: One of "accepted", "ignored", or "error"
        """
        sms_ingest_total.labels(outcome=outcome).inc()

    def increment_transaction_type(self, transaction_type: str) -> None:
        sms_transaction_type_total.labels(type=transaction_type).inc()

    def observe_amount(self, amount: Optional[Decimal]) -> None:
        if amount is not None:
            sms_transaction_amount.observe(float(amount))

    def record_sweep(self, outcome: str, deleted: int = 0, skipped: int = 0) -> None:
        """
        Record one retention sweep run.
        
        Args:
            outcome: "success" or "error"
            deleted: Number of records deleted
            skipped: Number of records skipped
        """
        retention_sweep_runs_total.labels(outcome=outcome).inc()
        if deleted:
            retention_sweep_deleted_total.inc(deleted)
        if skipped:
            retention_sweep_skipped_total.inc(skipped)
