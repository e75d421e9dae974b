import time
from datetime import datetime, timedelta, timezone
from typing import AsyncIterator, Optional
from domain.config import get_retention_config
from domain.entities import StoredTransaction, SweepResult
from domain.exceptions import StoreEnumerationError
from domain.interfaces import TransactionStore, MetricsPort, LoggingPort, BoundLogger, NoOpLogger
from domain.services import compute_cutoff, is_expired


class SweepTransactionsService:
    def __init__(
        self,
        store: TransactionStore,
        metrics_port: Optional[MetricsPort] = None,
        logging_port: Optional[LoggingPort] = None
    ):
        """
        Initialize the retention sweep service.
        
        Args:
            store: Transaction store to scan and prune (required)
            metrics_port: Metrics port for emitting metrics (optional)
            logging_port: Logging port for structured logging (optional)
        """
        self.store = store
        self.metrics_port = metrics_port
        self.logging_port = logging_port

    async def iter_transactions(self, log: BoundLogger) -> AsyncIterator[StoredTransaction]:
        """
        Yield every stored transaction across all accounts.

        An account whose transactions cannot be listed is logged and skipped.

        Raises:
            StoreEnumerationError: If the accounts themselves cannot be listed
        """
        try:
            account_ids = await self.store.list_accounts()
        except Exception as e:
            raise StoreEnumerationError(f"Could not list accounts: {e}") from e

        for account_id in account_ids:
            try:
                transactions = await self.store.list_transactions(account_id)
            except Exception as e:
                log.warning("account_scan_failed", account_id=account_id, error=str(e))
                continue
            for record_id, record in transactions:
                yield StoredTransaction(account_id, record_id, record)

    async def execute(self, now: Optional[datetime] = None, retention_window: Optional[timedelta] = None) -> SweepResult:
        """
        Delete every stored transaction older than the retention window.

        Expired keys are collected over a full scan and removed with a single
        batched delete. Records with a missing or malformed timestamp are kept.

        Args:
            now: Reference instant (defaults to current UTC time)
            retention_window: Age limit (defaults to RETENTION_HOURS)

        Raises:
            StoreEnumerationError: If the sweep cannot start
            StoreError: If the batched delete fails
        """
        start_time = time.time()
        if now is None:
            now = datetime.now(timezone.utc)
        if retention_window is None:
            retention_window = get_retention_config().retention_window
        cutoff = compute_cutoff(now, retention_window)

        log = self.logging_port.bind(step="retention_sweep") if self.logging_port else NoOpLogger()
        log.info("sweep_started", cutoff=cutoff.isoformat())

        expired_keys = []
        scanned = 0
        skipped = 0
        try:
            async for stored in self.iter_transactions(log):
                scanned += 1
                expired = is_expired(stored.record, cutoff)
                if expired is None:
                    skipped += 1
                    log.warning(
                        "sweep_record_skipped",
                        account_id=stored.account_id,
                        record_id=stored.record_id,
                        reason="invalid_timestamp"
                    )
                elif expired:
                    expired_keys.append(stored.key)

            if expired_keys:
                await self.store.delete_transactions(expired_keys)
                log.info("sweep_deleted", deleted_count=len(expired_keys))
            else:
                log.info("sweep_nothing_to_delete")
        except Exception as e:
            log.error(
                "sweep_failed",
                duration_ms=round((time.time() - start_time) * 1000, 2),
                error=str(e),
                exc_info=True
            )
            if self.metrics_port:
                self.metrics_port.record_sweep(outcome="error")
            raise

        if self.metrics_port:
            self.metrics_port.record_sweep(outcome="success", deleted=len(expired_keys), skipped=skipped)

        log.info(
            "sweep_completed",
            duration_ms=round((time.time() - start_time) * 1000, 2),
            scanned_count=scanned,
            deleted_count=len(expired_keys),
            skipped_count=skipped
        )
        return SweepResult(
            deleted_count=len(expired_keys),
            scanned_count=scanned,
            skipped_count=skipped,
            cutoff=cutoff
        )
