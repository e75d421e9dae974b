import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from domain.entities import ClassificationResult, TransactionRecord
from domain.interfaces import TransactionStore, MetricsPort, LoggingPort, NoOpLogger
from domain.services import classify, parse_amount


@dataclass
class IngestResult:
    classification: ClassificationResult
    stored: bool
    record_id: Optional[str] = None
    record: Optional[TransactionRecord] = None


class IngestSmsService:
    def __init__(
        self,
        store: TransactionStore,
        metrics_port: Optional[MetricsPort] = None,
        logging_port: Optional[LoggingPort] = None
    ):
        """
        Initialize the SMS ingestion service.
        
        Args:
            store: Transaction store that receives accepted records (required)
            metrics_port: Metrics port for emitting metrics (optional)
            logging_port: Logging port for structured logging (optional)
        """
        self.store = store
        self.metrics_port = metrics_port
        self.logging_port = logging_port

    async def execute(self, account_id: str, sms_text: str, now: Optional[datetime] = None) -> IngestResult:
        """
        Classify an SMS and persist it under the account when it is a bank transaction.

        Args:
            account_id: Account (shop/user) the SMS belongs to
            sms_text: Raw SMS body
            now: Creation instant stamped on the record (defaults to current UTC time)

        Raises:
            StoreError: If the store rejects the write. Nothing is retried.
        """
        start_time = time.time()
        log = self.logging_port.bind(account_id=account_id, step="sms_ingest") if self.logging_port else NoOpLogger()

        classification = classify(sms_text)

        if not classification.is_bank_message:
            log.info(
                "sms_ignored",
                transaction_type=classification.type.value,
                amount=classification.amount
            )
            if self.metrics_port:
                self.metrics_port.increment_ingest_total(outcome="ignored")
            return IngestResult(classification=classification, stored=False)

        record = TransactionRecord.create(
            classification,
            original_text=sms_text,
            now=now if now is not None else datetime.now(timezone.utc)
        )

        try:
            record_id = await self.store.append_transaction(account_id, record)
        except Exception as e:
            log.error(
                "sms_persist_failed",
                step="db_persist",
                duration_ms=round((time.time() - start_time) * 1000, 2),
                error=str(e),
                exc_info=True
            )
            if self.metrics_port:
                self.metrics_port.increment_ingest_total(outcome="error")
            raise

        if self.metrics_port:
            self.metrics_port.increment_ingest_total(outcome="accepted")
            self.metrics_port.increment_transaction_type(transaction_type=classification.type.value)
            self.metrics_port.observe_amount(parse_amount(classification.amount))

        log.info(
            "sms_transaction_stored",
            step="db_persist",
            record_id=record_id,
            transaction_type=classification.type.value,
            amount=classification.amount,
            duration_ms=round((time.time() - start_time) * 1000, 2)
        )
        return IngestResult(classification=classification, stored=True, record_id=record_id, record=record)
