# tests for the domain entities

from datetime import datetime, timezone
from domain.entities import ClassificationResult, TransactionRecord, TransactionType, TransactionKey, StoredTransaction, SweepResult


def test_transaction_record_create():
    classification = ClassificationResult(is_bank_message=True, type=TransactionType.DEBIT, amount="500")
    now = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    record = TransactionRecord.create(classification, original_text="A/C Debited LKR 500", now=now)
    assert record.amount == "500"
    assert record.type == "DEBIT"
    assert record.original_text == "A/C Debited LKR 500"
    assert record.timestamp == "2024-01-01T12:00:00+00:00"
    assert record.read is False

def test_transaction_record_create_defaults_to_now():
    classification = ClassificationResult(is_bank_message=True, type=TransactionType.CREDIT, amount="1")
    record = TransactionRecord.create(classification, original_text="Rs 1 received")
    assert record.timestamp is not None
    assert datetime.fromisoformat(record.timestamp).tzinfo is not None

def test_transaction_record_payload():
    record = TransactionRecord(amount="2,000.00", type="CREDIT", original_text="x", timestamp="2024-01-01T00:00:00Z")
    assert record.to_payload() == {
        "amount": "2,000.00",
        "type": "CREDIT",
        "originalText": "x",
        "timestamp": "2024-01-01T00:00:00Z",
        "read": False,
    }

def test_stored_transaction_key():
    record = TransactionRecord(amount="1", type="CREDIT", original_text="x", timestamp=None)
    stored = StoredTransaction("shop_a", "txn-1", record)
    assert stored.key == TransactionKey("shop_a", "txn-1")

def test_sweep_result_payload():
    result = SweepResult(deleted_count=1, scanned_count=3, skipped_count=1, cutoff=datetime(2024, 1, 1, tzinfo=timezone.utc))
    assert result.to_payload() == {
        "deletedCount": 1,
        "scannedCount": 3,
        "skippedCount": 1,
        "cutoff": "2024-01-01T00:00:00+00:00",
    }
