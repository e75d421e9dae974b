# use cases test

from datetime import datetime, timezone
from decimal import Decimal
import pytest

from application.service.ingest_sms import IngestSmsService
from domain.entities import TransactionType
from domain.exceptions import StoreError
from domain.interfaces import MetricsPort
from domain.interfaces.transaction_store import TransactionStore


NOW = datetime(2024, 1, 1, 8, 30, tzinfo=timezone.utc)


@pytest.fixture
def mock_store(mocker):
    """Fixture to create a mock of the store using pytest-mock"""
    mock_store = mocker.AsyncMock(spec=TransactionStore)
    mock_store.append_transaction.return_value = "txn-1"
    return mock_store


@pytest.fixture
def mock_metrics(mocker):
    return mocker.Mock(spec=MetricsPort)


@pytest.mark.asyncio
async def test_ingest_credit_is_stored(mock_store):
    """Accepted SMS is written once with the caller's timestamp"""
    service = IngestSmsService(mock_store)
    result = await service.execute(account_id="shop_1", sms_text="HNB Alert: A/C Credited Rs. 2,000.00.", now=NOW)

    assert result.stored is True
    assert result.record_id == "txn-1"
    assert result.classification.type == TransactionType.CREDIT
    mock_store.append_transaction.assert_awaited_once()
    account_id, record = mock_store.append_transaction.await_args.args
    assert account_id == "shop_1"
    assert record.amount == "2,000.00"
    assert record.type == "CREDIT"
    assert record.original_text == "HNB Alert: A/C Credited Rs. 2,000.00."
    assert record.timestamp == "2024-01-01T08:30:00+00:00"
    assert record.read is False


@pytest.mark.asyncio
async def test_ingest_non_bank_sms_is_ignored(mock_store, mock_metrics):
    """Rejected SMS writes nothing"""
    service = IngestSmsService(mock_store, metrics_port=mock_metrics)
    result = await service.execute(account_id="shop_1", sms_text="Your OTP is 4521")

    assert result.stored is False
    assert result.record_id is None
    assert result.classification.amount == "0.00"
    mock_store.append_transaction.assert_not_awaited()
    mock_metrics.increment_ingest_total.assert_called_once_with(outcome="ignored")


@pytest.mark.asyncio
async def test_ingest_emits_metrics_on_accept(mock_store, mock_metrics):
    service = IngestSmsService(mock_store, metrics_port=mock_metrics)
    await service.execute(account_id="shop_1", sms_text="A/C Debited LKR 1,500.50 for bill payment")

    mock_metrics.increment_ingest_total.assert_called_once_with(outcome="accepted")
    mock_metrics.increment_transaction_type.assert_called_once_with(transaction_type="DEBIT")
    mock_metrics.observe_amount.assert_called_once_with(Decimal("1500.50"))


@pytest.mark.asyncio
async def test_ingest_store_failure_propagates(mock_store, mock_metrics, mocker):
    """Storage errors are not retried and reach the caller"""
    mock_store.append_transaction.side_effect = StoreError("db down")
    logging_port = mocker.Mock()
    service = IngestSmsService(mock_store, metrics_port=mock_metrics, logging_port=logging_port)

    with pytest.raises(StoreError):
        await service.execute(account_id="shop_1", sms_text="A/C Debited LKR 500")

    assert mock_store.append_transaction.await_count == 1
    mock_metrics.increment_ingest_total.assert_called_once_with(outcome="error")
    logging_port.bind.assert_called_once_with(account_id="shop_1", step="sms_ingest")
    logging_port.bind.return_value.error.assert_called_once()


@pytest.mark.asyncio
async def test_ingest_keeps_arrival_order(memory_store):
    service = IngestSmsService(memory_store)
    for amount in ("100", "200", "300"):
        await service.execute(account_id="shop_1", sms_text=f"Rs {amount} received")

    transactions = await memory_store.list_transactions("shop_1")
    assert [record.amount for _, record in transactions] == ["100", "200", "300"]
