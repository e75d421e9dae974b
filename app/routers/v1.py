from datetime import timedelta
from fastapi import APIRouter, Depends, HTTPException, status, Header
from typing import Optional
from application.service.ingest_sms import IngestSmsService
from application.service.sweep_transactions import SweepTransactionsService
from app.dependencies import get_transaction_store
from app.schemas.sms_schema import ClassificationPayload, IngestResponse, SmsIngestRequest, SweepRequest, SweepResponse
from domain.exceptions import StoreEnumerationError, StoreError
from domain.interfaces import TransactionStore
from infrastructure.logging.logging_adapter import LoggingAdapter
from infrastructure.logging.structlog_logs import logger
from infrastructure.metrics.metrics_adapter import MetricsAdapter
import uuid


router = APIRouter(prefix="/v1")

@router.post("/sms", response_model=IngestResponse, response_model_exclude_none=True)
async def ingest_sms(
    payload: Optional[SmsIngestRequest] = None,
    x_request_id: Optional[str] = Header(
        None,
        alias="X-Request-ID",
        description="Request ID for tracing. Generated when absent.",
    ),
    store: TransactionStore = Depends(get_transaction_store)
) -> IngestResponse:
    """
    Ingest a bank SMS for an account.
    
    - Classifies the text as CREDIT / DEBIT or not a bank message
    - Stores accepted transactions under the account
    - Messages that are not bank transactions are acknowledged and ignored
    """
    request_id = x_request_id or str(uuid.uuid4())

    if payload is None or not payload.account_id or not payload.sms_text:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "missing_data", "message": "Missing Data"}
        )

    srv = IngestSmsService(
        store=store,
        metrics_port=MetricsAdapter(),
        logging_port=LoggingAdapter(request_id=request_id)
    )

    try:
        result = await srv.execute(account_id=payload.account_id, sms_text=payload.sms_text)
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "storage_error", "message": str(e)}
        )
    except Exception as e:
        logger.error("sms_ingest_failed", request_id=request_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "internal_error", "message": str(e)}
        )

    if not result.stored:
        return IngestResponse(message="Not a bank SMS, ignored.")

    return IngestResponse(
        message="Success",
        data=ClassificationPayload(**result.classification.to_payload())
    )

@router.post("/maintenance/sweep")
async def sweep(
    payload: Optional[SweepRequest] = None,
    store: TransactionStore = Depends(get_transaction_store)
) -> SweepResponse:
    """
    Run the retention sweep now.

    Deletes every stored transaction older than the retention window
    (RETENTION_HOURS unless retentionHours is given).
    """
    retention_window = None
    if payload and payload.retentionHours:
        retention_window = timedelta(hours=payload.retentionHours)

    srv = SweepTransactionsService(
        store=store,
        metrics_port=MetricsAdapter(),
        logging_port=LoggingAdapter(trigger="manual")
    )
    try:
        result = await srv.execute(retention_window=retention_window)
    except StoreEnumerationError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"error": "store_unavailable", "message": str(e)}
        )
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "storage_error", "message": str(e)}
        )

    return SweepResponse(**result.to_payload())
