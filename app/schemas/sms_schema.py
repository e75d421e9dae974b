# app/schemas/sms_schema.py
from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class SmsIngestRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # userId is what the mobile forwarder sends; accountId is the documented name
    account_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("accountId", "userId", "account_id"),
    )
    sms_text: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("smsText", "sms_text"),
    )


class ClassificationPayload(BaseModel):
    isBankMessage: bool
    type: str
    amount: str


class IngestResponse(BaseModel):
    message: str
    data: Optional[ClassificationPayload] = None


class SweepRequest(BaseModel):
    retentionHours: Optional[int] = Field(default=None, gt=0)


class SweepResponse(BaseModel):
    deletedCount: int
    scannedCount: int
    skippedCount: int
    cutoff: str
