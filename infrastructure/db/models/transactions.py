from typing import Optional
from uuid import uuid4
from sqlalchemy import Column, String, Integer, Boolean, Text
from sqlalchemy.orm import Mapped
from domain.entities import TransactionRecord
from infrastructure.db.models.base import Base


class TransactionModel(Base):
    __tablename__ = "sms_transaction"
    # seq preserves arrival order within an account
    seq: Mapped[int] = Column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = Column(String(36), unique=True, nullable=False)
    account_id: Mapped[str] = Column(String, nullable=False, index=True)
    amount: Mapped[str] = Column(String, nullable=False)
    type: Mapped[str] = Column(String, nullable=False)
    original_text: Mapped[str] = Column(Text, nullable=False)
    # Kept as text: rows written by other clients may carry malformed values
    timestamp: Mapped[Optional[str]] = Column(String, nullable=True)
    read: Mapped[bool] = Column(Boolean, nullable=False, default=False)

    def to_domain(self) -> TransactionRecord:
        return TransactionRecord(
            amount=self.amount,
            type=self.type,
            original_text=self.original_text,
            timestamp=self.timestamp,
            read=bool(self.read),
        )

    @classmethod
    def from_domain(cls, account_id: str, record: TransactionRecord, record_id: Optional[str] = None) -> "TransactionModel":
        return cls(
            id=record_id or str(uuid4()),
            account_id=account_id,
            amount=record.amount,
            type=record.type,
            original_text=record.original_text,
            timestamp=record.timestamp,
            read=record.read,
        )
