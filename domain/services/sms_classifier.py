"""
SMS Classifier Module

Maps the raw text of a bank SMS notification to a ClassificationResult using
fixed keyword lists and one amount pattern. Pure: no I/O, never raises.
"""
import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from domain.entities import ClassificationResult, TransactionType

# Checked in order; the first list with a hit decides the type.
CREDIT_KEYWORDS = ("credited", "received", "deposit")
DEBIT_KEYWORDS = ("debited", "paid", "transfer")

# Marker token, optional separators, then ASCII digits/commas with up to two decimals.
# \s stays Unicode-aware so NBSP separators still match.
AMOUNT_PATTERN = re.compile(r"(?:lkr|rs\.?|amount)\s?[:\-]?\s?([0-9,]+\.?[0-9]{0,2})", re.IGNORECASE)

NO_AMOUNT = "0.00"


def detect_type(text: str) -> TransactionType:
    """Keyword substring search over the lower-cased text, CREDIT before DEBIT."""
    clean_text = text.lower()
    if any(keyword in clean_text for keyword in CREDIT_KEYWORDS):
        return TransactionType.CREDIT
    if any(keyword in clean_text for keyword in DEBIT_KEYWORDS):
        return TransactionType.DEBIT
    return TransactionType.UNKNOWN


def extract_amount(text: str) -> str:
    """
    Return the leftmost amount captured from the original text, verbatim.

    Commas and the decimal part are kept as written; "0.00" means no amount.
    """
    match = AMOUNT_PATTERN.search(text)
    if match and match.group(1):
        return match.group(1)
    return NO_AMOUNT


def classify(text: str) -> ClassificationResult:
    """
    Classify an SMS as a CREDIT/DEBIT bank message or reject it.

    Args:
        text: Raw SMS body. Anything that is not a string is treated as empty.

    Returns:
        ClassificationResult; is_bank_message is True only when both an amount
        and a known type were found.
    """
    if not isinstance(text, str):
        text = ""

    transaction_type = detect_type(text)
    amount = extract_amount(text)
    is_bank_message = amount != NO_AMOUNT and transaction_type != TransactionType.UNKNOWN

    return ClassificationResult(is_bank_message=is_bank_message, type=transaction_type, amount=amount)


def parse_amount(amount: str) -> Optional[Decimal]:
    """Numeric value of a verbatim amount string (commas dropped), or None if it is not a number."""
    cleaned = (amount or "").replace(",", "")
    if not cleaned or cleaned == ".":
        return None
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        return None
