from .sms_classifier import classify, parse_amount
from .retention import compute_cutoff, parse_timestamp, is_expired

__all__ = ["classify", "parse_amount", "compute_cutoff", "parse_timestamp", "is_expired"]
