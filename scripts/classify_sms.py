#!/usr/bin/env python3
"""
SMS Classifier CLI

Classifies bank SMS text the same way the /v1/sms endpoint does, without storing anything.

Usage:
    python scripts/classify_sms.py "HNB Alert: A/C Credited Rs. 2,000.00."
    python scripts/classify_sms.py --file messages.txt
    python scripts/classify_sms.py --json "A/C Debited LKR 500 for bill payment"

Arguments:
    text: SMS text to classify
    --file: Path to a file with one SMS per line
    --json: Output raw JSON instead of formatted text
"""
import argparse
import json
import os
import sys

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from domain.entities import ClassificationResult
from domain.services.sms_classifier import classify


def format_result(text: str, result: ClassificationResult) -> str:
    """Format a classification for human-readable output."""
    status = "BANK MESSAGE" if result.is_bank_message else "IGNORED"
    return f"[{status}] type={result.type.value} amount={result.amount} | {text}"


def load_messages(file_path: str) -> list[str]:
    """Load one message per non-empty line."""
    with open(file_path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Classify bank SMS text")
    parser.add_argument("text", nargs="?", help="SMS text to classify")
    parser.add_argument("--file", help="File with one SMS per line")
    parser.add_argument("--json", action="store_true", help="Output raw JSON")
    args = parser.parse_args(argv)

    if args.file:
        messages = load_messages(args.file)
    elif args.text:
        messages = [args.text]
    else:
        parser.error("provide text or --file")

    for message in messages:
        result = classify(message)
        if args.json:
            print(json.dumps({"text": message, **result.to_payload()}))
        else:
            print(format_result(message, result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
