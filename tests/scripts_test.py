"""
Tests for the operator scripts.
"""
import json
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "scripts"))

import classify_sms  # noqa: E402


def test_classify_text(capsys):
    assert classify_sms.main(["HNB Alert: A/C Credited Rs. 2,000.00."]) == 0
    out = capsys.readouterr().out
    assert "[BANK MESSAGE] type=CREDIT amount=2,000.00" in out


def test_classify_json(capsys):
    classify_sms.main(["--json", "Your OTP is 4521"])
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"text": "Your OTP is 4521", "isBankMessage": False, "type": "UNKNOWN", "amount": "0.00"}


def test_classify_file(tmp_path, capsys):
    messages = tmp_path / "messages.txt"
    messages.write_text("A/C Debited LKR 500 for bill payment\n\nYour OTP is 4521\n", encoding="utf-8")

    classify_sms.main(["--file", str(messages)])

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("[BANK MESSAGE] type=DEBIT amount=500")
    assert lines[1].startswith("[IGNORED]")
