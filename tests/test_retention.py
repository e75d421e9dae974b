"""
Tests for retention cutoff and timestamp rules.
"""
from datetime import datetime, timedelta, timezone

import pytest

from domain.config import get_retention_config, reload_config
from domain.services.retention import compute_cutoff, parse_timestamp, is_expired
from conftest import NOW, make_record, hours_ago


class TestCutoff:

    def test_default_window(self, monkeypatch):
        monkeypatch.delenv("RETENTION_HOURS", raising=False)
        reload_config()
        cutoff = compute_cutoff(NOW, get_retention_config().retention_window)
        assert cutoff == datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)

    def test_naive_now_is_utc(self):
        cutoff = compute_cutoff(datetime(2024, 1, 2), timedelta(hours=1))
        assert cutoff == datetime(2024, 1, 1, 23, 0, tzinfo=timezone.utc)


class TestParseTimestamp:

    def test_zulu_suffix(self):
        assert parse_timestamp("2024-01-01T12:00:00Z") == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)

    def test_millisecond_zulu_as_written_by_js_clients(self):
        parsed = parse_timestamp("2024-01-01T12:00:00.123Z")
        assert parsed == datetime(2024, 1, 1, 12, 0, 0, 123000, tzinfo=timezone.utc)

    def test_offset_is_honoured(self):
        parsed = parse_timestamp("2024-01-01T17:30:00+05:30")
        assert parsed == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def test_naive_is_utc(self):
        assert parse_timestamp("2024-01-01T12:00:00").tzinfo == timezone.utc

    @pytest.mark.parametrize("value", [None, "", "   ", "yesterday", "2024-01-00T23:00:00Z", 1704067200, {}])
    def test_unusable_values(self, value):
        assert parse_timestamp(value) is None


class TestIsExpired:

    def test_older_than_cutoff(self):
        cutoff = compute_cutoff(NOW, timedelta(hours=24))
        assert is_expired(make_record(hours_ago(25)), cutoff) is True

    def test_newer_than_cutoff(self):
        cutoff = compute_cutoff(NOW, timedelta(hours=24))
        assert is_expired(make_record(hours_ago(1)), cutoff) is False

    def test_exactly_at_cutoff_is_kept(self):
        cutoff = compute_cutoff(NOW, timedelta(hours=24))
        assert is_expired(make_record(hours_ago(24)), cutoff) is False

    def test_malformed_is_undecided(self):
        cutoff = compute_cutoff(NOW, timedelta(hours=24))
        assert is_expired(make_record("not-a-date"), cutoff) is None
        assert is_expired(make_record(None), cutoff) is None
