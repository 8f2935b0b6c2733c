"""Tests for tradejournal.time_utils – centralised timestamp handling."""

from datetime import datetime, timezone

from tradejournal.time_utils import (
    ensure_utc,
    minutes_since_midnight,
    now_utc,
    to_new_york,
)


# ---------------------------------------------------------------------------
# New York conversion
# ---------------------------------------------------------------------------

class TestNewYork:

    def test_winter_offset(self):
        ny = to_new_york(datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc))
        assert (ny.hour, ny.minute) == (7, 0)

    def test_summer_offset(self):
        ny = to_new_york(datetime(2025, 7, 15, 12, 0, tzinfo=timezone.utc))
        assert (ny.hour, ny.minute) == (8, 0)

    def test_naive_input_taken_as_utc(self):
        ny = to_new_york(datetime(2025, 1, 15, 12, 0))
        assert ny.hour == 7

    def test_minutes_since_midnight(self):
        assert minutes_since_midnight(datetime(2025, 1, 15, 8, 30)) == 510


def test_ensure_utc_keeps_aware_datetimes():
    dt = datetime(2025, 1, 1, tzinfo=timezone.utc)
    assert ensure_utc(dt) is dt


def test_ensure_utc_attaches_utc_to_naive():
    assert ensure_utc(datetime(2025, 1, 1)).tzinfo == timezone.utc


def test_now_utc_is_aware():
    assert now_utc().tzinfo == timezone.utc
