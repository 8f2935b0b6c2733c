"""Tests for the in-memory screenshot journal."""

from datetime import datetime, timedelta, timezone

import pytest

from tradejournal.journal import (
    MemoryJournalStore,
    STUDY_BUCKETS,
    TradeResult,
    bucket_for,
)


class FakeClock:
    """Deterministic clock advancing one minute per call."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(minutes=1)
        return current


START = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    return FakeClock(START)


@pytest.fixture
def store(clock):
    return MemoryJournalStore(clock=clock)


def _shot(store, title="EURUSD London", **fields):
    return store.create_screenshot(title=title, image_path=f"/uploads/{title}.png", **fields)


class TestScreenshots:

    def test_create_applies_defaults(self, store):
        s = _shot(store)
        assert s.id
        assert s.uploaded_at == START
        assert s.result is TradeResult.WIN
        assert s.risk_reward == "+2R"
        assert s.tags == ()
        assert s.metadata == {}
        assert s.is_bookmarked is False

    def test_create_normalises_fields(self, store):
        s = _shot(
            store,
            study_bucket="PATTERNS",
            strategy_type="HALF_BATS",
            session_timing="London",
            result="LOSS",
            tags=["a", "b"],
            metadata={"entry": 1.1},
        )
        assert s.result is TradeResult.LOSS
        assert s.tags == ("a", "b")
        assert s.metadata == {"entry": 1.1}

    def test_metadata_is_read_only_copy(self, store):
        source = {"entry": 1.1}
        s = _shot(store, metadata=source)
        source["entry"] = 9.9
        with pytest.raises(TypeError):
            s.metadata["entry"] = 2.2
        assert store.get_screenshot(s.id).metadata == {"entry": 1.1}

    def test_default_metadata_is_read_only(self, store):
        with pytest.raises(TypeError):
            _shot(store).metadata["x"] = 1

    @pytest.mark.parametrize("title,image_path", [("", "/x.png"), ("  ", "/x.png"), ("t", "")])
    def test_create_requires_title_and_image(self, store, title, image_path):
        with pytest.raises(ValueError, match="required"):
            store.create_screenshot(title=title, image_path=image_path)

    @pytest.mark.parametrize(
        "fields,match",
        [
            ({"study_bucket": "MISC"}, "study bucket"),
            ({"session_timing": "Sydney"}, "session timing"),
            ({"result": "scratch"}, "trade result"),
            ({"colour": "red"}, "Unknown screenshot fields"),
            ({"id": "abc"}, "Read-only"),
        ],
    )
    def test_create_rejects_bad_fields(self, store, fields, match):
        with pytest.raises(ValueError, match=match):
            _shot(store, **fields)

    def test_get(self, store):
        s = _shot(store)
        assert store.get_screenshot(s.id) == s
        assert store.get_screenshot("missing") is None

    def test_list_newest_first(self, store):
        first = _shot(store, "one")
        second = _shot(store, "two")
        assert [s.id for s in store.list_screenshots()] == [second.id, first.id]

    def test_list_filters(self, store):
        a = _shot(store, "a", study_bucket="SETUPS", strategy_type="ANCHORS", session_timing="Asian")
        b = _shot(store, "b", study_bucket="ENTRYS", strategy_type="SHIFT_CANDLE", session_timing="NY",
                  is_bookmarked=True)

        assert store.list_screenshots(study_bucket="SETUPS") == [a]
        assert store.list_screenshots(strategy_type="SHIFT_CANDLE") == [b]
        assert store.list_screenshots(session_timing="Asian") == [a]
        assert store.list_screenshots(is_bookmarked=True) == [b]
        assert store.list_screenshots(is_bookmarked=False) == [a]

    def test_list_paginates(self, store):
        shots = [_shot(store, f"s{i}") for i in range(5)]
        page = store.list_screenshots(limit=2, offset=1)
        assert [s.title for s in page] == [shots[3].title, shots[2].title]

    def test_list_default_page_size(self, store):
        for i in range(55):
            _shot(store, f"s{i}")
        assert len(store.list_screenshots()) == 50

    @pytest.mark.parametrize("limit", [0, None])
    def test_list_zero_or_missing_limit_uses_default(self, store, limit):
        for i in range(55):
            _shot(store, f"s{i}")
        assert len(store.list_screenshots(limit=limit)) == 50

    @pytest.mark.parametrize("limit,offset", [(-1, 0), (10, -1)])
    def test_list_rejects_negative_paging(self, store, limit, offset):
        _shot(store)
        with pytest.raises(ValueError, match="must not be negative"):
            store.list_screenshots(limit=limit, offset=offset)

    def test_update_partial(self, store):
        s = _shot(store)
        updated = store.update_screenshot(s.id, is_bookmarked=True, result="breakeven")
        assert updated.is_bookmarked is True
        assert updated.result is TradeResult.BREAKEVEN
        assert updated.title == s.title
        assert updated.uploaded_at == s.uploaded_at
        assert store.get_screenshot(s.id) == updated

    def test_update_missing_returns_none(self, store):
        assert store.update_screenshot("missing", title="x") is None

    def test_update_rejects_read_only_and_blank_title(self, store):
        s = _shot(store)
        with pytest.raises(ValueError, match="Read-only"):
            store.update_screenshot(s.id, uploaded_at=START)
        with pytest.raises(ValueError, match="title cannot be blank"):
            store.update_screenshot(s.id, title="")

    def test_delete_cascades_notes(self, store):
        s = _shot(store)
        store.create_note(s.id, "first look")
        assert store.delete_screenshot(s.id) is True
        assert store.get_screenshot(s.id) is None
        assert store.notes_for(s.id) == []
        assert store.delete_screenshot(s.id) is False


class TestNotes:

    def test_create_and_list_oldest_first(self, store):
        s = _shot(store)
        n1 = store.create_note(s.id, "entry on shift candle")
        n2 = store.create_note(s.id, "target hit")
        assert store.notes_for(s.id) == [n1, n2]
        assert n1.created_at == n1.updated_at

    def test_create_for_unknown_screenshot(self, store):
        with pytest.raises(KeyError):
            store.create_note("missing", "text")

    def test_create_requires_content(self, store):
        s = _shot(store)
        with pytest.raises(ValueError, match="content is required"):
            store.create_note(s.id, "   ")

    def test_update_bumps_updated_at(self, store):
        s = _shot(store)
        note = store.create_note(s.id, "draft")
        updated = store.update_note(note.id, "final")
        assert updated.content == "final"
        assert updated.created_at == note.created_at
        assert updated.updated_at > note.updated_at

    def test_update_missing_returns_none(self, store):
        assert store.update_note("missing", "text") is None

    def test_delete(self, store):
        s = _shot(store)
        note = store.create_note(s.id, "x")
        assert store.delete_note(note.id) is True
        assert store.delete_note(note.id) is False


class TestStats:

    def test_empty(self, store):
        stats = store.stats()
        assert (stats.total, stats.this_week, stats.win_rate) == (0, 0, 0.0)

    def test_win_rate_ignores_breakeven(self, store):
        _shot(store, "a", result="win")
        _shot(store, "b", result="win")
        _shot(store, "c", result="loss")
        _shot(store, "d", result="breakeven")
        stats = store.stats()
        assert stats.total == 4
        assert stats.win_rate == pytest.approx(200 / 3)

    def test_this_week_window(self, store):
        _shot(store, "recent")
        assert store.stats(now=START + timedelta(days=3)).this_week == 1
        assert store.stats(now=START + timedelta(days=8)).this_week == 0


def test_bucket_for():
    assert bucket_for("HALF_BATS") == "PATTERNS"
    assert bucket_for("M") == "BIAS"
    assert bucket_for("UNKNOWN") is None
    assert set(STUDY_BUCKETS) == {"BIAS", "SETUPS", "PATTERNS", "ENTRYS"}
