"""In-memory screenshot and note store.

Fallback storage used when no database is configured. Records are kept in
insertion-ordered dicts and returned as frozen dataclasses; updates build
a new record with :func:`dataclasses.replace`.
"""

import logging
import uuid
from dataclasses import fields, replace
from datetime import datetime, timedelta
from types import MappingProxyType
from typing import Any, Callable

from tradejournal.journal.taxonomy import SESSION_TIMINGS, STUDY_BUCKETS
from tradejournal.journal.types import JournalStats, Note, Screenshot, TradeResult
from tradejournal.time_utils import now_utc

log = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50

_SCREENSHOT_FIELDS = {f.name for f in fields(Screenshot)}
_READ_ONLY_FIELDS = {"id", "uploaded_at"}


class MemoryJournalStore:
    """
    CRUD over screenshots and their notes.

    Args:
        clock: Returns the current UTC time; injectable for tests.
    """

    def __init__(self, clock: Callable[[], datetime] = now_utc) -> None:
        self._clock = clock
        self._screenshots: dict[str, Screenshot] = {}
        self._notes: dict[str, Note] = {}

    # ------------------------------------------------------------------
    # Screenshots
    # ------------------------------------------------------------------

    def create_screenshot(self, *, title: str, image_path: str, **fields_: Any) -> Screenshot:
        """Store a new screenshot. ``title`` and ``image_path`` are required."""
        if not title or not title.strip():
            raise ValueError("title is required")
        if not image_path or not image_path.strip():
            raise ValueError("image_path is required")

        values = _clean_fields(fields_)
        screenshot = Screenshot(
            id=str(uuid.uuid4()),
            title=title,
            image_path=image_path,
            uploaded_at=self._clock(),
            **values,
        )
        self._screenshots[screenshot.id] = screenshot
        log.debug("Screenshot %s stored (%s)", screenshot.id, title)
        return screenshot

    def list_screenshots(
        self,
        *,
        strategy_type: str | None = None,
        session_timing: str | None = None,
        study_bucket: str | None = None,
        is_bookmarked: bool | None = None,
        limit: int | None = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> list[Screenshot]:
        """
        Filtered screenshots, newest first.

        A ``limit`` of ``None`` or 0 means the default page size.

        Raises:
            ValueError: if limit or offset is negative
        """
        limit = limit or DEFAULT_PAGE_SIZE
        if limit < 0:
            raise ValueError(f"limit must not be negative, got {limit}")
        if offset < 0:
            raise ValueError(f"offset must not be negative, got {offset}")

        results = list(self._screenshots.values())

        if strategy_type:
            results = [s for s in results if s.strategy_type == strategy_type]
        if session_timing:
            results = [s for s in results if s.session_timing == session_timing]
        if study_bucket:
            results = [s for s in results if s.study_bucket == study_bucket]
        if is_bookmarked is not None:
            results = [s for s in results if s.is_bookmarked == is_bookmarked]

        results.sort(key=lambda s: s.uploaded_at, reverse=True)
        return results[offset:offset + limit]

    def get_screenshot(self, screenshot_id: str) -> Screenshot | None:
        return self._screenshots.get(screenshot_id)

    def update_screenshot(self, screenshot_id: str, **updates: Any) -> Screenshot | None:
        """Apply partial updates. Returns ``None`` if the screenshot does not exist."""
        current = self._screenshots.get(screenshot_id)
        if current is None:
            return None

        for required in ("title", "image_path"):
            if required in updates and not str(updates[required] or "").strip():
                raise ValueError(f"{required} cannot be blank")

        updated = replace(current, **_clean_fields(updates))
        self._screenshots[screenshot_id] = updated
        return updated

    def delete_screenshot(self, screenshot_id: str) -> bool:
        """Delete a screenshot and its notes. Returns whether anything was deleted."""
        if self._screenshots.pop(screenshot_id, None) is None:
            return False
        orphaned = [n.id for n in self._notes.values() if n.screenshot_id == screenshot_id]
        for note_id in orphaned:
            del self._notes[note_id]
        log.info("Screenshot %s deleted with %d notes", screenshot_id, len(orphaned))
        return True

    # ------------------------------------------------------------------
    # Notes
    # ------------------------------------------------------------------

    def create_note(self, screenshot_id: str, content: str) -> Note:
        if screenshot_id not in self._screenshots:
            raise KeyError(f"Unknown screenshot: {screenshot_id}")
        _require_content(content)

        ts = self._clock()
        note = Note(
            id=str(uuid.uuid4()),
            screenshot_id=screenshot_id,
            content=content,
            created_at=ts,
            updated_at=ts,
        )
        self._notes[note.id] = note
        return note

    def notes_for(self, screenshot_id: str) -> list[Note]:
        """Notes attached to a screenshot, oldest first."""
        notes = [n for n in self._notes.values() if n.screenshot_id == screenshot_id]
        return sorted(notes, key=lambda n: n.created_at)

    def update_note(self, note_id: str, content: str) -> Note | None:
        note = self._notes.get(note_id)
        if note is None:
            return None
        _require_content(content)

        updated = replace(note, content=content, updated_at=self._clock())
        self._notes[note_id] = updated
        return updated

    def delete_note(self, note_id: str) -> bool:
        return self._notes.pop(note_id, None) is not None

    # ------------------------------------------------------------------
    # Stats
    # ------------------------------------------------------------------

    def stats(self, now: datetime | None = None) -> JournalStats:
        """
        Summary counts for the dashboard.

        Win rate counts only decided trades (win or loss); breakevens are
        excluded from both sides.
        """
        now = now or self._clock()
        shots = list(self._screenshots.values())
        week_ago = now - timedelta(days=7)

        wins = sum(1 for s in shots if s.result is TradeResult.WIN)
        losses = sum(1 for s in shots if s.result is TradeResult.LOSS)
        decided = wins + losses

        return JournalStats(
            total=len(shots),
            this_week=sum(1 for s in shots if s.uploaded_at > week_ago),
            win_rate=(wins / decided * 100.0) if decided else 0.0,
        )


def _require_content(content: str) -> None:
    if not content or not content.strip():
        raise ValueError("Note content is required")


def _clean_fields(values: dict[str, Any]) -> dict[str, Any]:
    """Validate and normalise screenshot fields supplied by a caller."""
    unknown = values.keys() - _SCREENSHOT_FIELDS
    if unknown:
        raise ValueError(f"Unknown screenshot fields: {sorted(unknown)}")
    read_only = _READ_ONLY_FIELDS & values.keys()
    if read_only:
        raise ValueError(f"Read-only screenshot fields: {sorted(read_only)}")

    out = dict(values)

    bucket = out.get("study_bucket")
    if bucket is not None and bucket not in STUDY_BUCKETS:
        raise ValueError(f"Unknown study bucket: {bucket!r}")

    timing = out.get("session_timing")
    if timing is not None and timing not in SESSION_TIMINGS:
        raise ValueError(f"Unknown session timing: {timing!r}")

    raw_result = out.pop("result", None)
    if raw_result is not None:
        try:
            out["result"] = (
                raw_result if isinstance(raw_result, TradeResult)
                else TradeResult(str(raw_result).strip().lower())
            )
        except ValueError as exc:
            raise ValueError(f"Unknown trade result: {raw_result!r}") from exc

    if out.get("risk_reward") is None:
        out.pop("risk_reward", None)
    if "tags" in out:
        out["tags"] = tuple(out["tags"] or ())
    if "metadata" in out:
        # Read-only view over a private copy; stored records cannot be mutated
        out["metadata"] = MappingProxyType(dict(out["metadata"] or {}))
    if "is_bookmarked" in out:
        out["is_bookmarked"] = bool(out["is_bookmarked"])

    return out
