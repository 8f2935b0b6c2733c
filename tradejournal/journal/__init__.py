from .store import MemoryJournalStore
from .taxonomy import SESSION_TIMINGS, STUDY_BUCKETS, TRADE_TYPES, bucket_for
from .types import JournalStats, Note, Screenshot, TradeResult

__all__ = [
    "JournalStats",
    "MemoryJournalStore",
    "Note",
    "SESSION_TIMINGS",
    "STUDY_BUCKETS",
    "Screenshot",
    "TRADE_TYPES",
    "TradeResult",
    "bucket_for",
]
