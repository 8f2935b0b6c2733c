# tradejournal/__init__.py
"""
Tradejournal - Trade journaling and risk planning toolkit.

Provides a compounding risk calculator with recovery mode, ICT range and
session-timing helpers, and an in-memory screenshot journal.
"""

from .compounding import CompoundingCalculator, StrategyConfig, InvalidConfiguration
from .journal import MemoryJournalStore
from .types import EnginePhase, Outcome

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CompoundingCalculator",
    "EnginePhase",
    "InvalidConfiguration",
    "MemoryJournalStore",
    "Outcome",
    "StrategyConfig",
]
