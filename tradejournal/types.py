"""Shared trade-journal types."""

from enum import Enum


class Outcome(str, Enum):
    """Result of a closed trade as recorded in the compounding calculator."""
    WIN = "WIN"
    LOSS = "LOSS"

    @classmethod
    def parse(cls, value: "str | Outcome") -> "Outcome":
        """
        Parse a loosely formatted outcome string.

        Accepts enum members and case-insensitive "win"/"loss" strings, which
        is what settings forms and CSV imports produce.

        Raises:
            ValueError: if the value is not a recognised outcome
        """
        if isinstance(value, Outcome):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError as exc:
            raise ValueError(f"Unknown trade outcome: {value!r}") from exc


class EnginePhase(str, Enum):
    """Coarse state of the risk progression engine.

    FRESH until the first trade is recorded, RECOVERING while a loss is
    outstanding, NORMAL otherwise.
    """
    FRESH = "fresh"
    NORMAL = "normal"
    RECOVERING = "recovering"
