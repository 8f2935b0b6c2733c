from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

import numpy as np


class InvalidConfiguration(ValueError):
    """Raised when a strategy configuration is rejected before any computation."""


_PERCENT_FIELDS = (
    "initial_risk_percent",
    "after_win_risk_percent",
    "recovery_risk_percent",
)

_POSITIVE_FIELDS = (
    "initial_capital",
    "leverage",
    "stop_loss_pips",
    "risk_reward_ratio",
    "pip_value_per_lot",
)


@dataclass(frozen=True)
class StrategyConfig:
    """Parameters of a compounding run, constant for the life of a calculator session."""

    initial_capital: float = 3000.0
    leverage: int = 500
    initial_risk_percent: float = 10.0
    after_win_risk_percent: float = 25.0
    recovery_risk_percent: float = 5.0
    stop_loss_pips: float = 20.0
    risk_reward_ratio: float = 2.0
    pip_value_per_lot: float = 10.0

    def __post_init__(self) -> None:
        for name in _POSITIVE_FIELDS:
            value = getattr(self, name)
            if not _is_finite_number(value) or value <= 0:
                raise InvalidConfiguration(f"{name} must be a positive number, got {value!r}")

        if int(self.leverage) != self.leverage:
            raise InvalidConfiguration(f"leverage must be a whole number, got {self.leverage!r}")

        for name in _PERCENT_FIELDS:
            value = getattr(self, name)
            if not _is_finite_number(value) or not 0 < value <= 100:
                raise InvalidConfiguration(f"{name} must be in (0, 100], got {value!r}")

    @property
    def risk_reward_label(self) -> str:
        """Ratio rendered the way the trade table shows it, e.g. ``1:2``."""
        return f"1:{format_number(self.risk_reward_ratio)}"

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> StrategyConfig:
        """Validate and construct from a raw settings mapping.

        Missing keys fall back to the defaults. An optional ``custom_reward``
        entry overrides ``risk_reward_ratio`` when it parses as a number;
        blank or non-numeric custom values are ignored.

        Raises ``InvalidConfiguration`` with a clear message on bad values
        instead of letting ``TypeError`` or ``ValueError`` propagate.
        """
        values: dict[str, Any] = {}
        for name in (f.name for f in fields(cls)):
            if name not in raw or raw[name] in (None, ""):
                continue
            try:
                if name == "leverage" and _is_whole(raw[name]):
                    values[name] = int(float(raw[name]))
                else:
                    values[name] = float(raw[name])
            except (TypeError, ValueError) as exc:
                raise InvalidConfiguration(f"{name} is not numeric: {raw[name]!r}") from exc

        custom = raw.get("custom_reward")
        if custom not in (None, ""):
            try:
                values["risk_reward_ratio"] = float(custom)
            except (TypeError, ValueError):
                pass

        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def format_number(value: float) -> str:
    """Shortest plain decimal that round-trips, e.g. ``10``, ``2.5``, ``0.00001``."""
    return np.format_float_positional(float(value), trim="-")


def _is_finite_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _is_whole(value: Any) -> bool:
    try:
        return float(value) == int(float(value))
    except (TypeError, ValueError, OverflowError):
        return False
