from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class TradeResult(str, Enum):
    WIN = "win"
    LOSS = "loss"
    BREAKEVEN = "breakeven"


@dataclass(frozen=True)
class Screenshot:
    """A journalled chart screenshot and its strategy tags."""

    id: str
    title: str
    image_path: str
    uploaded_at: datetime
    trade_type: str | None = None
    bias: str | None = None
    setup_pattern: str | None = None
    entry: str | None = None
    study_bucket: str | None = None
    strategy_type: str | None = None
    session_timing: str | None = None
    currency_pair: str | None = None
    result: TradeResult = TradeResult.WIN
    risk_reward: str = "+2R"
    tags: tuple[str, ...] = ()
    metadata: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    is_bookmarked: bool = False


@dataclass(frozen=True)
class Note:
    id: str
    screenshot_id: str
    content: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class JournalStats:
    total: int
    this_week: int
    win_rate: float
