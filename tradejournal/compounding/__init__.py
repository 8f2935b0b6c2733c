from .calculator import (
    CompoundingCalculator,
    compute_next_risk,
    compute_position_sizing,
    get_aggregate_stats,
    record_trade,
)
from .config import InvalidConfiguration, StrategyConfig
from .export import trade_rows, write_trades_csv
from .settings import SettingsStore
from .types import (
    AggregateStats,
    EngineState,
    PositionSizing,
    RiskDecision,
    TradePlan,
    TradeRecord,
)

__all__ = [
    "AggregateStats",
    "CompoundingCalculator",
    "EngineState",
    "InvalidConfiguration",
    "PositionSizing",
    "RiskDecision",
    "SettingsStore",
    "StrategyConfig",
    "TradePlan",
    "TradeRecord",
    "compute_next_risk",
    "compute_position_sizing",
    "get_aggregate_stats",
    "record_trade",
    "trade_rows",
    "write_trades_csv",
]
