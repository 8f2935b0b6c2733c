"""State and record types for the risk progression calculator."""

from __future__ import annotations

from dataclasses import dataclass, field

from tradejournal.types import EnginePhase, Outcome


__all__ = [
    "AggregateStats",
    "EngineState",
    "PositionSizing",
    "RiskDecision",
    "TradePlan",
    "TradeRecord",
]


@dataclass(frozen=True)
class TradeRecord:
    """Snapshot of one recorded outcome. Never mutated after it is logged."""

    sequence_number: int
    outcome: Outcome
    risk_amount: float
    risk_type_description: str
    lots: float
    required_margin: float
    stop_loss_pips: float
    take_profit_pips: float
    risk_reward: str
    profit_loss: float
    balance_before: float
    balance_after: float
    cumulative_running_pl: float
    cumulative_win_profit: float
    loss_to_recover: float
    recovery_mode_after: bool


@dataclass
class EngineState:
    """
    Mutable account state driven by recorded trades.

    Attributes:
        balance: Current account balance.
        cumulative_win_profit: Profit accrued since the last loss (or since
            leaving recovery); funds the after-win risk.
        loss_to_recover: Outstanding loss still owed before recovery ends.
        in_recovery_mode: Whether risk is currently sized from the balance.
        highest_balance: Highest balance seen; defaults to the starting balance.
        lowest_balance: Lowest balance seen; defaults to the starting balance.
        trade_log: Recorded trades in chronological order.
    """

    balance: float
    cumulative_win_profit: float = 0.0
    loss_to_recover: float = 0.0
    in_recovery_mode: bool = False
    highest_balance: float | None = None
    lowest_balance: float | None = None
    trade_log: list[TradeRecord] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Extremes always bracket the current balance
        highest = self.balance if self.highest_balance is None else self.highest_balance
        lowest = self.balance if self.lowest_balance is None else self.lowest_balance
        self.highest_balance = max(highest, self.balance)
        self.lowest_balance = min(lowest, self.balance)

    @classmethod
    def fresh(cls, initial_capital: float) -> EngineState:
        return cls(balance=float(initial_capital))

    @property
    def last_trade(self) -> TradeRecord | None:
        return self.trade_log[-1] if self.trade_log else None

    @property
    def is_recovering(self) -> bool:
        return self.in_recovery_mode or self.loss_to_recover > 0

    @property
    def phase(self) -> EnginePhase:
        if not self.trade_log:
            return EnginePhase.FRESH
        if self.is_recovering:
            return EnginePhase.RECOVERING
        return EnginePhase.NORMAL


@dataclass(frozen=True)
class RiskDecision:
    """Cash risk for the next trade and the rule that produced it."""
    risk_amount: float
    description: str


@dataclass(frozen=True)
class PositionSizing:
    """Lot size and margin figures for a proposed trade."""
    lots: float
    notional_value: float
    required_margin: float
    take_profit_pips: float
    potential_profit: float
    free_margin: float
    margin_level: float
    max_lots_available: float


@dataclass(frozen=True)
class TradePlan:
    """Preview of the next trade: risk decision plus sizing."""
    risk: RiskDecision
    sizing: PositionSizing


@dataclass(frozen=True)
class AggregateStats:
    """Headline statistics for a calculator session."""
    win_count: int
    loss_count: int
    total_trades: int
    win_rate: float
    total_pl: float
    max_drawdown: float
