"""Risk progression calculator.

Sizes each trade from the outcome history of the session:

* the first trade risks a fixed share of the starting capital;
* after a win, risk is a share of the profit accrued since the last loss;
* after a loss, the engine enters recovery mode and risks a share of the
  balance until the outstanding loss has been won back.

The module-level functions operate on an explicit :class:`EngineState`;
:class:`CompoundingCalculator` bundles a state with its config for callers
that prefer one owned object per session.
"""

import logging

import numpy as np

from tradejournal import metrics
from tradejournal.compounding.config import StrategyConfig, format_number
from tradejournal.compounding.types import (
    AggregateStats,
    EngineState,
    PositionSizing,
    RiskDecision,
    TradePlan,
    TradeRecord,
)
from tradejournal.risk import (
    lots_for_risk,
    margin_level,
    max_lots_available,
    notional_value,
    required_margin,
)
from tradejournal.types import Outcome

log = logging.getLogger(__name__)


__all__ = [
    "CompoundingCalculator",
    "compute_next_risk",
    "compute_position_sizing",
    "get_aggregate_stats",
    "record_trade",
]


def compute_next_risk(state: EngineState, config: StrategyConfig) -> RiskDecision:
    """
    Decide the cash risk for the next trade.

    Rules are evaluated in priority order: initial, recovery, after-win,
    post-loss. Zero or negative balances are not rejected; the resulting
    risk propagates unchanged.
    """
    last = state.last_trade
    if last is None:
        pct = config.initial_risk_percent
        return RiskDecision(
            risk_amount=config.initial_capital * (pct / 100),
            description=f"Initial {format_number(pct)}%",
        )

    pct = config.recovery_risk_percent
    if state.is_recovering:
        return RiskDecision(
            risk_amount=state.balance * (pct / 100),
            description=(
                f"{format_number(pct)}% recovery mode "
                f"(${state.loss_to_recover:.2f} to recover)"
            ),
        )

    if last.outcome is Outcome.WIN:
        win_pct = config.after_win_risk_percent
        return RiskDecision(
            risk_amount=state.cumulative_win_profit * (win_pct / 100),
            description=(
                f"{format_number(win_pct)}% of total profits "
                f"(${state.cumulative_win_profit:.2f})"
            ),
        )

    # A loss always sets recovery mode, so this only triggers on hand-built states.
    return RiskDecision(
        risk_amount=state.balance * (pct / 100),
        description=f"{format_number(pct)}% of balance (post-loss)",
    )


def compute_position_sizing(
    risk_amount: float, config: StrategyConfig, balance: float
) -> PositionSizing:
    """
    Translate a cash risk into lots and margin requirements.

    No clamping is applied: negative or fractional lots are returned as is.
    Margin level is +inf when no margin is required.
    """
    lots = lots_for_risk(
        risk_amount=risk_amount,
        stop_loss_pips=config.stop_loss_pips,
        pip_value_per_lot=config.pip_value_per_lot,
    )
    notional = notional_value(lots)
    margin = required_margin(notional, config.leverage)

    return PositionSizing(
        lots=lots,
        notional_value=notional,
        required_margin=margin,
        take_profit_pips=config.stop_loss_pips * config.risk_reward_ratio,
        potential_profit=risk_amount * config.risk_reward_ratio,
        free_margin=balance - margin,
        margin_level=margin_level(balance, margin),
        max_lots_available=max_lots_available(balance, config.leverage),
    )


def record_trade(state: EngineState, config: StrategyConfig, outcome: Outcome) -> TradeRecord:
    """
    Apply a trade outcome to *state* and append its record.

    Every new value is computed before the state is touched, so a failure
    part way through leaves the state as it was.
    """
    outcome = Outcome.parse(outcome)
    decision = compute_next_risk(state, config)
    risk = decision.risk_amount
    sizing = compute_position_sizing(risk, config, state.balance)

    cumulative = state.cumulative_win_profit
    to_recover = state.loss_to_recover
    recovering = state.in_recovery_mode

    if outcome is Outcome.WIN:
        pl = risk * config.risk_reward_ratio
        if state.is_recovering:
            to_recover -= pl
            if to_recover <= 0:
                # Overshoot past the outstanding loss becomes the new profit base
                recovering = False
                cumulative = abs(to_recover)
                to_recover = 0.0
        else:
            cumulative += pl
    else:
        pl = -risk
        to_recover += abs(pl)
        recovering = True
        cumulative = 0.0

    balance_before = state.balance
    balance_after = balance_before + pl

    record = TradeRecord(
        sequence_number=len(state.trade_log) + 1,
        outcome=outcome,
        risk_amount=risk,
        risk_type_description=decision.description,
        lots=sizing.lots,
        required_margin=sizing.required_margin,
        stop_loss_pips=config.stop_loss_pips,
        take_profit_pips=sizing.take_profit_pips,
        risk_reward=config.risk_reward_label,
        profit_loss=pl,
        balance_before=balance_before,
        balance_after=balance_after,
        cumulative_running_pl=balance_after - config.initial_capital,
        cumulative_win_profit=cumulative,
        loss_to_recover=to_recover,
        recovery_mode_after=recovering,
    )

    state.balance = balance_after
    state.cumulative_win_profit = cumulative
    state.loss_to_recover = to_recover
    state.in_recovery_mode = recovering
    state.highest_balance = max(state.highest_balance, balance_after)
    state.lowest_balance = min(state.lowest_balance, balance_after)
    state.trade_log.append(record)

    log.debug(
        "Trade #%d %s: risk=%.2f pl=%.2f balance=%.2f recovery=%s",
        record.sequence_number,
        outcome.value,
        risk,
        pl,
        balance_after,
        recovering,
    )
    return record


def get_aggregate_stats(state: EngineState, config: StrategyConfig) -> AggregateStats:
    """Headline statistics for the session. Pure read."""
    outcomes = [t.outcome for t in state.trade_log]
    wins = sum(1 for o in outcomes if o is Outcome.WIN)
    return AggregateStats(
        win_count=wins,
        loss_count=len(outcomes) - wins,
        total_trades=len(outcomes),
        win_rate=metrics.win_rate(outcomes),
        total_pl=state.balance - config.initial_capital,
        max_drawdown=state.highest_balance - state.lowest_balance,
    )


class CompoundingCalculator:
    """
    One calculator session: a strategy config plus the state it drives.

    Instances are not thread-safe. A multi-user host should keep one
    calculator per user session.

    Example:
        calc = CompoundingCalculator(StrategyConfig(initial_capital=3000))
        plan = calc.next_trade()
        calc.record(Outcome.WIN)
        calc.stats().win_rate  # 100.0
    """

    def __init__(self, config: StrategyConfig | None = None) -> None:
        self.config = config or StrategyConfig()
        self.state = EngineState.fresh(self.config.initial_capital)

    @property
    def trades(self) -> list[TradeRecord]:
        return list(self.state.trade_log)

    def next_risk(self) -> RiskDecision:
        return compute_next_risk(self.state, self.config)

    def next_trade(self) -> TradePlan:
        """Risk decision and sizing for the trade that would be recorded next."""
        risk = self.next_risk()
        sizing = compute_position_sizing(risk.risk_amount, self.config, self.state.balance)
        return TradePlan(risk=risk, sizing=sizing)

    def record(self, outcome: Outcome | str) -> TradeRecord:
        return record_trade(self.state, self.config, Outcome.parse(outcome))

    def stats(self) -> AggregateStats:
        return get_aggregate_stats(self.state, self.config)

    def equity_curve(self) -> np.ndarray:
        """Starting capital followed by the balance after each trade."""
        return metrics.equity_curve(
            self.config.initial_capital, (t.profit_loss for t in self.state.trade_log)
        )

    def reset(self) -> None:
        """Discard the trade log and start again from the initial capital."""
        self.state = EngineState.fresh(self.config.initial_capital)
        log.info("Calculator reset to initial capital %.2f", self.config.initial_capital)

    def reconfigure(self, config: StrategyConfig) -> None:
        """
        Swap in new strategy parameters.

        With an empty trade log the state is reinitialised from the new
        capital. Once trades exist the balance carries over and only the
        parameters of future trades change.
        """
        self.config = config
        if not self.state.trade_log:
            self.state = EngineState.fresh(config.initial_capital)
            log.debug("Reinitialised empty session at capital %.2f", config.initial_capital)
