# examples/compounding_session.py
"""Replay a WIN/LOSS sequence through the compounding calculator."""
import logging
import sys
from pathlib import Path

from tradejournal import CompoundingCalculator, Outcome
from tradejournal.compounding import SettingsStore, StrategyConfig, write_trades_csv
from tradejournal.metrics import peak_to_trough_drawdown

log = logging.getLogger(__name__)


def main(outcomes: list[str], out_dir: Path) -> None:
    store = SettingsStore(out_dir)
    config = store.load() or StrategyConfig()
    store.save(config)

    calc = CompoundingCalculator(config)
    for raw in outcomes:
        plan = calc.next_trade()
        log.info(
            "Next: risk $%.2f (%s), %.2f lots, margin $%.2f",
            plan.risk.risk_amount,
            plan.risk.description,
            plan.sizing.lots,
            plan.sizing.required_margin,
        )
        trade = calc.record(Outcome.parse(raw))
        log.info("#%d %s -> balance $%.2f", trade.sequence_number, trade.outcome.value, trade.balance_after)

    stats = calc.stats()
    log.info(
        "%d trades, win rate %.1f%%, total P&L $%.2f, max drawdown $%.2f (peak-to-trough $%.2f)",
        stats.total_trades,
        stats.win_rate,
        stats.total_pl,
        stats.max_drawdown,
        peak_to_trough_drawdown(calc.equity_curve()),
    )
    write_trades_csv(out_dir / "trades.csv", calc.trades)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    main(sys.argv[1:] or ["WIN", "LOSS", "WIN"], Path("compounding_output"))
