"""Performance metrics over a sequence of recorded trades."""

from typing import Iterable

import numpy as np

from tradejournal.types import Outcome


__all__ = [
    "equity_curve",
    "peak_to_trough_drawdown",
    "win_rate",
]


def win_rate(outcomes: Iterable[Outcome]) -> float:
    """Percentage of winning trades, 0 for an empty history."""
    results = list(outcomes)
    if not results:
        return 0.0
    wins = sum(1 for o in results if o is Outcome.WIN)
    return wins / len(results) * 100.0


def equity_curve(starting_balance: float, profit_losses: Iterable[float]) -> np.ndarray:
    """Build the balance series: starting balance followed by each post-trade balance."""
    pls = np.fromiter((float(p) for p in profit_losses), dtype=np.float64)
    return float(starting_balance) + np.concatenate(([0.0], np.cumsum(pls)))


def peak_to_trough_drawdown(curve: np.ndarray) -> float:
    """
    Largest decline from a running peak, as a positive amount.

    Unlike highest-minus-lowest balance this ignores troughs that happen
    before the peak.
    """
    if curve.size == 0:
        return 0.0
    peaks = np.maximum.accumulate(curve)
    return float(np.max(peaks - curve))
