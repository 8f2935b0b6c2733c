import csv
from pathlib import Path
from typing import Any, Iterable

from tradejournal.compounding.types import TradeRecord


TRADE_COLUMNS = [
    "number",
    "result",
    "risk_amount",
    "risk_type",
    "lots",
    "required_margin",
    "stop_loss_pips",
    "take_profit_pips",
    "risk_reward",
    "pl",
    "balance_after",
    "running_pl",
]


def trade_rows(records: Iterable[TradeRecord]) -> list[dict[str, Any]]:
    """Trade history rows as displayed: money to 2 dp, lots to 2 dp, pips whole."""
    return [
        {
            "number": t.sequence_number,
            "result": t.outcome.value,
            "risk_amount": round(t.risk_amount, 2),
            "risk_type": t.risk_type_description,
            "lots": round(t.lots, 2),
            "required_margin": round(t.required_margin, 2),
            "stop_loss_pips": t.stop_loss_pips,
            "take_profit_pips": round(t.take_profit_pips),
            "risk_reward": t.risk_reward,
            "pl": round(t.profit_loss, 2),
            "balance_after": round(t.balance_after, 2),
            "running_pl": round(t.cumulative_running_pl, 2),
        }
        for t in records
    ]


def write_trades_csv(path: Path, records: Iterable[TradeRecord]) -> None:
    """Write the trade history table.

    Output schema:
    number,result,risk_amount,risk_type,lots,required_margin,
    stop_loss_pips,take_profit_pips,risk_reward,pl,balance_after,running_pl
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=TRADE_COLUMNS)
        w.writeheader()
        w.writerows(trade_rows(records))
