"""Position sizing and margin primitives."""

STANDARD_LOT_UNITS = 100_000


def lots_for_risk(
    *,
    risk_amount: float,
    stop_loss_pips: float,
    pip_value_per_lot: float,
) -> float:
    """
    Calculate position size in standard lots for a given cash risk.

    Position size is calculated as: risk_amount / (stop_loss_pips * pip_value_per_lot)
    No clamping is applied, so a negative risk gives negative lots.

    Args:
        risk_amount: Amount of capital to risk on the trade
        stop_loss_pips: Stop distance in pips
        pip_value_per_lot: Account-currency value of one pip for one lot

    Returns:
        Lots, or +inf when the stop distance or pip value is zero
    """
    denom = float(stop_loss_pips) * float(pip_value_per_lot)
    if denom == 0.0:
        return float("inf")
    return float(risk_amount) / denom


def notional_value(lots: float) -> float:
    """Base-currency units controlled by *lots* standard lots."""
    return float(lots) * STANDARD_LOT_UNITS


def required_margin(notional: float, leverage: float) -> float:
    """Capital reserved to hold *notional* at the given leverage (+inf at zero leverage)."""
    if float(leverage) == 0.0:
        return float("inf")
    return float(notional) / float(leverage)


def margin_level(balance: float, margin: float) -> float:
    """
    Equity-to-margin ratio as a percentage.

    Defined as +inf when no margin is required, which is what brokers
    display for a flat account.
    """
    if margin == 0:
        return float("inf")
    return float(balance) / float(margin) * 100.0


def max_lots_available(balance: float, leverage: float) -> float:
    """Largest position the balance can hold at the given leverage."""
    return float(balance) * float(leverage) / STANDARD_LOT_UNITS
