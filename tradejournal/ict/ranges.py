"""ICT range analysis: pip conversion, range validation and SD projections."""

from dataclasses import dataclass
from enum import Enum


__all__ = [
    "ExpectedTargets",
    "RangeData",
    "RangeMethod",
    "RangeQuality",
    "SDLevels",
    "calculate_range",
    "convert_to_pips",
    "expected_targets",
    "format_price",
    "pair_recommendations",
    "pip_size",
    "range_position_size",
    "sd_levels",
    "sd_levels_from_equilibrium",
    "validate_range_quality",
]


MIN_RANGE_PIPS = 15.0
MAX_RANGE_PIPS = 60.0


class RangeMethod(str, Enum):
    """How the reference range was drawn."""
    CBDR = "cbdr"    # Central bank dealers range
    ASIAN = "asian"
    FLOUT = "flout"  # CBDR + Asian range combined


@dataclass(frozen=True)
class RangeData:
    high: float
    low: float
    range: float
    equilibrium: float
    pips: float
    is_valid: bool
    invalidation_reason: str | None = None


@dataclass(frozen=True)
class SDLevels:
    """Standard deviation projections one to four range-widths out."""
    sd1_high: float
    sd1_low: float
    sd2_high: float
    sd2_low: float
    sd3_high: float
    sd3_low: float
    sd4_high: float
    sd4_low: float

    def highs(self) -> list[float]:
        return [self.sd1_high, self.sd2_high, self.sd3_high, self.sd4_high]

    def lows(self) -> list[float]:
        return [self.sd1_low, self.sd2_low, self.sd3_low, self.sd4_low]


@dataclass(frozen=True)
class RangeQuality:
    is_valid: bool
    score: int
    recommendations: list[str]


@dataclass(frozen=True)
class ExpectedTargets:
    """Historical hit rates of the primary, secondary and extension targets."""
    primary: float
    secondary: float
    extension: float


def _is_jpy(pair: str) -> bool:
    return "JPY" in pair.upper()


def pip_size(pair: str) -> float:
    """Price increment of one pip: 0.01 for JPY pairs, 0.0001 otherwise."""
    return 0.01 if _is_jpy(pair) else 0.0001


def convert_to_pips(price_difference: float, pair: str) -> float:
    """Convert a price difference to pips for *pair*."""
    return price_difference * (100 if _is_jpy(pair) else 10000)


def format_price(price: float, pair: str) -> str:
    """Render a price with the pair's quoting precision."""
    decimals = 3 if _is_jpy(pair) else 5
    return f"{price:.{decimals}f}"


def calculate_range(high: float, low: float, pair: str) -> RangeData:
    """
    Measure a high/low range and check it is tradeable.

    A range is valid between 15 and 60 pips inclusive.

    Raises:
        ValueError: if high is not above low
    """
    if high <= low:
        raise ValueError(f"Range high must be greater than low (high={high}, low={low})")

    size = high - low
    pips = convert_to_pips(size, pair)

    reason = None
    if pips < MIN_RANGE_PIPS:
        reason = "Range too small (<15 pips) - insufficient liquidity"
    elif pips > MAX_RANGE_PIPS:
        reason = "Range too large (>60 pips) - high volatility, avoid trading"

    return RangeData(
        high=high,
        low=low,
        range=size,
        equilibrium=(high + low) / 2,
        pips=pips,
        is_valid=reason is None,
        invalidation_reason=reason,
    )


def sd_levels(range_data: RangeData) -> SDLevels:
    """Project whole range-widths above the high and below the low."""
    high, low, size = range_data.high, range_data.low, range_data.range
    return SDLevels(
        sd1_high=high + size,
        sd1_low=low - size,
        sd2_high=high + size * 2,
        sd2_low=low - size * 2,
        sd3_high=high + size * 3,
        sd3_low=low - size * 3,
        sd4_high=high + size * 4,
        sd4_low=low - size * 4,
    )


def sd_levels_from_equilibrium(range_data: RangeData) -> SDLevels:
    """Project half-range steps from the equilibrium (Flout method)."""
    eq = range_data.equilibrium
    half = (range_data.high - range_data.low) / 2
    return SDLevels(
        sd1_high=eq + half,
        sd1_low=eq - half,
        sd2_high=eq + half * 2,
        sd2_low=eq - half * 2,
        sd3_high=eq + half * 3,
        sd3_low=eq - half * 3,
        sd4_high=eq + half * 4,
        sd4_low=eq - half * 4,
    )


def validate_range_quality(range_data: RangeData, method: RangeMethod, pair: str) -> RangeQuality:
    """
    Score a range for the given drawing method.

    Scoring:
      - method sweet spot: CBDR 20-40 (+40), Asian 20-30 (+35), Flout 30-50 (+30)
      - penalties for ranges outside the sweet spot
      - +20 when the range passes the general 15-60 pip check
      - +10 for wide GBPUSD or tight USDJPY ranges

    A score of 50 or more is tradeable. The reported score is clamped to
    [0, 100]; validity uses the raw score.
    """
    method = RangeMethod(method)
    pips = convert_to_pips(range_data.range, pair)
    score = 0
    recommendations: list[str] = []

    if method is RangeMethod.CBDR:
        if 20 <= pips <= 40:
            score += 40
        elif pips > 40:
            recommendations.append("CBDR range too wide - consider Asian Range or Flout")
            score -= 20
        else:
            recommendations.append("CBDR range too narrow - wait for better setup")
            score -= 10
    elif method is RangeMethod.ASIAN:
        if 20 <= pips <= 30:
            score += 35
        elif pips > 30:
            recommendations.append("Asian range wide - expect choppy London session")
            score -= 15
    else:
        if 30 <= pips <= 50:
            score += 30
        elif pips > 50:
            recommendations.append("Flout range very wide - high volatility expected")
            score -= 10

    if range_data.is_valid:
        score += 20

    if pair == "GBPUSD" and pips > 35:
        score += 10
        recommendations.append("GBP/USD volatility within normal range")
    elif pair == "USDJPY" and pips < 25:
        score += 10
        recommendations.append("USD/JPY tight range - good for scalping")

    if score >= 70:
        recommendations.append("High-quality range - proceed with full position size")
    elif score >= 50:
        recommendations.append("Moderate quality range - consider reduced position size")
    else:
        recommendations.append("Low-quality range - avoid or wait for better setup")

    return RangeQuality(
        is_valid=score >= 50,
        score=max(0, min(100, score)),
        recommendations=recommendations,
    )


# Only London session statistics are tracked; other sessions reuse them.
_LONDON_TARGETS = {
    RangeMethod.CBDR: ExpectedTargets(primary=0.75, secondary=0.45, extension=0.25),
    RangeMethod.ASIAN: ExpectedTargets(primary=0.70, secondary=0.40, extension=0.20),
    RangeMethod.FLOUT: ExpectedTargets(primary=0.65, secondary=0.35, extension=0.15),
}


def expected_targets(method: RangeMethod) -> ExpectedTargets:
    return _LONDON_TARGETS[RangeMethod(method)]


_PAIR_RECOMMENDATIONS: dict[str, dict[RangeMethod, list[str]]] = {
    "EURUSD": {
        RangeMethod.CBDR: [
            "EUR/USD CBDR sweet spot: 20-30 pips",
            "Use 20-30 pip stops for optimal risk management",
            "Target 2-3 SD levels in London session",
            "Check COT report for commercial bias alignment",
        ],
        RangeMethod.ASIAN: [
            "Asian Range: 20-30 pips ideal for EUR/USD",
            "Lower volatility allows for tighter stops",
            "Sets up clean Judas Swings in London",
            "Align with Market Profile for confluence",
        ],
        RangeMethod.FLOUT: [
            "Flout Range: 20-40 pips for equilibrium analysis",
            "Project to London session for 4 SD fills",
            "Use for confluence with CBDR analysis",
            "Monitor EUR crosses for additional confirmation",
        ],
    },
    "GBPUSD": {
        RangeMethod.CBDR: [
            "GBP/USD CBDR: 30-40 pips due to higher volatility",
            "Use wider stops (40+ pips) for GBP pairs",
            "Expect stronger moves during London session",
            "Monitor Brexit-related news for volatility spikes",
        ],
        RangeMethod.ASIAN: [
            "Asian Range: 30-40 pips for GBP/USD",
            "Wider ranges common due to overnight volatility",
            "Strong London reversals expected",
            "Check UK economic calendar for data releases",
        ],
        RangeMethod.FLOUT: [
            "Flout Range: 30-50 pips for GBP pairs",
            "Higher volatility requires wider targets",
            "Good for confluence with other methods",
            "Monitor GBP crosses for correlation",
        ],
    },
}


def pair_recommendations(pair: str, method: RangeMethod) -> list[str]:
    """Instructor notes for *pair*; a generic checklist for pairs without notes."""
    method = RangeMethod(method)
    notes = _PAIR_RECOMMENDATIONS.get(pair, {}).get(method)
    if notes is not None:
        return list(notes)
    return [
        f"{method.value.upper()} analysis for {pair}",
        "Use standard range guidelines",
        "Monitor for confluence with other methods",
        "Adjust position size based on volatility",
    ]


def range_position_size(
    account_balance: float,
    risk_percent: float,
    stop_loss_distance: float,
    pair: str,
) -> float:
    """
    Lots for a range trade, rounded to 2 dp.

    Uses a simplified pip value of 1 for JPY pairs and 10 otherwise.
    Returns 0.0 when the stop distance is zero.
    """
    risk_amount = account_balance * (risk_percent / 100)
    stop_pips = convert_to_pips(stop_loss_distance, pair)
    pip_value = 1 if _is_jpy(pair) else 10
    denom = stop_pips * pip_value
    if denom == 0:
        return 0.0
    return round(risk_amount / denom, 2)
