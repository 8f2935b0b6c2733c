"""Strategy taxonomy used to tag journal screenshots."""

STUDY_BUCKETS: dict[str, tuple[str, ...]] = {
    "BIAS": (
        "M", "A1", "A2", "W", "V1", "V2", "ABS", "3XADR", "L1_13_50", "L2_50_200",
    ),
    "SETUPS": (
        "BOX_SETUPS", "ANCHORS", "ASIAN_RANGE", "HARMONICS_P1", "RESET_SAFETY", "RESETS",
    ),
    "PATTERNS": (
        "1H_50_50_BOUNCE", "2ND_LEG_HALF_BAT", "3_DRIVES_3_DAY", "3_HITS_TRADE",
        "HALF_BATS", "HEAD_SHOULDERS", "ID_50", "LONDON_PATTERNS",
        "TYPE1", "TYPE2", "TYPE3", "TYPE4", "W&M_PATTERNS",
    ),
    "ENTRYS": (
        "RAILROAD_TRACKS", "CORD_OF_WOODS", "EVENING_STAR", "MORNING_STAR", "SHIFT_CANDLE",
    ),
}

SESSION_TIMINGS: tuple[str, ...] = ("Asian", "London", "NY", "Gap Times", "Brinks")

TRADE_TYPES: tuple[str, ...] = ("Type 1", "Type 2", "Type 3")


def bucket_for(strategy_type: str) -> str | None:
    """Study bucket a strategy type belongs to, or ``None`` if it is not catalogued."""
    for bucket, members in STUDY_BUCKETS.items():
        if strategy_type in members:
            return bucket
    return None
