from .ranges import (
    ExpectedTargets,
    RangeData,
    RangeMethod,
    RangeQuality,
    SDLevels,
    calculate_range,
    convert_to_pips,
    expected_targets,
    format_price,
    pair_recommendations,
    pip_size,
    range_position_size,
    sd_levels,
    sd_levels_from_equilibrium,
    validate_range_quality,
)
from .sessions import (
    KILLZONES,
    Killzone,
    ProtractionState,
    ProtractionType,
    SessionSnapshot,
    protraction_state,
    range_phase,
    session_snapshot,
)

__all__ = [
    "ExpectedTargets",
    "KILLZONES",
    "Killzone",
    "ProtractionState",
    "ProtractionType",
    "RangeData",
    "RangeMethod",
    "RangeQuality",
    "SDLevels",
    "SessionSnapshot",
    "calculate_range",
    "convert_to_pips",
    "expected_targets",
    "format_price",
    "pair_recommendations",
    "pip_size",
    "protraction_state",
    "range_phase",
    "range_position_size",
    "sd_levels",
    "sd_levels_from_equilibrium",
    "session_snapshot",
    "validate_range_quality",
]
