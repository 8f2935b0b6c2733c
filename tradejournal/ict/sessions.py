"""ICT session clock.

Classifies a moment in time by New York wall-clock minutes: which killzone
is open, which reference range is forming, and whether the midnight
protraction window is active. All functions are pure; callers poll them
with the current time (typically once a minute, every 30 seconds while a
protraction window is active).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from tradejournal.time_utils import minutes_since_midnight, now_utc, to_new_york


__all__ = [
    "KILLZONES",
    "Killzone",
    "ProtractionState",
    "ProtractionType",
    "SessionSnapshot",
    "protraction_state",
    "range_phase",
    "session_snapshot",
]


MARKET_CLOSED = "Market Closed"
ACTIVE_REFRESH_SECONDS = 30
IDLE_REFRESH_SECONDS = 60


@dataclass(frozen=True)
class Killzone:
    name: str
    start: float  # minutes from NY midnight, inclusive
    end: float    # exclusive
    next: str

    def contains(self, minutes: float) -> bool:
        return self.start <= minutes < self.end


# Ordered: the first match wins where killzones overlap (NY Open / London Close).
KILLZONES: tuple[Killzone, ...] = (
    Killzone("Asian Range", 19 * 60, 24 * 60, "London Open"),
    Killzone("London Open", 2 * 60, 5 * 60, "NY Open"),
    Killzone("NY Open", 8.5 * 60, 11 * 60, "London Close"),
    Killzone("London Close", 10 * 60, 12 * 60, "Asian Range"),
)


class ProtractionType(str, Enum):
    NORMAL = "normal"
    DELAYED = "delayed"
    NONE = "none"


@dataclass(frozen=True)
class ProtractionState:
    type: ProtractionType
    phase: str
    next_action: str
    minutes_until_next: float
    is_active: bool

    @property
    def refresh_seconds(self) -> int:
        """How often a clock display should re-poll while in this state."""
        return ACTIVE_REFRESH_SECONDS if self.is_active else IDLE_REFRESH_SECONDS


IDLE_PROTRACTION = ProtractionState(
    type=ProtractionType.NONE,
    phase="Waiting",
    next_action="Monitor for setup",
    minutes_until_next=0,
    is_active=False,
)


@dataclass(frozen=True)
class SessionSnapshot:
    current_session: str
    next_killzone: str
    range_phase: str
    protraction_phase: str
    protraction: ProtractionState
    ny_time: datetime


def _in_watch_window(minutes: float) -> bool:
    return minutes >= 23.5 * 60 or minutes < 4 * 60


def range_phase(minutes: float) -> str:
    """Which reference range is forming at *minutes* past NY midnight."""
    if 14 * 60 <= minutes < 20 * 60:
        return "CBDR Forming"
    if minutes >= 19 * 60 or minutes < 2 * 60:
        return "Asian Range Active"
    # Shadowed by the two rules above for every minute of the day.
    if 15 * 60 <= minutes < 24 * 60:
        return "Flout Session"
    return "Analysis Needed"


def protraction_state(minutes: float) -> ProtractionState:
    """
    Midnight protraction phase at *minutes* past NY midnight.

    Normal protraction runs 23:30-02:00 (pre-midnight setup, the Judas
    swing window up to 00:15, then pre-London setup). Delayed protraction
    covers the London IPDA window 02:00-04:00.
    """
    if minutes >= 23.5 * 60 or minutes < 2 * 60:
        if minutes >= 23.5 * 60:
            return ProtractionState(
                type=ProtractionType.NORMAL,
                phase="Pre-Midnight Setup",
                next_action="Watch for Judas swing at midnight",
                minutes_until_next=24 * 60 - minutes,
                is_active=True,
            )
        if minutes < 15:
            return ProtractionState(
                type=ProtractionType.NORMAL,
                phase="Judas Swing Window",
                next_action="Confirm swing and prepare for reversal",
                minutes_until_next=15 - minutes,
                is_active=True,
            )
        return ProtractionState(
            type=ProtractionType.NORMAL,
            phase="Pre-London Setup",
            next_action="Prepare for London open entry",
            minutes_until_next=2 * 60 - minutes,
            is_active=True,
        )

    if 2 * 60 <= minutes < 4 * 60:
        return ProtractionState(
            type=ProtractionType.DELAYED,
            phase="London IPDA Window",
            next_action="Watch for delayed protraction",
            minutes_until_next=4 * 60 - minutes,
            is_active=True,
        )

    return IDLE_PROTRACTION


def session_snapshot(at: datetime | None = None) -> SessionSnapshot:
    """Classify *at* (default: now). Naive datetimes are taken as UTC."""
    ny = to_new_york(at if at is not None else now_utc())
    minutes = minutes_since_midnight(ny)

    current, next_kz = MARKET_CLOSED, "Asian Range"
    for kz in KILLZONES:
        if kz.contains(minutes):
            current, next_kz = kz.name, kz.next
            break

    watching = _in_watch_window(minutes)
    return SessionSnapshot(
        current_session=current,
        next_killzone=next_kz,
        range_phase=range_phase(minutes),
        protraction_phase="ACTIVE WATCH" if watching else "Standby",
        protraction=protraction_state(minutes) if watching else IDLE_PROTRACTION,
        ny_time=ny,
    )
