"""Canonical shift slot helpers for the board."""
from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

__all__ = [
    "MORNING",
    "AFTERNOON",
    "EVENING",
    "OVERNIGHT",
    "ALL_SLOTS",
    "DAY_SLOTS",
    "NIGHT_SLOTS",
    "PERIODS",
    "SLOT_HOURS",
    "PRESETS",
    "hours_for_slot",
    "is_night_slot",
    "normalize_slots",
    "preset_slots",
    "slots_for_period",
]


MORNING = "07-13"
AFTERNOON = "13-19"
EVENING = "19-00"
OVERNIGHT = "00-07"

# Display order of the board columns.
ALL_SLOTS: Tuple[str, ...] = (MORNING, AFTERNOON, EVENING, OVERNIGHT)
DAY_SLOTS: FrozenSet[str] = frozenset({MORNING, AFTERNOON})
NIGHT_SLOTS: FrozenSet[str] = frozenset({EVENING, OVERNIGHT})

PERIODS: Dict[str, FrozenSet[str]] = {"day": DAY_SLOTS, "night": NIGHT_SLOTS}

# The four slots split 24 hours evenly, whatever their wall-clock length.
SLOT_HOURS = 6

PRESETS: Dict[str, Tuple[str, ...]] = {
    "day12": (MORNING, AFTERNOON),
    "night12": (EVENING, OVERNIGHT),
    "full24": ALL_SLOTS,
    "clear": (),
}


def hours_for_slot(slot: Optional[str]) -> int:
    """Return counted hours for *slot*. Unknown slots are worth nothing."""

    return SLOT_HOURS if slot in ALL_SLOTS else 0


def is_night_slot(slot: str) -> bool:
    return slot in NIGHT_SLOTS


def slots_for_period(period: str) -> FrozenSet[str]:
    """Return the slot set of a ``day``/``night`` half of the date."""

    try:
        return PERIODS[period]
    except KeyError:
        raise ValueError(f"Unknown period {period!r}; expected 'day' or 'night'") from None


def normalize_slots(slots: Iterable[str]) -> List[str]:
    """Validate *slots* and return them deduplicated in board order.

    Raises ``ValueError`` on anything outside the fixed slot set.
    """

    requested = set()
    for slot in slots:
        value = str(slot).strip()
        if value not in ALL_SLOTS:
            raise ValueError(f"Unknown shift slot {slot!r}")
        requested.add(value)
    return [slot for slot in ALL_SLOTS if slot in requested]


def preset_slots(name: str) -> List[str]:
    try:
        return list(PRESETS[name])
    except KeyError:
        raise ValueError(f"Unknown preset {name!r}") from None
