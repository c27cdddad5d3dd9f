"""Percentage/rep table for the four-week 5/3/1 wave.

Weeks 1-3 build intensity (5s, 3s, 5/3/1) and finish with an AMRAP set;
week 4 is a deload with no AMRAP.
"""

from __future__ import annotations

from typing import Any

from .errors import InvalidProgramParameter
from .models import SetPrescription
from .training_max import round_half_up

WEEKS: tuple[int, ...] = (1, 2, 3, 4)
MAIN_SET_NUMBERS: tuple[int, ...] = (1, 2, 3)
DELOAD_WEEK = 4

# week -> ((percentage, reps) per set)
_MAIN_TABLE: dict[int, tuple[tuple[int, int], ...]] = {
    1: ((65, 5), (75, 5), (85, 5)),
    2: ((70, 3), (80, 3), (90, 3)),
    3: ((75, 1), (85, 1), (95, 1)),
    4: ((40, 5), (50, 5), (60, 5)),
}

WARMUP_PRESCRIPTIONS: tuple[SetPrescription, ...] = (
    SetPrescription(percentage=40, reps=5, is_amrap=False),
    SetPrescription(percentage=50, reps=5, is_amrap=False),
    SetPrescription(percentage=60, reps=5, is_amrap=False),
)

BBB_PERCENTAGE = 30
BBB_REPS = 10
BBB_SET_COUNT = 5


def _require_index(value: Any, allowed: tuple[int, ...], *, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value not in allowed:
        raise InvalidProgramParameter(
            f"{field} must be one of {list(allowed)}, got {value!r}",
            field=field,
        )
    return value


def lookup(week: int, set_number: int) -> SetPrescription:
    """Return the main-set prescription for (week, set)."""
    week = _require_index(week, WEEKS, field="week")
    set_number = _require_index(set_number, MAIN_SET_NUMBERS, field="set")
    percentage, reps = _MAIN_TABLE[week][set_number - 1]
    return SetPrescription(
        percentage=percentage,
        reps=reps,
        is_amrap=set_number == MAIN_SET_NUMBERS[-1] and week != DELOAD_WEEK,
    )


def percent_of(training_max: float, percentage: int) -> int:
    return round_half_up(training_max * percentage / 100)


def working_weight(training_max: float, week: int, set_number: int) -> int:
    """Nominal (pre plate-rounding) weight for a main set."""
    return percent_of(training_max, lookup(week, set_number).percentage)
