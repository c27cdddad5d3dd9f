"""Sanity checks for manually entered workout data."""

from __future__ import annotations

from typing import Any

from .percentages import MAIN_SET_NUMBERS, WEEKS


def _is_index(value: Any, allowed: tuple[int, ...]) -> bool:
    # bool and float compare equal to ints, so check the type first.
    return not isinstance(value, bool) and isinstance(value, int) and value in allowed


def validate_program_rules(*, week: int, set_number: int, weight: float, training_max: float) -> bool:
    """Return False when the entry breaks 5/3/1 rules.

    Only the AMRAP slot (set 3) may exceed the training max. This does not
    gate generation; it is for callers validating logged workouts.
    """
    if not _is_index(week, WEEKS):
        return False
    if not _is_index(set_number, MAIN_SET_NUMBERS):
        return False
    if set_number < MAIN_SET_NUMBERS[-1] and weight > training_max:
        return False
    return True
