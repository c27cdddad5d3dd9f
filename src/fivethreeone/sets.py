"""Warm-up, main and BBB set generators for one lift in one week."""

from __future__ import annotations

from typing import Any

from .models import SetPrescription, SetType, WorkoutSet
from .percentages import (
    BBB_PERCENTAGE,
    BBB_REPS,
    BBB_SET_COUNT,
    MAIN_SET_NUMBERS,
    WARMUP_PRESCRIPTIONS,
    lookup,
    percent_of,
)
from .plates import as_inventory, resolve_plates


def _build_set(
    set_number: int,
    prescription: SetPrescription,
    set_type: SetType,
    training_max: float,
    inventory: Any,
    bar_weight: float,
) -> WorkoutSet:
    calculation = resolve_plates(percent_of(training_max, prescription.percentage), bar_weight, inventory)
    return WorkoutSet(
        set_number=set_number,
        reps=prescription.reps,
        weight=calculation.total_weight,
        percentage=prescription.percentage,
        is_amrap=prescription.is_amrap,
        set_type=set_type,
        plates=calculation,
    )


def warmup_sets(training_max: float, inventory: Any, bar_weight: float) -> tuple[WorkoutSet, ...]:
    inventory = as_inventory(inventory)
    return tuple(
        _build_set(idx, prescription, "warmup", training_max, inventory, bar_weight)
        for idx, prescription in enumerate(WARMUP_PRESCRIPTIONS, start=1)
    )


def main_sets(
    training_max: float, week: int, inventory: Any, bar_weight: float
) -> tuple[WorkoutSet, ...]:
    """Working sets for ``week``; the displayed weight is the plate-resolved load."""
    prescriptions = [lookup(week, set_number) for set_number in MAIN_SET_NUMBERS]
    inventory = as_inventory(inventory)
    return tuple(
        _build_set(set_number, prescription, "main", training_max, inventory, bar_weight)
        for set_number, prescription in zip(MAIN_SET_NUMBERS, prescriptions)
    )


def bbb_sets(training_max: float, inventory: Any, bar_weight: float) -> tuple[WorkoutSet, ...]:
    """Boring But Big: 5x10 at a fixed 30% of training max, never deloaded."""
    inventory = as_inventory(inventory)
    prescription = SetPrescription(percentage=BBB_PERCENTAGE, reps=BBB_REPS, is_amrap=False)
    return tuple(
        _build_set(set_number, prescription, "bbb", training_max, inventory, bar_weight)
        for set_number in range(1, BBB_SET_COUNT + 1)
    )
