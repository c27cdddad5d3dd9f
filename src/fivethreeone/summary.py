"""Strength summary and planned-volume reporting over generated cycles."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Mapping
from typing import Any

from .models import CORE_LIFTS, SET_TYPES, CycleData, LiftProfile, normalize_weight
from .progression import next_training_max


def strength_summary(profiles: Mapping[str, LiftProfile]) -> list[dict[str, Any]]:
    """One row per core lift present in ``profiles``, in CORE_LIFTS order."""
    rows: list[dict[str, Any]] = []
    for lift in CORE_LIFTS:
        profile = profiles.get(lift)
        if profile is None:
            continue
        pct = None
        if profile.one_rep_max > 0:
            pct = round(profile.training_max / profile.one_rep_max * 100, 1)
        rows.append(
            {
                "lift": lift,
                "one_rep_max": normalize_weight(profile.one_rep_max),
                "training_max": normalize_weight(profile.training_max),
                "next_training_max": normalize_weight(next_training_max(profile.training_max, lift)),
                "training_max_pct_of_one_rep_max": pct,
            }
        )
    return rows


def cycle_volume(cycle: CycleData) -> dict[str, Any]:
    """Planned tonnage (weight x reps) by week and set type.

    AMRAP sets count at their minimum prescribed reps.
    """
    by_week: dict[int, float] = {}
    by_set_type: dict[str, float] = defaultdict(float)
    for week in cycle.weeks:
        week_total = 0.0
        for workout_set in week.all_sets():
            tonnage = workout_set.weight * workout_set.reps
            by_set_type[workout_set.set_type] += tonnage
            week_total += tonnage
        by_week[week.week] = week_total

    return {
        "by_week": {week: normalize_weight(total) for week, total in sorted(by_week.items())},
        "by_set_type": {
            set_type: normalize_weight(by_set_type.get(set_type, 0.0)) for set_type in SET_TYPES
        },
        "total": normalize_weight(sum(by_week.values())),
    }
