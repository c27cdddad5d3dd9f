"""Cycle-to-cycle training max progression."""

from __future__ import annotations

from collections.abc import Mapping

from .errors import InvalidProgramParameter
from .models import LiftProfile, normalize_lift_key

# Lower-body lifts progress faster than upper-body lifts.
INCREMENTS: dict[str, float] = {
    "squat": 10,
    "deadlift": 10,
    "bench": 5,
    "ohp": 5,
}


def weight_increment(lift: str) -> float:
    key = normalize_lift_key(lift)
    if key is None:
        raise InvalidProgramParameter(f"unknown lift: {lift!r}", field="lift")
    return INCREMENTS[key]


def next_training_max(current_training_max: float, lift: str) -> float:
    """Training max for the next cycle; applied once per completed cycle."""
    return current_training_max + weight_increment(lift)


def advance_profiles(profiles: Mapping[str, LiftProfile]) -> dict[str, LiftProfile]:
    advanced: dict[str, LiftProfile] = {}
    for lift, profile in profiles.items():
        advanced[lift] = LiftProfile(
            one_rep_max=profile.one_rep_max,
            training_max=next_training_max(profile.training_max, lift),
        )
    return advanced
