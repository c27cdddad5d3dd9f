"""Training max derivation (90% of a true 1RM)."""

from __future__ import annotations

import math

from .models import LiftProfile

TRAINING_MAX_RATIO = 0.9


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (283.5 -> 284)."""
    return int(math.floor(float(value) + 0.5))


def training_max(one_rep_max: float) -> int:
    return round_half_up(one_rep_max * TRAINING_MAX_RATIO)


def lift_profile(one_rep_max: float, training_max_override: float | None = None) -> LiftProfile:
    """Build a LiftProfile, deriving the training max unless overridden."""
    tm = training_max(one_rep_max) if training_max_override is None else training_max_override
    return LiftProfile(one_rep_max=one_rep_max, training_max=tm)
