from __future__ import annotations

import pytest

from fivethreeone.models import LiftProfile
from fivethreeone.training_max import lift_profile, round_half_up, training_max


@pytest.mark.parametrize(
    ("one_rep_max", "expected"),
    [(100, 90), (200, 180), (315, 284), (105, 95), (0, 0), (52.5, 47)],
)
def test_training_max_is_ninety_percent_rounded(one_rep_max: float, expected: int) -> None:
    assert training_max(one_rep_max) == expected


def test_round_half_up_rounds_halves_upward() -> None:
    assert round_half_up(94.5) == 95
    assert round_half_up(94.49) == 94
    assert round_half_up(0.5) == 1


def test_lift_profile_derives_training_max() -> None:
    assert lift_profile(300) == LiftProfile(one_rep_max=300, training_max=270)


def test_lift_profile_honors_override() -> None:
    profile = lift_profile(300, 250)
    assert profile.one_rep_max == 300
    assert profile.training_max == 250
    assert profile.to_dict() == {"one_rep_max": 300, "training_max": 250}
