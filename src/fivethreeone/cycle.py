"""Four-week cycle generation for one lift and for the full program."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .errors import InvalidProgramParameter
from .models import CORE_LIFTS, CycleData, LiftProfile, WeekData
from .percentages import WEEKS
from .plates import as_inventory, bar_configuration
from .sets import bbb_sets, main_sets, warmup_sets

logger = logging.getLogger(__name__)


def generate_week(training_max: float, week: int, inventory: Any, bar_weight: float) -> WeekData:
    inventory = as_inventory(inventory)
    return WeekData(
        week=week,
        warmup_sets=warmup_sets(training_max, inventory, bar_weight),
        main_sets=main_sets(training_max, week, inventory, bar_weight),
        bbb_sets=bbb_sets(training_max, inventory, bar_weight),
    )


def generate_cycle(training_max: float, inventory: Any, bar_weight: float) -> CycleData:
    inventory = as_inventory(inventory)
    return CycleData(
        weeks=tuple(generate_week(training_max, week, inventory, bar_weight) for week in WEEKS)
    )


def generate_all_lifts(
    profiles: Mapping[str, LiftProfile],
    inventory: Any,
    unit: str,
    *,
    bar_weight: float | None = None,
) -> dict[str, CycleData]:
    """Generate a cycle for each core lift, keyed in CORE_LIFTS order.

    The bar weight follows ``unit`` (45 lb / 20 kg) unless overridden.
    Raises InvalidProgramParameter when a core lift has no profile.
    """
    missing = [lift for lift in CORE_LIFTS if lift not in profiles]
    if missing:
        raise InvalidProgramParameter(
            f"missing lift profiles: {', '.join(missing)}", field="profiles"
        )
    bar = bar_configuration(unit, bar_weight).bar_weight
    inventory = as_inventory(inventory)

    cycles: dict[str, CycleData] = {}
    for lift in CORE_LIFTS:
        profile = profiles[lift]
        cycles[lift] = generate_cycle(profile.training_max, inventory, bar)
        logger.debug(
            "Generated %s cycle (training max %s)",
            lift,
            profile.training_max,
            extra={"fto_lift": lift, "fto_training_max": profile.training_max},
        )
    return cycles
