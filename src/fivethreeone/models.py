"""Value types shared by the program engine.

Everything here is immutable and carries no identity beyond its fields;
outputs are recomputed on demand from the lifter's maxes and plate inventory.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal

LiftKey = Literal["squat", "bench", "deadlift", "ohp"]
WeightUnit = Literal["pounds", "kilograms"]
SetType = Literal["warmup", "main", "bbb"]

CORE_LIFTS: tuple[LiftKey, ...] = ("squat", "bench", "deadlift", "ohp")
WEIGHT_UNITS: tuple[WeightUnit, ...] = ("pounds", "kilograms")
SET_TYPES: tuple[SetType, ...] = ("warmup", "main", "bbb")

_LIFT_ALIASES = {
    "overhead": "ohp",
    "overhead_press": "ohp",
    "press": "ohp",
}

UNIT_LABELS: dict[str, str] = {"pounds": "lbs", "kilograms": "kg"}


def normalize_lift_key(value: Any) -> str | None:
    """Return the canonical lift key for ``value`` or None when unknown."""
    if not isinstance(value, str):
        return None
    key = value.strip().lower().replace(" ", "_")
    key = _LIFT_ALIASES.get(key, key)
    return key if key in CORE_LIFTS else None


def normalize_weight(value: float) -> float | int:
    """Collapse integral floats to ints so serialized output stays stable."""
    rounded = round(float(value), 4)
    if rounded == int(rounded):
        return int(rounded)
    return rounded


@dataclass(frozen=True)
class LiftProfile:
    one_rep_max: float
    training_max: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "one_rep_max": normalize_weight(self.one_rep_max),
            "training_max": normalize_weight(self.training_max),
        }


@dataclass(frozen=True)
class PlateStock:
    """Plates of one denomination; ``pairs=None`` means unlimited supply."""

    denomination: float
    pairs: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"denomination": normalize_weight(self.denomination), "pairs": self.pairs}


@dataclass(frozen=True)
class PlateInventory:
    stocks: tuple[PlateStock, ...] = ()

    @property
    def denominations(self) -> tuple[float, ...]:
        return tuple(stock.denomination for stock in self.stocks)

    def __bool__(self) -> bool:
        return bool(self.stocks)

    def to_dict(self) -> list[dict[str, Any]]:
        return [stock.to_dict() for stock in self.stocks]


@dataclass(frozen=True)
class BarConfiguration:
    bar_weight: float
    unit: WeightUnit


@dataclass(frozen=True)
class PlateLoad:
    weight: float
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {"weight": normalize_weight(self.weight), "count": self.count}


@dataclass(frozen=True)
class PlateCalculation:
    total_weight: float
    plates: tuple[PlateLoad, ...]
    bar_weight: float

    @property
    def is_bar_only(self) -> bool:
        return not self.plates

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_weight": normalize_weight(self.total_weight),
            "plates": [plate.to_dict() for plate in self.plates],
            "bar_weight": normalize_weight(self.bar_weight),
        }


@dataclass(frozen=True)
class SetPrescription:
    percentage: int
    reps: int
    is_amrap: bool


@dataclass(frozen=True)
class WorkoutSet:
    set_number: int
    reps: int
    weight: float
    percentage: int
    is_amrap: bool
    set_type: SetType
    plates: PlateCalculation

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["weight"] = normalize_weight(self.weight)
        data["plates"] = self.plates.to_dict()
        return data


@dataclass(frozen=True)
class WeekData:
    week: int
    warmup_sets: tuple[WorkoutSet, ...]
    main_sets: tuple[WorkoutSet, ...]
    bbb_sets: tuple[WorkoutSet, ...]

    def all_sets(self) -> tuple[WorkoutSet, ...]:
        return self.warmup_sets + self.main_sets + self.bbb_sets

    def to_dict(self) -> dict[str, Any]:
        return {
            "week": self.week,
            "warmup_sets": [s.to_dict() for s in self.warmup_sets],
            "main_sets": [s.to_dict() for s in self.main_sets],
            "bbb_sets": [s.to_dict() for s in self.bbb_sets],
        }


@dataclass(frozen=True)
class CycleData:
    weeks: tuple[WeekData, ...] = field(default_factory=tuple)

    def week(self, number: int) -> WeekData:
        for week in self.weeks:
            if week.week == number:
                return week
        raise KeyError(number)

    def to_dict(self) -> dict[str, Any]:
        return {"weeks": [week.to_dict() for week in self.weeks]}
