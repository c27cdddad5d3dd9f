"""Typed input contract for program generation (program.request v1).

Callers (API layers, importers, the CLI) validate raw payloads into a
ProgramRequestV1 and hand it to ``build_program``; the engine itself never
sees untyped maps.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from .cycle import generate_all_lifts
from .models import CORE_LIFTS, WEIGHT_UNITS, normalize_lift_key, normalize_weight
from .plates import bar_weight_for_unit, build_inventory, default_plates
from .summary import cycle_volume
from .training_max import lift_profile

CONTRACT_VERSION_V1 = "program.request.v1"


def _normalize_lift_map(values: dict[str, Any], *, field_name: str) -> dict[str, float]:
    normalized: dict[str, float] = {}
    for raw_key, raw_value in values.items():
        key = normalize_lift_key(raw_key)
        if key is None:
            allowed = ", ".join(CORE_LIFTS)
            raise ValueError(f"{field_name} has unknown lift {raw_key!r}; expected one of: {allowed}")
        if key in normalized:
            raise ValueError(f"{field_name} lists {key} more than once")
        if isinstance(raw_value, bool):
            raise ValueError(f"{field_name}.{key} must be a number")
        try:
            value = float(raw_value)
        except (TypeError, ValueError):
            raise ValueError(f"{field_name}.{key} must be a number") from None
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"{field_name}.{key} must be a finite number >= 0")
        normalized[key] = value
    return normalized


class PlateStockV1(BaseModel):
    denomination: float = Field(gt=0, allow_inf_nan=False)
    pairs: int | None = Field(default=None, ge=0)


class ProgramRequestV1(BaseModel):
    unit: str = "pounds"
    one_rep_maxes: dict[str, float]
    training_max_overrides: dict[str, float] = Field(default_factory=dict)
    plates: list[PlateStockV1] | None = None
    bar_weight: float | None = Field(default=None, gt=0, allow_inf_nan=False)

    @field_validator("unit")
    @classmethod
    def validate_unit(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in WEIGHT_UNITS:
            raise ValueError(f"unit must be one of: {', '.join(WEIGHT_UNITS)}")
        return normalized

    @field_validator("one_rep_maxes", mode="before")
    @classmethod
    def validate_one_rep_maxes(cls, value: Any) -> dict[str, float]:
        if not isinstance(value, dict):
            raise ValueError("one_rep_maxes must be an object keyed by lift")
        normalized = _normalize_lift_map(value, field_name="one_rep_maxes")
        missing = [lift for lift in CORE_LIFTS if lift not in normalized]
        if missing:
            raise ValueError(f"one_rep_maxes is missing: {', '.join(missing)}")
        return normalized

    @field_validator("training_max_overrides", mode="before")
    @classmethod
    def validate_overrides(cls, value: Any) -> dict[str, float]:
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValueError("training_max_overrides must be an object keyed by lift")
        return _normalize_lift_map(value, field_name="training_max_overrides")

    @model_validator(mode="after")
    def validate_unique_plates(self) -> "ProgramRequestV1":
        if self.plates:
            denominations = [plate.denomination for plate in self.plates]
            if len(set(denominations)) != len(denominations):
                raise ValueError("plates must not repeat a denomination")
        return self

    def resolved_bar_weight(self) -> float:
        if self.bar_weight is not None:
            return self.bar_weight
        return bar_weight_for_unit(self.unit)

    def resolved_plates(self) -> list[dict[str, Any]]:
        if self.plates is None:
            return [{"denomination": d, "pairs": None} for d in default_plates(self.unit)]
        return [plate.model_dump() for plate in self.plates]


def validate_program_request(data: dict[str, Any]) -> ProgramRequestV1:
    """Validate a raw payload. Raises pydantic.ValidationError on invalid input."""
    return ProgramRequestV1.model_validate(data)


def build_program(request: ProgramRequestV1) -> dict[str, Any]:
    """Generate every lift's cycle for a validated request as a JSON-ready dict."""
    profiles = {
        lift: lift_profile(request.one_rep_maxes[lift], request.training_max_overrides.get(lift))
        for lift in CORE_LIFTS
    }
    inventory = build_inventory(request.resolved_plates())
    bar_weight = request.resolved_bar_weight()
    cycles = generate_all_lifts(profiles, inventory, request.unit, bar_weight=bar_weight)
    return {
        "contract_version": CONTRACT_VERSION_V1,
        "unit": request.unit,
        "bar_weight": normalize_weight(bar_weight),
        "plates": inventory.to_dict(),
        "lifts": {
            lift: {
                "profile": profiles[lift].to_dict(),
                "weeks": cycles[lift].to_dict()["weeks"],
                "volume": cycle_volume(cycles[lift]),
            }
            for lift in CORE_LIFTS
        },
    }
