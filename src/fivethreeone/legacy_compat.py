"""Compatibility adapter for legacy user payloads.

Two storage shapes predate ProgramRequestV1:

- the flat user record with one field per lift (``squatOneRepMax``, ...)
  and ``availablePlates`` stored as a JSON string of denominations;
- the later schema storing plates as a ``{denomination: pairs}`` map.

Both normalize into the canonical ``[{denomination, pairs}]`` form.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .contract import ProgramRequestV1, validate_program_request
from .errors import InvalidInventory
from .models import CORE_LIFTS

_USER_FIELDS: dict[str, str] = {
    "squat": "squatOneRepMax",
    "bench": "benchOneRepMax",
    "deadlift": "deadliftOneRepMax",
    "ohp": "ohpOneRepMax",
}

_TRAINING_MAX_FIELDS: dict[str, str] = {
    "squat": "squatTrainingMax",
    "bench": "benchTrainingMax",
    "deadlift": "deadliftTrainingMax",
    "ohp": "ohpTrainingMax",
}


def _to_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def plates_from_legacy(value: Any) -> list[dict[str, Any]]:
    """Normalize a stored plate configuration into ``[{denomination, pairs}]``.

    Denomination lists (optionally JSON-encoded) mean unlimited supply.
    Raises InvalidInventory when the value is not one of the known shapes.
    """
    if isinstance(value, (str, bytes)):
        try:
            value = json.loads(value or "[]")
        except json.JSONDecodeError:
            raise InvalidInventory("stored plates are not valid JSON", field="plates") from None

    if isinstance(value, Mapping):
        plates: list[dict[str, Any]] = []
        for denomination, pairs in value.items():
            number = _to_float(denomination)
            if number is None:
                raise InvalidInventory(
                    f"plate denomination must be numeric, got {denomination!r}",
                    field="denomination",
                )
            plates.append({"denomination": number, "pairs": pairs})
        return plates

    if isinstance(value, list):
        return [{"denomination": denomination, "pairs": None} for denomination in value]

    raise InvalidInventory(f"unsupported stored plate format: {type(value).__name__}", field="plates")


def one_rep_maxes_from_user_fields(user: Mapping[str, Any]) -> dict[str, float]:
    maxes: dict[str, float] = {}
    for lift in CORE_LIFTS:
        value = _to_float(user.get(_USER_FIELDS[lift]))
        if value is not None:
            maxes[lift] = value
    return maxes


def training_maxes_from_user_fields(user: Mapping[str, Any]) -> dict[str, float]:
    maxes: dict[str, float] = {}
    for lift in CORE_LIFTS:
        value = _to_float(user.get(_TRAINING_MAX_FIELDS[lift]))
        if value is not None:
            maxes[lift] = value
    return maxes


def program_request_from_legacy_user(
    user: Mapping[str, Any],
    *,
    keep_training_maxes: bool = False,
) -> ProgramRequestV1:
    """Build a validated request from a flat legacy user record.

    Stored training maxes are ignored unless ``keep_training_maxes`` is set,
    since the legacy record recomputed them whenever a 1RM changed.
    """
    payload: dict[str, Any] = {
        "unit": user.get("weightUnit") or "pounds",
        "one_rep_maxes": one_rep_maxes_from_user_fields(user),
    }
    if user.get("availablePlates") is not None:
        payload["plates"] = plates_from_legacy(user["availablePlates"])
    if keep_training_maxes:
        payload["training_max_overrides"] = training_maxes_from_user_fields(user)
    return validate_program_request(payload)
