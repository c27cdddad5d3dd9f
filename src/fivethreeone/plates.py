"""Plate resolution: turn a target bar weight into a loadable plate set.

The resolver is greedy, largest denomination first, loading plates in pairs
(one per side). When the exact target cannot be built from the inventory the
result rounds down to the heaviest weight the greedy pass reaches. Greedy is
only weight-optimal for canonical denomination sets such as the standard
45/35/25/10/5/2.5 lb plates; for unusual sets (e.g. 45/25/10 only) it can
miss a heavier achievable load. That tradeoff is accepted.

Inventories may carry a finite pair count per denomination. The resolver
never uses more pairs than are listed; it does not search for alternative
combinations once a denomination runs out.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from .errors import InvalidInventory, InvalidProgramParameter
from .models import (
    BarConfiguration,
    PlateCalculation,
    PlateInventory,
    PlateLoad,
    PlateStock,
    normalize_weight,
)

logger = logging.getLogger(__name__)

_PRECISION = 6

DEFAULT_PLATES: dict[str, tuple[float, ...]] = {
    "pounds": (100, 45, 35, 25, 10, 5, 2.5),
    "kilograms": (25, 20, 15, 10, 5, 2.5, 1.25),
}

BAR_WEIGHTS: dict[str, float] = {
    "pounds": 45,
    "kilograms": 20,
}


def _unit_or_raise(unit: Any) -> str:
    if unit not in BAR_WEIGHTS:
        allowed = ", ".join(BAR_WEIGHTS)
        raise InvalidProgramParameter(f"unit must be one of: {allowed}", field="unit")
    return unit


def bar_weight_for_unit(unit: str) -> float:
    return BAR_WEIGHTS[_unit_or_raise(unit)]


def default_plates(unit: str) -> tuple[float, ...]:
    return DEFAULT_PLATES[_unit_or_raise(unit)]


def bar_configuration(unit: str, bar_weight: float | None = None) -> BarConfiguration:
    """Bar for ``unit``: the standard 45 lb / 20 kg bar unless ``bar_weight`` is given."""
    if bar_weight is None:
        bar_weight = bar_weight_for_unit(unit)
    else:
        _unit_or_raise(unit)
    return BarConfiguration(bar_weight=bar_weight, unit=unit)


def _to_denomination(value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidInventory(f"plate denomination must be numeric, got {value!r}", field="denomination")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidInventory(
            f"plate denomination must be numeric, got {value!r}", field="denomination"
        ) from None
    if not math.isfinite(number) or number <= 0:
        raise InvalidInventory(
            f"plate denomination must be positive, got {value!r}", field="denomination"
        )
    return number


def _to_pairs(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidInventory(
            f"plate pair count must be a non-negative integer, got {value!r}", field="pairs"
        )
    return value


def _iter_stock_items(plates: Any) -> Iterable[tuple[Any, Any]]:
    if isinstance(plates, PlateInventory):
        for stock in plates.stocks:
            yield stock.denomination, stock.pairs
        return
    if isinstance(plates, Mapping):
        yield from plates.items()
        return
    if isinstance(plates, (str, bytes)) or not isinstance(plates, Iterable):
        raise InvalidInventory(f"unsupported plate inventory: {plates!r}", field="plates")
    for item in plates:
        if isinstance(item, PlateStock):
            yield item.denomination, item.pairs
        elif isinstance(item, Mapping):
            if "denomination" not in item:
                raise InvalidInventory("plate entry is missing 'denomination'", field="denomination")
            yield item["denomination"], item.get("pairs")
        else:
            yield item, None


def build_inventory(plates: Any) -> PlateInventory:
    """Validate plates into a PlateInventory sorted by descending denomination.

    Accepts a sequence of denominations (unlimited supply), a
    ``{denomination: pairs}`` mapping, dicts with ``denomination``/``pairs``
    keys, PlateStock items, or an existing PlateInventory.
    """
    stocks: list[PlateStock] = []
    seen: set[float] = set()
    for raw_denomination, raw_pairs in _iter_stock_items(plates):
        denomination = _to_denomination(raw_denomination)
        if denomination in seen:
            raise InvalidInventory(
                f"duplicate plate denomination: {normalize_weight(denomination)}",
                field="denomination",
            )
        seen.add(denomination)
        stocks.append(PlateStock(denomination=denomination, pairs=_to_pairs(raw_pairs)))
    stocks.sort(key=lambda stock: stock.denomination, reverse=True)
    return PlateInventory(stocks=tuple(stocks))


def as_inventory(inventory: Any) -> PlateInventory:
    # Hand-built PlateInventory values are re-validated and re-sorted too.
    return build_inventory(inventory)


def _bar_only(bar_weight: float) -> PlateCalculation:
    return PlateCalculation(total_weight=bar_weight, plates=(), bar_weight=bar_weight)


def resolve_plates(target_weight: float, bar_weight: float, inventory: Any) -> PlateCalculation:
    """Resolve ``target_weight`` into pairs of plates on a ``bar_weight`` bar."""
    inventory = as_inventory(inventory)
    remaining = round(target_weight - bar_weight, _PRECISION)
    if remaining <= 0 or not inventory:
        return _bar_only(bar_weight)

    loads: list[PlateLoad] = []
    loaded = 0.0
    for stock in inventory.stocks:
        pair_weight = stock.denomination * 2
        count = math.floor(round(remaining / pair_weight, _PRECISION))
        if stock.pairs is not None:
            count = min(count, stock.pairs)
        if count <= 0:
            continue
        remaining = round(remaining - count * pair_weight, _PRECISION)
        loaded = round(loaded + count * pair_weight, _PRECISION)
        loads.append(PlateLoad(weight=stock.denomination, count=count))
        if remaining == 0:
            break

    total = round(bar_weight + loaded, _PRECISION)
    if remaining > 0:
        logger.debug(
            "Rounded %s down to %s (unloadable remainder %s)",
            normalize_weight(target_weight),
            normalize_weight(total),
            normalize_weight(remaining),
            extra={"fto_target_weight": target_weight, "fto_resolved_weight": total},
        )
    return PlateCalculation(total_weight=total, plates=tuple(loads), bar_weight=bar_weight)

