from __future__ import annotations

import pytest

from fivethreeone.errors import InvalidInventory, InvalidProgramParameter
from fivethreeone.models import BarConfiguration, PlateCalculation, PlateInventory, PlateLoad, PlateStock
from fivethreeone.plates import (
    bar_configuration,
    bar_weight_for_unit,
    build_inventory,
    default_plates,
    resolve_plates,
)

STANDARD_LB = [100, 45, 35, 25, 10, 5, 2.5]


def _loads(calculation: PlateCalculation) -> list[tuple[float, int]]:
    return [(load.weight, load.count) for load in calculation.plates]


class TestResolvePlates:
    def test_two_pairs_of_45s_make_225(self):
        result = resolve_plates(225, 45, [45, 25, 10, 5, 2.5])
        assert result.total_weight == 225
        assert result.bar_weight == 45
        assert _loads(result) == [(45, 2)]

    def test_greedy_takes_largest_denomination_first(self):
        assert _loads(resolve_plates(255, 45, STANDARD_LB)) == [(100, 1), (5, 1)]
        assert _loads(resolve_plates(195, 45, STANDARD_LB)) == [(45, 1), (25, 1), (5, 1)]

    def test_unachievable_target_rounds_down(self):
        result = resolve_plates(226, 45, STANDARD_LB)
        assert result.total_weight == 225
        assert _loads(result) == [(45, 2)]

    def test_rounded_result_resolves_to_itself(self):
        first = resolve_plates(233, 45, STANDARD_LB)
        again = resolve_plates(first.total_weight, 45, STANDARD_LB)
        assert again == first

    @pytest.mark.parametrize("target", [0, 20, 44.5, 45])
    def test_target_at_or_below_bar_is_bar_only(self, target):
        result = resolve_plates(target, 45, STANDARD_LB)
        assert result == PlateCalculation(total_weight=45, plates=(), bar_weight=45)
        assert result.is_bar_only

    def test_empty_inventory_is_bar_only(self):
        result = resolve_plates(315, 45, [])
        assert result.total_weight == 45
        assert result.plates == ()

    def test_inventory_order_does_not_matter(self):
        assert resolve_plates(185, 45, [2.5, 5, 45, 25]) == resolve_plates(185, 45, [45, 25, 5, 2.5])

    def test_fractional_plates_leave_no_residue(self):
        result = resolve_plates(77, 20, default_plates("kilograms"))
        assert result.total_weight == 75
        assert _loads(result) == [(25, 1), (2.5, 1)]
        result = resolve_plates(22.5, 20, [1.25])
        assert result.total_weight == 22.5
        assert _loads(result) == [(1.25, 1)]

    def test_finite_pair_counts_are_never_exceeded(self):
        result = resolve_plates(225, 45, {45: 1, 25: 2, 10: None})
        assert _loads(result) == [(45, 1), (25, 1), (10, 2)]
        assert result.total_weight == 225

    def test_exhausted_stock_rounds_down(self):
        result = resolve_plates(315, 45, {45: 1})
        assert result.total_weight == 135
        assert _loads(result) == [(45, 1)]

    def test_zero_pairs_behaves_like_missing_plate(self):
        assert resolve_plates(135, 45, {45: 0, 25: None}) == resolve_plates(135, 45, [25])

    def test_non_canonical_denominations_may_miss_heavier_load(self):
        # 2 pairs of 25 would reach 145; greedy commits to a 45 pair first.
        result = resolve_plates(145, 45, [45, 25, 10])
        assert result.total_weight == 135
        assert _loads(result) == [(45, 1)]

    def test_to_dict_is_json_ready(self):
        assert resolve_plates(230, 45, STANDARD_LB).to_dict() == {
            "total_weight": 230,
            "plates": [{"weight": 45, "count": 2}, {"weight": 2.5, "count": 1}],
            "bar_weight": 45,
        }


class TestBuildInventory:
    def test_denomination_list_means_unlimited_supply(self):
        inventory = build_inventory([5, 45, 25])
        assert inventory.denominations == (45, 25, 5)
        assert all(stock.pairs is None for stock in inventory.stocks)

    def test_mapping_carries_pair_counts(self):
        inventory = build_inventory({"45": 4, 2.5: 1})
        assert inventory.stocks == (PlateStock(45, 4), PlateStock(2.5, 1))

    def test_dict_entries(self):
        inventory = build_inventory([{"denomination": 10, "pairs": 3}, {"denomination": 25}])
        assert inventory.stocks == (PlateStock(25, None), PlateStock(10, 3))

    def test_existing_inventory_is_normalized(self):
        inventory = PlateInventory(stocks=(PlateStock(2.5), PlateStock(45, 2)))
        assert build_inventory(inventory) == PlateInventory(
            stocks=(PlateStock(45.0, 2), PlateStock(2.5, None))
        )

    def test_hand_built_inventory_is_loaded_largest_first(self):
        inventory = PlateInventory(stocks=(PlateStock(2.5), PlateStock(45)))
        result = resolve_plates(225, 45, inventory)
        assert result.total_weight == 225
        assert _loads(result) == [(45, 2)]

    @pytest.mark.parametrize(
        "stocks",
        [
            (PlateStock(45), PlateStock(45)),
            (PlateStock(45), PlateStock(-10)),
            (PlateStock(0),),
            (PlateStock(45, -1),),
        ],
    )
    def test_hand_built_inventory_is_validated(self, stocks):
        with pytest.raises(InvalidInventory):
            resolve_plates(225, 45, PlateInventory(stocks=stocks))

    def test_empty_inventory_is_falsy(self):
        assert not build_inventory([])

    @pytest.mark.parametrize("plates", [[0], [-5], [45, 0], ["abc"], [float("nan")], [True]])
    def test_rejects_invalid_denominations(self, plates):
        with pytest.raises(InvalidInventory) as excinfo:
            build_inventory(plates)
        assert excinfo.value.code == "invalid_inventory"
        assert excinfo.value.field == "denomination"

    def test_rejects_duplicates(self):
        with pytest.raises(InvalidInventory, match="duplicate plate denomination: 45"):
            build_inventory([45, 25, 45.0])

    @pytest.mark.parametrize("pairs", [-1, 1.5, "2"])
    def test_rejects_invalid_pair_counts(self, pairs):
        with pytest.raises(InvalidInventory) as excinfo:
            build_inventory({45: pairs})
        assert excinfo.value.field == "pairs"

    def test_rejects_unsupported_shapes(self):
        with pytest.raises(InvalidInventory):
            build_inventory("45,25")
        with pytest.raises(InvalidInventory):
            build_inventory(45)
        with pytest.raises(InvalidInventory, match="missing 'denomination'"):
            build_inventory([{"pairs": 2}])

    def test_resolver_validates_raw_inventory(self):
        with pytest.raises(InvalidInventory):
            resolve_plates(225, 45, [45, -45])


def test_unit_defaults() -> None:
    assert bar_weight_for_unit("pounds") == 45
    assert bar_weight_for_unit("kilograms") == 20
    assert default_plates("pounds") == (100, 45, 35, 25, 10, 5, 2.5)
    assert default_plates("kilograms") == (25, 20, 15, 10, 5, 2.5, 1.25)


def test_unknown_unit_rejected() -> None:
    with pytest.raises(InvalidProgramParameter):
        bar_weight_for_unit("stone")


def test_plate_load_serialization() -> None:
    assert PlateLoad(weight=2.5, count=1).to_dict() == {"weight": 2.5, "count": 1}


def test_bar_configuration() -> None:
    assert bar_configuration("pounds") == BarConfiguration(bar_weight=45, unit="pounds")
    assert bar_configuration("kilograms", 15) == BarConfiguration(bar_weight=15, unit="kilograms")
    with pytest.raises(InvalidProgramParameter):
        bar_configuration("stone", 20)
