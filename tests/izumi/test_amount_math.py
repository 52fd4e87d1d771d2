import math
from decimal import Decimal

import pytest

from nethermind.trailblazer.izumi.math import (
    amount_x_at_tick,
    amount_x_over_range,
    amount_y_at_tick,
    amount_y_over_range,
    sqrt_price_at_tick,
    sqrt_rate,
)

liquidity_values = [10**12, 10**18, 10**24]
tick_ranges = [(10, 20), (-200, 300), (-2000, -1000), (1000, 2000), (-50000, 50000)]


def is_within_bounds(a, b, tolerance: float = 1e-9):
    if a == 0 and b == 0:
        return True
    return abs(a - b) / abs(a) < tolerance


def reference_amount_y(liquidity: int, left_tick: int, right_tick: int) -> float:
    return sum(liquidity * math.sqrt(1.0001**tick) for tick in range(left_tick, right_tick))


def reference_amount_x(liquidity: int, left_tick: int, right_tick: int) -> float:
    return sum(liquidity / math.sqrt(1.0001**tick) for tick in range(left_tick, right_tick))


class TestSingleTickAmounts:
    def test_amount_y_at_unit_price(self):
        assert amount_y_at_tick(1_000_000, Decimal(1), False) == 1_000_000
        assert amount_x_at_tick(1_000_000, Decimal(1), False) == 1_000_000

    def test_zero_liquidity(self):
        assert amount_y_at_tick(0, sqrt_price_at_tick(500), False) == 0
        assert amount_x_at_tick(0, sqrt_price_at_tick(500), True) == 0

    @pytest.mark.parametrize(
        "liquidity, sqrt_price, round_up, expected",
        [
            (3, Decimal("0.5"), False, 1),
            (3, Decimal("0.5"), True, 2),
            (5, Decimal("0.3"), False, 1),
            (5, Decimal("0.3"), True, 2),
            (7, Decimal("0.3"), True, 2),
        ],
    )
    def test_amount_y_rounding(self, liquidity, sqrt_price, round_up, expected):
        assert amount_y_at_tick(liquidity, sqrt_price, round_up) == expected

    @pytest.mark.parametrize(
        "liquidity, sqrt_price, round_up, expected",
        [
            (10, Decimal(4), False, 2),
            (10, Decimal(4), True, 3),
            (10, Decimal(3), False, 3),
            (10, Decimal(3), True, 3),
        ],
    )
    def test_amount_x_rounding(self, liquidity, sqrt_price, round_up, expected):
        assert amount_x_at_tick(liquidity, sqrt_price, round_up) == expected

    @pytest.mark.parametrize("tick", [-1000, 0, 1000])
    def test_single_tick_amounts_are_price_duals(self, tick):
        liquidity = 10**18
        sqrt_price = sqrt_price_at_tick(tick)
        amount_y = amount_y_at_tick(liquidity, sqrt_price, False)
        amount_x = amount_x_at_tick(liquidity, sqrt_price, False)

        # y / x == price at tick
        assert is_within_bounds(amount_y / amount_x, 1.0001**tick)


class TestRangeAmounts:
    @pytest.mark.parametrize("liquidity", liquidity_values)
    @pytest.mark.parametrize("left_tick, right_tick", tick_ranges)
    def test_amount_y_matches_geometric_sum(self, liquidity, left_tick, right_tick):
        amount_y = amount_y_over_range(
            liquidity,
            sqrt_price_at_tick(left_tick),
            sqrt_price_at_tick(right_tick),
            sqrt_rate(),
            False,
        )
        assert is_within_bounds(amount_y, reference_amount_y(liquidity, left_tick, right_tick))

    @pytest.mark.parametrize("liquidity", liquidity_values)
    @pytest.mark.parametrize("left_tick, right_tick", tick_ranges)
    def test_amount_x_matches_geometric_sum(self, liquidity, left_tick, right_tick):
        amount_x = amount_x_over_range(
            liquidity,
            left_tick,
            right_tick,
            sqrt_price_at_tick(right_tick),
            sqrt_rate(),
            False,
        )
        assert is_within_bounds(amount_x, reference_amount_x(liquidity, left_tick, right_tick))

    def test_one_tick_range_matches_single_tick(self):
        liquidity = 10**18
        for tick in [-300, 0, 300]:
            range_y = amount_y_over_range(
                liquidity, sqrt_price_at_tick(tick), sqrt_price_at_tick(tick + 1), sqrt_rate(), False
            )
            range_x = amount_x_over_range(liquidity, tick, tick + 1, sqrt_price_at_tick(tick + 1), sqrt_rate(), False)

            assert abs(range_y - amount_y_at_tick(liquidity, sqrt_price_at_tick(tick), False)) <= 1
            assert abs(range_x - amount_x_at_tick(liquidity, sqrt_price_at_tick(tick), False)) <= 1

    def test_round_up_adds_at_most_one(self):
        liquidity = 123_456_789_012_345
        args = (sqrt_price_at_tick(-777), sqrt_price_at_tick(4321), sqrt_rate())
        rounded_down = amount_y_over_range(liquidity, *args, False)
        rounded_up = amount_y_over_range(liquidity, *args, True)
        assert 0 <= rounded_up - rounded_down <= 1

        rounded_down = amount_x_over_range(liquidity, -777, 4321, sqrt_price_at_tick(4321), sqrt_rate(), False)
        rounded_up = amount_x_over_range(liquidity, -777, 4321, sqrt_price_at_tick(4321), sqrt_rate(), True)
        assert 0 <= rounded_up - rounded_down <= 1

    def test_unit_sqrt_rate_returns_zero(self):
        assert amount_y_over_range(10**18, Decimal(1), Decimal(2), Decimal(1), False) == 0
