from dataclasses import dataclass
from enum import Enum

from nethermind.trailblazer.exceptions import InvalidPositionError

# pylint: disable=invalid-name


class Regime(Enum):
    """Location of a liquidity position relative to the current tick of its pool"""

    below = "below"
    straddling = "straddling"
    above = "above"

    def pretty(self):
        """Returns a pretty version of the regime"""
        match self:
            case Regime.below:
                return "Below Current Tick"
            case Regime.above:
                return "Above Current Tick"
            case _:
                return "Straddling Current Tick"


@dataclass(frozen=True, slots=True)
class Position:
    """
    Liquidity position snapshot read from the iZiSwap LiquidityManager.  Covers the half open
    tick range [left_tick, right_tick) with a constant liquidity.
    """

    left_tick: int
    right_tick: int
    liquidity: int

    def __post_init__(self):
        if self.left_tick >= self.right_tick:
            raise InvalidPositionError(
                f"left_tick must be less than right_tick.  Received [{self.left_tick}, {self.right_tick})"
            )
        if self.liquidity < 0:
            raise InvalidPositionError(f"liquidity cannot be negative: {self.liquidity}")


@dataclass(frozen=True, slots=True)
class PoolState:
    """
    Pool state snapshot at a given block.

    ``sqrt_price_96`` is the Q64.96 price reported by the pool, and can drift within the current tick
    interval.  ``liquidity_x`` is the portion of the liquidity at the current tick held as token X.
    """

    current_tick: int
    sqrt_price_96: int
    liquidity: int
    liquidity_x: int


@dataclass(frozen=True, slots=True)
class ValuationResult:
    """Redeemable token amounts of a position"""

    amount_x: int
    amount_y: int
