import logging

from nethermind.trailblazer.types.izumi import PoolState, Position, Regime, ValuationResult

from .math import (
    amount_x_at_tick,
    amount_x_over_range,
    amount_y_at_tick,
    amount_y_over_range,
    sqrt_price_at_tick,
    sqrt_rate,
)

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("trailblazer").getChild("izumi").getChild("valuation")


def classify_regime(position: Position, pool: PoolState) -> Regime:
    """
    Classifies a position against the current tick of the pool.

        * below: the whole range is at or below the current tick, ``right_tick <= current_tick``
        * above: the whole range is above the current tick, ``left_tick > current_tick``
        * straddling: the range contains the current tick, ``left_tick <= current_tick < right_tick``

    :param position: liquidity position
    :param pool: pool state snapshot
    :return: :class:`~nethermind.trailblazer.types.izumi.Regime`
    """
    if position.right_tick <= pool.current_tick:
        return Regime.below
    if position.left_tick > pool.current_tick:
        return Regime.above
    return Regime.straddling


def split_current_tick_liquidity(position: Position, pool: PoolState) -> tuple[int, int]:
    """
    Splits the liquidity of a position at the current tick into the portion held as token Y and the
    portion held as token X.  The pool tracks liquidity_x for the current tick, and the position is
    filled with token Y liquidity first.

    :return: (liquidity_y, liquidity_x)
    """
    max_liquidity_y = max(0, pool.liquidity - pool.liquidity_x)
    liquidity_y = min(position.liquidity, max_liquidity_y)
    return liquidity_y, position.liquidity - liquidity_y


def value_position(position: Position, pool: PoolState, round_up: bool = False) -> ValuationResult:
    """
    Computes the amounts of token X and token Y a position can be redeemed for at the given pool state.

    Valuations are rounded down by default, so a position is never overstated.

    :param position: liquidity position read at the same block as pool
    :param pool: pool state snapshot
    :param round_up: round each amount half up instead of down
    :return: :class:`~nethermind.trailblazer.types.izumi.ValuationResult`
    """
    rate = sqrt_rate()
    regime = classify_regime(position, pool)

    match regime:
        case Regime.below:
            right_tick = min(pool.current_tick, position.right_tick)
            amount_y = amount_y_over_range(
                position.liquidity,
                sqrt_price_at_tick(position.left_tick),
                sqrt_price_at_tick(right_tick),
                rate,
                round_up,
            )
            result = ValuationResult(amount_x=0, amount_y=amount_y)

        case Regime.above:
            left_tick = max(pool.current_tick + 1, position.left_tick)
            amount_x = amount_x_over_range(
                position.liquidity,
                left_tick,
                position.right_tick,
                sqrt_price_at_tick(position.right_tick),
                rate,
                round_up,
            )
            result = ValuationResult(amount_x=amount_x, amount_y=0)

        case _:  # Regime.straddling
            liquidity_y, liquidity_x = split_current_tick_liquidity(position, pool)
            current_sqrt_price = sqrt_price_at_tick(pool.current_tick)
            result = ValuationResult(
                amount_x=amount_x_at_tick(liquidity_x, current_sqrt_price, round_up),
                amount_y=amount_y_at_tick(liquidity_y, current_sqrt_price, round_up),
            )

    logger.debug(
        f"Valued position [{position.left_tick}, {position.right_tick}) with liquidity {position.liquidity} "
        f"at tick {pool.current_tick} ({regime.pretty()}): X={result.amount_x}, Y={result.amount_y}"
    )
    return result
