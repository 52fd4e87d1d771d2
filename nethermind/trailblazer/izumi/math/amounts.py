"""
Closed form token amounts for liquidity spread over iZiSwap points.

Liquidity L placed on a single point p holds ``L * sqrt(p)`` of token Y, or ``L / sqrt(p)`` of token X.
Amounts over a range of points are geometric series over sqrt prices, and are summed in closed form
using ``sqrt_rate = sqrt(1.0001)``.
"""
from decimal import Decimal, localcontext

from .price import DECIMAL_PRECISION, power

HALF = Decimal("0.5")


def _to_amount(value: Decimal, round_up: bool) -> int:
    """Truncates a Decimal amount.  If round_up, 0.5 is added before truncation"""
    if round_up:
        value += HALF
    return int(value)


def amount_y_over_range(
    liquidity: int,
    sqrt_price_left: Decimal,
    sqrt_price_right: Decimal,
    sqrt_rate: Decimal,
    round_up: bool,
) -> int:
    """
    Amount of token Y held by liquidity over the points [left, right).  Computes:
    ``liquidity * (sqrt_price_right - sqrt_price_left) / (sqrt_rate - 1)``

    :param liquidity: liquidity on each point of the range
    :param sqrt_price_left: sqrt price at the left point
    :param sqrt_price_right: sqrt price at the right point
    :param sqrt_rate: sqrt(1.0001)
    :param round_up: round half up if True, otherwise round down
    :return: amount of token Y
    """
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        denominator = sqrt_rate - 1
        if denominator == 0:
            return 0
        amount = Decimal(liquidity) * (sqrt_price_right - sqrt_price_left) / denominator
        return _to_amount(amount, round_up)


def amount_y_at_tick(liquidity: int, sqrt_price: Decimal, round_up: bool) -> int:
    """Amount of token Y held by liquidity at a single point: ``liquidity * sqrt_price``"""
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        return _to_amount(Decimal(liquidity) * sqrt_price, round_up)


def amount_x_over_range(
    liquidity: int,
    left_tick: int,
    right_tick: int,
    sqrt_price_right: Decimal,
    sqrt_rate: Decimal,
    round_up: bool,
) -> int:
    """
    Amount of token X held by liquidity over the points [left_tick, right_tick).  Computes:
    ``liquidity * (sqrt_rate ** (right - left + 1) - sqrt_rate) / (sqrt_rate ** (right + 1) - sqrt_price_right)``

    This is the sum of ``liquidity / sqrt_price`` over each point, with numerator and denominator
    multiplied by sqrt_rate ** (right + 1).

    :param liquidity: liquidity on each point of the range
    :param left_tick: first point of the range
    :param right_tick: point after the end of the range
    :param sqrt_price_right: sqrt price at right_tick
    :param sqrt_rate: sqrt(1.0001)
    :param round_up: round half up if True, otherwise round down
    :return: amount of token X
    """
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        numerator = power(sqrt_rate, right_tick - left_tick + 1) - sqrt_rate
        denominator = power(sqrt_rate, right_tick + 1) - sqrt_price_right
        if denominator == 0:
            return 0
        return _to_amount(Decimal(liquidity) * numerator / denominator, round_up)


def amount_x_at_tick(liquidity: int, sqrt_price: Decimal, round_up: bool) -> int:
    """Amount of token X held by liquidity at a single point: ``liquidity / sqrt_price``"""
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        return _to_amount(Decimal(liquidity) / sqrt_price, round_up)
