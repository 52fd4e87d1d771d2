from decimal import Decimal, localcontext

# iZiSwap calls ticks "points".  Price at point p is 1.0001 ** p
POINT_BASE = Decimal("1.0001")

# 80 significant digits keeps relative error far below 1e-12 across the full point range
DECIMAL_PRECISION = 80

MAX_POINT = 800000
MIN_POINT = -MAX_POINT


def power(base: Decimal, exponent: int) -> Decimal:
    """
    Raises base to an integer exponent with binary exponentiation.  Negative exponents return the
    reciprocal of base ** abs(exponent).

    :param base: Decimal base
    :param exponent: integer exponent, can be negative
    :return: base ** exponent
    """
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION + 10

        result, square, remaining = Decimal(1), base, abs(exponent)
        while remaining > 0:
            if remaining & 1:
                result *= square
            square *= square
            remaining >>= 1

        if exponent < 0:
            result = Decimal(1) / result

    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        return +result


def sqrt_rate() -> Decimal:
    """Returns sqrt(1.0001), the ratio between sqrt prices of neighbouring ticks"""
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        return POINT_BASE.sqrt()


def sqrt_price_at_tick(tick: int) -> Decimal:
    """
    Returns the undecimaled sqrt price at a tick, computing sqrt(1.0001 ** tick).

    1.0001 ** abs(tick) is computed first, and the square root is inverted for negative ticks, so that
    sqrt_price_at_tick(t) * sqrt_price_at_tick(-t) is 1 up to the working precision.

    :param tick: tick (point) index
    :return: sqrt price as a Decimal with DECIMAL_PRECISION significant digits
    """
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        sqrt_price = power(POINT_BASE, abs(tick)).sqrt()
        if tick < 0:
            sqrt_price = Decimal(1) / sqrt_price
        return sqrt_price
