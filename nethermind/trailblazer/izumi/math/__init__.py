from .amounts import (
    amount_x_at_tick,
    amount_x_over_range,
    amount_y_at_tick,
    amount_y_over_range,
)
from .price import (
    DECIMAL_PRECISION,
    MAX_POINT,
    MIN_POINT,
    POINT_BASE,
    power,
    sqrt_price_at_tick,
    sqrt_rate,
)

__all__ = [
    "amount_x_at_tick",
    "amount_x_over_range",
    "amount_y_at_tick",
    "amount_y_over_range",
    "DECIMAL_PRECISION",
    "MAX_POINT",
    "MIN_POINT",
    "POINT_BASE",
    "power",
    "sqrt_price_at_tick",
    "sqrt_rate",
]
