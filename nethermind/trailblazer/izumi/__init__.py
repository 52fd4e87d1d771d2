from .valuation import classify_regime, split_current_tick_liquidity, value_position

__all__ = ["classify_regime", "split_current_tick_liquidity", "value_position"]
