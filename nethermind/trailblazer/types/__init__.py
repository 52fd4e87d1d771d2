from .evm import BlockInfo, Log
from .izumi import PoolState, Position, Regime, ValuationResult
from .records import Claim, Lock, LPTransfer, Metadata

__all__ = [
    "BlockInfo",
    "Log",
    "PoolState",
    "Position",
    "Regime",
    "ValuationResult",
    "Claim",
    "Lock",
    "LPTransfer",
    "Metadata",
]
