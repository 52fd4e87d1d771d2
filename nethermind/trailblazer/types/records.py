from dataclasses import dataclass

from eth_typing import ChecksumAddress


@dataclass(slots=True)
class Metadata:
    """Block & transaction metadata shared by all records"""

    block_time: int
    block_number: int
    tx_hash: bytes


@dataclass(slots=True)
class Claim:
    """Token claim by a user"""

    metadata: Metadata
    user: ChecksumAddress
    token_amount: int
    token_decimals: int
    token: ChecksumAddress


@dataclass(slots=True)
class Lock:
    """Tokens locked by a user for a fixed duration in seconds"""

    metadata: Metadata
    user: ChecksumAddress
    token_amount: int
    token_decimals: int
    token: ChecksumAddress
    duration: int


@dataclass(slots=True)
class LPTransfer:
    """Transfer of a liquidity position NFT, valued in both tokens of the pool at the transfer block"""

    metadata: Metadata
    sender: ChecksumAddress
    recipient: ChecksumAddress

    token_0_amount: int
    token_0_decimals: int
    token_0: ChecksumAddress

    token_1_amount: int
    token_1_decimals: int
    token_1: ChecksumAddress
