import logging
from typing import Sequence

from eth_utils import to_checksum_address as tca

from nethermind.trailblazer.chain_interface import ChainReader
from nethermind.trailblazer.decoding import EVMEventDecoder
from nethermind.trailblazer.types.evm import Log
from nethermind.trailblazer.types.records import Claim

from .base import LogIndexer

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("trailblazer").getChild("adapters").getChild("avalon")

# https://taikoscan.io/address/0x631da08b6258EfAAe5aAc7Bc69e6a8fF2C79cFd9
CLAIM_ADDRESS = tca("0x631da08b6258EfAAe5aAc7Bc69e6a8fF2C79cFd9")

# L1: https://etherscan.io/token/0x5c8d0c48810fd37a0a824d074ee290e64f7a8fa2
# L2: https://taikoscan.io/token/0xE9cA67e5051e1806546d0a06ee465221c5877feE
AVL_TOKEN_ADDRESS = tca("0xE9cA67e5051e1806546d0a06ee465221c5877feE")
AVL_TOKEN_DECIMALS = 18


class ClaimIndexer(LogIndexer[Claim]):
    """Indexes AVL claims from the Avalon claim contract"""

    def __init__(self, reader: ChainReader, addresses: Sequence[str] | None = None):
        super().__init__(reader, addresses if addresses is not None else [CLAIM_ADDRESS])
        self.claimed_decoder = EVMEventDecoder.from_bundled_abi("avalon_claim", "Claimed")

    def index(self, logs: Sequence[Log]) -> list[Claim]:
        claims = []

        for log in logs:
            if not self.claimed_decoder.matches(log):
                continue

            claimed = self.decode_log(self.claimed_decoder, log)
            claim = Claim(
                metadata=self.metadata_for(log),
                user=claimed.data["user"],
                token_amount=claimed.data["avlAmount"],
                token_decimals=AVL_TOKEN_DECIMALS,
                token=AVL_TOKEN_ADDRESS,
            )
            logger.info(f"Claim of {claim.token_amount} AVL by {claim.user} at block {claim.metadata.block_number}")
            claims.append(claim)

        return claims
