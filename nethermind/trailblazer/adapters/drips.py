import logging
from typing import Sequence

from eth_utils import to_checksum_address as tca

from nethermind.trailblazer.chain_interface import ChainReader
from nethermind.trailblazer.decoding import EVMEventDecoder
from nethermind.trailblazer.types.evm import Log
from nethermind.trailblazer.types.records import Lock

from .base import LogIndexer

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("trailblazer").getChild("adapters").getChild("drips")

# https://taikoscan.io/address/0x46f0a2e45bee8e9ebfdb278ce06caa6af294c349
LOCK_ADDRESS = tca("0x46f0a2e45bee8e9ebfdb278ce06caa6af294c349")

# https://taikoscan.io/token/0xA9d23408b9bA935c230493c40C73824Df71A0975
TAIKO_TOKEN_ADDRESS = tca("0xA9d23408b9bA935c230493c40C73824Df71A0975")
TAIKO_TOKEN_DECIMALS = 18


class LockIndexer(LogIndexer[Lock]):
    """Indexes TAIKO time-locks from Drips DepositWithDuration events"""

    def __init__(self, reader: ChainReader, addresses: Sequence[str] | None = None):
        super().__init__(reader, addresses if addresses is not None else [LOCK_ADDRESS])
        self.deposit_decoder = EVMEventDecoder.from_bundled_abi("drips", "DepositWithDuration")

    def index(self, logs: Sequence[Log]) -> list[Lock]:
        locks = []

        for log in logs:
            if not self.deposit_decoder.matches(log):
                continue

            deposit = self.decode_log(self.deposit_decoder, log)
            lock = Lock(
                metadata=self.metadata_for(log),
                user=deposit.data["user"],
                token_amount=deposit.data["amount"],
                token_decimals=TAIKO_TOKEN_DECIMALS,
                token=TAIKO_TOKEN_ADDRESS,
                duration=deposit.data["duration"],
            )
            logger.info(
                f"Lock of {lock.token_amount} TAIKO for {lock.duration}s by {lock.user} "
                f"at block {lock.metadata.block_number}"
            )
            locks.append(lock)

        return locks
