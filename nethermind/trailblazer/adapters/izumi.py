import logging
from typing import Sequence

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address as tca

from nethermind.trailblazer.chain_interface import ChainReader
from nethermind.trailblazer.decoding import EVMEventDecoder
from nethermind.trailblazer.exceptions import (
    AdapterError,
    InvalidPositionError,
    PoolNotFoundError,
)
from nethermind.trailblazer.izumi import value_position
from nethermind.trailblazer.tokens import ERC20Token
from nethermind.trailblazer.types.evm import Log
from nethermind.trailblazer.types.izumi import PoolState, Position
from nethermind.trailblazer.types.records import LPTransfer
from nethermind.trailblazer.utils import ZERO_ADDRESS, is_zero_address

from .base import LogIndexer

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("trailblazer").getChild("adapters").getChild("izumi")

# https://taikoscan.io/address/0x33531bDBFE34fa6Fd5963D0423f7699775AacaaF
LP_ADDRESS = tca("0x33531bDBFE34fa6Fd5963D0423f7699775AacaaF")

# Farming contracts that LP NFTs are staked into
WHITELIST = [
    tca("0xE2380f4Cc37027B4bF23bBb3b6c092470dB4975f"),  # https://taikoscan.io/address/0xE2380f4Cc37027B4bF23bBb3b6c092470dB4975f
    tca("0x5264F77F8af8550cDa8e81Fee0360c0De6b52432"),  # https://taikoscan.io/address/0x5264F77F8af8550cDa8e81Fee0360c0De6b52432
]


class LPTransferIndexer(LogIndexer[LPTransfer]):
    """
    Indexes iZiSwap liquidity position NFTs transferred into whitelisted farming contracts.

    Each transfer is valued in both pool tokens at the block of the transfer, using the tick range and
    liquidity stored by the LiquidityManager and the pool state at that block.  The sender is the user
    that deposited the NFT into the farm, taken from the Deposit event in the same transaction.
    """

    whitelist: frozenset[ChecksumAddress]

    def __init__(
        self,
        reader: ChainReader,
        addresses: Sequence[str] | None = None,
        whitelist: Sequence[str] | None = None,
    ):
        super().__init__(reader, addresses if addresses is not None else [LP_ADDRESS])
        self.whitelist = frozenset(tca(addr) for addr in (whitelist if whitelist is not None else WHITELIST))
        self.transfer_decoder = EVMEventDecoder.from_bundled_abi("izumi_liquidity_manager", "Transfer")
        self.deposit_decoder = EVMEventDecoder.from_bundled_abi("izumi_farm", "Deposit")

    def index(self, logs: Sequence[Log]) -> list[LPTransfer]:
        lp_transfers = []

        for log in logs:
            # ERC20 Transfers share the signature, but only index 2 params
            if not self.transfer_decoder.matches(log):
                continue

            transfer = self.decode_log(self.transfer_decoder, log)
            recipient = transfer.data["to"]
            if recipient not in self.whitelist:
                logger.debug(f"Skipping transfer of position {transfer.data['tokenId']} to {recipient}")
                continue

            lp_transfers.append(self._build_transfer(log, recipient, transfer.data["tokenId"]))

        return lp_transfers

    def _build_transfer(self, log: Log, recipient: ChecksumAddress, token_id: int) -> LPTransfer:
        sender = self.fetch_depositor(log.transaction_hash, recipient)
        metadata = self.metadata_for(log)
        block_number = metadata.block_number

        position, pool_id = self.fetch_position(log.address, token_id, block_number)
        token_x, token_y, fee = self.reader.call_contract(
            log.address, "izumi_liquidity_manager", "poolMetas", [pool_id], block_number
        )
        token_0 = ERC20Token.from_chain(self.reader, token_x, block_number)
        token_1 = ERC20Token.from_chain(self.reader, token_y, block_number)

        pool = self.fetch_pool_state(log.address, token_x, token_y, fee, block_number)
        valuation = value_position(position, pool)

        logger.info(
            f"Position {token_id} transferred to {recipient} at block {block_number}: "
            f"{token_0.convert_decimals(valuation.amount_x)} of {token_0.address}, "
            f"{token_1.convert_decimals(valuation.amount_y)} of {token_1.address}"
        )

        return LPTransfer(
            metadata=metadata,
            sender=sender,
            recipient=recipient,
            token_0_amount=valuation.amount_x,
            token_0_decimals=token_0.decimals,
            token_0=token_0.address,
            token_1_amount=valuation.amount_y,
            token_1_decimals=token_1.decimals,
            token_1=token_1.address,
        )

    def fetch_depositor(self, tx_hash: bytes, farm: ChecksumAddress) -> ChecksumAddress:
        """
        Returns the user from the last Deposit event emitted by the farm that received the NFT, or the zero
        address if the NFT was transferred without a Deposit.  Deposits emitted by other contracts in the
        transaction are ignored
        """
        depositor = ZERO_ADDRESS
        for tx_log in self.reader.transaction_logs(tx_hash):
            if tx_log.address == farm and self.deposit_decoder.matches(tx_log):
                depositor = self.decode_log(self.deposit_decoder, tx_log).data["user"]
        return depositor

    def fetch_position(self, manager: ChecksumAddress, token_id: int, block_number: int) -> tuple[Position, int]:
        """
        Reads the tick range & liquidity of a position NFT from the LiquidityManager

        :return: (Position, pool_id)
        """
        liquidity = self.reader.call_contract(
            manager, "izumi_liquidity_manager", "liquidities", [token_id], block_number
        )
        left_point, right_point, position_liquidity, pool_id = liquidity[0], liquidity[1], liquidity[2], liquidity[7]

        try:
            position = Position(left_tick=left_point, right_tick=right_point, liquidity=position_liquidity)
        except InvalidPositionError as exc:
            raise AdapterError(f"Position {token_id} has invalid state at block {block_number}") from exc

        return position, pool_id

    def fetch_pool_state(
        self,
        manager: ChecksumAddress,
        token_x: ChecksumAddress,
        token_y: ChecksumAddress,
        fee: int,
        block_number: int,
    ) -> PoolState:
        """
        Resolves the pool for a token pair & fee through the LiquidityManager, and reads its state.
        Raises PoolNotFoundError if no pool is deployed for the pair.
        """
        pool_address = self.reader.call_contract(
            manager, "izumi_liquidity_manager", "pool", [token_x, token_y, fee], block_number
        )
        if is_zero_address(pool_address):
            raise PoolNotFoundError(f"No pool for {token_x}/{token_y} with fee {fee} at block {block_number}")

        state = self.reader.call_contract(pool_address, "izumi_pool", "state", [], block_number)
        logger.debug(f"Pool {pool_address} at block {block_number}: current point {state[1]}, liquidity {state[6]}")

        return PoolState(
            current_tick=state[1],
            sqrt_price_96=state[0],
            liquidity=state[6],
            liquidity_x=state[7],
        )
