import logging
from typing import Any, Protocol, Sequence

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address as tca
from web3 import Web3
from web3.exceptions import BadFunctionCallOutput, ContractLogicError

from nethermind.trailblazer.abis import load_abi
from nethermind.trailblazer.exceptions import ChainStateError
from nethermind.trailblazer.types.evm import BlockInfo, Log

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("trailblazer").getChild("chain_interface")


class ChainReader(Protocol):
    """
    Read only access to historical chain state.  Adapters only ever read through this interface,
    so RPC transport, retries, and caching are left to the implementation.
    """

    def block_at(self, block_number: int) -> BlockInfo:
        """Returns number and timestamp of a block"""

    def call_contract(
        self,
        address: ChecksumAddress | str,
        abi_name: str,
        function_name: str,
        args: Sequence[Any],
        block_number: int,
    ) -> Any:
        """Calls a view function of a contract at a historical block, returning the decoded output"""

    def transaction_logs(self, tx_hash: bytes) -> list[Log]:
        """Returns all logs emitted by a transaction"""


class Web3ChainReader:
    """
    :class:`ChainReader` backed by a :class:`~web3.Web3` connection.  Contract calls are made with the
    ABIs bundled in :mod:`nethermind.trailblazer.abis`, and require an archive node when reading old blocks.
    """

    w3: Web3

    def __init__(self, w3: Web3):  # pylint: disable=invalid-name
        self.w3 = w3

    @classmethod
    def from_rpc_url(cls, json_rpc: str) -> "Web3ChainReader":
        """Initialize from an HTTP JSON RPC url"""
        return cls(Web3(Web3.HTTPProvider(json_rpc)))

    def block_at(self, block_number: int) -> BlockInfo:
        block = self.w3.eth.get_block(block_number)
        return BlockInfo(number=block["number"], timestamp=block["timestamp"])

    def call_contract(
        self,
        address: ChecksumAddress | str,
        abi_name: str,
        function_name: str,
        args: Sequence[Any],
        block_number: int,
    ) -> Any:
        contract = self.w3.eth.contract(address=tca(address), abi=load_abi(abi_name))
        logger.debug(f"Calling {abi_name}.{function_name}{tuple(args)} on {address} at block {block_number}")

        try:
            return getattr(contract.functions, function_name)(*args).call(block_identifier=block_number)
        except (BadFunctionCallOutput, ContractLogicError) as exc:
            raise ChainStateError(
                f"Call to {abi_name}.{function_name} on {address} failed at block {block_number}.  Likely "
                f"querying state prior to contract deployment"
            ) from exc

    def transaction_logs(self, tx_hash: bytes) -> list[Log]:
        receipt = self.w3.eth.get_transaction_receipt(tx_hash)  # type: ignore[arg-type]
        return [Log.from_rpc(log) for log in receipt["logs"]]

    def get_logs(
        self,
        addresses: Sequence[ChecksumAddress],
        from_block: int | str,
        to_block: int | str,
    ) -> list[Log]:
        """
        Fetches all logs emitted by addresses in a block range with a single eth_getLogs request

        :param addresses: contract addresses to fetch logs for
        :param from_block: first block of the range, or a block tag
        :param to_block: last block of the range, or a block tag
        :return: logs ordered by block number & log index
        """
        raw_logs = self.w3.eth.get_logs(
            {
                "address": list(addresses),
                "fromBlock": from_block,  # type: ignore[typeddict-item]
                "toBlock": to_block,  # type: ignore[typeddict-item]
            }
        )
        logger.info(f"Fetched {len(raw_logs)} logs between blocks {from_block} and {to_block}")
        return [Log.from_rpc(log) for log in raw_logs]
