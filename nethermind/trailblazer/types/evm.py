from dataclasses import dataclass, field
from typing import Any

from eth_typing import ChecksumAddress
from eth_utils import to_bytes, to_checksum_address


def _as_bytes(value: Any) -> bytes:
    """Accepts HexBytes, bytes, or 0x-prefixed hex strings as returned by different RPC providers"""
    if isinstance(value, str):
        return to_bytes(hexstr=value)
    return bytes(value)


@dataclass(slots=True)
class BlockInfo:
    """Block number and timestamp of a block.  Only the fields required for record metadata are stored"""

    number: int
    timestamp: int


@dataclass(slots=True)
class Log:
    """
    Raw EVM event log.  Topics and data are kept undecoded, and are decoded by each adapter
    that recognizes the event signature in topics[0]
    """

    address: ChecksumAddress
    topics: list[bytes]
    data: bytes
    block_number: int
    transaction_hash: bytes
    log_index: int = 0
    removed: bool = field(default=False)

    @classmethod
    def from_rpc(cls, log_receipt: dict[str, Any]) -> "Log":
        """
        Initialize Log from a web3 LogReceipt, or from the raw JSON-RPC response of eth_getLogs

        :param log_receipt: log dictionary with camelCase keys
        :return: :class:`~nethermind.trailblazer.types.evm.Log`
        """
        block_number = log_receipt["blockNumber"]
        log_index = log_receipt.get("logIndex", 0)

        return Log(
            address=to_checksum_address(log_receipt["address"]),
            topics=[_as_bytes(topic) for topic in log_receipt["topics"]],
            data=_as_bytes(log_receipt["data"]),
            block_number=int(block_number, 16) if isinstance(block_number, str) else block_number,
            transaction_hash=_as_bytes(log_receipt["transactionHash"]),
            log_index=int(log_index, 16) if isinstance(log_index, str) else log_index,
            removed=log_receipt.get("removed", False),
        )

    @property
    def signature(self) -> bytes | None:
        """Returns topics[0], which stores the keccak hash of the event signature for non-anonymous events"""
        return self.topics[0] if self.topics else None
