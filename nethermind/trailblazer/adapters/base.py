import logging
from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address as tca

from nethermind.trailblazer.chain_interface import ChainReader
from nethermind.trailblazer.decoding import EVMEventDecoder
from nethermind.trailblazer.exceptions import DecodingError
from nethermind.trailblazer.types.decoding import DecodedEvent
from nethermind.trailblazer.types.evm import Log
from nethermind.trailblazer.types.records import Metadata

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("trailblazer").getChild("adapters")

RecordT = TypeVar("RecordT")


class LogIndexer(ABC, Generic[RecordT]):
    """
    Base class for protocol adapters.  An adapter declares the contract addresses it wants logs for, and
    converts the logs it recognizes into records.  Logs that do not match the adapter's events are skipped,
    and records are returned in the same order as the logs that produced them.
    """

    reader: ChainReader
    _addresses: list[ChecksumAddress]

    def __init__(self, reader: ChainReader, addresses: Sequence[str]):
        self.reader = reader
        self._addresses = [tca(addr) for addr in addresses]

    def addresses(self) -> list[ChecksumAddress]:
        """Contract addresses to fetch logs for"""
        return list(self._addresses)

    @abstractmethod
    def index(self, logs: Sequence[Log]) -> list[RecordT]:
        """
        Converts logs into records.

        :param logs: logs ordered by block number and log index
        :return: records for each recognized log, in log order
        """

    def metadata_for(self, log: Log) -> Metadata:
        """Fetches the block of a log and returns the record metadata"""
        block = self.reader.block_at(log.block_number)
        return Metadata(
            block_time=block.timestamp,
            block_number=block.number,
            tx_hash=log.transaction_hash,
        )

    @staticmethod
    def decode_log(decoder: EVMEventDecoder, log: Log) -> DecodedEvent:
        """Decodes a log that is known to match the decoder's signature, raising DecodingError on bad data"""
        decoded = decoder.decode(log)
        if decoded is None:
            raise DecodingError(
                f"Could not decode {decoder.event_signature} log {log.log_index} in transaction "
                f"0x{log.transaction_hash.hex()}"
            )
        return decoded
