import itertools
import logging
from typing import Any, Callable, Sequence

from eth_typing.abi import ABIEvent
from eth_utils import to_checksum_address
from eth_utils.abi import event_signature_to_log_topic
from web3._utils.abi import (
    exclude_indexed_event_inputs,
    get_indexed_event_inputs,
    normalize_event_input_types,
)
from web3._utils.events import get_event_abi_types_for_decoding

from nethermind.trailblazer.abis import get_event_abi
from nethermind.trailblazer.exceptions import DecodingError
from nethermind.trailblazer.types.decoding import DecodedEvent
from nethermind.trailblazer.types.evm import Log

from .utils import abi_to_signature, decode_evm_abi_from_types

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("trailblazer").getChild("decoding")


class EVMEventDecoder:
    """
    Stores precomputed data for Efficiently Decoding EVM Events
    """

    event_signature: str
    signature: bytes
    abi_name: str
    name: str
    indexed_params: int

    _data_types: list[str]
    _data_names: list[str]
    _topic_types: list[str]
    _topic_names: list[str]

    formatters: dict[str, Callable[[Any], Any]]

    def __init__(self, abi_event: ABIEvent, abi_name: str):
        if abi_event.get("type") != "event":
            raise DecodingError(f"{abi_name} -> {abi_event.get('name')} is not an event ABI")

        event_signature = abi_to_signature(abi_event)

        log_topics_abi = get_indexed_event_inputs(abi_event)
        normalized_topics = normalize_event_input_types(log_topics_abi)
        log_topic_types = list(get_event_abi_types_for_decoding(normalized_topics))
        log_topic_names = [param["name"] for param in log_topics_abi]

        log_data_abi = exclude_indexed_event_inputs(abi_event)
        normalized_data = normalize_event_input_types(log_data_abi)
        log_data_types = list(get_event_abi_types_for_decoding(normalized_data))
        log_data_names = [param["name"] for param in log_data_abi]

        duplicate_names = set(log_topic_names).intersection(log_data_names)
        if duplicate_names:
            raise DecodingError(
                f"Cannot have overlapping names between topics and data.  {abi_name} -> {abi_event['name']} "
                f"Has duplicate names: {list(duplicate_names)}"
            )

        self.indexed_params = len(log_topic_names)
        if self.indexed_params > 3:
            raise DecodingError("Non-anonymous events can emit at most 3 indexed parameters")

        self._topic_names = log_topic_names
        self._topic_types = log_topic_types
        self._data_names = log_data_names
        self._data_types = log_data_types

        logger.debug(
            f"Adding Event Decoder for {event_signature} with Topic Types: {self._topic_types} and "
            f"Data Types: {self._data_types}"
        )

        self.abi_name = abi_name
        self.event_signature = event_signature
        self.signature = event_signature_to_log_topic(event_signature)
        self.name = abi_event["name"]
        self.formatters = {"address": to_checksum_address}

    @classmethod
    def from_bundled_abi(cls, abi_name: str, event_name: str) -> "EVMEventDecoder":
        """
        Initialize a decoder for an event in one of the ABIs bundled with trailblazer

        :param abi_name: name of the bundled ABI, ie "drips"
        :param event_name: name of the event, ie "DepositWithDuration"
        :return: :class:`~nethermind.trailblazer.decoding.EVMEventDecoder`
        """
        return cls(get_event_abi(abi_name, event_name), abi_name)

    def matches(self, log: Log) -> bool:
        """
        Returns True if the log was emitted by this event.  Events that share a signature but differ in the
        number of indexed params, such as ERC20 and ERC721 Transfers, are told apart by their topic count.
        """
        return len(log.topics) == self.indexed_params + 1 and log.topics[0] == self.signature

    def decode(self, log: Log) -> DecodedEvent | None:
        """
        Decodes Event data and topics of a log.  Returns None if the log does not match the event
        signature, or if the data cannot be decoded.

        :param log: raw log
        :return: DecodedEvent
        """
        if not self.matches(log):
            return None

        decoded_data = decode_evm_abi_from_types(self._data_types, log.data)
        decoded_topics = decode_evm_abi_from_types(self._topic_types, b"".join(log.topics[1:]))

        if decoded_data is None or decoded_topics is None:
            logger.debug(
                f"Error Decoding Event {self.event_signature} for topics {[t.hex() for t in log.topics]} "
                f"and data {log.data.hex()}"
            )
            return None

        formatted_data = self.apply_formatters(decoded_data, self._data_types)
        formatted_topics = self.apply_formatters(decoded_topics, self._topic_types)

        return DecodedEvent(
            abi_name=self.abi_name,
            name=self.name,
            data=dict(itertools.chain(zip(self._topic_names, formatted_topics), zip(self._data_names, formatted_data))),
            event_signature=self.event_signature,
        )

    def apply_formatters(self, decoding_result: Sequence[Any], types: list[str]) -> list[Any]:
        """
        Applies currently loaded formatters to decoding result.

        :param decoding_result: List of values returned from ABI Decoding
        :param types: List of types for each entry in decoding_result
        """
        formatted_values = []
        for value, typ in zip(decoding_result, types, strict=True):
            formatter = self.formatters.get(typ)
            if formatter is not None:
                formatted_values.append(formatter(value))
            else:
                formatted_values.append(value)

        return formatted_values
