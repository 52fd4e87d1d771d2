import logging
from typing import Any

from eth_abi import decode as eth_abi_decode
from eth_abi.exceptions import InsufficientDataBytes, NonEmptyPaddingBytes

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("trailblazer").getChild("decoding")


def collapse_if_tuple(abi_param: dict[str, Any]) -> str:
    """
    Converts a tuple from a dict to a parenthesized list of its types.

    >>> collapse_if_tuple({'components': [{'name': 'a', 'type': 'address'}, {'name': 'b', 'type': 'uint256'}],
    ...                    'type': 'tuple[]'})
    '(address,uint256)[]'
    """
    typ = abi_param["type"]
    if not typ.startswith("tuple"):
        return typ

    delimited = ",".join(collapse_if_tuple(c) for c in abi_param["components"])
    return f"({delimited}){typ[5:]}"


def abi_to_signature(abi_entry: dict[str, Any]) -> str:
    """
    Converts an ABI function or event entry to its signature.

    >>> abi_to_signature({'name': 'Transfer', 'type': 'event', 'inputs': [
    ...     {'name': 'from', 'type': 'address'}, {'name': 'to', 'type': 'address'},
    ...     {'name': 'value', 'type': 'uint256'}]})
    'Transfer(address,address,uint256)'
    """
    collapsed = [collapse_if_tuple(abi_input) for abi_input in abi_entry.get("inputs", [])]
    return f"{abi_entry['name']}({','.join(collapsed)})"


def decode_evm_abi_from_types(types: list[str], data: bytes) -> tuple[Any, ...] | None:
    """
    Decodes ABI data from types and data bytes.  Handles decoding errors by logging and returning None.

    :param types: list of ABI types
    :param data: ABI encoded bytes
    :return: tuple of decoded values, or None if data cannot be decoded as types
    """
    try:
        return eth_abi_decode(types, data)
    except InsufficientDataBytes:
        logger.debug(f"Insufficient data bytes while decoding {data.hex()} for types {types}")
        return None
    except NonEmptyPaddingBytes:
        logger.debug(f"Non-empty padding bytes while decoding {data.hex()} for types {types}")
        return None
    except OverflowError:
        logger.debug(f"Overflow error while decoding {data.hex()} for types {types}")
        return None
