from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

ZERO_ADDRESS: ChecksumAddress = to_checksum_address("0x" + "00" * 20)


def is_zero_address(address: str) -> bool:
    """Returns True if address is the 0x0 address, regardless of checksum"""
    return int(address, 16) == 0
