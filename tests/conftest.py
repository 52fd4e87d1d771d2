import random
from typing import Any, Sequence

import pytest
from eth_abi import encode
from eth_utils import keccak, to_checksum_address

from nethermind.trailblazer.exceptions import ChainStateError
from nethermind.trailblazer.types.evm import BlockInfo, Log

BLOCK_TIME_OFFSET = 1_717_000_000


class FakeChainReader:
    """In-memory ChainReader.  Contract call results are registered by (address, function, args)"""

    def __init__(self):
        self.blocks: dict[int, BlockInfo] = {}
        self.calls: dict[tuple[str, str, tuple], Any] = {}
        self.receipts: dict[bytes, list[Log]] = {}
        self.logs: list[Log] = []
        self.call_history: list[tuple[str, str, tuple, int]] = []

    def add_call(self, address: str, function_name: str, args: Sequence[Any], result: Any):
        self.calls[(to_checksum_address(address), function_name, tuple(args))] = result

    def block_at(self, block_number: int) -> BlockInfo:
        return self.blocks.get(block_number, BlockInfo(number=block_number, timestamp=BLOCK_TIME_OFFSET + block_number))

    def call_contract(self, address, abi_name, function_name, args, block_number):
        key = (to_checksum_address(address), function_name, tuple(args))
        self.call_history.append((*key, block_number))
        if key not in self.calls:
            raise ChainStateError(f"No result registered for {abi_name}.{function_name}{tuple(args)} on {address}")

        result = self.calls[key]
        if isinstance(result, Exception):
            raise result
        return result

    def transaction_logs(self, tx_hash: bytes) -> list[Log]:
        return self.receipts.get(tx_hash, [])

    def get_logs(self, addresses, from_block, to_block) -> list[Log]:
        return [log for log in self.logs if log.address in addresses]


@pytest.fixture(name="random_address")
def fixture_random_address():
    def _generate_random_address():
        return to_checksum_address(random.randbytes(20).hex())

    return _generate_random_address


@pytest.fixture(name="fake_reader")
def fixture_fake_reader():
    return FakeChainReader()


@pytest.fixture(name="build_log")
def fixture_build_log():
    def _build_log(
        address: str,
        event_signature: str,
        topics: Sequence[tuple[str, Any]] = (),
        data: Sequence[tuple[str, Any]] = (),
        block_number: int = 100,
        transaction_hash: bytes | None = None,
        log_index: int = 0,
    ) -> Log:
        """Builds a raw log from typed topic and data values"""
        return Log(
            address=to_checksum_address(address),
            topics=[keccak(text=event_signature)] + [encode([typ], [value]) for typ, value in topics],
            data=encode([typ for typ, _ in data], [value for _, value in data]),
            block_number=block_number,
            transaction_hash=transaction_hash or random.randbytes(32),
            log_index=log_index,
        )

    return _build_log
