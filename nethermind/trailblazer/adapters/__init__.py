from enum import Enum

from nethermind.trailblazer.chain_interface import ChainReader

from .avalon import ClaimIndexer
from .base import LogIndexer
from .drips import LockIndexer
from .izumi import LPTransferIndexer

# pylint: disable=invalid-name


class AdapterName(Enum):
    """Adapters that can be selected from the CLI"""

    IzumiLP = "IzumiLP"
    AvalonClaim = "AvalonClaim"
    DripsLock = "DripsLock"


def build_indexer(adapter: AdapterName, reader: ChainReader) -> LogIndexer:
    """
    Returns the indexer for an adapter, configured with its default contract addresses

    :param adapter: adapter to build
    :param reader: chain reader used by the indexer for block & contract queries
    :return: :class:`~nethermind.trailblazer.adapters.base.LogIndexer`
    """
    match adapter:
        case AdapterName.IzumiLP:
            return LPTransferIndexer(reader)
        case AdapterName.AvalonClaim:
            return ClaimIndexer(reader)
        case AdapterName.DripsLock:
            return LockIndexer(reader)
        case _:
            raise NotImplementedError(f"Adapter {adapter} not implemented")


__all__ = [
    "AdapterName",
    "build_indexer",
    "ClaimIndexer",
    "LockIndexer",
    "LogIndexer",
    "LPTransferIndexer",
]
