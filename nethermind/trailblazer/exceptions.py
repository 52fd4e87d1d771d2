class AdapterError(Exception):
    """

    Raised when an adapter cannot produce a record for a log it recognized.  Processing of the
    current batch of logs is aborted, since the record cannot be skipped without losing data.

    """


class PoolNotFoundError(AdapterError):
    """
    Raised when the pool lookup for a (token_x, token_y, fee) triple returns the zero address.

    A position without a pool cannot be valued, so the record is never emitted with partial data.
    """


class InvalidPositionError(ValueError):
    """
    Raised when a liquidity position is constructed with an invalid tick range or liquidity.
    The following conditions will result in this error being raised:

        * left_tick is greater than or equal to right_tick
        * liquidity is negative

    """


class ChainStateError(Exception):
    """
    Raised when a contract call against historical chain state fails.  Typically caused by querying
    a contract before it was deployed, or calling a function the contract does not implement.

    Troubleshooting steps:

    * Verify that all addresses are checksummed with eth_utils.to_checksum_address
    * Check that the RPC node is an archive node if querying old blocks
    * Double check that RPC connection is working & node is synced to correct chain

    """


class DecodingError(Exception):
    """

    Raised when issues occur with event decoding, or when an ABI cannot be loaded

    """
