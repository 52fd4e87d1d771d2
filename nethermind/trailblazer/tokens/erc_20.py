from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

from nethermind.trailblazer.chain_interface import ChainReader


class ERC20Token:
    """
    Class for representing ERC20 Tokens.  Can be initialized from on-chain token, and will query
    token decimals from contract.

    Can be used to convert raw token amounts into human-readable amounts.
    """

    address: ChecksumAddress
    """
        Checksum Address of the Token Contract
    """

    decimals: int
    """
        Number of decimals from Token Contract
    """

    def __init__(self, address: ChecksumAddress | str, decimals: int) -> None:
        self.address = to_checksum_address(address)
        self.decimals = decimals

    def __repr__(self) -> str:
        return f"ERC20Token(address={self.address}, decimals={self.decimals})"

    @classmethod
    def from_chain(
        cls,
        reader: ChainReader,
        token_address: ChecksumAddress | str,
        block_number: int,
    ) -> "ERC20Token":
        """
        Initialize ERC20Token from on-chain token address.  Fetches token decimals from contract at block_number

        :param reader:
            :class:`~nethermind.trailblazer.chain_interface.ChainReader` used for the contract call
        :param token_address:
            hex address of ERC20 token contract
        :param block_number:
            block to query decimals at
        :return: :class:`~nethermind.trailblazer.tokens.ERC20Token`
        """
        decimals = reader.call_contract(token_address, "erc20", "decimals", [], block_number)
        return ERC20Token(address=token_address, decimals=decimals)

    def convert_decimals(self, raw_token_amount: int) -> float:
        """
        Divides raw token amounts by token decimals.

        :param int raw_token_amount:
            Raw token amount
        :return:
            Token amount adjusted by decimals
        """
        return raw_token_amount / 10**self.decimals
