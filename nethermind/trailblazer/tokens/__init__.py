from .erc_20 import ERC20Token

__all__ = ["ERC20Token"]
