import logging
import os
from logging import Logger

import click
from rich.console import Console
from rich.logging import RichHandler

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("trailblazer").getChild("cli")


def cli_logger_config(instrument_logger: Logger, level: int = logging.INFO) -> Console:
    """Replaces the handlers of instrument_logger with a RichHandler writing to stderr"""
    rich_console = Console(stderr=True)
    instrument_logger.handlers.clear()

    instrument_logger.addHandler(RichHandler(show_path=False, console=rich_console))
    instrument_logger.setLevel(level)
    return rich_console


def group_options(*options):
    """Decorator to group multiple click options together"""

    def wrapper(function):
        for option in reversed(options):
            function = option(function)
        return function

    return wrapper


def parse_block_identifier(block: str) -> int | str:
    """Converts integer strings to int, and leaves block tags like 'latest' untouched"""
    if block.isdigit():
        return int(block)
    if block.startswith("0x"):
        return int(block, 16)
    return block


# -------------------------------------------------------
#    CLI Secrets, Connections, and Configurations
# -------------------------------------------------------
json_rpc_option = click.option(
    "--json-rpc",
    "-rpc",
    "json_rpc",
    default=os.environ.get("JSON_RPC"),
    help="RPC url to query logs and chain state from.  If not provided, will use the JSON_RPC environment variable",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Log every contract call and skipped log",
)

# -------------------------------------------------------
#    Block Range
# -------------------------------------------------------
from_block_option = click.option(
    "--from-block",
    "-from",
    "from_block",
    required=True,
    type=str,
    help="Start block for log query. Can be an integer, or a block identifier string like 'earliest'",
)
to_block_option = click.option(
    "--to-block",
    "-to",
    "to_block",
    default="latest",
    type=str,
    show_default=True,
    help="End block for log query. Can be an integer, or a block identifier string like 'latest'",
)
