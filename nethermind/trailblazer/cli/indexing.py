import logging

import click

from nethermind.trailblazer.adapters import AdapterName, build_indexer
from nethermind.trailblazer.chain_interface import Web3ChainReader
from nethermind.trailblazer.exceptions import AdapterError, ChainStateError, DecodingError
from nethermind.trailblazer.types.utils import records_to_json

from .utils import (
    cli_logger_config,
    from_block_option,
    group_options,
    json_rpc_option,
    parse_block_identifier,
    to_block_option,
    verbose_option,
)

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("trailblazer").getChild("cli")


@click.command(name="list-adapters")
def list_adapters_command():
    """List the adapters that can be indexed"""
    for adapter in AdapterName:
        click.echo(adapter.value)


@click.command(name="index")
@click.argument("adapter", type=click.Choice(list(AdapterName.__members__.keys())))
@group_options(json_rpc_option, from_block_option, to_block_option, verbose_option)
def index_command(adapter: str, json_rpc: str | None, from_block: str, to_block: str, verbose: bool):
    """
    Index the logs of an adapter's contracts over a block range, and print the resulting records as JSON
    """
    console = cli_logger_config(root_logger, logging.DEBUG if verbose else logging.INFO)

    if not json_rpc:
        raise click.UsageError("--json-rpc must be provided, or the JSON_RPC environment variable must be set")

    reader = Web3ChainReader.from_rpc_url(json_rpc)
    indexer = build_indexer(AdapterName[adapter], reader)

    console.print(f"[bold]Indexing {adapter}[/bold] for contracts {', '.join(indexer.addresses())}")

    try:
        logs = reader.get_logs(
            indexer.addresses(),
            parse_block_identifier(from_block),
            parse_block_identifier(to_block),
        )
        records = indexer.index(logs)
    except (AdapterError, ChainStateError, DecodingError) as exc:
        logger.error(f"Failed to index {adapter}: {exc}")
        raise click.ClickException(str(exc)) from exc

    console.print(f"[green]Indexed {len(records)} records from {len(logs)} logs")
    click.echo(records_to_json(records))
