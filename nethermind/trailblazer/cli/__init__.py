import click

from nethermind.trailblazer.cli.indexing import index_command, list_adapters_command


@click.group()
def trailblazer_cli():
    """Command Line Interface for Trailblazer Adapters"""


trailblazer_cli.add_command(list_adapters_command)
trailblazer_cli.add_command(index_command)
