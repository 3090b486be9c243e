"""fieldrules CLI entry point."""

import click


@click.group()
def cli():
    """fieldrules — declarative field validation CLI."""
    pass


# Register subcommands
from fieldrules.cli.check_cmd import check, rules  # noqa: E402

cli.add_command(check)
cli.add_command(rules)
