"""flcss CLI entry point: Click group with subcommands."""

import logging

import click

from flcss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="flcss")
@click.option("--verbose", "-v", is_flag=True, help="Log compiler debug output to stderr")
def cli(verbose: bool) -> None:
    """flcss - compile nested JSON style trees into flat CSS."""
    if verbose:
        logging.basicConfig(format="%(name)s: %(message)s")
        logging.getLogger("flcss").setLevel(logging.DEBUG)


# Import and register subcommands
from flcss.cli.compile import compile_cmd  # noqa: E402
from flcss.cli.animate import animate  # noqa: E402

cli.add_command(compile_cmd)
cli.add_command(animate)
