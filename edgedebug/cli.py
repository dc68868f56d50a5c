"""Main CLI entry point for edgedebug."""

import click

from . import __version__
from .commands import get


@click.group()
@click.version_option(version=__version__)
def main():
    """Inspect the resources persisted on an edge node without a cluster connection."""
    pass


main.add_command(get.get)


if __name__ == "__main__":
    main()
