#!/usr/bin/env python3
"""
Algobox CLI
A Python CLI tool for working with a local Algorand node sandbox in Docker containers.
"""

import click

from algobox import __version__
from algobox.commands import catchup, health


@click.group()
@click.version_option(version=__version__)
def cli():
    """Algobox CLI - Algorand node sandbox helpers."""
    pass


cli.add_command(catchup)
cli.add_command(health)


def main():
    """Main entry point for the algobox CLI."""
    cli()


if __name__ == "__main__":
    main()
