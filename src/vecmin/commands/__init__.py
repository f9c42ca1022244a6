"""Subcommand modules for vecmin.

Provides register_commands() which uses deferred imports so that
``vecmin --help`` never loads the service layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from vecmin.commands.read import read
    from vecmin.commands.sample import sample

    cli.add_command(sample)
    cli.add_command(read)
