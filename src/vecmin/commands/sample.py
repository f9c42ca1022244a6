"""Command: minimum of the configured sample list."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vecmin.commands._base import VecCommand
from vecmin.domain.numbers import I32_MAX, I32_MIN

if TYPE_CHECKING:
    from vecmin.commands._context import AppContext


@click.command(
    cls=VecCommand,
    examples="""\
  vecmin sample                           # [sample] values from vecmin.toml
  vecmin sample --value 3 --value -8      # explicit values
  vecmin --json sample""",
)
@click.option(
    "--value",
    "values",
    multiple=True,
    type=click.IntRange(I32_MIN, I32_MAX),
    help="Value to include (repeatable). Replaces the configured sample.",
)
@click.pass_obj
def sample(app: AppContext, values: tuple[int, ...]) -> None:
    """Print the minimum of a fixed list of numbers."""
    from vecmin.services.minimum import MinimumService

    svc = MinimumService(app.settings)
    app.emit(svc.sample(list(values) if values else None))
