"""Command: minimum of numbers read line by line."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import click

from vecmin.commands._base import VecCommand

if TYPE_CHECKING:
    from vecmin.commands._context import AppContext


@click.command(
    cls=VecCommand,
    examples="""\
  vecmin read                             # type numbers, end with Ctrl-D
  vecmin read numbers.txt
  seq 10 -1 1 | vecmin -q read
  vecmin -v read numbers.txt              # also list values and skipped lines""",
)
@click.argument("source", type=click.File("rb"), default="-")
@click.pass_obj
def read(app: AppContext, source: BinaryIO) -> None:
    """Read one number per line from SOURCE (default: stdin) and print the minimum.

    Lines that are not 32-bit integers are skipped with a notice.
    """
    from vecmin.services.minimum import MinimumService

    svc = MinimumService(app.settings)
    app.notify(app.settings.reader.prompt)
    app.emit(svc.read(source, on_skip=app.notify))
