"""LineNumberReader — fault-tolerant, line-oriented integer input.

Reads a stream to its end, one number per line.  A malformed line never
stops the read: it is recorded, a notice goes to the ``on_skip``
collaborator, and the next line is read.  Only the end of the stream, or
the stream itself failing, ends the loop.

Byte streams are decoded one line at a time, so a line that is not valid
text ends the read without losing the lines before it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from vecmin.config.models import DEFAULT_NOTICE
from vecmin.domain.numbers import NumberParseError, ParseFailure, parse_i32

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkippedLine:
    """A line that did not parse, with its 1-based position."""

    line_no: int
    text: str
    reason: ParseFailure

    def to_dict(self) -> dict[str, object]:
        return {"line_no": self.line_no, "text": self.text, "reason": str(self.reason)}


@dataclass(frozen=True)
class ReadOutcome:
    """Everything :meth:`LineNumberReader.read_all` saw.

    Attributes:
        values: Parsed numbers in read order.
        skipped: Malformed lines in read order.
        unreadable: Error message if the stream failed before its end.
        lines_read: Lines consumed, parsed or not.
    """

    values: tuple[int, ...] = ()
    skipped: tuple[SkippedLine, ...] = ()
    unreadable: str | None = None
    lines_read: int = 0


class LineNumberReader:
    """Collect signed 32-bit integers from a stream of lines.

    Args:
        notice: Text handed to *on_skip* for every malformed line.
        on_skip: Receives the notice; typically echoes it to the user.
        encoding: Used to decode lines that arrive as bytes.
    """

    def __init__(
        self,
        *,
        notice: str = DEFAULT_NOTICE,
        on_skip: Callable[[str], None] | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self.notice = notice
        self.on_skip = on_skip
        self.encoding = encoding

    def read_all(self, stream: Iterable[str] | Iterable[bytes]) -> ReadOutcome:
        """Read *stream* until it ends and return the parsed values.

        Blocks on each line.  The stream is not closed.  An ``OSError``
        raised while reading, or a bytes line that does not decode, is
        treated as the end of input; the values accumulated so far are
        still returned.
        """
        values: list[int] = []
        skipped: list[SkippedLine] = []
        unreadable: str | None = None
        line_no = 0

        lines = iter(stream)
        while True:
            try:
                raw = next(lines)
                line = raw.decode(self.encoding) if isinstance(raw, bytes) else raw
            except StopIteration:
                break
            except (OSError, UnicodeDecodeError) as exc:
                unreadable = str(exc) or type(exc).__name__
                logger.info("Stream unreadable at line %d: %s", line_no + 1, unreadable)
                break

            line_no += 1
            try:
                values.append(parse_i32(line))
            except NumberParseError as exc:
                entry = SkippedLine(line_no=line_no, text=exc.text, reason=exc.reason)
                skipped.append(entry)
                logger.debug("Skipped line %d (%s)", line_no, exc.reason)
                if self.on_skip is not None:
                    self.on_skip(self.notice)

        logger.debug("Read %d value(s), skipped %d line(s)", len(values), len(skipped))
        return ReadOutcome(
            values=tuple(values),
            skipped=tuple(skipped),
            unreadable=unreadable,
            lines_read=line_no,
        )
