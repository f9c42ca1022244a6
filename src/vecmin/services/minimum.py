"""MinimumService — reduce a sample or a stream of numbers to its minimum."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from vecmin.domain.numbers import I32_MAX, I32_MIN, in_i32_range
from vecmin.domain.reducer import vec_min
from vecmin.services.base import BaseService
from vecmin.services.reader import LineNumberReader
from vecmin.services.result import ServiceResult

logger = logging.getLogger(__name__)


class MinimumService(BaseService):
    """Minimum-of-a-collection operations.

    ``sample`` is the non-interactive variant over a fixed list;
    ``read`` pulls numbers from a text stream first.
    """

    def sample(self, values: Sequence[int] | None = None) -> ServiceResult:
        """Reduce *values*, or the configured ``[sample] values`` when None."""
        op = "sample_min"
        if values is None:
            values = self._settings.sample.values

        out_of_range = [v for v in values if not in_i32_range(v)]
        if out_of_range:
            return ServiceResult.failure(
                op,
                "OUT_OF_RANGE",
                f"Sample values must be between {I32_MIN} and {I32_MAX}",
                values=out_of_range,
            )

        return ServiceResult.success(op, self.reduce_values(values))

    def read(
        self,
        stream: Iterable[str] | Iterable[bytes],
        *,
        on_skip: Callable[[str], None] | None = None,
    ) -> ServiceResult:
        """Read numbers from *stream* and reduce them.

        Malformed lines are listed under ``skipped``.  A stream that fails
        part-way still yields a result over what was read, with a warning.
        """
        reader = LineNumberReader(notice=self._settings.reader.notice, on_skip=on_skip)
        outcome = reader.read_all(stream)

        warnings: list[str] = []
        if outcome.unreadable is not None:
            warnings.append(
                f"Input stream unreadable after {outcome.lines_read} line(s): "
                f"{outcome.unreadable}"
            )

        data = self.reduce_values(outcome.values)
        data["skipped"] = [s.to_dict() for s in outcome.skipped]
        return ServiceResult.success("read_min", data, warnings=warnings)

    @staticmethod
    def reduce_values(values: Sequence[int]) -> dict[str, Any]:
        """Fold *values* with :func:`vec_min` into a result payload."""
        result = vec_min(values)
        logger.debug("Reduced %d value(s) to %r", len(values), result)
        return {
            "values": list(values),
            "count": len(values),
            "minimum": result.to_optional(),
            "display": result.display(),
        }
