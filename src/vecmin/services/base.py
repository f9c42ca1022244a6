"""BaseService — shared foundation for vecmin services.

Every service receives the frozen :class:`VecminSettings` at construction
time and reads its configured defaults (sample values, reader messages)
from there rather than from globals.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vecmin.config.settings import VecminSettings


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class MinimumService(BaseService):
            def sample(self) -> ServiceResult:
                values = self._settings.sample.values
                ...
    """

    def __init__(self, settings: VecminSettings) -> None:
        self._settings = settings
