"""Tests for BaseService."""

from vecmin.config.settings import VecminSettings
from vecmin.services.base import BaseService
from vecmin.services.minimum import MinimumService


class TestBaseService:
    def test_settings_stored(self, settings: VecminSettings) -> None:
        service = BaseService(settings)
        assert service._settings is settings

    def test_minimum_service_inherits(self, settings: VecminSettings) -> None:
        assert isinstance(MinimumService(settings), BaseService)
