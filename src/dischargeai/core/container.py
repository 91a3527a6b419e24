"""
Dependency injection container for Discharge-AI application.

This module provides a lightweight dependency injection container
for managing application dependencies and their lifecycle. One container
is built per application instance and stored on ``app.state``.
"""

from typing import Any, Callable, Dict

from .config import Settings
from .exceptions import ConfigurationError


class Container:
    """Lightweight dependency injection container."""

    def __init__(self, settings: Settings) -> None:
        self._factories: Dict[str, Callable[[], Any]] = {}
        self._singletons: Dict[str, Any] = {}
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings

    def register_singleton(self, name: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[name] = instance

    def register_factory(self, name: str, factory: Callable[[], Any]) -> None:
        """Register a factory function."""
        self._factories[name] = factory

    def get(self, name: str) -> Any:
        """Get a service by name."""
        if name in self._singletons:
            return self._singletons[name]

        if name in self._factories:
            instance = self._factories[name]()
            # Cache as singleton if it's a factory
            self._singletons[name] = instance
            return instance

        raise ConfigurationError(f"Service '{name}' not found")


# Common service names
class ServiceNames:
    """Common service names used throughout the application."""

    SETTINGS = "settings"
    DISCHARGE_REPOSITORY = "discharge_repository"
    COMPLETION_SERVICE = "completion_service"
    PDF_EXPORTER = "pdf_exporter"
    DOCX_EXPORTER = "docx_exporter"


def _repository_factory(settings: Settings) -> Callable[[], Any]:
    def factory():
        if settings.storage.backend == "memory":
            from ..adapters.db.memory.discharge_repository import InMemoryDischargeSummaryRepository

            return InMemoryDischargeSummaryRepository()
        from ..adapters.db.mongo.repositories.discharge_repository import MongoDischargeSummaryRepository

        return MongoDischargeSummaryRepository()

    return factory


def _completion_factory(settings: Settings) -> Callable[[], Any]:
    def factory():
        from ..adapters.external.completion_service_openai import OpenAICompletionService
        from .ai_client import ChatCompletionClient

        return OpenAICompletionService(ChatCompletionClient.from_settings(settings))

    return factory


def build_container(settings: Settings) -> Container:
    """Create a container with the default adapters registered lazily."""
    from ..adapters.export.docx_exporter import DocxDischargeExporter
    from ..adapters.export.pdf_exporter import PdfDischargeExporter

    container = Container(settings)
    container.register_singleton(ServiceNames.SETTINGS, settings)
    container.register_factory(ServiceNames.DISCHARGE_REPOSITORY, _repository_factory(settings))
    container.register_factory(ServiceNames.COMPLETION_SERVICE, _completion_factory(settings))
    container.register_factory(ServiceNames.PDF_EXPORTER, lambda: PdfDischargeExporter(settings.hospital))
    container.register_factory(ServiceNames.DOCX_EXPORTER, lambda: DocxDischargeExporter(settings.hospital))
    return container
