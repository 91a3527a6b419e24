"""
Dependency container tests.
"""

import pytest

from dischargeai.adapters.db.memory.discharge_repository import InMemoryDischargeSummaryRepository
from dischargeai.adapters.db.mongo.repositories.discharge_repository import MongoDischargeSummaryRepository
from dischargeai.adapters.export.docx_exporter import DocxDischargeExporter
from dischargeai.adapters.export.pdf_exporter import PdfDischargeExporter
from dischargeai.core.config import StorageSettings
from dischargeai.core.container import Container, ServiceNames, build_container
from dischargeai.core.exceptions import ConfigurationError


def test_memory_backend_selected(settings):
    container = build_container(settings)
    repo = container.get(ServiceNames.DISCHARGE_REPOSITORY)
    assert isinstance(repo, InMemoryDischargeSummaryRepository)
    assert container.get(ServiceNames.DISCHARGE_REPOSITORY) is repo


def test_mongo_backend_selected(settings):
    mongo_settings = settings.model_copy(update={"storage": StorageSettings(backend="mongo")})
    repo = build_container(mongo_settings).get(ServiceNames.DISCHARGE_REPOSITORY)
    assert isinstance(repo, MongoDischargeSummaryRepository)


def test_exporters_registered(settings):
    container = build_container(settings)
    assert isinstance(container.get(ServiceNames.PDF_EXPORTER), PdfDischargeExporter)
    assert isinstance(container.get(ServiceNames.DOCX_EXPORTER), DocxDischargeExporter)


def test_factory_runs_once_on_first_get(settings):
    container = Container(settings)
    calls = []
    container.register_factory("service", lambda: calls.append(1) or object())
    assert calls == []

    first = container.get("service")

    assert container.get("service") is first
    assert calls == [1]


def test_singleton_overrides_factory(settings):
    container = build_container(settings)
    fake = object()
    container.register_singleton(ServiceNames.COMPLETION_SERVICE, fake)
    assert container.get(ServiceNames.COMPLETION_SERVICE) is fake


def test_unknown_service_raises(settings):
    container = Container(settings)
    with pytest.raises(ConfigurationError):
        container.get("missing")
