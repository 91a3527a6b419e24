"""
Demo data seeding tests.
"""

from dischargeai.adapters.db.memory.discharge_repository import InMemoryDischargeSummaryRepository
from dischargeai.application.use_cases.seed_discharge_summaries import (
    DEMO_GENERATED_SUMMARY,
    SeedDischargeSummariesUseCase,
)


async def test_seeds_empty_store_once():
    repo = InMemoryDischargeSummaryRepository()
    use_case = SeedDischargeSummariesUseCase(repo)

    seeded = await use_case.execute()
    assert seeded is not None
    assert seeded.patient_name == "Baby of Priya"
    assert seeded.generated_summary == DEMO_GENERATED_SUMMARY

    assert await use_case.execute() is None
    assert await repo.count() == 1


async def test_skips_non_empty_store(draft):
    repo = InMemoryDischargeSummaryRepository()
    await repo.create(draft)
    assert await SeedDischargeSummariesUseCase(repo).execute() is None
    assert await repo.count() == 1


def test_app_seeds_on_startup_when_enabled(settings, repository, completion, valid_payload):
    from fastapi.testclient import TestClient

    from dischargeai.app import create_app
    from dischargeai.core.container import ServiceNames, build_container

    seeded_settings = settings.model_copy(update={"seed_demo_data": True})
    container = build_container(seeded_settings)
    container.register_singleton(ServiceNames.DISCHARGE_REPOSITORY, repository)
    container.register_singleton(ServiceNames.COMPLETION_SERVICE, completion)

    with TestClient(create_app(settings=seeded_settings, container=container)) as client:
        listed = client.get("/api/discharges").json()

    assert len(listed) == 1
    assert listed[0]["ipNumber"] == "IP123456"
    assert completion.requests == []
