"""Fixtures for incident blast feature tests."""

import pytest

from infrastructure.notifications import BlastOrchestrator, GatewayRegistry
from modules.incident_blast.repository import (
    InMemoryBlastRepository,
    InMemoryEmployeeDirectory,
)
from modules.incident_blast.service import IncidentBlastService


@pytest.fixture
def employees(recipient_factory):
    """A small workforce across two departments, one employee inactive."""
    return [
        recipient_factory(id="C-00001", name="Budi", phone="081200000001", department="Operation"),
        recipient_factory(id="C-00002", name="Siti", phone="081200000002", department="Operation"),
        recipient_factory(id="C-00003", name="Andi", phone="081200000003", department="HSE"),
        recipient_factory(
            id="C-00004",
            name="Dewi",
            phone="081200000004",
            department="HSE",
            status="inactive",
        ),
    ]


@pytest.fixture
def directory(employees):
    return InMemoryEmployeeDirectory(employees)


@pytest.fixture
def repository():
    return InMemoryBlastRepository()


@pytest.fixture
def gateways(stub_gateway_factory):
    return {
        "twilio": stub_gateway_factory(name="twilio"),
        "notif": stub_gateway_factory(name="notif"),
    }


@pytest.fixture
def registry(gateways):
    return GatewayRegistry(gateways, default="twilio")


@pytest.fixture
def service_factory(directory, repository, settings, recorded_sleep):
    """Factory for IncidentBlastService wired with in-memory collaborators.

    Example:
        service = service_factory(registry)
    """

    def _factory(registry, **kwargs):
        return IncidentBlastService(
            registry=registry,
            directory=kwargs.get("directory", directory),
            repository=kwargs.get("repository", repository),
            settings=kwargs.get("settings", settings),
            orchestrator_factory=lambda gateway: BlastOrchestrator(
                gateway,
                batch_size=kwargs.get("batch_size", 10),
                batch_pause_seconds=0,
                sleep=recorded_sleep,
            ),
        )

    return _factory


@pytest.fixture
def service(service_factory, registry):
    return service_factory(registry)


@pytest.fixture
def blast_request_data():
    return {
        "incident_type": "Kebakaran",
        "location": "Workshop B",
        "description": "Asap terlihat dari gudang oli",
        "current_status": "Tim ERT di lokasi",
        "instructions": "Evakuasi ke titik kumpul 2",
    }
