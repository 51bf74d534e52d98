"""Tests for IncidentBlastService."""

import uuid

import pytest

from infrastructure.notifications import GatewayRegistry
from infrastructure.notifications.models import DeliveryStatus
from modules.incident_blast.errors import (
    BlastNotFoundError,
    NoRecipientsError,
    UnknownGatewayError,
)
from modules.incident_blast.schemas import IncidentBlastRequest


@pytest.mark.unit
class TestResolveRecipients:
    def test_all_targets_active_employees(self, service, blast_request_data):
        request = IncidentBlastRequest(**blast_request_data)

        ids = [r.id for r in service.resolve_recipients(request)]

        assert ids == ["C-00001", "C-00002", "C-00003"]

    def test_department(self, service, blast_request_data):
        request = IncidentBlastRequest(
            **blast_request_data, target_type="department", target_value="Operation"
        )

        ids = [r.id for r in service.resolve_recipients(request)]

        assert ids == ["C-00001", "C-00002"]

    def test_department_skips_inactive(self, service, blast_request_data):
        request = IncidentBlastRequest(
            **blast_request_data, target_type="department", target_value="HSE"
        )

        assert [r.id for r in service.resolve_recipients(request)] == ["C-00003"]

    def test_specific_ids(self, service, blast_request_data):
        request = IncidentBlastRequest(
            **blast_request_data,
            target_type="specific",
            employee_ids=["C-00003", "C-00004", "C-99999"],
        )

        assert [r.id for r in service.resolve_recipients(request)] == ["C-00003"]

    def test_specific_ids_keep_request_order(self, service, blast_request_data):
        request = IncidentBlastRequest(
            **blast_request_data,
            target_type="specific",
            employee_ids=["C-00003", "C-00001", "C-00002"],
        )

        ids = [r.id for r in service.resolve_recipients(request)]

        assert ids == ["C-00003", "C-00001", "C-00002"]


@pytest.mark.unit
class TestSendBlast:
    @pytest.mark.asyncio
    async def test_sends_and_records(self, service, repository, blast_request_data, gateways):
        record = await service.send_blast(IncidentBlastRequest(**blast_request_data))

        uuid.UUID(record.id)
        assert record.provider == "twilio"
        assert record.total_employees == 3
        assert record.success_count == 3
        assert record.failed_count == 0
        assert [r.employee_id for r in record.results] == ["C-00001", "C-00002", "C-00003"]
        assert record.incident_type == "Kebakaran"
        assert record.created_at.tzinfo is not None
        assert repository.get(record.id) == record
        assert len(gateways["twilio"].calls) == 3
        assert gateways["notif"].calls == []

    @pytest.mark.asyncio
    async def test_requested_provider(self, service, blast_request_data, gateways):
        record = await service.send_blast(
            IncidentBlastRequest(**blast_request_data, provider="notif")
        )

        assert record.provider == "notif"
        assert len(gateways["notif"].calls) == 3

    @pytest.mark.asyncio
    async def test_partial_failure_counts(
        self, service_factory, stub_gateway_factory, blast_request_data
    ):
        gateway = stub_gateway_factory(
            name="notif", failures={"C-00002": "Nomor tidak terdaftar"}
        )
        service = service_factory(GatewayRegistry({"notif": gateway}, default="notif"))

        record = await service.send_blast(IncidentBlastRequest(**blast_request_data))

        assert record.success_count == 2
        assert record.failed_count == 1
        assert record.success_count + record.failed_count == record.total_employees
        assert record.results[1].status == DeliveryStatus.FAILED
        assert record.results[1].error_message == "Nomor tidak terdaftar"

    @pytest.mark.asyncio
    async def test_fallback_when_requested_gateway_unconfigured(
        self, service_factory, stub_gateway_factory, blast_request_data
    ):
        registry = GatewayRegistry(
            {
                "twilio": stub_gateway_factory(name="twilio", configured=False),
                "notif": stub_gateway_factory(name="notif"),
            },
            default="twilio",
        )

        record = await service_factory(registry).send_blast(
            IncidentBlastRequest(**blast_request_data)
        )

        assert record.provider == "notif"
        assert record.success_count == 3

    @pytest.mark.asyncio
    async def test_no_gateway_configured_records_configuration_errors(
        self, service_factory, stub_gateway_factory, blast_request_data
    ):
        registry = GatewayRegistry(
            {
                "twilio": stub_gateway_factory(name="twilio", configured=False),
                "notif": stub_gateway_factory(name="notif", configured=False),
            },
            default="twilio",
        )

        record = await service_factory(registry).send_blast(
            IncidentBlastRequest(**blast_request_data)
        )

        assert record.provider == "twilio"
        assert record.failed_count == 3
        assert {r.error_code for r in record.results} == {"CONFIGURATION_ERROR"}

    @pytest.mark.asyncio
    async def test_no_recipients(self, service, repository, blast_request_data, gateways):
        request = IncidentBlastRequest(
            **blast_request_data, target_type="department", target_value="Finance"
        )

        with pytest.raises(NoRecipientsError):
            await service.send_blast(request)

        assert repository.list_recent(10) == []
        assert gateways["twilio"].calls == []

    @pytest.mark.asyncio
    async def test_unknown_gateway(self, service_factory, stub_gateway_factory, blast_request_data):
        registry = GatewayRegistry({"notif": stub_gateway_factory(name="notif")}, default="notif")

        with pytest.raises(UnknownGatewayError):
            await service_factory(registry).send_blast(
                IncidentBlastRequest(**blast_request_data, provider="twilio")
            )


@pytest.mark.unit
class TestHistory:
    @pytest.mark.asyncio
    async def test_newest_first(self, service, blast_request_data):
        first = await service.send_blast(IncidentBlastRequest(**blast_request_data))
        second = await service.send_blast(
            IncidentBlastRequest(**{**blast_request_data, "incident_type": "Gempa"})
        )

        history = service.history()

        assert [r.id for r in history] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_limit(self, service, blast_request_data):
        for _ in range(3):
            await service.send_blast(IncidentBlastRequest(**blast_request_data))

        assert len(service.history(limit=2)) == 2

    def test_default_limit_from_settings(
        self, service_factory, registry, settings_factory, repository
    ):
        service = service_factory(registry, settings=settings_factory(BLAST_HISTORY_LIMIT=7))
        calls = []
        repository.list_recent = lambda limit: calls.append(limit) or []

        service.history()

        assert calls == [7]

    @pytest.mark.asyncio
    async def test_get_blast(self, service, blast_request_data):
        record = await service.send_blast(IncidentBlastRequest(**blast_request_data))

        assert service.get_blast(record.id) == record

    def test_get_missing_blast(self, service):
        with pytest.raises(BlastNotFoundError):
            service.get_blast("missing")


@pytest.mark.unit
class TestConnectionProbe:
    def test_default_gateway(self, service):
        response = service.test_connection()

        assert response.success is True
        assert response.provider == "twilio"

    def test_named_gateway_without_fallback(self, service_factory, stub_gateway_factory):
        registry = GatewayRegistry(
            {
                "twilio": stub_gateway_factory(name="twilio"),
                "notif": stub_gateway_factory(name="notif", configured=False),
            },
            default="twilio",
        )

        response = service_factory(registry).test_connection("notif")

        assert response.success is False
        assert response.provider == "notif"

    def test_unknown_gateway(self, service):
        with pytest.raises(UnknownGatewayError):
            service.test_connection("telegram")
