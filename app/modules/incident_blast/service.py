"""Incident blast service boundary.

Owns everything the infrastructure pipeline does not: choosing the gateway,
picking recipients and storing the blast record.

Usage:
    from modules.incident_blast.service import IncidentBlastService

    service = IncidentBlastService(registry, directory, repository, settings)
    record = await service.send_blast(IncidentBlastRequest(...))
"""

import uuid
from datetime import datetime, timezone
from typing import Callable, List, Optional, TYPE_CHECKING

from infrastructure.logging import bind_request_context, get_module_logger
from infrastructure.notifications import (
    BlastOrchestrator,
    BlastSummary,
    GatewayRegistry,
    Recipient,
    WhatsAppGateway,
)
from modules.incident_blast.errors import BlastNotFoundError, NoRecipientsError
from modules.incident_blast.repository import BlastRepository, EmployeeDirectory
from modules.incident_blast.schemas import (
    BlastRecord,
    ConnectionTestResponse,
    IncidentBlastRequest,
    TargetType,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()

OrchestratorFactory = Callable[[WhatsAppGateway], BlastOrchestrator]


class IncidentBlastService:
    """Sends incident blasts and keeps their history.

    Args:
        registry: Available gateways and the selection policy
        directory: Employee source for targeting
        repository: Blast record storage
        settings: Application settings (incident_blast section)
        orchestrator_factory: Builds the orchestrator for a gateway;
            defaults to BlastOrchestrator.from_settings
    """

    def __init__(
        self,
        registry: GatewayRegistry,
        directory: EmployeeDirectory,
        repository: BlastRepository,
        settings: "Settings",
        orchestrator_factory: Optional[OrchestratorFactory] = None,
    ):
        self.registry = registry
        self.directory = directory
        self.repository = repository
        self.settings = settings
        self._orchestrator_factory = orchestrator_factory or (
            lambda gateway: BlastOrchestrator.from_settings(gateway, settings)
        )

    def resolve_recipients(self, request: IncidentBlastRequest) -> List[Recipient]:
        """Return the active employees matched by the request's targeting."""
        if request.target_type == TargetType.SPECIFIC:
            candidates = self.directory.get_employees(request.employee_ids or [])
        elif request.target_type == TargetType.DEPARTMENT:
            department = (request.target_value or "").strip()
            candidates = [
                e
                for e in self.directory.list_employees()
                if (e.department or "").strip() == department
            ]
        else:
            candidates = self.directory.list_employees()

        return [e for e in candidates if e.is_active]

    async def send_blast(self, request: IncidentBlastRequest) -> BlastRecord:
        """Send one incident blast and store its record.

        Raises:
            UnknownGatewayError: The requested provider is not registered
            NoRecipientsError: The targeting matched no active employee
        """
        provider = request.provider.value if request.provider else None
        gateway = self.registry.select(provider)

        recipients = self.resolve_recipients(request)
        if not recipients:
            logger.warning(
                "blast_no_recipients",
                target_type=request.target_type.value,
                target_value=request.target_value,
            )
            raise NoRecipientsError("No active employees match the blast target")

        incident = request.to_incident()
        blast_id = str(uuid.uuid4())

        with bind_request_context(blast_id=blast_id, provider=gateway.channel_name):
            orchestrator = self._orchestrator_factory(gateway)
            outcomes = await orchestrator.send_blast(recipients, incident)
            summary = BlastSummary.from_outcomes(outcomes)

            record = BlastRecord(
                id=blast_id,
                incident_type=incident.incident_type,
                location=incident.location,
                description=incident.description,
                current_status=incident.current_status,
                instructions=incident.instructions,
                media_path=incident.media_path,
                provider=gateway.channel_name,
                total_employees=summary.total,
                success_count=summary.sent,
                failed_count=summary.failed,
                results=outcomes,
                created_at=datetime.now(timezone.utc),
            )
            self.repository.save(record)

            logger.info(
                "blast_recorded",
                total_employees=record.total_employees,
                success_count=record.success_count,
                failed_count=record.failed_count,
            )
        return record

    def history(self, limit: Optional[int] = None) -> List[BlastRecord]:
        """Return recent blasts, newest first."""
        if limit is None:
            limit = self.settings.incident_blast.BLAST_HISTORY_LIMIT
        return self.repository.list_recent(limit)

    def get_blast(self, blast_id: str) -> BlastRecord:
        record = self.repository.get(blast_id)
        if record is None:
            raise BlastNotFoundError(blast_id)
        return record

    def test_connection(self, provider: Optional[str] = None) -> ConnectionTestResponse:
        """Probe one gateway without sending a blast.

        The named gateway (or the default) is probed as-is; fallback does not
        apply, so an unconfigured gateway reports its own misconfiguration.
        """
        gateway = self.registry.get((provider or self.registry.default).strip().lower())
        check = gateway.test_connection()

        logger.info(
            "gateway_connection_tested",
            provider=gateway.channel_name,
            success=check.success,
        )
        return ConnectionTestResponse(
            success=check.success, message=check.message, provider=check.channel
        )
