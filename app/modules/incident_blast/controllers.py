from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from infrastructure.logging import get_module_logger
from modules.incident_blast.dependencies import IncidentBlastServiceDep
from modules.incident_blast.errors import (
    BlastNotFoundError,
    NoRecipientsError,
    UnknownGatewayError,
)
from modules.incident_blast.schemas import (
    BlastRecord,
    ConnectionTestResponse,
    IncidentBlastRequest,
    ProviderType,
)

logger = get_module_logger()

# Controllers are thin adapters: they accept Pydantic request models, call the
# service boundary, and map domain errors to HTTP status codes.
router = APIRouter(prefix="/api/incident-blast", tags=["incident-blast"])


@router.post("/send", response_model=BlastRecord)
async def send_blast_endpoint(
    request: IncidentBlastRequest, service: IncidentBlastServiceDep
):
    """Send an incident blast.

    Returns the stored blast record with one result per targeted employee.
    Individual delivery failures are reported in ``results``; they never turn
    the request into an error.
    """
    try:
        return await service.send_blast(request)
    except (NoRecipientsError, UnknownGatewayError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.get("/history", response_model=List[BlastRecord])
def history_endpoint(
    service: IncidentBlastServiceDep,
    limit: Optional[int] = Query(default=None, ge=1, le=500),
):
    """List recent incident blasts, newest first."""
    return service.history(limit)


@router.post("/test-connection", response_model=ConnectionTestResponse)
def test_connection_endpoint(
    service: IncidentBlastServiceDep,
    provider: Optional[ProviderType] = Query(default=None),
):
    """Probe a WhatsApp gateway (the configured default when omitted)."""
    try:
        return service.test_connection(provider.value if provider else None)
    except UnknownGatewayError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.get("/{blast_id}", response_model=BlastRecord)
def get_blast_endpoint(blast_id: str, service: IncidentBlastServiceDep):
    try:
        return service.get_blast(blast_id)
    except BlastNotFoundError as e:
        logger.warning("blast_not_found", blast_id=blast_id)
        raise HTTPException(status_code=404, detail=str(e)) from e
