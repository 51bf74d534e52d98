"""
Providers and type aliases for the incident blast feature.

The directory and repository are process-wide in-memory stores; swap them via
FastAPI ``dependency_overrides`` for tests or a persistent backend.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from infrastructure.logging import get_module_logger
from infrastructure.services import GatewayRegistryDep, SettingsDep, get_settings
from modules.incident_blast.repository import (
    BlastRepository,
    EmployeeDirectory,
    InMemoryBlastRepository,
    InMemoryEmployeeDirectory,
)
from modules.incident_blast.service import IncidentBlastService

logger = get_module_logger()


@lru_cache
def get_employee_directory() -> EmployeeDirectory:
    """Directory seeded from BLAST_EMPLOYEES_FILE when it is set."""
    employees_file = get_settings().incident_blast.BLAST_EMPLOYEES_FILE
    if not employees_file:
        logger.warning("employee_directory_empty", reason="BLAST_EMPLOYEES_FILE not set")
        return InMemoryEmployeeDirectory()
    return InMemoryEmployeeDirectory.from_json_file(employees_file)


@lru_cache
def get_blast_repository() -> BlastRepository:
    return InMemoryBlastRepository()


def get_incident_blast_service(
    registry: GatewayRegistryDep,
    settings: SettingsDep,
    directory: Annotated[EmployeeDirectory, Depends(get_employee_directory)],
    repository: Annotated[BlastRepository, Depends(get_blast_repository)],
) -> IncidentBlastService:
    """Build the blast service around the shared registry and stores."""
    return IncidentBlastService(
        registry=registry,
        directory=directory,
        repository=repository,
        settings=settings,
    )


EmployeeDirectoryDep = Annotated[EmployeeDirectory, Depends(get_employee_directory)]
BlastRepositoryDep = Annotated[BlastRepository, Depends(get_blast_repository)]
IncidentBlastServiceDep = Annotated[
    IncidentBlastService, Depends(get_incident_blast_service)
]

__all__ = [
    "get_employee_directory",
    "get_blast_repository",
    "get_incident_blast_service",
    "EmployeeDirectoryDep",
    "BlastRepositoryDep",
    "IncidentBlastServiceDep",
]
