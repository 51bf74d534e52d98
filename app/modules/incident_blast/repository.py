"""Storage collaborators for the incident blast service.

Two interfaces:
- EmployeeDirectory: read access to the employees that can be notified
- BlastRepository: append and read back blast records

The in-memory implementations are process-local and guarded by a lock so
request handlers and worker threads can share them.
"""

import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from pydantic import TypeAdapter

from infrastructure.logging import get_module_logger
from infrastructure.notifications.models import Recipient
from modules.incident_blast.schemas import BlastRecord

logger = get_module_logger()

_EMPLOYEE_LIST = TypeAdapter(List[Recipient])


class EmployeeDirectory(ABC):
    """Source of employees for recipient targeting."""

    @abstractmethod
    def list_employees(self) -> List[Recipient]:
        """Return every employee, active or not."""

    @abstractmethod
    def get_employees(self, ids: Iterable[str]) -> List[Recipient]:
        """Return the employees with the given ids in the order requested.

        Unknown ids are skipped and repeated ids are returned once.
        """


class BlastRepository(ABC):
    """Persistence for blast records."""

    @abstractmethod
    def save(self, record: BlastRecord) -> BlastRecord:
        """Store a record and return it."""

    @abstractmethod
    def get(self, blast_id: str) -> Optional[BlastRecord]:
        """Return one record, or None."""

    @abstractmethod
    def list_recent(self, limit: int) -> List[BlastRecord]:
        """Return up to ``limit`` records, newest first."""


class InMemoryEmployeeDirectory(EmployeeDirectory):
    def __init__(self, employees: Optional[Iterable[Recipient]] = None):
        self._lock = threading.Lock()
        self._employees: Dict[str, Recipient] = {}
        for employee in employees or []:
            self._employees[employee.id] = employee

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "InMemoryEmployeeDirectory":
        """Load a directory from a JSON array of employee objects.

        Each object carries ``id``, ``name``, ``phone`` and optionally
        ``department`` and ``status``.

        Raises:
            OSError: The file cannot be read
            pydantic.ValidationError: The content is not a list of employees
        """
        employees = _EMPLOYEE_LIST.validate_json(Path(path).read_bytes())
        logger.info("employee_directory_loaded", path=str(path), count=len(employees))
        return cls(employees)

    def add(self, employee: Recipient) -> None:
        with self._lock:
            self._employees[employee.id] = employee

    def list_employees(self) -> List[Recipient]:
        with self._lock:
            return list(self._employees.values())

    def get_employees(self, ids: Iterable[str]) -> List[Recipient]:
        found: Dict[str, Recipient] = {}
        with self._lock:
            for employee_id in ids:
                if employee_id in self._employees and employee_id not in found:
                    found[employee_id] = self._employees[employee_id]
        return list(found.values())


class InMemoryBlastRepository(BlastRepository):
    def __init__(self):
        self._lock = threading.Lock()
        self._records: Dict[str, BlastRecord] = {}

    def save(self, record: BlastRecord) -> BlastRecord:
        with self._lock:
            self._records[record.id] = record
        return record

    def get(self, blast_id: str) -> Optional[BlastRecord]:
        with self._lock:
            return self._records.get(blast_id)

    def list_recent(self, limit: int) -> List[BlastRecord]:
        with self._lock:
            # Newest insert wins ties on created_at
            records = sorted(
                reversed(list(self._records.values())),
                key=lambda r: r.created_at,
                reverse=True,
            )
        return records[: max(limit, 0)]
