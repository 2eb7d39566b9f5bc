"""Port interface for report persistence."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from uuid import UUID

from floodhelp.domain.entities.report import Report
from floodhelp.domain.value_objects.enums import ReportStatus


@dataclass
class ReportQuery:
    """Dashboard filters. Unset fields do not filter."""

    search: str | None = None
    urgency_level: int | None = None
    status: ReportStatus | None = None
    limit: int = 100
    offset: int = 0


@dataclass
class ReportStats:
    total: int = 0
    critical: int = 0
    by_urgency: dict[int, int] = field(default_factory=dict)
    by_status: dict[str, int] = field(default_factory=dict)
    adults: int = 0
    children: int = 0
    seniors: int = 0


class ReportRepository(ABC):
    @abstractmethod
    async def save(self, report: Report) -> Report:
        ...

    @abstractmethod
    async def get_by_id(self, report_id: UUID) -> Report | None:
        ...

    @abstractmethod
    async def update(self, report: Report) -> Report:
        ...

    @abstractmethod
    async def find(self, query: ReportQuery) -> list[Report]:
        """Return matching reports, most recently updated first."""
        ...

    @abstractmethod
    async def stats(self) -> ReportStats:
        ...
