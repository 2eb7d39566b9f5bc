"""Report use cases — save a reviewed report, edit an existing one."""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from datetime import datetime, timezone
from uuid import UUID

from floodhelp.application.ports.report_repo import ReportRepository
from floodhelp.application.use_cases.resolve_address import ResolveAddressUseCase
from floodhelp.domain.entities.geocode_result import GeocodeFound
from floodhelp.domain.entities.report import Report
from floodhelp.domain.errors import InvalidInput, ProviderError, ReportNotFound

logger = logging.getLogger(__name__)

_IMMUTABLE_FIELDS = {"id", "created_at", "updated_at"}
EDITABLE_FIELDS = frozenset(f.name for f in fields(Report)) - _IMMUTABLE_FIELDS


class SubmitReportUseCase:
    """Validates, geocodes when coordinates are missing, and persists a report."""

    def __init__(self, reports: ReportRepository, resolver: ResolveAddressUseCase):
        self._reports = reports
        self._resolver = resolver

    async def execute(self, report: Report) -> Report:
        """Store a new report.

        A failed lookup never blocks the report: NotFound and provider
        errors both leave the coordinates empty for manual entry.
        """
        report.validate()

        if report.needs_geocoding():
            await self._fill_location(report)

        now = datetime.now(timezone.utc)
        report.created_at = report.created_at or now
        report.updated_at = now
        saved = await self._reports.save(report)
        logger.info(
            "Report %s saved: urgency=%d, located=%s",
            saved.id, saved.urgency_level, saved.has_location(),
        )
        return saved

    async def _fill_location(self, report: Report) -> None:
        try:
            result = await self._resolver.execute(report.address)
        except ProviderError:
            logger.exception("Geocoding provider failed for report address '%s'", report.address)
            return

        if isinstance(result, GeocodeFound):
            report.location = result.location
        else:
            logger.warning("Report address left without coordinates: '%s'", report.address)


class UpdateReportUseCase:
    """Applies a partial edit (review corrections, status changes)."""

    def __init__(self, reports: ReportRepository):
        self._reports = reports

    async def execute(self, report_id: UUID, changes: dict) -> Report:
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise InvalidInput(f"Cannot update fields: {', '.join(sorted(unknown))}")

        current = await self._reports.get_by_id(report_id)
        if current is None:
            raise ReportNotFound(report_id)

        updated = replace(current, **changes)
        updated.validate()
        updated.updated_at = datetime.now(timezone.utc)
        await self._reports.update(updated)
        logger.info("Report %s updated: %s", report_id, ", ".join(sorted(changes)))
        return updated
