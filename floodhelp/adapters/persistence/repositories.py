"""SQLAlchemy repository implementations."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from floodhelp.adapters.persistence.models import ReportModel
from floodhelp.application.ports.report_repo import ReportQuery, ReportRepository, ReportStats
from floodhelp.domain.entities.report import Report
from floodhelp.domain.value_objects.enums import ReportStatus, UrgencyLevel
from floodhelp.domain.value_objects.geo_point import GeoPoint

# Columns covered by the dashboard keyword search
SEARCHABLE_COLUMNS = (
    ReportModel.name,
    ReportModel.lastname,
    ReportModel.address,
    ReportModel.raw_message,
    ReportModel.help_needed,
    ReportModel.health_condition,
)


def escape_like(term: str) -> str:
    """Make LIKE wildcards in user input match literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


# ─── Mappers ─────────────────────────────────────────────────────────


def _report_to_domain(m: ReportModel) -> Report:
    location = None
    if m.location_lat is not None and m.location_long is not None:
        location = GeoPoint(latitude=m.location_lat, longitude=m.location_long)
    return Report(
        id=m.id,
        name=m.name,
        lastname=m.lastname,
        raw_message=m.raw_message,
        address=m.address,
        location=location,
        phone=list(m.phone or []),
        number_of_adults=m.number_of_adults,
        number_of_children=m.number_of_children,
        number_of_seniors=m.number_of_seniors,
        health_condition=m.health_condition,
        help_needed=m.help_needed,
        urgency_level=UrgencyLevel(m.urgency_level),
        status=ReportStatus(m.status),
        created_at=m.created_at,
        updated_at=m.updated_at,
    )


def _report_values(r: Report) -> dict:
    """Column values shared by insert and update."""
    return {
        "name": r.name,
        "lastname": r.lastname,
        "raw_message": r.raw_message,
        "address": r.address,
        "location_lat": r.location.latitude if r.location else None,
        "location_long": r.location.longitude if r.location else None,
        "phone": list(r.phone),
        "number_of_adults": r.number_of_adults,
        "number_of_children": r.number_of_children,
        "number_of_seniors": r.number_of_seniors,
        "health_condition": r.health_condition,
        "help_needed": r.help_needed,
        "urgency_level": int(r.urgency_level),
        "status": r.status.value,
    }


# ─── Repositories ────────────────────────────────────────────────────


class SqlReportRepository(ReportRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, report: Report) -> Report:
        m = ReportModel(**_report_values(report))
        if report.created_at:
            m.created_at = report.created_at
        if report.updated_at:
            m.updated_at = report.updated_at
        self._s.add(m)
        await self._s.flush()
        await self._s.refresh(m)
        report.id = m.id
        report.created_at = m.created_at
        report.updated_at = m.updated_at
        return report

    async def get_by_id(self, report_id: UUID) -> Report | None:
        m = await self._s.get(ReportModel, report_id)
        return _report_to_domain(m) if m else None

    async def update(self, report: Report) -> Report:
        values = _report_values(report)
        if report.updated_at:
            values["updated_at"] = report.updated_at
        await self._s.execute(
            update(ReportModel).where(ReportModel.id == report.id).values(**values)
        )
        await self._s.flush()
        return report

    async def find(self, query: ReportQuery) -> list[Report]:
        stmt = select(ReportModel)
        if query.urgency_level is not None:
            stmt = stmt.where(ReportModel.urgency_level == query.urgency_level)
        if query.status is not None:
            stmt = stmt.where(ReportModel.status == query.status.value)
        if query.search and query.search.strip():
            pattern = f"%{escape_like(query.search.strip())}%"
            stmt = stmt.where(
                or_(*(col.ilike(pattern, escape="\\") for col in SEARCHABLE_COLUMNS))
            )
        stmt = (
            stmt.order_by(ReportModel.updated_at.desc())
            .limit(query.limit)
            .offset(query.offset)
        )
        result = await self._s.execute(stmt)
        return [_report_to_domain(m) for m in result.scalars()]

    async def stats(self) -> ReportStats:
        totals = (
            await self._s.execute(
                select(
                    func.count(ReportModel.id),
                    func.coalesce(func.sum(ReportModel.number_of_adults), 0),
                    func.coalesce(func.sum(ReportModel.number_of_children), 0),
                    func.coalesce(func.sum(ReportModel.number_of_seniors), 0),
                )
            )
        ).one()

        urgency_rows = (
            await self._s.execute(
                select(ReportModel.urgency_level, func.count(ReportModel.id))
                .group_by(ReportModel.urgency_level)
            )
        ).all()
        by_urgency = {row[0]: row[1] for row in urgency_rows}

        status_rows = (
            await self._s.execute(
                select(ReportModel.status, func.count(ReportModel.id))
                .group_by(ReportModel.status)
            )
        ).all()
        by_status = {row[0]: row[1] for row in status_rows}

        return ReportStats(
            total=totals[0] or 0,
            critical=sum(n for level, n in by_urgency.items() if level >= UrgencyLevel.VULNERABLE),
            by_urgency=by_urgency,
            by_status=by_status,
            adults=int(totals[1]),
            children=int(totals[2]),
            seniors=int(totals[3]),
        )
