"""Report endpoints — save reviewed reports, dashboard listing, edits."""

from __future__ import annotations

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, BeforeValidator, Field

from floodhelp.application.ports.report_repo import ReportQuery, ReportRepository
from floodhelp.application.use_cases.submit_report import (
    SubmitReportUseCase,
    UpdateReportUseCase,
)
from floodhelp.config import settings
from floodhelp.domain.entities.report import Report, parse_phone_numbers
from floodhelp.domain.errors import InvalidInput, ReportNotFound
from floodhelp.domain.value_objects.enums import ReportStatus, UrgencyLevel
from floodhelp.domain.value_objects.geo_point import GeoPoint
from floodhelp.infrastructure.api.dependencies import (
    get_report_repo,
    get_submit_report_uc,
    get_update_report_uc,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])

# ── Request schemas ─────────────────────────────────────────────────


def _blank_is_none(v):
    # The review form sends coordinates as text; "" means "not set"
    if isinstance(v, str) and not v.strip():
        return None
    return v


Latitude = Annotated[Annotated[float, Field(ge=-90, le=90)] | None, BeforeValidator(_blank_is_none)]
Longitude = Annotated[Annotated[float, Field(ge=-180, le=180)] | None, BeforeValidator(_blank_is_none)]

# Columns that may be omitted from a PATCH but never explicitly nulled
_NOT_NULLABLE = (
    "name",
    "raw_message",
    "number_of_adults",
    "number_of_children",
    "number_of_seniors",
    "urgency_level",
    "status",
)


class ReportCreate(BaseModel):
    name: str = Field(min_length=1)
    lastname: str | None = None
    raw_message: str = Field(min_length=1)
    address: str | None = None
    location_lat: Latitude = None
    location_long: Longitude = None
    phone: list[str] | str | None = None
    number_of_adults: int = Field(default=0, ge=0)
    number_of_children: int = Field(default=0, ge=0)
    number_of_seniors: int = Field(default=0, ge=0)
    health_condition: str | None = None
    help_needed: str | None = None
    urgency_level: int = Field(default=1, ge=1, le=5)
    status: ReportStatus = ReportStatus.PENDING


class ReportUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    lastname: str | None = None
    raw_message: str | None = Field(default=None, min_length=1)
    address: str | None = None
    location_lat: Latitude = None
    location_long: Longitude = None
    phone: list[str] | str | None = None
    number_of_adults: int | None = Field(default=None, ge=0)
    number_of_children: int | None = Field(default=None, ge=0)
    number_of_seniors: int | None = Field(default=None, ge=0)
    health_condition: str | None = None
    help_needed: str | None = None
    urgency_level: int | None = Field(default=None, ge=1, le=5)
    status: ReportStatus | None = None


# ── Routes ──────────────────────────────────────────────────────────


@router.post("", status_code=201)
async def create_report(
    body: ReportCreate,
    uc: SubmitReportUseCase = Depends(get_submit_report_uc),
):
    """Save a reviewed report; geocodes the address if no coordinates were given."""
    report = Report(
        name=body.name,
        lastname=body.lastname,
        raw_message=body.raw_message,
        address=body.address,
        location=_location(body.location_lat, body.location_long),
        phone=parse_phone_numbers(body.phone),
        number_of_adults=body.number_of_adults,
        number_of_children=body.number_of_children,
        number_of_seniors=body.number_of_seniors,
        health_condition=body.health_condition,
        help_needed=body.help_needed,
        urgency_level=UrgencyLevel(body.urgency_level),
        status=body.status,
    )
    try:
        saved = await uc.execute(report)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _serialize_report(saved)


@router.get("")
async def list_reports(
    q: str | None = Query(default=None, description="Keyword search"),
    urgency: int | None = Query(default=None, ge=1, le=5),
    status: ReportStatus | None = None,
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    reports: ReportRepository = Depends(get_report_repo),
):
    """Dashboard listing, most recently updated first."""
    found = await reports.find(
        ReportQuery(search=q, urgency_level=urgency, status=status, limit=limit, offset=offset)
    )
    return {
        "count": len(found),
        "reports": [_serialize_report(r) for r in found],
    }


@router.get("/stats")
async def report_stats(reports: ReportRepository = Depends(get_report_repo)):
    """Aggregate counts for the dashboard header."""
    stats = await reports.stats()
    return {
        "total": stats.total,
        "critical": stats.critical,
        "by_urgency": {str(level): n for level, n in sorted(stats.by_urgency.items())},
        "by_status": stats.by_status,
        "people": {
            "adults": stats.adults,
            "children": stats.children,
            "seniors": stats.seniors,
        },
    }


@router.get("/{report_id}")
async def get_report(report_id: UUID, reports: ReportRepository = Depends(get_report_repo)):
    report = await reports.get_by_id(report_id)
    if not report:
        raise HTTPException(status_code=404, detail="Report not found")
    return _serialize_report(report)


@router.patch("/{report_id}")
async def update_report(
    report_id: UUID,
    body: ReportUpdate,
    uc: UpdateReportUseCase = Depends(get_update_report_uc),
):
    """Apply review corrections or a status change."""
    changes = body.model_dump(exclude_unset=True)

    nulled = [k for k in _NOT_NULLABLE if k in changes and changes[k] is None]
    if nulled:
        raise HTTPException(status_code=400, detail=f"Fields cannot be null: {', '.join(nulled)}")

    if "location_lat" in changes or "location_long" in changes:
        lat = changes.pop("location_lat", None)
        lng = changes.pop("location_long", None)
        changes["location"] = _location(lat, lng)
    if "phone" in changes:
        changes["phone"] = parse_phone_numbers(changes["phone"])
    if changes.get("urgency_level") is not None:
        changes["urgency_level"] = UrgencyLevel(changes["urgency_level"])

    try:
        report = await uc.execute(report_id, changes)
    except ReportNotFound:
        raise HTTPException(status_code=404, detail="Report not found")
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _serialize_report(report)


# ── Helpers ─────────────────────────────────────────────────────────


def _location(lat: float | None, lng: float | None) -> GeoPoint | None:
    """Build a location from form coordinates; both or neither must be given."""
    if (lat is None) != (lng is None):
        raise HTTPException(
            status_code=400,
            detail="location_lat and location_long must be set together",
        )
    if lat is None:
        return None
    return GeoPoint(latitude=lat, longitude=lng)


def _serialize_report(r: Report) -> dict:
    """Convert a Report to an API response dict."""
    return {
        "id": str(r.id) if r.id else None,
        "name": r.name,
        "lastname": r.lastname,
        "raw_message": r.raw_message,
        "address": r.address,
        "location_lat": r.location.latitude if r.location else None,
        "location_long": r.location.longitude if r.location else None,
        "map_link": r.location.map_link(settings.map_link_template) if r.location else None,
        "phone": r.phone,
        "number_of_adults": r.number_of_adults,
        "number_of_children": r.number_of_children,
        "number_of_seniors": r.number_of_seniors,
        "health_condition": r.health_condition,
        "help_needed": r.help_needed,
        "urgency_level": int(r.urgency_level),
        "status": r.status.value,
        "is_critical": r.is_critical(),
        "created_at": r.created_at.isoformat() if r.created_at else None,
        "updated_at": r.updated_at.isoformat() if r.updated_at else None,
    }
