"""Health check — reports table reachability and the geocoder in use."""

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from floodhelp.adapters.persistence.database import get_session
from floodhelp.adapters.persistence.models import ReportModel
from floodhelp.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(session: AsyncSession = Depends(get_session)):
    """Geocoding works without the database, so an unreachable reports table is "degraded"."""
    try:
        report_count = (await session.execute(select(func.count(ReportModel.id)))).scalar() or 0
        reports_status = "reachable"
    except Exception as e:
        report_count = None
        reports_status = f"error: {e}"

    return {
        "status": "ok" if report_count is not None else "degraded",
        "reports_table": reports_status,
        "report_count": report_count,
        "geocoder": {
            "url": settings.nominatim_url,
            "country_codes": settings.geocoder_country_codes,
            "language": settings.geocoder_language,
            "timeout_s": settings.geocoder_timeout,
        },
    }
