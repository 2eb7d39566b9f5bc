"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

import logging

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from floodhelp.adapters.geocoder.nominatim_adapter import NominatimAdapter
from floodhelp.adapters.persistence.database import get_session
from floodhelp.adapters.persistence.repositories import SqlReportRepository
from floodhelp.application.ports.geocoder_port import GeocodingProvider
from floodhelp.application.ports.report_repo import ReportRepository
from floodhelp.application.use_cases.resolve_address import ResolveAddressUseCase
from floodhelp.application.use_cases.submit_report import (
    SubmitReportUseCase,
    UpdateReportUseCase,
)
from floodhelp.config import settings

# Singleton adapter (stateless; opens a client per call)
_geocoder_adapter = NominatimAdapter()

# Strategy-by-strategy trace of every lookup, for debugging unmappable addresses
geocoding_logger = logging.getLogger("floodhelp.geocoding")


def get_geocoding_provider() -> GeocodingProvider:
    return _geocoder_adapter


def get_resolve_address_uc(
    provider: GeocodingProvider = Depends(get_geocoding_provider),
) -> ResolveAddressUseCase:
    return ResolveAddressUseCase(
        provider=provider,
        logger=geocoding_logger,
        map_link_template=settings.map_link_template,
    )


def get_report_repo(session: AsyncSession = Depends(get_session)) -> ReportRepository:
    return SqlReportRepository(session)


def get_submit_report_uc(
    reports: ReportRepository = Depends(get_report_repo),
    resolver: ResolveAddressUseCase = Depends(get_resolve_address_uc),
) -> SubmitReportUseCase:
    return SubmitReportUseCase(reports=reports, resolver=resolver)


def get_update_report_uc(
    reports: ReportRepository = Depends(get_report_repo),
) -> UpdateReportUseCase:
    return UpdateReportUseCase(reports=reports)
