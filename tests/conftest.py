"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import uuid
from dataclasses import replace

import pytest

from floodhelp.application.ports.geocoder_port import GeocodingProvider
from floodhelp.application.ports.report_repo import ReportQuery, ReportRepository, ReportStats
from floodhelp.domain.entities.geocode_result import GeocodeCandidate
from floodhelp.domain.errors import ProviderError
from floodhelp.domain.value_objects.geo_point import GeoPoint

# ─── In-memory fakes ────────────────────────────────────────────────


class FakeGeocoder(GeocodingProvider):
    """Answers only the queries registered in ``matches``; records every call."""

    def __init__(self):
        self.matches: dict[str, list[GeocodeCandidate]] = {}
        self.queries: list[str] = []
        self.fail_with: ProviderError | None = None

    def add_match(self, query: str, lat: float, lon: float, display_name: str = "match"):
        self.matches.setdefault(query, []).append(
            GeocodeCandidate(location=GeoPoint(latitude=lat, longitude=lon), display_name=display_name)
        )

    async def search(self, query):
        self.queries.append(query)
        if self.fail_with:
            raise self.fail_with
        return list(self.matches.get(query, []))


class FakeReportRepo(ReportRepository):
    def __init__(self):
        self.reports: dict[uuid.UUID, object] = {}

    async def save(self, report):
        report.id = uuid.uuid4()
        self.reports[report.id] = replace(report)
        return report

    async def get_by_id(self, report_id):
        stored = self.reports.get(report_id)
        return replace(stored) if stored else None

    async def update(self, report):
        self.reports[report.id] = replace(report)
        return report

    async def find(self, query: ReportQuery):
        found = list(self.reports.values())
        if query.urgency_level is not None:
            found = [r for r in found if r.urgency_level == query.urgency_level]
        if query.status is not None:
            found = [r for r in found if r.status == query.status]
        if query.search:
            needle = query.search.strip().lower()
            found = [
                r for r in found
                if any(
                    needle in (v or "").lower()
                    for v in (r.name, r.lastname, r.address, r.raw_message,
                              r.help_needed, r.health_condition)
                )
            ]
        found.sort(key=lambda r: r.updated_at, reverse=True)
        return found[query.offset:query.offset + query.limit]

    async def stats(self):
        stats = ReportStats(total=len(self.reports))
        for r in self.reports.values():
            level = int(r.urgency_level)
            stats.by_urgency[level] = stats.by_urgency.get(level, 0) + 1
            stats.by_status[r.status.value] = stats.by_status.get(r.status.value, 0) + 1
            stats.adults += r.number_of_adults
            stats.children += r.number_of_children
            stats.seniors += r.number_of_seniors
            if r.is_critical():
                stats.critical += 1
        return stats


# ─── Fixtures ───────────────────────────────────────────────────────


@pytest.fixture
def geocoder():
    return FakeGeocoder()


@pytest.fixture
def report_repo():
    return FakeReportRepo()


@pytest.fixture
def formal_address():
    return "99/1 ถนนพหลโยธิน ตำบลคลองหนึ่ง อำเภอคลองหลวง จังหวัดปทุมธานี 12120"


@pytest.fixture
def abbreviated_address():
    return "123 ถ.สุขุมวิท ต.บางนา อ.เมือง จ.สมุทรปราการ 10270"
