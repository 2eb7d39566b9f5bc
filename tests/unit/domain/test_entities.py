"""Tests for domain entities and value objects."""

import pytest

from floodhelp.domain.entities.geocode_result import GeocodeFound, GeocodeNotFound
from floodhelp.domain.entities.report import Report, parse_phone_numbers
from floodhelp.domain.errors import InvalidInput
from floodhelp.domain.value_objects.enums import (
    GeocodeStrategy,
    ReportStatus,
    UrgencyLevel,
)
from floodhelp.domain.value_objects.geo_point import GeoPoint


def _make_report(**overrides) -> Report:
    defaults = dict(
        name="สมชาย",
        raw_message="ช่วยด้วย น้ำท่วมถึงชั้นสอง มีผู้สูงอายุ 2 คน",
        address="12 ต.หายยา อ.เมือง จ.เชียงใหม่",
    )
    defaults.update(overrides)
    return Report(**defaults)


# ─── GeoPoint ───────────────────────────────────────────────────────


def test_geo_point_map_link():
    p = GeoPoint(latitude=18.7883, longitude=98.9853)
    assert p.map_link("https://maps.google.com/?q={lat},{lng}") == "https://maps.google.com/?q=18.7883,98.9853"


def test_geo_point_is_frozen():
    p = GeoPoint(latitude=18.0, longitude=98.0)
    with pytest.raises(AttributeError):
        p.latitude = 13.0


# ─── Geocode results ────────────────────────────────────────────────


def test_found_response_shape():
    found = GeocodeFound(
        latitude=13.66, longitude=100.6, map_link="https://maps.google.com/?q=13.66,100.6",
        display_name="บางนา, กรุงเทพมหานคร", strategy=GeocodeStrategy.EXACT,
    )
    assert found.success is True
    assert found.to_response() == {
        "lat": 13.66,
        "lng": 100.6,
        "map_link": "https://maps.google.com/?q=13.66,100.6",
        "display_name": "บางนา, กรุงเทพมหานคร",
        "success": True,
    }
    assert found.location == GeoPoint(latitude=13.66, longitude=100.6)


def test_not_found_response_shape():
    response = GeocodeNotFound(reason="Address could not be geocoded").to_response()
    assert response == {
        "lat": None,
        "lng": None,
        "map_link": None,
        "success": False,
        "message": "Address could not be geocoded",
    }


# ─── Report ─────────────────────────────────────────────────────────


def test_report_defaults():
    r = _make_report()
    assert r.status == ReportStatus.PENDING
    assert r.urgency_level == UrgencyLevel.WARNING
    assert r.phone == []
    r.validate()


def test_report_requires_name():
    with pytest.raises(InvalidInput):
        _make_report(name="  ").validate()


def test_report_requires_raw_message():
    with pytest.raises(InvalidInput):
        _make_report(raw_message="").validate()


def test_report_rejects_out_of_range_urgency():
    with pytest.raises(InvalidInput):
        _make_report(urgency_level=6).validate()


def test_report_rejects_negative_counts():
    with pytest.raises(InvalidInput):
        _make_report(number_of_children=-1).validate()


def test_report_critical_from_level_four():
    assert not _make_report(urgency_level=UrgencyLevel.SECOND_FLOOR).is_critical()
    assert _make_report(urgency_level=UrgencyLevel.VULNERABLE).is_critical()
    assert _make_report(urgency_level=UrgencyLevel.CRITICAL).is_critical()


def test_report_needs_geocoding():
    assert _make_report().needs_geocoding()
    assert not _make_report(address=None).needs_geocoding()
    assert not _make_report(location=GeoPoint(latitude=18.8, longitude=98.9)).needs_geocoding()


def test_report_total_people():
    r = _make_report(number_of_adults=2, number_of_children=1, number_of_seniors=2)
    assert r.total_people() == 5


# ─── Phone parsing ──────────────────────────────────────────────────


def test_parse_phone_numbers_from_text():
    assert parse_phone_numbers("081-234-5678, 089-999-8888 ,") == ["081-234-5678", "089-999-8888"]


def test_parse_phone_numbers_from_list():
    assert parse_phone_numbers([" 0812345678 ", ""]) == ["0812345678"]


def test_parse_phone_numbers_empty():
    assert parse_phone_numbers(None) == []
    assert parse_phone_numbers("") == []
