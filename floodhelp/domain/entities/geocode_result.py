"""Geocoding outcomes — exactly one of GeocodeFound / GeocodeNotFound per request."""

from __future__ import annotations

from dataclasses import dataclass

from floodhelp.domain.value_objects.enums import GeocodeStrategy
from floodhelp.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class GeocodeCandidate:
    """A single match returned by the geocoding provider."""

    location: GeoPoint
    display_name: str


@dataclass(frozen=True)
class GeocodeFound:
    latitude: float
    longitude: float
    map_link: str
    display_name: str
    strategy: GeocodeStrategy

    success = True

    @property
    def location(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)

    def to_response(self) -> dict:
        return {
            "lat": self.latitude,
            "lng": self.longitude,
            "map_link": self.map_link,
            "display_name": self.display_name,
            "success": True,
        }


@dataclass(frozen=True)
class GeocodeNotFound:
    reason: str

    success = False

    def to_response(self) -> dict:
        return {
            "lat": None,
            "lng": None,
            "map_link": None,
            "success": False,
            "message": self.reason,
        }


GeocodeResult = GeocodeFound | GeocodeNotFound
