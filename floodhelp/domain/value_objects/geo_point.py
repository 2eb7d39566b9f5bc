"""GeoPoint value object — immutable (lat, lon) pair."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def map_link(self, template: str) -> str:
        """Render a map URL from a template with ``{lat}`` / ``{lng}`` placeholders."""
        return template.format(lat=self.latitude, lng=self.longitude)
