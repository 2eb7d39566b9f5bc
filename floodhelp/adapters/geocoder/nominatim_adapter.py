"""Nominatim geocoder adapter — implements GeocodingProvider."""

from __future__ import annotations

import logging
import math

import httpx

from floodhelp.application.ports.geocoder_port import GeocodingProvider
from floodhelp.config import settings
from floodhelp.domain.entities.geocode_result import GeocodeCandidate
from floodhelp.domain.errors import ProviderError
from floodhelp.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


class NominatimAdapter(GeocodingProvider):
    """OpenStreetMap Nominatim search, restricted to one country and language.

    One GET per ``search`` call with a bounded timeout and no retries.
    Any non-2xx status or network failure is raised as ProviderError.
    """

    def __init__(
        self,
        url: str | None = None,
        user_agent: str | None = None,
        country_codes: str | None = None,
        language: str | None = None,
        limit: int | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._url = url or settings.nominatim_url
        self._user_agent = user_agent or settings.geocoder_user_agent
        self._country_codes = country_codes or settings.geocoder_country_codes
        self._language = language or settings.geocoder_language
        self._limit = limit or settings.geocoder_limit
        self._timeout = timeout or settings.geocoder_timeout
        self._transport = transport

    async def search(self, query: str) -> list[GeocodeCandidate]:
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    self._url,
                    params={
                        "q": query,
                        "format": "json",
                        "limit": self._limit,
                        "countrycodes": self._country_codes,
                        "accept-language": self._language,
                    },
                    headers={"User-Agent": self._user_agent},
                    timeout=self._timeout,
                )
                response.raise_for_status()
                results = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("Nominatim returned %d for '%s'", e.response.status_code, query)
            raise ProviderError(f"Nominatim API error: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error("Nominatim request failed for '%s': %s", query, e)
            raise ProviderError(f"Nominatim request failed: {e}") from e
        except ValueError as e:
            raise ProviderError("Nominatim returned invalid JSON") from e

        if not isinstance(results, list):
            logger.warning("Unexpected Nominatim payload for '%s': %r", query, results)
            return []

        candidates = [c for c in (self._to_candidate(r) for r in results) if c]
        logger.debug("Nominatim '%s' → %d candidate(s)", query, len(candidates))
        return candidates

    @staticmethod
    def _to_candidate(raw: dict) -> GeocodeCandidate | None:
        """Parse one result; incomplete entries are dropped, never half-filled."""
        try:
            lat = float(raw["lat"])
            lon = float(raw["lon"])
        except (KeyError, TypeError, ValueError):
            lat = lon = math.nan
        if not (math.isfinite(lat) and math.isfinite(lon)):
            logger.warning("Skipping malformed Nominatim result: %r", raw)
            return None
        point = GeoPoint(latitude=lat, longitude=lon)
        return GeocodeCandidate(location=point, display_name=str(raw.get("display_name", "")))
