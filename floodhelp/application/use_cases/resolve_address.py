"""ResolveAddressUseCase — geocode a free-text address with cascading fallbacks."""

from __future__ import annotations

import logging

from floodhelp.application.ports.geocoder_port import GeocodingProvider
from floodhelp.domain.entities.geocode_result import (
    GeocodeFound,
    GeocodeNotFound,
    GeocodeResult,
)
from floodhelp.domain.errors import InvalidInput
from floodhelp.domain.policies.address_rewrite import STRATEGY_ORDER

NOT_FOUND_MESSAGE = "Address could not be geocoded"
DEFAULT_MAP_LINK_TEMPLATE = "https://maps.google.com/?q={lat},{lng}"


class ResolveAddressUseCase:
    """Tries each rewrite strategy in order until the provider finds a match.

    Stateless: the same address against an unchanged provider always
    yields an equal result. ProviderError from the provider is not caught,
    so a transport failure aborts the remaining strategies.
    """

    def __init__(
        self,
        provider: GeocodingProvider,
        logger: logging.Logger | None = None,
        map_link_template: str = DEFAULT_MAP_LINK_TEMPLATE,
    ):
        self._provider = provider
        self._log = logger or logging.getLogger(__name__)
        self._map_link_template = map_link_template

    async def execute(self, address: object) -> GeocodeResult:
        """Resolve an address to coordinates.

        Args:
            address: raw address text as entered by the field worker.

        Returns:
            GeocodeFound for the first strategy with a candidate,
            otherwise GeocodeNotFound.

        Raises:
            InvalidInput: address is not a string or is blank.
            ProviderError: the provider failed; no further strategies run.
        """
        if not isinstance(address, str) or not address.strip():
            raise InvalidInput("Invalid address")

        cleaned = address.strip()
        self._log.info("Geocoding address: %s", cleaned)

        for strategy, build_query in STRATEGY_ORDER:
            query = build_query(cleaned)
            if query is None:
                self._log.debug("Strategy %s skipped for '%s'", strategy.value, cleaned)
                continue

            self._log.info("Trying strategy %s: %s", strategy.value, query)
            candidates = await self._provider.search(query)
            if not candidates:
                continue

            best = candidates[0]
            self._log.info(
                "Geocoding successful via %s: '%s' → (%f, %f)",
                strategy.value, query, best.location.latitude, best.location.longitude,
            )
            return GeocodeFound(
                latitude=best.location.latitude,
                longitude=best.location.longitude,
                map_link=best.location.map_link(self._map_link_template),
                display_name=best.display_name,
                strategy=strategy,
            )

        self._log.info("No geocoding results found for address: %s", cleaned)
        return GeocodeNotFound(reason=NOT_FOUND_MESSAGE)
