"""Port interface for the external geocoding provider."""

from abc import ABC, abstractmethod

from floodhelp.domain.entities.geocode_result import GeocodeCandidate


class GeocodingProvider(ABC):
    @abstractmethod
    async def search(self, query: str) -> list[GeocodeCandidate]:
        """Look up a free-text query.

        Returns the provider's candidates, best first (empty if none).
        Raises ProviderError on any transport-level failure.
        """
        ...
