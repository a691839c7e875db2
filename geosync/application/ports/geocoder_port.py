"""Port interface for geocoding addresses to coordinates."""

from abc import ABC, abstractmethod

from geosync.domain.value_objects.geocode_result import GeocodeResult


class GeocoderPort(ABC):
    name: str = "geocoder"

    @property
    def is_configured(self) -> bool:
        """False when the provider cannot be called at all (e.g. no API key)."""
        return True

    @abstractmethod
    async def geocode(self, address: str, country_code: str) -> GeocodeResult:
        """Convert address string to lat/lon coordinates.

        Must not raise on transport or decode problems; those are
        reported as ``GeocodeResult.no_result()``.
        """
        ...
