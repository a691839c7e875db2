"""Google Maps geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import logging

import httpx

from geosync.application.ports.geocoder_port import GeocoderPort
from geosync.config import settings
from geosync.domain.value_objects.geo_point import GeoPoint
from geosync.domain.value_objects.geocode_result import GeocodeResult

logger = logging.getLogger(__name__)

GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
REQUEST_DENIED = "REQUEST_DENIED"


class GoogleMapsAdapter(GeocoderPort):
    """Google Maps implementation of GeocoderPort. Paid, API-key gated."""

    name = "Google Geocoding API"

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        url: str = GOOGLE_GEOCODE_URL,
    ):
        self._api_key = api_key if api_key is not None else settings.google_maps_api_key
        self._timeout = timeout if timeout is not None else settings.http_timeout
        self._url = url

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def geocode(self, address: str, country_code: str) -> GeocodeResult:
        """Geocode address using Google Maps Geocoding API."""
        if not self._api_key:
            return GeocodeResult.no_result()

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self._url,
                    params={
                        "address": address,
                        "key": self._api_key,
                        "components": f"country:{country_code}",
                    },
                    timeout=self._timeout,
                )
        except httpx.HTTPError as e:
            logger.warning("Google Maps request failed for '%s': %s", address, e)
            return GeocodeResult.no_result()

        try:
            data = response.json()
        except ValueError:
            logger.warning(
                "Google Maps returned a non-JSON body (HTTP %d) for '%s'",
                response.status_code, address,
            )
            return GeocodeResult.no_result()

        if not isinstance(data, dict):
            return GeocodeResult.no_result()

        status = data.get("status")
        if status != "OK":
            logger.warning(
                "Google Maps could not resolve '%s': %s (%s)",
                address, status, data.get("error_message", "Unknown error"),
            )
            if status == REQUEST_DENIED:
                return GeocodeResult.auth_rejected()
            return GeocodeResult.no_result()

        point = self._first_location(data.get("results"))
        if point is None:
            logger.info("Google Maps returned OK without a location for '%s'", address)
            return GeocodeResult.no_result()
        return GeocodeResult.ok(point)

    @staticmethod
    def _first_location(results) -> GeoPoint | None:
        if not isinstance(results, list) or not results:
            return None
        try:
            loc = results[0]["geometry"]["location"]
            return GeoPoint(latitude=float(loc["lat"]), longitude=float(loc["lng"]))
        except (KeyError, TypeError, ValueError):
            return None
