"""Nominatim geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import logging

import httpx

from geosync.application.ports.geocoder_port import GeocoderPort
from geosync.config import settings
from geosync.domain.value_objects.geo_point import GeoPoint
from geosync.domain.value_objects.geocode_result import GeocodeResult

logger = logging.getLogger(__name__)

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"


class NominatimAdapter(GeocoderPort):
    """OpenStreetMap Nominatim search. Free, anonymous, one request per second.

    The request rate is not enforced here; the policy wraps this adapter
    in an IntervalLimiter.
    """

    name = "Nominatim"

    def __init__(
        self,
        user_agent: str | None = None,
        timeout: float | None = None,
        url: str = NOMINATIM_URL,
    ):
        self._user_agent = user_agent or settings.geocoder_user_agent
        self._timeout = timeout if timeout is not None else settings.http_timeout
        self._url = url

    async def geocode(self, address: str, country_code: str) -> GeocodeResult:
        """Query Nominatim for the single best match.

        Anything other than HTTP 200 with a non-empty result list whose first
        entry carries ``lat`` and ``lon`` is a plain "no result".
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self._url,
                    params={
                        "q": address,
                        "format": "json",
                        "limit": 1,
                        "countrycodes": country_code,
                    },
                    headers={"User-Agent": self._user_agent},
                    timeout=self._timeout,
                )
        except httpx.HTTPError as e:
            logger.warning("Nominatim request failed for '%s': %s", address, e)
            return GeocodeResult.no_result()

        if response.status_code != 200:
            logger.info("Nominatim returned HTTP %d for '%s'", response.status_code, address)
            return GeocodeResult.no_result()

        point = self._parse(response)
        if point is None:
            logger.info("Nominatim returned no results for '%s'", address)
            return GeocodeResult.no_result()
        return GeocodeResult.ok(point)

    @staticmethod
    def _parse(response: httpx.Response) -> GeoPoint | None:
        try:
            results = response.json()
        except ValueError:
            logger.warning("Nominatim returned a body that is not JSON")
            return None

        if not isinstance(results, list) or not results:
            return None

        first = results[0]
        if not isinstance(first, dict) or first.get("lat") is None or first.get("lon") is None:
            return None

        try:
            return GeoPoint(latitude=float(first["lat"]), longitude=float(first["lon"]))
        except (TypeError, ValueError):
            logger.warning("Nominatim returned unparseable coordinates: %r", first)
            return None
