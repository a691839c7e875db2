"""GeocodingPolicy — ordered provider fallback with rate limiting.

Providers are tried cheapest / most-available first. The first one that
returns a coordinate wins and later providers are never called.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from geosync.application.ports.geocoder_port import GeocoderPort
from geosync.domain.value_objects.enums import GeocodeStatus
from geosync.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


class IntervalLimiter:
    """Enforce a minimum gap between the end of one call and the start of the next.

    Usage::

        async with limiter:
            await do_request()

    All callers sharing one limiter are serialized through an internal lock,
    so concurrent runs still hit the upstream service one request at a time.
    """

    def __init__(
        self,
        min_interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._last_call_end: float | None = None
        self._lock = asyncio.Lock()

    async def __aenter__(self) -> IntervalLimiter:
        await self._lock.acquire()
        try:
            if self._last_call_end is not None:
                remaining = self.min_interval - (self._clock() - self._last_call_end)
                if remaining > 0:
                    logger.debug("Rate limit: waiting %.3fs", remaining)
                    await self._sleep(remaining)
        except BaseException:
            self._lock.release()
            raise
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self._last_call_end = self._clock()
        self._lock.release()


@dataclass
class ProviderSlot:
    provider: GeocoderPort
    limiter: IntervalLimiter | None = None


class GeocodingPolicy:
    """Resolve an address to one coordinate using an ordered provider chain.

    A provider that rejects its credentials once is disabled for the rest
    of this policy's lifetime (one policy per run).
    """

    def __init__(self, providers: list[ProviderSlot], country_code: str):
        self._slots = list(providers)
        self._country_code = country_code
        self._rejected: set[GeocoderPort] = set()
        self._unconfigured_warned: set[GeocoderPort] = set()

    @property
    def disabled_providers(self) -> list[str]:
        return [s.provider.name for s in self._slots if s.provider in self._rejected]

    async def geocode(self, address: str) -> GeoPoint | None:
        """Return the first coordinate any provider yields, or None if unresolved."""
        for slot in self._slots:
            provider = slot.provider

            if not provider.is_configured:
                if provider not in self._unconfigured_warned:
                    logger.warning("%s is not configured, skipping it for this run", provider.name)
                    self._unconfigured_warned.add(provider)
                continue

            if provider in self._rejected:
                logger.debug("Skipping %s: credentials rejected earlier in this run", provider.name)
                continue

            if slot.limiter is not None:
                async with slot.limiter:
                    result = await provider.geocode(address, self._country_code)
            else:
                result = await provider.geocode(address, self._country_code)

            if result.status == GeocodeStatus.OK and result.point is not None:
                logger.info(
                    "%s resolved '%s' → %s", provider.name, address, result.point.to_marker()
                )
                return result.point

            if result.status == GeocodeStatus.AUTH_REJECTED:
                logger.error(
                    "%s rejected the API key. Disabling it for the rest of this run.",
                    provider.name,
                )
                self._rejected.add(provider)
                continue

            logger.info("%s failed for '%s', trying next provider", provider.name, address)

        logger.warning("All geocoding providers failed for '%s'", address)
        return None
