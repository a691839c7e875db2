"""Dependency wiring — builds adapters, the geocoding policy and the sync use case."""

from __future__ import annotations

from fastapi import Depends, Request

from geosync.adapters.geocoder.google_maps_adapter import GoogleMapsAdapter
from geosync.adapters.geocoder.nominatim_adapter import NominatimAdapter
from geosync.adapters.splynx.client import SplynxClient
from geosync.application.ports.crm_port import CrmPort
from geosync.application.use_cases.geocoding_policy import (
    GeocodingPolicy,
    IntervalLimiter,
    ProviderSlot,
)
from geosync.application.use_cases.sync_coordinates import SyncCoordinatesUseCase
from geosync.config import settings


def build_geocoding_policy(
    limiter: IntervalLimiter | None = None,
    country_code: str | None = None,
) -> GeocodingPolicy:
    """Nominatim first (rate limited), Google second (key gated)."""
    return GeocodingPolicy(
        providers=[
            ProviderSlot(
                NominatimAdapter(),
                limiter or IntervalLimiter(min_interval=settings.nominatim_min_interval),
            ),
            ProviderSlot(GoogleMapsAdapter()),
        ],
        country_code=country_code or settings.geocoding_country_code,
    )


def get_crm() -> CrmPort:
    return SplynxClient()


def get_geocoding_policy(request: Request) -> GeocodingPolicy:
    # Fresh policy per run so the sticky "key rejected" flag does not leak;
    # the limiter is the app-wide one built in the lifespan.
    limiter = getattr(request.app.state, "nominatim_limiter", None)
    return build_geocoding_policy(limiter=limiter)


def get_sync_uc(
    dry_run: bool = False,
    crm: CrmPort = Depends(get_crm),
    policy: GeocodingPolicy = Depends(get_geocoding_policy),
) -> SyncCoordinatesUseCase:
    return SyncCoordinatesUseCase(crm=crm, policy=policy, dry_run=dry_run)
