"""GeocodeResult — what a single provider call produced."""

from __future__ import annotations

from dataclasses import dataclass

from geosync.domain.value_objects.enums import GeocodeStatus
from geosync.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class GeocodeResult:
    status: GeocodeStatus
    point: GeoPoint | None = None

    @classmethod
    def ok(cls, point: GeoPoint) -> GeocodeResult:
        return cls(status=GeocodeStatus.OK, point=point)

    @classmethod
    def no_result(cls) -> GeocodeResult:
        return cls(status=GeocodeStatus.NO_RESULT)

    @classmethod
    def auth_rejected(cls) -> GeocodeResult:
        return cls(status=GeocodeStatus.AUTH_REJECTED)
