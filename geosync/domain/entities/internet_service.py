"""InternetService entity — a customer's internet service with its geo fields."""

from dataclasses import dataclass

from geosync.domain.value_objects.enums import ServiceStatus


@dataclass
class InternetService:
    id: int
    customer_id: int
    status: ServiceStatus
    ipv4: str | None = None
    geo_address: str | None = None
    geo_marker: str | None = None

    def is_active(self) -> bool:
        return self.status == ServiceStatus.ACTIVE

    def has_marker(self) -> bool:
        return bool(self.geo_marker)

    def needs_geocoding(self) -> bool:
        return self.is_active() and not self.has_marker()
