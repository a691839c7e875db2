"""Port interface for the billing/CRM system holding customers and services."""

from abc import ABC, abstractmethod

from geosync.domain.entities.customer import Customer
from geosync.domain.entities.internet_service import InternetService


class CrmError(Exception):
    """A CRM listing call failed (non-200 response or transport fault)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class CrmPort(ABC):
    @abstractmethod
    async def list_customers(self, status: str = "active") -> list[Customer]:
        """Raises CrmError if the listing cannot be fetched."""
        ...

    @abstractmethod
    async def list_services(self, customer_id: int) -> list[InternetService]:
        """Raises CrmError if the listing cannot be fetched."""
        ...

    @abstractmethod
    async def update_service_marker(
        self, customer_id: int, service_id: int, marker: str
    ) -> bool:
        """Write only the ``geo.marker`` field. Returns True if accepted."""
        ...
