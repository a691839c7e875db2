"""AddressResolution — choose the geocoding query for a service."""

from __future__ import annotations

from geosync.domain.entities.customer import Customer
from geosync.domain.entities.internet_service import InternetService


def resolve_address(customer: Customer, service: InternetService) -> str | None:
    """Return the single-line address to geocode, or None if there is none.

    1. The service's own ``geo.address``, verbatim, whenever it is non-empty.
    2. Otherwise the customer's ``"{street_1}, {city}"`` when both are set.

    Pure function: no I/O, same inputs always give the same result.
    """
    if service.geo_address:
        return service.geo_address

    if customer.street_1 and customer.city:
        return f"{customer.street_1}, {customer.city}"

    return None
