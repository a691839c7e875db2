"""Splynx REST API client — implements CrmPort."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from geosync.application.ports.crm_port import CrmError, CrmPort
from geosync.config import settings
from geosync.domain.entities.customer import Customer
from geosync.domain.entities.internet_service import InternetService
from geosync.domain.value_objects.enums import ServiceStatus

logger = logging.getLogger(__name__)

USER_AGENT = "Splynx-API-Client"
CUSTOMERS_PATH = "admin/customers/customer"

# ─── Mappers ─────────────────────────────────────────────────────────


def _as_int(raw: Any) -> int | None:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def _as_str(raw: Any) -> str | None:
    if raw is None:
        return None
    return str(raw)


def _customer_to_domain(raw: dict) -> Customer | None:
    customer_id = _as_int(raw.get("id"))
    if customer_id is None:
        return None
    return Customer(
        id=customer_id,
        name=_as_str(raw.get("name")),
        login=_as_str(raw.get("login")),
        street_1=_as_str(raw.get("street_1")),
        city=_as_str(raw.get("city")),
    )


def _service_to_domain(raw: dict, customer_id: int) -> InternetService | None:
    service_id = _as_int(raw.get("id"))
    if service_id is None:
        return None
    geo = raw.get("geo") if isinstance(raw.get("geo"), dict) else {}
    return InternetService(
        id=service_id,
        customer_id=_as_int(raw.get("customer_id")) or customer_id,
        status=ServiceStatus.parse(_as_str(raw.get("status"))),
        ipv4=_as_str(raw.get("ipv4")),
        geo_address=_as_str(geo.get("address")),
        geo_marker=_as_str(geo.get("marker")),
    )


# ─── Client ──────────────────────────────────────────────────────────


class SplynxClient(CrmPort):
    """Splynx API v2.0 over HTTP Basic authentication (API key / secret)."""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        api_secret: str | None = None,
        timeout: float | None = None,
    ):
        self._base_url = (base_url or settings.splynx_base_url).rstrip("/")
        self._auth = httpx.BasicAuth(
            api_key if api_key is not None else settings.splynx_api_key,
            api_secret if api_secret is not None else settings.splynx_api_secret,
        )
        self._timeout = timeout if timeout is not None else settings.http_timeout

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    async def _get_list(self, path: str, params: dict[str, str] | None = None) -> list[dict]:
        url = self._url(path)
        try:
            async with httpx.AsyncClient(auth=self._auth) as client:
                response = await client.get(
                    url,
                    params=params,
                    headers={"Accept": "application/json", "User-Agent": USER_AGENT},
                    timeout=self._timeout,
                )
        except httpx.HTTPError as e:
            raise CrmError(f"GET {url} failed: {e}") from e

        if response.status_code != 200:
            raise CrmError(
                f"GET {url} failed with HTTP {response.status_code}: {response.text or 'No response body'}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise CrmError(f"GET {url} returned a body that is not JSON", status_code=200) from e

        if not isinstance(data, list):
            raise CrmError(f"GET {url} returned {type(data).__name__}, expected a list", status_code=200)
        return [item for item in data if isinstance(item, dict)]

    async def list_customers(self, status: str = "active") -> list[Customer]:
        rows = await self._get_list(CUSTOMERS_PATH, params={"main_attributes[status]": status})
        customers = []
        for row in rows:
            customer = _customer_to_domain(row)
            if customer is None:
                logger.warning("Ignoring customer record without an id: %r", row)
                continue
            customers.append(customer)
        return customers

    async def list_services(self, customer_id: int) -> list[InternetService]:
        rows = await self._get_list(f"{CUSTOMERS_PATH}/{customer_id}/internet-services")
        services = []
        for row in rows:
            service = _service_to_domain(row, customer_id)
            if service is None:
                logger.warning("Customer %s: ignoring service record without an id", customer_id)
                continue
            services.append(service)
        return services

    async def update_service_marker(
        self, customer_id: int, service_id: int, marker: str
    ) -> bool:
        """PUT the marker; Splynx answers 202 Accepted on success."""
        url = self._url(f"{CUSTOMERS_PATH}/{customer_id}/geo-internet-service--{service_id}")
        try:
            async with httpx.AsyncClient(auth=self._auth) as client:
                response = await client.put(
                    url,
                    json={"marker": marker},
                    headers={"Accept": "application/json", "User-Agent": USER_AGENT},
                    timeout=self._timeout,
                )
        except httpx.HTTPError as e:
            logger.warning("PUT %s failed: %s", url, e)
            return False

        if response.status_code == 202:
            return True

        logger.warning(
            "PUT %s failed with HTTP %d: %s",
            url, response.status_code, response.text or "No response body",
        )
        return False
