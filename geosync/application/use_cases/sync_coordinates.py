"""SyncCoordinatesUseCase — one batch pass: list → resolve → geocode → update."""

from __future__ import annotations

import logging

from geosync.application.ports.crm_port import CrmError, CrmPort
from geosync.application.use_cases.geocoding_policy import GeocodingPolicy
from geosync.domain.entities.customer import Customer
from geosync.domain.entities.internet_service import InternetService
from geosync.domain.entities.run_summary import RunSummary, ServiceOutcome
from geosync.domain.policies.address_resolution import resolve_address
from geosync.domain.value_objects.enums import FailureReason

logger = logging.getLogger(__name__)

DRY_RUN_REASON = "Dry run"


class SyncCoordinatesUseCase:
    """Fill in missing geo markers for every active service of every active customer."""

    def __init__(self, crm: CrmPort, policy: GeocodingPolicy, dry_run: bool = False):
        self._crm = crm
        self._policy = policy
        self._dry_run = dry_run

    async def execute(self) -> RunSummary:
        """Run one pass over the CRM.

        Pipeline per active service:
        1. Skip if it already has a geo marker
        2. Resolve an address (service geo address, else customer street + city)
        3. Geocode through the provider chain
        4. Write the marker back

        Only a failure to list customers ends the run early; everything else
        is recorded on the summary and processing continues.
        """
        summary = RunSummary(dry_run=self._dry_run)

        try:
            customers = await self._crm.list_customers(status="active")
        except CrmError as e:
            logger.error("Failed to retrieve customers: %s", e)
            summary.aborted = True
            summary.error = str(e)
            return summary

        logger.info("Found %d active customers", len(customers))

        for customer in customers:
            summary.customers_seen += 1
            try:
                services = await self._crm.list_services(customer.id)
            except CrmError as e:
                logger.warning("Customer %s: could not list services (%s), skipping", customer.id, e)
                continue

            if any(s.needs_geocoding() for s in services):
                logger.info(
                    "Customer ID: %s | Name: %s | Login: %s",
                    customer.id, customer.display_name, customer.login or "N/A",
                )

            for service in services:
                if service.is_active():
                    await self._process_service(customer, service, summary)

        logger.info(
            "Sync complete: processed=%d updated=%d skipped=%d failed=%d",
            summary.processed, summary.updated, summary.skipped, summary.failed,
        )
        if self._policy.disabled_providers:
            logger.warning(
                "Geocoders disabled during this run: %s",
                ", ".join(self._policy.disabled_providers),
            )
        return summary

    async def _process_service(
        self, customer: Customer, service: InternetService, summary: RunSummary
    ) -> None:
        summary.processed += 1

        if service.has_marker():
            summary.skipped += 1
            return

        logger.info("  Service ID: %s | IPv4: %s", service.id, service.ipv4 or "N/A")

        address = resolve_address(customer, service)
        if address is None:
            logger.info("Service %s: no address available, skipping", service.id)
            summary.skipped += 1
            summary.failed_services.append(
                self._outcome(customer, service, reason=FailureReason.NO_ADDRESS.value)
            )
            return

        if service.geo_address:
            logger.info("    Geo Address: %s", address)
        else:
            logger.info("    No service address found. Using customer address: %s", address)

        point = await self._policy.geocode(address)
        if point is None:
            summary.skipped += 1
            summary.failed_services.append(
                self._outcome(
                    customer, service, address=address,
                    reason=FailureReason.GEOCODING_FAILED.value,
                )
            )
            return

        marker = point.to_marker()

        if self._dry_run:
            logger.info("Service %s: would set geo.marker=%s (dry run)", service.id, marker)
            summary.updated_services.append(
                self._outcome(
                    customer, service, address=address,
                    coordinates=marker, reason=DRY_RUN_REASON,
                )
            )
            return

        if await self._crm.update_service_marker(customer.id, service.id, marker):
            logger.info("Service %s: geo.marker set to %s", service.id, marker)
            summary.updated += 1
            service.geo_marker = marker
            summary.updated_services.append(
                self._outcome(customer, service, address=address, coordinates=marker)
            )
        else:
            logger.warning("Service %s: failed to update geo.marker", service.id)
            summary.failed_services.append(
                self._outcome(
                    customer, service, address=address,
                    coordinates=marker, reason=FailureReason.UPDATE_FAILED.value,
                )
            )

    @staticmethod
    def _outcome(customer: Customer, service: InternetService, **detail) -> ServiceOutcome:
        return ServiceOutcome(
            customer_id=customer.id,
            customer_name=customer.display_name,
            service_id=service.id,
            **detail,
        )
