"""Geocode Splynx internet services that have no coordinates.

Usage:
    python -m geosync.tools.sync_geo
    python -m geosync.tools.sync_geo --dry-run      # geocode but do not write
    python -m geosync.tools.sync_geo --country au --verbose
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from geosync.adapters.reporting.summary_formatter import format_summary
from geosync.adapters.splynx.client import SplynxClient
from geosync.application.use_cases.sync_coordinates import SyncCoordinatesUseCase
from geosync.config import settings
from geosync.domain.entities.run_summary import RunSummary
from geosync.infrastructure.api.dependencies import build_geocoding_policy

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fill in geo.marker for active Splynx internet services without coordinates",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Geocode addresses but do not write markers back to Splynx",
    )
    parser.add_argument(
        "--country",
        default=None,
        help=f"ISO 3166-1 alpha-2 country filter (default: {settings.geocoding_country_code})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


async def sync(dry_run: bool = False, country_code: str | None = None) -> RunSummary:
    """Run one pass with the Splynx client and the default provider chain."""
    uc = SyncCoordinatesUseCase(
        crm=SplynxClient(),
        policy=build_geocoding_policy(country_code=country_code),
        dry_run=dry_run,
    )
    return await uc.execute()


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if (args.verbose or settings.debug) else logging.INFO,
        format="%(levelname)s | %(message)s",
    )

    logger.info("Retrieving all active customers from %s", settings.splynx_base_url)
    summary = asyncio.run(sync(dry_run=args.dry_run, country_code=args.country))
    print(format_summary(summary))
    return 1 if summary.aborted else 0


if __name__ == "__main__":
    sys.exit(main())
