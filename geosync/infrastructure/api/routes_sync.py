"""Sync endpoint — trigger one coordinate sync pass."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from geosync.adapters.reporting.summary_formatter import summary_to_dict
from geosync.application.use_cases.sync_coordinates import SyncCoordinatesUseCase
from geosync.infrastructure.api.dependencies import get_sync_uc

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sync", tags=["sync"])


@router.post("/run")
async def run_sync(uc: SyncCoordinatesUseCase = Depends(get_sync_uc)):
    """Geocode every active service without a marker and write the result back.

    Pass ``?dry_run=true`` to geocode without writing.
    """
    summary = await uc.execute()
    if summary.aborted:
        logger.error("Sync aborted: %s", summary.error)
        raise HTTPException(
            status_code=502,
            detail=f"Failed to retrieve customer data: {summary.error}",
        )
    return summary_to_dict(summary)
