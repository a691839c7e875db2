"""Health check endpoint."""

from fastapi import APIRouter

from geosync.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Report which collaborators are configured. Makes no outbound calls."""
    return {
        "status": "ok",
        "crm_configured": settings.crm_configured,
        "secondary_geocoder_configured": bool(settings.google_maps_api_key),
        "service": "geosync - Splynx service coordinate sync",
    }
