"""
Health check route.

This endpoint is PUBLIC and provides a simple status check for load
balancers and deployment verification.
"""

import logging

from fastapi import APIRouter

from betelsec.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    tags=["system"],
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok",
            "service": "betelsec-risk-assessment"
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse()
