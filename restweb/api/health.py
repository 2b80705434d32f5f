"""
Health check endpoint.
Simple status endpoint for monitoring API availability.
"""
from fastapi import APIRouter

from restweb.logging_config import get_logger
from restweb.models import HealthResponse

router = APIRouter()
logger = get_logger(__name__)

HEALTH_STATUS = "UP and running !!"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    logger.info("Health check requested")
    return HealthResponse(status=HEALTH_STATUS)
