"""Routes for status endpoints."""

import logging
from fastapi import APIRouter
from ..schemas.status_schemas import StatusResponse
from ..services.singleton import get_planning_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["status"])


@router.get("/status", response_model=StatusResponse)
async def get_status():
    """
    Get reference data counts, configured hubs and batch summaries.
    
    Returns:
        Current status
    """
    planning_service = get_planning_service()
    status_data = planning_service.get_status()
    return StatusResponse(**status_data)
