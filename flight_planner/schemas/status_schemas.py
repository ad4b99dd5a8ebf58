"""Schemas for status endpoints."""

from pydantic import BaseModel
from typing import Any, Dict, List, Optional, Union


class StatusResponse(BaseModel):
    """Response model for reference data and batch status."""
    
    status: str
    hubs: List[str]
    airports: int
    aeroplanes: int
    batches: Dict[str, Union[str, Dict[str, Any]]]
    error: Optional[str] = None
