"""Aeroplane model."""

from typing import Dict, Optional
from pydantic import BaseModel
from ..config import SEAT_CATEGORIES


class AeroplaneModel(BaseModel):
    """Represents an aeroplane model with running cost, range and seating."""
    
    name: str
    cost_per_seat_per_100km: Optional[float] = None
    max_range: Optional[float] = None  # km
    seat_capacity: Dict[str, Optional[int]]  # per seat category
    
    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "name": "Large narrow body",
                "cost_per_seat_per_100km": 8.0,
                "max_range": 5600.0,
                "seat_capacity": {"economy": 160, "business": 12, "first-class": 0},
            }
        }
    
    def total_capacity(self) -> int:
        """Total seats across all categories (malformed counts as zero)."""
        return sum(self.seat_capacity.get(category) or 0 for category in SEAT_CATEGORIES)
