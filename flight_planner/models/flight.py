"""Flight request model."""

from typing import Dict, Optional
from pydantic import BaseModel
from ..config import SEAT_CATEGORIES


class FlightRequest(BaseModel):
    """Represents one candidate flight out of a hub."""
    
    departure_hub: str
    destination_code: str
    aeroplane_name: str
    seats_booked: Dict[str, Optional[int]]  # per seat category
    fares: Dict[str, Optional[float]]  # per seat category, per seat
    
    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "departure_hub": "MAN",
                "destination_code": "JFK",
                "aeroplane_name": "Large narrow body",
                "seats_booked": {"economy": 150, "business": 10, "first-class": 0},
                "fares": {"economy": 399.0, "business": 999.0, "first-class": 0.0},
            }
        }
    
    def total_booked(self) -> int:
        """Total seats booked across all categories (malformed counts as zero)."""
        return sum(self.seats_booked.get(category) or 0 for category in SEAT_CATEGORIES)
