"""Airport model."""

from typing import Optional
from pydantic import BaseModel


class Airport(BaseModel):
    """Represents a destination airport with its distance from each hub."""
    
    code: str
    name: str = ""
    distance_from_hub1: Optional[float] = None  # km, None if malformed
    distance_from_hub2: Optional[float] = None  # km, None if malformed
    
    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "code": "JFK",
                "name": "John F Kennedy International",
                "distance_from_hub1": 5376.0,
                "distance_from_hub2": 5518.0,
            }
        }
