"""Schemas for flight evaluation endpoints."""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from ..models.flight import FlightRequest
from ..models.result import FlightResult


class FlightRequestIn(BaseModel):
    """Request model for one candidate flight."""
    
    departure: str = Field(..., description="Departure hub code")
    destination: str = Field(..., description="Destination airport code")
    aeroplane: str = Field(..., description="Aeroplane model name")
    economy_booked: int = Field(0, ge=0)
    business_booked: int = Field(0, ge=0)
    first_class_booked: int = Field(0, ge=0)
    economy_fare: float = Field(0.0, ge=0)
    business_fare: float = Field(0.0, ge=0)
    first_class_fare: float = Field(0.0, ge=0)
    
    def to_flight_request(self) -> FlightRequest:
        """Convert to the engine's flight model."""
        return FlightRequest(
            departure_hub=self.departure,
            destination_code=self.destination,
            aeroplane_name=self.aeroplane,
            seats_booked={
                "economy": self.economy_booked,
                "business": self.business_booked,
                "first-class": self.first_class_booked,
            },
            fares={
                "economy": self.economy_fare,
                "business": self.business_fare,
                "first-class": self.first_class_fare,
            },
        )


class EvaluateRequest(BaseModel):
    """Request model for evaluating a list of flights."""
    
    flights: List[FlightRequestIn]


class EvaluateResponse(BaseModel):
    """Response model with one result and one report line per flight."""
    
    results: List[FlightResult]
    lines: List[str]
    summary: Dict[str, Any]


class BatchRunResponse(BaseModel):
    """Response model for a batch run from disk."""
    
    name: str
    output_path: Optional[str] = None
    summary: Dict[str, Any]
    lines: List[str]
