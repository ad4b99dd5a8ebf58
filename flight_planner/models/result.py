"""Per-flight result models."""

from typing import List, Optional
from pydantic import BaseModel, Field, model_validator
from .outcome import RejectionReason


class ProfitBreakdown(BaseModel):
    """Revenue, cost and profit/loss for one accepted flight."""
    
    aircraft_type: str
    distance_km: float
    revenue: float
    total_cost: float
    profit_loss: float


class FlightResult(BaseModel):
    """Final record for one flight: either an error or a profit/loss."""
    
    departure: str
    destination: str
    error: Optional[str] = None
    reasons: List[RejectionReason] = Field(default_factory=list)
    aircraft_type: Optional[str] = None
    distance_km: Optional[float] = None
    profit_loss: Optional[float] = None
    revenue: Optional[float] = None
    total_cost: Optional[float] = None
    
    class Config:
        json_schema_extra = {
            "example": {
                "departure": "MAN",
                "destination": "JFK",
                "aircraft_type": "Large narrow body",
                "distance_km": 5376.0,
                "profit_loss": 12345.67,
                "revenue": 80000.0,
                "total_cost": 67654.33,
            }
        }
    
    @model_validator(mode="after")
    def check_exclusive(self) -> "FlightResult":
        """Exactly one of the error or the full success fields must be set."""
        success_fields = [self.aircraft_type, self.distance_km, self.profit_loss]
        has_success = all(value is not None for value in success_fields)
        has_any_success = any(value is not None for value in success_fields)
        if self.error is not None:
            if has_any_success:
                raise ValueError("error result must not carry profit/loss fields")
        elif not has_success:
            raise ValueError("result needs either an error or aircraft, distance and profit/loss")
        return self
    
    def is_error(self) -> bool:
        """Check if this flight was rejected."""
        return self.error is not None


class BatchReport(BaseModel):
    """Outcome of running one named batch of flights."""
    
    name: str
    results: List[FlightResult] = Field(default_factory=list)
    error: Optional[str] = None  # set when a source failed to load
    output_path: Optional[str] = None
    
    def is_loaded(self) -> bool:
        """Check if the batch's sources loaded and the flights were evaluated."""
        return self.error is None
