"""Validation outcome models."""

from enum import Enum
from typing import Any, Dict, List, Literal, Union
from pydantic import BaseModel, Field
from .aeroplane import AeroplaneModel


class ReasonCode(str, Enum):
    """Why a flight was rejected."""
    
    INVALID_DEPARTURE = "INVALID_DEPARTURE"
    INVALID_DESTINATION = "INVALID_DESTINATION"
    INVALID_AEROPLANE = "INVALID_AEROPLANE"
    MALFORMED_VALUE = "MALFORMED_VALUE"
    NO_SEATS_IN_CATEGORY = "NO_SEATS_IN_CATEGORY"
    TOO_MANY_SEATS = "TOO_MANY_SEATS"
    TOO_MANY_TOTAL_SEATS = "TOO_MANY_TOTAL_SEATS"
    OUT_OF_RANGE = "OUT_OF_RANGE"


class RejectionReason(BaseModel):
    """A single rejection reason with the values needed to describe it."""
    
    code: ReasonCode
    params: Dict[str, Any] = Field(default_factory=dict)
    
    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "code": "TOO_MANY_SEATS",
                "params": {"category": "economy", "booked": 190, "capacity": 180},
            }
        }


class Accepted(BaseModel):
    """A flight that passed every validation rule."""
    
    status: Literal["accepted"] = "accepted"
    departure: str
    destination: str
    aeroplane: AeroplaneModel
    distance_km: float


class Rejected(BaseModel):
    """A flight that failed one or more validation rules."""
    
    status: Literal["rejected"] = "rejected"
    departure: str
    destination: str
    reasons: List[RejectionReason] = Field(min_length=1)
    
    def codes(self) -> List[ReasonCode]:
        """Reason codes in the order they were found."""
        return [reason.code for reason in self.reasons]
    
    def is_out_of_range(self) -> bool:
        """Whether the range check was one of the failures."""
        return ReasonCode.OUT_OF_RANGE in self.codes()


ValidationOutcome = Union[Accepted, Rejected]
