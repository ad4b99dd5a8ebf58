"""Flight planner models package."""

from .airport import Airport
from .aeroplane import AeroplaneModel
from .flight import FlightRequest
from .outcome import ReasonCode, RejectionReason, Accepted, Rejected, ValidationOutcome
from .result import ProfitBreakdown, FlightResult, BatchReport

__all__ = [
    "Airport",
    "AeroplaneModel",
    "FlightRequest",
    "ReasonCode",
    "RejectionReason",
    "Accepted",
    "Rejected",
    "ValidationOutcome",
    "ProfitBreakdown",
    "FlightResult",
    "BatchReport",
]
