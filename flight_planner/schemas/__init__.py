"""API schemas for request/response models."""

from .planning_schemas import FlightRequestIn, EvaluateRequest, EvaluateResponse, BatchRunResponse
from .status_schemas import StatusResponse

__all__ = [
    "FlightRequestIn",
    "EvaluateRequest",
    "EvaluateResponse",
    "BatchRunResponse",
    "StatusResponse",
]
