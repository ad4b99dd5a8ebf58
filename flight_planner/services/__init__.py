"""Services package."""

from .planning_service import PlanningService
from .singleton import get_planning_service, reset_planning_service

__all__ = ["PlanningService", "get_planning_service", "reset_planning_service"]
