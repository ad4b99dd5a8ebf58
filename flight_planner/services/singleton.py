"""Singleton pattern for shared service instances."""

from .planning_service import PlanningService

# Global service instance (singleton pattern)
_planning_service: PlanningService = None


def get_planning_service() -> PlanningService:
    """
    Get or create the singleton planning service instance.
    
    Returns:
        PlanningService instance
    """
    global _planning_service
    if _planning_service is None:
        _planning_service = PlanningService()
    return _planning_service


def reset_planning_service(service: PlanningService = None) -> None:
    """Replace the shared instance (None creates a fresh one on next use)."""
    global _planning_service
    _planning_service = service
