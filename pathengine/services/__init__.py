"""Services layer - Application orchestration.

Available services:
- RouteService: Loads the road graph once and answers route queries
"""

from .route_service import RouteService

__all__ = ["RouteService"]
