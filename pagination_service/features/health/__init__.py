"""Health feature: liveness probe."""

from pagination_service.features.health.router import router

__all__ = ["router"]
