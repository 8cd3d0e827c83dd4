"""Paginate feature: GET /paginate over the DynamoDB store."""

from pagination_service.features.paginate.router import router

__all__ = ["router"]
