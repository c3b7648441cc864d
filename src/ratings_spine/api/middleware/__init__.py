"""API middleware package."""

from ratings_spine.api.middleware.request_context import RequestContextMiddleware

__all__ = ["RequestContextMiddleware"]
