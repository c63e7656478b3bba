"""
Middleware package for FastAPI application.
"""

from healthplus.api.middleware.request_logging import RequestLoggingMiddleware

__all__ = [
    "RequestLoggingMiddleware",
]
