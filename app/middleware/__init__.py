"""
Middleware package for the application.
"""

from app.middleware.metrics import MetricsMiddleware
from app.middleware.request_id import RequestIDMiddleware

__all__ = [
    "MetricsMiddleware",
    "RequestIDMiddleware",
]
