"""
Routes package for the random context provider.

- health: root endpoint with server information
- random: random health check and NGSI v1 queryContext endpoints
"""

from .health import router as health_router
from .random import router as random_router

__all__ = ["health_router", "random_router"]
