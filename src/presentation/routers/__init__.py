"""Application routers.

- api_router: events and categories under settings.api_prefix
- system_router: root and health endpoints
"""

from src.presentation.routers.api import api_router
from src.presentation.routers.system import system_router

__all__ = ["api_router", "system_router"]
