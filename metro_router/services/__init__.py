"""Services layer - Application orchestration.

Available services:
- MetroRouterService: Routing queries over the metro network
"""

from .metro_service import MetroRouterService

__all__ = ["MetroRouterService"]
