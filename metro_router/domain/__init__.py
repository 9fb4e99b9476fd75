"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    GraphError,
    MetroRouterError,
    NoRouteFoundError,
    StationNotFoundError,
)
from .models import (
    DEFAULT_SEPARATOR,
    UNREACHABLE,
    CostMode,
    InterchangeSummary,
    JourneyPlan,
    RouteResult,
    Station,
    seconds_to_minutes,
)

__all__ = [
    # Models
    "CostMode",
    "Station",
    "RouteResult",
    "InterchangeSummary",
    "JourneyPlan",
    "UNREACHABLE",
    "DEFAULT_SEPARATOR",
    "seconds_to_minutes",
    # Errors
    "MetroRouterError",
    "GraphError",
    "NoRouteFoundError",
    "StationNotFoundError",
]
