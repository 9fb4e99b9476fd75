"""Typed domain errors for the Metro Router.

The graph algorithms themselves never raise for unknown stations or
unreachable pairs; they return sentinels. These errors are raised by
the loading and service layers, where a missing station or route is
something the caller asked to be told about explicitly.

All errors inherit from MetroRouterError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MetroRouterError(Exception):
    """Base error for the metro router domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(MetroRouterError):
    """Network loading or data integrity error.

    Attributes:
        file_path: Path to the network data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class NoRouteFoundError(MetroRouterError):
    """No path exists between the requested stations.

    Attributes:
        departure: Departure station name
        arrival: Arrival station name
    """

    departure: str = ""
    arrival: str = ""


@dataclass
class StationNotFoundError(MetroRouterError):
    """Station name not found in the network.

    Attributes:
        station_name: The station name that was not found
    """

    station_name: str = ""

