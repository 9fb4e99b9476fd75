"""Immutable domain models for the Metro Router.

All models are frozen dataclasses with slots for memory efficiency.
These models have no external dependencies and represent the core
business concepts of the application.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from enum import Enum, auto

# Reserved cost returned when no route exists between two stations.
UNREACHABLE = sys.maxsize

DEFAULT_SEPARATOR = "~"


class CostMode(Enum):
    """Cost function applied to edge weights.

    DISTANCE uses the raw edge weight, TIME adds a fixed boarding
    penalty plus a per-unit travel time (in seconds).
    """

    DISTANCE = auto()
    TIME = auto()


@dataclass(frozen=True, slots=True)
class Station:
    """A metro station parsed from its stored name.

    Attributes:
        name: Full stored key, e.g. 'Rajiv Chowk~BY'
        label: Human-readable part before the separator
        line_code: Category suffix after the separator ('' if absent)
    """

    name: str
    label: str
    line_code: str = ""

    @classmethod
    def parse(cls, name: str, separator: str = DEFAULT_SEPARATOR) -> Station:
        """Split a stored name into its label and line code."""
        label, found, code = name.partition(separator)
        if not found:
            return cls(name=name, label=name)
        return cls(name=name, label=label, line_code=code)

    @property
    def lines(self) -> tuple[str, ...]:
        """Return the individual line codes served by this station."""
        return tuple(self.line_code)

    @property
    def is_interchange_candidate(self) -> bool:
        """Check if the station serves exactly two lines."""
        return len(self.line_code) == 2


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a route computation between stations.

    Attributes:
        path: Ordered tuple of station names forming the route
        total_cost: Raw cumulative cost (distance units or seconds)
        mode: Cost function the route was optimised for
    """

    path: tuple[str, ...]
    total_cost: int
    mode: CostMode = CostMode.DISTANCE

    @classmethod
    def unreachable(cls, mode: CostMode = CostMode.DISTANCE) -> RouteResult:
        """Build the empty result used when no route exists."""
        return cls(path=(), total_cost=UNREACHABLE, mode=mode)

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of stops in the route."""
        return len(self.path)

    @property
    def total(self) -> int:
        """Return the cost in display units (minutes for TIME mode)."""
        if self.mode is CostMode.TIME and self.total_cost != UNREACHABLE:
            return seconds_to_minutes(self.total_cost)
        return self.total_cost


@dataclass(frozen=True, slots=True)
class InterchangeSummary:
    """Route segmented for display, with line changes merged.

    Attributes:
        segments: Display tokens; a line change is one 'A ==> B' entry
        transitions: Number of genuine line changes along the route
        source: First station of the route
        destination: Last station of the route
    """

    segments: tuple[str, ...] = field(default_factory=tuple)
    transitions: int = 0
    source: str = ""
    destination: str = ""


@dataclass(frozen=True, slots=True)
class JourneyPlan:
    """A computed route together with its interchange annotation."""

    route: RouteResult
    summary: InterchangeSummary

    @property
    def interchanges(self) -> int:
        return self.summary.transitions


def seconds_to_minutes(seconds: int) -> int:
    """Convert seconds to whole minutes, rounding up."""
    return math.ceil(seconds / 60)
