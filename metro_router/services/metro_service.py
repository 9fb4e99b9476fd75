"""Metro routing service - Main orchestrator.

This service ties the network repository to the routing algorithms and
adds validation, logging and presentation helpers for front-ends.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from ..config import RoutingConfig, get_config
from ..domain.errors import NoRouteFoundError, StationNotFoundError
from ..domain.models import (
    UNREACHABLE,
    CostMode,
    InterchangeSummary,
    JourneyPlan,
    RouteResult,
    Station,
    seconds_to_minutes,
)
from ..graph.dijkstra import shortest_cost
from ..graph.interchanges import TRANSITION_MARKER, annotate_interchanges
from ..graph.path_search import minimum_path
from ..graph.store import GraphStore
from ..ports.graph import GraphRepositoryPort


@dataclass
class MetroRouterService:
    """Main service for answering routing queries.

    The ``shortest_cost``/``shortest_path``/``annotate_interchanges``
    methods are thin wrappers over the algorithms and report invalid
    input as sentinels. ``cost`` and ``plan`` validate first and raise
    typed errors instead; ``plan_safe`` turns those into messages.

    Attributes:
        graph_repository: Loads the metro network
        routing: Cost constants for TIME mode
    """

    graph_repository: GraphRepositoryPort
    routing: RoutingConfig = field(default_factory=lambda: get_config().routing)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def graph(self) -> GraphStore:
        return self.graph_repository.load()

    def has_route(self, source: str, destination: str) -> bool:
        """Check that both stations exist and are connected."""
        graph = self.graph
        return (
            graph.contains_vertex(source)
            and graph.contains_vertex(destination)
            and graph.has_path(source, destination)
        )

    def shortest_cost(
        self, source: str, destination: str, mode: CostMode = CostMode.DISTANCE
    ) -> int:
        """Cheapest raw cost, or UNREACHABLE."""
        return shortest_cost(self.graph, source, destination, mode, self.routing)

    def shortest_path(
        self, source: str, destination: str, mode: CostMode = CostMode.DISTANCE
    ) -> RouteResult:
        """Reconstructed route, or an empty result."""
        return minimum_path(self.graph, source, destination, mode, self.routing)

    def annotate_interchanges(
        self, route: Union[RouteResult, Sequence[str]]
    ) -> InterchangeSummary:
        """Annotate line changes along a route of station names."""
        names = route.path if isinstance(route, RouteResult) else route
        return annotate_interchanges(self._stations_for(names))

    def _stations_for(self, names: Sequence[str]) -> List[Station]:
        graph = self.graph
        stations: List[Station] = []
        for name in names:
            station = graph.station(name)
            stations.append(
                station if station is not None else Station.parse(name, graph.separator)
            )
        return stations

    def _validate(self, source: str, destination: str) -> None:
        graph = self.graph
        for name in (source, destination):
            if not graph.contains_vertex(name):
                raise StationNotFoundError(
                    f"Station not in network: {name}",
                    station_name=name,
                )
        if not graph.has_path(source, destination):
            self._logger.warning(
                "No route found",
                extra={"source": source, "destination": destination},
            )
            raise NoRouteFoundError(
                f"No path from {source} to {destination}",
                departure=source,
                arrival=destination,
            )

    def cost(
        self, source: str, destination: str, mode: CostMode = CostMode.DISTANCE
    ) -> int:
        """Cheapest cost in display units (minutes for TIME).

        Raises:
            StationNotFoundError: If either station is unknown.
            NoRouteFoundError: If the stations are not connected.
        """
        self._validate(source, destination)
        raw = self.shortest_cost(source, destination, mode)
        if raw == UNREACHABLE:
            raise NoRouteFoundError(
                f"No path from {source} to {destination}",
                departure=source,
                arrival=destination,
            )
        value = seconds_to_minutes(raw) if mode is CostMode.TIME else raw
        self._logger.info(
            "Cost computed",
            extra={
                "source": source,
                "destination": destination,
                "mode": mode.name,
                "cost": value,
            },
        )
        return value

    def plan(
        self, source: str, destination: str, mode: CostMode = CostMode.DISTANCE
    ) -> JourneyPlan:
        """Compute a route and its interchange annotation.

        Raises:
            StationNotFoundError: If either station is unknown.
            NoRouteFoundError: If the stations are not connected.
        """
        self._validate(source, destination)
        route = self.shortest_path(source, destination, mode)
        if route.is_empty:
            raise NoRouteFoundError(
                f"No path from {source} to {destination}",
                departure=source,
                arrival=destination,
            )
        summary = self.annotate_interchanges(route)
        self._logger.info(
            "Route computed",
            extra={
                "source": source,
                "destination": destination,
                "mode": mode.name,
                "stops": route.num_stops,
                "total": route.total,
                "interchanges": summary.transitions,
            },
        )
        return JourneyPlan(route=route, summary=summary)

    def plan_safe(
        self, source: str, destination: str, mode: CostMode = CostMode.DISTANCE
    ) -> Tuple[Optional[JourneyPlan], Optional[str]]:
        """Compute a plan, returning an error message instead of raising.

        Returns:
            Tuple of (JourneyPlan or None, error message or None).
        """
        try:
            return self.plan(source, destination, mode), None
        except StationNotFoundError as e:
            return None, f"Unknown station: {e.station_name}"
        except NoRouteFoundError as e:
            return None, f"No path found between {e.departure} and {e.arrival}"

    def format_plan(self, plan: JourneyPlan) -> str:
        """Format a journey plan as human-readable text."""
        route, summary = plan.route, plan.summary
        unit = "MINUTES" if route.mode is CostMode.TIME else "KM"
        label = "TIME" if route.mode is CostMode.TIME else "DISTANCE"

        lines = [
            f"SOURCE STATION : {summary.source}",
            f"DESTINATION STATION : {summary.destination}",
            f"{label} : {route.total} {unit}",
            f"NUMBER OF INTERCHANGES : {summary.transitions}",
            "~~~~~~~~~~~~~",
            f"START  ==>  {summary.segments[0]}",
        ]
        tail = list(summary.segments[1:])
        if not tail or not tail[-1].endswith(TRANSITION_MARKER + summary.destination):
            tail.append(summary.destination)
        tail[-1] += "   ==>    END"
        lines.extend(tail)
        lines.append("~~~~~~~~~~~~~")
        return "\n".join(lines)
