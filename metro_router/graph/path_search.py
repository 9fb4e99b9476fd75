"""Route reconstruction by stack-driven exploration.

The search pushes a frame per station carrying the path walked so far
and two running totals (distance and time). A station is finalized the
first time one of its frames is popped; later frames for the same
station are discarded. The destination's cheapest *visited* frame wins.

Because finalization happens on pop and finalized stations are never
re-expanded, the search only completes one route through each station.
On trees, and on networks whose cycles do not separate source from
destination, this is the optimal route; on general cyclic networks the
result depends on neighbour insertion order and may not be the global
optimum. Callers rely on this exact output, so the traversal order
must not change. Adding edges that close new cycles changes results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Set

from ..config import RoutingConfig
from ..domain.models import UNREACHABLE, CostMode, RouteResult
from .costs import edge_cost_function
from .store import GraphStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Frame:
    station: str
    path: tuple[str, ...]
    distance: int
    time: int


def minimum_path(
    graph: GraphStore,
    source: str,
    destination: str,
    mode: CostMode = CostMode.DISTANCE,
    routing: Optional[RoutingConfig] = None,
) -> RouteResult:
    """Find the cheapest route among those the stack search visits.

    Args:
        graph: Metro network.
        source: Departure station name.
        destination: Arrival station name.
        mode: Which running total decides the best route.
        routing: Cost constants for the time total.

    Returns:
        RouteResult whose ``total_cost`` is in distance units or seconds
        (``RouteResult.total`` gives minutes for TIME). An empty result
        with ``UNREACHABLE`` cost is returned for unknown or
        disconnected stations.
    """
    if not graph.contains_vertex(source) or not graph.contains_vertex(destination):
        return RouteResult.unreachable(mode)

    distance_of = edge_cost_function(CostMode.DISTANCE, routing)
    time_of = edge_cost_function(CostMode.TIME, routing)

    best_path: tuple[str, ...] = ()
    best_cost = UNREACHABLE
    finalized: Set[str] = set()
    stack: List[_Frame] = [_Frame(source, (source,), 0, 0)]

    while stack:
        frame = stack.pop()
        if frame.station in finalized:
            continue
        finalized.add(frame.station)

        if frame.station == destination:
            cost = frame.time if mode is CostMode.TIME else frame.distance
            if cost < best_cost:
                best_path = frame.path
                best_cost = cost
            # The destination is never expanded.
            continue

        for neighbour, weight in graph.neighbors(frame.station):
            if neighbour in finalized:
                continue
            stack.append(
                _Frame(
                    station=neighbour,
                    path=frame.path + (neighbour,),
                    distance=frame.distance + distance_of(weight),
                    time=frame.time + time_of(weight),
                )
            )

    if not best_path:
        return RouteResult.unreachable(mode)

    logger.debug(
        "Route reconstructed",
        extra={
            "source": source,
            "destination": destination,
            "mode": mode.name,
            "stops": len(best_path),
            "cost": best_cost,
        },
    )
    return RouteResult(path=best_path, total_cost=best_cost, mode=mode)
