"""Shortest-cost computation using Dijkstra's algorithm.

Every station starts in the frontier with an "unreachable" cost except
the source (cost 0). The cheapest frontier entry is extracted and its
unfinalized neighbours are relaxed until the destination is extracted.

Decrease-key is done by updating the neighbour's heap entry in place
and re-establishing heap order with ``heapq.heapify``. Networks are
small, so the linear re-heapify is an accepted simplification; the
result is the same as with an indexed priority queue.
"""

from __future__ import annotations

import heapq
import logging
from typing import Any, Dict, List, Optional, Tuple

from ..config import RoutingConfig
from ..domain.models import UNREACHABLE, CostMode
from .costs import edge_cost_function
from .store import GraphStore

logger = logging.getLogger(__name__)


def dijkstra(
    graph: GraphStore,
    start: str,
    end: str,
    mode: CostMode = CostMode.DISTANCE,
    routing: Optional[RoutingConfig] = None,
) -> Tuple[List[str], int]:
    """Compute the cheapest route between two stations.

    Parameters
    ----------
    graph:
        Metro network.
    start:
        Name of the departure station.
    end:
        Name of the arrival station.
    mode:
        DISTANCE sums raw edge weights; TIME sums the time cost of
        each edge in seconds.
    routing:
        Cost constants for TIME mode; defaults to the app config.

    Returns
    -------
    list[str], int
        The station names from ``start`` to ``end`` (inclusive) and the
        cumulative cost. If either station is unknown or no path
        exists, returns ``([], UNREACHABLE)``.
    """
    if not graph.contains_vertex(start) or not graph.contains_vertex(end):
        return [], UNREACHABLE

    cost_of = edge_cost_function(mode, routing)

    # Working record per unfinalized station: [best cost, name, path so far].
    # The same list object sits in both the index and the heap.
    frontier: Dict[str, List[Any]] = {}
    heap: List[List[Any]] = []
    for station in graph.vertices():
        entry: List[Any] = [UNREACHABLE, station, ()]
        if station == start:
            entry[0] = 0
            entry[2] = (start,)
        frontier[station] = entry
        heap.append(entry)
    heapq.heapify(heap)

    while heap:
        cost, station, path = heapq.heappop(heap)
        del frontier[station]

        if station == end:
            if cost == UNREACHABLE:
                break
            logger.debug(
                "Cheapest cost found",
                extra={"start": start, "end": end, "mode": mode.name, "cost": cost},
            )
            return list(path), cost

        if cost == UNREACHABLE:
            # Everything left in the frontier is disconnected from start.
            break

        for neighbour, weight in graph.neighbors(station):
            entry = frontier.get(neighbour)
            if entry is None:
                continue
            candidate = cost + cost_of(weight)
            if candidate < entry[0]:
                entry[0] = candidate
                entry[2] = path + (neighbour,)
                heapq.heapify(heap)

    return [], UNREACHABLE


def shortest_cost(
    graph: GraphStore,
    source: str,
    destination: str,
    mode: CostMode = CostMode.DISTANCE,
    routing: Optional[RoutingConfig] = None,
) -> int:
    """Return the minimal cumulative cost between two stations.

    The value is in distance units for DISTANCE mode and in seconds for
    TIME mode. ``UNREACHABLE`` is returned for unknown stations and
    disconnected pairs.
    """
    _, cost = dijkstra(graph, source, destination, mode, routing)
    return cost
