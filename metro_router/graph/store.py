"""In-memory storage of the metro network.

The network is an adjacency map from station name to a mapping of
neighbour name -> edge weight. Every undirected edge is stored twice
(A -> B and B -> A with the same weight), so adjacency is symmetric at
all times.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional, Set, Tuple

from ..domain.models import DEFAULT_SEPARATOR, Station

logger = logging.getLogger(__name__)


class GraphStore:
    """Undirected weighted graph of named stations.

    Structural operations given invalid input (unknown endpoint,
    duplicate edge, duplicate vertex) are silent no-ops. Every public
    method holds a re-entrant lock, so a single call never sees a
    half-applied mutation. Queries built from several calls, such as
    ``dijkstra`` and ``minimum_path``, are not atomic against concurrent
    mutation; callers that mutate a shared store while routing must
    serialize those calls themselves.
    """

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        self.separator = separator
        self._adjacency: Dict[str, Dict[str, int]] = {}
        self._stations: Dict[str, Station] = {}
        self._lock = threading.RLock()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains_vertex(name)

    def __len__(self) -> int:
        return self.num_vertex()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, name: str) -> None:
        """Insert an isolated station; no-op if it already exists."""
        with self._lock:
            if name in self._adjacency:
                return
            self._adjacency[name] = {}
            self._stations[name] = Station.parse(name, self.separator)

    def remove_vertex(self, name: str) -> None:
        """Remove a station and every edge that references it."""
        with self._lock:
            neighbours = self._adjacency.pop(name, None)
            if neighbours is None:
                return
            for other in neighbours:
                self._adjacency[other].pop(name, None)
            del self._stations[name]
        logger.debug(
            "Station removed",
            extra={"station": name, "edges_removed": len(neighbours)},
        )

    def add_edge(self, u: str, v: str, weight: int) -> None:
        """Connect two existing stations with a symmetric weighted edge.

        No-op if either endpoint is missing, the edge already exists, or
        both endpoints are the same station (self-loops would break the
        two-entries-per-edge count).
        """
        with self._lock:
            if u == v:
                return
            if u not in self._adjacency or v not in self._adjacency:
                return
            if v in self._adjacency[u]:
                return
            self._adjacency[u][v] = weight
            self._adjacency[v][u] = weight

    def remove_edge(self, u: str, v: str) -> None:
        """Delete both directions of an edge; no-op if it is missing."""
        with self._lock:
            if u not in self._adjacency or v not in self._adjacency:
                return
            if v not in self._adjacency[u]:
                return
            del self._adjacency[u][v]
            del self._adjacency[v][u]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains_vertex(self, name: str) -> bool:
        with self._lock:
            return name in self._adjacency

    def contains_edge(self, u: str, v: str) -> bool:
        with self._lock:
            if u not in self._adjacency or v not in self._adjacency:
                return False
            return v in self._adjacency[u]

    def num_vertex(self) -> int:
        with self._lock:
            return len(self._adjacency)

    def num_edges(self) -> int:
        with self._lock:
            return sum(len(nbrs) for nbrs in self._adjacency.values()) // 2

    def weight(self, u: str, v: str) -> Optional[int]:
        """Return the weight of edge (u, v), or None if absent."""
        with self._lock:
            return self._adjacency.get(u, {}).get(v)

    def neighbors(self, name: str) -> List[Tuple[str, int]]:
        """Return (neighbour, weight) pairs in insertion order.

        Unknown stations have no neighbours. The list is a snapshot, so
        callers may mutate the store while iterating it.
        """
        with self._lock:
            return list(self._adjacency.get(name, {}).items())

    def vertices(self) -> List[str]:
        """Return station names in insertion order."""
        with self._lock:
            return list(self._adjacency)

    def station(self, name: str) -> Optional[Station]:
        """Return the parsed record for a station, or None."""
        with self._lock:
            return self._stations.get(name)

    def stations(self) -> List[Station]:
        with self._lock:
            return list(self._stations.values())

    def has_path(
        self, u: str, v: str, visited: Optional[Set[str]] = None
    ) -> bool:
        """Check whether v is reachable from u.

        Returns True as soon as u is directly adjacent to v; otherwise
        marks u visited and probes each unvisited neighbour. ``visited``
        accumulates across the whole probe so no station is explored
        twice; a fresh set is allocated when the caller passes none. A
        known station always reaches itself.

        The probe is iterative, so deep networks cannot exhaust the
        interpreter's recursion limit.
        """
        with self._lock:
            if u not in self._adjacency or v not in self._adjacency:
                return False
            if u == v:
                return True
            if visited is None:
                visited = set()

            if v in self._adjacency[u]:
                return True
            # The start is always expanded, even if the caller already
            # marked it visited.
            visited.add(u)
            stack = [
                n for n in reversed(list(self._adjacency[u])) if n not in visited
            ]
            while stack:
                current = stack.pop()
                if current in visited:
                    continue
                if v in self._adjacency[current]:
                    return True
                visited.add(current)
                for neighbour in reversed(list(self._adjacency[current])):
                    if neighbour not in visited:
                        stack.append(neighbour)
            return False

    def describe(self) -> str:
        """Render the adjacency as a human-readable map listing."""
        lines: List[str] = []
        with self._lock:
            for name, nbrs in self._adjacency.items():
                lines.append(f"{name} =>")
                for other, weight in nbrs.items():
                    lines.append(f"\t{other:<24}\t{weight}")
        return "\n".join(lines)
