"""Graph-related utilities for representing the metro network.

This subpackage contains the in-memory network store and the routing
algorithms that run on top of it: cheapest cost (Dijkstra), route
reconstruction (stack search) and interchange annotation.
"""

from .codes import station_code, station_codes
from .dijkstra import dijkstra, shortest_cost
from .interchanges import annotate_interchanges
from .path_search import minimum_path
from .store import GraphStore

__all__ = [
    "GraphStore",
    "dijkstra",
    "shortest_cost",
    "minimum_path",
    "annotate_interchanges",
    "station_code",
    "station_codes",
]
