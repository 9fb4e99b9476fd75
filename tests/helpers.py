"""Station names and builders shared by the tests."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from metro_router.domain.models import Station
from metro_router.graph.store import GraphStore

NOIDA = "Noida Sector 62~B"
BOTANICAL = "Botanical Garden~B"
YAMUNA = "Yamuna Bank~B"
RAJIV = "Rajiv Chowk~BY"
VAISHALI = "Vaishali~B"
MOTI = "Moti Nagar~B"
JANAK = "Janak Puri West~BO"
DWARKA = "Dwarka Sector 21~B"
SAKET = "Saket~Y"
AIIMS = "AIIMS~Y"
VISHWA = "Vishwavidyalaya~Y"
NEW_DELHI = "New Delhi~YO"
SHIVAJI = "Shivaji Stadium~O"
DDS = "DDS Campus~O"
IGI = "IGI Airport~O"
RAJOURI = "Rajouri Garden~BP"
PUNJABI = "Punjabi Bagh West~P"
NETAJI = "Netaji Subhash Place~PR"


def build_store(
    edges: Iterable[Tuple[str, str, int]], vertices: Sequence[str] = ()
) -> GraphStore:
    """Build a store from explicit vertices plus every edge endpoint."""
    edges = list(edges)
    store = GraphStore()
    for name in vertices:
        store.add_vertex(name)
    for u, v, _ in edges:
        store.add_vertex(u)
        store.add_vertex(v)
    for u, v, w in edges:
        store.add_edge(u, v, w)
    return store


class InMemoryRepository:
    """GraphRepositoryPort backed by a ready-made store."""

    def __init__(self, store: GraphStore) -> None:
        self.store = store

    def load(self) -> GraphStore:
        return self.store

    def get_station(self, name: str) -> Optional[Station]:
        return self.store.station(name)

    def list_stations(self) -> List[Station]:
        return self.store.stations()
