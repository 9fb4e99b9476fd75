"""Graph ports - Abstractions for network loading.

These protocols define the contracts for obtaining the metro network
that the routing algorithms run on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Station
    from ..graph.store import GraphStore


class GraphRepositoryPort(Protocol):
    """Port for loading network data.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for building and caching the metro
    network from persistent storage.
    """

    def load(self) -> GraphStore:
        """Load the metro network.

        Returns:
            A populated GraphStore.
        """
        ...

    def get_station(self, name: str) -> Optional[Station]:
        """Get station details by name.

        Args:
            name: The exact stored station name (e.g. 'Saket~Y').

        Returns:
            Station with parsed details, or None if not found.
        """
        ...

    def list_stations(self) -> Sequence[Station]:
        """List all stations in the network.

        Returns:
            Sequence of all stations in insertion order.
        """
        ...
