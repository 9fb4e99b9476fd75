"""CSV Graph Repository adapter.

This adapter builds the metro network from two CSV files:
- stations.csv with a ``station_name`` column
- edges.csv with ``from_station``, ``to_station`` and ``distance``

Every row goes through GraphStore.add_vertex / add_edge, so duplicate
stations or edges and edges naming unknown stations are ignored the
same way they are for any other caller.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...domain.models import Station
from ...graph.store import GraphStore


@dataclass
class CSVGraphRepository:
    """Network repository that loads from CSV files.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names, separator)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[GraphStore] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> GraphStore:
        """Load the metro network from CSV files.

        Returns:
            The populated network store (cached after the first call).

        Raises:
            GraphError: If the network cannot be loaded.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading network",
            extra={
                "stations_path": str(self.config.stations_path),
                "edges_path": str(self.config.edges_path),
            },
        )

        try:
            graph = self._load_graph_from_csv()
        except (OSError, KeyError, ValueError) as e:
            raise GraphError(
                f"Failed to load network: {e}",
                file_path=str(self.config.data_dir),
                cause=e,
            ) from e

        self._graph = graph
        self._logger.info(
            "Network loaded",
            extra={"stations": graph.num_vertex(), "edges": graph.num_edges()},
        )
        return graph

    def _load_graph_from_csv(self) -> GraphStore:
        """Internal method to build the store from CSV files."""
        graph = GraphStore(separator=self.config.separator)

        with self.config.stations_path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                name = (row["station_name"] or "").strip()
                if name:
                    graph.add_vertex(name)

        with self.config.edges_path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                from_name = (row["from_station"] or "").strip()
                to_name = (row["to_station"] or "").strip()
                distance_str = (row["distance"] or "").strip()

                if not from_name or not to_name or not distance_str:
                    continue

                distance = int(distance_str)
                if distance < 0:
                    raise ValueError(
                        f"negative distance between {from_name} and {to_name}"
                    )
                if not graph.contains_vertex(from_name) or not graph.contains_vertex(
                    to_name
                ):
                    self._logger.warning(
                        "Edge references unknown station",
                        extra={"from_station": from_name, "to_station": to_name},
                    )
                graph.add_edge(from_name, to_name, distance)

        return graph

    def get_station(self, name: str) -> Optional[Station]:
        """Get station details by name.

        Args:
            name: The exact stored station name.

        Returns:
            Station with parsed details, or None if not found.
        """
        return self.load().station(name)

    def list_stations(self) -> Sequence[Station]:
        """List all stations in insertion order."""
        return self.load().stations()

