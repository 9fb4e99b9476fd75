"""Per-edge cost functions shared by the routing algorithms."""

from __future__ import annotations

from typing import Callable, Optional

from ..config import RoutingConfig, get_config
from ..domain.models import CostMode

EdgeCost = Callable[[int], int]


def edge_cost_function(
    mode: CostMode, routing: Optional[RoutingConfig] = None
) -> EdgeCost:
    """Return the function turning an edge weight into a cost.

    DISTANCE mode returns the weight unchanged. TIME mode returns
    ``dwell_seconds + seconds_per_unit * weight`` (120 + 40 * weight
    with the default settings).
    """
    if mode is CostMode.DISTANCE:
        return lambda weight: weight

    routing = routing or get_config().routing
    dwell = routing.dwell_seconds
    per_unit = routing.seconds_per_unit
    return lambda weight: dwell + per_unit * weight
