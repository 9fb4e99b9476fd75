"""Line-change detection along a reconstructed route.

A station whose line code has exactly two letters may be an
interchange. It is a genuine one only when the stations on either side
of it along the route belong to different lines; the station and the
next stop are then merged into a single ``'A ==> B'`` display entry.
Stations serving three or more lines are passed through unchanged.
"""

from __future__ import annotations

from typing import List, Sequence

from ..domain.models import InterchangeSummary, Station

TRANSITION_MARKER = " ==> "


def annotate_interchanges(route: Sequence[Station]) -> InterchangeSummary:
    """Segment a route for display and count its line changes.

    Args:
        route: Stations in travel order, as parsed at ingestion.

    Returns:
        InterchangeSummary with the display segments (first station,
        then interior stations with transitions merged), the number of
        transitions, and the source/destination names. The destination
        is reported separately and is not repeated in ``segments``
        unless a transition merged it.
    """
    if not route:
        return InterchangeSummary()

    segments: List[str] = [route[0].name]
    transitions = 0
    last = len(route) - 1

    i = 1
    while i < last:
        current = route[i]
        if current.is_interchange_candidate:
            previous_code = route[i - 1].line_code
            following = route[i + 1]
            if previous_code == following.line_code:
                segments.append(current.name)
            else:
                segments.append(f"{current.name}{TRANSITION_MARKER}{following.name}")
                transitions += 1
                i += 1  # next stop consumed by the merged entry
        else:
            segments.append(current.name)
        i += 1

    return InterchangeSummary(
        segments=tuple(segments),
        transitions=transitions,
        source=route[0].name,
        destination=route[-1].name,
    )
