"""Top-level package for the Metro Router project.

This package answers point-to-point queries over a small metro
network: cheapest distance, cheapest travel time, and an annotated
route marking where the traveller changes lines.
"""

__version__ = "0.1.0"
