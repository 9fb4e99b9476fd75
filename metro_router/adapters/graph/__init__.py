"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Loads the metro network from CSV files
"""

from .csv_repository import CSVGraphRepository

__all__ = ["CSVGraphRepository"]
