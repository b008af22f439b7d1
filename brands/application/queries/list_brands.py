"""
ListBrandsQuery.

Query to list every brand in the catalog with its product count and logo.
"""

from dataclasses import dataclass


@dataclass
class ListBrandsQuery:
    """Query to list brand summaries."""
