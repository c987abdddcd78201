"""
Utility functions for vertexgraph.

This module contains low-level helpers used across the system.
No domain logic should live here.
"""

from vertexgraph.utils.records import read_property, read_id

__all__ = [
    "read_property",
    "read_id",
]
