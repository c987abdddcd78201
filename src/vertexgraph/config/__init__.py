"""
Configuration layer for vertexgraph.

Graphs are configured with explicit, immutable strategy objects passed
at construction time. Process-wide defaults (such as the identity
property name) can be overridden through VERTEXGRAPH_* environment
variables.
"""

from vertexgraph.config.settings import GraphConfig, PersistentGraphConfig
from vertexgraph.config.defaults import DEFAULTS, settings

__all__ = [
    "GraphConfig",
    "PersistentGraphConfig",
    "DEFAULTS",
    "settings",
]
