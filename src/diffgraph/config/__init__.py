"""
Configuration layer for diffgraph.

Configuration is explicit (passed to each graph, never global) and
typed (validated when the GraphConfig is constructed).
"""

from diffgraph.config.settings import GraphConfig
from diffgraph.config.loader import load_graph_config

__all__ = [
    "GraphConfig",
    "load_graph_config",
]
