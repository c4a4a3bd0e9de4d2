"""
diffgraph
=========

An in-memory directed graph whose vertex removal reconnects predecessors
to successors, with an optional mode that reports the exact vertices and
edges each mutation created and removed.

Public API:
- DirectedGraph
- ReportingGraph
- GraphBuilder
- ChangeResult
- GraphConfig
"""

from diffgraph.graph.graph_schema import ChangeResult, ChangeSet, Edge, MutationOutcome
from diffgraph.graph.graph_store import DirectedGraph
from diffgraph.graph.graph_reporter import ReportingGraph
from diffgraph.graph.graph_builder import GraphBuilder
from diffgraph.config import GraphConfig, load_graph_config

__all__ = [
    "ChangeResult",
    "ChangeSet",
    "Edge",
    "MutationOutcome",
    "DirectedGraph",
    "ReportingGraph",
    "GraphBuilder",
    "GraphConfig",
    "load_graph_config",
]

__version__ = "0.1.0"
