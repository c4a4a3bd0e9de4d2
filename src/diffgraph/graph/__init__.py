"""
Graph subsystem for diffgraph.

Defines the directed graph container and its change records:
- plain mutation with explicit outcomes
- change-reporting mutation
- bulk construction
"""

from diffgraph.graph.graph_schema import (
    ChangeResult,
    ChangeSet,
    Edge,
    MutationOutcome,
    OutcomeStatus,
    RejectionReason,
    Vertex,
)
from diffgraph.graph.graph_store import DirectedGraph
from diffgraph.graph.graph_reporter import ReportingGraph
from diffgraph.graph.graph_builder import GraphBuilder

__all__ = [
    "ChangeResult",
    "ChangeSet",
    "Edge",
    "MutationOutcome",
    "OutcomeStatus",
    "RejectionReason",
    "Vertex",
    "DirectedGraph",
    "ReportingGraph",
    "GraphBuilder",
]
