from __future__ import annotations

from typing import List, Optional

from diffgraph.config.settings import GraphConfig
from diffgraph.graph.graph_schema import ChangeResult, Edge, MutationOutcome, Vertex
from diffgraph.graph.graph_store import DirectedGraph


def _change_of(outcome: MutationOutcome) -> Optional[ChangeResult]:
    return outcome.change if outcome.is_applied else None


class ReportingGraph:
    """
    Change-reporting view over a DirectedGraph.

    Each mutation returns the ChangeResult it produced, or ``None`` when
    the call was rejected or changed nothing.
    """

    def __init__(
        self,
        graph: Optional[DirectedGraph] = None,
        *,
        config: Optional[GraphConfig] = None,
    ) -> None:
        self.graph = graph if graph is not None else DirectedGraph(config=config)

    def __repr__(self) -> str:
        return f"ReportingGraph({self.graph!r})"

    def vertices(self) -> List[Vertex]:
        return self.graph.vertices()

    def edges(self) -> List[Edge]:
        return self.graph.edges()

    def add_vertex(self, vertex: Vertex) -> Optional[ChangeResult]:
        return _change_of(self.graph.add_vertex(vertex))

    def add_edge(self, source: Vertex, target: Vertex) -> Optional[ChangeResult]:
        return _change_of(self.graph.add_edge(source, target))

    def remove_edge(self, source: Vertex, target: Vertex) -> Optional[ChangeResult]:
        return _change_of(self.graph.remove_edge(source, target))

    def remove_vertex(self, vertex: Vertex) -> Optional[ChangeResult]:
        return _change_of(self.graph.remove_vertex(vertex))

    def insert_between_vertex(
        self,
        vertex: Vertex,
        source: Vertex,
        target: Vertex,
    ) -> Optional[ChangeResult]:
        return _change_of(self.graph.insert_between_vertex(vertex, source, target))
