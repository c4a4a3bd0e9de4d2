from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple, Union

from diffgraph.graph.graph_schema import ChangeResult, Edge, MutationOutcome, Vertex
from diffgraph.graph.graph_store import DirectedGraph

EdgeLike = Union[Edge, Tuple[Vertex, Vertex]]


class GraphBuilder:
    """
    Populates a DirectedGraph from bulk inputs.

    Returns the accumulated change of every applied step; rejected steps
    are skipped.
    """

    def __init__(self, graph: DirectedGraph) -> None:
        self.graph = graph

    def add_vertices(self, vertices: Iterable[Vertex]) -> Optional[ChangeResult]:
        return self._accumulate(self.graph.add_vertex(v) for v in vertices)

    def add_edges(self, edges: Iterable[EdgeLike]) -> Optional[ChangeResult]:
        def _steps():
            for edge in edges:
                source, target = edge.as_pair() if isinstance(edge, Edge) else edge
                yield self.graph.add_edge(source, target)

        return self._accumulate(_steps())

    @staticmethod
    def _accumulate(outcomes: Iterable[MutationOutcome]) -> Optional[ChangeResult]:
        total: Optional[ChangeResult] = None
        skipped = 0

        for outcome in outcomes:
            if not outcome.is_applied:
                skipped += int(outcome.is_rejected)
                continue
            total = outcome.change if total is None else total.merge(outcome.change)

        if skipped:
            logging.getLogger("diffgraph.builder").info(
                "skipped %d rejected step(s)", skipped
            )
        return total
