from __future__ import annotations

import logging
import sys
from typing import Dict, List, Optional, TextIO

import networkx as nx

from diffgraph.config.settings import GraphConfig
from diffgraph.graph.graph_schema import (
    ChangeResult,
    ChangeSet,
    Edge,
    MutationOutcome,
    RejectionReason,
    Vertex,
)


class DirectedGraph:
    """
    In-memory directed graph with reconnecting vertex removal.

    At most one edge exists between any two vertices, in one direction.
    Every mutation returns a MutationOutcome; rejections never raise and
    leave the structure untouched.
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        self._graph = nx.DiGraph()
        self.config = config or GraphConfig()

    def __repr__(self) -> str:
        return f"DirectedGraph(V={self.vertex_count()}, E={self.edge_count()})"

    # -------------------- Queries --------------------

    def vertices(self) -> List[Vertex]:
        return list(self._graph.nodes)

    def edges(self) -> List[Edge]:
        return [Edge(source=u, target=v) for u, v in self._graph.edges]

    def has_vertex(self, vertex: Vertex) -> bool:
        return self._graph.has_node(vertex)

    def has_edge(self, source: Vertex, target: Vertex) -> bool:
        return self._graph.has_edge(source, target)

    def neighbors(self, vertex: Vertex) -> List[Vertex]:
        if vertex not in self._graph:
            return []
        return list(self._graph.successors(vertex))

    def predecessors(self, vertex: Vertex) -> List[Vertex]:
        if vertex not in self._graph:
            return []
        # map order, not edge insertion order
        return [u for u in self._graph.nodes if self._graph.has_edge(u, vertex)]

    def vertex_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def adjacency(self) -> Dict[Vertex, List[Vertex]]:
        return {v: list(self._graph.successors(v)) for v in self._graph.nodes}

    def dump(self, out: TextIO = sys.stdout) -> None:
        """Write a textual listing of every vertex and its out-neighbors."""
        out.write("Graph:\n")
        for vertex, targets in self.adjacency().items():
            out.write(f"{vertex} -> {', '.join(str(t) for t in targets)}\n")

    # -------------------- Vertices --------------------

    def add_vertex(self, vertex: Vertex) -> MutationOutcome:
        if self._graph.has_node(vertex):
            return MutationOutcome.unchanged(f"vertex {vertex!r} already exists")

        self._graph.add_node(vertex)
        return MutationOutcome.applied(
            ChangeResult(created=ChangeSet(vertices=[vertex]))
        )

    def remove_vertex(self, vertex: Vertex) -> MutationOutcome:
        if not self._graph.has_node(vertex):
            return self._reject(
                RejectionReason.UNKNOWN_VERTEX,
                f"cannot remove unknown vertex {vertex!r}",
            )

        incoming = [u for u in self.predecessors(vertex) if u != vertex]
        outgoing = self.neighbors(vertex)

        reconnected: List[Edge] = []
        if self.config.reconnect_on_remove:
            for u in incoming:
                for w in outgoing:
                    outcome = self._connect(u, w)
                    if outcome.is_applied:
                        reconnected.extend(outcome.change.created.edges)
                    else:
                        logging.getLogger("diffgraph.graph").debug(
                            "reconnect %r -> %r skipped: %s", u, w, outcome.detail
                        )

        removed_edges = [Edge(source=vertex, target=w) for w in outgoing]

        # drops the incoming edges too
        self._graph.remove_node(vertex)
        removed_edges.extend(Edge(source=u, target=vertex) for u in incoming)

        return MutationOutcome.applied(
            ChangeResult(
                created=ChangeSet(edges=reconnected),
                removed=ChangeSet(vertices=[vertex], edges=removed_edges),
            )
        )

    # -------------------- Edges --------------------

    def add_edge(self, source: Vertex, target: Vertex) -> MutationOutcome:
        outcome = self._connect(source, target)
        if outcome.is_rejected:
            self._log_rejection(outcome)
        return outcome

    def remove_edge(self, source: Vertex, target: Vertex) -> MutationOutcome:
        rejection = self._check_removable(source, target)
        if rejection is not None:
            self._log_rejection(rejection)
            return rejection

        if self._graph.has_edge(source, target):
            self._graph.remove_edge(source, target)

        return MutationOutcome.applied(
            ChangeResult(removed=ChangeSet(edges=[Edge(source=source, target=target)]))
        )

    def insert_between_vertex(
        self,
        vertex: Vertex,
        source: Vertex,
        target: Vertex,
    ) -> MutationOutcome:
        """
        Splice a new vertex into the edge source -> target.

        All preconditions are checked before anything is mutated.
        """

        if self._graph.has_node(vertex):
            return self._reject(
                RejectionReason.VERTEX_EXISTS,
                f"cannot insert {vertex!r}: vertex already exists",
            )

        rejection = self._check_removable(source, target)
        if rejection is not None:
            self._log_rejection(rejection)
            return rejection

        change = self.remove_edge(source, target).change
        for step in (self.add_edge(source, vertex), self.add_edge(vertex, target)):
            if step.is_applied:
                change = change.merge(step.change)

        return MutationOutcome.applied(change)

    # -------------------- Cloning --------------------

    def clone(self) -> "DirectedGraph":
        g = DirectedGraph(config=self.config)
        g._graph = self._graph.copy()
        return g

    # -------------------- Internals --------------------

    def _connect(self, source: Vertex, target: Vertex) -> MutationOutcome:
        created_vertices: List[Vertex] = []

        for endpoint in (source, target):
            if not self._graph.has_node(endpoint):
                self._graph.add_node(endpoint)
                created_vertices.append(endpoint)

        if self._graph.has_edge(source, target):
            return MutationOutcome.rejected(
                RejectionReason.DUPLICATE_EDGE,
                f"edge {source!r} -> {target!r} already exists",
            )

        if self._graph.has_edge(target, source):
            return MutationOutcome.rejected(
                RejectionReason.REVERSE_EDGE,
                f"edge {source!r} -> {target!r} conflicts with existing "
                f"{target!r} -> {source!r}",
            )

        self._graph.add_edge(source, target)
        return MutationOutcome.applied(
            ChangeResult(
                created=ChangeSet(
                    vertices=created_vertices,
                    edges=[Edge(source=source, target=target)],
                )
            )
        )

    def _check_removable(
        self,
        source: Vertex,
        target: Vertex,
    ) -> Optional[MutationOutcome]:
        for endpoint in (source, target):
            if not self._graph.has_node(endpoint):
                return MutationOutcome.rejected(
                    RejectionReason.UNKNOWN_VERTEX,
                    f"edge {source!r} -> {target!r} has unknown endpoint {endpoint!r}",
                )

        if self.config.strict_edge_removal and not self._graph.has_edge(source, target):
            return MutationOutcome.rejected(
                RejectionReason.MISSING_EDGE,
                f"edge {source!r} -> {target!r} does not exist",
            )

        return None

    def _reject(self, reason: RejectionReason, detail: str) -> MutationOutcome:
        outcome = MutationOutcome.rejected(reason, detail)
        self._log_rejection(outcome)
        return outcome

    def _log_rejection(self, outcome: MutationOutcome) -> None:
        if not self.config.log_rejections:
            return
        logging.getLogger("diffgraph.graph").log(
            self.config.log_level,
            "rejected (%s): %s",
            outcome.reason.value,
            outcome.detail,
        )
