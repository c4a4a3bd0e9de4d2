from __future__ import annotations

import io
import logging

from diffgraph.config.settings import GraphConfig
from diffgraph.graph.graph_schema import Edge, OutcomeStatus, RejectionReason
from diffgraph.graph.graph_store import DirectedGraph


def test_add_vertex_is_idempotent(graph):
    first = graph.add_vertex("A")
    snapshot = graph.adjacency()

    second = graph.add_vertex("A")

    assert first.is_applied
    assert second.status is OutcomeStatus.UNCHANGED
    assert graph.adjacency() == snapshot == {"A": []}


def test_add_edge_creates_missing_endpoints(graph):
    outcome = graph.add_edge("A", "B")

    assert outcome.is_applied
    assert graph.vertices() == ["A", "B"]
    assert graph.edges() == [Edge("A", "B")]
    assert outcome.change.created.vertices == ["A", "B"]


def test_reverse_edge_is_vetoed_both_ways():
    forward = DirectedGraph()
    forward.add_edge("A", "B")
    outcome = forward.add_edge("B", "A")
    assert outcome.reason is RejectionReason.REVERSE_EDGE
    assert forward.edges() == [Edge("A", "B")]

    backward = DirectedGraph()
    backward.add_edge("B", "A")
    outcome = backward.add_edge("A", "B")
    assert outcome.reason is RejectionReason.REVERSE_EDGE
    assert backward.edges() == [Edge("B", "A")]


def test_duplicate_edge_keeps_neighbor_list(graph):
    graph.add_edge("A", "B")
    outcome = graph.add_edge("A", "B")

    assert outcome.is_rejected
    assert outcome.reason is RejectionReason.DUPLICATE_EDGE
    assert graph.neighbors("A") == ["B"]


def test_self_loop_is_allowed_once(graph):
    assert graph.add_edge("A", "A").is_applied
    assert graph.add_edge("A", "A").reason is RejectionReason.DUPLICATE_EDGE
    assert graph.neighbors("A") == ["A"]


def test_neighbors_keep_insertion_order(graph):
    for target in ("D", "B", "C"):
        graph.add_edge("A", target)

    graph.remove_edge("A", "B")

    assert graph.neighbors("A") == ["D", "C"]
    assert graph.neighbors("missing") == []


def test_remove_vertex_reconnects_chain(chain):
    outcome = chain.remove_vertex("B")

    assert outcome.is_applied
    assert chain.vertices() == ["A", "C"]
    assert chain.edges() == [Edge("A", "C")]
    assert not chain.has_edge("A", "B")
    assert not chain.has_edge("B", "C")


def test_remove_vertex_bridges_every_predecessor_to_every_successor(graph):
    graph.add_edge("P1", "X")
    graph.add_edge("P2", "X")
    graph.add_edge("X", "S1")
    graph.add_edge("X", "S2")

    graph.remove_vertex("X")

    assert set(graph.edges()) == {
        Edge("P1", "S1"),
        Edge("P1", "S2"),
        Edge("P2", "S1"),
        Edge("P2", "S2"),
    }


def test_reconnection_respects_reverse_edge_veto(graph):
    graph.add_edge("A", "B")
    graph.add_edge("B", "C")
    graph.add_edge("C", "A")

    outcome = graph.remove_vertex("B")

    assert graph.edges() == [Edge("C", "A")]
    assert outcome.change.created.edges == []


def test_remove_vertex_without_reconnection():
    g = DirectedGraph(config=GraphConfig(reconnect_on_remove=False))
    g.add_edge("A", "B")
    g.add_edge("B", "C")

    g.remove_vertex("B")

    assert g.vertices() == ["A", "C"]
    assert g.edges() == []


def test_remove_vertex_with_self_loop(graph):
    graph.add_edge("A", "B")
    graph.add_edge("B", "B")

    outcome = graph.remove_vertex("B")

    assert graph.adjacency() == {"A": []}
    assert outcome.change.removed.edges == [Edge("B", "B"), Edge("A", "B")]


def test_failed_removals_leave_graph_unchanged(chain):
    before = chain.adjacency()

    assert chain.remove_vertex("Z").reason is RejectionReason.UNKNOWN_VERTEX
    assert chain.remove_edge("A", "Z").reason is RejectionReason.UNKNOWN_VERTEX
    assert chain.remove_edge("Z", "A").reason is RejectionReason.UNKNOWN_VERTEX

    assert chain.adjacency() == before


def test_remove_absent_edge_between_known_vertices_is_applied(chain):
    outcome = chain.remove_edge("A", "C")

    assert outcome.is_applied
    assert outcome.change.removed.edges == [Edge("A", "C")]
    assert chain.edges() == [Edge("A", "B"), Edge("B", "C")]


def test_strict_removal_rejects_absent_edge(strict_graph):
    strict_graph.add_edge("A", "B")
    strict_graph.add_vertex("C")

    outcome = strict_graph.remove_edge("A", "C")

    assert outcome.reason is RejectionReason.MISSING_EDGE
    assert strict_graph.remove_edge("A", "B").is_applied


def test_insert_between_vertex_splices_edge(graph):
    graph.add_edge("A", "B")

    outcome = graph.insert_between_vertex("Z", "A", "B")

    assert outcome.is_applied
    assert graph.has_vertex("Z")
    assert graph.has_edge("A", "Z")
    assert graph.has_edge("Z", "B")
    assert not graph.has_edge("A", "B")


def test_insert_between_vertex_preconditions(chain):
    before = chain.adjacency()

    assert chain.insert_between_vertex("B", "A", "C").reason is RejectionReason.VERTEX_EXISTS
    assert chain.insert_between_vertex("Z", "A", "Q").reason is RejectionReason.UNKNOWN_VERTEX
    assert chain.insert_between_vertex("Z", "Q", "A").reason is RejectionReason.UNKNOWN_VERTEX

    assert chain.adjacency() == before


def test_strict_insert_between_requires_edge(strict_graph):
    strict_graph.add_vertex("A")
    strict_graph.add_vertex("B")

    outcome = strict_graph.insert_between_vertex("Z", "A", "B")

    assert outcome.reason is RejectionReason.MISSING_EDGE
    assert not strict_graph.has_vertex("Z")


def test_predecessors_follow_vertex_order(graph):
    graph.add_vertex("C")
    graph.add_edge("A", "X")
    graph.add_edge("C", "X")

    assert graph.predecessors("X") == ["C", "A"]
    assert graph.predecessors("missing") == []


def test_clone_is_independent(chain):
    copy = chain.clone()
    copy.remove_vertex("B")

    assert chain.edges() == [Edge("A", "B"), Edge("B", "C")]
    assert copy.edges() == [Edge("A", "C")]


def test_instances_do_not_share_state():
    first = DirectedGraph()
    second = DirectedGraph()
    first.add_edge("A", "B")

    assert second.vertices() == []


def test_rejection_is_logged(graph, caplog):
    graph.add_edge("A", "B")

    with caplog.at_level(logging.WARNING, logger="diffgraph.graph"):
        graph.add_edge("B", "A")

    assert any("reverse_edge" in r.getMessage() for r in caplog.records)


def test_rejection_logging_can_be_disabled(caplog):
    g = DirectedGraph(config=GraphConfig(log_rejections=False))

    with caplog.at_level(logging.DEBUG, logger="diffgraph.graph"):
        g.remove_vertex("missing")

    assert caplog.records == []


def test_duplicate_vertex_is_not_logged(graph, caplog):
    graph.add_vertex("A")

    with caplog.at_level(logging.DEBUG, logger="diffgraph.graph"):
        graph.add_vertex("A")

    assert caplog.records == []


def test_dump_lists_vertices_with_neighbors(chain):
    out = io.StringIO()
    chain.dump(out)

    lines = out.getvalue().splitlines()
    assert "A -> B" in lines
    assert "B -> C" in lines
    assert "C -> " in lines


def test_scenario_chain_removal(graph):
    graph.add_edge("A", "B")
    graph.add_edge("B", "C")
    graph.remove_vertex("B")

    assert set(graph.edges()) == {Edge("A", "C")}
    assert set(graph.vertices()) == {"A", "C"}
    assert repr(graph) == "DirectedGraph(V=2, E=1)"
