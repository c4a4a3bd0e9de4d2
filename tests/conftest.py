from __future__ import annotations

import pytest

from diffgraph.config.settings import GraphConfig
from diffgraph.graph.graph_reporter import ReportingGraph
from diffgraph.graph.graph_store import DirectedGraph


@pytest.fixture()
def graph() -> DirectedGraph:
    return DirectedGraph()


@pytest.fixture()
def chain() -> DirectedGraph:
    g = DirectedGraph()
    g.add_edge("A", "B")
    g.add_edge("B", "C")
    return g


@pytest.fixture()
def reporting() -> ReportingGraph:
    return ReportingGraph()


@pytest.fixture()
def strict_graph() -> DirectedGraph:
    return DirectedGraph(config=GraphConfig(strict_edge_removal=True))
