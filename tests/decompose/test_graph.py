"""Tests for graph export."""

from deconstructor.core.models import DecompositionRecord, NodeKind
from deconstructor.decompose import build_graph

from ..conftest import make_combo, make_part


class TestBuildGraph:
    """Tests for node and edge construction."""

    def test_nodes(self, valid_record):
        graph = build_graph(valid_record)

        kinds = {node.id: node.kind for node in graph.nodes}
        assert kinds["de"] == NodeKind.WORD_CHUNK
        assert kinds["origin-de"] == NodeKind.ORIGIN
        assert kinds["deconstructor"] == NodeKind.COMBINED
        assert len(graph.nodes) == 8

    def test_layers(self, valid_record):
        graph = build_graph(valid_record)
        layers = {node.id: node.layer for node in graph.nodes if node.kind == NodeKind.COMBINED}
        assert layers == {"constructor": 0, "deconstructor": 1}

    def test_part_sources_connect_from_origin(self, valid_record):
        graph = build_graph(valid_record)
        edges = {(edge.source, edge.target) for edge in graph.edges}

        assert ("de", "origin-de") in edges
        assert ("origin-construc", "constructor") in edges
        assert ("origin-de", "deconstructor") in edges
        assert ("constructor", "deconstructor") in edges
        assert len(graph.edges) == 7

    def test_edge_ids(self, valid_record):
        graph = build_graph(valid_record)
        assert "edge-constructor-deconstructor" in [edge.id for edge in graph.edges]

    def test_unknown_sources_skipped(self):
        record = DecompositionRecord(
            parts=[make_part("a")],
            combinations=[[make_combo("ab", ["a", "ghost", ""])]],
        )

        graph = build_graph(record)

        assert [(e.source, e.target) for e in graph.edges] == [("a", "origin-a"), ("origin-a", "ab")]

    def test_no_parts(self):
        graph = build_graph(DecompositionRecord())

        assert [node.id for node in graph.nodes] == ["no-data"]
        assert graph.nodes[0].data["text"] == "No etymological data available"
        assert graph.edges == []
