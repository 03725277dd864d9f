"""Graph export for the rendering layer.

Each part contributes a word chunk and an origin node; each combination a
combined node tagged with its layer. Edges from a part start at its origin
node, so the drawn graph reads chunk -> origin -> combinations.
"""

from ..core.models import (
    DecompositionGraph,
    DecompositionRecord,
    GraphEdge,
    GraphNode,
    NodeKind,
)


def _origin_id(part_id: str) -> str:
    return f"origin-{part_id}"


def _edge(source: str, target: str) -> GraphEdge:
    return GraphEdge(id=f"edge-{source}-{target}", source=source, target=target)


def build_graph(record: DecompositionRecord) -> DecompositionGraph:
    """Build nodes and edges for a decomposition. Positions are not computed."""
    graph = DecompositionGraph()

    if not record.parts:
        graph.nodes.append(
            GraphNode(
                id="no-data",
                kind=NodeKind.WORD_CHUNK,
                data={"text": "No etymological data available"},
            )
        )
        return graph

    part_ids = set()
    for part in record.parts:
        part_ids.add(part.id)
        graph.nodes.append(
            GraphNode(id=part.id, kind=NodeKind.WORD_CHUNK, data={"text": part.text})
        )
        graph.nodes.append(
            GraphNode(
                id=_origin_id(part.id),
                kind=NodeKind.ORIGIN,
                data={
                    "originalWord": part.original_word,
                    "origin": part.origin,
                    "meaning": part.meaning,
                },
            )
        )
        graph.edges.append(_edge(part.id, _origin_id(part.id)))

    known = set(graph.node_ids())
    for layer_index, layer in enumerate(record.combinations):
        for combo in layer:
            graph.nodes.append(
                GraphNode(
                    id=combo.id,
                    kind=NodeKind.COMBINED,
                    data={"text": combo.text, "definition": combo.definition},
                    layer=layer_index,
                )
            )
            known.add(combo.id)

            for source_id in combo.source_ids:
                if not source_id:
                    continue
                actual = _origin_id(source_id) if source_id in part_ids else source_id
                # Skip edges whose source has not been drawn yet
                if actual not in known:
                    continue
                graph.edges.append(_edge(actual, combo.id))

    return graph
