"""Graph models exported for visualization.

Positions are left to the rendering layer; these models carry only the
node/edge structure of a decomposition.
"""

from enum import Enum

from pydantic import BaseModel, Field


class NodeKind(str, Enum):
    WORD_CHUNK = "word_chunk"
    ORIGIN = "origin"
    COMBINED = "combined"


class GraphNode(BaseModel):
    id: str
    kind: NodeKind
    data: dict[str, str] = Field(default_factory=dict)
    layer: int | None = None


class GraphEdge(BaseModel):
    id: str
    source: str
    target: str


class DecompositionGraph(BaseModel):
    nodes: list[GraphNode] = Field(default_factory=list)
    edges: list[GraphEdge] = Field(default_factory=list)

    def node_ids(self) -> list[str]:
        return [node.id for node in self.nodes]
