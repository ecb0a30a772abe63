from __future__ import annotations

from dataclasses import dataclass, field

from gmlparse.ir.attributes import HasAttributes, Pair
from gmlparse.ir.values import GMLObject


@dataclass
class Node(HasAttributes):
    id: int
    label: str | None = None
    attrs: list[Pair] = field(default_factory=list)


@dataclass
class Edge(HasAttributes):
    source: int
    target: int
    label: str | None = None
    attrs: list[Pair] = field(default_factory=list)


@dataclass
class Graph(HasAttributes):
    id: int | None = None
    directed: bool | None = None
    label: str | None = None
    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    attrs: list[Pair] = field(default_factory=list)

    @classmethod
    def from_gml(cls, root: GMLObject) -> Graph:
        """Build a graph from a document root holding a ``graph [...]`` block.

        Only a single top-level graph is read; the root is consumed.
        """
        from gmlparse.ir.extract import build_graph

        return build_graph(root)

    def node_ids(self) -> list[int]:
        return [n.id for n in self.nodes]

    def get_node(self, node_id: int) -> Node | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None
