from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from gmlparse.errors import MissingFieldError, MissingGraphError, TypeMismatchError
from gmlparse.ir.attributes import Pair, take_all, take_attribute
from gmlparse.ir.graph import Edge, Graph, Node
from gmlparse.ir.values import GMLInt, GMLObject, GMLString, GMLValue

_KINDS: dict[str, type] = {
    GMLString.kind: GMLString,
    GMLInt.kind: GMLInt,
    GMLObject.kind: GMLObject,
}


def _unwrap(name: str, value: GMLValue, kind: str) -> Any:
    if not isinstance(value, _KINDS[kind]):
        raise TypeMismatchError(name, kind, value)
    if isinstance(value, GMLObject):
        return value
    return value.value


def take_field(
    pairs: list[Pair],
    name: str,
    kind: str,
    *,
    required: bool = False,
    owner: str | None = None,
) -> Any | None:
    """Consume ``name`` from ``pairs`` and unwrap it as ``kind``.

    Returns None when the field is absent and not required. A value of the
    wrong variant raises TypeMismatchError; it is never coerced.
    """
    pair = take_attribute(pairs, name)
    if pair is None:
        if required:
            raise MissingFieldError(name, owner)
        return None
    return _unwrap(name, pair[1], kind)


def _take_objects(pairs: list[Pair], name: str) -> Iterator[GMLObject]:
    for _, value in take_all(pairs, name):
        yield _unwrap(name, value, GMLObject.kind)


def build_node(obj: GMLObject) -> Node:
    pairs = obj.pairs
    node_id = take_field(pairs, "id", GMLInt.kind, required=True, owner="node")
    label = take_field(pairs, "label", GMLString.kind)
    return Node(id=node_id, label=label, attrs=pairs)


def build_edge(obj: GMLObject) -> Edge:
    pairs = obj.pairs
    source = take_field(pairs, "source", GMLInt.kind, required=True, owner="edge")
    target = take_field(pairs, "target", GMLInt.kind, required=True, owner="edge")
    label = take_field(pairs, "label", GMLString.kind)
    return Edge(source=source, target=target, label=label, attrs=pairs)


def _build_graph_body(obj: GMLObject) -> Graph:
    pairs = obj.pairs
    graph_id = take_field(pairs, "id", GMLInt.kind)
    directed = take_field(pairs, "directed", GMLInt.kind)
    label = take_field(pairs, "label", GMLString.kind)

    # Nodes are fully built before any edge is looked at
    nodes = [build_node(n) for n in _take_objects(pairs, "node")]
    edges = [build_edge(e) for e in _take_objects(pairs, "edge")]

    return Graph(
        id=graph_id,
        directed=None if directed is None else directed == 1,
        label=label,
        nodes=nodes,
        edges=edges,
        attrs=pairs,
    )


def build_graph(root: GMLObject) -> Graph:
    """Extract the typed Graph from a parsed document root.

    The root must hold a ``graph`` object. The root and every nested object
    are consumed: recognized fields are removed and the remaining pairs
    become the residual attributes of the Graph, Node or Edge built from them.
    """
    graph = take_field(root.pairs, "graph", GMLObject.kind)
    if graph is None:
        raise MissingGraphError()
    return _build_graph_body(graph)
