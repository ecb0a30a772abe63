"""Read GML documents into an attribute tree and a typed graph model.

    >>> from gmlparse import loads
    >>> g = loads('graph [ id 4 node [ id 0 ] node [ id 1 ] edge [ source 1 target 0 ] ]')
    >>> g.id, len(g.nodes), len(g.edges)
    (4, 2, 1)
"""

from gmlparse.errors import (
    EmptyValueError,
    GMLError,
    GMLSyntaxError,
    MalformedTreeError,
    MissingFieldError,
    MissingGraphError,
    MissingKeyError,
    NumberFormatError,
    TypeMismatchError,
)
from gmlparse.ir import (
    Edge,
    GMLInt,
    GMLObject,
    GMLString,
    GMLValue,
    Graph,
    Node,
    build_graph,
)
from gmlparse.parsers import GmlParser, parse


def loads(text: str) -> Graph:
    """Parse GML text and extract its graph."""
    return build_graph(parse(text))


__all__ = [
    "parse",
    "build_graph",
    "loads",
    "GmlParser",
    "GMLValue",
    "GMLString",
    "GMLInt",
    "GMLObject",
    "Graph",
    "Node",
    "Edge",
    "GMLError",
    "GMLSyntaxError",
    "MalformedTreeError",
    "MissingKeyError",
    "EmptyValueError",
    "NumberFormatError",
    "MissingGraphError",
    "MissingFieldError",
    "TypeMismatchError",
]
