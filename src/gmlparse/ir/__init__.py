"""Attribute tree values and the typed graph model."""

from .attributes import HasAttributes, get_attribute, take_all, take_attribute
from .extract import build_edge, build_graph, build_node, take_field
from .graph import Edge, Graph, Node
from .values import GMLInt, GMLObject, GMLString, GMLValue

__all__ = [
    "GMLValue",
    "GMLString",
    "GMLInt",
    "GMLObject",
    "HasAttributes",
    "get_attribute",
    "take_attribute",
    "take_all",
    "Graph",
    "Node",
    "Edge",
    "take_field",
    "build_node",
    "build_edge",
    "build_graph",
]
