"""Document parsers producing GMLObject attribute trees."""

from .base import Parser
from .gml import GmlParser, parse

__all__ = ["Parser", "GmlParser", "parse"]
