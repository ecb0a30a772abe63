from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache

from lark import Lark, Token, Tree
from lark.exceptions import LarkError, UnexpectedInput

from gmlparse.errors import (
    EmptyValueError,
    GMLSyntaxError,
    MalformedTreeError,
    MissingKeyError,
    NumberFormatError,
)
from gmlparse.ir.values import INT64_MAX, INT64_MIN, GMLInt, GMLObject, GMLString
from gmlparse.parsers.base import Parser

GML_GRAMMAR = r"""
text: _entry*
object: "[" _entry* "]"
_entry: identifier value

identifier: IDENTIFIER
value: string | number | object
string: STRING
number: NUMBER

IDENTIFIER: /[A-Za-z_][A-Za-z0-9_]*/
STRING: /"[^"]*"/
NUMBER: /[+-]?[0-9]+/
COMMENT: /#[^\n]*/

%import common.WS
%ignore WS
%ignore COMMENT
"""


@lru_cache(maxsize=1)
def _grammar() -> Lark:
    # Compiled once; Lark instances are read-only after construction
    return Lark(GML_GRAMMAR, start="text", parser="lalr")


def _token_text(node: Tree) -> str:
    if len(node.children) != 1 or not isinstance(node.children[0], Token):
        raise MalformedTreeError(f"Expected a single token in '{node.data}' node")
    return str(node.children[0])


def _parse_int(raw: str) -> int:
    try:
        number = int(raw, 10)
    except ValueError as exc:
        raise NumberFormatError(f"Invalid integer literal {raw!r}") from exc
    if not INT64_MIN <= number <= INT64_MAX:
        raise NumberFormatError(f"Integer literal {raw!r} does not fit in 64 bits")
    return number


def build_object(entries: list[Tree | Token]) -> GMLObject:
    """Turn the entries of one object body into an ordered attribute list.

    Nested objects are walked with an explicit stack of
    (entries, object, pending key) frames, so nesting depth is not bounded
    by the interpreter's recursion limit.
    """
    root = GMLObject()
    stack: list[tuple[Iterator[Tree | Token], GMLObject, str | None]] = [
        (iter(entries), root, None)
    ]
    while stack:
        it, obj, current_key = stack.pop()
        for entry in it:
            if isinstance(entry, Token):
                if entry.type == "$END":
                    continue
                raise MalformedTreeError(f"Unexpected token {entry.type} in object body")
            if entry.data == "identifier":
                current_key = _token_text(entry)
            elif entry.data == "value":
                if not entry.children:
                    raise EmptyValueError("Value node has no inner value")
                inner = entry.children[0]
                if not isinstance(inner, Tree):
                    raise MalformedTreeError(f"Unexpected token {inner.type} inside value")
                if current_key is None:
                    raise MissingKeyError(f"{inner.data.capitalize()} value has no preceding key")
                if inner.data == "string":
                    obj.append(current_key, GMLString(_token_text(inner)[1:-1]))
                elif inner.data == "number":
                    obj.append(current_key, GMLInt(_parse_int(_token_text(inner))))
                elif inner.data == "object":
                    child = GMLObject()
                    obj.append(current_key, child)
                    # Resume this body after the child is filled in
                    stack.append((it, obj, current_key))
                    stack.append((iter(inner.children), child, None))
                    break
                else:
                    raise MalformedTreeError(f"Unexpected rule '{inner.data}' inside value")
            else:
                raise MalformedTreeError(f"Unexpected rule '{entry.data}' in object body")
    return root


class GmlParser(Parser):
    """Parse GML text into a GMLObject attribute tree."""

    def parse(self, text: str) -> GMLObject:
        try:
            tree = _grammar().parse(text)
        except UnexpectedInput as exc:
            raise GMLSyntaxError(
                f"Failed to parse GML (syntactic): {exc}",
                line=getattr(exc, "line", None),
                column=getattr(exc, "column", None),
            ) from exc
        except LarkError as exc:
            raise GMLSyntaxError(f"Failed to parse GML (syntactic): {exc}") from exc
        except RecursionError as exc:
            raise GMLSyntaxError("Failed to parse GML (syntactic): document nested too deeply") from exc
        return build_object(tree.children)


def parse(text: str) -> GMLObject:
    return GmlParser().parse(text)
