"""Lookup and consumption of named attributes in an ordered pair list.

Pair lists keep source order and allow repeated keys, so they cannot be
replaced by a dict. ``take_attribute`` removes a single pair and keeps the
rest in order; ``take_all`` drains every pair with a given key in one pass,
which keeps extracting N repeated entries linear instead of quadratic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gmlparse.ir.values import GMLValue

Pair = tuple[str, "GMLValue"]


def get_attribute(pairs: list[Pair], name: str) -> Pair | None:
    for pair in pairs:
        if pair[0] == name:
            return pair
    return None


def take_attribute(pairs: list[Pair], name: str) -> Pair | None:
    for idx, pair in enumerate(pairs):
        if pair[0] == name:
            return pairs.pop(idx)
    return None


def take_all(pairs: list[Pair], name: str) -> list[Pair]:
    taken: list[Pair] = []
    kept: list[Pair] = []
    for pair in pairs:
        (taken if pair[0] == name else kept).append(pair)
    # Mutate in place so owners holding this list see the removal
    pairs[:] = kept
    return taken


class HasAttributes:
    """Mixin exposing the residual attribute list of an entity."""

    @property
    def attributes(self) -> list[Pair]:
        return self.attrs  # type: ignore[attr-defined]

    def get_attribute(self, name: str) -> Pair | None:
        """Return the first attribute named ``name`` without removing it."""
        return get_attribute(self.attributes, name)

    def take_attribute(self, name: str) -> Pair | None:
        """Remove and return the first attribute named ``name``."""
        return take_attribute(self.attributes, name)

    def get_value(self, name: str, default: Any = None) -> Any:
        pair = self.get_attribute(name)
        return pair[1] if pair is not None else default
