from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from gmlparse.parsers.base import Parser
from gmlparse.parsers.gml import GmlParser


@dataclass
class RegisteredParser:
    suffix: str
    factory: Callable[[], Parser]


class Registry:
    """Maps document file suffixes to parser factories."""

    def __init__(self) -> None:
        self._items: dict[str, RegisteredParser] = {}

    @staticmethod
    def _key(suffix: str) -> str:
        suffix = suffix.lower()
        return suffix if suffix.startswith(".") else f".{suffix}"

    def register(self, suffix: str, factory: Callable[[], Parser]) -> None:
        key = self._key(suffix)
        self._items[key] = RegisteredParser(suffix=key, factory=factory)

    def get(self, suffix: str) -> RegisteredParser | None:
        return self._items.get(self._key(suffix))

    def create(self, suffix: str) -> Parser:
        item = self.get(suffix)
        if not item:
            raise KeyError(f"No parser registered for suffix: {suffix}")
        return item.factory()

    def suffixes(self) -> list[str]:
        return sorted(self._items)


global_registry = Registry()
global_registry.register(".gml", GmlParser)
