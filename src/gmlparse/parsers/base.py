from __future__ import annotations

from abc import ABC, abstractmethod

from gmlparse.ir.values import GMLObject


class Parser(ABC):
    """Parser interface for turning document text into an attribute tree."""

    @abstractmethod
    def parse(self, text: str) -> GMLObject:
        """Convert the given text into a GMLObject."""
        raise NotImplementedError
