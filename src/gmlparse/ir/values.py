from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from gmlparse.ir.attributes import HasAttributes, Pair

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass
class GMLString:
    value: str
    kind: ClassVar[str] = "str"


@dataclass
class GMLInt:
    value: int
    kind: ClassVar[str] = "int"


@dataclass
class GMLObject(HasAttributes):
    """An ordered list of (key, value) pairs. Keys may repeat."""

    pairs: list[Pair] = field(default_factory=list)
    kind: ClassVar[str] = "object"

    @property
    def attributes(self) -> list[Pair]:
        return self.pairs

    def append(self, key: str, value: GMLValue) -> None:
        self.pairs.append((key, value))

    def keys(self) -> list[str]:
        return [k for k, _ in self.pairs]

    def __len__(self) -> int:
        return len(self.pairs)

    @classmethod
    def from_str(cls, text: str) -> GMLObject:
        from gmlparse.parsers.gml import parse

        return parse(text)


GMLValue = Union[GMLString, GMLInt, GMLObject]
