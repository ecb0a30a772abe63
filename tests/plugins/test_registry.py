from __future__ import annotations

import pytest

from gmlparse.parsers import GmlParser
from gmlparse.plugins import Registry, global_registry


def test_gml_registered_by_default() -> None:
    assert isinstance(global_registry.create(".gml"), GmlParser)
    assert isinstance(global_registry.create("GML"), GmlParser)


def test_unknown_suffix_raises() -> None:
    reg = Registry()
    assert reg.get(".txt") is None
    with pytest.raises(KeyError):
        reg.create(".txt")


def test_register_normalizes_suffix() -> None:
    reg = Registry()
    reg.register("Graph", GmlParser)
    assert reg.suffixes() == [".graph"]
    assert reg.get(".GRAPH") is not None
