from __future__ import annotations

import pytest

from gmlparse import loads
from gmlparse.flows.pipeline import _split_s3_uri, summarize


def test_summarize_reports_counts_and_residuals() -> None:
    g = loads('graph [ id 3 directed 1 creator "me" node [ id 0 ] ]')
    assert summarize(g) == {
        "id": 3,
        "directed": True,
        "label": None,
        "nodes": 1,
        "edges": 0,
        "residual_keys": ["creator"],
    }


def test_split_s3_uri() -> None:
    assert _split_s3_uri("s3://bucket/dir/graph.gml") == ("bucket", "dir/graph.gml")
    with pytest.raises(ValueError):
        _split_s3_uri("/local/graph.gml")
