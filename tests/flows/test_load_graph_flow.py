from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from gmlparse import MissingFieldError
from gmlparse.flows import pipeline
from gmlparse.flows.pipeline import load_graph_flow

DATA = Path(__file__).resolve().parents[1] / "data"


class FakeS3:
    def __init__(self, source: Path) -> None:
        self.source = source
        self.downloaded: list[Path] = []

    def download_file(self, bucket: str, key: str, filename: str) -> None:
        shutil.copyfile(self.source, filename)
        self.downloaded.append(Path(filename))


def test_flow_loads_local_file() -> None:
    summary = load_graph_flow(source=str(DATA / "simple.gml"))
    assert summary == {
        "id": 4,
        "directed": None,
        "label": None,
        "nodes": 2,
        "edges": 1,
        "residual_keys": [],
    }


def test_flow_falls_back_to_gml_for_unknown_suffix(tmp_path: Path) -> None:
    copy = tmp_path / "wikipedia.txt"
    shutil.copyfile(DATA / "wikipedia.gml", copy)
    summary = load_graph_flow(source=str(copy))
    assert summary["id"] == 42
    assert summary["nodes"] == 3
    assert summary["residual_keys"] == ["comment"]


def test_flow_downloads_from_s3_and_cleans_up(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = FakeS3(DATA / "wikipedia.gml")
    monkeypatch.setattr(pipeline.boto3, "client", lambda service: fake)
    summary = load_graph_flow(source="s3://bucket/graphs/wikipedia.gml")
    assert summary["edges"] == 3
    assert len(fake.downloaded) == 1
    assert fake.downloaded[0].name == "wikipedia.gml"
    assert not fake.downloaded[0].exists()
    assert not fake.downloaded[0].parent.exists()


def test_flow_raises_extraction_error(tmp_path: Path) -> None:
    bad = tmp_path / "bad.gml"
    bad.write_text('graph [ edge [ target 1 ] ]', encoding="utf-8")
    with pytest.raises(MissingFieldError):
        load_graph_flow(source=str(bad))
