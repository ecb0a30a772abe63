from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any, cast

import boto3
from prefect import flow, get_run_logger, task

from gmlparse.ir import GMLObject, Graph, build_graph
from gmlparse.plugins import global_registry


def summarize(graph: Graph) -> dict[str, Any]:
    return {
        "id": graph.id,
        "directed": graph.directed,
        "label": graph.label,
        "nodes": len(graph.nodes),
        "edges": len(graph.edges),
        "residual_keys": [k for k, _ in graph.attributes],
    }


def _split_s3_uri(s3_uri: str) -> tuple[str, str]:
    if not s3_uri.startswith("s3://"):
        raise ValueError("s3_uri must start with s3://")
    _, rest = s3_uri.split("s3://", 1)
    bucket, key = rest.split("/", 1)
    return bucket, key


@task
def read_source(source: str) -> tuple[str, str]:
    """
    Read a GML document from a local path or an s3://bucket/key URI.
    S3 access requires AWS credentials in the environment.
    Returns (suffix, text).
    """
    logger = get_run_logger()
    if source.startswith("s3://"):
        bucket, key = _split_s3_uri(source)
        s3 = boto3.client("s3")
        with tempfile.TemporaryDirectory(prefix="gmlparse_") as tmp_dir:
            path = Path(tmp_dir) / Path(key).name
            s3.download_file(bucket, key, str(path))
            logger.info(f"Downloaded {source} to {path}")
            text = path.read_text(encoding="utf-8")
    else:
        path = Path(source)
        text = path.read_text(encoding="utf-8")
    logger.info(f"Read {len(text)} characters from {path}")
    return path.suffix, text


@task
def parse_document(suffix: str, text: str) -> GMLObject:
    logger = get_run_logger()
    if global_registry.get(suffix) is None:
        logger.warning(f"No parser registered for '{suffix}', falling back to GML")
        suffix = ".gml"
    root = global_registry.create(suffix).parse(text)
    logger.info(f"Parsed {len(root)} top-level attributes")
    return root


@task
def extract_graph(root: GMLObject) -> Graph:
    logger = get_run_logger()
    graph = build_graph(root)
    logger.info(f"Extracted graph with {len(graph.nodes)} nodes and {len(graph.edges)} edges")
    return graph


@task
def summarize_graph(graph: Graph) -> dict[str, Any]:
    return summarize(graph)


@flow(name="gmlparse-load-graph")
def load_graph_flow(source: str) -> dict[str, Any]:
    """
    Orchestrates loading a single document:
    read (local or S3) → parse → extract graph → summary
    """
    suffix, text = read_source(source)
    root = parse_document(suffix, text)
    graph = extract_graph(root)
    summary = summarize_graph(graph)
    return cast(dict[str, Any], summary)
