from __future__ import annotations

from pathlib import Path

import typer

from gmlparse import GMLError, Graph, loads
from gmlparse.utils import get_logger

app = typer.Typer(help="gmlparse CLI")
logger = get_logger("gmlparse.cli")


def _load(path: Path) -> Graph:
    logger.info(f"Loading {path}")
    try:
        return loads(path.read_text(encoding="utf-8"))
    except GMLError as exc:
        logger.debug(f"{path}: {exc.code}")
        typer.echo(f"{path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def summary(path: Path = typer.Argument(..., exists=True, dir_okay=False, help="GML file")) -> None:
    """Print the graph id, direction, label and node/edge counts."""
    graph = _load(path)
    typer.echo(f"id: {graph.id}")
    typer.echo(f"directed: {graph.directed}")
    typer.echo(f"label: {graph.label}")
    typer.echo(f"nodes: {len(graph.nodes)}")
    typer.echo(f"edges: {len(graph.edges)}")


@app.command()
def attrs(path: Path = typer.Argument(..., exists=True, dir_okay=False, help="GML file")) -> None:
    """Print the graph attributes not consumed by extraction."""
    graph = _load(path)
    for key, value in graph.attributes:
        typer.echo(f"{key}: {value!r}")


@app.command()
def run(source: str = typer.Argument(..., help="Local path or S3 URI, e.g. s3://bucket/key.gml")) -> None:
    """
    Run the Prefect flow to load a graph and print its summary.
    """
    from gmlparse.flows.pipeline import load_graph_flow

    try:
        result = load_graph_flow(source=source)
    except GMLError as exc:
        typer.echo(f"{source}: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    for key, value in result.items():
        typer.echo(f"{key}: {value}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
