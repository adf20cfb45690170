"""
Command Line Interface
======================
Builds the adjacency graph of a mesh file (or of a generated sphere when no
file is given) and reports or exports the results.

Usage:
    $ surfacegraph stats
    $ surfacegraph neighbors 0 bunny.stl
    $ surfacegraph wireframe edges.vtk --radius 2.5
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from surfacegraph.config import (
    DEFAULT_HIGHLIGHT_VERTEX,
    DEFAULT_SPHERE_RADIUS,
    DEFAULT_SPHERE_RESOLUTION,
    DegeneratePolicy,
    get_degenerate_policy,
)
from surfacegraph.errors import SurfaceGraphError
from surfacegraph.graph import build_adjacency, extract_edges, neighbors_of
from surfacegraph.graph.adjacency import AdjacencyGraph
from surfacegraph.io.export import save_wireframe
from surfacegraph.io.sources import load_mesh, sphere_mesh
from surfacegraph.io.storage import save_graph
from surfacegraph.logging_config import setup_logging
from surfacegraph.model.mesh import Mesh

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="surfacegraph",
    help="Vertex adjacency graphs of triangulated surfaces.",
    no_args_is_help=True,
)

MESH_ARGUMENT = typer.Argument(None, help="Mesh file; a sphere is generated when omitted")
RADIUS_OPTION = typer.Option(DEFAULT_SPHERE_RADIUS, "--radius", help="Radius of the generated sphere")
RESOLUTION_OPTION = typer.Option(
    DEFAULT_SPHERE_RESOLUTION, "--resolution", help="Theta/phi resolution of the generated sphere"
)
STRICT_OPTION = typer.Option(False, "--strict", help="Reject degenerate triangles")


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, ...)"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to this file"),
) -> None:
    """Vertex adjacency graphs of triangulated surfaces."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level '{log_level}'.", param_hint="--log-level")
    setup_logging(level=level, log_file=str(log_file) if log_file else None)


def _build(mesh_path: Optional[Path], radius: float, resolution: int, strict: bool) -> tuple[Mesh, AdjacencyGraph]:
    """Acquire the mesh and build its graph, exiting with code 1 on failure."""
    policy = DegeneratePolicy.STRICT if strict else get_degenerate_policy()
    try:
        if mesh_path is None:
            mesh = sphere_mesh(radius=radius, theta_resolution=resolution, phi_resolution=resolution)
        else:
            mesh = load_mesh(mesh_path)
        return mesh, build_adjacency(mesh, policy=policy)
    except (SurfaceGraphError, FileNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def stats(
    mesh_path: Optional[Path] = MESH_ARGUMENT,
    radius: float = RADIUS_OPTION,
    resolution: int = RESOLUTION_OPTION,
    strict: bool = STRICT_OPTION,
) -> None:
    """Print vertex, triangle and edge counts of the mesh graph."""
    mesh, graph = _build(mesh_path, radius, resolution, strict)
    degrees = graph.degrees()
    typer.echo(f"vertices:  {graph.number_of_vertices}")
    typer.echo(f"triangles: {mesh.number_of_triangles}")
    typer.echo(f"edges:     {extract_edges(graph).shape[0]}")
    if degrees.size:
        typer.echo(f"degree:    {int(degrees.min())}..{int(degrees.max())}")


@app.command()
def neighbors(
    vertex: int = typer.Argument(DEFAULT_HIGHLIGHT_VERTEX, help="Vertex id to look up"),
    mesh_path: Optional[Path] = MESH_ARGUMENT,
    radius: float = RADIUS_OPTION,
    resolution: int = RESOLUTION_OPTION,
    strict: bool = STRICT_OPTION,
) -> None:
    """Print the one-ring neighbors of a vertex."""
    _, graph = _build(mesh_path, radius, resolution, strict)
    try:
        ids = neighbors_of(graph, vertex)
    except SurfaceGraphError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(" ".join(str(i) for i in ids.tolist()))


@app.command()
def wireframe(
    output: Path = typer.Argument(..., help="Output file (.vtk, .vtp, ...)"),
    mesh_path: Optional[Path] = MESH_ARGUMENT,
    radius: float = RADIUS_OPTION,
    resolution: int = RESOLUTION_OPTION,
    strict: bool = STRICT_OPTION,
) -> None:
    """Write the mesh edges as line cells."""
    mesh, graph = _build(mesh_path, radius, resolution, strict)
    save_wireframe(mesh, graph, output)
    typer.echo(f"Wrote {graph.number_of_edges} edges to {output}")


@app.command()
def export(
    output: Path = typer.Argument(..., help="Output HDF5 file"),
    mesh_path: Optional[Path] = MESH_ARGUMENT,
    radius: float = RADIUS_OPTION,
    resolution: int = RESOLUTION_OPTION,
    strict: bool = STRICT_OPTION,
) -> None:
    """Store the adjacency graph in an HDF5 file."""
    _, graph = _build(mesh_path, radius, resolution, strict)
    save_graph(graph, output)
    typer.echo(f"Wrote graph with {graph.number_of_vertices} vertices to {output}")
