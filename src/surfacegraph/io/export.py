"""
Export helpers turning graph results into PyVista geometry.

Only geometry is produced here; colors, point sizes and the plotter
belong to whoever displays the data.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Tuple

import numpy as np
import pyvista as pv

from surfacegraph.errors import InvalidMeshError
from surfacegraph.graph.adjacency import AdjacencyGraph
from surfacegraph.graph.edges import extract_edges
from surfacegraph.graph.query import neighbors_of
from surfacegraph.model.mesh import Mesh

logger = logging.getLogger(__name__)


def _check_matching(mesh: Mesh, graph: AdjacencyGraph) -> None:
    if mesh.number_of_points != graph.number_of_vertices:
        raise InvalidMeshError(
            f"Mesh has {mesh.number_of_points} points but graph has {graph.number_of_vertices} vertices."
        )


def wireframe_polydata(mesh: Mesh, graph: AdjacencyGraph) -> pv.PolyData:
    """
    Rebuild the surface with one line cell per undirected edge.

    Args:
        mesh: Mesh the graph was built from (provides the points).
        graph: Adjacency graph of that mesh.

    Returns:
        PolyData with the mesh points and only line cells.
    """
    _check_matching(mesh, graph)
    edges = extract_edges(graph)
    # VTK line cells: [2, i, j, 2, k, l, ...]
    lines = np.column_stack((np.full(edges.shape[0], 2, dtype=np.int64), edges)).ravel()
    wireframe = pv.PolyData(np.array(mesh.points), lines=lines)
    logger.debug(f"Wireframe with {wireframe.n_lines} lines.")
    return wireframe


def _points_polydata(points: np.ndarray) -> pv.PolyData:
    """One vertex cell per point, like a vertex glyph filter."""
    if points.shape[0] == 0:
        return pv.PolyData()
    return pv.PolyData(np.array(points, dtype=np.float64))


def one_ring_polydata(mesh: Mesh, graph: AdjacencyGraph, vertex_id: int) -> Tuple[pv.PolyData, pv.PolyData]:
    """
    Point sets for highlighting a vertex and its immediate neighbors.

    Args:
        mesh: Mesh the graph was built from.
        graph: Adjacency graph of that mesh.
        vertex_id: Vertex to highlight.

    Returns:
        (node, neighbors): single-point PolyData and the neighbors' PolyData.
    """
    _check_matching(mesh, graph)
    neighbors = neighbors_of(graph, vertex_id)
    node = _points_polydata(mesh.points[[vertex_id]])
    ring = _points_polydata(mesh.points[neighbors])
    return node, ring


def save_wireframe(mesh: Mesh, graph: AdjacencyGraph, filepath: str | os.PathLike) -> Path:
    """Write the wireframe to any PyVista writable format (.vtk, .vtp, ...)."""
    filepath = Path(filepath)
    wireframe = wireframe_polydata(mesh, graph)
    wireframe.save(str(filepath))
    logger.info(f"Wireframe saved to: {filepath}")
    return filepath
