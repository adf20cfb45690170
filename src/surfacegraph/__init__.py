"""
surfacegraph
============
Vertex adjacency graphs and one-ring neighborhoods of triangulated surfaces.

    >>> from surfacegraph import Mesh, build_adjacency, extract_edges, neighbors_of
    >>> mesh = Mesh(points=[[0, 0, 0], [1, 0, 0], [0, 1, 0]], triangles=[[0, 1, 2]])
    >>> graph = build_adjacency(mesh)
    >>> neighbors_of(graph, 0).tolist()
    [1, 2]
"""
from surfacegraph.errors import (
    DegenerateTriangleError,
    GraphFileError,
    InvalidMeshError,
    OutOfRangeQuery,
    OutOfRangeVertexId,
    SurfaceGraphError,
)
from surfacegraph.graph import (
    AdjacencyGraph,
    build_adjacency,
    dedupe_sorted,
    degree_of,
    extract_edges,
    neighbors_of,
    one_ring,
)
from surfacegraph.model import Mesh

__all__ = [
    "Mesh",
    "AdjacencyGraph",
    "build_adjacency",
    "dedupe_sorted",
    "extract_edges",
    "neighbors_of",
    "degree_of",
    "one_ring",
    "SurfaceGraphError",
    "InvalidMeshError",
    "OutOfRangeVertexId",
    "DegenerateTriangleError",
    "OutOfRangeQuery",
    "GraphFileError",
]
