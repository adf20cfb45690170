"""
One-ring lookups on a built AdjacencyGraph.

These are the only read paths used by highlighting code: pick a vertex, get
the ids to mark. No computation happens beyond slicing the stored rows.
"""
from __future__ import annotations

import logging
import operator
from typing import TYPE_CHECKING

import numpy as np

from surfacegraph.errors import OutOfRangeQuery

if TYPE_CHECKING:
    import numpy.typing as npt

    from surfacegraph.graph.adjacency import AdjacencyGraph

logger = logging.getLogger(__name__)


def _checked_id(graph: AdjacencyGraph, vertex_id: int) -> int:
    vertex_id = operator.index(vertex_id)
    if not 0 <= vertex_id < graph.number_of_vertices:
        logger.error(f"Query for vertex {vertex_id} outside [0, {graph.number_of_vertices}).")
        raise OutOfRangeQuery(vertex_id, graph.number_of_vertices)
    return vertex_id


def neighbors_of(graph: AdjacencyGraph, vertex_id: int) -> npt.NDArray[np.int64]:
    """
    Return the ascending neighbor ids of a vertex.

    Args:
        graph: Built adjacency graph.
        vertex_id: Vertex to look up.

    Returns:
        Read-only view into the graph storage.

    Raises:
        OutOfRangeQuery: If vertex_id is outside [0, number_of_vertices).
    """
    return graph.row(_checked_id(graph, vertex_id))


def degree_of(graph: AdjacencyGraph, vertex_id: int) -> int:
    """Return the number of neighbors of a vertex."""
    vertex_id = _checked_id(graph, vertex_id)
    return int(graph.offsets[vertex_id + 1] - graph.offsets[vertex_id])


def one_ring(graph: AdjacencyGraph, vertex_id: int) -> npt.NDArray[np.int64]:
    """Return the vertex followed by its neighbors."""
    neighbors = neighbors_of(graph, vertex_id)
    return np.concatenate(([vertex_id], neighbors)).astype(np.int64)
