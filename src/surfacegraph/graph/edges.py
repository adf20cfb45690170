"""
Undirected edge list of an AdjacencyGraph.

Each edge is emitted once as (i, j) with i < j, in the order a line-cell
writer can consume directly.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

    from surfacegraph.graph.adjacency import AdjacencyGraph

logger = logging.getLogger(__name__)


def extract_edges(graph: AdjacencyGraph) -> npt.NDArray[np.int64]:
    """
    Derive the undirected edge list of the graph.

    A pair (i, j) is emitted only from the lower vertex, so every edge
    appears once. Rows come out ascending by i, then by j.

    Args:
        graph: Built adjacency graph.

    Returns:
        (E, 2) array of vertex pairs with i < j.
    """
    sources = np.repeat(np.arange(graph.number_of_vertices, dtype=np.int64), graph.degrees())
    upper = graph.indices > sources
    edges = np.column_stack((sources[upper], graph.indices[upper]))
    logger.debug(f"Extracted {edges.shape[0]} edges.")
    return edges
