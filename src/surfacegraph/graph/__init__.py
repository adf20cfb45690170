"""
Graph layer: adjacency construction, edge extraction and one-ring queries.
Pure NumPy, no I/O.
"""
from surfacegraph.graph.adjacency import AdjacencyGraph, build_adjacency, dedupe_sorted
from surfacegraph.graph.edges import extract_edges
from surfacegraph.graph.query import degree_of, neighbors_of, one_ring

__all__ = [
    "AdjacencyGraph",
    "build_adjacency",
    "dedupe_sorted",
    "extract_edges",
    "neighbors_of",
    "degree_of",
    "one_ring",
]
