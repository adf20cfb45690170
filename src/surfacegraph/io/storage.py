"""
Graph Storage (HDF5)
Saves a built AdjacencyGraph to .h5 files and loads it back.
"""
from __future__ import annotations

import logging
import os
from importlib.metadata import PackageNotFoundError, version

import h5py
import numpy as np

from surfacegraph.config import GRAPH_FILE_VERSION
from surfacegraph.errors import GraphFileError
from surfacegraph.graph.adjacency import AdjacencyGraph

logger = logging.getLogger(__name__)

try:
    APP_VERSION = version("surfacegraph")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"

GROUP_NAME = "adjacency"


def save_graph(graph: AdjacencyGraph, filepath: str | os.PathLike) -> None:
    """
    Write the graph's compressed-row arrays to an HDF5 file.

    Args:
        graph: Graph to store.
        filepath: Target .h5 path, overwritten if present.
    """
    filepath = os.fspath(filepath)
    logger.info(f"Saving graph to: {filepath}")
    with h5py.File(filepath, "w") as f:
        f.attrs["version"] = GRAPH_FILE_VERSION
        f.attrs["app_version"] = APP_VERSION
        grp = f.create_group(GROUP_NAME)
        grp.attrs["number_of_vertices"] = graph.number_of_vertices
        grp.create_dataset("offsets", data=graph.offsets, compression="gzip")
        grp.create_dataset("indices", data=graph.indices, compression="gzip")
    logger.debug(f"Saved {graph}.")


def _validate(offsets: np.ndarray, indices: np.ndarray) -> None:
    if offsets.ndim != 1 or offsets.shape[0] < 1 or indices.ndim != 1:
        raise GraphFileError("Offsets and indices must be 1-D, offsets non-empty.")
    if offsets[0] != 0 or offsets[-1] != indices.shape[0]:
        raise GraphFileError("Offsets do not span the indices array.")
    if np.any(np.diff(offsets) < 0):
        raise GraphFileError("Offsets must be non-decreasing.")
    n = offsets.shape[0] - 1
    if indices.size and (indices.min() < 0 or indices.max() >= n):
        raise GraphFileError(f"Neighbor ids outside [0, {n}).")

    # Graph invariants: rows strictly increasing, no self-loops, symmetric
    rows = np.repeat(np.arange(n, dtype=np.int64), np.diff(offsets))
    same_row = rows[1:] == rows[:-1]
    if np.any(same_row & (np.diff(indices) <= 0)):
        raise GraphFileError("Neighbor lists must be sorted ascending without duplicates.")
    if np.any(indices == rows):
        vertex = int(rows[np.flatnonzero(indices == rows)[0]])
        raise GraphFileError(f"Vertex {vertex} lists itself as a neighbor.")
    forward = rows * n + indices
    backward = np.sort(indices * n + rows)
    if not np.array_equal(forward, backward):
        raise GraphFileError("Adjacency is not symmetric.")


def load_graph(filepath: str | os.PathLike) -> AdjacencyGraph:
    """
    Read a graph written by save_graph().

    Raises:
        FileNotFoundError: If the file does not exist.
        GraphFileError: If the file is not HDF5 or its content is inconsistent.
    """
    filepath = os.fspath(filepath)
    logger.info(f"Loading graph from: {filepath}")
    if not os.path.exists(filepath):
        raise FileNotFoundError(filepath)
    if not h5py.is_hdf5(filepath):
        msg = f"File '{filepath}' is not a valid HDF5 file."
        logger.error(msg)
        raise GraphFileError(msg)

    with h5py.File(filepath, "r") as f:
        file_version = f.attrs.get("version", "unknown")
        if file_version != GRAPH_FILE_VERSION:
            logger.warning(f"Graph file version {file_version} differs from {GRAPH_FILE_VERSION}.")
        if GROUP_NAME not in f:
            raise GraphFileError(f"File '{filepath}' has no '{GROUP_NAME}' group.")
        grp = f[GROUP_NAME]
        try:
            offsets = np.asarray(grp["offsets"][()], dtype=np.int64)
            indices = np.asarray(grp["indices"][()], dtype=np.int64)
        except KeyError as e:
            raise GraphFileError(f"File '{filepath}' is missing a dataset: {e}") from e

    _validate(offsets, indices)
    graph = AdjacencyGraph(offsets=offsets, indices=indices)
    logger.debug(f"Loaded {graph}.")
    return graph
