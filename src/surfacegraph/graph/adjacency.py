"""
Vertex Adjacency Graph
======================
Builds, in a single pass over the triangles, the mapping from each vertex to
the ascending, duplicate-free list of vertices it shares a triangle with.

The graph is stored in compressed-row form: the neighbors of vertex i are
indices[offsets[i]:offsets[i + 1]].
"""
from __future__ import annotations

import itertools as it
import logging
from typing import TYPE_CHECKING, Iterator, Optional

import numpy as np
import scipy as sp

from surfacegraph.config import DegeneratePolicy, get_degenerate_policy
from surfacegraph.errors import DegenerateTriangleError, OutOfRangeVertexId
from surfacegraph.graph.query import neighbors_of
from surfacegraph.model.mesh import VERTICES_PER_TRIANGLE, Mesh

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

# Every ordered pair of distinct corner positions; for a triangle these are
# exactly its three edges in both directions.
CORNER_PAIRS: npt.NDArray[np.int64] = np.array(
    list(it.permutations(range(VERTICES_PER_TRIANGLE), 2)), dtype=np.int64
)


class AdjacencyGraph:
    """
    Immutable vertex adjacency graph of a triangle mesh.

    Symmetric and free of self-loops by construction; every neighbor list is
    sorted ascending without duplicates.
    """

    def __init__(
        self,
        offsets: npt.NDArray[np.int64],
        indices: npt.NDArray[np.int64],
    ) -> None:
        """
        Args:
            offsets: (N + 1,) row offsets, offsets[0] == 0.
            indices: (offsets[-1],) concatenated neighbor lists.
        """
        self.offsets: npt.NDArray[np.int64] = np.array(offsets, dtype=np.int64)
        self.indices: npt.NDArray[np.int64] = np.array(indices, dtype=np.int64)
        self.offsets.flags.writeable = False
        self.indices.flags.writeable = False

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(vertices={self.number_of_vertices}, "
            f"edges={self.number_of_edges})"
        )

    def __len__(self) -> int:
        return self.number_of_vertices

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.number_of_vertices))

    def __getitem__(self, vertex_id: int) -> npt.NDArray[np.int64]:
        """Neighbors of a vertex, raises OutOfRangeQuery like neighbors_of()."""
        return neighbors_of(self, vertex_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdjacencyGraph):
            return NotImplemented
        return np.array_equal(self.offsets, other.offsets) and np.array_equal(self.indices, other.indices)

    __hash__ = None  # type: ignore[assignment]

    @property
    def number_of_vertices(self) -> int:
        """Number of vertices, including isolated ones."""
        return int(self.offsets.shape[0] - 1)

    @property
    def number_of_edges(self) -> int:
        """Number of undirected edges."""
        return int(self.indices.shape[0] // 2)

    def row(self, vertex_id: int) -> npt.NDArray[np.int64]:
        """Unchecked neighbor slice, use neighbors_of() for validated access."""
        return self.indices[self.offsets[vertex_id]:self.offsets[vertex_id + 1]]

    def degrees(self) -> npt.NDArray[np.int64]:
        """Return the number of neighbors of every vertex."""
        return np.diff(self.offsets)

    def as_dict(self) -> dict[int, list[int]]:
        """Return the graph as {vertex: [neighbors, ...]}."""
        return {vertex: self.row(vertex).tolist() for vertex in self}

    def to_sparse(self) -> sp.sparse.csr_array:
        """
        Return the symmetric (N, N) adjacency matrix.

        Returns:
            SciPy CSR array with ones at (i, j) for every neighbor pair.
        """
        n = self.number_of_vertices
        data = np.ones(self.indices.shape[0], dtype=np.int8)
        return sp.sparse.csr_array((data, self.indices.copy(), self.offsets.copy()), shape=(n, n))


def dedupe_sorted(values: npt.ArrayLike) -> npt.NDArray[np.int64]:
    """
    Sort ascending and drop adjacent duplicates.

    Idempotent: applying it to its own output returns the same array.

    Args:
        values: 1-D integer values.

    Returns:
        New sorted array without repeated values.
    """
    arr = np.sort(np.asarray(values, dtype=np.int64).ravel(), kind="stable")
    if arr.size == 0:
        return arr
    keep = np.empty(arr.shape[0], dtype=bool)
    keep[0] = True
    np.not_equal(arr[1:], arr[:-1], out=keep[1:])
    return arr[keep]


def _check_vertex_ids(triangles: npt.NDArray[np.int64], number_of_points: int) -> None:
    """Raise OutOfRangeVertexId for the first index outside [0, number_of_points)."""
    bad = (triangles < 0) | (triangles >= number_of_points)
    if not bad.any():
        return
    triangle_index, corner = np.argwhere(bad)[0]
    vertex_id = int(triangles[triangle_index, corner])
    logger.error(f"Triangle {triangle_index} references vertex {vertex_id} outside [0, {number_of_points}).")
    raise OutOfRangeVertexId(int(triangle_index), vertex_id, number_of_points)


def _degenerate_mask(triangles: npt.NDArray[np.int64]) -> npt.NDArray[np.bool_]:
    """Mark triangles that list some vertex more than once."""
    a, b, c = triangles[:, 0], triangles[:, 1], triangles[:, 2]
    return (a == b) | (b == c) | (a == c)


def build_adjacency(mesh: Mesh, policy: Optional[DegeneratePolicy] = None) -> AdjacencyGraph:
    """
    Build the vertex adjacency graph of a triangle mesh.

    For each triangle, every ordered pair of distinct corners records a
    neighbor relation from the first vertex to the second. Pairs that join a
    vertex to itself (degenerate triangles) are dropped. Each vertex's list is
    then sorted and deduplicated.

    Args:
        mesh: Triangulated input mesh.
        policy: Degenerate-triangle policy, defaults to the configured one.

    Returns:
        The fully built graph with one row per mesh point.

    Raises:
        OutOfRangeVertexId: If a triangle references an index outside the point range.
        DegenerateTriangleError: If policy is STRICT and a triangle repeats a vertex.
    """
    if policy is None:
        policy = get_degenerate_policy()

    n = mesh.number_of_points
    triangles = mesh.triangles
    _check_vertex_ids(triangles, n)

    degenerate = _degenerate_mask(triangles)
    n_degenerate = int(degenerate.sum())
    if n_degenerate:
        if policy is DegeneratePolicy.STRICT:
            triangle_index = int(np.flatnonzero(degenerate)[0])
            vertices = tuple(int(v) for v in triangles[triangle_index])
            logger.error(f"Degenerate triangle {triangle_index} {vertices} rejected in strict mode.")
            raise DegenerateTriangleError(triangle_index, vertices)
        logger.warning(f"Tolerating {n_degenerate} degenerate triangle(s), self-pairs are dropped.")

    # (M, 6) sources and targets, one column per corner pair
    sources = triangles[:, CORNER_PAIRS[:, 0]].ravel()
    targets = triangles[:, CORNER_PAIRS[:, 1]].ravel()
    distinct = sources != targets
    n_self_pairs = int(distinct.size - distinct.sum())

    # Sorting the key source * n + target orders by source, then by target,
    # so one dedupe pass yields every vertex's canonical neighbor list.
    keys = dedupe_sorted(sources[distinct] * n + targets[distinct])
    row_of_key = keys // n if n else keys
    indices = keys % n if n else keys

    offsets = np.zeros(n + 1, dtype=np.int64)
    np.cumsum(np.bincount(row_of_key, minlength=n), out=offsets[1:])

    graph = AdjacencyGraph(offsets=offsets, indices=indices)
    logger.debug(
        f"Built {graph} from {mesh.number_of_triangles} triangles "
        f"({n_self_pairs} self-pairs dropped)."
    )
    return graph
