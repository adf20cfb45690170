"""
Triangle Mesh
=============
Immutable container of point positions and triangle connectivity.

The adjacency builder relies on every cell having exactly three vertices,
so the shape checks live here, at construction time.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from surfacegraph.errors import InvalidMeshError

if TYPE_CHECKING:
    import numpy.typing as npt
    import pyvista as pv

logger = logging.getLogger(__name__)

VERTICES_PER_TRIANGLE = 3


def _readonly(array: npt.NDArray) -> npt.NDArray:
    array.flags.writeable = False
    return array


class Mesh:
    """
    Triangulated surface: points (N, 3) and triangles (M, 3).

    Both arrays are copied and frozen, so a Mesh can be shared between
    consumers without defensive copies.
    """

    def __init__(
        self,
        points: list | npt.NDArray[np.float64],
        triangles: list | npt.NDArray[np.int64],
    ) -> None:
        """
        Initialize the mesh from point coordinates and triangle indices.

        Args:
            points: (N, 3) array of point coordinates.
            triangles: (M, 3) array of vertex indices into points.

        Raises:
            InvalidMeshError: If either array does not have the expected shape.
        """
        points_arr = np.array(points, dtype=np.float64)
        if points_arr.size == 0:
            points_arr = points_arr.reshape(0, 3)
        if points_arr.ndim != 2 or points_arr.shape[1] != 3:
            raise InvalidMeshError(f"Expected points of shape (N, 3), got {points_arr.shape}.")

        triangles_arr = np.array(triangles)
        if triangles_arr.size == 0:
            triangles_arr = triangles_arr.reshape(0, VERTICES_PER_TRIANGLE)
        if triangles_arr.ndim != 2 or triangles_arr.shape[1] != VERTICES_PER_TRIANGLE:
            raise InvalidMeshError(
                f"Expected triangles of shape (M, {VERTICES_PER_TRIANGLE}), got {triangles_arr.shape}."
            )
        if triangles_arr.size and not np.issubdtype(triangles_arr.dtype, np.integer):
            raise InvalidMeshError(f"Triangle indices must be integers, got dtype {triangles_arr.dtype}.")

        self.points: npt.NDArray[np.float64] = _readonly(points_arr)
        self.triangles: npt.NDArray[np.int64] = _readonly(triangles_arr.astype(np.int64))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(points={self.number_of_points}, "
            f"triangles={self.number_of_triangles})"
        )

    @classmethod
    def from_polydata(cls, polydata: pv.PolyData) -> Mesh:
        """
        Wrap a PyVista surface whose faces are all triangles.

        Args:
            polydata: Surface to wrap. Run `.triangulate()` on it first if needed.

        Returns:
            Mesh sharing no memory with the PolyData.

        Raises:
            InvalidMeshError: If the surface holds polygons or strips that are not triangles.
        """
        if polydata.n_strips:
            raise InvalidMeshError("Triangle strips are not supported, triangulate the surface first.")

        faces = np.asarray(polydata.faces, dtype=np.int64)
        # Flat VTK layout [3, a, b, c, 3, d, e, f, ...]
        if faces.size % (VERTICES_PER_TRIANGLE + 1) != 0:
            raise InvalidMeshError("Surface contains non-triangular faces, triangulate it first.")
        cells = faces.reshape(-1, VERTICES_PER_TRIANGLE + 1)
        if np.any(cells[:, 0] != VERTICES_PER_TRIANGLE):
            raise InvalidMeshError("Surface contains non-triangular faces, triangulate it first.")

        mesh = cls(points=np.asarray(polydata.points), triangles=cells[:, 1:])
        logger.debug(f"Wrapped PolyData as {mesh}.")
        return mesh

    @property
    def number_of_points(self) -> int:
        """Number of points in the mesh."""
        return int(self.points.shape[0])

    @property
    def number_of_triangles(self) -> int:
        """Number of triangles in the mesh."""
        return int(self.triangles.shape[0])
