"""
Mesh Sources (PyVista Adapter)
==============================
Produces triangulated Mesh objects from generated primitives or files.

Why is this file needed?
------------------------
The graph core only accepts triangles. PyVista readers return arbitrary
datasets (volumes, quads, strips), so everything is reduced to its outer
surface and triangulated here before it reaches the builder.
"""
from __future__ import annotations

import logging
import os
from typing import Tuple

import pyvista as pv

from surfacegraph.config import DEFAULT_SPHERE_RADIUS, DEFAULT_SPHERE_RESOLUTION
from surfacegraph.model.mesh import Mesh

logger = logging.getLogger(__name__)


def sphere_mesh(
    radius: float = DEFAULT_SPHERE_RADIUS,
    theta_resolution: int = DEFAULT_SPHERE_RESOLUTION,
    phi_resolution: int = DEFAULT_SPHERE_RESOLUTION,
    center: Tuple[float, float, float] = (0.0, 0.0, 0.0),
) -> Mesh:
    """
    Generate a triangulated sphere surface.

    Args:
        radius: Sphere radius.
        theta_resolution: Number of points in the longitude direction.
        phi_resolution: Number of points in the latitude direction.
        center: Center of the sphere.

    Returns:
        Triangle mesh of the sphere.
    """
    surface = pv.Sphere(
        radius=radius,
        center=center,
        theta_resolution=theta_resolution,
        phi_resolution=phi_resolution,
    ).triangulate()
    mesh = Mesh.from_polydata(surface)
    logger.info(f"Generated sphere (r={radius}, {theta_resolution}x{phi_resolution}): {mesh}.")
    return mesh


def _to_surface(dataset: pv.DataSet | pv.MultiBlock) -> pv.PolyData:
    if isinstance(dataset, pv.MultiBlock):
        dataset = dataset.combine()
    if not isinstance(dataset, pv.PolyData):
        dataset = dataset.extract_surface()
    return dataset.triangulate()


def load_mesh(filepath: str | os.PathLike) -> Mesh:
    """
    Read a mesh file and return its triangulated surface.

    Args:
        filepath: Any file format PyVista can read (.vtk, .vtp, .stl, .ply, .obj, ...).

    Returns:
        Triangle mesh of the file's outer surface.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    filepath = os.fspath(filepath)
    if not os.path.exists(filepath):
        logger.error(f"Mesh file not found: {filepath}")
        raise FileNotFoundError(filepath)

    logger.info(f"Loading mesh from: {filepath}")
    surface = _to_surface(pv.read(filepath))
    mesh = Mesh.from_polydata(surface)
    logger.info(f"Loaded {mesh}.")
    return mesh
