import numpy as np
import pytest

from surfacegraph import Mesh
from surfacegraph.io.sources import sphere_mesh


@pytest.fixture
def single_triangle():
    """Vertices 0, 1, 2 forming one triangle."""
    points = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]
    return Mesh(points=points, triangles=[[0, 1, 2]])


@pytest.fixture
def two_triangles():
    """Triangles (0, 1, 2) and (1, 2, 3) sharing the edge 1-2."""
    points = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [1.0, 1.0, 0.0]]
    return Mesh(points=points, triangles=[[0, 1, 2], [1, 2, 3]])


@pytest.fixture
def empty_mesh():
    return Mesh(points=np.empty((0, 3)), triangles=np.empty((0, 3), dtype=np.int64))


@pytest.fixture(scope="session")
def sphere():
    """Default 8x8 sphere: 50 points, 96 triangles."""
    return sphere_mesh()
