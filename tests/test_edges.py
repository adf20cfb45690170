"""Edge list extraction tests."""

import numpy as np

from surfacegraph import Mesh, build_adjacency, extract_edges


class TestExtractEdges:
    def test_single_triangle(self, single_triangle):
        edges = extract_edges(build_adjacency(single_triangle))
        assert edges.tolist() == [[0, 1], [0, 2], [1, 2]]

    def test_shared_edge(self, two_triangles):
        edges = extract_edges(build_adjacency(two_triangles))
        assert edges.tolist() == [[0, 1], [0, 2], [1, 2], [1, 3], [2, 3]]

    def test_empty(self, empty_mesh):
        edges = extract_edges(build_adjacency(empty_mesh))
        assert edges.shape == (0, 2)

    def test_bound_reached_for_disjoint_triangles(self):
        mesh = Mesh(points=np.zeros((6, 3)), triangles=[[0, 1, 2], [3, 4, 5]])
        edges = extract_edges(build_adjacency(mesh))
        assert edges.shape[0] == 3 * mesh.number_of_triangles

    def test_closed_sphere(self, sphere):
        """Each edge of a closed surface is shared by two triangles."""
        edges = extract_edges(build_adjacency(sphere))
        assert edges.shape[0] < 3 * sphere.number_of_triangles
        assert 2 * edges.shape[0] == 3 * sphere.number_of_triangles
        assert sphere.number_of_points - edges.shape[0] + sphere.number_of_triangles == 2

    def test_rows_ordered_and_unique(self, sphere):
        edges = extract_edges(build_adjacency(sphere))
        assert np.all(edges[:, 0] < edges[:, 1])
        order = np.lexsort((edges[:, 1], edges[:, 0]))
        np.testing.assert_array_equal(order, np.arange(edges.shape[0]))
        assert np.unique(edges, axis=0).shape == edges.shape
