"""HDF5 graph storage tests."""

import h5py
import numpy as np
import pytest

from surfacegraph import GraphFileError, build_adjacency
from surfacegraph.io.storage import load_graph, save_graph


class TestStorage:
    def test_sphere_graph_survives_storage(self, sphere, tmp_path):
        graph = build_adjacency(sphere)
        path = tmp_path / "sphere.h5"
        save_graph(graph, path)
        assert load_graph(path) == graph

    def test_empty_graph(self, empty_mesh, tmp_path):
        path = tmp_path / "empty.h5"
        save_graph(build_adjacency(empty_mesh), path)
        assert len(load_graph(path)) == 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_graph(tmp_path / "missing.h5")

    def test_not_hdf5(self, tmp_path):
        path = tmp_path / "graph.h5"
        path.write_text("not a graph")
        with pytest.raises(GraphFileError):
            load_graph(path)

    def test_missing_group(self, tmp_path):
        path = tmp_path / "graph.h5"
        with h5py.File(path, "w") as f:
            f.create_group("other")
        with pytest.raises(GraphFileError):
            load_graph(path)

    def test_inconsistent_offsets(self, tmp_path):
        path = tmp_path / "graph.h5"
        with h5py.File(path, "w") as f:
            grp = f.create_group("adjacency")
            grp.create_dataset("offsets", data=np.array([0, 5]))
            grp.create_dataset("indices", data=np.array([1]))
        with pytest.raises(GraphFileError):
            load_graph(path)

    def test_neighbor_out_of_range(self, tmp_path):
        path = tmp_path / "graph.h5"
        with h5py.File(path, "w") as f:
            grp = f.create_group("adjacency")
            grp.create_dataset("offsets", data=np.array([0, 1, 2]))
            grp.create_dataset("indices", data=np.array([1, 7]))
        with pytest.raises(GraphFileError):
            load_graph(path)


def write_graph_file(path, offsets, indices):
    with h5py.File(path, "w") as f:
        grp = f.create_group("adjacency")
        grp.create_dataset("offsets", data=np.array(offsets))
        grp.create_dataset("indices", data=np.array(indices))


class TestStoredGraphInvariants:
    def test_unsorted_row(self, tmp_path):
        """Vertex 0 -> [2, 1] is symmetric but out of order."""
        path = tmp_path / "graph.h5"
        write_graph_file(path, offsets=[0, 2, 3, 4], indices=[2, 1, 0, 0])
        with pytest.raises(GraphFileError, match="sorted"):
            load_graph(path)

    def test_duplicate_neighbor(self, tmp_path):
        path = tmp_path / "graph.h5"
        write_graph_file(path, offsets=[0, 2, 4], indices=[1, 1, 0, 0])
        with pytest.raises(GraphFileError, match="duplicates"):
            load_graph(path)

    def test_self_loop(self, tmp_path):
        path = tmp_path / "graph.h5"
        write_graph_file(path, offsets=[0, 2, 3], indices=[0, 1, 0])
        with pytest.raises(GraphFileError, match="itself"):
            load_graph(path)

    def test_self_loop_in_unsorted_row(self, tmp_path):
        """Vertex 0 -> [1, 0], vertex 1 -> []."""
        path = tmp_path / "graph.h5"
        write_graph_file(path, offsets=[0, 2, 2], indices=[1, 0])
        with pytest.raises(GraphFileError):
            load_graph(path)

    def test_asymmetric(self, tmp_path):
        path = tmp_path / "graph.h5"
        write_graph_file(path, offsets=[0, 1, 1], indices=[1])
        with pytest.raises(GraphFileError, match="symmetric"):
            load_graph(path)
