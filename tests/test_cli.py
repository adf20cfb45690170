"""CLI tests."""

import logging

import pytest
import pyvista as pv
from typer.testing import CliRunner

from surfacegraph.cli import app
from surfacegraph.io.storage import load_graph

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("surfacegraph")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


class TestCLI:
    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "adjacency" in result.output

    def test_stats_sphere(self):
        result = runner.invoke(app, ["stats"])
        assert result.exit_code == 0
        assert "vertices:  50" in result.output
        assert "triangles: 96" in result.output
        assert "edges:     144" in result.output

    def test_neighbors(self):
        result = runner.invoke(app, ["neighbors", "0"])
        assert result.exit_code == 0
        ids = [int(v) for v in result.output.split()]
        assert ids == sorted(set(ids))
        assert 0 not in ids

    def test_neighbors_out_of_range(self):
        result = runner.invoke(app, ["neighbors", "999"])
        assert result.exit_code == 1

    def test_missing_mesh_file(self, tmp_path):
        result = runner.invoke(app, ["stats", str(tmp_path / "missing.stl")])
        assert result.exit_code == 1

    def test_mesh_file(self, tmp_path):
        path = tmp_path / "plane.vtk"
        pv.Plane(i_resolution=1, j_resolution=1).save(str(path))
        result = runner.invoke(app, ["stats", str(path)])
        assert result.exit_code == 0
        assert "edges:     5" in result.output

    def test_wireframe(self, tmp_path):
        output = tmp_path / "edges.vtk"
        result = runner.invoke(app, ["wireframe", str(output), "--radius", "2.0"])
        assert result.exit_code == 0
        assert pv.read(str(output)).n_lines == 144

    def test_export(self, tmp_path):
        output = tmp_path / "graph.h5"
        result = runner.invoke(app, ["export", str(output), "--resolution", "6"])
        assert result.exit_code == 0
        assert len(load_graph(output)) == 6 * 4 + 2

    def test_bad_log_level(self):
        result = runner.invoke(app, ["--log-level", "chatty", "stats"])
        assert result.exit_code != 0
