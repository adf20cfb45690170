"""
Error Types
===========
All failures raised by surfacegraph derive from SurfaceGraphError, so callers
can catch the whole family at once or pick the specific kind they care about.

The concrete errors also subclass the closest builtin (ValueError/IndexError)
so generic handlers keep working.
"""
from __future__ import annotations


class SurfaceGraphError(Exception):
    """Base class for all surfacegraph errors."""


class InvalidMeshError(SurfaceGraphError, ValueError):
    """The mesh arrays have the wrong shape or contain non-triangular cells."""


class OutOfRangeVertexId(SurfaceGraphError, IndexError):
    """A triangle references a vertex index outside [0, number_of_points)."""

    def __init__(self, triangle_index: int, vertex_id: int, number_of_points: int) -> None:
        self.triangle_index = triangle_index
        self.vertex_id = vertex_id
        self.number_of_points = number_of_points
        super().__init__(
            f"Triangle {triangle_index} references vertex {vertex_id}, "
            f"valid range is [0, {number_of_points})."
        )


class DegenerateTriangleError(SurfaceGraphError, ValueError):
    """A triangle repeats a vertex id (only raised in strict mode)."""

    def __init__(self, triangle_index: int, vertices: tuple[int, ...]) -> None:
        self.triangle_index = triangle_index
        self.vertices = vertices
        super().__init__(f"Triangle {triangle_index} is degenerate: {vertices}.")


class OutOfRangeQuery(SurfaceGraphError, IndexError):
    """A neighbor lookup requested a vertex id outside [0, number_of_vertices)."""

    def __init__(self, vertex_id: int, number_of_vertices: int) -> None:
        self.vertex_id = vertex_id
        self.number_of_vertices = number_of_vertices
        super().__init__(
            f"Vertex {vertex_id} is out of range, graph has {number_of_vertices} vertices."
        )


class GraphFileError(SurfaceGraphError, ValueError):
    """A stored graph file is missing datasets or holds an inconsistent structure."""
