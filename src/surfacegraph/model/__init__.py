"""
The MODEL layer contains the pure mesh data structure.
It has NO knowledge of file formats or the command line.
"""
from surfacegraph.model.mesh import Mesh

__all__ = ["Mesh"]
