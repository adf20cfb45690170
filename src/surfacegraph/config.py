"""
Configuration & Constants
=========================
This module serves as the central registry for global constants and the
few runtime switches of the package.

Exports:
    DEFAULT_SPHERE_RADIUS (float): Radius of the generated demo sphere.
    DEFAULT_SPHERE_RESOLUTION (int): Theta/phi resolution of the demo sphere.
    DEFAULT_HIGHLIGHT_VERTEX (int): Vertex whose one-ring is reported by default.
    GRAPH_FILE_VERSION (str): Format version written into stored graph files.
    DegeneratePolicy: How the builder treats triangles with a repeated vertex.
"""
from __future__ import annotations

import logging
import os
from enum import Enum

logger = logging.getLogger(__name__)

# Same defaults as VTK's sphere source
DEFAULT_SPHERE_RADIUS: float = 5.0
DEFAULT_SPHERE_RESOLUTION: int = 8

DEFAULT_HIGHLIGHT_VERTEX: int = 0

GRAPH_FILE_VERSION: str = "1.0"

DEGENERATE_POLICY_ENV: str = "SURFACEGRAPH_DEGENERATE"


class DegeneratePolicy(str, Enum):
    """Treatment of triangles that list the same vertex more than once."""
    LENIENT = "lenient"  # drop the self-pair, keep the remaining edges
    STRICT = "strict"    # reject the mesh


def get_degenerate_policy() -> DegeneratePolicy:
    """
    Read the degenerate-triangle policy from the environment.

    Returns:
        The policy named by SURFACEGRAPH_DEGENERATE, or LENIENT when unset or unknown.
    """
    raw = os.environ.get(DEGENERATE_POLICY_ENV, "").strip().lower()
    if not raw:
        return DegeneratePolicy.LENIENT
    try:
        return DegeneratePolicy(raw)
    except ValueError:
        logger.warning(f"Unknown {DEGENERATE_POLICY_ENV}='{raw}', falling back to lenient.")
        return DegeneratePolicy.LENIENT
