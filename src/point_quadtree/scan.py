"""
Linear-scan circle query.

Tests every point against the disk with a single vectorized numpy
distance computation. Serves as a reference for the quadtree query
and as the baseline in benchmarks.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .types import PointT


def points_in_circle(points: Sequence[PointT], cx: float, cy: float, cr: float) -> List[PointT]:
    """
    Find points within a closed disk by checking all of them.

    Args:
        points: Points with x and y attributes
        cx, cy: Circle center
        cr: Circle radius (boundary included, negative matches nothing)

    Returns:
        Matching points in input order
    """
    if cr < 0 or len(points) == 0:
        return []

    coords = np.array([(p.x, p.y) for p in points], dtype=float)
    dx = coords[:, 0] - cx
    dy = coords[:, 1] - cy
    mask = dx * dx + dy * dy <= cr * cr
    return [points[i] for i in np.flatnonzero(mask)]


__all__ = ["points_in_circle"]
