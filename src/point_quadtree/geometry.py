"""
Geometry predicates for quadtree pruning and membership.

All functions are pure. Circles are closed disks and rectangles are closed,
so tangency counts as intersection and boundary points count as inside.
Rectangles use screen orientation: (x1, y1) upper-left, (x2, y2) lower-right.
"""

from __future__ import annotations

from .types import Quadrant, Region
from .validation import validate_quadrant


def circle_intersects_rectangle(
    cx: float,
    cy: float,
    cr: float,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
) -> bool:
    """
    Check whether a closed disk and a closed rectangle overlap.

    Clamps the circle center to the rectangle to find the nearest
    rectangle point, then compares its distance against the radius.

    Args:
        cx, cy: Circle center
        cr: Circle radius (negative radii never intersect)
        x1, y1: Upper-left corner
        x2, y2: Lower-right corner

    Returns:
        True if the disk and rectangle share at least one point
    """
    if cr < 0:
        return False
    nearest_x = min(max(cx, x1), x2)
    nearest_y = min(max(cy, y1), y2)
    dx = cx - nearest_x
    dy = cy - nearest_y
    return dx * dx + dy * dy <= cr * cr


def point_in_circle(px: float, py: float, cx: float, cy: float, cr: float) -> bool:
    """True if (px, py) lies in the closed disk of radius cr around (cx, cy)."""
    if cr < 0:
        return False
    dx = px - cx
    dy = py - cy
    return dx * dx + dy * dy <= cr * cr


def quadrant_of(ax: float, ay: float, px: float, py: float) -> Quadrant:
    """
    Classify (px, py) against an anchor at (ax, ay).

    Ties on x go west and ties on y go south.

    Returns:
        Quadrant.NE, NW, SW or SE
    """
    if px > ax:
        return Quadrant.NE if py < ay else Quadrant.SE
    return Quadrant.NW if py < ay else Quadrant.SW


def split_region(region: Region, ax: float, ay: float, quadrant: int) -> Region:
    """
    Sub-rectangle of region on the given side of the split point (ax, ay).

    Raises:
        InvalidQuadrantError: If quadrant is not 1 through 4
    """
    x1, y1, x2, y2 = region
    q = validate_quadrant(quadrant)
    if q is Quadrant.NE:
        return (ax, y1, x2, ay)
    if q is Quadrant.SE:
        return (ax, ay, x2, y2)
    if q is Quadrant.NW:
        return (x1, y1, ax, ay)
    return (x1, ay, ax, y2)


__all__ = [
    "circle_intersects_rectangle",
    "point_in_circle",
    "quadrant_of",
    "split_region",
]
