"""
Common types for the point quadtree.

This module provides the fundamental types shared by the tree and the
geometry helpers:
- PointLike: Anything with readable x and y coordinates
- Point: Immutable value point
- Quadrant: Directional partition relative to a node's anchor
- Region: Axis-aligned rectangle as (x1, y1, x2, y2)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol, Tuple, TypeVar


class PointLike(Protocol):
    """Protocol for points stored in the tree: readable x and y."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


# Generic type variable for caller-supplied point types
PointT = TypeVar("PointT", bound=PointLike)


@dataclass(frozen=True)
class Point:
    """A 2D point, compared and hashed by value."""

    x: float
    y: float

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"


class Quadrant(IntEnum):
    """
    Quadrants relative to a node's anchor (screen coordinates, y grows down).

    - NE: x greater, y less
    - NW: x not greater, y less
    - SW: x not greater, y not less
    - SE: x greater, y not less
    """

    NE = 1
    NW = 2
    SW = 3
    SE = 4


Region = Tuple[float, float, float, float]
"""Rectangle as (x1, y1, x2, y2): upper-left then lower-right corner."""


__all__ = [
    "PointLike",
    "PointT",
    "Point",
    "Quadrant",
    "Region",
]
