"""
point-quadtree: A point quadtree for 2D circular range queries.

Each node stores one point and splits its region into four quadrants
around that point. Children are created on first use and never moved,
so the tree's shape follows insertion order.

Available components:
- quadtree: The PointQuadtree node/tree
- geometry: Circle/rectangle intersection and point-in-circle predicates
- scan: Linear-scan reference query
"""

__version__ = "0.1.0"

# Geometry predicates
from .geometry import (
    circle_intersects_rectangle,
    point_in_circle,
    quadrant_of,
    split_region,
)

# The tree
from .quadtree import PointQuadtree, RegionBoundsWarning

# Linear-scan reference
from .scan import points_in_circle

# Shared types
from .types import Point, PointLike, PointT, Quadrant, Region

# Validation utilities
from .validation import (
    EmptyPointSetError,
    InvalidPointError,
    InvalidQuadrantError,
    ValidationError,
    validate_point,
    validate_quadrant,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Point",
    "PointLike",
    "PointT",
    "Quadrant",
    "Region",
    # Tree
    "PointQuadtree",
    "RegionBoundsWarning",
    # Geometry
    "circle_intersects_rectangle",
    "point_in_circle",
    "quadrant_of",
    "split_region",
    # Linear scan
    "points_in_circle",
    # Validation
    "ValidationError",
    "InvalidPointError",
    "InvalidQuadrantError",
    "EmptyPointSetError",
    "validate_point",
    "validate_quadrant",
]
