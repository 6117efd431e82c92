"""
Point quadtree for circular range queries.

Each node anchors exactly one point and owns an axis-aligned region.
Inserting a point routes it to one of four quadrants around the anchor,
creating a child leaf the first time a quadrant is used. The child's
region is the parent's region split at the parent's anchor.

The tree is never rebalanced, so its shape depends on insertion order.
Traversals use an explicit stack, which keeps chain-shaped trees built
from sorted input usable beyond the interpreter's recursion limit.
"""

from __future__ import annotations

import warnings
from typing import Generic, Iterable, Iterator, List, Optional, Tuple

from typing_extensions import Self

from .geometry import circle_intersects_rectangle, point_in_circle, quadrant_of, split_region
from .types import PointT, Quadrant, Region
from .validation import EmptyPointSetError, validate_point


class RegionBoundsWarning(UserWarning):
    """Warning for points that lie outside the root region."""

    pass


class PointQuadtree(Generic[PointT]):
    """
    A node of a point quadtree, and the subtree rooted at it.

    Usage:
        tree = PointQuadtree(Point(5, 5), 0, 0, 10, 10)
        tree.insert(Point(7, 3))
        tree.insert(Point(3, 7))

        tree.size()                  # 3
        tree.find_in_circle(5, 5, 3) # points within distance 3 of (5, 5)

    Quadrants are numbered 1=NE, 2=NW, 3=SW, 4=SE with y growing
    downward. A point with the same x as the anchor goes west, and one
    with the same y goes south.

    Attributes:
        point: Anchor point stored at this node
        x1, y1: Upper-left corner of the region
        x2, y2: Lower-right corner of the region
    """

    __slots__ = ("_point", "_x1", "_y1", "_x2", "_y2", "_children")

    def __init__(self, point: PointT, x1: float, y1: float, x2: float, y2: float):
        """
        Initialize a leaf holding point within the given region.

        The region is not checked against the point or for ordering.

        Args:
            point: Anchor point (anything with x and y)
            x1, y1: Upper-left corner
            x2, y2: Lower-right corner
        """
        self._point: PointT = validate_point(point)
        self._x1 = x1
        self._y1 = y1
        self._x2 = x2
        self._y2 = y2
        # Slot i holds the child for quadrant i + 1
        self._children: List[Optional[PointQuadtree[PointT]]] = [None, None, None, None]

    # Accessors

    @property
    def point(self) -> PointT:
        return self._point

    @property
    def x1(self) -> float:
        return self._x1

    @property
    def y1(self) -> float:
        return self._y1

    @property
    def x2(self) -> float:
        return self._x2

    @property
    def y2(self) -> float:
        return self._y2

    @property
    def region(self) -> Region:
        """Region as (x1, y1, x2, y2)."""
        return (self._x1, self._y1, self._x2, self._y2)

    def get_child(self, quadrant: int) -> Optional[PointQuadtree[PointT]]:
        """
        Get the child at a quadrant.

        Args:
            quadrant: 1 through 4

        Returns:
            The child node, or None if the quadrant is empty or not 1-4
        """
        if quadrant not in (1, 2, 3, 4):
            return None
        return self._children[int(quadrant) - 1]

    def has_child(self, quadrant: int) -> bool:
        """True if the quadrant holds a child."""
        return self.get_child(quadrant) is not None

    def children(self) -> Iterator[Tuple[Quadrant, PointQuadtree[PointT]]]:
        """Yield (quadrant, child) for occupied quadrants, in order 1-4."""
        for i, child in enumerate(self._children):
            if child is not None:
                yield Quadrant(i + 1), child

    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return all(child is None for child in self._children)

    def quadrant_for(self, point: PointT) -> Quadrant:
        """Quadrant that point would be routed to from this node."""
        return quadrant_of(self._point.x, self._point.y, point.x, point.y)

    # Mutation

    def insert(self, point: PointT) -> PointQuadtree[PointT]:
        """
        Insert a point into the subtree.

        Always succeeds. Duplicates and points outside the region are
        routed by the same quadrant rule as any other point.

        Args:
            point: Point to store

        Returns:
            The new leaf that anchors the point
        """
        validate_point(point)
        node = self
        while True:
            ax, ay = node._point.x, node._point.y
            quadrant = quadrant_of(ax, ay, point.x, point.y)
            child = node._children[quadrant - 1]
            if child is None:
                child = type(self)(point, *split_region(node.region, ax, ay, quadrant))
                node._children[quadrant - 1] = child
                return child
            node = child

    # Traversal

    def nodes(self) -> Iterator[PointQuadtree[PointT]]:
        """Yield every node in the subtree, pre-order, children in quadrant order."""
        stack: List[PointQuadtree[PointT]] = [self]
        while stack:
            node = stack.pop()
            yield node
            # Reversed so quadrant 1 is visited first
            for child in reversed(node._children):
                if child is not None:
                    stack.append(child)

    def size(self) -> int:
        """Number of points in the subtree, counting this node."""
        return sum(1 for _ in self.nodes())

    def all_points(self) -> List[PointT]:
        """
        All points in the subtree as a new list.

        This node's point comes first, followed by each child's points in
        quadrant order 1, 2, 3, 4. This is not insertion order.
        """
        return [node._point for node in self.nodes()]

    def depth(self) -> int:
        """Height of the subtree; a leaf has depth 1."""
        deepest = 0
        stack: List[Tuple[PointQuadtree[PointT], int]] = [(self, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            for child in node._children:
                if child is not None:
                    stack.append((child, level + 1))
        return deepest

    def find_in_circle(self, cx: float, cy: float, cr: float) -> List[PointT]:
        """
        Find all points within a closed disk.

        A subtree is skipped as soon as its region misses the circle.
        While every anchor lies inside its node's region, child regions
        nest inside their parent's and nothing is lost. Points stored
        outside the root region can be missed.

        Args:
            cx, cy: Circle center
            cr: Circle radius (boundary included)

        Returns:
            Matching points in pre-order, quadrants 1-4
        """
        results: List[PointT] = []
        stack: List[PointQuadtree[PointT]] = [self]
        while stack:
            node = stack.pop()
            if not circle_intersects_rectangle(
                cx, cy, cr, node._x1, node._y1, node._x2, node._y2
            ):
                continue
            if point_in_circle(node._point.x, node._point.y, cx, cy, cr):
                results.append(node._point)
            for child in reversed(node._children):
                if child is not None:
                    stack.append(child)
        return results

    # Python protocol

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[PointT]:
        for node in self.nodes():
            yield node._point

    def __repr__(self) -> str:
        x1, y1, x2, y2 = self.region
        return f"PointQuadtree(point={self._point!r}, region=({x1}, {y1}, {x2}, {y2}))"

    @classmethod
    def from_points(
        cls,
        points: Iterable[PointT],
        bounds: Optional[Region] = None,
        padding: float = 10.0,
    ) -> Self:
        """
        Build a tree by inserting points in order.

        The first point becomes the root anchor.

        Args:
            points: Points with x and y attributes
            bounds: Root region (x1, y1, x2, y2); computed from the points if None
            padding: Margin added around computed bounds

        Returns:
            Root of the populated tree

        Raises:
            EmptyPointSetError: If points is empty
        """
        pts = list(points)
        if not pts:
            raise EmptyPointSetError("Cannot build a quadtree from an empty point set")

        if bounds is None:
            min_x = min(p.x for p in pts) - padding
            min_y = min(p.y for p in pts) - padding
            max_x = max(p.x for p in pts) + padding
            max_y = max(p.y for p in pts) + padding
            bounds = (min_x, min_y, max_x, max_y)
        else:
            x1, y1, x2, y2 = bounds
            outside = sum(1 for p in pts if not (x1 <= p.x <= x2 and y1 <= p.y <= y2))
            if outside:
                warnings.warn(
                    f"{outside} of {len(pts)} points lie outside bounds {tuple(bounds)}. "
                    "They are stored, but circle queries may not find them.",
                    RegionBoundsWarning,
                    stacklevel=2,
                )

        root = cls(pts[0], *bounds)
        for point in pts[1:]:
            root.insert(point)
        return root


__all__ = ["PointQuadtree", "RegionBoundsWarning"]
