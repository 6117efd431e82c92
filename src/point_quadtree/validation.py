"""
Input validation utilities for the point quadtree.

Provides centralized validation for points and quadrant indices.
Raises descriptive exceptions on invalid input.
"""

from __future__ import annotations

from typing import Any

from .types import Quadrant


class ValidationError(ValueError):
    """Base exception for quadtree validation errors."""

    pass


class InvalidPointError(ValidationError):
    """Raised when a point lacks x or y coordinates."""

    pass


class InvalidQuadrantError(ValidationError):
    """Raised when a quadrant index is not in 1-4."""

    pass


class EmptyPointSetError(ValidationError):
    """Raised when a tree is built from no points."""

    pass


def validate_point(point: Any) -> Any:
    """
    Validate that a point exposes x and y coordinates.

    Coordinate types are not checked; anything the geometry can compare
    and subtract (int, float, Decimal, Fraction, numpy scalars) works.

    Args:
        point: Candidate point

    Returns:
        The point, unchanged

    Raises:
        InvalidPointError: If x or y is missing
    """
    for attr in ("x", "y"):
        if not hasattr(point, attr):
            raise InvalidPointError(f"Point must have an '{attr}' attribute, got {point!r}")
    return point


def validate_quadrant(quadrant: int) -> Quadrant:
    """
    Validate a quadrant index.

    Args:
        quadrant: Quadrant number (1=NE, 2=NW, 3=SW, 4=SE)

    Returns:
        The matching Quadrant member

    Raises:
        InvalidQuadrantError: If quadrant is not 1 through 4
    """
    try:
        return Quadrant(quadrant)
    except ValueError:
        raise InvalidQuadrantError(f"quadrant must be 1 through 4, got {quadrant!r}") from None


__all__ = [
    "ValidationError",
    "InvalidPointError",
    "InvalidQuadrantError",
    "EmptyPointSetError",
    "validate_point",
    "validate_quadrant",
]
