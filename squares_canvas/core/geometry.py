"""
Geometry primitives for drag-to-rectangle drawing.

Provides the value types shared by the whole drawing pipeline and the
resolver that turns an anchor/current point pair into a normalized rectangle:
- Point: immutable 2D coordinate
- DragDirection: which way the pointer has moved from the anchor
- Rectangle: top-left origin plus non-negative width/height
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Immutable 2D point in canvas coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class DragDirection:
    """Direction of the pointer relative to the anchor point."""

    dragging_left: bool = False
    dragging_up: bool = False


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned rectangle described by its top-left corner.

    width and height are never negative.
    """

    origin: Point = Point()
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.origin.x + self.width

    @property
    def bottom(self) -> float:
        return self.origin.y + self.height

    def is_empty(self) -> bool:
        """True if the rectangle has no area."""
        return self.width == 0 or self.height == 0


def direction_of(anchor: Point, current: Point) -> DragDirection:
    """
    Get the drag direction from anchor to current.

    Args:
        anchor: Point where the gesture started
        current: Latest pointer position

    Returns:
        DragDirection with left/up flags set when current is left of or
        above the anchor
    """
    return DragDirection(
        dragging_left=anchor.x > current.x,
        dragging_up=anchor.y > current.y,
    )


def resolve(anchor: Point, current: Point) -> Rectangle:
    """
    Resolve the rectangle spanned by two opposite corners.

    The result is the same whichever corner the user dragged from, so
    resolve(a, b) == resolve(b, a).

    Args:
        anchor: Point where the gesture started
        current: Latest pointer position

    Returns:
        Normalized Rectangle with top-left origin
    """
    return Rectangle(
        origin=Point(min(anchor.x, current.x), min(anchor.y, current.y)),
        width=abs(current.x - anchor.x),
        height=abs(current.y - anchor.y),
    )


__all__ = ['Point', 'DragDirection', 'Rectangle', 'direction_of', 'resolve']
