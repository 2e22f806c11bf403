"""
Conversion between core geometry types and Qt geometry types.

The core works with plain Point/Rectangle values so it stays independent of
the widget layer; the canvas converts at its boundary.
"""

from PyQt6.QtCore import QPointF, QRectF

from ..core.geometry import Point, Rectangle


def from_qpointf(pos: QPointF) -> Point:
    """Convert a Qt scene position to a Point."""
    return Point(pos.x(), pos.y())


def to_qrectf(rect: Rectangle) -> QRectF:
    """Convert a normalized Rectangle to QRectF."""
    return QRectF(rect.origin.x, rect.origin.y, rect.width, rect.height)


def format_dimensions(rect: Rectangle) -> str:
    """
    Format rectangle size for the dimension label.

    Whole numbers print without a decimal part, e.g. "40 x 60".
    """
    return f"{rect.width:g} x {rect.height:g}"


__all__ = ['from_qpointf', 'to_qrectf', 'format_dimensions']
