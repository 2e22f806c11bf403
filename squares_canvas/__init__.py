"""
Squares Canvas

Drag out rectangles on a Qt canvas, with undo and clear-all.
"""

__version__ = "1.0.0"

from .config import Config
from .core import (
    Point, DragDirection, Rectangle, resolve,
    InvalidCommandError, StartDrag, Move, EndDrag, Undo, Clear,
    ShapeLedger, DragStateMachine, InteractionPhase, SquaresState,
)
from .events import StateStore, SubscriptionHandle

__all__ = [
    'Config',
    'Point',
    'DragDirection',
    'Rectangle',
    'resolve',
    'InvalidCommandError',
    'StartDrag',
    'Move',
    'EndDrag',
    'Undo',
    'Clear',
    'ShapeLedger',
    'DragStateMachine',
    'InteractionPhase',
    'SquaresState',
    'StateStore',
    'SubscriptionHandle',
]
