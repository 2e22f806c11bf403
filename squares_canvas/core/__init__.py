"""Core drawing logic for Squares Canvas"""

from .geometry import Point, DragDirection, Rectangle, direction_of, resolve
from .commands import (
    InvalidCommandError, StartDrag, Move, EndDrag, Undo, Clear, Command
)
from .shape_ledger import ShapeLedger
from .drag_state_machine import DragStateMachine, InteractionPhase, SquaresState

__all__ = [
    # Geometry
    'Point',
    'DragDirection',
    'Rectangle',
    'direction_of',
    'resolve',
    # Commands
    'InvalidCommandError',
    'StartDrag',
    'Move',
    'EndDrag',
    'Undo',
    'Clear',
    'Command',
    # State
    'ShapeLedger',
    'DragStateMachine',
    'InteractionPhase',
    'SquaresState',
]
