"""
Commands accepted by the drag state machine.

The input adapter maps raw pointer/button events onto these shapes:
- StartDrag: pointer pressed
- Move: pointer moved while pressed
- EndDrag: pointer released
- Undo / Clear: toolbar buttons
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Union

from .geometry import Point


class InvalidCommandError(ValueError):
    """Raised when the host submits something that is not a valid command."""


@dataclass(frozen=True)
class StartDrag:
    """Begin a gesture at point."""

    point: Point


@dataclass(frozen=True)
class Move:
    """Pointer moved to point during a gesture."""

    point: Point


@dataclass(frozen=True)
class EndDrag:
    """Finish the gesture at point, committing a shape."""

    point: Point


@dataclass(frozen=True)
class Undo:
    """Remove the most recently committed shape."""


@dataclass(frozen=True)
class Clear:
    """Remove all committed shapes."""


Command = Union[StartDrag, Move, EndDrag, Undo, Clear]

POINTER_COMMANDS = (StartDrag, Move, EndDrag)
COMMAND_TYPES = POINTER_COMMANDS + (Undo, Clear)


def _is_coordinate(value) -> bool:
    # bool is a Real subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def validate_command(command) -> Command:
    """
    Check that command is one of the known command shapes.

    Args:
        command: Object submitted by the host

    Returns:
        The same command, unchanged

    Raises:
        InvalidCommandError: If the object is not a command, or a pointer
            command carries something other than a finite Point
    """
    if not isinstance(command, COMMAND_TYPES):
        raise InvalidCommandError(f"Unknown command: {command!r}")

    if isinstance(command, POINTER_COMMANDS):
        point = command.point
        if not isinstance(point, Point):
            raise InvalidCommandError(
                f"{type(command).__name__} needs a Point, got {point!r}"
            )
        if not (_is_coordinate(point.x) and _is_coordinate(point.y)):
            raise InvalidCommandError(
                f"{type(command).__name__} has non-finite coordinates: {point!r}"
            )

    return command


__all__ = [
    'InvalidCommandError',
    'StartDrag',
    'Move',
    'EndDrag',
    'Undo',
    'Clear',
    'Command',
    'validate_command',
]
