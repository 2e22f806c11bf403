"""
DragStateMachine - Turns drawing commands into immutable snapshots

Phases:
- IDLE: no gesture in progress (initial state)
- DRAGGING: between StartDrag and its matching EndDrag

Undo and Clear are accepted in either phase, so the user can clear
while a rectangle is still being dragged out.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional

from .commands import (
    Command, StartDrag, Move, EndDrag, Undo, Clear, validate_command
)
from .geometry import Point, DragDirection, Rectangle, direction_of, resolve
from .shape_ledger import ShapeLedger
from ..events.state_store import StateStore, SubscriptionHandle

logger = logging.getLogger(__name__)


class InteractionPhase(Enum):
    """Gesture phase of the drawing canvas."""
    IDLE = 0
    DRAGGING = 1


@dataclass(frozen=True)
class SquaresState:
    """One published snapshot of the drawing state."""

    phase: InteractionPhase = InteractionPhase.IDLE
    anchor: Point = Point()
    current: Point = Point()
    direction: DragDirection = DragDirection()
    rectangle: Rectangle = Rectangle()
    last_command: Optional[Command] = None
    shape_count: int = 0

    @property
    def is_dragging(self) -> bool:
        return self.phase is InteractionPhase.DRAGGING


def _with_geometry(state: SquaresState, anchor: Point, current: Point) -> SquaresState:
    """Copy state with anchor/current and the geometry derived from them."""
    return replace(
        state,
        anchor=anchor,
        current=current,
        direction=direction_of(anchor, current),
        rectangle=resolve(anchor, current),
    )


class DragStateMachine:
    """
    Drag-to-rectangle state machine.

    Owns the shape ledger and publishes one snapshot per accepted command
    into its StateStore. Commands that make no sense in the current phase
    are ignored and publish nothing.

    Usage:
        machine = DragStateMachine()
        machine.subscribe(canvas.apply_state)
        machine.submit(StartDrag(Point(10, 10)))
        machine.submit(Move(Point(50, 70)))
        machine.submit(EndDrag(Point(50, 70)))
    """

    def __init__(self, store: Optional[StateStore] = None,
                 ledger: Optional[ShapeLedger] = None):
        if store is None:
            self._ledger = ledger or ShapeLedger()
            store = StateStore(SquaresState(shape_count=self._ledger.count))
        elif ledger is None:
            self._ledger = ShapeLedger(store.current().shape_count)
        elif store.current().shape_count != ledger.count:
            raise ValueError(
                f"Store snapshot reports {store.current().shape_count} shape(s) "
                f"but ledger holds {ledger.count}"
            )
        else:
            self._ledger = ledger
        self._store = store

        self._handlers = {
            StartDrag: self._on_start_drag,
            Move: self._on_move,
            EndDrag: self._on_end_drag,
            Undo: self._on_undo,
            Clear: self._on_clear,
        }

    # ==================== Properties ====================

    @property
    def store(self) -> StateStore:
        return self._store

    @property
    def ledger(self) -> ShapeLedger:
        return self._ledger

    @property
    def phase(self) -> InteractionPhase:
        return self.current().phase

    # ==================== Public API ====================

    def current(self) -> SquaresState:
        """Get the latest published snapshot."""
        return self._store.current()

    def subscribe(self, observer: Callable[[SquaresState], None]) -> SubscriptionHandle:
        """Register an observer; it receives the current snapshot immediately."""
        return self._store.subscribe(observer)

    def unsubscribe(self, handle: SubscriptionHandle) -> bool:
        """Remove an observer registered with subscribe()."""
        return self._store.unsubscribe(handle)

    def submit(self, command: Command) -> Optional[SquaresState]:
        """
        Process one command.

        Args:
            command: StartDrag, Move, EndDrag, Undo or Clear

        Returns:
            The published snapshot, or None if the command was ignored

        Raises:
            InvalidCommandError: If command is not a valid command object
            Exception: Whatever an observer raises while the snapshot is
                published; state and ledger already reflect the command
        """
        try:
            validate_command(command)
        except ValueError:
            logger.warning(f"Rejected command: {command!r}")
            raise

        state = self._store.current()
        handler = next(
            handler for command_type, handler in self._handlers.items()
            if isinstance(command, command_type)
        )
        next_state = handler(state, command)

        if next_state is None:
            logger.debug(f"Ignored {type(command).__name__} in phase {state.phase.name}")
            return None

        self._store.publish(next_state)
        return next_state

    # ==================== Transitions ====================

    def _on_start_drag(self, state: SquaresState, command: StartDrag) -> Optional[SquaresState]:
        if state.is_dragging:
            return None

        logger.debug(f"Drag started at ({command.point.x}, {command.point.y})")
        next_state = _with_geometry(state, command.point, command.point)
        return replace(next_state, phase=InteractionPhase.DRAGGING, last_command=command)

    def _on_move(self, state: SquaresState, command: Move) -> Optional[SquaresState]:
        if not state.is_dragging:
            return None

        next_state = _with_geometry(state, state.anchor, command.point)
        return replace(next_state, last_command=command)

    def _on_end_drag(self, state: SquaresState, command: EndDrag) -> Optional[SquaresState]:
        if not state.is_dragging:
            return None

        next_state = _with_geometry(state, state.anchor, command.point)
        count = self._ledger.commit()
        logger.debug(f"Shape committed: {next_state.rectangle} (total {count})")
        return replace(
            next_state,
            phase=InteractionPhase.IDLE,
            last_command=command,
            shape_count=count,
        )

    def _on_undo(self, state: SquaresState, command: Undo) -> Optional[SquaresState]:
        if self._ledger.count == 0:
            return None

        count = self._ledger.undo()
        logger.debug(f"Undo: {count} shape(s) left")
        return replace(state, last_command=command, shape_count=count)

    def _on_clear(self, state: SquaresState, command: Clear) -> Optional[SquaresState]:
        if self._ledger.count == 0:
            return None

        self._ledger.clear()
        logger.debug("Cleared all shapes")
        return replace(state, last_command=command, shape_count=0)


__all__ = ['DragStateMachine', 'InteractionPhase', 'SquaresState']
