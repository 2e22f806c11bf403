"""
Squares Toolbar Widget

Single-row toolbar with:
- Undo / Clear buttons, disabled while the canvas has no shapes
- "Squares: N" counter
"""

from typing import Optional

from PyQt6.QtWidgets import QWidget, QHBoxLayout, QPushButton, QLabel
from PyQt6.QtCore import pyqtSignal

from ..config import Config
from ..core.commands import Undo, Clear
from ..core.drag_state_machine import DragStateMachine, SquaresState
from ..events.state_store import SubscriptionHandle


class SquaresToolbar(QWidget):
    """Undo/Clear controls and shape counter bound to a DragStateMachine."""

    undo_requested = pyqtSignal()
    clear_requested = pyqtSignal()

    def __init__(self, machine: DragStateMachine, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._machine = machine

        self._build_ui()
        self._connect_signals()
        self._subscription: Optional[SubscriptionHandle] = machine.subscribe(self.apply_state)

    def _build_ui(self):
        """Build the toolbar UI."""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 4, 8, 4)
        layout.setSpacing(6)

        self._undo_btn = QPushButton("Undo")
        self._undo_btn.setToolTip("Remove the last square")
        self._undo_btn.setMinimumWidth(Config.TOOLBAR_BUTTON_MIN_WIDTH)
        layout.addWidget(self._undo_btn)

        self._clear_btn = QPushButton("Clear")
        self._clear_btn.setToolTip("Remove all squares")
        self._clear_btn.setMinimumWidth(Config.TOOLBAR_BUTTON_MIN_WIDTH)
        layout.addWidget(self._clear_btn)

        layout.addStretch()

        self._count_label = QLabel(Config.format_counter(0))
        layout.addWidget(self._count_label)

    def _connect_signals(self):
        self._undo_btn.clicked.connect(self._on_undo_clicked)
        self._clear_btn.clicked.connect(self._on_clear_clicked)

    # ==================== Accessors ====================

    @property
    def undo_button(self) -> QPushButton:
        return self._undo_btn

    @property
    def clear_button(self) -> QPushButton:
        return self._clear_btn

    @property
    def count_label(self) -> QLabel:
        return self._count_label

    def detach(self):
        """Stop observing the state store."""
        if self._subscription is not None:
            self._machine.unsubscribe(self._subscription)
            self._subscription = None

    # ==================== Handlers ====================

    def _on_undo_clicked(self):
        self.undo_requested.emit()
        self._machine.submit(Undo())

    def _on_clear_clicked(self):
        self.clear_requested.emit()
        self._machine.submit(Clear())

    def apply_state(self, state: SquaresState):
        """Update counter text and button states from a snapshot."""
        has_shapes = state.shape_count > 0
        self._undo_btn.setEnabled(has_shapes)
        self._clear_btn.setEnabled(has_shapes)
        self._count_label.setText(Config.format_counter(state.shape_count))


__all__ = ['SquaresToolbar']
