"""
Main window for Squares Canvas

Layout:
- Top: SquaresToolbar (Undo, Clear, counter)
- Center: SquaresCanvas
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout
from PyQt6.QtGui import QKeySequence, QShortcut

from ..config import Config
from ..core.commands import Undo
from ..core.drag_state_machine import DragStateMachine
from .squares_canvas import SquaresCanvas
from .squares_toolbar import SquaresToolbar

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Main application window

    Owns nothing global: the state machine is passed in (or created here)
    and handed to every child that needs it.
    """

    def __init__(self, machine: Optional[DragStateMachine] = None,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)

        self._machine = machine or DragStateMachine()

        self.setWindowTitle(Config.APP_NAME)
        self.resize(Config.DEFAULT_WINDOW_WIDTH, Config.DEFAULT_WINDOW_HEIGHT)

        self._create_widgets()
        self._create_layout()
        self._setup_shortcuts()

    def _create_widgets(self):
        """Create child widgets"""
        self._toolbar = SquaresToolbar(self._machine)
        self._canvas = SquaresCanvas(self._machine)

    def _create_layout(self):
        """Create window layout"""
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(self._toolbar)
        layout.addWidget(self._canvas, 1)
        self.setCentralWidget(central)

    def _setup_shortcuts(self):
        """Setup keyboard shortcuts"""
        undo_shortcut = QShortcut(QKeySequence(QKeySequence.StandardKey.Undo), self)
        undo_shortcut.activated.connect(lambda: self._machine.submit(Undo()))

    @property
    def machine(self) -> DragStateMachine:
        return self._machine

    @property
    def canvas(self) -> SquaresCanvas:
        return self._canvas

    @property
    def toolbar(self) -> SquaresToolbar:
        return self._toolbar

    def closeEvent(self, event):
        """Detach observers before the widgets go away"""
        self._canvas.detach()
        self._toolbar.detach()
        logger.info(f"Closing with {self._machine.current().shape_count} square(s) drawn")
        super().closeEvent(event)


__all__ = ['MainWindow']
