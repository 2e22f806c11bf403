"""
SquaresCanvas - Graphics view that draws rectangles from drag snapshots

Two roles:
- Input adapter: left mouse press/move/release become StartDrag/Move/EndDrag
- Renderer: observes the state store and keeps scene items in sync with
  the published snapshots and shape count
"""

import logging
from typing import Optional, List

from PyQt6.QtWidgets import (
    QGraphicsView, QGraphicsScene, QGraphicsRectItem,
    QGraphicsSimpleTextItem, QWidget
)
from PyQt6.QtCore import Qt, pyqtSignal, QRectF
from PyQt6.QtGui import QPainter, QPen, QBrush, QColor, QCursor, QFont

from ..config import Config
from ..core.commands import StartDrag, Move, EndDrag
from ..core.drag_state_machine import DragStateMachine, SquaresState
from ..core.geometry import Rectangle
from ..events.state_store import SubscriptionHandle
from ..utils.qt_geometry import from_qpointf, to_qrectf, format_dimensions

logger = logging.getLogger(__name__)


class SquaresCanvas(QGraphicsView):
    """
    Drawing surface for drag-to-rectangle shapes.

    Committed shapes are kept in commit order; whenever a snapshot reports
    fewer shapes than are drawn, the most recently committed ones are
    removed. That is how Undo and Clear reach the screen.
    """

    # Signals
    shapes_changed = pyqtSignal(int)  # committed shape count after a render

    def __init__(self, machine: DragStateMachine, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self._machine = machine
        self._scene = QGraphicsScene()

        # Drawing state
        self._active_item: Optional[QGraphicsRectItem] = None
        self._committed_items: List[QGraphicsRectItem] = []
        self._unseen_count = 0  # shapes committed before subscribing, never drawn

        self._setup_view()

        self._replaying = True
        try:
            self._subscription: Optional[SubscriptionHandle] = machine.subscribe(self.apply_state)
        finally:
            self._replaying = False

    def _setup_view(self):
        """Configure the graphics view."""
        self.setScene(self._scene)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setViewportUpdateMode(QGraphicsView.ViewportUpdateMode.FullViewportUpdate)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setFrameShape(QGraphicsView.Shape.NoFrame)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.setTransformationAnchor(QGraphicsView.ViewportAnchor.NoAnchor)
        self.setBackgroundBrush(QBrush(QColor(Config.CANVAS_BACKGROUND)))
        self.setCursor(QCursor(Qt.CursorShape.CrossCursor))

    # ==================== Properties ====================

    @property
    def machine(self) -> DragStateMachine:
        return self._machine

    def shape_count(self) -> int:
        """Number of committed shapes currently drawn."""
        return len(self._committed_items)

    def committed_rects(self) -> List[QRectF]:
        """Scene rectangles of committed shapes, oldest first."""
        return [item.rect() for item in self._committed_items]

    def active_rect(self) -> Optional[QRectF]:
        """Scene rectangle of the shape being dragged, if any."""
        if self._active_item is None:
            return None
        return self._active_item.rect()

    def detach(self):
        """Stop observing the state store."""
        if self._subscription is not None:
            self._machine.unsubscribe(self._subscription)
            self._subscription = None

    # ==================== Mouse Events ====================

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            pos = self.mapToScene(event.position().toPoint())
            self._machine.submit(StartDrag(from_qpointf(pos)))
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if self._machine.current().is_dragging:
            pos = self.mapToScene(event.position().toPoint())
            self._machine.submit(Move(from_qpointf(pos)))
            event.accept()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton and self._machine.current().is_dragging:
            pos = self.mapToScene(event.position().toPoint())
            self._machine.submit(EndDrag(from_qpointf(pos)))
            event.accept()
        else:
            super().mouseReleaseEvent(event)

    # ==================== Rendering ====================

    def apply_state(self, state: SquaresState):
        """Bring the scene in line with a published snapshot."""
        command = state.last_command

        if self._replaying:
            # Only the shape still being dragged can be rebuilt from a replay;
            # earlier commits sit below everything drawn from now on
            self._unseen_count = state.shape_count
            if self._unseen_count:
                logger.debug(f"{self._unseen_count} shape(s) committed before subscribe are not drawn")
            if state.is_dragging:
                self._begin_shape(state.rectangle)
        elif isinstance(command, StartDrag):
            self._discard_active_shape()
            self._begin_shape(state.rectangle)
        elif isinstance(command, (Move, EndDrag)):
            self._update_active_shape(state.rectangle)
            if isinstance(command, EndDrag):
                self._commit_active_shape()

        self._reconcile(state.shape_count)
        self.shapes_changed.emit(len(self._committed_items))

    def _begin_shape(self, rect: Rectangle):
        """Start a new zero-size shape at the anchor."""
        item = QGraphicsRectItem(to_qrectf(rect))
        item.setPen(self._create_pen())
        item.setBrush(self._create_brush())

        label = QGraphicsSimpleTextItem(item)
        label.setBrush(QBrush(QColor(Config.DIMENSION_LABEL_COLOR)))
        label.setFont(QFont('Arial', Config.DIMENSION_LABEL_FONT_SIZE))

        self._scene.addItem(item)
        self._active_item = item
        self._update_label(item, rect)

    def _update_active_shape(self, rect: Rectangle):
        """Resize the shape being dragged."""
        if self._active_item is None:
            self._begin_shape(rect)
            return
        self._active_item.setRect(to_qrectf(rect))
        self._update_label(self._active_item, rect)

    def _commit_active_shape(self):
        """Move the shape being dragged to the committed list."""
        if self._active_item is None:
            return
        self._committed_items.append(self._active_item)
        self._active_item = None

    def _discard_active_shape(self):
        if self._active_item is not None:
            self._remove_item(self._active_item)
            self._active_item = None

    def _reconcile(self, shape_count: int):
        """
        Remove most recently committed shapes until the counts agree.

        Undone shapes come off the top of the stack: drawn shapes first,
        then the undrawn ones committed before this canvas subscribed.
        """
        while self._committed_items and self._unseen_count + len(self._committed_items) > shape_count:
            self._remove_item(self._committed_items.pop())
        self._unseen_count = min(self._unseen_count, shape_count)

        if self._unseen_count + len(self._committed_items) < shape_count:
            logger.warning(
                f"Canvas tracks {self._unseen_count + len(self._committed_items)} "
                f"shape(s) but state reports {shape_count}"
            )

    def _remove_item(self, item: QGraphicsRectItem):
        if item.scene() is not None:
            self._scene.removeItem(item)

    # ==================== Helpers ====================

    def _update_label(self, item: QGraphicsRectItem, rect: Rectangle):
        """Show the width/height next to the shape's top-right corner."""
        labels = [child for child in item.childItems()
                  if isinstance(child, QGraphicsSimpleTextItem)]
        if not labels:
            return
        label = labels[0]
        label.setText(format_dimensions(rect))
        label.setPos(rect.right + Config.DIMENSION_LABEL_OFFSET, rect.origin.y)

    def _create_pen(self) -> QPen:
        pen = QPen(QColor(Config.SHAPE_COLOR), Config.SHAPE_PEN_WIDTH)
        pen.setJoinStyle(Qt.PenJoinStyle.MiterJoin)
        return pen

    def _create_brush(self) -> QBrush:
        color = QColor(Config.SHAPE_COLOR)
        color.setAlphaF(Config.SHAPE_FILL_OPACITY)
        return QBrush(color)

    # ==================== Resize ====================

    def resizeEvent(self, event):
        """Keep scene coordinates equal to viewport coordinates."""
        super().resizeEvent(event)
        self.setSceneRect(0, 0, self.width(), self.height())


__all__ = ['SquaresCanvas']
