"""
Tests for the canvas renderer and the toolbar.

Covers:
- Canvas items following snapshots (begin, resize, commit)
- Undo removing the most recently committed shape, Clear removing all
- Clear mid-drag keeping the in-progress shape
- Mouse press/release driving the state machine
- Toolbar button enabled state and counter text
"""
import pytest
from PyQt6.QtCore import Qt, QPoint, QRectF

from squares_canvas.config import Config
from squares_canvas.core import (
    Point, StartDrag, Move, EndDrag, Undo, Clear, InteractionPhase
)
from squares_canvas.utils.qt_geometry import from_qpointf
from squares_canvas.widgets import SquaresCanvas, SquaresToolbar, MainWindow


@pytest.fixture
def canvas(qtbot, machine):
    widget = SquaresCanvas(machine)
    qtbot.addWidget(widget)
    widget.resize(400, 300)
    return widget


@pytest.fixture
def toolbar(qtbot, machine):
    widget = SquaresToolbar(machine)
    qtbot.addWidget(widget)
    widget.show()
    qtbot.waitExposed(widget)
    return widget


# ══════════════════════════════════════════════════════════════════════════
# Canvas rendering
# ══════════════════════════════════════════════════════════════════════════

class TestCanvasRendering:

    def test_starts_empty(self, canvas):
        assert canvas.shape_count() == 0
        assert canvas.active_rect() is None

    def test_start_drag_creates_active_shape(self, canvas, machine):
        machine.submit(StartDrag(Point(10, 10)))
        assert canvas.active_rect() == QRectF(10, 10, 0, 0)
        assert canvas.shape_count() == 0

    def test_move_resizes_active_shape(self, canvas, machine):
        machine.submit(StartDrag(Point(50, 70)))
        machine.submit(Move(Point(10, 10)))
        assert canvas.active_rect() == QRectF(10, 10, 40, 60)

    def test_end_drag_commits(self, canvas, machine, gesture):
        gesture(machine, (10, 10), (50, 70))
        assert canvas.active_rect() is None
        assert canvas.committed_rects() == [QRectF(10, 10, 40, 60)]

    def test_undo_removes_most_recent(self, canvas, machine, gesture):
        gesture(machine, (0, 0), (10, 10))
        gesture(machine, (20, 20), (30, 40))
        machine.submit(Undo())
        assert canvas.committed_rects() == [QRectF(0, 0, 10, 10)]

    def test_clear_removes_all(self, canvas, machine, gesture):
        for i in range(3):
            gesture(machine, (i * 10, 0), (i * 10 + 5, 5))
        machine.submit(Clear())
        assert canvas.shape_count() == 0
        assert canvas.scene().items() == []

    def test_clear_mid_drag_keeps_active_shape(self, canvas, machine, gesture):
        gesture(machine, (0, 0), (10, 10))
        machine.submit(StartDrag(Point(20, 20)))
        machine.submit(Move(Point(40, 50)))
        machine.submit(Clear())

        assert canvas.shape_count() == 0
        assert canvas.active_rect() == QRectF(20, 20, 20, 30)

        machine.submit(EndDrag(Point(40, 50)))
        assert canvas.committed_rects() == [QRectF(20, 20, 20, 30)]

    def test_count_matches_machine(self, canvas, machine, gesture):
        gesture(machine, (0, 0), (1, 1))
        gesture(machine, (0, 0), (2, 2))
        machine.submit(Undo())
        gesture(machine, (0, 0), (3, 3))
        assert canvas.shape_count() == machine.current().shape_count == 2

    def test_shapes_changed_signal(self, qtbot, canvas, machine, gesture):
        machine.submit(StartDrag(Point(0, 0)))
        with qtbot.waitSignal(canvas.shapes_changed, timeout=1000) as blocker:
            machine.submit(EndDrag(Point(5, 5)))
        assert blocker.args == [1]

    def test_detach_stops_rendering(self, canvas, machine, gesture):
        canvas.detach()
        gesture(machine, (0, 0), (5, 5))
        assert canvas.shape_count() == 0

    def test_late_canvas_picks_up_drag(self, qtbot, machine):
        machine.submit(StartDrag(Point(5, 5)))
        machine.submit(Move(Point(15, 25)))
        late = SquaresCanvas(machine)
        qtbot.addWidget(late)
        assert late.active_rect() == QRectF(5, 5, 10, 20)

    def test_late_canvas_does_not_draw_replayed_commit(self, qtbot, machine, gesture):
        gesture(machine, (0, 0), (10, 10))
        gesture(machine, (20, 20), (30, 30))
        late = SquaresCanvas(machine)
        qtbot.addWidget(late)
        assert late.shape_count() == 0
        assert late.scene().items() == []

    def test_late_canvas_undo_removes_its_own_shapes_first(self, qtbot, machine, gesture):
        gesture(machine, (0, 0), (10, 10))
        gesture(machine, (20, 20), (30, 30))
        late = SquaresCanvas(machine)
        qtbot.addWidget(late)

        gesture(machine, (40, 40), (50, 60))
        assert late.committed_rects() == [QRectF(40, 40, 10, 20)]

        machine.submit(Undo())
        assert late.shape_count() == 0

        # undo past its own shapes into ones committed before it subscribed
        gesture(machine, (1, 1), (2, 2))
        machine.submit(Undo())
        machine.submit(Undo())
        assert machine.current().shape_count == 1
        assert late.shape_count() == 0

        gesture(machine, (5, 5), (6, 6))
        assert late.committed_rects() == [QRectF(5, 5, 1, 1)]
        machine.submit(Undo())
        assert late.shape_count() == 0
        assert machine.current().shape_count == 1


# ══════════════════════════════════════════════════════════════════════════
# Canvas input
# ══════════════════════════════════════════════════════════════════════════

class TestCanvasInput:

    def test_press_and_release_draw_a_shape(self, qtbot, canvas, machine):
        canvas.show()
        qtbot.waitExposed(canvas)

        press_at, release_at = QPoint(10, 10), QPoint(50, 70)
        qtbot.mousePress(canvas.viewport(), Qt.MouseButton.LeftButton, pos=press_at)
        assert machine.current().phase is InteractionPhase.DRAGGING
        assert machine.current().anchor == from_qpointf(canvas.mapToScene(press_at))

        qtbot.mouseRelease(canvas.viewport(), Qt.MouseButton.LeftButton, pos=release_at)
        state = machine.current()
        assert state.phase is InteractionPhase.IDLE
        assert state.shape_count == 1
        assert state.current == from_qpointf(canvas.mapToScene(release_at))
        assert canvas.shape_count() == 1

    def test_right_button_ignored(self, qtbot, canvas, machine):
        canvas.show()
        qtbot.waitExposed(canvas)
        qtbot.mousePress(canvas.viewport(), Qt.MouseButton.RightButton, pos=QPoint(10, 10))
        assert machine.current().phase is InteractionPhase.IDLE


# ══════════════════════════════════════════════════════════════════════════
# Toolbar
# ══════════════════════════════════════════════════════════════════════════

class TestToolbar:

    def test_initially_disabled(self, toolbar):
        assert not toolbar.undo_button.isEnabled()
        assert not toolbar.clear_button.isEnabled()
        assert toolbar.count_label.text() == "Squares: 0"

    def test_enabled_after_commit(self, toolbar, machine, gesture):
        gesture(machine, (0, 0), (5, 5))
        assert toolbar.undo_button.isEnabled()
        assert toolbar.clear_button.isEnabled()
        assert toolbar.count_label.text() == Config.format_counter(1)

    def test_undo_button(self, qtbot, toolbar, machine, gesture):
        gesture(machine, (0, 0), (5, 5))
        gesture(machine, (0, 0), (6, 6))
        with qtbot.waitSignal(toolbar.undo_requested, timeout=1000):
            qtbot.mouseClick(toolbar.undo_button, Qt.MouseButton.LeftButton)
        assert machine.current().shape_count == 1
        assert toolbar.count_label.text() == "Squares: 1"

    def test_clear_button_disables_controls(self, qtbot, toolbar, machine, gesture):
        gesture(machine, (0, 0), (5, 5))
        gesture(machine, (0, 0), (6, 6))
        with qtbot.waitSignal(toolbar.clear_requested, timeout=1000):
            qtbot.mouseClick(toolbar.clear_button, Qt.MouseButton.LeftButton)
        assert machine.current().shape_count == 0
        assert not toolbar.undo_button.isEnabled()
        assert not toolbar.clear_button.isEnabled()


class TestMainWindow:

    def test_window_shares_one_machine(self, qtbot, machine, gesture):
        window = MainWindow(machine)
        qtbot.addWidget(window)
        gesture(machine, (0, 0), (5, 5))
        assert window.canvas.shape_count() == 1
        assert window.toolbar.count_label.text() == "Squares: 1"

    def test_close_detaches_observers(self, qtbot, machine):
        window = MainWindow(machine)
        qtbot.addWidget(window)
        window.show()
        qtbot.waitExposed(window)
        observers = machine.store.observer_count()
        window.close()
        assert machine.store.observer_count() == observers - 2
