"""UI widgets for Squares Canvas"""

from .squares_canvas import SquaresCanvas
from .squares_toolbar import SquaresToolbar
from .main_window import MainWindow

__all__ = ['SquaresCanvas', 'SquaresToolbar', 'MainWindow']
