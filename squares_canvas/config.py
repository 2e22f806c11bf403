"""
Global configuration for Squares Canvas
"""

import os
import sys
from pathlib import Path
from typing import Final


class Config:
    """Central configuration class for all application settings"""

    # Application metadata
    APP_NAME: Final[str] = "Squares Canvas"
    APP_VERSION: Final[str] = "1.0.0"
    APP_AUTHOR: Final[str] = "Squares Canvas"

    # Paths
    APP_ROOT: Final[Path] = Path(__file__).parent
    LOG_FILE_NAME: Final[str] = "squares_canvas.log"

    # Logging
    LOG_ROOT_LOGGER: Final[str] = "squares_canvas"  # Package logger the handlers attach to
    LOG_FILE_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    LOG_CONSOLE_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
    LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

    # Window settings
    DEFAULT_WINDOW_WIDTH: Final[int] = 1000
    DEFAULT_WINDOW_HEIGHT: Final[int] = 700

    # Canvas appearance
    CANVAS_BACKGROUND: Final[str] = "#1e1e1e"
    SHAPE_COLOR: Final[str] = "#FF5722"
    SHAPE_PEN_WIDTH: Final[int] = 3  # Same fixed width the rect tool always used
    SHAPE_FILL_OPACITY: Final[float] = 0.15
    DIMENSION_LABEL_COLOR: Final[str] = "#e0e0e0"
    DIMENSION_LABEL_FONT_SIZE: Final[int] = 10
    DIMENSION_LABEL_OFFSET: Final[int] = 4  # Pixels between rect and label

    # Toolbar
    COUNTER_FORMAT: Final[str] = "Squares: {count}"
    TOOLBAR_BUTTON_MIN_WIDTH: Final[int] = 70

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """
        Get user data directory.

        Uses system AppData/Local (Windows) or .local/share (Linux).
        """
        # If 'portable.txt' exists next to the package, stick to local folder
        portable_flag = cls.APP_ROOT.parent / 'portable.txt'
        if portable_flag.exists():
            user_dir = cls.APP_ROOT.parent / 'data'
        else:
            if sys.platform == 'win32':
                base_path = Path(os.environ.get('LOCALAPPDATA', os.path.expanduser('~')))
                user_dir = base_path / 'SquaresCanvas'
            elif sys.platform == 'darwin':
                user_dir = Path.home() / 'Library' / 'Application Support' / 'SquaresCanvas'
            else:
                # Linux / Unix
                user_dir = Path.home() / '.local' / 'share' / 'SquaresCanvas'

        user_dir.mkdir(parents=True, exist_ok=True)
        return user_dir

    @classmethod
    def get_log_dir(cls) -> Path:
        """Get the logs folder inside the user data directory."""
        return cls.get_user_data_dir() / 'logs'

    @classmethod
    def format_counter(cls, count: int) -> str:
        """Text for the shape counter label."""
        return cls.COUNTER_FORMAT.format(count=count)


__all__ = ['Config']
