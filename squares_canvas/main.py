"""
Squares Canvas - Main Entry Point

Draw rectangles by dragging on the canvas; undo or clear them from the toolbar.

Usage:
    python -m squares_canvas.main
"""

import sys
from PyQt6.QtWidgets import QApplication

from .config import Config
from .core.drag_state_machine import DragStateMachine
from .utils.logging_config import LoggingConfig


def setup_application() -> QApplication:
    """
    Initialize and configure the Qt application

    Returns:
        Configured QApplication instance
    """
    app = QApplication(sys.argv)

    # Set application metadata
    app.setApplicationName(Config.APP_NAME)
    app.setApplicationVersion(Config.APP_VERSION)
    app.setOrganizationName(Config.APP_AUTHOR)

    return app


def main():
    """
    Main entry point for Squares Canvas

    Creates the application, sets up the main window, and runs the event loop.
    """
    # Setup logging first
    LoggingConfig.setup_logging(Config.get_log_dir())

    logger = LoggingConfig.get_logger(__name__)
    logger.info(f"Starting {Config.APP_NAME} {Config.APP_VERSION}...")
    logger.info(f"Log file: {LoggingConfig.get_log_file_path()}")

    app = setup_application()

    # One state machine per window, passed down explicitly
    from .widgets.main_window import MainWindow
    machine = DragStateMachine()
    window = MainWindow(machine)
    window.show()

    logger.info("Application started successfully!")

    # Run event loop
    exit_code = app.exec()

    logger.info(f"Exiting with code {exit_code}")
    LoggingConfig.shutdown()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
