"""
Whiteboard Tutor - Main Entry Point

Usage:
    python -m whiteboard_tutor.main
"""

import sys
from PyQt6.QtWidgets import QApplication

from .config import Config
from .events.event_bus import get_event_bus
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

    # Initialize event bus (singleton) on the GUI thread
    get_event_bus()

    return app


def main():
    """
    Main entry point for Whiteboard Tutor

    Creates the application, sets up the main window, and runs the event loop.
    """
    # Setup logging first
    LoggingConfig.setup_logging(Config.get_log_dir(), Config.LOG_FILE_NAME)

    logger = LoggingConfig.get_logger(__name__)
    logger.info(f"Starting {Config.APP_NAME} {Config.APP_VERSION}...")
    logger.info(f"Model: {Config.GEMINI_MODEL}")
    if not Config.get_api_key():
        logger.warning(f"No API key found; set {Config.API_KEY_ENV_VAR} or "
                       f"'{Config.API_KEY_SETTING}' in {Config.get_settings_file()}")

    app = setup_application()

    # Create and show main window
    from .widgets.main_window import MainWindow
    window = MainWindow()
    window.show()

    logger.info("Application started successfully!")

    # Run event loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
