#!/usr/bin/env python3
"""
KeyboardHeight - virtual keyboard height detection

Measures the height of the on-screen keyboard shown over the application
window, cached separately for portrait and landscape.
"""
import sys
import os
import logging

# Select platform dynamically: prefer Wayland if available; otherwise X11.
# Avoid forcing xcb when DISPLAY is missing (prevents "could not connect to display").
if 'QT_QPA_PLATFORM' not in os.environ:
    if os.environ.get('WAYLAND_DISPLAY'):
        os.environ['QT_QPA_PLATFORM'] = 'wayland'
    elif os.environ.get('DISPLAY'):
        os.environ['QT_QPA_PLATFORM'] = 'xcb'

from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import Qt

from kbheight import __version__
from kbheight.config.settings import Settings
from kbheight.core.logging_config import setup_logging
from kbheight.ui import MainWindow

logger = logging.getLogger(__name__)


def main():
    """Main entry point"""
    settings = Settings.load()
    setup_logging(log_level=settings.log_level)

    try:
        logger.info("Starting KeyboardHeight application")
        
        app = QApplication(sys.argv)
        app.setApplicationName("KeyboardHeight")
        app.setApplicationVersion(__version__)
        app.setOrganizationName("KeyboardHeight")
        app.setAttribute(Qt.ApplicationAttribute.AA_SynthesizeTouchForUnhandledMouseEvents, True)
        
        window = MainWindow(settings)
        if settings.fullscreen:
            window.showFullScreen()
        else:
            window.show()
        
        logger.info("Application started successfully")
        
        sys.exit(app.exec())
    except Exception:
        logger.exception("Fatal error starting application")
        raise


if __name__ == "__main__":
    main()
