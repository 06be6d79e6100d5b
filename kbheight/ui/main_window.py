"""
Main Application Window

Shows a text field that summons the virtual keyboard and a label with
the keyboard height reported by the tracker.
"""
from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel, QLineEdit
from PyQt6.QtCore import Qt, QTimer

from ..config.settings import Settings
from ..core.frame_classifier import Orientation, derive_orientation
from ..core.height_tracker import KeyboardHeightTracker
from ..core.logging_config import get_logger
from .measurement_surface import MeasurementSurface
from .styles import STYLESHEET

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """Main application window"""

    def __init__(self, settings: Optional[Settings] = None,
                 tracker: Optional[KeyboardHeightTracker] = None):
        super().__init__()
        self.settings = settings or Settings.load()

        if tracker is None:
            if self.settings.remember_keyboard_heights:
                tracker = KeyboardHeightTracker(
                    self.settings.portrait_keyboard_height,
                    self.settings.landscape_keyboard_height,
                )
            else:
                tracker = KeyboardHeightTracker()
        self.tracker = tracker

        self._setup_ui()
        self.surface = MeasurementSurface(self, self.tracker)

        self.resize(self.settings.display_width, self.settings.display_height)

        self._show_height(0, derive_orientation(self.width(), self.height()))

    def _setup_ui(self):
        """Setup the main window UI"""
        self.setWindowTitle("KeyboardHeight")
        self.setStyleSheet(STYLESHEET)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)

        hint = QLabel("Tap the field below to open the keyboard")
        hint.setObjectName("hintLabel")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(hint)

        self.text_input = QLineEdit()
        self.text_input.setPlaceholderText("Type here")
        layout.addWidget(self.text_input)

        self.height_label = QLabel()
        self.height_label.setObjectName("heightLabel")
        self.height_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.height_label)
        layout.addStretch()

        self.setCentralWidget(central)

    def on_keyboard_height_changed(self, height: int, orientation: Orientation):
        """Tracker observer"""
        logger.info("Keyboard height changed in pixels: %d %s", height, orientation.value)
        self._show_height(height, orientation)

    def _show_height(self, height: int, orientation: Orientation):
        self.height_label.setText(f"{height} {orientation.value}")
        self.height_label.setProperty("keyboardOpen", height > 0)
        # Re-apply stylesheet for the dynamic property
        self.height_label.style().unpolish(self.height_label)
        self.height_label.style().polish(self.height_label)

    def showEvent(self, event):
        """Subscribe and start measuring once the window is attached"""
        super().showEvent(event)
        self.tracker.set_observer(self.on_keyboard_height_changed)
        # Native window handle exists only after the show event is processed
        QTimer.singleShot(0, self.surface.start)

    def hideEvent(self, event):
        """Stop reporting while hidden"""
        self.tracker.set_observer(None)
        super().hideEvent(event)

    def closeEvent(self, event):
        """Persist cached heights and tear down the measurement surface"""
        if self.settings.remember_keyboard_heights:
            try:
                self.settings.update_keyboard_heights(
                    self.tracker.portrait_height,
                    self.tracker.landscape_height,
                )
            except OSError as e:
                logger.error("Error saving keyboard heights: %s", e)
        self.surface.close()
        super().closeEvent(event)
