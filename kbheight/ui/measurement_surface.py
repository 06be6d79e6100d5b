"""
Measurement Surface

Invisible, zero-width overlay attached to the host window. It listens for
everything that can change the visible content area (window resize/move,
screen geometry changes, virtual keyboard rectangle changes), turns each
change into a Measurement of the host window and hands it to the
KeyboardHeightTracker.
"""
import logging
from typing import Optional

from PyQt6 import sip
from PyQt6.QtWidgets import QWidget, QApplication
from PyQt6.QtCore import Qt, QEvent, QPoint, QRect
from PyQt6.QtGui import QGuiApplication, QScreen, QWindow

from ..core.frame_classifier import Measurement, Orientation
from ..core.height_tracker import KeyboardHeightTracker
from ..core.screen_geometry import measurement_from_window

logger = logging.getLogger(__name__)

# Host window events that may move the visible frame
_LAYOUT_EVENTS = (
    QEvent.Type.Resize,
    QEvent.Type.Move,
    QEvent.Type.Show,
    QEvent.Type.WindowStateChange,
)


def _rect_tuple(rect: QRect):
    return (rect.x(), rect.y(), rect.width(), rect.height())


class MeasurementSurface(QWidget):
    """
    Zero-width overlay that reports layout changes of a host window.

    start() must be called once the host window is shown; Qt only
    creates the native window handle at that point.
    """

    def __init__(self, host: QWidget, tracker: KeyboardHeightTracker):
        """
        Initialize measurement surface.

        Args:
            host: Widget whose top-level window is measured
            tracker: Tracker that receives one measurement per layout change
        """
        if host is None:
            raise ValueError("host cannot be None")
        super().__init__(host.window())

        self.host = host
        self.tracker = tracker
        self._screen: Optional[QScreen] = None
        # Native window the screenChanged signal was connected on
        self._window_handle: Optional[QWindow] = None
        self._started = False

        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        self.setAttribute(Qt.WidgetAttribute.WA_NoSystemBackground, True)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setFixedWidth(0)
        self.hide()

    @property
    def is_started(self) -> bool:
        return self._started

    def start(self):
        """
        Start delivering measurements.

        Does nothing if already started or if the host window is not
        attached to a native window yet.
        """
        if self._started:
            return

        window = self.host.window()
        if window.windowHandle() is None:
            logger.debug("Host window not attached yet, measurement surface not started")
            return

        window.installEventFilter(self)
        self._window_handle = window.windowHandle()
        self._window_handle.screenChanged.connect(self._on_screen_changed)

        input_method = QGuiApplication.inputMethod()
        input_method.keyboardRectangleChanged.connect(self.measure)
        input_method.visibleChanged.connect(self.measure)

        self._attach_screen(self._window_handle.screen())

        self.setFixedHeight(window.height())
        self.move(0, 0)
        self.show()
        self._started = True
        logger.info("Measurement surface started")

        self.measure()

    def close(self) -> bool:
        """
        Stop delivering measurements and detach the tracker's observer.

        The surface is not used anymore after this call.
        """
        self.tracker.close()

        if self._started:
            self.host.window().removeEventFilter(self)
            if self._window_handle is not None and not sip.isdeleted(self._window_handle):
                self._window_handle.screenChanged.disconnect(self._on_screen_changed)
            self._window_handle = None

            input_method = QGuiApplication.inputMethod()
            input_method.keyboardRectangleChanged.disconnect(self.measure)
            input_method.visibleChanged.disconnect(self.measure)

            self._attach_screen(None)
            self._started = False
            logger.info("Measurement surface closed")

        return super().close()

    def screen_orientation(self) -> Orientation:
        """Get the orientation of the primary screen (square screens are portrait)"""
        screen = QApplication.primaryScreen()
        if screen is None:
            return Orientation.PORTRAIT
        size = screen.size()
        if size.width() > size.height():
            return Orientation.LANDSCAPE
        return Orientation.PORTRAIT

    def current_measurement(self) -> Optional[Measurement]:
        """Build a measurement from the host window's global frame"""
        window = self.host.window()
        screen = self._screen or window.screen() or QApplication.primaryScreen()
        if screen is None:
            return None

        origin = window.mapToGlobal(QPoint(0, 0))
        window_rect = (origin.x(), origin.y(), window.width(), window.height())

        keyboard_rect = None
        input_method = QGuiApplication.inputMethod()
        if input_method.isVisible():
            # keyboardRectangle() is in window coordinates
            local = input_method.keyboardRectangle().toRect()
            if not local.isEmpty():
                top_left = window.mapToGlobal(local.topLeft())
                keyboard_rect = (top_left.x(), top_left.y(), local.width(), local.height())

        return measurement_from_window(
            window_rect,
            _rect_tuple(screen.availableGeometry()),
            keyboard_rect,
        )

    def measure(self, *_args):
        """Report the current layout to the tracker"""
        measurement = self.current_measurement()
        if measurement is None:
            logger.warning("No screen available, skipping measurement")
            return
        self.tracker.process_measurement(measurement)

    def eventFilter(self, obj, event):
        """Measure on host window layout events"""
        if event.type() in _LAYOUT_EVENTS and obj is self.host.window():
            self.setFixedHeight(obj.height())
            self.measure()
        return super().eventFilter(obj, event)

    def _attach_screen(self, screen: Optional[QScreen]):
        if self._screen is not None and not sip.isdeleted(self._screen):
            self._screen.geometryChanged.disconnect(self.measure)
            self._screen.availableGeometryChanged.disconnect(self.measure)
        self._screen = screen
        if screen is not None:
            screen.geometryChanged.connect(self.measure)
            screen.availableGeometryChanged.connect(self.measure)

    def _on_screen_changed(self, screen: QScreen):
        logger.debug("Host window moved to screen %s", screen.name() if screen else None)
        self._attach_screen(screen)
        self.measure()
