"""
Keyboard Height Tracker

Feeds layout measurements through the frame classifier, keeps the last
known keyboard height per orientation and notifies a single observer.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .frame_classifier import Measurement, Orientation, classify_frame

logger = logging.getLogger(__name__)

# Observer signature: (height, orientation), height 0 means closed
KeyboardHeightObserver = Callable[[int, Orientation], None]


class InvalidSeedHeight(ValueError):
    """Raised when a tracker is seeded with a negative keyboard height"""

    def __init__(self, orientation: Orientation, height: int):
        super().__init__(f"{orientation.value} seed height must be >= 0, got {height}")
        self.orientation = orientation
        self.height = height


@dataclass(frozen=True)
class KeyboardState:
    """Current keyboard state as of the last processed measurement"""
    height: int = 0
    orientation: Optional[Orientation] = None

    @property
    def is_open(self) -> bool:
        return self.height > 0


KEYBOARD_CLOSED = KeyboardState()


class KeyboardHeightTracker:
    """
    Tracks the virtual keyboard height for a host window.

    The host adapter calls process_measurement() once per layout change.
    Every call notifies the observer (if any) synchronously, even when
    the reported value did not change.

    Not thread safe: measurements must be delivered from the UI thread.
    """

    def __init__(self, portrait_height: int = 0, landscape_height: int = 0):
        """
        Initialize tracker.

        Args:
            portrait_height: Seed for the cached portrait keyboard height
            landscape_height: Seed for the cached landscape keyboard height

        Raises:
            InvalidSeedHeight: If either seed is negative
        """
        if portrait_height < 0:
            raise InvalidSeedHeight(Orientation.PORTRAIT, portrait_height)
        if landscape_height < 0:
            raise InvalidSeedHeight(Orientation.LANDSCAPE, landscape_height)

        self._heights = {
            Orientation.PORTRAIT: portrait_height,
            Orientation.LANDSCAPE: landscape_height,
        }
        self._navigation_bar_visible = False
        self._observer: Optional[KeyboardHeightObserver] = None
        self._state = KEYBOARD_CLOSED

    @property
    def portrait_height(self) -> int:
        """Last known keyboard height in portrait"""
        return self._heights[Orientation.PORTRAIT]

    @property
    def landscape_height(self) -> int:
        """Last known keyboard height in landscape"""
        return self._heights[Orientation.LANDSCAPE]

    @property
    def navigation_bar_visible(self) -> bool:
        """Navigation bar flag that the next measurement will be classified with"""
        return self._navigation_bar_visible

    @property
    def state(self) -> KeyboardState:
        return self._state

    @property
    def observer(self) -> Optional[KeyboardHeightObserver]:
        return self._observer

    def set_observer(self, observer: Optional[KeyboardHeightObserver]):
        """
        Replace the observer. Pass None to detach.

        Args:
            observer: Callable taking (height, orientation), or None
        """
        self._observer = observer

    def get_cached_height(self, orientation: Orientation) -> int:
        """Get the last known keyboard height for an orientation (0 if never seen)"""
        return self._heights.get(orientation, 0)

    def process_measurement(self, measurement: Measurement):
        """
        Classify a layout measurement and notify the observer.

        Args:
            measurement: Layout measurement from the host surface
        """
        result = classify_frame(measurement, self._navigation_bar_visible)
        self._navigation_bar_visible = result.navigation_bar_visible

        logger.debug(
            "Frame top=%d bottom=%d full=%dx%d -> height=%d %s (nav bar %s)",
            measurement.visible_frame.top, measurement.visible_frame.bottom,
            measurement.full_width, measurement.full_height,
            result.height, result.orientation.value,
            "visible" if result.navigation_bar_visible else "hidden",
        )

        if result.is_open:
            if self._heights[result.orientation] != result.height:
                logger.info("Cached %s keyboard height: %d",
                            result.orientation.value, result.height)
            self._heights[result.orientation] = result.height
            self._state = KeyboardState(result.height, result.orientation)
        else:
            self._state = KEYBOARD_CLOSED

        self._notify(result.height, result.orientation)

    def close(self):
        """Detach the observer; the tracker will not report anymore until re-attached"""
        self._observer = None

    def _notify(self, height: int, orientation: Orientation):
        observer = self._observer
        if observer is not None:
            observer(height, orientation)
