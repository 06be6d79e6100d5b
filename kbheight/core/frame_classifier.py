"""
Frame Classifier

Infers whether the virtual keyboard is shown from a single layout
measurement, by comparing the visible content frame against the full
window height and the known system bar heights.
"""
from dataclasses import dataclass
from enum import Enum


# Anything smaller than this is the navigation bar or a partial layout pass
KEYBOARD_MIN_HEIGHT = 100


class Orientation(Enum):
    """Window orientation"""
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


@dataclass(frozen=True)
class VisibleFrame:
    """Vertical extent of the visible content area, in pixels"""
    top: int
    bottom: int

    @property
    def height(self) -> int:
        return self.bottom - self.top


@dataclass(frozen=True)
class Measurement:
    """One layout-change sample reported by the host surface"""
    visible_frame: VisibleFrame
    full_height: int
    full_width: int
    status_bar_height: int = 0
    navigation_bar_height: int = 0

    @property
    def orientation(self) -> Orientation:
        return derive_orientation(self.full_width, self.full_height)


@dataclass(frozen=True)
class Classification:
    """
    Result of classifying one measurement.

    A height of 0 means the keyboard is closed. navigation_bar_visible is
    the flag the caller must feed into the next classification.
    """
    height: int
    orientation: Orientation
    navigation_bar_visible: bool

    @property
    def is_open(self) -> bool:
        return self.height > 0


def derive_orientation(width: int, height: int) -> Orientation:
    """Portrait when the window is narrower than it is tall"""
    if width < height:
        return Orientation.PORTRAIT
    return Orientation.LANDSCAPE


def calculate_keyboard_height(measurement: Measurement, navigation_bar_visible: bool) -> int:
    """
    Calculate the raw height difference attributed to the keyboard.

    Args:
        measurement: Layout measurement
        navigation_bar_visible: Navigation bar state from the previous classification

    Returns:
        Height difference in pixels (may be zero or negative)
    """
    frame = measurement.visible_frame
    height_difference = measurement.full_height - frame.height
    if measurement.status_bar_height > 0:
        height_difference -= measurement.status_bar_height
    if measurement.navigation_bar_height > 0 and navigation_bar_visible:
        height_difference -= measurement.navigation_bar_height
    return height_difference


def classify_frame(measurement: Measurement, navigation_bar_visible: bool) -> Classification:
    """
    Classify a measurement as keyboard closed or keyboard open.

    Checks run in order, first match wins:
    1. Visible frame reaches the bottom of the window: closed, no navigation bar.
    2. Visible frame plus navigation bar reaches the bottom: closed, navigation bar shown.
    3. Height difference below the minimum: closed, no navigation bar.
    4. Otherwise the keyboard is open with the height difference as its height.

    Args:
        measurement: Layout measurement
        navigation_bar_visible: Navigation bar state from the previous classification

    Returns:
        Classification carrying the height, orientation and the navigation
        bar flag to use for the next measurement
    """
    orientation = measurement.orientation
    bottom = measurement.visible_frame.bottom
    full_height = measurement.full_height

    if bottom == full_height:
        return Classification(0, orientation, navigation_bar_visible=False)

    if bottom + measurement.navigation_bar_height == full_height:
        return Classification(0, orientation, navigation_bar_visible=True)

    height = calculate_keyboard_height(measurement, navigation_bar_visible)
    if height < KEYBOARD_MIN_HEIGHT:
        return Classification(0, orientation, navigation_bar_visible=False)

    # Open keyboard leaves the navigation bar flag as it was
    return Classification(height, orientation, navigation_bar_visible)
