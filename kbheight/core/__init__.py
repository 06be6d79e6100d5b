# Keyboard height inference core (no Qt dependency)
from .frame_classifier import (
    KEYBOARD_MIN_HEIGHT,
    Classification,
    Measurement,
    Orientation,
    VisibleFrame,
    classify_frame,
    derive_orientation,
)
from .height_tracker import InvalidSeedHeight, KeyboardHeightTracker, KeyboardState
from .screen_geometry import SystemBarMetrics, measurement_from_window, system_bar_insets

__all__ = [
    'KEYBOARD_MIN_HEIGHT',
    'Classification',
    'Measurement',
    'Orientation',
    'VisibleFrame',
    'classify_frame',
    'derive_orientation',
    'InvalidSeedHeight',
    'KeyboardHeightTracker',
    'KeyboardState',
    'SystemBarMetrics',
    'measurement_from_window',
    'system_bar_insets',
]
