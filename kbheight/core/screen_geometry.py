"""
Screen geometry helpers

Qt has no status bar / navigation bar height lookup, so both are derived
from the part of the host window that falls outside the screen's
available geometry (the area not reserved by panels, docks and system
bars). The visible frame is the window area inside the available
geometry minus whatever part of it the virtual keyboard covers,
expressed relative to the top of the window.

Rectangles are plain (x, y, width, height) tuples in global coordinates
so this module does not depend on Qt.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from .frame_classifier import Measurement, VisibleFrame

RectTuple = Tuple[int, int, int, int]


@dataclass(frozen=True)
class SystemBarMetrics:
    """Heights of the system bars over the window in pixels, 0 when unknown"""
    status_bar_height: int = 0
    navigation_bar_height: int = 0


def system_bar_insets(window_rect: RectTuple, available_rect: RectTuple) -> SystemBarMetrics:
    """
    Derive system bar heights from the window and screen geometry.

    The reserved area above the available geometry that overlaps the
    window is the status bar, the reserved area below it is the
    navigation bar. Side insets (docks) do not change the visible height
    and are ignored.

    Args:
        window_rect: Host window geometry (x, y, width, height)
        available_rect: Available screen geometry (x, y, width, height)

    Returns:
        SystemBarMetrics clamped to the window height
    """
    _, wy, _, wh = window_rect
    _, ay, _, ah = available_rect

    top = min(wh, max(0, ay - wy))
    bottom = min(wh - top, max(0, (wy + wh) - (ay + ah)))
    return SystemBarMetrics(status_bar_height=top, navigation_bar_height=bottom)


def measurement_from_window(window_rect: RectTuple, available_rect: RectTuple,
                            keyboard_rect: Optional[RectTuple] = None) -> Measurement:
    """
    Build a layout measurement for a host window.

    Args:
        window_rect: Host window geometry in global coordinates
        available_rect: Available screen geometry in global coordinates
        keyboard_rect: Virtual keyboard geometry in global coordinates,
            None or empty when no keyboard is shown

    Returns:
        Measurement sized to the window, visible frame relative to the window top
    """
    wx, wy, ww, wh = window_rect
    bars = system_bar_insets(window_rect, available_rect)

    top = bars.status_bar_height
    bottom = wh - bars.navigation_bar_height

    if keyboard_rect is not None:
        kx, ky, kw, kh = keyboard_rect
        overlaps_window = kx < wx + ww and kx + kw > wx
        if kw > 0 and kh > 0 and overlaps_window:
            bottom = max(top, min(bottom, ky - wy))

    return Measurement(
        visible_frame=VisibleFrame(top=top, bottom=bottom),
        full_height=wh,
        full_width=ww,
        status_bar_height=bars.status_bar_height,
        navigation_bar_height=bars.navigation_bar_height,
    )
