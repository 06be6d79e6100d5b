import pytest

from kbheight.core.frame_classifier import Measurement, VisibleFrame


@pytest.fixture
def make_measurement():
    """Build a portrait measurement, 600 px wide unless overridden."""
    def _make(top=0, bottom=1000, full_height=1000, full_width=600,
              status_bar=0, navigation_bar=0):
        return Measurement(
            visible_frame=VisibleFrame(top=top, bottom=bottom),
            full_height=full_height,
            full_width=full_width,
            status_bar_height=status_bar,
            navigation_bar_height=navigation_bar,
        )
    return _make


@pytest.fixture
def recorder():
    """Observer that records every (height, orientation) notification."""
    class Recorder:
        def __init__(self):
            self.calls = []

        def __call__(self, height, orientation):
            self.calls.append((height, orientation))

    return Recorder()
