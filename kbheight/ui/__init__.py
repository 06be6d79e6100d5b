# UI module
from .main_window import MainWindow
from .measurement_surface import MeasurementSurface

__all__ = ['MainWindow', 'MeasurementSurface']
