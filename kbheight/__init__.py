"""
KeyboardHeight - virtual keyboard height detection for Qt applications
"""
__version__ = "1.0.0"
