# ============================================================================
# FILE: config.py
# ============================================================================
"""
Configuration constants for the Geometry Editor.

Modules import the values they need directly, e.g. ``from config import
FILE_EXTENSION``.
"""

# ---------------------------------------------------------------
# WINDOW
# ---------------------------------------------------------------

APP_NAME = "Geometry Editor"
WINDOW_GEOMETRY = "1067x650"
WINDOW_MIN_SIZE = (640, 400)
CANVAS_BACKGROUND = "white"


# ---------------------------------------------------------------
# FILES
# ---------------------------------------------------------------

FILE_EXTENSION = ".geo"
FILE_TYPES = [("Geometry files", "*.geo"), ("JSON files", "*.json"), ("All files", "*.*")]
FILE_FORMAT_VERSION = "1.0"


# ---------------------------------------------------------------
# RENDERING
# ---------------------------------------------------------------

CURVE_COLOR = "black"
CURVE_WIDTH = 2
PREVIEW_DASH = (4, 4)

# Drag gestures shorter than this (in pixels) do not create a curve
MIN_GESTURE_SIZE = 3

PNG_BACKGROUND = "white"


# ---------------------------------------------------------------
# LOGGING
# ---------------------------------------------------------------

LOG_LEVEL = "INFO"
LOG_LEVEL_ENV = "GEOMETRY_EDITOR_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
