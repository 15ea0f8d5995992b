# ============================================================================
# Geometry Editor - draw, save and load lines, circles and polylines
# ============================================================================
# Project layout:
#
#   main.py              (this file - run this)
#   config.py            (constants)
#   curves.py            (curve classes and data structures)
#   drawing.py           (the drawing model, save/load)
#   image_export.py      (PNG export)
#   canvas_manager.py    (canvas rendering)
#   file_manager.py      (file dialogs)
#   drawing_app.py       (main window)
# ============================================================================
import logging
import os
import sys
import tkinter as tk

from config import APP_NAME, LOG_FORMAT, LOG_LEVEL, LOG_LEVEL_ENV, WINDOW_MIN_SIZE
from drawing_app import DrawingApp


def setup_logging():
    level = os.environ.get(LOG_LEVEL_ENV, LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def main(argv=None):
    """Main entry point for the Geometry Editor"""
    argv = sys.argv[1:] if argv is None else argv
    setup_logging()

    root = tk.Tk()
    root.title(APP_NAME)

    # Set minimum window size
    root.minsize(*WINDOW_MIN_SIZE)

    # Create the application
    app = DrawingApp(root)

    # Handle window close
    root.protocol("WM_DELETE_WINDOW", app.quit)

    # Open a drawing passed on the command line
    if argv:
        app.file_manager.load_from_file(argv[0])

    # Start the application
    root.mainloop()


if __name__ == "__main__":
    main()
