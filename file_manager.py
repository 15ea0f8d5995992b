# ============================================================================
# FILE: file_manager.py
# ============================================================================
"""
File operations for the Geometry Editor (new/open/save/export)
"""
import logging
import os
from tkinter import filedialog, messagebox

from config import APP_NAME, FILE_EXTENSION, FILE_TYPES
from curves import FormatError
from image_export import export_png

logger = logging.getLogger(__name__)


class FileManager:
    """Handles file operations for the drawing"""

    def __init__(self, app):
        self.app = app
        self.current_file = None
        self.modified = False
        # Suppresses the modified flag while a file is being loaded
        self._loading = False
        self.app.drawing.subscribe(self.on_drawing_changed)

    def on_drawing_changed(self, payload):
        if not self._loading:
            self.mark_modified()

    def new_drawing(self):
        """Create a new drawing"""
        if not self.check_unsaved():
            return False

        self.app.drawing.remove_all_curves()
        self.current_file = None
        self.modified = False
        self.update_title()
        self.app.set_status("New drawing")
        return True

    def open_drawing(self):
        """Open a drawing file"""
        if not self.check_unsaved():
            return False

        filename = filedialog.askopenfilename(
            title="Open Drawing",
            defaultextension=FILE_EXTENSION,
            filetypes=FILE_TYPES
        )

        if not filename:
            return False

        return self.load_from_file(filename)

    def load_from_file(self, filename):
        """Load drawing from specified file"""
        self._loading = True
        try:
            self.app.drawing.load(filename)
        except (OSError, FormatError) as e:
            logger.warning("Failed to open %s: %s", filename, e)
            messagebox.showerror("Error", f"Failed to open file:\n{e}")
            self.app.set_status(f"Could not open {os.path.basename(filename)}")
            return False
        finally:
            self._loading = False

        logger.info("Opened %s (%d curves)", filename, len(self.app.drawing))
        self.current_file = filename
        self.modified = False
        self.update_title()
        self.app.set_status(f"Opened: {os.path.basename(filename)}")
        return True

    def save_drawing(self):
        """Save the current drawing"""
        if self.current_file:
            return self.save_to_file(self.current_file)
        else:
            return self.save_drawing_as()

    def save_drawing_as(self):
        """Save drawing with a new filename"""
        filename = filedialog.asksaveasfilename(
            title="Save Drawing As",
            defaultextension=FILE_EXTENSION,
            filetypes=FILE_TYPES
        )

        if not filename:
            return False

        return self.save_to_file(filename)

    def save_to_file(self, filename):
        """Save drawing to specified file"""
        try:
            self.app.drawing.save(filename)
        except OSError as e:
            logger.warning("Failed to save %s: %s", filename, e)
            messagebox.showerror("Error", f"Failed to save file:\n{e}")
            self.app.set_status(f"Could not save {os.path.basename(filename)}")
            return False

        logger.info("Saved %s (%d curves)", filename, len(self.app.drawing))
        self.current_file = filename
        self.modified = False
        self.update_title()
        self.app.set_status(f"Saved: {os.path.basename(filename)}")
        return True

    def export_png(self):
        """Export the visible curves as a PNG image"""
        filename = filedialog.asksaveasfilename(
            title="Export as PNG",
            defaultextension=".png",
            filetypes=[("PNG files", "*.png"), ("All files", "*.*")]
        )

        if not filename:
            return False

        width = max(self.app.canvas.winfo_width(), 1)
        height = max(self.app.canvas.winfo_height(), 1)
        try:
            export_png(self.app.drawing, filename, width, height,
                       visible=self.app.canvas_manager.visible_types())
        except OSError as e:
            logger.warning("PNG export to %s failed: %s", filename, e)
            messagebox.showerror("Error", f"Export failed:\n{e}")
            return False

        logger.info("Exported %s (%dx%d)", filename, width, height)
        self.app.set_status(f"Exported: {os.path.basename(filename)}")
        return True

    def check_unsaved(self):
        """Check for unsaved changes and prompt user"""
        if not self.modified:
            return True

        result = messagebox.askyesnocancel(
            "Unsaved Changes",
            "Do you want to save your changes?"
        )

        if result is None:  # Cancel
            return False
        elif result:  # Yes
            return self.save_drawing()
        else:  # No
            return True

    def mark_modified(self):
        """Mark the drawing as modified"""
        if not self.modified:
            self.modified = True
            self.update_title()

    def update_title(self):
        name = os.path.basename(self.current_file) if self.current_file else "Untitled"
        suffix = " *" if self.modified else ""
        self.app.root.title(f"{APP_NAME} - {name}{suffix}")
