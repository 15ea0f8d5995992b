# ============================================================================
# FILE: drawing_app.py
# ============================================================================
"""
Main application window for the Geometry Editor
"""
import logging
import math
import tkinter as tk
from tkinter import ttk

from canvas_manager import CanvasManager
from config import CANVAS_BACKGROUND, MIN_GESTURE_SIZE, WINDOW_GEOMETRY
from curves import Circle, Line, Polyline
from drawing import Drawing
from file_manager import FileManager

logger = logging.getLogger(__name__)


class ToolTip:
    def __init__(self, widget, text):
        self.widget = widget
        self.text = text
        self.tooltip = None
        self.widget.bind("<Enter>", self.show_tooltip)
        self.widget.bind("<Leave>", self.hide_tooltip)

    def show_tooltip(self, event=None):
        x = self.widget.winfo_rootx() + 25
        y = self.widget.winfo_rooty() + 25
        self.tooltip = tk.Toplevel(self.widget)
        self.tooltip.wm_overrideredirect(True)
        self.tooltip.wm_geometry(f"+{x}+{y}")
        tk.Label(self.tooltip, text=self.text, background="#FFFFE0",
                 relief=tk.SOLID, borderwidth=1, font=("Arial", 9)).pack()

    def hide_tooltip(self, event=None):
        if self.tooltip:
            self.tooltip.destroy()
            self.tooltip = None


class DrawingApp:
    """Geometry editor window: menus, toolbar, canvas and mouse tools"""

    def __init__(self, root, drawing=None):
        self.root = root
        self.root.geometry(WINDOW_GEOMETRY)

        self.drawing = drawing if drawing is not None else Drawing()

        # Tool state
        self.current_tool = "line"
        self.drag_start = None
        self.polyline_points = []

        self.setup_ui()
        self.canvas_manager = CanvasManager(self)
        self.file_manager = FileManager(self)
        self.setup_menu()
        self.setup_toolbar()
        self.setup_bindings()

        self.select_tool("line")
        self.file_manager.update_title()
        self.canvas_manager.redraw()

    # ------------------------------------------------------------------
    # Menu
    # ------------------------------------------------------------------

    def setup_menu(self):
        menubar = tk.Menu(self.root)
        self.root.config(menu=menubar)

        file_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="File", menu=file_menu)
        file_menu.add_command(label="New", command=self.file_manager.new_drawing, accelerator="Ctrl+N")
        file_menu.add_command(label="Open...", command=self.file_manager.open_drawing, accelerator="Ctrl+O")
        file_menu.add_command(label="Save", command=self.file_manager.save_drawing, accelerator="Ctrl+S")
        file_menu.add_command(label="Save As...", command=self.file_manager.save_drawing_as)
        file_menu.add_separator()
        file_menu.add_command(label="Export PNG...", command=self.file_manager.export_png)
        file_menu.add_separator()
        file_menu.add_command(label="Exit", command=self.quit)

        edit_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Edit", menu=edit_menu)
        edit_menu.add_command(label="Line", command=lambda: self.select_tool("line"))
        edit_menu.add_command(label="Circle", command=lambda: self.select_tool("circle"))
        edit_menu.add_command(label="Polyline", command=lambda: self.select_tool("polyline"))
        edit_menu.add_separator()
        edit_menu.add_command(label="Delete Last Curve", command=self.delete_last_curve,
                              accelerator="Delete")

        # Shared with the toolbar check buttons
        self.show_vars = {
            Line: tk.BooleanVar(value=True),
            Circle: tk.BooleanVar(value=True),
            Polyline: tk.BooleanVar(value=True),
        }
        view_menu = tk.Menu(menubar, tearoff=0)
        menubar.add_cascade(label="View", menu=view_menu)
        for label, kind in (("Show Lines", Line), ("Show Circles", Circle), ("Show Polylines", Polyline)):
            view_menu.add_checkbutton(label=label, variable=self.show_vars[kind],
                                      command=lambda k=kind: self.toggle_visible(k))

    # ------------------------------------------------------------------
    # UI setup
    # ------------------------------------------------------------------

    def setup_ui(self):
        self.status_bar = ttk.Label(self.root, text="Messages from the application.",
                                    relief=tk.SUNKEN, anchor=tk.W)
        self.status_bar.pack(side=tk.BOTTOM, fill=tk.X)

        self.main_frame = ttk.Frame(self.root)
        self.main_frame.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

        self.toolbar = ttk.Frame(self.main_frame, relief=tk.RAISED, borderwidth=2)
        self.toolbar.pack(side=tk.TOP, fill=tk.X, padx=5, pady=5)

        canvas_frame = ttk.Frame(self.main_frame)
        canvas_frame.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=5, pady=5)
        self.canvas = tk.Canvas(canvas_frame, bg=CANVAS_BACKGROUND, cursor="crosshair")
        self.canvas.pack(fill=tk.BOTH, expand=True)

    def setup_toolbar(self):
        toolbar = self.toolbar

        for text, command, tip in (
            ("📁 New", self.file_manager.new_drawing, "New drawing (Ctrl+N)"),
            ("📂 Open", self.file_manager.open_drawing, "Open drawing (Ctrl+O)"),
            ("💾 Save", self.file_manager.save_drawing, "Save drawing (Ctrl+S)"),
        ):
            btn = ttk.Button(toolbar, text=text, command=command, width=8)
            btn.pack(side=tk.LEFT, padx=2)
            ToolTip(btn, tip)

        ttk.Separator(toolbar, orient=tk.VERTICAL).pack(side=tk.LEFT, padx=10, fill=tk.Y)

        tools = [
            ("Line",     "line",     "Add line — press, drag and release"),
            ("Circle",   "circle",   "Add circle — press at the center, drag to set the radius"),
            ("Polyline", "polyline",
             "Add polyline — left-click to add points, right-click or Enter to finish, Esc to cancel"),
        ]
        self.tool_buttons = {}
        for name, tool, tooltip_text in tools:
            btn = ttk.Button(toolbar, text=name, command=lambda t=tool: self.select_tool(t))
            btn.pack(side=tk.LEFT, padx=1)
            self.tool_buttons[tool] = btn
            ToolTip(btn, tooltip_text)

        ttk.Separator(toolbar, orient=tk.VERTICAL).pack(side=tk.LEFT, padx=10, fill=tk.Y)

        ttk.Label(toolbar, text="Show:").pack(side=tk.LEFT, padx=5)
        for label, kind in (("Lines", Line), ("Circles", Circle), ("Polylines", Polyline)):
            ttk.Checkbutton(toolbar, text=label, variable=self.show_vars[kind],
                            command=lambda k=kind: self.toggle_visible(k)).pack(side=tk.LEFT, padx=2)

    def setup_bindings(self):
        self.canvas.bind("<Button-1>", self.on_press)
        self.canvas.bind("<Button-3>", self.on_right_click)
        self.canvas.bind("<B1-Motion>", self.on_drag)
        self.canvas.bind("<ButtonRelease-1>", self.on_release)
        self.canvas.bind("<Motion>", self.on_mouse_move)

        self.root.bind("<Control-n>", lambda e: self.file_manager.new_drawing())
        self.root.bind("<Control-o>", lambda e: self.file_manager.open_drawing())
        self.root.bind("<Control-s>", lambda e: self.file_manager.save_drawing())
        self.root.bind("<Delete>", lambda e: self.delete_last_curve())
        self.root.bind("<Escape>", lambda e: self.cancel_polyline())
        self.root.bind("<Return>", lambda e: self.finish_polyline())

    def set_status(self, text):
        self.status_bar.config(text=text)

    # ------------------------------------------------------------------
    # Tools and visibility
    # ------------------------------------------------------------------

    def select_tool(self, tool):
        if self.polyline_points:
            self.cancel_polyline()

        self.current_tool = tool
        self.drag_start = None
        self.canvas_manager.clear_preview()

        for t, btn in self.tool_buttons.items():
            btn.state(['pressed'] if t == tool else ['!pressed'])

        if tool == "polyline":
            self.set_status("Tool: Polyline — left-click to place points, "
                            "right-click or Enter to finish, Esc to cancel")
        else:
            self.set_status(f"Tool: {tool.capitalize()}")

    def toggle_visible(self, kind):
        shown = self.show_vars[kind].get()
        self.canvas_manager.set_visible(kind, shown)
        self.set_status(f"{kind.__name__}s {'shown' if shown else 'hidden'}")

    # ------------------------------------------------------------------
    # Mouse events
    # ------------------------------------------------------------------

    def on_press(self, event):
        x, y = event.x, event.y

        if self.current_tool == "polyline":
            self.polyline_points.append((x, y))
            n = len(self.polyline_points)
            self.set_status(f"{n} point{'s' if n != 1 else ''} placed — "
                            f"right-click or Enter to finish | Esc to cancel")
            return

        self.drag_start = (x, y)

    def on_drag(self, event):
        if self.current_tool == "polyline":
            self.on_mouse_move(event)
            return
        if self.drag_start is None:
            return
        self.canvas_manager.draw_preview(self.build_curve(self.drag_start, (event.x, event.y)))

    def on_release(self, event):
        if self.current_tool == "polyline" or self.drag_start is None:
            return

        start, self.drag_start = self.drag_start, None
        self.canvas_manager.clear_preview()

        end = (event.x, event.y)
        if abs(end[0] - start[0]) < MIN_GESTURE_SIZE and abs(end[1] - start[1]) < MIN_GESTURE_SIZE:
            return  # Too small, ignore

        curve = self.build_curve(start, end)
        self.drawing.add_curve(curve)
        logger.debug("Added %r", curve)
        self.set_status(f"Added {self.current_tool}")

    def on_mouse_move(self, event):
        """Update the polyline preview while points are being placed"""
        if self.current_tool == "polyline" and self.polyline_points:
            points = self.polyline_points + [(event.x, event.y)]
            self.canvas_manager.draw_preview(Polyline(points))

    def on_right_click(self, event):
        if self.current_tool == "polyline" and self.polyline_points:
            self.polyline_points.append((event.x, event.y))
            self.finish_polyline()

    def build_curve(self, start, end):
        """Create the curve described by a drag gesture for the current tool"""
        if self.current_tool == "circle":
            r = math.hypot(end[0] - start[0], end[1] - start[1])
            return Circle(start, r)
        return Line(start, end)

    # ------------------------------------------------------------------
    # Polyline drawing
    # ------------------------------------------------------------------

    def finish_polyline(self):
        if not self.polyline_points:
            return
        points, self.polyline_points = self.polyline_points, []
        self.canvas_manager.clear_preview()

        if len(points) < 2:
            self.set_status("Polyline cancelled — need at least two points")
            return

        self.drawing.add_curve(Polyline(points))
        self.set_status(f"Added polyline with {len(points)} points")

    def cancel_polyline(self):
        if not self.polyline_points:
            return
        self.polyline_points = []
        self.canvas_manager.clear_preview()
        self.set_status("Drawing cancelled")

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def delete_last_curve(self):
        if not len(self.drawing):
            self.set_status("Nothing to delete")
            return
        self.drawing.remove_curve(len(self.drawing) - 1)
        self.set_status("Deleted last curve")

    def check_unsaved_changes(self):
        return self.file_manager.check_unsaved()

    def quit(self):
        if self.check_unsaved_changes():
            self.root.destroy()
