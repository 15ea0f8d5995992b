# ============================================================================
# FILE: canvas_manager.py
# ============================================================================
"""
Canvas rendering of the drawing and per-type visibility
"""
import logging

from config import CURVE_COLOR, CURVE_WIDTH, PREVIEW_DASH
from curves import Circle, Line, Polyline

logger = logging.getLogger(__name__)

CURVE_TAG = "curve"
PREVIEW_TAG = "preview"


class TkRenderContext:
    """Render context that draws curves as items on a tkinter Canvas"""

    def __init__(self, canvas, color=CURVE_COLOR, width=CURVE_WIDTH, tags=CURVE_TAG, dash=None):
        self.canvas = canvas
        self.color = color
        self.width = width
        self.tags = tags
        self.dash = dash

    def _options(self):
        kw = dict(width=self.width, tags=self.tags)
        if self.dash:
            kw['dash'] = self.dash
        return kw

    def draw_line(self, points):
        if len(points) < 2:
            return
        flat = [c for p in points for c in (p.x, p.y)]
        self.canvas.create_line(*flat, fill=self.color, **self._options())

    def draw_ellipse(self, bbox):
        self.canvas.create_oval(*bbox, outline=self.color, **self._options())


class CanvasManager:
    """Keeps the canvas in sync with the drawing"""

    def __init__(self, app):
        self.app = app
        self.drawing = app.drawing
        self.visible = {Line: True, Circle: True, Polyline: True}
        self.drawing.subscribe(self.on_drawing_changed)

    # ------------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------------

    def set_visible(self, kind, visible):
        self.visible[kind] = bool(visible)
        self.redraw()

    def visible_types(self):
        return tuple(kind for kind, shown in self.visible.items() if shown)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def on_drawing_changed(self, payload):
        logger.debug("Drawing changed: %r", payload)
        self.redraw()

    def redraw(self):
        canvas = self.app.canvas
        canvas.delete(CURVE_TAG)
        context = TkRenderContext(canvas)

        # Back to front in insertion order, skipping hidden types
        for curve in self.drawing.curves:
            if self.visible.get(type(curve), False):
                curve.draw(context)

        # Keep an in-progress preview above the finished curves
        if canvas.find_withtag(PREVIEW_TAG):
            canvas.tag_raise(PREVIEW_TAG)

    def draw_preview(self, curve):
        """Show *curve* dashed as the shape being drawn"""
        self.clear_preview()
        if curve is not None:
            curve.draw(TkRenderContext(self.app.canvas, tags=PREVIEW_TAG, dash=PREVIEW_DASH))

    def clear_preview(self):
        self.app.canvas.delete(PREVIEW_TAG)
