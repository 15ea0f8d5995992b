# ============================================================================
# FILE: image_export.py
# ============================================================================
"""
PNG export of a drawing using Pillow
"""
from PIL import Image, ImageDraw

from config import CURVE_COLOR, CURVE_WIDTH, PNG_BACKGROUND
from curves import Circle, Line, Polyline


class ImageRenderContext:
    """Render context that draws curves onto a PIL ImageDraw"""

    def __init__(self, draw, color=CURVE_COLOR, width=CURVE_WIDTH):
        self.draw = draw
        self.color = color
        self.width = width

    def draw_line(self, points):
        self.draw.line([(p.x, p.y) for p in points], fill=self.color, width=self.width)

    def draw_ellipse(self, bbox):
        self.draw.ellipse(list(bbox), outline=self.color, width=self.width)


def render_image(drawing, width, height, visible=(Line, Circle, Polyline),
                 color=CURVE_COLOR, line_width=CURVE_WIDTH, background=PNG_BACKGROUND):
    """Render the visible curve types of *drawing* into a new RGB image"""
    image = Image.new('RGB', (width, height), background)
    context = ImageRenderContext(ImageDraw.Draw(image), color, line_width)

    containers = {
        Line: drawing.get_lines,
        Circle: drawing.get_circles,
        Polyline: drawing.get_polylines,
    }
    for kind, get_curves in containers.items():
        if kind not in visible:
            continue
        for curve in get_curves():
            curve.draw(context)
    return image


def export_png(drawing, filename, width, height, visible=(Line, Circle, Polyline), **kwargs):
    """Render *drawing* and save it to *filename* as PNG. Raises OSError on failure."""
    image = render_image(drawing, width, height, visible, **kwargs)
    image.save(filename, 'PNG')
    return image
