# surface.py
# Canvas-style drawing state on top of an svgwrite drawing

import io
from typing import NamedTuple

import svgwrite


class FlatFill(NamedTuple):
    color: str
    opacity: float = 1.0


class LinearGradient:
    """Linear gradient in canvas coordinates, stored in the drawing's <defs>."""

    def __init__(self, dwg, gradient_id, x1, y1, x2, y2):
        self.element = dwg.linearGradient(
            start=(x1, y1),
            end=(x2, y2),
            id=gradient_id,
            gradientUnits="userSpaceOnUse",
        )
        dwg.defs.add(self.element)
        self.stops = []

    def add_color_stop(self, offset, color, opacity=1.0):
        self.element.add_stop_color(offset, color, opacity)
        self.stops.append((offset, color, opacity))
        return self

    def paint_server(self):
        return self.element.get_funciri()


class Surface:
    """Immediate-mode 2D surface writing SVG elements.

    Like a canvas context it keeps a current fill and stroke style that every
    fill/stroke call uses until it is replaced.
    """

    def __init__(self, width, height, stroke_width=1.0):
        self.width = width
        self.height = height
        self.dwg = svgwrite.Drawing(size=(width, height))
        self.dwg.viewbox(0, 0, width, height)
        self.fill_style = FlatFill("#000000")
        self.stroke_style = "#000000"
        self.stroke_width = stroke_width
        self._gradient_count = 0

    def create_linear_gradient(self, x1, y1, x2, y2):
        self._gradient_count += 1
        return LinearGradient(self.dwg, f"g{self._gradient_count}", x1, y1, x2, y2)

    def _fill_attrs(self):
        style = self.fill_style
        if isinstance(style, LinearGradient):
            return {"fill": style.paint_server()}
        if isinstance(style, str):
            style = FlatFill(style)
        return {"fill": style.color, "fill_opacity": style.opacity}

    def fill_rect(self, x, y, width, height):
        self.dwg.add(self.dwg.rect(insert=(x, y), size=(width, height), **self._fill_attrs()))

    def fill_circle(self, x, y, radius):
        self.dwg.add(self.dwg.circle(center=(x, y), r=radius, **self._fill_attrs()))

    def fill_polygon(self, points, stroke=True):
        """Fill (and stroke) a closed ring; fewer than 3 points draws nothing."""
        if len(points) < 3:
            return None
        ring = [(int(x), int(y)) for x, y in points]
        attrs = self._fill_attrs()
        if stroke:
            attrs["stroke"] = self.stroke_style
            attrs["stroke_width"] = self.stroke_width
        element = self.dwg.polygon(ring, **attrs)
        self.dwg.add(element)
        return element

    def to_string(self):
        buf = io.StringIO()
        self.dwg.write(buf)
        return buf.getvalue()

    def to_bytes(self):
        return self.to_string().encode("utf-8")
