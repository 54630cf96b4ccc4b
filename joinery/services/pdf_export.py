"""
PDF project sheet: every window drawing of a project on A4 pages.

Scene graphs are replayed as vector graphics with reportlab, so the
PDF is sharp at any zoom. Layout: 20mm margins, centred project title,
drawings stacked top to bottom at content width, a new page whenever
the next drawing would cross the bottom margin, and a generation date
in the footer of the last page.
"""

from __future__ import annotations
import io
import logging
from datetime import date

from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas as rl_canvas

from joinery.models import (
    CircleShape, LineShape, PolylineShape, RectShape, SceneGraph, Shape, TextShape,
)
from joinery.services.svg_renderer import LAYER_STYLES, TEXT_FILL

logger = logging.getLogger("joinery.pdf")

MARGIN = 20 * mm
DRAWING_SPACING = 15 * mm
MAX_ZOOM = 2.0


class PdfExporter:
    """Lays out scene graphs on A4 portrait pages."""

    def __init__(self, page_size: tuple[float, float] = A4, max_zoom: float = MAX_ZOOM) -> None:
        self.page_w, self.page_h = page_size
        self.max_zoom = max_zoom

    def export(self, project_name: str, scenes: list[SceneGraph],
               generated_on: date | None = None) -> bytes:
        buffer = io.BytesIO()
        c = rl_canvas.Canvas(buffer, pagesize=(self.page_w, self.page_h))
        c.setTitle(project_name)

        content_width = self.page_w - 2 * MARGIN
        c.setFont("Helvetica-Bold", 16)
        c.drawCentredString(self.page_w / 2, self.page_h - MARGIN, project_name)
        cursor = self.page_h - MARGIN - 10 * mm

        pages = 1
        for scene in scenes:
            zoom = min(content_width / scene.width, self.max_zoom)
            drawing_height = scene.height * zoom
            if cursor - drawing_height < MARGIN:
                c.showPage()
                pages += 1
                cursor = self.page_h - MARGIN
            self._draw_scene(c, scene, MARGIN, cursor, zoom)
            cursor -= drawing_height + DRAWING_SPACING

        stamp = (generated_on or date.today()).isoformat()
        c.setFont("Helvetica", 10)
        c.setFillColor(HexColor(TEXT_FILL))
        c.drawString(MARGIN, 10 * mm, f"Generated on {stamp}")
        c.save()

        logger.info("Exported %d drawings of %r on %d pages", len(scenes), project_name, pages)
        return buffer.getvalue()

    def _draw_scene(self, c: rl_canvas.Canvas, scene: SceneGraph,
                    left: float, top: float, zoom: float) -> None:
        for group in scene.groups:
            def to_pdf(x: float, y: float) -> tuple[float, float]:
                return (
                    left + (group.offset.x + x) * zoom,
                    top - (group.offset.y + y) * zoom,
                )
            for shape in group.shapes:
                c.saveState()
                try:
                    self._draw_shape(c, shape, to_pdf, zoom)
                finally:
                    c.restoreState()

    def _apply_style(self, c: rl_canvas.Canvas, shape: Shape, zoom: float) -> tuple[bool, bool]:
        fill, stroke, width = LAYER_STYLES[shape.layer]
        fill = shape.fill or fill
        stroke = shape.stroke or stroke
        width = width if shape.stroke_width is None else shape.stroke_width
        has_fill = fill != "none"
        has_stroke = stroke != "none" and width > 0
        if has_fill:
            c.setFillColor(HexColor(fill))
        if has_stroke:
            c.setStrokeColor(HexColor(stroke))
            c.setLineWidth(width * zoom)
        if shape.dash:
            c.setDash([d * zoom for d in shape.dash])
        return has_fill, has_stroke

    def _draw_shape(self, c: rl_canvas.Canvas, shape: Shape, to_pdf, zoom: float) -> None:
        if isinstance(shape, TextShape):
            self._draw_text(c, shape, to_pdf, zoom)
            return

        has_fill, has_stroke = self._apply_style(c, shape, zoom)
        if isinstance(shape, RectShape):
            x, y = to_pdf(shape.x, shape.y + shape.height)
            w, h = shape.width * zoom, shape.height * zoom
            if shape.rx:
                c.roundRect(x, y, w, h, shape.rx * zoom, stroke=int(has_stroke), fill=int(has_fill))
            else:
                c.rect(x, y, w, h, stroke=int(has_stroke), fill=int(has_fill))
        elif isinstance(shape, LineShape):
            if has_stroke:
                c.line(*to_pdf(shape.x1, shape.y1), *to_pdf(shape.x2, shape.y2))
        elif isinstance(shape, PolylineShape):
            if shape.points:
                path = c.beginPath()
                path.moveTo(*to_pdf(shape.points[0].x, shape.points[0].y))
                for point in shape.points[1:]:
                    path.lineTo(*to_pdf(point.x, point.y))
                c.drawPath(path, stroke=int(has_stroke), fill=0)
        elif isinstance(shape, CircleShape):
            x, y = to_pdf(shape.cx, shape.cy)
            c.circle(x, y, shape.r * zoom, stroke=int(has_stroke), fill=int(has_fill))

    def _draw_text(self, c: rl_canvas.Canvas, shape: TextShape, to_pdf, zoom: float) -> None:
        x, y = to_pdf(shape.x, shape.y)
        c.translate(x, y)
        if shape.rotation:
            # Clockwise on a y-down canvas is negative on reportlab's y-up canvas.
            c.rotate(-shape.rotation)
        c.setFillColor(HexColor(shape.fill or TEXT_FILL))
        c.setFont("Helvetica-Bold" if shape.bold else "Helvetica", shape.font_size * zoom)
        if shape.anchor == "middle":
            c.drawCentredString(0, 0, shape.text)
        elif shape.anchor == "end":
            c.drawRightString(0, 0, shape.text)
        else:
            c.drawString(0, 0, shape.text)
