"""Dimension annotations and the name/type label under the drawing."""

from __future__ import annotations

from joinery.rules.base import DrawingRule
from joinery.models import DrawingContext, Layer, LineShape, Shape, TextShape

LINE_COLOR = "#000000"
TICK = 5.0  # half-length of the end ticks, px


class DimensionRule(DrawingRule):
    """Overall width along the bottom, overall height up the right side."""

    priority = 90
    annotation = True

    def get_id(self) -> str:
        return "annotation.dimensions"

    def get_name(self) -> str:
        return "Dimensions"

    def applies(self, context: DrawingContext) -> bool:
        return True

    def generate(self, context: DrawingContext) -> list[Shape]:
        m = context.metrics
        window = context.window
        offset = context.params.drawing_offset_y
        sw, sh = m.scaled_width, m.scaled_height

        def line(x1: float, y1: float, x2: float, y2: float, part: str) -> LineShape:
            return LineShape(
                layer=Layer.DIMENSION, x1=x1, y1=y1, x2=x2, y2=y2,
                stroke=LINE_COLOR, stroke_width=1.0, tags={"part": part},
            )

        width_y = sh + offset + 10
        height_x = sw + 20
        return [
            line(0.0, width_y, sw, width_y, "width"),
            line(0.0, width_y - TICK, 0.0, width_y + TICK, "width-tick"),
            line(sw, width_y - TICK, sw, width_y + TICK, "width-tick"),
            TextShape(
                layer=Layer.DIMENSION, x=sw / 2, y=width_y + 15,
                text=f"{window.width}mm", tags={"part": "width"},
            ),
            line(height_x, offset, height_x, sh + offset, "height"),
            line(height_x - TICK, offset, height_x + TICK, offset, "height-tick"),
            line(height_x - TICK, sh + offset, height_x + TICK, sh + offset, "height-tick"),
            TextShape(
                layer=Layer.DIMENSION, x=height_x + 15, y=sh / 2 + offset,
                text=f"{window.height}mm", rotation=90.0, tags={"part": "height"},
            ),
        ]


class LabelRule(DrawingRule):
    """Window name in bold with the catalog type name beneath."""

    priority = 95
    annotation = True

    def get_id(self) -> str:
        return "annotation.labels"

    def get_name(self) -> str:
        return "Labels"

    def applies(self, context: DrawingContext) -> bool:
        return True

    def generate(self, context: DrawingContext) -> list[Shape]:
        m = context.metrics
        base_y = m.scaled_height + context.params.dimension_band
        return [
            TextShape(
                layer=Layer.LABEL, x=m.scaled_width / 2, y=base_y + 10,
                text=context.window.name, bold=True, tags={"part": "name"},
            ),
            TextShape(
                layer=Layer.LABEL, x=m.scaled_width / 2, y=base_y + 22,
                text=context.window.entry.name, font_size=8.0, tags={"part": "type"},
            ),
        ]
