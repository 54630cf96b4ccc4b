"""Sliding sashes: two panes, a central mullion and a direction arrow."""

from __future__ import annotations

from joinery.core.layout import compute_pane_layout
from joinery.rules.base import DrawingRule, outer_frame
from joinery.rules.window.panes import draw_pane, vertical_mullions
from joinery.models import (
    Band, Box, DrawingContext, Layer, LineShape, Point2D, PolylineShape,
    Shape, SlidingLayout,
)

ARROW_COLOR = "#334155"
ARROW_HEAD = 5.0  # px


class SlidingRule(DrawingRule):
    """Fixed sash on the left, sliding sash on the right. No hinges."""

    priority = 10

    def get_id(self) -> str:
        return "window.sliding"

    def get_name(self) -> str:
        return "Sliding Sashes"

    def applies(self, context: DrawingContext) -> bool:
        return isinstance(context.window.layout, SlidingLayout)

    def generate(self, context: DrawingContext) -> list[Shape]:
        layout = context.window.layout
        interior = context.metrics.interior
        spans = compute_pane_layout(
            layout.pane_count, interior.width, context.metrics.mullion, interior.x,
        )

        shapes: list[Shape] = [outer_frame(context)]
        boxes = [Box(x=s.x, y=interior.y, width=s.width, height=interior.height) for s in spans]
        for i, box in enumerate(boxes):
            pane_shapes, region = draw_pane(context, i, Band.FULL, box)
            shapes.extend(pane_shapes)
            context.panes.append(region)

        shapes.extend(vertical_mullions(context, boxes, interior))
        shapes.extend(self._arrow(boxes[-1]))
        return shapes

    def _arrow(self, sash: Box) -> list[Shape]:
        """Double-headed arrow across the sliding sash."""
        cy = sash.center.y
        x1 = sash.x + sash.width * 0.2
        x2 = sash.x + sash.width * 0.8
        head = min(ARROW_HEAD, (x2 - x1) / 4)
        style = {"layer": Layer.SLIDE_ARROW, "stroke": ARROW_COLOR, "stroke_width": 1.5}
        return [
            LineShape(x1=x1, y1=cy, x2=x2, y2=cy, tags={"part": "shaft"}, **style),
            PolylineShape(
                points=[
                    Point2D(x=x1 + head, y=cy - head),
                    Point2D(x=x1, y=cy),
                    Point2D(x=x1 + head, y=cy + head),
                ],
                tags={"part": "head", "end": "start"}, **style,
            ),
            PolylineShape(
                points=[
                    Point2D(x=x2 - head, y=cy - head),
                    Point2D(x=x2, y=cy),
                    Point2D(x=x2 - head, y=cy + head),
                ],
                tags={"part": "head", "end": "end"}, **style,
            ),
        ]
