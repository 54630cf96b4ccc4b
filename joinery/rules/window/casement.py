"""Casement windows: one to four equal panes, optionally under a transom.

Draws the outer frame, vertical mullions, the horizontal transom bar
and a casement/glass pair for every pane, then publishes the panes
so the bar and hinge rules can decorate them.
"""

from __future__ import annotations

from joinery.core.layout import compute_pane_layout, split_transom
from joinery.rules.base import DrawingRule, outer_frame
from joinery.rules.window.panes import draw_pane, vertical_mullions
from joinery.models import (
    Band, Box, CasementLayout, DrawingContext, Layer, RectShape, Shape,
)


class CasementRule(DrawingRule):
    """Side-by-side casements with N-1 mullions and an optional transom."""

    priority = 10  # Panes must exist before anything decorates them

    def get_id(self) -> str:
        return "window.casement"

    def get_name(self) -> str:
        return "Casement Panes"

    def applies(self, context: DrawingContext) -> bool:
        return isinstance(context.window.layout, CasementLayout)

    def generate(self, context: DrawingContext) -> list[Shape]:
        layout = context.window.layout
        metrics = context.metrics
        interior = metrics.interior
        m = metrics.mullion

        shapes: list[Shape] = [outer_frame(context)]
        spans = compute_pane_layout(layout.pane_count, interior.width, m, interior.x)

        if layout.transom is not None:
            upper, lower = split_transom(
                interior.height, layout.transom.height_mm * metrics.scale, m,
            )
            bands = [
                (Band.UPPER, interior.y, upper),
                (Band.LOWER, interior.y + upper + m, lower),
            ]
        else:
            bands = [(Band.FULL, interior.y, interior.height)]

        lowest: list[Box] = []
        for band, top, band_height in bands:
            boxes = [Box(x=s.x, y=top, width=s.width, height=band_height) for s in spans]
            for i, box in enumerate(boxes):
                pane_shapes, region = draw_pane(context, i, band, box)
                shapes.extend(pane_shapes)
                context.panes.append(region)
            lowest = boxes

        shapes.extend(vertical_mullions(context, lowest, interior))

        if layout.transom is not None:
            shapes.append(RectShape(
                layer=Layer.MULLION,
                x=interior.x, y=interior.y + bands[0][2],
                width=interior.width, height=m,
                tags={"orientation": "horizontal", "part": "transom"},
            ))

        return shapes
