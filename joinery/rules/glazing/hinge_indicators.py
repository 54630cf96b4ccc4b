"""Hinge indicators: the dashed chevron marking an opening casement.

The chevron runs from a top corner to the vertical midpoint of the
hinged edge and back to the bottom corner on the same side as it
started, so a left-hinged sash shows a '<' opening from the right edge.
"""

from __future__ import annotations

from joinery.rules.base import DrawingRule
from joinery.models import (
    Band, CasementLayout, DrawingContext, Layer, OpeningSide, PaneRegion,
    Point2D, PolylineShape, Shape,
)

INDICATOR_COLOR = "#334155"
INDICATOR_DASH = [3.0, 3.0]

LEFT = "left"
RIGHT = "right"


def hinged_panes(side: OpeningSide | None, pane_count: int) -> list[tuple[int, str]]:
    """Map an opening descriptor to (pane index, hinge side) pairs."""
    if side is None or side == OpeningSide.NONE or pane_count < 1:
        return []
    last = pane_count - 1
    if side == OpeningSide.LEFT:
        return [(0, LEFT)]
    if side == OpeningSide.RIGHT:
        return [(last, RIGHT)]
    if side == OpeningSide.BOTH:
        return [(0, LEFT), (last, RIGHT)]
    if pane_count < 3:
        return []
    if side == OpeningSide.CENTER_LEFT:
        return [(1, LEFT)]
    if side == OpeningSide.CENTER_RIGHT:
        return [(pane_count - 2, RIGHT)]
    return []


def indicator_points(pane: PaneRegion, hinge: str) -> list[Point2D]:
    box = pane.box
    mid_y = box.y + box.height / 2
    if hinge == LEFT:
        return [
            Point2D(x=box.right, y=box.y),
            Point2D(x=box.x, y=mid_y),
            Point2D(x=box.right, y=box.bottom),
        ]
    return [
        Point2D(x=box.x, y=box.y),
        Point2D(x=box.right, y=mid_y),
        Point2D(x=box.x, y=box.bottom),
    ]


class HingeIndicatorRule(DrawingRule):
    """Dashed opening marks for casement windows, per band."""

    priority = 60
    dependencies = ["window.casement"]

    def get_id(self) -> str:
        return "glazing.hinge_indicators"

    def get_name(self) -> str:
        return "Hinge Indicators"

    def applies(self, context: DrawingContext) -> bool:
        return isinstance(context.window.layout, CasementLayout)

    def generate(self, context: DrawingContext) -> list[Shape]:
        layout = context.window.layout
        shapes: list[Shape] = []
        for band in (Band.FULL, Band.UPPER, Band.LOWER):
            panes = context.panes_in(band)
            if not panes:
                continue
            if band == Band.UPPER:
                side = layout.transom.top_opening if layout.transom else None
            else:
                side = layout.opening
            for index, hinge in hinged_panes(side, len(panes)):
                pane = panes[index]
                shapes.append(PolylineShape(
                    layer=Layer.HINGE_INDICATOR,
                    points=indicator_points(pane, hinge),
                    stroke=INDICATOR_COLOR,
                    stroke_width=1.0,
                    dash=list(INDICATOR_DASH),
                    tags={"pane": str(pane.index), "band": band.value, "hinge": hinge},
                ))
        return shapes
