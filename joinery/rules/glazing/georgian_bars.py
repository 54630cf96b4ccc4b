"""Georgian bars: decorative glazing grid laid over each pane's glass."""

from __future__ import annotations

from joinery.core.layout import evenly_spaced
from joinery.rules.base import DrawingRule
from joinery.models import DrawingContext, Layer, PaneRegion, RectShape, Shape

BAR_FILL = "#ffffff"


class GeorgianBarsRule(DrawingRule):
    """h horizontal and v vertical bars per pane, splitting it into equal cells."""

    priority = 40
    dependencies = ["window.casement", "window.sliding"]

    def get_id(self) -> str:
        return "glazing.georgian_bars"

    def get_name(self) -> str:
        return "Georgian Bars"

    def applies(self, context: DrawingContext) -> bool:
        return context.window.georgian_bars is not None

    def generate(self, context: DrawingContext) -> list[Shape]:
        shapes: list[Shape] = []
        for pane in context.panes:
            shapes.extend(self._bars_for(pane, context))
        return shapes

    def _bars_for(self, pane: PaneRegion, context: DrawingContext) -> list[Shape]:
        bars = context.window.georgian_bars
        thickness = context.metrics.georgian_bar
        glass = pane.glass
        tags = {"pane": str(pane.index), "band": pane.band.value}
        shapes: list[Shape] = []

        for i, y in enumerate(evenly_spaced(glass.y, glass.height, bars.horizontal)):
            shapes.append(RectShape(
                layer=Layer.GEORGIAN_BAR,
                x=glass.x, y=y - thickness / 2, width=glass.width, height=thickness,
                fill=BAR_FILL,
                tags={**tags, "orientation": "horizontal", "index": str(i)},
            ))

        for i, x in enumerate(evenly_spaced(glass.x, glass.width, bars.vertical)):
            shapes.append(RectShape(
                layer=Layer.GEORGIAN_BAR,
                x=x - thickness / 2, y=glass.y, width=thickness, height=glass.height,
                fill=BAR_FILL,
                tags={**tags, "orientation": "vertical", "index": str(i)},
            ))

        return shapes
