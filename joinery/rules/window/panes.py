"""Pane drawing shared by the casement and sliding rules."""

from __future__ import annotations

from joinery.models import (
    Band, Box, DrawingContext, GlassType, Layer, PaneRegion, RectShape, Shape,
)

GLASS_FILLS: dict[GlassType, str] = {
    GlassType.CLEAR: "#dbeafe",
    GlassType.OBSCURE: "#e6f0fa",
    GlassType.TINTED: "#c7d2e0",
    GlassType.LOW_E: "#d8f0e8",
}


def glass_fill(glass: GlassType) -> str:
    return GLASS_FILLS.get(glass, GLASS_FILLS[GlassType.CLEAR])


def draw_pane(
    context: DrawingContext, index: int, band: Band, box: Box,
) -> tuple[list[Shape], PaneRegion]:
    """Casement outline plus the glass inside its inner border."""
    glass = box.inset(context.metrics.inner_border)
    tags = {"pane": str(index), "band": band.value}
    shapes: list[Shape] = [
        RectShape(
            layer=Layer.CASEMENT,
            x=box.x, y=box.y, width=box.width, height=box.height,
            tags=tags,
        ),
        RectShape(
            layer=Layer.GLASS,
            x=glass.x, y=glass.y, width=glass.width, height=glass.height,
            fill=glass_fill(context.window.glass_type),
            tags={**tags, "glass": context.window.glass_type.value},
        ),
    ]
    return shapes, PaneRegion(index=index, band=band, box=box, glass=glass)


def vertical_mullions(context: DrawingContext, pane_boxes: list[Box], interior: Box) -> list[Shape]:
    """A full-height mullion after every pane but the last."""
    m = context.metrics.mullion
    return [
        RectShape(
            layer=Layer.MULLION,
            x=box.right, y=interior.y, width=m, height=interior.height,
            tags={"orientation": "vertical", "index": str(i)},
        )
        for i, box in enumerate(pane_boxes[:-1])
    ]
