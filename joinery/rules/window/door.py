"""Doors: an independent panel layout per door style.

Casement opening fields and Georgian bars never apply to doors.
"""

from __future__ import annotations

from joinery.rules.base import DrawingRule, outer_frame
from joinery.rules.window.panes import glass_fill
from joinery.models import (
    Box, CircleShape, DoorLayout, DoorStyle, DrawingContext, Layer, RectShape, Shape,
)

PANEL_FILL = "#ffffff"
PANEL_STROKE = "#000000"
HANDLE_FILL = "#888888"
HANDLE_STROKE = "#555555"

BOARD_COUNT = 6
FULL_GLAZED_MARGIN = 20.0   # px between leaf edge and glass
HALF_GLAZED_MARGIN = 15.0
PANEL_COLUMNS = 2
PANEL_ROWS = 3
PANEL_GAP = 4.0
HANDLE_INSET = 15.0
HANDLE_RADIUS = 4.0


class DoorRule(DrawingRule):
    """Door frame, leaf, style-specific panels and a handle."""

    priority = 10

    def get_id(self) -> str:
        return "window.door"

    def get_name(self) -> str:
        return "Door Leaf"

    def applies(self, context: DrawingContext) -> bool:
        return isinstance(context.window.layout, DoorLayout)

    def generate(self, context: DrawingContext) -> list[Shape]:
        metrics = context.metrics
        inset = metrics.door_frame + context.params.frame_gap_px
        leaf = Box(
            x=0.0, y=0.0, width=metrics.scaled_width, height=metrics.scaled_height,
        ).inset(inset)

        shapes: list[Shape] = [
            outer_frame(context),
            self._panel(leaf, {"part": "leaf"}),
        ]

        style = context.window.layout.style
        if style == DoorStyle.FULLY_BOARDED:
            shapes.extend(self._boards(leaf))
        elif style == DoorStyle.FULL_GLAZED:
            shapes.append(self._glass(context, leaf.inset(FULL_GLAZED_MARGIN)))
        elif style == DoorStyle.HALF_GLAZED:
            shapes.extend(self._half_glazed(context, leaf))
        elif style == DoorStyle.SIX_PANEL:
            shapes.extend(self._raised_panels(leaf))

        shapes.append(CircleShape(
            layer=Layer.HANDLE,
            cx=max(leaf.x, leaf.right - HANDLE_INSET),
            cy=metrics.scaled_height / 2,
            r=HANDLE_RADIUS,
            fill=HANDLE_FILL, stroke=HANDLE_STROKE, stroke_width=1.0,
        ))
        return shapes

    def _panel(self, box: Box, tags: dict[str, str], stroke_width: float = 1.0, rx: float = 0.0) -> RectShape:
        return RectShape(
            layer=Layer.DOOR_PANEL,
            x=box.x, y=box.y, width=box.width, height=box.height, rx=rx,
            fill=PANEL_FILL, stroke=PANEL_STROKE, stroke_width=stroke_width,
            tags=tags,
        )

    def _glass(self, context: DrawingContext, box: Box) -> RectShape:
        return RectShape(
            layer=Layer.GLASS,
            x=box.x, y=box.y, width=box.width, height=box.height,
            fill=glass_fill(context.window.glass_type), stroke=PANEL_STROKE, stroke_width=1.0,
            tags={"glass": context.window.glass_type.value},
        )

    def _boards(self, leaf: Box) -> list[Shape]:
        board_height = leaf.height / BOARD_COUNT
        return [
            self._panel(
                Box(x=leaf.x, y=leaf.y + i * board_height, width=leaf.width, height=board_height),
                {"part": "board", "index": str(i)},
                stroke_width=0.5,
            )
            for i in range(BOARD_COUNT)
        ]

    def _half_glazed(self, context: DrawingContext, leaf: Box) -> list[Shape]:
        half = leaf.height / 2
        lower = Box(x=leaf.x, y=leaf.y + half, width=leaf.width, height=half)
        upper = Box(
            x=leaf.x + HALF_GLAZED_MARGIN,
            y=leaf.y + HALF_GLAZED_MARGIN,
            width=max(0.0, leaf.width - 2 * HALF_GLAZED_MARGIN),
            height=max(0.0, half - HALF_GLAZED_MARGIN),
        )
        return [
            self._panel(lower, {"part": "lower-panel"}),
            self._glass(context, upper),
        ]

    def _raised_panels(self, leaf: Box) -> list[Shape]:
        cell_width = leaf.width / PANEL_COLUMNS
        cell_height = leaf.height / PANEL_ROWS
        shapes: list[Shape] = []
        for index in range(PANEL_COLUMNS * PANEL_ROWS):
            column = index % PANEL_COLUMNS
            row = index // PANEL_COLUMNS
            cell = Box(
                x=leaf.x + column * cell_width,
                y=leaf.y + row * cell_height,
                width=cell_width,
                height=cell_height,
            )
            shapes.append(self._panel(
                cell.inset(PANEL_GAP), {"part": "raised-panel", "index": str(index)}, rx=2.0,
            ))
        return shapes
