"""Drawing context: accumulates state during a single render."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field

from .geometry import Box
from .layout import NormalizedWindow
from .parameters import DrawingParams, EngineConfig
from .scene import Shape


class Band(str, Enum):
    FULL = "full"
    UPPER = "upper"
    LOWER = "lower"


class DrawingMetrics(BaseModel):
    """Scale and scaled section sizes for one render."""
    scale: float
    scaled_width: float
    scaled_height: float
    frame: int
    mullion: int
    inner_border: int
    georgian_bar: int
    door_frame: int
    frame_inset: float

    @property
    def interior(self) -> Box:
        """Area inside the outer frame."""
        return Box(
            x=self.frame_inset,
            y=self.frame_inset,
            width=max(0.0, self.scaled_width - 2 * self.frame_inset),
            height=max(0.0, self.scaled_height - 2 * self.frame_inset),
        )


class PaneRegion(BaseModel):
    """One casement (or sliding sash) laid out by a pane rule."""
    index: int
    band: Band = Band.FULL
    box: Box
    glass: Box


class DrawingContext(BaseModel):
    """
    Holds all state during a single render pass.

    Layout rules publish panes; decoration rules read them.
    Every rule appends shapes to the window or annotation group.
    """
    # Input
    window: NormalizedWindow
    metrics: DrawingMetrics
    params: DrawingParams
    config: EngineConfig = Field(default_factory=EngineConfig)

    # Layout results (populated by pane rules)
    panes: list[PaneRegion] = []

    # Output (populated by all rules)
    shapes: list[Shape] = []
    annotations: list[Shape] = []

    def add_shapes(self, shapes: list[Shape], annotation: bool = False) -> None:
        if annotation:
            self.annotations.extend(shapes)
        else:
            self.shapes.extend(shapes)

    def panes_in(self, band: Band) -> list[PaneRegion]:
        return [p for p in self.panes if p.band == band]
