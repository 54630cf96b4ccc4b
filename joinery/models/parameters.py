"""Drawing parameters and engine configuration."""

from __future__ import annotations
from pydantic import BaseModel


class DrawingParams(BaseModel):
    """Display bounds and real-world section sizes used by the drawing engine."""
    max_draw_width: float = 300.0     # px
    max_draw_height: float = 240.0    # px
    cap_scale: float = 0.2            # px per mm; keeps small windows small

    frame_mm: float = 45.0
    mullion_mm: float = 30.0
    inner_border_mm: float = 50.0
    georgian_bar_mm: float = 25.0
    door_frame_mm: float = 55.0

    min_frame_px: int = 3
    min_mullion_px: int = 2
    min_inner_border_px: int = 2
    min_georgian_bar_px: int = 2
    min_door_frame_px: int = 4
    frame_gap_px: float = 2.0         # between the frame and the casements

    dimension_margin: float = 50.0    # right-hand space for the height annotation
    dimension_band: float = 60.0      # bottom space for the width annotation
    label_margin: float = 30.0        # bottom space for name/type labels
    drawing_offset_y: float = 10.0


class EngineConfig(BaseModel):
    """Controls validation strictness and which rules run."""
    enforce_catalog_ranges: bool = False
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
