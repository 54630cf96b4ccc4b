"""Layout arithmetic shared by every pane-drawing rule."""

from __future__ import annotations

from pydantic import BaseModel

from joinery.models import DrawingMetrics, DrawingParams, round_half_up


class PaneSpan(BaseModel):
    """Horizontal extent of one pane inside the interior."""
    x: float
    width: float


def compute_scale(width: float, height: float, params: DrawingParams) -> float:
    return min(
        params.max_draw_width / width,
        params.max_draw_height / height,
        params.cap_scale,
    )


def scaled_thickness(mm: float, scale: float, minimum: int) -> int:
    """Scale a section size to pixels, floored so thin scales stay visible."""
    return max(minimum, round_half_up(mm * scale))


def compute_metrics(width: int, height: int, params: DrawingParams) -> DrawingMetrics:
    scale = compute_scale(width, height, params)
    frame = scaled_thickness(params.frame_mm, scale, params.min_frame_px)
    return DrawingMetrics(
        scale=scale,
        scaled_width=width * scale,
        scaled_height=height * scale,
        frame=frame,
        mullion=scaled_thickness(params.mullion_mm, scale, params.min_mullion_px),
        inner_border=scaled_thickness(params.inner_border_mm, scale, params.min_inner_border_px),
        georgian_bar=scaled_thickness(params.georgian_bar_mm, scale, params.min_georgian_bar_px),
        door_frame=scaled_thickness(params.door_frame_mm, scale, params.min_door_frame_px),
        frame_inset=frame + params.frame_gap_px,
    )


def compute_pane_layout(
    pane_count: int,
    inner_width: float,
    mullion_thickness: float,
    origin_x: float = 0.0,
) -> list[PaneSpan]:
    """
    Split ``inner_width`` into equal panes separated by mullions.

    Pane ``i`` starts at ``origin_x + i * (pane_width + mullion)``; the
    mullion after it starts where the pane ends.
    """
    if pane_count < 1:
        raise ValueError(f"pane_count must be at least 1 (got {pane_count})")
    gaps = (pane_count - 1) * mullion_thickness
    pane_width = max(0.0, (inner_width - gaps) / pane_count)
    return [
        PaneSpan(x=origin_x + i * (pane_width + mullion_thickness), width=pane_width)
        for i in range(pane_count)
    ]


def split_transom(
    interior_height: float, transom_px: float, mullion_thickness: float,
) -> tuple[float, float]:
    """
    Return (upper, lower) band heights.

    upper + mullion + lower == interior_height; the upper band gives way
    when the requested transom would leave the lower band negative.
    """
    available = max(0.0, interior_height - mullion_thickness)
    upper = min(max(transom_px, 0.0), available)
    return upper, available - upper


def evenly_spaced(start: float, length: float, count: int) -> list[float]:
    """Positions of ``count`` dividers splitting ``length`` into equal cells."""
    if count <= 0:
        return []
    step = length / (count + 1)
    return [start + step * i for i in range(1, count + 1)]
