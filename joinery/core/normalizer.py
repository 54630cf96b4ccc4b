"""Window record normalisation: applies every default once, before any rule runs."""

from __future__ import annotations
import logging

from joinery.core.catalog import TypeCatalog
from joinery.core.errors import InvalidDimensionError
from joinery.models import (
    CasementLayout, DoorLayout, DoorStyle, GeorgianBars, GlassType, LayoutKind,
    NormalizedWindow, OpeningSide, SlidingLayout, TransomLayout, WindowDesign,
    EngineConfig,
)

logger = logging.getLogger("joinery.normalizer")

DEFAULT_TRANSOM_HEIGHT = 400  # mm
DEFAULT_BAR_COUNT = 1


def _opening(raw: str | None, default: OpeningSide, field: str) -> OpeningSide | None:
    if raw is None:
        return default
    side = OpeningSide.parse(raw)
    if side is None:
        logger.debug("Unrecognised %s value %r, no hinge indicator", field, raw)
    return side


def normalize_window(
    design: WindowDesign,
    catalog: TypeCatalog,
    config: EngineConfig | None = None,
) -> NormalizedWindow:
    """
    Turn a stored window record into a fully-populated drawing record.

    Raises InvalidDimensionError for non-positive sizes, and for sizes
    outside the catalog range when ``config.enforce_catalog_ranges`` is set.
    """
    if config is None:
        config = EngineConfig()

    if design.width <= 0 or design.height <= 0:
        raise InvalidDimensionError(
            f"Window dimensions must be positive (got {design.width} x {design.height} mm)",
            width=design.width, height=design.height,
        )

    match = catalog.resolve(design.type)
    entry = match.entry

    if config.enforce_catalog_ranges:
        problems = catalog.validate_dimensions(entry, design.width, design.height)
        if problems:
            raise InvalidDimensionError(
                "; ".join(problems), width=design.width, height=design.height,
            )

    glass = GlassType.parse(design.glass_type)
    if glass is None:
        logger.debug("Unrecognised glass type %r, drawing clear glass", design.glass_type)
        glass = GlassType.CLEAR

    if entry.layout == LayoutKind.DOOR:
        layout = DoorLayout(style=entry.door_style or DoorStyle.FULLY_BOARDED)
    elif entry.layout == LayoutKind.SLIDING:
        layout = SlidingLayout(pane_count=entry.pane_count)
    else:
        transom = None
        if entry.has_transom or design.has_transom:
            transom = TransomLayout(
                height_mm=_clamp_transom(design),
                top_opening=_opening(
                    design.top_casements_openable, OpeningSide.NONE, "topCasementsOpenable",
                ) or OpeningSide.NONE,
            )
        layout = CasementLayout(
            pane_count=entry.pane_count,
            opening=_opening(design.openable_casements, OpeningSide.LEFT, "openableCasements"),
            transom=transom,
        )

    bars = None
    if design.has_georgian_bars and entry.layout != LayoutKind.DOOR:
        bars = GeorgianBars(
            horizontal=_bar_count(design.georgian_bars_horizontal),
            vertical=_bar_count(design.georgian_bars_vertical),
        )

    return NormalizedWindow(
        name=design.name,
        width=design.width,
        height=design.height,
        glass_type=glass,
        georgian_bars=bars,
        layout=layout,
        entry=entry,
        requested_type=design.type,
        used_fallback=match.used_fallback,
    )


def _bar_count(raw: int | None) -> int:
    return DEFAULT_BAR_COUNT if raw is None else max(0, raw)


def _clamp_transom(design: WindowDesign) -> int:
    raw = DEFAULT_TRANSOM_HEIGHT if design.transom_height is None else design.transom_height
    clamped = min(max(raw, 0), design.height)
    if clamped != raw:
        logger.warning(
            "Transom height %d mm clamped to %d mm for %r", raw, clamped, design.name,
        )
    return clamped
