"""Normalised window records: one tagged layout variant per rendering branch."""

from __future__ import annotations
from typing import Annotated, Literal, Union
from pydantic import BaseModel, Field

from .catalog import DoorStyle, TypeCatalogEntry
from .window import GlassType, OpeningSide


class TransomLayout(BaseModel):
    """Fixed upper band of a transom window."""
    height_mm: int                          # already clamped to [0, window height]
    top_opening: OpeningSide = OpeningSide.NONE


class CasementLayout(BaseModel):
    kind: Literal["casement"] = "casement"
    pane_count: int = 1
    opening: OpeningSide | None = OpeningSide.LEFT   # None = unrecognised value
    transom: TransomLayout | None = None


class SlidingLayout(BaseModel):
    kind: Literal["sliding"] = "sliding"
    pane_count: int = 2


class DoorLayout(BaseModel):
    kind: Literal["door"] = "door"
    style: DoorStyle


WindowLayout = Annotated[
    Union[CasementLayout, SlidingLayout, DoorLayout],
    Field(discriminator="kind"),
]


class GeorgianBars(BaseModel):
    horizontal: int = 1
    vertical: int = 1


class NormalizedWindow(BaseModel):
    """A fully-populated window record; no optional field is left to guess."""
    name: str
    width: int
    height: int
    glass_type: GlassType
    georgian_bars: GeorgianBars | None = None
    layout: WindowLayout
    entry: TypeCatalogEntry
    requested_type: str
    used_fallback: bool = False
