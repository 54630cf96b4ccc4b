"""Type catalog entry models."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel

from .window import CamelModel, Category


class LayoutKind(str, Enum):
    CASEMENT = "casement"
    SLIDING = "sliding"
    DOOR = "door"


class DoorStyle(str, Enum):
    FULLY_BOARDED = "fully-boarded"
    FULL_GLAZED = "full-glazed"
    HALF_GLAZED = "half-glazed"
    SIX_PANEL = "6-panel"


class TypeCatalogEntry(CamelModel):
    """Static description of one window/door type."""
    id: str
    name: str
    description: str = ""
    category: Category = Category.WINDOW
    layout: LayoutKind = LayoutKind.CASEMENT
    pane_count: int = 1
    has_transom: bool = False
    door_style: DoorStyle | None = None
    min_width: int
    max_width: int
    min_height: int
    max_height: int
    default_width: int | None = None
    default_height: int | None = None


class CatalogMatch(BaseModel):
    """Result of resolving a type id; ``used_fallback`` marks a substitute."""
    requested_id: str
    entry: TypeCatalogEntry
    used_fallback: bool = False
