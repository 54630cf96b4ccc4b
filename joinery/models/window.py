"""Window, door and project records as stored and exchanged."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys; Python code uses snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Category(str, Enum):
    WINDOW = "window"
    DOOR = "door"


class GlassType(str, Enum):
    CLEAR = "clear"
    OBSCURE = "obscure"
    TINTED = "tinted"
    LOW_E = "low-e"

    @classmethod
    def parse(cls, raw: str | None) -> GlassType | None:
        """Case-insensitive lookup; ``None`` when the value is not recognised."""
        if raw is None:
            return None
        key = raw.strip().lower().replace("_", "-").replace(" ", "-")
        if key in ("low-emissivity", "lowe"):
            key = "low-e"
        for member in cls:
            if member.value == key:
                return member
        return None


class OpeningSide(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"
    NONE = "none"
    CENTER_LEFT = "center-left"
    CENTER_RIGHT = "center-right"

    @classmethod
    def parse(cls, raw: str | None) -> OpeningSide | None:
        if raw is None:
            return None
        key = raw.strip().lower()
        if key == "outer":
            return cls.BOTH
        for member in cls:
            if member.value == key:
                return member
        return None


class WindowDesign(CamelModel):
    """Everything needed to draw a window or door; no persistence fields."""
    name: str = "Window"
    type: str = "single"
    width: int                                   # mm
    height: int                                  # mm
    glass_type: str = "clear"
    has_georgian_bars: bool = False
    georgian_bars_horizontal: int | None = Field(default=None, ge=0)
    georgian_bars_vertical: int | None = Field(default=None, ge=0)
    openable_casements: str | None = None        # left | right | both | none | center-*
    top_casements_openable: str | None = None    # upper band of transom types only
    has_transom: bool = False
    transom_height: int | None = None            # mm from the top
    position_x: int = 0
    position_y: int = 0


class WindowCreate(WindowDesign):
    project_id: int


class WindowSpec(WindowCreate):
    """A persisted window record."""
    id: int


class ProjectCreate(CamelModel):
    name: str = "Untitled Project"


class Project(ProjectCreate):
    id: int
    created_at: str
    updated_at: str
