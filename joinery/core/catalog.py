"""Type catalog: the static table of window and door types."""

from __future__ import annotations
import logging

from joinery.models import (
    Category, CatalogMatch, DoorStyle, LayoutKind, TypeCatalogEntry,
)

logger = logging.getLogger("joinery.catalog")


def _casement(id: str, name: str, description: str, panes: int, transom: bool,
              min_width: int, max_width: int, default_width: int) -> TypeCatalogEntry:
    return TypeCatalogEntry(
        id=id, name=name, description=description,
        category=Category.WINDOW, layout=LayoutKind.CASEMENT,
        pane_count=panes, has_transom=transom,
        min_width=min_width, max_width=max_width,
        min_height=800 if transom else 500, max_height=2000,
        default_width=default_width, default_height=1400 if transom else 1200,
    )


def _door(id: str, name: str, description: str, style: DoorStyle) -> TypeCatalogEntry:
    return TypeCatalogEntry(
        id=id, name=name, description=description,
        category=Category.DOOR, layout=LayoutKind.DOOR, door_style=style,
        min_width=700, max_width=1000, min_height=1900, max_height=2200,
        default_width=900, default_height=2000,
    )


WINDOW_TYPES: list[TypeCatalogEntry] = [
    _casement("single", "Single Casement",
              "A single pane window that opens outward",
              1, False, 400, 1000, 600),
    _casement("double", "Double Casement",
              "A window with two panes side by side, both can open outward",
              2, False, 800, 2000, 1200),
    _casement("triple", "Triple Casement",
              "A window with three panes side by side",
              3, False, 1200, 2500, 1800),
    _casement("quad", "Quad Casement",
              "A window with four equal panes side by side",
              4, False, 1600, 3000, 2400),
    _casement("single-transom", "Single with Transom",
              "A single casement window with a fixed rectangular transom at the top",
              1, True, 400, 1000, 600),
    _casement("double-transom", "Double with Transom",
              "A double casement window with a fixed rectangular transom at the top",
              2, True, 800, 2000, 1200),
    _casement("triple-transom", "Triple with Transom",
              "A triple casement window with a fixed rectangular transom at the top",
              3, True, 1200, 2500, 1800),
    _casement("quad-transom", "Quad with Transom",
              "A quad casement window with a fixed rectangular transom at the top",
              4, True, 1600, 3000, 2400),
    TypeCatalogEntry(
        id="slider", name="Sliding Window",
        description="Two sashes, one fixed and one sliding horizontally",
        category=Category.WINDOW, layout=LayoutKind.SLIDING, pane_count=2,
        min_width=800, max_width=2400, min_height=500, max_height=2000,
        default_width=1600, default_height=1200,
    ),
    TypeCatalogEntry(
        id="patio", name="Patio Doors",
        description="Large glass doors for patio access",
        category=Category.DOOR, layout=LayoutKind.SLIDING, pane_count=2,
        min_width=1500, max_width=3000, min_height=2000, max_height=2500,
        default_width=1800, default_height=2100,
    ),
    _door("door-fully-boarded", "Fully Boarded Door",
          "Solid door of horizontal boards", DoorStyle.FULLY_BOARDED),
    _door("door-full-glazed", "Fully Glazed Door",
          "Door with one large glass panel", DoorStyle.FULL_GLAZED),
    _door("door-half-glazed", "Half Glazed Door",
          "Glass in the upper half, solid panel below", DoorStyle.HALF_GLAZED),
    _door("door-6-panel", "6 Panel Door",
          "Traditional door with two columns of three raised panels", DoorStyle.SIX_PANEL),
]


class TypeCatalog:
    """
    Lookup over a fixed list of type entries.

    Unmatched ids resolve to the first entry. ``resolve`` tags and logs the
    substitution so callers can tell a requested type from a stand-in.
    """

    def __init__(self, entries: list[TypeCatalogEntry] | None = None) -> None:
        entries = list(WINDOW_TYPES if entries is None else entries)
        if not entries:
            raise ValueError("Type catalog needs at least one entry")
        self._entries: dict[str, TypeCatalogEntry] = {}
        for entry in entries:
            if entry.id in self._entries:
                raise ValueError(f"Duplicate catalog id: {entry.id!r}")
            self._entries[entry.id] = entry
        self._fallback = entries[0]

    @property
    def fallback(self) -> TypeCatalogEntry:
        return self._fallback

    def get(self, type_id: str) -> TypeCatalogEntry | None:
        return self._entries.get(type_id)

    def lookup(self, type_id: str) -> TypeCatalogEntry:
        return self._entries.get(type_id, self._fallback)

    def resolve(self, type_id: str) -> CatalogMatch:
        entry = self._entries.get(type_id)
        if entry is None:
            logger.warning(
                "Unknown window type %r, drawing %r instead", type_id, self._fallback.id,
            )
            return CatalogMatch(requested_id=type_id, entry=self._fallback, used_fallback=True)
        return CatalogMatch(requested_id=type_id, entry=entry)

    def list_entries(self, category: Category | None = None) -> list[TypeCatalogEntry]:
        return [
            e for e in self._entries.values()
            if category is None or e.category == category
        ]

    def validate_dimensions(self, entry: TypeCatalogEntry, width: int, height: int) -> list[str]:
        """Return human-readable range violations (empty when valid)."""
        errors: list[str] = []
        if not entry.min_width <= width <= entry.max_width:
            errors.append(
                f"{entry.name} width must be between {entry.min_width} and "
                f"{entry.max_width} mm (got {width})"
            )
        if not entry.min_height <= height <= entry.max_height:
            errors.append(
                f"{entry.name} height must be between {entry.min_height} and "
                f"{entry.max_height} mm (got {height})"
            )
        return errors


default_catalog = TypeCatalog()
