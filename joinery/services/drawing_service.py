"""High-level drawing service: facade for the API and exporters."""

from __future__ import annotations

from joinery.models import (
    Category, DrawingParams, EngineConfig, SceneGraph, TypeCatalogEntry, WindowDesign,
)
from joinery.core.catalog import TypeCatalog, default_catalog
from joinery.core.engine import DrawingEngine
from joinery.core.errors import InvalidDimensionError, UnknownWindowTypeError
from joinery.core.registry import RuleRegistry, create_default_registry
from joinery.services.svg_renderer import SvgRenderer


class DrawingService:
    """Validates input, delegates to the engine, serialises output."""

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        catalog: TypeCatalog | None = None,
        params: DrawingParams | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.catalog = catalog or default_catalog
        self.engine = DrawingEngine(self.registry, self.catalog, params, config)
        self.svg = SvgRenderer()

    def render(self, design: WindowDesign) -> SceneGraph:
        return self.engine.render(design)

    def render_svg(self, design: WindowDesign) -> str:
        return self.svg.render(self.engine.render(design))

    def validate(self, design: WindowDesign) -> TypeCatalogEntry:
        """
        Strict checks applied before a window is stored.

        The type must exist and the size must be inside its range.
        """
        entry = self.catalog.get(design.type)
        if entry is None:
            raise UnknownWindowTypeError(design.type)
        problems = self.catalog.validate_dimensions(entry, design.width, design.height)
        if problems:
            raise InvalidDimensionError(
                "; ".join(problems), width=design.width, height=design.height,
            )
        return entry

    def list_types(self, category: Category | None = None) -> list[TypeCatalogEntry]:
        return self.catalog.list_entries(category)

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
