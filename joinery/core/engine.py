"""Drawing engine: normalises a window record and runs the drawing rules."""

from __future__ import annotations
import logging

from joinery.core.catalog import TypeCatalog, default_catalog
from joinery.core.layout import compute_metrics
from joinery.core.normalizer import normalize_window
from joinery.core.registry import RuleRegistry, create_default_registry
from joinery.models import (
    DrawingContext, DrawingParams, EngineConfig, Point2D, SceneGraph,
    ShapeGroup, WindowDesign,
)

logger = logging.getLogger("joinery.engine")


class DrawingEngine:
    """
    Stateless window renderer.

    Takes a window record, normalises it, computes the scale,
    executes the applicable rules and returns a complete SceneGraph.
    """

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        catalog: TypeCatalog | None = None,
        params: DrawingParams | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.catalog = catalog or default_catalog
        self.params = params or DrawingParams()
        self.config = config or EngineConfig()

    def render(self, design: WindowDesign) -> SceneGraph:
        window = normalize_window(design, self.catalog, self.config)
        metrics = compute_metrics(window.width, window.height, self.params)

        context = DrawingContext(
            window=window,
            metrics=metrics,
            params=self.params,
            config=self.config,
        )

        rules = self.registry.get_applicable_rules(context)
        for rule in rules:
            context.add_shapes(rule.generate(context), annotation=rule.annotation)

        logger.debug(
            "Rendered %r as %s at scale %.4f with %d rules",
            window.name, window.entry.id, metrics.scale, len(rules),
        )

        p = self.params
        return SceneGraph(
            width=metrics.scaled_width + p.dimension_margin,
            height=metrics.scaled_height + p.dimension_band + p.label_margin,
            scaled_width=metrics.scaled_width,
            scaled_height=metrics.scaled_height,
            scale=metrics.scale,
            type_id=window.entry.id,
            requested_type=window.requested_type,
            used_fallback=window.used_fallback,
            groups=[
                ShapeGroup(
                    name="window",
                    offset=Point2D(x=0.0, y=p.drawing_offset_y),
                    shapes=context.shapes,
                ),
                ShapeGroup(name="annotations", shapes=context.annotations),
            ],
        )
