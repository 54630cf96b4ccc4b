from .geometry import Point2D, Box, round_half_up
from .window import (
    CamelModel, Category, GlassType, OpeningSide,
    WindowDesign, WindowCreate, WindowSpec, ProjectCreate, Project,
)
from .catalog import LayoutKind, DoorStyle, TypeCatalogEntry, CatalogMatch
from .layout import (
    TransomLayout, CasementLayout, SlidingLayout, DoorLayout, WindowLayout,
    GeorgianBars, NormalizedWindow,
)
from .scene import (
    Layer, RectShape, LineShape, PolylineShape, CircleShape, TextShape, Shape,
    ShapeGroup, SceneGraph, SceneStats,
)
from .parameters import DrawingParams, EngineConfig
from .context import Band, DrawingMetrics, PaneRegion, DrawingContext

__all__ = [
    "Point2D", "Box", "round_half_up",
    "CamelModel", "Category", "GlassType", "OpeningSide",
    "WindowDesign", "WindowCreate", "WindowSpec", "ProjectCreate", "Project",
    "LayoutKind", "DoorStyle", "TypeCatalogEntry", "CatalogMatch",
    "TransomLayout", "CasementLayout", "SlidingLayout", "DoorLayout", "WindowLayout",
    "GeorgianBars", "NormalizedWindow",
    "Layer", "RectShape", "LineShape", "PolylineShape", "CircleShape", "TextShape", "Shape",
    "ShapeGroup", "SceneGraph", "SceneStats",
    "DrawingParams", "EngineConfig",
    "Band", "DrawingMetrics", "PaneRegion", "DrawingContext",
]
