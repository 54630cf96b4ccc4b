"""Scene graph output models: the drawable result of a render."""

from __future__ import annotations
from enum import Enum
from typing import Annotated, Iterator, Literal, Union
from pydantic import BaseModel, Field

from .geometry import Point2D
from .window import CamelModel


class Layer(str, Enum):
    FRAME = "frame"
    MULLION = "mullion"
    CASEMENT = "casement"
    GLASS = "glass"
    GEORGIAN_BAR = "georgian_bar"
    HINGE_INDICATOR = "hinge_indicator"
    SLIDE_ARROW = "slide_arrow"
    DOOR_PANEL = "door_panel"
    HANDLE = "handle"
    DIMENSION = "dimension"
    LABEL = "label"


class ShapeBase(CamelModel):
    layer: Layer
    fill: str | None = None
    stroke: str | None = None
    stroke_width: float | None = None
    dash: list[float] | None = None
    tags: dict[str, str] = {}  # pane index, band, orientation, hinge side...


class RectShape(ShapeBase):
    kind: Literal["rect"] = "rect"
    x: float
    y: float
    width: float
    height: float
    rx: float = 0.0


class LineShape(ShapeBase):
    kind: Literal["line"] = "line"
    x1: float
    y1: float
    x2: float
    y2: float


class PolylineShape(ShapeBase):
    kind: Literal["polyline"] = "polyline"
    points: list[Point2D]


class CircleShape(ShapeBase):
    kind: Literal["circle"] = "circle"
    cx: float
    cy: float
    r: float


class TextShape(ShapeBase):
    kind: Literal["text"] = "text"
    x: float
    y: float
    text: str
    anchor: str = "middle"
    font_size: float = 10.0
    bold: bool = False
    rotation: float = 0.0  # degrees, clockwise about (x, y)


Shape = Annotated[
    Union[RectShape, LineShape, PolylineShape, CircleShape, TextShape],
    Field(discriminator="kind"),
]


class ShapeGroup(CamelModel):
    """A named set of shapes drawn with a common offset."""
    name: str
    offset: Point2D = Point2D(x=0.0, y=0.0)
    shapes: list[Shape] = []


class SceneStats(CamelModel):
    """Summary counts for a rendered scene."""
    total_shapes: int = 0
    panes: int = 0
    mullions: int = 0
    georgian_bars: int = 0
    hinge_indicators: int = 0

    @classmethod
    def from_shapes(cls, shapes: list[Shape]) -> SceneStats:
        def count(layer: Layer) -> int:
            return sum(1 for s in shapes if s.layer == layer)
        return cls(
            total_shapes=len(shapes),
            panes=count(Layer.CASEMENT),
            mullions=count(Layer.MULLION),
            georgian_bars=count(Layer.GEORGIAN_BAR),
            hinge_indicators=count(Layer.HINGE_INDICATOR),
        )


class SceneGraph(CamelModel):
    """The complete rendered drawing of one window or door."""
    width: float                  # bounding box, pixels
    height: float
    scaled_width: float           # the window itself, pixels
    scaled_height: float
    scale: float
    type_id: str                  # the catalog entry actually drawn
    requested_type: str
    used_fallback: bool = False
    groups: list[ShapeGroup]
    stats: SceneStats | None = None

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = SceneStats.from_shapes(list(self.iter_shapes()))

    def iter_shapes(self, layer: Layer | None = None) -> Iterator[Shape]:
        for group in self.groups:
            for shape in group.shapes:
                if layer is None or shape.layer == layer:
                    yield shape

    def find(self, layer: Layer, **tags: str) -> list[Shape]:
        """Shapes on ``layer`` whose tags match every keyword given."""
        return [
            s for s in self.iter_shapes(layer)
            if all(s.tags.get(k) == v for k, v in tags.items())
        ]

    def group(self, name: str) -> ShapeGroup | None:
        for g in self.groups:
            if g.name == name:
                return g
        return None


