"""SVG serialisation of scene graphs.

Turns the layered shape tree produced by the drawing engine into a
standalone SVG document. Shapes keep their own fill/stroke when set;
otherwise the layer's default style applies.
"""

from __future__ import annotations
from xml.sax.saxutils import escape, quoteattr

from joinery.models import (
    CircleShape, Layer, LineShape, PolylineShape, RectShape, SceneGraph, Shape,
    ShapeGroup, TextShape,
)

# fill, stroke, stroke-width per layer
LAYER_STYLES: dict[Layer, tuple[str, str, float]] = {
    Layer.FRAME: ("#f1f5f9", "#1e293b", 1.5),
    Layer.MULLION: ("#cbd5e1", "#1e293b", 1.0),
    Layer.CASEMENT: ("none", "#1e293b", 1.0),
    Layer.GLASS: ("#dbeafe", "#64748b", 0.5),
    Layer.GEORGIAN_BAR: ("#ffffff", "#94a3b8", 0.5),
    Layer.HINGE_INDICATOR: ("none", "#334155", 1.0),
    Layer.SLIDE_ARROW: ("none", "#334155", 1.5),
    Layer.DOOR_PANEL: ("#ffffff", "#000000", 1.0),
    Layer.HANDLE: ("#888888", "#555555", 1.0),
    Layer.DIMENSION: ("none", "#000000", 1.0),
    Layer.LABEL: ("#000000", "none", 0.0),
}

TEXT_FILL = "#000000"
FONT_FAMILY = "Helvetica, Arial, sans-serif"


def _fmt(value: float) -> str:
    """Compact, deterministic number formatting."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


class SvgRenderer:
    """Renders scene graphs as SVG markup.

    Attributes:
        css_class: Class attribute of the root element.
        include_layers: When set, only shapes on these layers are written.
    """

    def __init__(self, css_class: str = "window-drawing-svg",
                 include_layers: set[Layer] | None = None) -> None:
        self.css_class = css_class
        self.include_layers = include_layers

    def render(self, scene: SceneGraph) -> str:
        width, height = _fmt(scene.width), _fmt(scene.height)
        parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
            f'viewBox="0 0 {width} {height}" class="{self.css_class}" '
            f'data-type="{escape(scene.type_id)}">'
        ]
        for group in scene.groups:
            parts.append(self._group(group))
        parts.append("</svg>")
        return "\n".join(parts)

    def _group(self, group: ShapeGroup) -> str:
        lines = [
            f'<g class="{escape(group.name)}" '
            f'transform="translate({_fmt(group.offset.x)}, {_fmt(group.offset.y)})">'
        ]
        for shape in group.shapes:
            if self.include_layers is not None and shape.layer not in self.include_layers:
                continue
            lines.append("  " + self._shape(shape))
        lines.append("</g>")
        return "\n".join(lines)

    def _style(self, shape: Shape) -> str:
        fill, stroke, width = LAYER_STYLES[shape.layer]
        fill = shape.fill or fill
        stroke = shape.stroke or stroke
        width = width if shape.stroke_width is None else shape.stroke_width
        attrs = f'fill="{fill}" stroke="{stroke}" stroke-width="{_fmt(width)}"'
        if shape.dash:
            attrs += f' stroke-dasharray="{",".join(_fmt(d) for d in shape.dash)}"'
        return attrs + f' class="{shape.layer.value}"'

    def _shape(self, shape: Shape) -> str:
        if isinstance(shape, RectShape):
            rounded = f' rx="{_fmt(shape.rx)}" ry="{_fmt(shape.rx)}"' if shape.rx else ""
            return (
                f'<rect x="{_fmt(shape.x)}" y="{_fmt(shape.y)}" '
                f'width="{_fmt(shape.width)}" height="{_fmt(shape.height)}"{rounded} '
                f'{self._style(shape)} />'
            )
        if isinstance(shape, LineShape):
            return (
                f'<line x1="{_fmt(shape.x1)}" y1="{_fmt(shape.y1)}" '
                f'x2="{_fmt(shape.x2)}" y2="{_fmt(shape.y2)}" {self._style(shape)} />'
            )
        if isinstance(shape, PolylineShape):
            points = " ".join(f"{_fmt(p.x)},{_fmt(p.y)}" for p in shape.points)
            return f'<polyline points="{points}" {self._style(shape)} />'
        if isinstance(shape, CircleShape):
            return (
                f'<circle cx="{_fmt(shape.cx)}" cy="{_fmt(shape.cy)}" r="{_fmt(shape.r)}" '
                f'{self._style(shape)} />'
            )
        if isinstance(shape, TextShape):
            return self._text(shape)
        raise TypeError(f"Unsupported shape: {type(shape).__name__}")

    def _text(self, shape: TextShape) -> str:
        attrs = [
            f'x="{_fmt(shape.x)}"',
            f'y="{_fmt(shape.y)}"',
            f'text-anchor="{shape.anchor}"',
            f'font-size="{_fmt(shape.font_size)}"',
            f"font-family={quoteattr(FONT_FAMILY)}",
            f'fill="{shape.fill or TEXT_FILL}"',
            f'class="{shape.layer.value}"',
        ]
        if shape.bold:
            attrs.append('font-weight="bold"')
        if shape.rotation:
            attrs.append(
                f'transform="rotate({_fmt(shape.rotation)} {_fmt(shape.x)} {_fmt(shape.y)})"'
            )
        return f"<text {' '.join(attrs)}>{escape(shape.text)}</text>"
