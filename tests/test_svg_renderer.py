"""Tests for SVG serialisation of scene graphs."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from joinery.core.engine import DrawingEngine
from joinery.models import Layer, WindowDesign
from joinery.services.svg_renderer import SvgRenderer

SVG_NS = "{http://www.w3.org/2000/svg}"


@pytest.fixture
def svg(engine: DrawingEngine, double_window: WindowDesign) -> str:
    return SvgRenderer().render(engine.render(double_window))


class TestSvgStructure:

    def test_svg_is_valid_xml(self, svg: str) -> None:
        root = ET.fromstring(svg)
        assert root.tag == f"{SVG_NS}svg"

    def test_dimensions_match_bounding_box(self, engine: DrawingEngine, double_window: WindowDesign) -> None:
        scene = engine.render(double_window)
        root = ET.fromstring(SvgRenderer().render(scene))
        assert float(root.get("width")) == pytest.approx(scene.width, abs=0.01)
        assert float(root.get("height")) == pytest.approx(scene.height, abs=0.01)
        assert root.get("data-type") == "double"

    def test_groups_translated(self, svg: str) -> None:
        groups = ET.fromstring(svg).findall(f"{SVG_NS}g")
        assert [g.get("class") for g in groups] == ["window", "annotations"]
        assert groups[0].get("transform") == "translate(0, 10)"

    def test_every_shape_written(self, engine: DrawingEngine, double_window: WindowDesign) -> None:
        scene = engine.render(double_window)
        root = ET.fromstring(SvgRenderer().render(scene))
        written = sum(len(list(g)) for g in root.findall(f"{SVG_NS}g"))
        assert written == scene.stats.total_shapes


class TestShapes:

    def test_hinge_indicators_dashed(self, svg: str) -> None:
        root = ET.fromstring(svg)
        polylines = [
            p for p in root.iter(f"{SVG_NS}polyline") if p.get("class") == "hinge_indicator"
        ]
        assert len(polylines) == 2
        assert all(p.get("stroke-dasharray") == "3,3" for p in polylines)

    def test_rotated_height_label(self, svg: str) -> None:
        texts = {t.text: t for t in ET.fromstring(svg).iter(f"{SVG_NS}text")}
        assert "rotate(90" in texts["1200mm"].get("transform")
        assert texts["Bedroom Window"].get("font-weight") == "bold"

    def test_text_is_escaped(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(name="Bath & <Loo>", type="single", width=600, height=900))
        svg = SvgRenderer().render(scene)
        assert "Bath &amp; &lt;Loo&gt;" in svg
        texts = [t.text for t in ET.fromstring(svg).iter(f"{SVG_NS}text")]
        assert "Bath & <Loo>" in texts

    def test_door_handle_is_circle(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(type="door-full-glazed", width=900, height=2000))
        root = ET.fromstring(SvgRenderer().render(scene))
        assert len(list(root.iter(f"{SVG_NS}circle"))) == 1

    def test_layer_filter(self, engine: DrawingEngine, double_window: WindowDesign) -> None:
        renderer = SvgRenderer(include_layers={Layer.FRAME})
        root = ET.fromstring(renderer.render(engine.render(double_window)))
        shapes = [el for g in root.findall(f"{SVG_NS}g") for el in g]
        assert len(shapes) == 1
        assert shapes[0].get("class") == "frame"
