"""End-to-end tests for the drawing engine."""

from __future__ import annotations

import pytest

from joinery.core.engine import DrawingEngine
from joinery.core.errors import InvalidDimensionError
from joinery.models import EngineConfig, Layer, SceneGraph, WindowDesign


def _casement(scene: SceneGraph, pane: int, band: str = "full"):
    (shape,) = scene.find(Layer.CASEMENT, pane=str(pane), band=band)
    return shape


class TestScenarios:

    def test_single_left_opening(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(
            type="single", width=1100, height=1100, openable_casements="left",
        ))
        assert scene.stats.panes == 1
        assert scene.stats.georgian_bars == 0
        (indicator,) = scene.find(Layer.HINGE_INDICATOR)
        pane = _casement(scene, 0)
        assert indicator.tags["hinge"] == "left"
        # Drawn from the right edge towards the hinged left edge
        assert indicator.points[0].x == pytest.approx(pane.x + pane.width)
        assert indicator.points[1].x == pytest.approx(pane.x)
        assert indicator.points[1].y == pytest.approx(pane.y + pane.height / 2)
        assert indicator.points[2].x == pytest.approx(pane.x + pane.width)

    def test_double_both_with_bars(self, engine: DrawingEngine, double_window: WindowDesign) -> None:
        scene = engine.render(double_window)
        assert scene.stats.panes == 2
        assert scene.stats.mullions == 1
        indicators = scene.find(Layer.HINGE_INDICATOR)
        assert sorted((s.tags["pane"], s.tags["hinge"]) for s in indicators) == [
            ("0", "left"), ("1", "right"),
        ]
        for pane in ("0", "1"):
            assert len(scene.find(Layer.GEORGIAN_BAR, pane=pane, orientation="horizontal")) == 2
            assert len(scene.find(Layer.GEORGIAN_BAR, pane=pane, orientation="vertical")) == 1

    def test_triple_transom(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(
            type="triple-transom", width=1500, height=1800, transom_height=500,
            top_casements_openable="left", openable_casements="right",
        ))
        assert len(scene.find(Layer.CASEMENT, band="upper")) == 3
        assert len(scene.find(Layer.CASEMENT, band="lower")) == 3
        assert len(scene.find(Layer.MULLION, orientation="vertical")) == 2
        assert len(scene.find(Layer.MULLION, part="transom")) == 1

        for pane in range(3):
            assert _casement(scene, pane, "upper").height == pytest.approx(500 * scene.scale)

        indicators = scene.find(Layer.HINGE_INDICATOR)
        assert sorted((s.tags["band"], s.tags["pane"], s.tags["hinge"]) for s in indicators) == [
            ("lower", "2", "right"), ("upper", "0", "left"),
        ]

    def test_unknown_type_falls_back(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(type="nonexistent-type", width=600, height=1000))
        assert scene.type_id == "single"
        assert scene.requested_type == "nonexistent-type"
        assert scene.used_fallback is True
        assert scene.stats.panes == 1

    def test_zero_width_rejected(self, engine: DrawingEngine) -> None:
        with pytest.raises(InvalidDimensionError):
            engine.render(WindowDesign(type="single", width=0, height=1000))


class TestDeterminism:

    def test_identical_input_identical_output(self, engine: DrawingEngine, double_window: WindowDesign) -> None:
        first = engine.render(double_window).model_dump_json()
        second = engine.render(double_window.model_copy()).model_dump_json()
        assert first == second

    def test_fresh_engines_agree(self, double_window: WindowDesign) -> None:
        assert (
            DrawingEngine().render(double_window).model_dump_json()
            == DrawingEngine().render(double_window).model_dump_json()
        )


class TestScaling:

    def test_capped_scale_grows_drawing_with_window(self, engine: DrawingEngine) -> None:
        small = engine.render(WindowDesign(type="double", width=500, height=600))
        large = engine.render(WindowDesign(type="double", width=750, height=900))
        assert small.scale == large.scale == pytest.approx(0.2)
        assert large.scaled_width == pytest.approx(small.scaled_width * 1.5)
        assert large.scaled_height == pytest.approx(small.scaled_height * 1.5)

    def test_bounded_scale_keeps_drawing_size(self, engine: DrawingEngine) -> None:
        small = engine.render(WindowDesign(type="quad", width=3000, height=2400))
        large = engine.render(WindowDesign(type="quad", width=6000, height=4800))
        assert large.scale == pytest.approx(small.scale / 2)
        assert large.scaled_width == pytest.approx(small.scaled_width)
        assert large.scaled_height == pytest.approx(small.scaled_height)

    def test_drawing_fits_display_bounds(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(type="quad", width=2900, height=1900))
        assert scene.scaled_width <= 300 + 1e-9
        assert scene.scaled_height <= 240 + 1e-9

    def test_bounding_box(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(type="single", width=1000, height=1000))
        assert scene.width == pytest.approx(scene.scaled_width + 50)
        assert scene.height == pytest.approx(scene.scaled_height + 60 + 30)


class TestGeorgianBars:

    def test_bars_evenly_spaced(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(
            type="single", width=900, height=1200, has_georgian_bars=True,
            georgian_bars_horizontal=3, georgian_bars_vertical=2,
        ))
        (glass,) = scene.find(Layer.GLASS, pane="0")
        bars = scene.find(Layer.GEORGIAN_BAR, orientation="horizontal")
        centres = [glass.y] + [b.y + b.height / 2 for b in bars] + [glass.y + glass.height]
        gaps = [b - a for a, b in zip(centres, centres[1:])]
        assert gaps == pytest.approx([gaps[0]] * 4)

        bars = scene.find(Layer.GEORGIAN_BAR, orientation="vertical")
        centres = [glass.x] + [b.x + b.width / 2 for b in bars] + [glass.x + glass.width]
        gaps = [b - a for a, b in zip(centres, centres[1:])]
        assert gaps == pytest.approx([gaps[0]] * 3)

    def test_zero_count_draws_no_bars_on_axis(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(
            type="double", width=1200, height=1000, has_georgian_bars=True,
            georgian_bars_horizontal=0, georgian_bars_vertical=2,
        ))
        assert scene.find(Layer.GEORGIAN_BAR, orientation="horizontal") == []
        assert len(scene.find(Layer.GEORGIAN_BAR, orientation="vertical")) == 4

    def test_transom_bands_each_get_bars(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(
            type="double-transom", width=1200, height=1400, has_georgian_bars=True,
        ))
        assert scene.stats.georgian_bars == 4 * 2


class TestHingeIndicators:

    @pytest.mark.parametrize("type_id", [
        "single", "double", "triple", "quad", "single-transom", "quad-transom", "slider",
    ])
    def test_none_draws_nothing(self, engine: DrawingEngine, type_id: str) -> None:
        scene = engine.render(WindowDesign(
            type=type_id, width=1600, height=1200,
            openable_casements="none", top_casements_openable="none",
        ))
        assert scene.stats.hinge_indicators == 0

    @pytest.mark.parametrize("type_id", ["double", "quad"])
    def test_both_marks_outer_panes(self, engine: DrawingEngine, type_id: str) -> None:
        scene = engine.render(WindowDesign(
            type=type_id, width=2000, height=1200, openable_casements="both",
        ))
        indicators = scene.find(Layer.HINGE_INDICATOR)
        last = str(scene.stats.panes - 1)
        assert sorted((s.tags["pane"], s.tags["hinge"]) for s in indicators) == [
            ("0", "left"), (last, "right"),
        ]

    def test_right_hinge_drawn_from_left_edge(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(
            type="double", width=1200, height=1000, openable_casements="right",
        ))
        (indicator,) = scene.find(Layer.HINGE_INDICATOR)
        pane = _casement(scene, 1)
        assert indicator.points[0].x == pytest.approx(pane.x)
        assert indicator.points[1].x == pytest.approx(pane.x + pane.width)
        assert indicator.dash == [3.0, 3.0]

    def test_center_left_on_triple(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(
            type="triple", width=1500, height=1000, openable_casements="center-left",
        ))
        (indicator,) = scene.find(Layer.HINGE_INDICATOR)
        assert (indicator.tags["pane"], indicator.tags["hinge"]) == ("1", "left")

    def test_center_right_on_quad(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(
            type="quad", width=2000, height=1000, openable_casements="center-right",
        ))
        (indicator,) = scene.find(Layer.HINGE_INDICATOR)
        assert (indicator.tags["pane"], indicator.tags["hinge"]) == ("2", "right")

    def test_center_on_double_draws_nothing(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(
            type="double", width=1200, height=1000, openable_casements="center-left",
        ))
        assert scene.stats.hinge_indicators == 0

    def test_malformed_value_draws_nothing(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(
            type="double", width=1200, height=1000, openable_casements="upwards",
        ))
        assert scene.stats.hinge_indicators == 0

    def test_default_opens_left(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(type="double", width=1200, height=1000))
        (indicator,) = scene.find(Layer.HINGE_INDICATOR)
        assert indicator.tags["pane"] == "0"

    def test_outer_is_an_alias_for_both(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(
            type="quad", width=2000, height=1200, openable_casements="outer",
        ))
        indicators = scene.find(Layer.HINGE_INDICATOR)
        assert sorted((s.tags["pane"], s.tags["hinge"]) for s in indicators) == [
            ("0", "left"), ("3", "right"),
        ]

    def test_scenario_two_draws_bars_and_hinges(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(
            type="double", width=1800, height=1200, openable_casements="both",
            has_georgian_bars=True, georgian_bars_horizontal=2, georgian_bars_vertical=1,
        ))
        assert len(scene.find(Layer.GEORGIAN_BAR)) == 6
        assert len(scene.find(Layer.HINGE_INDICATOR)) == 2


class TestTransom:

    @pytest.mark.parametrize("transom_height", [0, 250, 400, 900])
    def test_bands_sum_to_interior(self, engine: DrawingEngine, transom_height: int) -> None:
        scene = engine.render(WindowDesign(
            type="double-transom", width=1200, height=1400, transom_height=transom_height,
        ))
        (frame,) = scene.find(Layer.FRAME, part="outer")
        (transom,) = scene.find(Layer.MULLION, part="transom")
        upper = _casement(scene, 0, "upper")
        lower = _casement(scene, 0, "lower")
        inset = upper.y
        interior = frame.height - 2 * inset
        assert upper.height == pytest.approx(transom_height * scene.scale)
        assert upper.height + transom.height + lower.height == pytest.approx(interior)
        assert lower.y == pytest.approx(upper.y + upper.height + transom.height)

    def test_transom_taller_than_window_leaves_empty_lower_band(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(
            type="single-transom", width=600, height=900, transom_height=5000,
        ))
        assert _casement(scene, 0, "lower").height == 0


class TestAnnotations:

    def test_groups(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(type="single", width=600, height=1000))
        assert scene.group("window").offset.y == 10
        assert scene.group("annotations").offset.y == 0
        assert all(s.layer in (Layer.DIMENSION, Layer.LABEL) for s in scene.group("annotations").shapes)

    def test_dimension_text(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(type="single", width=600, height=1000))
        (width_text,) = [s for s in scene.find(Layer.DIMENSION, part="width") if s.kind == "text"]
        (height_text,) = [s for s in scene.find(Layer.DIMENSION, part="height") if s.kind == "text"]
        assert width_text.text == "600mm"
        assert height_text.text == "1000mm"
        assert height_text.rotation == 90

    def test_labels(self, engine: DrawingEngine) -> None:
        scene = engine.render(WindowDesign(name="Hall", type="double", width=1200, height=1000))
        (name,) = scene.find(Layer.LABEL, part="name")
        (type_label,) = scene.find(Layer.LABEL, part="type")
        assert name.text == "Hall"
        assert name.bold
        assert type_label.text == "Double Casement"


class TestRuleSelection:

    def test_disabled_rule_is_skipped(self) -> None:
        engine = DrawingEngine(config=EngineConfig(disabled_rules=["glazing.hinge_indicators"]))
        scene = engine.render(WindowDesign(type="double", width=1200, height=1000))
        assert scene.stats.hinge_indicators == 0
        assert scene.stats.panes == 2

    def test_enabled_rules_restrict_output(self) -> None:
        engine = DrawingEngine(config=EngineConfig(enabled_rules=["window.casement"]))
        scene = engine.render(WindowDesign(type="double", width=1200, height=1000))
        assert scene.group("annotations").shapes == []

    def test_strict_engine_rejects_out_of_range(self) -> None:
        engine = DrawingEngine(config=EngineConfig(enforce_catalog_ranges=True))
        with pytest.raises(InvalidDimensionError):
            engine.render(WindowDesign(type="single", width=1100, height=1100))
