"""Tests for the PDF project sheet."""

from __future__ import annotations

import re
from datetime import date

from joinery.core.engine import DrawingEngine
from joinery.models import WindowDesign
from joinery.services.pdf_export import PdfExporter


def _page_count(pdf: bytes) -> int:
    return len(re.findall(rb"/Type\s*/Page\b", pdf))


class TestPdfExport:

    def test_produces_pdf(self, engine: DrawingEngine, double_window: WindowDesign) -> None:
        pdf = PdfExporter().export("Cottage", [engine.render(double_window)], date(2024, 5, 1))
        assert pdf.startswith(b"%PDF")
        assert pdf.rstrip().endswith(b"%%EOF")

    def test_empty_project(self) -> None:
        assert PdfExporter().export("Empty", []).startswith(b"%PDF")

    def test_many_drawings_span_pages(self, engine: DrawingEngine) -> None:
        scenes = [
            engine.render(WindowDesign(type=t, width=900, height=2000))
            for t in ("door-fully-boarded", "door-full-glazed", "door-half-glazed", "door-6-panel")
        ]
        single = PdfExporter().export("Doors", scenes[:1])
        several = PdfExporter().export("Doors", scenes)
        assert _page_count(several) == 4
        assert _page_count(single) == 1
