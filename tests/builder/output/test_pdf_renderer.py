"""
Tests for PDF rendering.

Generated files are inspected with pypdf.
"""

import pytest
from pypdf import PdfReader

from worksheet_toolkit.builder.layout import PageGeometry, layout_worksheet
from worksheet_toolkit.builder.output.pdf_renderer import _transform_y, render_to_pdf
from worksheet_toolkit.core.models import WorksheetLayout, WorksheetSettings


class TestRenderToPdf:
    """Tests for render_to_pdf()."""

    def test_render_when_two_pages_then_pdf_has_two_letter_pages(self, tmp_path, equation_factory):
        # Arrange
        layout = layout_worksheet(equation_factory(20), WorksheetSettings(title="Week 3"))
        output = tmp_path / "out" / "worksheet.pdf"

        # Act
        render_to_pdf(layout, output)

        # Assert
        reader = PdfReader(str(output))
        assert len(reader.pages) == 2
        for page in reader.pages:
            assert float(page.mediabox.width) == pytest.approx(612)
            assert float(page.mediabox.height) == pytest.approx(792)

    def test_render_when_text_then_extractable(self, tmp_path, equation_factory):
        layout = layout_worksheet(equation_factory(20), WorksheetSettings(title="Week 3"))
        output = tmp_path / "worksheet.pdf"

        render_to_pdf(layout, output)

        text = PdfReader(str(output)).pages[1].extract_text()
        assert "Week 3" in text
        assert "Page 2 of 2" in text
        assert "19 + 1" in text

    def test_render_when_empty_layout_then_single_blank_worksheet(self, tmp_path, caplog):
        layout = layout_worksheet([], WorksheetSettings())
        output = tmp_path / "empty.pdf"

        render_to_pdf(layout, output)

        assert len(PdfReader(str(output)).pages) == 1
        assert "Empty layout" in caplog.text

    def test_render_when_custom_geometry_then_page_size_follows(self, tmp_path, equation_factory):
        layout = layout_worksheet(
            equation_factory(5),
            WorksheetSettings(layout=WorksheetLayout.TWO_COLUMN),
            PageGeometry(width=5.5, height=8.5, margin=0.5),
        )
        output = tmp_path / "small.pdf"

        render_to_pdf(layout, output)

        page = PdfReader(str(output)).pages[0]
        assert float(page.mediabox.width) == pytest.approx(396)
        assert float(page.mediabox.height) == pytest.approx(612)

    def test_render_when_title_then_document_title_set(self, tmp_path):
        layout = layout_worksheet([], WorksheetSettings(title="Fractions"))
        output = tmp_path / "titled.pdf"

        render_to_pdf(layout, output)

        assert PdfReader(str(output)).metadata.title == "Fractions"


class TestTransformY:
    """Tests for coordinate flipping."""

    def test_transform_when_page_top_then_full_height(self):
        assert _transform_y(792, 0) == 792

    def test_transform_when_one_inch_down_then_72_points_lower(self):
        assert _transform_y(792, 1.0) == 720
