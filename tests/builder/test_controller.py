"""
Unit tests for the build controller and its metadata helpers.
"""

import json
from pathlib import Path

import pytest

from worksheet_toolkit.builder import BuilderConfig, BuildError, build_worksheet
from worksheet_toolkit.builder.controller import _build_metadata, _write_metadata
from worksheet_toolkit.builder.layout import layout_worksheet
from worksheet_toolkit.core.models import BasicEquation, WorksheetLayout, WorksheetSettings


@pytest.fixture
def sample_worksheet(worksheet_file):
    return worksheet_file({
        "schema_version": 1,
        "title": "Week 3",
        "layout": "single-column",
        "problems": [
            {"id": "a", "type": "basic-equation", "leftOperand": "12", "operator": "+", "rightOperand": "5"},
            {"id": "b", "type": "word-problem", "problemText": ""},
            {"id": "c", "type": "multiple-choice", "question": "Pick", "options": ["1", "2"]},
            "7 x 8 = ____",
        ],
    })


class TestBuilderConfig:
    """Tests for BuilderConfig validation."""

    def test_init_when_defaults_then_output_beside_input(self):
        config = BuilderConfig(input_path=Path("/data/week3.json"))

        assert config.resolved_output_dir == Path("/data/output")
        assert config.pdf_name == "worksheet.pdf"

    def test_init_when_pdf_name_not_pdf_then_raises(self):
        with pytest.raises(ValueError, match="pdf_name"):
            BuilderConfig(input_path=Path("a.json"), pdf_name="sheet.png")

    def test_init_when_zoom_not_positive_then_raises(self):
        with pytest.raises(ValueError, match="preview_zoom"):
            BuilderConfig(input_path=Path("a.json"), preview_zoom=0)

    def test_init_when_layout_is_string_then_raises(self):
        with pytest.raises(ValueError, match="layout"):
            BuilderConfig(input_path=Path("a.json"), layout="two-column")


class TestBuildWorksheet:
    """Tests for build_worksheet()."""

    def test_build_when_valid_file_then_pdf_and_metadata_written(self, sample_worksheet, tmp_path):
        # Arrange
        config = BuilderConfig(input_path=sample_worksheet, output_dir=tmp_path / "out")

        # Act
        result = build_worksheet(config)

        # Assert
        assert result.worksheet_pdf == tmp_path / "out" / "worksheet.pdf"
        assert result.worksheet_pdf.exists()
        assert result.page_count == 1
        assert result.problem_count == 3
        assert result.skipped_count == 1
        assert "Skipped 1 incomplete problem(s)" in result.warnings
        assert result.preview_paths == ()
        metadata = json.loads((tmp_path / "out" / "build_metadata.json").read_text(encoding="utf-8"))
        assert metadata["pages"][0]["problem_ids"][:2] == ["a", "c"]

    def test_build_when_overrides_then_applied(self, sample_worksheet, tmp_path):
        config = BuilderConfig(
            input_path=sample_worksheet,
            output_dir=tmp_path,
            layout=WorksheetLayout.TWO_COLUMN,
            title="Overridden",
        )

        result = build_worksheet(config)

        assert result.layout.settings.layout is WorksheetLayout.TWO_COLUMN
        assert result.layout.settings.title == "Overridden"

    def test_build_when_previews_requested_then_pngs_written(self, sample_worksheet, tmp_path):
        config = BuilderConfig(input_path=sample_worksheet, output_dir=tmp_path, export_previews=True)

        result = build_worksheet(config)

        assert [p.name for p in result.preview_paths] == ["page-001.png"]
        assert result.preview_paths[0].parent == tmp_path / "preview"

    def test_build_when_metadata_disabled_then_not_written(self, sample_worksheet, tmp_path):
        config = BuilderConfig(input_path=sample_worksheet, output_dir=tmp_path, write_metadata=False)

        result = build_worksheet(config)

        assert not (tmp_path / "build_metadata.json").exists()
        assert result.metadata["problem_count"] == 3

    def test_build_when_missing_file_then_build_error(self, tmp_path):
        config = BuilderConfig(input_path=tmp_path / "missing.json")

        with pytest.raises(BuildError, match="Failed to load worksheet"):
            build_worksheet(config)

    def test_build_when_invalid_layout_then_build_error(self, worksheet_file):
        path = worksheet_file({"layout": "diagonal", "problems": []})

        with pytest.raises(BuildError):
            build_worksheet(BuilderConfig(input_path=path))


class TestBuildMetadata:
    """Tests for _build_metadata() and _write_metadata()."""

    def test_build_metadata_contains_required_fields(self):
        # Arrange
        config = BuilderConfig(input_path=Path("week3.json"))
        layout = layout_worksheet(
            [BasicEquation("1", "+", "1", id="x1")],
            WorksheetSettings(layout=WorksheetLayout.COMPACT_GRID),
        )

        # Act
        metadata = _build_metadata(config, layout, 1)

        # Assert
        for key in ("generated_at", "generator_version", "settings", "font_scale", "page_count", "pages"):
            assert key in metadata
        assert metadata["settings"]["layout"] == "compact-grid"
        assert metadata["page_size_in"] == [8.5, 11.0]
        assert metadata["pages"] == [
            {"page": 1, "problem_ids": ["x1"], "height_used_in": round(layout.pages[0].height_used, 4)}
        ]

    def test_write_metadata_when_dir_missing_then_created(self, tmp_path):
        target = tmp_path / "nested" / "out"

        _write_metadata(target, {"page_count": 1})

        assert json.loads((target / "build_metadata.json").read_text(encoding="utf-8")) == {"page_count": 1}
