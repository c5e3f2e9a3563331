"""
Unit Tests for the multi-page export pipeline.
"""

import logging
import random
from datetime import date, datetime, timezone

import pytest
from PIL import Image
from pypdf import PdfReader

from vision_trainer.export import (
    ExportConfig,
    ExportError,
    build_filename,
    export_pdf,
    plan_page_letters,
)
from vision_trainer.export import pipeline as pipeline_module

TODAY = date(2026, 10, 19)


def _blank_rasterizer(letters, page_settings, orientation, *, show_fixation, scale):
    return Image.new("RGB", (60, 42), page_settings.background_color)


class TestBuildFilename:
    """Tests for build_filename()."""

    def test_filename_when_tag_and_date_then_pattern(self):
        assert build_filename("vision-trainer-patterns", 3, TODAY) == (
            "vision-trainer-patterns_3pages_2026-10-19.pdf"
        )

    def test_filename_when_no_date_given_then_utc_date_used(self, monkeypatch):
        # Arrange
        seen_tz = []

        class FixedClock:
            @staticmethod
            def now(tz=None):
                seen_tz.append(tz)
                return datetime(2026, 10, 19, 23, 30, tzinfo=timezone.utc)

        monkeypatch.setattr(pipeline_module, "datetime", FixedClock)

        # Act
        name = build_filename("tag", 2)

        # Assert
        assert name == "tag_2pages_2026-10-19.pdf"
        assert seen_tz == [timezone.utc]


class TestPlanPageLetters:
    """Tests for plan_page_letters()."""

    def test_plan_when_first_page_then_letters_verbatim(self, grid_letters, rng):
        config = ExportConfig(letters=grid_letters, copies=3, include_digits=True, allow_duplicates=False)

        pages = list(plan_page_letters(config, rng))

        assert len(pages) == 3
        assert pages[0] == tuple(grid_letters)
        for page in pages[1:]:
            assert [(l.id, l.x, l.y) for l in page] == [(l.id, l.x, l.y) for l in grid_letters]
            assert len({l.char for l in page}) == 28

    def test_plan_when_pool_too_small_then_later_pages_reuse_base(self, grid_letters, rng, caplog):
        config = ExportConfig(letters=grid_letters, copies=2, allow_duplicates=False)

        with caplog.at_level(logging.WARNING):
            pages = list(plan_page_letters(config, rng))

        assert pages == [tuple(grid_letters), tuple(grid_letters)]
        assert "Reusing the base layout" in caplog.text


class TestExportPdf:
    """Tests for export_pdf()."""

    def test_export_when_three_unique_copies_then_progress_and_three_pages(self, grid_letters, tmp_path):
        # Arrange
        config = ExportConfig(
            letters=grid_letters,
            copies=3,
            include_digits=True,
            allow_duplicates=False,
            scale=0.25,
            output_dir=tmp_path,
        )
        progress = []

        # Act
        result = export_pdf(
            config,
            on_progress=lambda done, total: progress.append((done, total)),
            rng=random.Random(5),
            today=TODAY,
        )

        # Assert
        assert progress == [(1, 3), (2, 3), (3, 3)]
        assert result.page_count == 3
        assert result.pdf_path == tmp_path / "vision-trainer-patterns_3pages_2026-10-19.pdf"
        assert len(PdfReader(result.pdf_path).pages) == 3
        assert result.page_letters[0] == tuple(grid_letters)
        assert result.elapsed_seconds >= 0

    def test_export_when_rasterizer_fails_then_export_error_and_no_file(self, grid_letters, tmp_path):
        # Arrange
        calls = []

        def flaky(letters, page_settings, orientation, *, show_fixation, scale):
            calls.append(1)
            if len(calls) == 2:
                raise RuntimeError("out of ink")
            return _blank_rasterizer(letters, page_settings, orientation,
                                     show_fixation=show_fixation, scale=scale)

        config = ExportConfig(letters=grid_letters, copies=3, output_dir=tmp_path)

        # Act
        with pytest.raises(ExportError, match="page 2 of 3") as excinfo:
            export_pdf(config, rasterizer=flaky, today=TODAY)

        # Assert
        assert isinstance(excinfo.value.__cause__, RuntimeError)
        assert list(tmp_path.iterdir()) == []

    def test_export_when_pdf_assembly_fails_then_export_error_and_no_file(self, grid_letters, tmp_path, monkeypatch):
        # Arrange
        def broken_writer(images, orientation, output, *, title=""):
            for _ in images:
                raise ValueError("bad image data")

        monkeypatch.setattr(pipeline_module, "render_pages_to_pdf", broken_writer)
        config = ExportConfig(letters=grid_letters, copies=2, output_dir=tmp_path)

        # Act
        with pytest.raises(ExportError, match="assemble") as excinfo:
            export_pdf(config, rasterizer=_blank_rasterizer, today=TODAY)

        # Assert
        assert isinstance(excinfo.value.__cause__, ValueError)
        assert list(tmp_path.iterdir()) == []

    def test_export_when_output_dir_override_then_written_there(self, grid_letters, tmp_path):
        config = ExportConfig(letters=grid_letters, output_dir=tmp_path / "ignored")
        target = tmp_path / "chosen"

        result = export_pdf(config, rasterizer=_blank_rasterizer, output_dir=target, today=TODAY)

        assert result.pdf_path.parent == target
        assert result.pdf_path.exists()

    def test_export_when_rasterizer_called_then_receives_config_options(self, grid_letters, tmp_path):
        seen = []

        def recording(letters, page_settings, orientation, *, show_fixation, scale):
            seen.append((orientation, show_fixation, scale))
            return _blank_rasterizer(letters, page_settings, orientation,
                                     show_fixation=show_fixation, scale=scale)

        config = ExportConfig(letters=grid_letters, orientation="portrait", show_fixation=True,
                              scale=1.5, output_dir=tmp_path)
        export_pdf(config, rasterizer=recording, today=TODAY)

        assert [(o.value, f, s) for o, f, s in seen] == [("portrait", True, 1.5)]
