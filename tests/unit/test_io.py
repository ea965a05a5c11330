"""Unit tests for the file I/O layer.

Tests for SvgReader, SightWriter, and the SVG preview renderer.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from sightforge.domain import LineSegment
from sightforge.exceptions import MalformedInputError, SightWriteError
from sightforge.io.preview import render_preview_svg
from sightforge.io.reader import SvgReader
from sightforge.io.writer import SightWriter, sanitize_sight_name

SQUARE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg">'
    '<path d="M 0 0 L 10 0 L 10 5 C 10 6 9 7 8 7"/>'
    "</svg>"
)


class TestSvgReader:
    """Tests for SvgReader class."""

    def test_init(self):
        """Test SvgReader initialization."""
        path = Path("emblem.svg")
        reader = SvgReader(path)
        assert reader.path == path

    def test_read_nonexistent_file(self):
        """Test reading a nonexistent file raises FileNotFoundError."""
        reader = SvgReader(Path("nonexistent.svg"))
        with pytest.raises(FileNotFoundError):
            reader.read()

    def test_read(self, tmp_path):
        """Test the document text is returned unchanged."""
        svg_path = tmp_path / "emblem.svg"
        svg_path.write_text(SQUARE_SVG, encoding="utf-8")
        assert SvgReader(svg_path).read() == SQUARE_SVG

    def test_read_primitives(self, tmp_path):
        """Test the first path is parsed into lines and curves."""
        svg_path = tmp_path / "emblem.svg"
        svg_path.write_text(SQUARE_SVG, encoding="utf-8")
        lines, curves = SvgReader(svg_path).read_primitives()
        assert len(lines) == 2
        assert len(curves) == 1

    def test_non_utf8(self, tmp_path):
        """Test binary content raises MalformedInputError."""
        svg_path = tmp_path / "broken.svg"
        svg_path.write_bytes(b"\xff\xfe<svg>\x80</svg>")
        with pytest.raises(MalformedInputError, match="not UTF-8"):
            SvgReader(svg_path).read()


class TestSightWriter:
    """Tests for SightWriter class."""

    def test_write(self, tmp_path):
        """Test content is written and the path returned."""
        out = tmp_path / "emblem_sight.blk"
        written = SightWriter(out).write("drawLines{\n}\n")
        assert written == out
        assert out.read_text(encoding="utf-8") == "drawLines{\n}\n"

    def test_write_creates_directories(self, tmp_path):
        """Test missing parent directories are created."""
        out = tmp_path / "a" / "b" / "emblem_sight.blk"
        SightWriter(out).write("x")
        assert out.exists()

    def test_write_to_directory_fails(self, tmp_path):
        """Test an unwritable target raises SightWriteError."""
        with pytest.raises(SightWriteError) as exc_info:
            SightWriter(tmp_path).write("x")
        assert exc_info.value.path == str(tmp_path)

    def test_write_os_error(self, tmp_path):
        """Test OS errors are wrapped with the reason."""
        out = tmp_path / "emblem_sight.blk"
        with patch.object(Path, "write_text", side_effect=PermissionError("denied")):
            with pytest.raises(SightWriteError, match="denied"):
                SightWriter(out).write("x")

    def test_get_sight_path(self):
        """Test sight path generation."""
        assert SightWriter.get_sight_path(Path("emblem.svg")) == Path("emblem_sight.blk")
        assert SightWriter.get_sight_path(Path("out/my-logo 2.svg")) == Path(
            "out/mylogo_sight.blk"
        )

    def test_get_sight_path_no_letters(self):
        """Test a name with no usable characters falls back to 'sight'."""
        assert SightWriter.get_sight_path(Path("123.svg")) == Path("sight_sight.blk")

    def test_get_preview_path(self):
        """Test preview path sits next to the sight."""
        assert SightWriter.get_preview_path(Path("out/emblem_sight.blk")) == Path(
            "out/emblem_sight_preview.svg"
        )

    def test_get_preview_path_differs_from_same_stem_svg(self):
        """Test the preview never takes the name of an SVG beside the sight."""
        preview = SightWriter.get_preview_path(Path("out/emblem.blk"))
        assert preview == Path("out/emblem_preview.svg")
        assert preview != Path("out/emblem.svg")

    def test_sanitize_sight_name(self):
        """Test only letters and underscores survive."""
        assert sanitize_sight_name("Tiger_II (H)") == "Tiger_IIH"
        assert sanitize_sight_name("émblem") == "mblem"
        assert sanitize_sight_name("") == "sight"


class TestPreview:
    """Tests for render_preview_svg."""

    def test_connected_segments_share_subpath(self):
        """Test a segment starting at the previous end continues the path."""
        lines = [
            LineSegment.from_coords(0, 0, 0.5, 0),
            LineSegment.from_coords(0.5, 0, 0.5, 0.5),
        ]
        svg = render_preview_svg(lines, width=2.0, height=2.0)
        assert 'd="M 1.0 1.0 L 2.0 1.0 L 2.0 2.0"' in svg

    def test_disconnected_segment_starts_subpath(self):
        """Test a gap starts a new moveto."""
        lines = [
            LineSegment.from_coords(0, 0, 0.5, 0),
            LineSegment.from_coords(0, 0, -0.5, 0),
        ]
        svg = render_preview_svg(lines, width=2.0, height=2.0)
        assert 'd="M 1.0 1.0 L 2.0 1.0 M 1.0 1.0 L 0.0 1.0"' in svg

    def test_view_box(self):
        """Test the viewBox matches the requested size."""
        svg = render_preview_svg([], width=1777.0, height=1000.0)
        assert 'viewBox="0 0 1777.0 1000.0"' in svg
        assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg"')
        assert svg.endswith("</svg>")

    def test_empty(self):
        """Test an empty line set renders an empty path."""
        assert '<path d="" ' in render_preview_svg([])
