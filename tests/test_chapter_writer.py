"""Tests for metadata file writer."""

import pytest
from pathlib import Path
import tempfile

from edl_chapter_converter.chapter_writer import MetadataWriter
from edl_chapter_converter.models import Chapter, ChapterKind


def parse_metadata(text):
    """Read chapter blocks back by field name."""
    chapters = []
    current = None
    for line in text.splitlines():
        if line == "[CHAPTER]":
            current = {}
            chapters.append(current)
        elif current is not None and "=" in line:
            key, value = line.split("=", 1)
            current[key] = value
    return chapters


class TestMetadataWriter:
    """Test MetadataWriter class."""

    @pytest.fixture
    def writer(self):
        """Create a MetadataWriter instance."""
        return MetadataWriter()

    @pytest.fixture
    def sample_chapters(self):
        """Create sample chapters."""
        return [
            Chapter(0, 3000, ChapterKind.INTRO),
            Chapter(3000, 15000, ChapterKind.CONTENT),
            Chapter(15000, 18000, ChapterKind.OUTRO),
            Chapter(18000, 20000, ChapterKind.CONTENT),
        ]

    def test_render_exact_output(self, writer):
        """Test the rendered text matches the ffmetadata layout."""
        chapters = [
            Chapter(0, 1000, ChapterKind.CONTENT),
            Chapter(1000, 5000, ChapterKind.INTRO),
        ]

        assert writer.render(chapters) == (
            ";FFMETADATA1\n"
            "\n"
            "[CHAPTER]\n"
            "TIMEBASE=1/1000\n"
            "START=0\n"
            "END=1000\n"
            "title=Content\n"
            "\n"
            "[CHAPTER]\n"
            "TIMEBASE=1/1000\n"
            "START=1000\n"
            "END=5000\n"
            "title=Intro\n"
        )

    def test_render_no_chapters(self, writer):
        assert writer.render([]) == ";FFMETADATA1\n"

    def test_render_reads_back(self, writer, sample_chapters):
        """Test parsing the output by field name reproduces the chapters."""
        parsed = parse_metadata(writer.render(sample_chapters))

        assert len(parsed) == len(sample_chapters)
        for block, chapter in zip(parsed, sample_chapters):
            assert block["TIMEBASE"] == "1/1000"
            assert int(block["START"]) == chapter.start
            assert int(block["END"]) == chapter.end
            assert block["title"] == chapter.title

    def test_render_keeps_order(self, writer):
        """Test chapters are written in the given order without sorting."""
        chapters = [
            Chapter(5000, 6000, ChapterKind.OUTRO),
            Chapter(0, 5000, ChapterKind.CONTENT),
        ]

        parsed = parse_metadata(writer.render(chapters))

        assert [block["START"] for block in parsed] == ["5000", "0"]

    def test_render_large_values_unpadded(self, writer):
        text = writer.render([Chapter(0, 7200000, ChapterKind.CONTENT)])

        assert "END=7200000\n" in text
        assert "START=0\n" in text

    def test_render_is_deterministic(self, writer, sample_chapters):
        assert writer.render(sample_chapters) == writer.render(sample_chapters)

    def test_write_metadata_file(self, writer, sample_chapters):
        """Test writing chapters to file."""
        with tempfile.TemporaryDirectory() as temp_dir:
            output_path = Path(temp_dir) / "1.ffmeta"

            writer.write_metadata_file(sample_chapters, output_path)
            writer.write_metadata_file(sample_chapters, output_path)

            content = output_path.read_bytes()
            assert content == writer.render(sample_chapters).encode('utf-8')
            assert content.startswith(b";FFMETADATA1\n\n[CHAPTER]\n")
            assert content.count(b"[CHAPTER]") == 4
