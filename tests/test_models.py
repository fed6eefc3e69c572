"""Tests for data models."""

from edl_chapter_converter.models import Chapter, ChapterKind, FileRecord, Marker


class TestChapter:
    """Test Chapter class."""

    def test_default_kind_is_content(self):
        chapter = Chapter(0, 1000)
        assert chapter.kind is ChapterKind.CONTENT
        assert chapter.title == "Content"

    def test_titles(self):
        assert Chapter(0, 1, ChapterKind.INTRO).title == "Intro"
        assert Chapter(0, 1, ChapterKind.OUTRO).title == "Outro"

    def test_duration_and_empty(self):
        chapter = Chapter(1000, 5000, ChapterKind.INTRO)
        assert chapter.duration == 4000
        assert not chapter.is_empty
        assert Chapter(5000, 5000).is_empty

    def test_chapter_repr(self):
        assert repr(Chapter(1000, 5000, ChapterKind.INTRO)) == "Intro[1000, 5000)"

    def test_chapter_equality(self):
        assert Chapter(0, 10, ChapterKind.OUTRO) == Chapter(0, 10, ChapterKind.OUTRO)
        assert Chapter(0, 10, ChapterKind.OUTRO) != Chapter(0, 10, ChapterKind.INTRO)


class TestMarker:
    """Test Marker class."""

    def test_marker_duration(self):
        marker = Marker(begin=1000, end=4500, line=1)
        assert marker.duration == 3500

    def test_marker_equality_includes_line(self):
        assert Marker(0, 10, 1) == Marker(0, 10, 1)
        assert Marker(0, 10, 1) != Marker(0, 10, 2)


class TestFileRecord:
    """Test FileRecord class."""

    def test_defaults(self):
        record = FileRecord(file_id=3)
        assert record.markers == []
        assert record.duration_ms is None

    def test_records_do_not_share_markers(self):
        first = FileRecord(file_id=1)
        second = FileRecord(file_id=2)
        first.markers.append(Marker(0, 10))
        assert second.markers == []
