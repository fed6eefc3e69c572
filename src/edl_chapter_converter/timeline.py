"""Chapter timeline construction from classified markers."""

import logging
from typing import List

from .classifier import MarkerClassifier
from .errors import InvariantViolation
from .models import Chapter, ChapterKind, FileRecord

logger = logging.getLogger(__name__)


class ChapterTimelineBuilder:
    """Expands intro/outro markers into chapters covering the whole video."""

    def __init__(self, drop_empty: bool = False):
        """
        Initialize ChapterTimelineBuilder.

        Args:
            drop_empty: Omit zero-length chapters (e.g. an outro that runs
                to the very end of the video leaves an empty tail)
        """
        self.drop_empty = drop_empty
        self.classifier = MarkerClassifier()

    def build(self, classified: List[Chapter], duration_ms: int) -> List[Chapter]:
        """
        Build the full chapter list for one video.

        Args:
            classified: Zero, one or two chapters from MarkerClassifier
            duration_ms: Total video duration in milliseconds

        Returns:
            Contiguous chapters from 0 to duration_ms

        Raises:
            InvariantViolation: If the markers overlap or the result
                does not partition the video
        """
        if not classified:
            chapters = [Chapter(0, duration_ms)]
        elif len(classified) == 1:
            chapters = self._build_single(classified[0], duration_ms)
        elif len(classified) == 2:
            chapters = self._build_pair(classified[0], classified[1], duration_ms)
        else:
            raise InvariantViolation(
                f"Expected at most 2 markers, got {len(classified)}"
            )

        if self.drop_empty:
            chapters = [ch for ch in chapters if not ch.is_empty]

        self._check_partition(chapters, duration_ms)
        return chapters

    def build_for_record(self, record: FileRecord) -> List[Chapter]:
        """Classify the markers of a record and build its chapters."""
        classified = self.classifier.classify(record.markers, record.duration_ms)
        return self.build(classified, record.duration_ms)

    def _build_single(self, marker: Chapter, duration_ms: int) -> List[Chapter]:
        chapters = []
        if marker.start > 0:
            chapters.append(Chapter(0, marker.start))
        chapters.append(marker)
        chapters.append(Chapter(marker.end, duration_ms))
        return chapters

    def _build_pair(self, intro: Chapter, outro: Chapter,
                    duration_ms: int) -> List[Chapter]:
        if intro.end > outro.start:
            raise InvariantViolation(
                f"Intro ends at {intro.end}ms after outro starts at {outro.start}ms"
            )

        chapters = []
        if intro.start > 0:
            chapters.append(Chapter(0, intro.start))
        chapters.append(intro)
        chapters.append(Chapter(intro.end, outro.start))
        chapters.append(outro)
        chapters.append(Chapter(outro.end, duration_ms))
        return chapters

    @staticmethod
    def _check_partition(chapters: List[Chapter], duration_ms: int) -> None:
        """Verify chapters tile [0, duration_ms) with at most one intro and outro."""
        if not chapters:
            if duration_ms == 0:
                return
            raise InvariantViolation("No chapters for a non-empty video")

        if chapters[0].start != 0:
            raise InvariantViolation(f"First chapter starts at {chapters[0].start}ms")
        if chapters[-1].end != duration_ms:
            raise InvariantViolation(
                f"Last chapter ends at {chapters[-1].end}ms, expected {duration_ms}ms"
            )

        for prev, nxt in zip(chapters, chapters[1:]):
            if prev.end != nxt.start:
                raise InvariantViolation(f"Gap or overlap between {prev!r} and {nxt!r}")

        for ch in chapters:
            if ch.end < ch.start:
                raise InvariantViolation(f"Chapter {ch!r} ends before it starts")

        kinds = [ch.kind for ch in chapters]
        if kinds.count(ChapterKind.INTRO) > 1 or kinds.count(ChapterKind.OUTRO) > 1:
            raise InvariantViolation("More than one intro or outro chapter")
        if (ChapterKind.INTRO in kinds and ChapterKind.OUTRO in kinds
                and kinds.index(ChapterKind.INTRO) > kinds.index(ChapterKind.OUTRO)):
            raise InvariantViolation("Outro chapter precedes intro chapter")
