"""Intro/outro classification of EDL markers."""

import logging
from typing import List, Optional

from .errors import InvariantViolation
from .models import Chapter, ChapterKind, Marker

logger = logging.getLogger(__name__)

MAX_MARKERS = 2


class MarkerClassifier:
    """Tags the markers of one file as Intro or Outro."""

    def classify(self, markers: List[Marker],
                 duration_ms: Optional[int]) -> List[Chapter]:
        """
        Classify markers in line order.

        Only the first marker can be an intro, and only when it ends
        before the middle of the video. Every other marker is an outro.

        Args:
            markers: Markers in the order they appear in the EDL file
            duration_ms: Total video duration in milliseconds

        Returns:
            At most two chapters tagged INTRO or OUTRO

        Raises:
            InvariantViolation: If the markers cannot form an intro/outro pair
        """
        self._validate(markers, duration_ms)

        half = duration_ms // 2
        classified = []

        for i, marker in enumerate(markers):
            if i == 0 and marker.end < half:
                kind = ChapterKind.INTRO
            else:
                kind = ChapterKind.OUTRO

            logger.debug(f"  Marker {marker.begin}ms - {marker.end}ms: {kind.value}")
            classified.append(Chapter(start=marker.begin, end=marker.end, kind=kind))

        if len(classified) == MAX_MARKERS and classified[0].kind is not ChapterKind.INTRO:
            raise InvariantViolation(
                f"First of two markers ends at {classified[0].end}ms, "
                f"past half of the duration ({half}ms); two outros are not allowed"
            )

        return classified

    def _validate(self, markers: List[Marker], duration_ms: Optional[int]) -> None:
        if duration_ms is None:
            raise InvariantViolation("Video duration is required")

        if duration_ms < 0:
            raise InvariantViolation(f"Invalid video duration: {duration_ms}ms")

        if len(markers) > MAX_MARKERS:
            raise InvariantViolation(
                f"Expected at most {MAX_MARKERS} markers, got {len(markers)}"
            )

        for marker in markers:
            if marker.begin > marker.end:
                raise InvariantViolation(
                    f"Marker on line {marker.line} begins after it ends "
                    f"({marker.begin}ms > {marker.end}ms)"
                )
            if marker.end > duration_ms:
                raise InvariantViolation(
                    f"Marker on line {marker.line} ends at {marker.end}ms, "
                    f"after the end of the video ({duration_ms}ms)"
                )
