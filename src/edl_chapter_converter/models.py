"""Data models for EDL chapter converter."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class ChapterKind(Enum):
    """Chapter label; the value is the title written to the metadata file."""
    INTRO = "Intro"
    OUTRO = "Outro"
    CONTENT = "Content"


@dataclass(frozen=True)
class Marker:
    """A cut marker [begin, end) in milliseconds read from one EDL line."""
    begin: int
    end: int
    line: int = 0

    @property
    def duration(self) -> int:
        """Length of the marker in milliseconds."""
        return self.end - self.begin


@dataclass(frozen=True)
class Chapter:
    """Represents a labeled chapter [start, end) in milliseconds."""
    start: int
    end: int
    kind: ChapterKind = ChapterKind.CONTENT

    @property
    def duration(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.end == self.start

    @property
    def title(self) -> str:
        return self.kind.value

    def __repr__(self) -> str:
        """String representation of Chapter."""
        return f"{self.kind.value}[{self.start}, {self.end})"


@dataclass
class FileRecord:
    """Markers and duration collected for one numbered video file."""
    file_id: int
    markers: List[Marker] = field(default_factory=list)
    duration_ms: Optional[int] = None
    edl_path: Optional[Path] = None
    video_path: Optional[Path] = None
