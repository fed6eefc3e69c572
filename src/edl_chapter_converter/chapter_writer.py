"""FFmpeg metadata writer for chapter lists."""

import logging
from pathlib import Path
from typing import List

from .models import Chapter

logger = logging.getLogger(__name__)


class MetadataWriter:
    """Renders chapters in the ;FFMETADATA1 format understood by ffmpeg."""

    HEADER = ";FFMETADATA1\n"
    TIMEBASE = "1/1000"
    CHAPTER_TEMPLATE = (
        "\n"
        "[CHAPTER]\n"
        "TIMEBASE={timebase}\n"
        "START={start}\n"
        "END={end}\n"
        "title={title}\n"
    )

    def render(self, chapters: List[Chapter]) -> str:
        """
        Render chapters to metadata text.

        Args:
            chapters: Chapters in the order they should be written

        Returns:
            Metadata text starting with the ;FFMETADATA1 header
        """
        parts = [self.HEADER]
        for chapter in chapters:
            parts.append(self.CHAPTER_TEMPLATE.format(
                timebase=self.TIMEBASE,
                start=int(chapter.start),
                end=int(chapter.end),
                title=chapter.title
            ))
        return ''.join(parts)

    def write_metadata_file(self,
                            chapters: List[Chapter],
                            output_path: Path) -> None:
        """
        Write chapters to a metadata file.

        The text is rendered completely before the file is opened.

        Args:
            chapters: List of chapters to write
            output_path: Path to output file
        """
        content = self.render(chapters)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(content)
        logger.debug(f"Wrote {len(chapters)} chapters to {output_path}")
