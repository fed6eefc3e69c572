"""Command-line interface for EDL chapter converter."""

import sys
import logging
import subprocess
import time
from pathlib import Path
from typing import List, Optional
import argparse

from . import __version__, __description__
from .chapter_writer import MetadataWriter
from .errors import ConversionError
from .models import FileRecord
from .parser import EdlParser
from .processor import VideoProcessor
from .timeline import ChapterTimelineBuilder
from .utils import TimeParser

logger = logging.getLogger(__name__)

EDL_EXT = '.edl'
FFMETA_EXT = '.ffmeta'


class EdlChapterConverter:
    """Main application class for converting EDL markers to chapters."""

    def __init__(self, args: argparse.Namespace,
                 processor: Optional[VideoProcessor] = None):
        """
        Initialize EdlChapterConverter.

        Args:
            args: Parsed command-line arguments
            processor: Video backend; created from args when omitted
        """
        self.args = args
        self.directory = Path(args.directory)
        self.video_ext = self._normalize_ext(args.video_ext)
        self.parser = EdlParser()
        self.builder = ChapterTimelineBuilder(drop_empty=args.drop_empty)
        self.writer = MetadataWriter()
        self.processor = processor or VideoProcessor(
            verbose=args.verbose,
            dry_run=args.dry_run
        )
        self.failed: List[int] = []

    def run(self) -> int:
        """
        Execute the main processing workflow.

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        try:
            if not self.directory.is_dir():
                logger.error(f"Directory not found: {self.directory}")
                return 1

            start = time.perf_counter()
            edl_files = self.find_edl_files()

            if not edl_files:
                logger.warning(f"No {EDL_EXT} files found in {self.directory}")
                return 0

            logger.info(f"Found {len(edl_files)} EDL files")

            written = []
            for file_id, edl_path in edl_files:
                record = self.convert_file(file_id, edl_path)
                if record is not None:
                    written.append(record)
            write_time = time.perf_counter() - start

            if not self.args.no_mux:
                for record in written:
                    self.apply_metadata(record)
            mux_time = time.perf_counter() - start - write_time

            logger.debug(f"Write time: {write_time * 1000:.0f}ms")
            logger.debug(f"Mux time: {mux_time * 1000:.0f}ms")
            logger.debug(f"Total time: {(time.perf_counter() - start) * 1000:.0f}ms")

            if self.failed:
                ids = ', '.join(str(i) for i in sorted(set(self.failed)))
                logger.error(f"Failed files: {ids}")
                return 1

            logger.info(f"Success! Converted {len(written)} files")
            return 0

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user.")
            return 130

    def find_edl_files(self) -> List[tuple]:
        """
        List numbered EDL files in ascending id order.

        Returns:
            List of (file_id, path) tuples
        """
        found = []
        for path in self.directory.iterdir():
            if path.suffix != EDL_EXT or not path.is_file():
                continue
            if not (path.stem.isascii() and path.stem.isdigit()):
                logger.warning(f"Skipping {path.name}: name is not a number")
                continue
            if path.stem != str(int(path.stem)):
                logger.warning(f"Skipping {path.name}: number has leading zeros")
                continue
            found.append((int(path.stem), path))
        return sorted(found, key=lambda item: item[0])

    def convert_file(self, file_id: int, edl_path: Path) -> Optional[FileRecord]:
        """
        Build and write the metadata file for one EDL file.

        Errors are logged and recorded; they never stop the batch.

        Returns:
            The processed FileRecord, or None if the file failed
        """
        record = FileRecord(
            file_id=file_id,
            edl_path=edl_path,
            video_path=self.directory / f"{file_id}{self.video_ext}"
        )
        logger.info(f"Processing file: {file_id}")

        try:
            record.duration_ms = self.processor.probe_duration(record.video_path)
            logger.debug(
                f"  Duration: {record.duration_ms}ms "
                f"({TimeParser.format_milliseconds(record.duration_ms)})"
            )

            record.markers = self.parser.parse_file(edl_path)
            chapters = self.builder.build_for_record(record)

            if self.args.verbose:
                for chapter in chapters:
                    logger.debug(f"  {chapter!r}")

            metadata_path = self.metadata_path(file_id)
            if self.args.dry_run:
                logger.info(f"[DRY RUN] Would write {len(chapters)} chapters to {metadata_path}")
            else:
                self.writer.write_metadata_file(chapters, metadata_path)

        except (ConversionError, OSError, subprocess.CalledProcessError) as e:
            self._report_failure(file_id, e)
            return None

        return record

    def apply_metadata(self, record: FileRecord) -> bool:
        """Mux the written metadata file into the record's video."""
        try:
            if not record.video_path.exists():
                raise FileNotFoundError(f"Video file not found: {record.video_path}")
            self.processor.mux_metadata(record.video_path, self.metadata_path(record.file_id))
        except (OSError, subprocess.CalledProcessError) as e:
            self._report_failure(record.file_id, e)
            return False

        if self.args.dry_run:
            logger.info(f"[DRY RUN] Would apply metadata to {record.video_path.name}")
        else:
            logger.info(f"Successfully converted: {record.video_path.name}")
        return True

    def metadata_path(self, file_id: int) -> Path:
        return self.directory / f"{file_id}{FFMETA_EXT}"

    def _report_failure(self, file_id: int, error: Exception) -> None:
        self.failed.append(file_id)
        logger.error(f"Failed to convert {file_id}: {error}")
        if self.args.verbose:
            logger.exception("Detailed error information:")

    @staticmethod
    def _normalize_ext(ext: str) -> str:
        return ext if ext.startswith('.') else f".{ext}"


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='edl-chapter-converter',
        description=__description__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                      # Convert files in the current directory
  %(prog)s /videos
  %(prog)s /videos --no-mux     # Only write .ffmeta files
  %(prog)s /videos --dry-run -v

Directory layout:
  1.edl  1.mp4
  2.edl  2.mp4

EDL file format (seconds, one marker per line):
  0.000 42.500
  1290.120 1380.000

The first marker becomes the Intro if it ends before the middle of the
video, otherwise it is the Outro. A second marker is always the Outro.
        """
    )

    parser.add_argument('directory',
                        nargs='?',
                        default='.',
                        help='Directory with <id>.edl and <id>.mp4 files (default: current directory)')

    parser.add_argument('--video-ext',
                        default='.mp4',
                        help='Extension of the video files (default: .mp4)')

    # Output control
    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument('-q', '--quiet',
                              action='store_true',
                              help='Suppress progress messages')
    output_group.add_argument('-v', '--verbose',
                              action='store_true',
                              help='Show detailed output')

    # Processing options
    parser.add_argument('--dry-run',
                        action='store_true',
                        help='Show what would be done without executing')

    parser.add_argument('--no-mux',
                        action='store_true',
                        help='Write .ffmeta files without embedding them into the videos')

    parser.add_argument('--drop-empty',
                        action='store_true',
                        help='Omit zero-length chapters')

    # Version
    parser.add_argument('--version',
                        action='version',
                        version=f'%(prog)s {__version__}')

    return parser


def setup_logging(quiet: bool, verbose: bool):
    """Configure logging based on verbosity settings."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        if verbose else '%(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True
    )


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    setup_logging(args.quiet, args.verbose)

    try:
        app = EdlChapterConverter(args)
    except RuntimeError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)
    sys.exit(app.run())


if __name__ == "__main__":
    main()
