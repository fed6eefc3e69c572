"""Video operations using ffprobe and ffmpeg."""

import json
import logging
import subprocess
from pathlib import Path
from typing import List

from .errors import ParseError, ProbeError
from .utils import TimeParser

logger = logging.getLogger(__name__)


class VideoProcessor:
    """Probes durations and muxes chapter metadata using ffmpeg."""

    def __init__(self, verbose: bool = False, dry_run: bool = False):
        """
        Initialize VideoProcessor.

        Args:
            verbose: Show detailed ffmpeg output
            dry_run: Show commands without executing
        """
        self.verbose = verbose
        self.dry_run = dry_run
        self._check_ffmpeg()

    def _check_ffmpeg(self):
        """Check if ffmpeg is available."""
        if self.dry_run:
            return

        try:
            result = subprocess.run(
                ['ffmpeg', '-version'],
                capture_output=True,
                check=True,
                text=True
            )
            if self.verbose:
                first_line = result.stdout.split('\n')[0]
                logger.debug(f"Using {first_line}")
        except subprocess.CalledProcessError:
            raise RuntimeError(
                "ffmpeg returned an error. Please check your installation."
            )
        except FileNotFoundError:
            raise RuntimeError(
                "ffmpeg not found. Please install ffmpeg and ensure it's in your PATH.\n"
                "Installation instructions: https://ffmpeg.org/download.html"
            )

    def probe_duration(self, video_file: Path) -> int:
        """
        Get the duration of a video file in milliseconds.

        Probing only reads the file, so it also runs in dry-run mode.

        Args:
            video_file: Path to video file

        Returns:
            Duration in milliseconds

        Raises:
            ProbeError: If ffprobe fails or reports no usable duration
        """
        cmd = [
            'ffprobe',
            '-v', 'error',
            '-show_entries', 'format=duration',
            '-print_format', 'json',
            str(video_file)
        ]

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=True
            )
            info = json.loads(result.stdout)
        except FileNotFoundError as e:
            raise ProbeError("ffprobe not found. Please install ffmpeg.") from e
        except subprocess.CalledProcessError as e:
            raise ProbeError(
                f"ffprobe failed for {video_file}: {(e.stderr or '').strip()}"
            ) from e
        except json.JSONDecodeError as e:
            raise ProbeError(f"Unreadable ffprobe output for {video_file}") from e

        duration = info.get('format', {}).get('duration')
        if duration is None:
            raise ProbeError(f"No duration reported for {video_file}")

        try:
            return TimeParser.to_milliseconds(str(duration))
        except ParseError as e:
            raise ProbeError(f"Invalid duration for {video_file}: {e}") from e

    def mux_metadata(self, video_file: Path, metadata_file: Path) -> Path:
        """
        Embed a metadata file into a video, replacing the original file.

        Streams are copied. The result is first written to a hidden file
        next to the video and then moved over the original.

        Args:
            video_file: Video to update
            metadata_file: ;FFMETADATA1 file with the chapters

        Returns:
            Path of the updated video

        Raises:
            subprocess.CalledProcessError: If ffmpeg fails
        """
        temp_output = video_file.parent / f".{video_file.name}"

        cmd = ['ffmpeg', '-y']

        if not self.verbose:
            cmd.extend(['-loglevel', 'error'])

        cmd.extend([
            '-i', str(video_file),
            '-i', str(metadata_file),
            '-map_metadata', '1',
            '-map_chapters', '1',
            '-c:v', 'copy',
            '-c:a', 'copy',
            str(temp_output)
        ])

        try:
            self._run_command(cmd, f"Applying metadata to {video_file.name}")
        except subprocess.CalledProcessError:
            if temp_output.exists():
                temp_output.unlink()
            raise

        if not self.dry_run:
            temp_output.replace(video_file)

        return video_file

    def _run_command(self, cmd: List[str], description: str = "") -> None:
        """
        Run a command, respecting dry_run mode.

        Args:
            cmd: Command and arguments
            description: Description of what the command does

        Raises:
            subprocess.CalledProcessError: If command fails
        """
        if self.dry_run:
            logger.info(f"[DRY RUN] {description}")
            logger.info(f"[DRY RUN] Command: {' '.join(cmd)}")
        else:
            if description and self.verbose:
                logger.debug(f"{description}")
                logger.debug(f"Command: {' '.join(cmd)}")

            subprocess.run(cmd, check=True)
