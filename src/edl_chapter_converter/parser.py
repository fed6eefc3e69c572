"""EDL file parser for EDL chapter converter."""

import logging
from pathlib import Path
from typing import List, Tuple

from .errors import ParseError
from .models import Marker
from .utils import TimeParser

logger = logging.getLogger(__name__)


class EdlParser:
    """Parser for EDL files holding one "<begin> <end>" pair per line."""

    def parse_file(self, filepath: Path) -> List[Marker]:
        """
        Parse EDL file and extract its markers in line order.

        Args:
            filepath: Path to EDL file

        Returns:
            List of Marker objects; empty if the file has no markers

        Raises:
            FileNotFoundError: If EDL file doesn't exist
            ParseError: If file format is invalid or the file is not UTF-8
        """
        if not filepath.exists():
            raise FileNotFoundError(f"EDL file not found: {filepath}")

        if not filepath.is_file():
            raise ParseError(f"Path is not a file: {filepath}")

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                return self.parse_lines(f)
        except UnicodeDecodeError as e:
            raise ParseError(f"{filepath}: not valid UTF-8 text") from e

    def parse_lines(self, lines) -> List[Marker]:
        """
        Parse an iterable of EDL lines.

        Blank lines are ignored but still counted for line numbers.
        """
        markers = []

        for i, line in enumerate(lines, 1):
            if not line.strip():
                continue
            try:
                begin, end = self._parse_line(line)
            except ParseError as e:
                raise ParseError(f"Error at line {i}: {e}") from e
            markers.append(Marker(begin=begin, end=end, line=i))

        logger.debug(f"Parsed {len(markers)} markers")
        return markers

    def _parse_line(self, line: str) -> Tuple[int, int]:
        """
        Parse a single line from EDL file.

        Args:
            line: Line to parse

        Returns:
            Tuple of (begin, end) in milliseconds

        Raises:
            ParseError: If line format is invalid
        """
        fields = line.split()
        if len(fields) != 2:
            raise ParseError(
                f"Invalid line format: '{line.strip()}'. "
                f"Expected format: '<begin seconds> <end seconds>'"
            )
        begin, end = fields
        return TimeParser.to_milliseconds(begin), TimeParser.to_milliseconds(end)
