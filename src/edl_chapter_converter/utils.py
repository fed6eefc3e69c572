"""Utility functions for EDL chapter converter."""

import re
from decimal import Context, Decimal, InvalidOperation

from .errors import ParseError


class TimeParser:
    """Utility class for parsing and formatting time values."""

    SECONDS_PATTERN = re.compile(r'^(\d+(?:\.\d*)?|\.\d+)$')

    @classmethod
    def to_milliseconds(cls, seconds_str: str) -> int:
        """
        Convert a decimal seconds string to whole milliseconds.

        The decimal point is moved three places to the right and the
        remaining fraction is truncated. Decimal arithmetic keeps values
        such as "0.1" exact.

        Args:
            seconds_str: Seconds as a decimal string (e.g., "12.345")

        Returns:
            Number of milliseconds

        Raises:
            ParseError: If the string is not a non-negative decimal number

        Examples:
            >>> TimeParser.to_milliseconds("12.345")
            12345
            >>> TimeParser.to_milliseconds("1.23456")
            1234
        """
        value = seconds_str.strip() if isinstance(seconds_str, str) else ''

        if not cls.SECONDS_PATTERN.match(value):
            raise ParseError(
                f"Invalid time value: '{seconds_str}'. "
                f"Expected decimal seconds (e.g., 12.345)"
            )

        try:
            # Precision covers every input digit so scaleb never rounds
            context = Context(prec=max(28, len(value)))
            return int(Decimal(value).scaleb(3, context=context))
        except InvalidOperation as e:
            raise ParseError(f"Invalid time value: '{seconds_str}'") from e

    @staticmethod
    def format_milliseconds(ms: int) -> str:
        """
        Format milliseconds as H:MM:SS.mmm for log output.

        Examples:
            >>> TimeParser.format_milliseconds(330151)
            '0:05:30.151'
            >>> TimeParser.format_milliseconds(5445500)
            '1:30:45.500'
        """
        seconds, millis = divmod(ms, 1000)
        minutes, seconds = divmod(seconds, 60)
        hours, minutes = divmod(minutes, 60)
        return f"{hours}:{minutes:02d}:{seconds:02d}.{millis:03d}"
