"""Exceptions raised while converting EDL markers to chapter metadata."""


class ConversionError(Exception):
    """Base class for failures that abort the conversion of one file."""


class ParseError(ConversionError, ValueError):
    """A timecode or EDL line could not be parsed."""


class InvariantViolation(ConversionError):
    """Markers or chapters break an assumption of the timeline algorithm."""


class ProbeError(ConversionError, RuntimeError):
    """The duration of a video file could not be determined."""
