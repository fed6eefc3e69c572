"""
EDL Chapter Converter

A command-line tool that turns intro/outro cut markers from numbered EDL
files into ffmpeg chapter metadata and embeds it into the matching videos.
"""

# Version information
__version__ = "1.0.0"
__author__ = "Your Name"
__email__ = "your.email@example.com"

# Package metadata
__title__ = "edl-chapter-converter"
__description__ = "Convert EDL intro/outro markers into video chapter metadata"
__url__ = "https://github.com/yourusername/edl-chapter-converter"
__license__ = "MIT"
__copyright__ = "Copyright 2024 Your Name"

# Import main components
from .errors import ConversionError, ParseError, InvariantViolation, ProbeError
from .models import Marker, Chapter, ChapterKind, FileRecord
from .utils import TimeParser
from .parser import EdlParser
from .classifier import MarkerClassifier
from .timeline import ChapterTimelineBuilder
from .chapter_writer import MetadataWriter
from .processor import VideoProcessor

# Public API
__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__title__",
    "__description__",
    "__url__",
    "__license__",
    "__copyright__",

    # Errors
    "ConversionError",
    "ParseError",
    "InvariantViolation",
    "ProbeError",

    # Classes
    "Marker",
    "Chapter",
    "ChapterKind",
    "FileRecord",
    "TimeParser",
    "EdlParser",
    "MarkerClassifier",
    "ChapterTimelineBuilder",
    "MetadataWriter",
    "VideoProcessor",
]

# Convenience imports for CLI
try:
    from .cli import EdlChapterConverter, main
    __all__.extend(["EdlChapterConverter", "main"])
except ImportError:
    # CLI might not be available in all contexts
    pass
