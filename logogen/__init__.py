"""
Logo and icon generation from a single square source image.

Each run:
    1. Loads and validates one 1080x1080 PNG, JPEG or GIF
    2. Scales it to fit every catalog entry, centered on a transparent canvas
    3. Writes each result in the format named by its file extension

Outputs already produced for the same input path are skipped.
"""

__version__ = "1.0.0"

from .errors import (
    ErrorKind,
    LogoGenError,
    ConfigError,
    DecodeError,
    UnsupportedFormatError,
    DimensionMismatchError,
    UnsupportedOutputFormatError,
    FileIOError,
    ProcessingTimeoutError,
    ResizeError,
)
from .dimension_spec import DimensionSpec
from .dimension_catalog import DimensionCatalog
from .source_loader import SourceImage, SourceLoader
from .completion_cache import CompletionCache
from .compositor import ResizeCompositor
from .encoder import Encoder
from .outcome import OutcomeStatus, ProcessingOutcome
from .run_stats import RunStats
from .orchestrator import Orchestrator
from .run_config import RunConfig, parse_duration

__all__ = [
    "ErrorKind",
    "LogoGenError",
    "ConfigError",
    "DecodeError",
    "UnsupportedFormatError",
    "DimensionMismatchError",
    "UnsupportedOutputFormatError",
    "output_error",
    "FileIOError",
    "ProcessingTimeoutError",
    "ResizeError",
    "DimensionSpec",
    "DimensionCatalog",
    "SourceImage",
    "SourceLoader",
    "CompletionCache",
    "ResizeCompositor",
    "Encoder",
    "OutcomeStatus",
    "ProcessingOutcome",
    "RunStats",
    "Orchestrator",
    "RunConfig",
    "parse_duration",
]
