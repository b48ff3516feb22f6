"""
Error kinds raised by logogen.

Every error carries the operation that raised it and, where there is one,
the underlying cause chained through ``__cause__``.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Tag identifying what went wrong."""
    CONFIG = 'config'
    DECODE = 'decode'
    UNSUPPORTED_FORMAT = 'unsupported_format'
    DIMENSION_MISMATCH = 'dimension_mismatch'
    UNSUPPORTED_OUTPUT_FORMAT = 'unsupported_output_format'
    IO = 'io'
    TIMEOUT = 'timeout'
    RESIZE = 'resize'


class LogoGenError(Exception):
    """
    Base class for all logogen errors.
    
    Attributes:
        kind: ErrorKind tag
        operation: Name of the operation that failed
        message: Human-readable description
        name: Output file name, when the error concerns one output
    """
    
    kind: ErrorKind = ErrorKind.IO
    name: Optional[str] = None
    
    def __init__(self, operation: str, message: str):
        super().__init__(operation, message)
        self.operation = operation
        self.message = message
    
    def __str__(self) -> str:
        text = f"{self.operation}: {self.message}"
        if self.__cause__ is not None:
            text = f"{text}: {self.__cause__}"
        return text


class ConfigError(LogoGenError):
    kind = ErrorKind.CONFIG


class DecodeError(LogoGenError):
    kind = ErrorKind.DECODE


class UnsupportedFormatError(LogoGenError):
    kind = ErrorKind.UNSUPPORTED_FORMAT


class DimensionMismatchError(LogoGenError):
    kind = ErrorKind.DIMENSION_MISMATCH


class UnsupportedOutputFormatError(LogoGenError):
    kind = ErrorKind.UNSUPPORTED_OUTPUT_FORMAT


class FileIOError(LogoGenError):
    kind = ErrorKind.IO


class ProcessingTimeoutError(LogoGenError):
    kind = ErrorKind.TIMEOUT


class ResizeError(LogoGenError):
    """Failure of a single target with no more specific kind."""
    
    kind = ErrorKind.RESIZE
    
    def __init__(self, operation: str, name: str, message: Optional[str] = None):
        super().__init__(operation, message or name)
        self.name = name


def output_error(operation: str, name: str, cause: Exception) -> LogoGenError:
    """
    Wrap a failure to produce output ``name``.
    
    A LogoGenError cause keeps its class (and so its kind); anything else
    becomes a ResizeError. The result carries ``name`` and chains ``cause``.
    """
    message = f"failed to produce {name}"
    if isinstance(cause, LogoGenError) and not isinstance(cause, ResizeError):
        error = type(cause)(operation, message)
        error.name = name
    else:
        error = ResizeError(operation, name, message)
    error.__cause__ = cause
    return error
