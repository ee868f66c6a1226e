"""
Exception hierarchy for regbench.

All exceptions inherit from RegbenchError to allow catching any
library-specific error. Component-specific exceptions inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from pathlib import Path


class RegbenchError(Exception):
    """Base exception for all regbench errors."""
    pass


class ValidationError(RegbenchError):
    """
    Input validation failed.
    
    Raised when caller-provided arguments fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.
    
    Raised when a predictor and response have different lengths, are
    empty, or are not one-dimensional.
    """
    pass


class LoadError(RegbenchError):
    """
    Dataset could not be loaded.
    
    Base class for every failure of the dataset loader. A LoadError
    always means no dataset was produced; there is no partial result.
    
    Attributes:
        path: The file that was being loaded, if known
    """
    
    def __init__(self, message: str, path: str | Path | None = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


class DatasetReadError(LoadError):
    """
    Dataset file is missing or unreadable.
    
    Always chained to the underlying OSError.
    """
    pass


class ParseError(LoadError):
    """
    Dataset content is malformed.
    
    Raised for a missing header, a row with the wrong number of fields,
    a field that is not a number, or content that cannot be tokenized.
    
    Attributes:
        line: 1-based row number in the file (header is line 1), if known
        field: Schema field name that failed to parse, if known
        value: The offending raw text, if known
    """
    
    def __init__(
        self,
        message: str,
        path: str | Path | None = None,
        line: int | None = None,
        field: str | None = None,
        value: str | None = None,
    ):
        super().__init__(message, path=path)
        self.line = line
        self.field = field
        self.value = value


class ChannelClosed(RegbenchError):
    """
    Operation on a sealed result channel.
    
    Raised when sending to a sealed channel, sealing it twice, or
    receiving from a channel that is sealed and fully drained.
    """
    pass
