"""
Core infrastructure for regbench.

Shared abstractions used by the dataset, regression and iteration
subpackages.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    timing: Section timer
"""

from regbench.core.protocols import Backend
from regbench.core.result import Result
from regbench.core.exceptions import (
    RegbenchError,
    ValidationError,
    DimensionError,
    LoadError,
    DatasetReadError,
    ParseError,
    ChannelClosed,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "RegbenchError",
    "ValidationError",
    "DimensionError",
    "LoadError",
    "DatasetReadError",
    "ParseError",
    "ChannelClosed",
]
