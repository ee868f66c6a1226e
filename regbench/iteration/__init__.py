"""
Repeated fitting and result handoff.

Public API:
    run(n, col_a, col_b, col_response, sink, ...) -> None
    consume(channel, verbose=..., out=...) -> tuple[IterationResult, ...]
    ResultChannel(capacity)

Example:
    >>> from regbench.iteration import ResultChannel, run, consume
    >>> channel = ResultChannel(capacity=10)
    >>> run(10, crim, rooms, mv, channel)
    >>> results = consume(channel, verbose=True)
"""

from regbench.iteration.channel import ResultChannel
from regbench.iteration.runner import IterationResult, perform_iteration, run
from regbench.iteration.consumer import (
    COMPLETION_MARKER,
    consume,
    format_fit,
    format_iteration,
)

__all__ = [
    "COMPLETION_MARKER",
    "IterationResult",
    "ResultChannel",
    "consume",
    "format_fit",
    "format_iteration",
    "perform_iteration",
    "run",
]
