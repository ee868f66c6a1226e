"""
Result consumer.

Drains a ResultChannel to exhaustion, optionally rendering each
IterationResult, then writes a single completion marker.
"""

from __future__ import annotations

import sys
from typing import TextIO

from regbench.dataset.record import LABELS, RESPONSE_FIELD
from regbench.iteration.channel import ResultChannel
from regbench.iteration.runner import IterationResult
from regbench.regression.solution import RegressionResult

COMPLETION_MARKER = "Finished all iterations"


def format_fit(result: RegressionResult, response_label: str = LABELS[RESPONSE_FIELD]) -> str:
    """
    One predictor's line.
    
    Example:
        'Crim vs Median Value: 24.03 + -0.42 * Crim, R-squared: 0.1507'
    """
    return (
        f"{result.predictor} vs {response_label}: {result.equation()}, "
        f"R-squared: {result.r_squared}"
    )


def format_iteration(result: IterationResult, response_label: str = LABELS[RESPONSE_FIELD]) -> str:
    """Block for one iteration: a heading then one line per predictor."""
    lines = [f"Iteration {result.iteration}:"]
    lines.extend(format_fit(r, response_label) for r in result.results)
    return "\n".join(lines)


def consume(
    channel: ResultChannel[IterationResult],
    *,
    verbose: bool = False,
    out: TextIO | None = None,
    response_label: str = LABELS[RESPONSE_FIELD],
) -> tuple[IterationResult, ...]:
    """
    Drain channel until it is sealed and empty.
    
    Blocks while the channel is open and empty. Results are never
    modified.
    
    Args:
        channel: Channel fed by the iteration runner
        verbose: Render each result as it is received
        out: Text stream, defaults to sys.stdout
        response_label: Response name used in rendered lines
        
    Returns:
        Every received IterationResult, in arrival order
    """
    stream = out if out is not None else sys.stdout
    received = []
    for result in channel:
        received.append(result)
        if verbose:
            print(format_iteration(result, response_label), file=stream)
    print(COMPLETION_MARKER, file=stream)
    return tuple(received)
