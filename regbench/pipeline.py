"""
End-to-end pipeline: load, run, consume.

This is the top-level caller that sees every error. Loading either
succeeds completely or raises a LoadError before any regression work;
after a successful load nothing downstream can fail.
"""

from __future__ import annotations

import logging
from typing import Any, TextIO

import numpy as np
from numpy.typing import NDArray

from regbench.config import RunConfig
from regbench.dataset.loader import read_columns
from regbench.dataset.record import LABELS, RESPONSE_FIELD
from regbench.iteration.channel import ResultChannel
from regbench.iteration.consumer import consume
from regbench.iteration.runner import DEFAULT_NAMES, IterationResult, run
from regbench.regression.solvers import BackendChoice

logger = logging.getLogger(__name__)


def perform_regression(
    n: int,
    col_a: NDArray[np.floating[Any]],
    col_b: NDArray[np.floating[Any]],
    col_response: NDArray[np.floating[Any]],
    *,
    verbose: bool = False,
    out: TextIO | None = None,
    names: tuple[str, str] = DEFAULT_NAMES,
    response_label: str = LABELS[RESPONSE_FIELD],
    workers: int = 1,
    backend: BackendChoice = 'auto',
) -> tuple[IterationResult, ...]:
    """
    Produce n results into a fresh channel, then drain it.
    
    The channel is sized so producers never wait on the consumer.
    
    Returns:
        The drained IterationResults, in arrival order
    """
    channel: ResultChannel[IterationResult] = ResultChannel(capacity=max(n, 1))
    run(
        n, col_a, col_b, col_response, channel,
        names=names, workers=workers, backend=backend,
    )
    return consume(channel, verbose=verbose, out=out, response_label=response_label)


def run_pipeline(config: RunConfig, *, out: TextIO | None = None) -> tuple[IterationResult, ...]:
    """
    Load config.data_path and run config.iterations repetitions.
    
    Raises:
        DatasetReadError: Data file missing or unreadable
        ParseError: Data file malformed
    """
    col_a, col_b, col_response = read_columns(
        config.data_path, config.predictors, config.response
    )
    logger.info(
        "Fitting %s and %s against %s, %d iterations",
        *config.labels, config.response_label, config.iterations,
    )
    return perform_regression(
        config.iterations, col_a, col_b, col_response,
        verbose=config.verbose,
        out=out,
        names=config.labels,
        response_label=config.response_label,
        workers=config.workers,
        backend=config.backend,
    )
