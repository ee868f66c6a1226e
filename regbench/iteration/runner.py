"""
Iteration runner.

Fits both predictors against the response n times over the same,
unmodified columns and pushes one IterationResult per repetition onto a
ResultChannel, sealing it after the last push. Repetitions are identical
computations; they exist to exercise the pipeline n times.

Repetitions run sequentially by default. With workers > 1 they are
spread over a thread pool and may arrive in any order, but every index
1..n is delivered exactly once before the channel is sealed.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from regbench.core.exceptions import ValidationError
from regbench.core.timing import Timer
from regbench.core.validation import check_array, check_consistent_length, check_count
from regbench.iteration.channel import ResultChannel
from regbench.regression.solution import RegressionResult
from regbench.regression.solvers import BackendChoice, fit

logger = logging.getLogger(__name__)

DEFAULT_NAMES: tuple[str, str] = ('Crim', 'Rooms')


@dataclass(frozen=True)
class IterationResult:
    """
    Output of one repetition.
    
    Attributes:
        iteration: 1-based repetition index
        predictor_a: Fit of the first predictor against the response
        predictor_b: Fit of the second predictor against the response
    """
    iteration: int
    predictor_a: RegressionResult
    predictor_b: RegressionResult
    
    @property
    def results(self) -> tuple[RegressionResult, RegressionResult]:
        return (self.predictor_a, self.predictor_b)


def perform_iteration(
    iteration: int,
    col_a: NDArray[np.floating[Any]],
    col_b: NDArray[np.floating[Any]],
    col_response: NDArray[np.floating[Any]],
    sink: ResultChannel[IterationResult],
    *,
    names: tuple[str, str] = DEFAULT_NAMES,
    backend: BackendChoice = 'auto',
) -> None:
    """Fit both predictors once and send the IterationResult to sink."""
    result = IterationResult(
        iteration=iteration,
        predictor_a=fit(col_a, col_response, predictor=names[0], backend=backend),
        predictor_b=fit(col_b, col_response, predictor=names[1], backend=backend),
    )
    sink.send(result)


def run(
    n: int,
    col_a: NDArray[np.floating[Any]],
    col_b: NDArray[np.floating[Any]],
    col_response: NDArray[np.floating[Any]],
    sink: ResultChannel[IterationResult],
    *,
    names: tuple[str, str] = DEFAULT_NAMES,
    workers: int = 1,
    backend: BackendChoice = 'auto',
) -> None:
    """
    Run n repetitions and seal sink.
    
    The sink is sealed on every exit path, including when a repetition
    raises; the error then propagates to the caller.
    
    Args:
        n: Number of repetitions, >= 0. n == 0 seals an empty channel.
        col_a: First predictor column
        col_b: Second predictor column
        col_response: Response column
        sink: Open channel with capacity >= n
        names: Labels for the two predictors
        workers: 1 for sequential execution, > 1 for a thread pool
        backend: Regression backend passed through to fit()
        
    Raises:
        ValidationError: Bad n or workers, or sink too small for n
        DimensionError: Columns are not index-aligned
        
    Example:
        >>> channel = ResultChannel(capacity=100)
        >>> run(100, crim, rooms, mv, channel)
        >>> len(channel)
        100
    """
    n = check_count(n, 0, 'n')
    workers = check_count(workers, 1, 'workers')
    if sink.capacity < n:
        raise ValidationError(
            f"sink: capacity must be >= n ({n}), got {sink.capacity}"
        )
    
    col_a = check_array(col_a, 'col_a')
    col_b = check_array(col_b, 'col_b')
    col_response = check_array(col_response, 'col_response')
    check_consistent_length(
        col_a, col_b, col_response, names=('col_a', 'col_b', 'col_response')
    )
    
    timer = Timer()
    timer.start()
    logger.debug("Running %d iterations with %d worker(s)", n, workers)
    try:
        if workers == 1:
            for i in range(1, n + 1):
                perform_iteration(
                    i, col_a, col_b, col_response, sink,
                    names=names, backend=backend,
                )
        else:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                futures = [
                    pool.submit(
                        perform_iteration,
                        i, col_a, col_b, col_response, sink,
                        names=names, backend=backend,
                    )
                    for i in range(1, n + 1)
                ]
                for future in futures:
                    future.result()
    finally:
        if not sink.closed:
            sink.close()
        timer.stop()
    
    logger.debug(
        "Finished %d iterations in %.4fs", n, timer.result()['total_seconds']
    )
