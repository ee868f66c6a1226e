"""
Run configuration.

RunConfig gathers every knob of a pipeline run into one frozen value,
validated once at construction and passed explicitly to the pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from regbench.core.exceptions import ValidationError
from regbench.core.validation import check_count
from regbench.dataset.record import FEATURE_FIELDS, LABELS, RESPONSE_FIELD
from regbench.dataset.loader import DEFAULT_PREDICTORS
from regbench.regression.solvers import BACKEND_CHOICES

DEFAULT_DATA_PATH = Path('data') / 'boston.csv'
DEFAULT_ITERATIONS = 10000


@dataclass(frozen=True)
class RunConfig:
    """
    Frozen configuration for one pipeline run.
    
    Attributes:
        data_path: CSV file to load
        iterations: Number of repetitions, >= 0
        verbose: Render every iteration
        workers: 1 for sequential runs, > 1 for a thread pool
        backend: Regression backend name
        predictors: The two predictor fields
        response: The response field
    """
    data_path: Path
    iterations: int
    verbose: bool
    workers: int
    backend: str
    predictors: tuple[str, str]
    response: str
    
    @classmethod
    def build(
        cls,
        data_path: str | Path = DEFAULT_DATA_PATH,
        *,
        iterations: int = DEFAULT_ITERATIONS,
        verbose: bool = False,
        workers: int = 1,
        backend: str = 'auto',
        predictors: Sequence[str] = DEFAULT_PREDICTORS,
        response: str = RESPONSE_FIELD,
    ) -> RunConfig:
        """
        Create a validated configuration.
        
        Raises:
            ValidationError: If any value is out of range or unknown
        """
        iterations = check_count(iterations, 0, 'iterations')
        workers = check_count(workers, 1, 'workers')
        
        if backend not in BACKEND_CHOICES:
            raise ValidationError(
                f"backend: must be one of {BACKEND_CHOICES}, got {backend!r}"
            )
        
        predictors = tuple(predictors)
        if len(predictors) != 2:
            raise ValidationError(
                f"predictors: expected exactly 2 fields, got {len(predictors)}"
            )
        for name in (*predictors, response):
            if name not in FEATURE_FIELDS:
                raise ValidationError(
                    f"unknown field {name!r}, expected one of {FEATURE_FIELDS}"
                )
        
        return cls(
            data_path=Path(data_path),
            iterations=iterations,
            verbose=bool(verbose),
            workers=workers,
            backend=backend,
            predictors=(predictors[0], predictors[1]),
            response=response,
        )
    
    @property
    def labels(self) -> tuple[str, str]:
        """Display labels of the two predictors."""
        return (LABELS[self.predictors[0]], LABELS[self.predictors[1]])
    
    @property
    def response_label(self) -> str:
        return LABELS[self.response]
