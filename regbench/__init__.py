"""
regbench: repeated single-predictor OLS over the Boston housing dataset.

Loads a fixed-schema CSV into an immutable dataset, fits crime rate and
room count against median home value n times, and hands each repetition's
result to a consumer through a sealable channel.

Submodules:
    core: exceptions, Result envelope, validation, timing
    dataset: Record schema, Dataset, loader
    regression: fit() and its backends
    iteration: ResultChannel, run(), consume()
    pipeline: load -> run -> consume
"""

__version__ = "0.1.0"

from regbench import dataset
from regbench import regression
from regbench import iteration
from regbench.config import RunConfig
from regbench.pipeline import perform_regression, run_pipeline

__all__ = [
    "__version__",
    "dataset",
    "regression",
    "iteration",
    "RunConfig",
    "perform_regression",
    "run_pipeline",
]
