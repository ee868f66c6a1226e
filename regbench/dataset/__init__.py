"""
Housing dataset: schema, immutable container and loader.

Public API:
    load_dataset(path) -> Dataset
    read_columns(path, predictors, response) -> (*predictor columns, response column)

Example:
    >>> from regbench.dataset import load_dataset
    >>> ds = load_dataset("data/boston.csv")
    >>> crim, rooms, mv = ds.columns('crim', 'rooms', 'mv')
"""

from regbench.dataset.record import (
    FEATURE_FIELDS,
    FIELDS,
    LABELS,
    RESPONSE_FIELD,
    Record,
)
from regbench.dataset.datasource import Dataset
from regbench.dataset.loader import (
    DEFAULT_PREDICTORS,
    load_dataset,
    parse_text,
    read_columns,
)

__all__ = [
    "DEFAULT_PREDICTORS",
    "FEATURE_FIELDS",
    "FIELDS",
    "LABELS",
    "RESPONSE_FIELD",
    "Record",
    "Dataset",
    "load_dataset",
    "parse_text",
    "read_columns",
]
