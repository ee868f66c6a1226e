"""
Dataset loader.

Reads the comma-separated housing file into an immutable Dataset. Loading
is all-or-nothing: the first malformed row aborts the whole load with a
ParseError and no Dataset is produced.

Accepted input:
    - UTF-8 text (a leading BOM is ignored)
    - any mix of CR, CRLF and LF line breaks
    - empty lines anywhere, including before the header, are skipped
    - first non-empty row is a header and is discarded without validation
    - leading whitespace in fields is trimmed; trailing whitespace in a
      numeric field is an error
    - quote characters inside unquoted fields are kept literally

A quoted field that itself contains unescaped quotes is read by the
pandas tokenizer: the quoting ends at the first inner quote and the rest
is kept verbatim, so '"Back "Bay" area"' loads as 'Back Bay" area"'.
Only the identifier column is affected in practice.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, Sequence

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from regbench.core.exceptions import DatasetReadError, ParseError
from regbench.dataset.datasource import Dataset
from regbench.dataset.record import FIELDS, RESPONSE_FIELD, Record

logger = logging.getLogger(__name__)

DEFAULT_PREDICTORS: tuple[str, ...] = ('crim', 'rooms')

# The header occupies row 1; data rows are numbered from 2
_FIRST_DATA_ROW = 2


def normalize_line_endings(text: str) -> str:
    """
    Convert every carriage return to a line feed.
    
    CRLF therefore becomes an empty line, which the parser skips.
    """
    return text.replace('\r', '\n')


def parse_text(text: str, *, path: str | Path | None = None) -> Dataset:
    """
    Parse CSV text into a Dataset.
    
    Args:
        text: Full file content
        path: Source path, used in error messages and metadata
        
    Returns:
        Dataset with one Record per data row, in file order
        
    Raises:
        ParseError: Missing header, no data rows, tokenizer failure,
            wrong field count, or a non-numeric field
    """
    if '\r' in text:
        logger.debug("Normalizing carriage returns in %s", path or '<text>')
        text = normalize_line_endings(text)
    
    # Empty lines are skipped, so the header is the first non-empty line
    text = text.lstrip('\n')
    if not text.strip():
        raise ParseError("missing header row", path=path, line=1)
    
    try:
        frame = pd.read_csv(
            io.StringIO(text),
            header=None,
            skiprows=1,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        raise ParseError("no data rows after header", path=path) from None
    except pd.errors.ParserError as e:
        raise ParseError(f"malformed CSV: {e}", path=path) from e
    
    n_fields = frame.shape[1]
    if n_fields != len(FIELDS):
        raise ParseError(
            f"line {_FIRST_DATA_ROW}: expected {len(FIELDS)} fields, got {n_fields}",
            path=path,
            line=_FIRST_DATA_ROW,
        )
    
    # Short rows are padded with NaN by the tokenizer
    short_rows = np.flatnonzero(frame.isna().to_numpy().any(axis=1))
    if len(short_rows) > 0:
        line = int(short_rows[0]) + _FIRST_DATA_ROW
        raise ParseError(
            f"line {line}: expected {len(FIELDS)} fields, got fewer",
            path=path,
            line=line,
        )
    
    records = []
    for offset, row in enumerate(frame.itertuples(index=False, name=None)):
        try:
            records.append(Record.from_fields(row, line=offset + _FIRST_DATA_ROW))
        except ParseError as e:
            e.path = str(path) if path is not None else None
            raise
    
    return Dataset.from_records(
        records,
        source_path=str(path) if path is not None else None,
    )


def load_dataset(path: str | Path) -> Dataset:
    """
    Load the housing dataset from a file.
    
    Args:
        path: CSV file path
        
    Returns:
        Immutable Dataset
        
    Raises:
        DatasetReadError: File missing or unreadable
        ParseError: Content is not a well-formed dataset
        
    Example:
        >>> ds = load_dataset("data/boston.csv")
        >>> ds.n_observations
        506
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise DatasetReadError(f"cannot read {path}: {e}", path=path) from e
    
    try:
        text = raw.decode('utf-8-sig')
    except UnicodeDecodeError as e:
        raise ParseError(f"{path} is not valid UTF-8: {e}", path=path) from e
    
    dataset = parse_text(text, path=path)
    logger.info("Loaded %d rows from %s", dataset.n_observations, path)
    return dataset


def read_columns(
    path: str | Path,
    predictors: Sequence[str] = DEFAULT_PREDICTORS,
    response: str = RESPONSE_FIELD,
) -> tuple[NDArray[np.floating[Any]], ...]:
    """
    Load a file and project the predictor and response columns.
    
    Args:
        path: CSV file path
        predictors: Predictor field names, in the order returned
        response: Response field name, returned last
        
    Returns:
        Index-aligned read-only columns: (*predictors, response)
        
    Example:
        >>> crim, rooms, mv = read_columns("data/boston.csv")
    """
    dataset = load_dataset(path)
    return dataset.columns(*predictors, response)
