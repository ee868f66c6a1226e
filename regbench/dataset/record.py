"""
Record schema for the housing dataset.

Each data row holds one identifier followed by 13 numeric features in a
fixed positional order. The header row of the file is never consulted;
field meaning comes from position alone.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from regbench.core.exceptions import ParseError


ID_FIELD = 'neighborhood'

# Positional order of the numeric fields after the identifier
FEATURE_FIELDS: tuple[str, ...] = (
    'crim',
    'zn',
    'indus',
    'chas',
    'nox',
    'rooms',
    'age',
    'dis',
    'rad',
    'tax',
    'ptratio',
    'lstat',
    'mv',
)

FIELDS: tuple[str, ...] = (ID_FIELD,) + FEATURE_FIELDS

RESPONSE_FIELD = 'mv'

# Display labels used when rendering fitted equations
LABELS: dict[str, str] = {
    'crim': 'Crim',
    'zn': 'Zn',
    'indus': 'Indus',
    'chas': 'Chas',
    'nox': 'Nox',
    'rooms': 'Rooms',
    'age': 'Age',
    'dis': 'Dis',
    'rad': 'Rad',
    'tax': 'Tax',
    'ptratio': 'PTRatio',
    'lstat': 'LStat',
    'mv': 'Median Value',
}


def parse_float(text: str) -> float:
    """
    Parse one numeric field.
    
    Leading whitespace is ignored. Accepts decimal and exponent notation
    plus 'NaN' and 'Inf'. Digit-group underscores and trailing
    whitespace, which float() would tolerate, are rejected.
    
    Raises:
        ValueError: If text is not a number
    """
    text = text.lstrip()
    if '_' in text or text != text.rstrip():
        raise ValueError(f"not a number: {text!r}")
    return float(text)


@dataclass(frozen=True)
class Record:
    """
    One observation: a neighborhood identifier and 13 numeric features.
    
    Immutable once constructed. Build from raw fields with from_fields().
    """
    neighborhood: str
    crim: float
    zn: float
    indus: float
    chas: float
    nox: float
    rooms: float
    age: float
    dis: float
    rad: float
    tax: float
    ptratio: float
    lstat: float
    mv: float
    
    @classmethod
    def from_fields(
        cls,
        row: Sequence[str],
        *,
        line: int | None = None,
    ) -> Record:
        """
        Build a Record from one row of raw text fields.
        
        Args:
            row: Raw fields in FIELDS order
            line: Row number for error messages
            
        Returns:
            Record
            
        Raises:
            ParseError: If the field count is wrong or any numeric
                field does not parse. The first bad field wins.
        """
        if len(row) != len(FIELDS):
            raise ParseError(
                f"line {line}: expected {len(FIELDS)} fields, got {len(row)}",
                line=line,
            )
        
        values: dict[str, float] = {}
        for name, raw in zip(FEATURE_FIELDS, row[1:]):
            try:
                values[name] = parse_float(raw)
            except ValueError:
                raise ParseError(
                    f"line {line}: field '{name}' is not a number: {raw!r}",
                    line=line,
                    field=name,
                    value=raw,
                ) from None
        
        return cls(neighborhood=row[0], **values)
    
    def value(self, name: str) -> float:
        """
        Numeric feature by schema name.
        
        Raises:
            KeyError: If name is not a numeric feature
        """
        if name not in FEATURE_FIELDS:
            raise KeyError(
                f"Record has no numeric field '{name}'. Available: {FEATURE_FIELDS}"
            )
        return getattr(self, name)

