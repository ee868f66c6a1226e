"""
Immutable in-memory dataset.

Dataset is the "I have data" abstraction. It holds the parsed Records in
file order and exposes each numeric feature as a column: a read-only
float64 array in which index i always refers to records[i].

Usage:
    from regbench.dataset import Dataset
    
    ds = Dataset.from_records(records)
    ds.keys()             # frozenset({'crim', 'zn', ..., 'mv'})
    crim = ds['crim']     # read-only array, len(crim) == len(ds)
    crim, mv = ds.columns('crim', 'mv')
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping
import numpy as np
from numpy.typing import NDArray

from regbench.dataset.record import FEATURE_FIELDS, Record


@dataclass(frozen=True, eq=False)
class Dataset:
    """
    Ordered, load-once collection of Records.
    
    Construct via from_records(), not directly. Two Datasets are equal
    when they hold equal Records in the same order. Columns are derived once
    at construction and marked non-writeable, so a Dataset can be shared
    read-only by any number of threads without locking.
    """
    _records: tuple[Record, ...]
    _columns: Mapping[str, NDArray[np.floating[Any]]]
    _metadata: Mapping[str, Any] = field(default_factory=dict)
    
    # === Factory ===
    
    @classmethod
    def from_records(
        cls,
        records: Iterable[Record],
        *,
        source_path: str | None = None,
    ) -> Dataset:
        """Construct from Records, preserving their order."""
        frozen = tuple(records)
        n = len(frozen)
        
        columns: dict[str, NDArray[np.floating[Any]]] = {}
        for name in FEATURE_FIELDS:
            column = np.fromiter(
                (rec.value(name) for rec in frozen),
                dtype=np.float64,
                count=n,
            )
            column.setflags(write=False)
            columns[name] = column
        
        metadata: dict[str, Any] = {
            'n_observations': n,
            'source': 'file' if source_path else 'records',
        }
        if source_path:
            metadata['source_path'] = source_path
        
        return cls(
            _records=frozen,
            _columns=MappingProxyType(columns),
            _metadata=MappingProxyType(metadata),
        )
    
    # === Column Access ===
    
    def keys(self) -> frozenset[str]:
        """Names of all numeric columns."""
        return frozenset(self._columns.keys())
    
    def __getitem__(self, key: str) -> NDArray[np.floating[Any]]:
        """
        Access a named column.
        
        Raises:
            KeyError: If key not found, with a message listing available keys
        """
        if key not in self:
            raise KeyError(
                f"Dataset has no column '{key}'. Available: {sorted(self.keys())}"
            )
        return self._columns[key]
    
    def __contains__(self, key: object) -> bool:
        return key in self._columns
    
    def column(self, name: str) -> NDArray[np.floating[Any]]:
        """Read-only column for one numeric feature."""
        return self[name]
    
    def columns(self, *names: str) -> tuple[NDArray[np.floating[Any]], ...]:
        """
        Several index-aligned columns at once.
        
        Example:
            >>> crim, rooms, mv = ds.columns('crim', 'rooms', 'mv')
        """
        return tuple(self[name] for name in names)
    
    # === Records ===
    
    @property
    def records(self) -> tuple[Record, ...]:
        return self._records
    
    def __len__(self) -> int:
        return len(self._records)
    
    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)
    
    # === Properties ===
    
    @property
    def n_observations(self) -> int:
        """Number of records."""
        return len(self._records)
    
    @property
    def metadata(self) -> dict[str, Any]:
        return dict(self._metadata)
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dataset):
            return NotImplemented
        return self._records == other._records
    
    def __hash__(self) -> int:
        return hash(self._records)
    
    def __repr__(self) -> str:
        return f"Dataset(n={self.n_observations}, source={self._metadata.get('source')!r})"
