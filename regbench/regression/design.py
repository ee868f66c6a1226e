"""
Univariate regression design.

Design pairs one predictor column with the response column after
validating the fit precondition: both 1-D, same length, at least one
observation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from regbench.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_min_samples,
)


@dataclass(frozen=True)
class SimpleDesign:
    """
    Predictor/response pair for single-predictor OLS.
    
    Immutable after construction. The arrays are not copied, so a design
    built from read-only dataset columns stays read-only.
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    
    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> SimpleDesign:
        """
        Build a validated design.
        
        Raises:
            ValidationError: If either input is not numeric
            DimensionError: If inputs are not 1-D, differ in length, or are empty
        """
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        check_min_samples(x_arr, 1, 'x')
        
        return cls(_x=x_arr, _y=y_arr, _n=x_arr.shape[0])
    
    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor values (n,)."""
        return self._x
    
    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response values (n,)."""
        return self._y
    
    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n
    
    def design_matrix(self) -> NDArray[np.floating[Any]]:
        """Intercept column followed by the predictor (n x 2)."""
        return np.column_stack([np.ones(self._n), self._x])


def is_constant(values: NDArray[np.floating[Any]]) -> bool:
    """True when every value is identical (exact comparison)."""
    return bool(values.min() == values.max())
