"""
Regression solution types.

Contains the parameter payload produced by backends and the immutable
user-facing RegressionResult.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from regbench.core.result import Result


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for single-predictor OLS.
    
    This is the immutable data computed by backends. Undefined quantities
    are NaN: intercept and slope when the predictor is constant, r_squared
    when the response is constant or the line is undefined.
    """
    intercept: float
    slope: float
    rss: float
    tss: float
    r_squared: float
    n: int
    constant_predictor: bool
    constant_response: bool


@dataclass(frozen=True)
class RegressionResult:
    """
    Fitted line response ≈ intercept + slope * predictor and its R².
    
    Immutable. Produced once per fit and safe to hand across threads.
    """
    predictor: str
    intercept: float
    slope: float
    r_squared: float
    _result: Result[LinearParams] | None = field(default=None, repr=False, compare=False)
    
    @classmethod
    def from_result(cls, result: Result[LinearParams], predictor: str) -> RegressionResult:
        params = result.params
        return cls(
            predictor=predictor,
            intercept=params.intercept,
            slope=params.slope,
            r_squared=params.r_squared,
            _result=result,
        )
    
    @property
    def is_degenerate(self) -> bool:
        """True when any reported quantity is the NaN sentinel."""
        return (
            math.isnan(self.intercept)
            or math.isnan(self.slope)
            or math.isnan(self.r_squared)
        )
    
    @property
    def params(self) -> LinearParams | None:
        return self._result.params if self._result is not None else None
    
    @property
    def info(self) -> dict[str, Any]:
        return self._result.info if self._result is not None else {}
    
    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing if self._result is not None else None
    
    @property
    def backend_name(self) -> str | None:
        return self._result.backend_name if self._result is not None else None
    
    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings if self._result is not None else ()
    
    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Fitted values intercept + slope * x."""
        return self.intercept + self.slope * np.asarray(x, dtype=np.float64)
    
    def equation(self, precision: int = 2) -> str:
        """
        Fitted line as text.
        
        Example:
            >>> RegressionResult('Rooms', -34.67, 9.10, 0.48).equation()
            '-34.67 + 9.10 * Rooms'
        """
        return (
            f"{self.intercept:.{precision}f} + "
            f"{self.slope:.{precision}f} * {self.predictor}"
        )
    
    def summary(self) -> str:
        """Multi-line description of the fit."""
        lines = [
            f"Simple Linear Regression: {self.predictor}",
            "=" * 60,
            f"Intercept: {self.intercept:.6f}",
            f"Slope: {self.slope:.6f}",
            f"R-squared: {self.r_squared:.6f}",
        ]
        params = self.params
        if params is not None:
            lines.insert(2, f"Observations: {params.n}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        if self.backend_name is not None:
            lines.append(f"Backend: {self.backend_name}")
        return "\n".join(lines)
