"""
Single-predictor ordinary least squares.

Public API:
    fit(x, y, ...) -> RegressionResult

Example:
    >>> from regbench.regression import fit
    >>> result = fit(crim, mv, predictor='Crim')
    >>> print(result.equation(), result.r_squared)
"""

from regbench.regression.design import SimpleDesign
from regbench.regression.solution import LinearParams, RegressionResult
from regbench.regression.solvers import BACKEND_CHOICES, fit

__all__ = [
    "BACKEND_CHOICES",
    "fit",
    "SimpleDesign",
    "LinearParams",
    "RegressionResult",
]
