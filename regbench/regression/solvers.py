"""
Solver dispatch for regression.

This module provides the fit() function (public API) and backend selection.
"""

from typing import Literal
import warnings

from numpy.typing import ArrayLike

from regbench.core.protocols import Backend
from regbench.regression.design import SimpleDesign
from regbench.regression.solution import LinearParams, RegressionResult
from regbench.regression.backends.cpu import CPUMomentsBackend, CPUQRBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_moments', 'cpu_qr']

BACKEND_CHOICES: tuple[str, ...] = ('auto', 'cpu', 'cpu_moments', 'cpu_qr')

# Backends hold no state, so one instance of each serves every caller
_MOMENTS: Backend[SimpleDesign, LinearParams] = CPUMomentsBackend()
_QR: Backend[SimpleDesign, LinearParams] = CPUQRBackend()


def fit(
    x: ArrayLike,
    y: ArrayLike,
    *,
    predictor: str = 'x',
    backend: BackendChoice = 'auto',
) -> RegressionResult:
    """
    Fit y ≈ intercept + slope * x by ordinary least squares.
    
    Unweighted and not constrained through the origin. Pure function:
    no shared mutable state, safe to call from any number of threads.
    
    Degenerate inputs never raise. A constant predictor yields NaN
    intercept and slope; a constant response yields NaN R². Each case
    is listed in result.warnings and emitted as a RuntimeWarning.
    
    Args:
        x: Predictor values (n,)
        y: Response values (n,)
        predictor: Name reported in the result
        backend: Computational backend to use:
            - 'auto' / 'cpu' / 'cpu_moments': closed-form centered moments
            - 'cpu_qr': QR decomposition of [1, x]
            
    Returns:
        RegressionResult with intercept, slope and R²
        
    Raises:
        ValidationError: If inputs are not numeric
        DimensionError: If len(x) != len(y), inputs are empty, or not 1-D
        ValueError: If backend is unknown
        
    Example:
        >>> result = fit([1, 2, 3, 4, 5], [3, 5, 7, 9, 11])
        >>> result.intercept, result.slope, result.r_squared
        (1.0, 2.0, 1.0)
    """
    design = SimpleDesign.from_arrays(x, y)
    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design)
    
    for message in result.warnings:
        warnings.warn(f"{predictor}: {message}", RuntimeWarning, stacklevel=2)
    
    return RegressionResult.from_result(result, predictor)


def _get_backend(choice: BackendChoice) -> Backend[SimpleDesign, LinearParams]:
    """
    Select the backend instance.
    
    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_moments'):
        return _MOMENTS
    elif choice == 'cpu_qr':
        return _QR
    else:
        raise ValueError(f"Unknown backend: {choice!r}")
