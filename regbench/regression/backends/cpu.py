"""
CPU backends for single-predictor OLS.

CPUMomentsBackend is the reference implementation: closed-form
coefficients from centered sums of squares. CPUQRBackend solves the same
problem through a QR decomposition of the [1, x] design matrix and is
kept as an independent cross-check.

Both apply the same degenerate-input policy:
    - constant predictor: intercept and slope are NaN
    - constant response: R² is NaN
"""

from typing import Any
import numpy as np

from regbench.core.linalg import qr_cpu, qr_solve_cpu
from regbench.core.result import Result
from regbench.core.timing import Timer
from regbench.regression.design import SimpleDesign, is_constant
from regbench.regression.solution import LinearParams


CONSTANT_PREDICTOR_WARNING = "constant predictor: intercept and slope are undefined (NaN)"
CONSTANT_RESPONSE_WARNING = "constant response: R-squared is undefined (NaN)"


def _goodness_of_fit(
    design: SimpleDesign,
    intercept: float,
    slope: float,
    constant_response: bool,
) -> tuple[float, float, float]:
    """Return (rss, tss, r_squared) for a fitted line."""
    y = design.y
    residuals = y - (intercept + slope * design.x)
    rss = float(residuals @ residuals)
    deviations = y - np.mean(y)
    tss = float(deviations @ deviations)
    
    if constant_response or tss == 0.0 or not np.isfinite(rss):
        r_squared = float('nan')
    else:
        r_squared = 1.0 - rss / tss
    return rss, tss, r_squared


def _centered_moments(design: SimpleDesign) -> tuple[float, float, float, float]:
    """Return (x_mean, y_mean, sxx, sxy) from mean-centered data."""
    x = design.x
    y = design.y
    x_mean = float(np.mean(x))
    y_mean = float(np.mean(y))
    dx = x - x_mean
    sxx = float(dx @ dx)
    sxy = float(dx @ (y - y_mean))
    return x_mean, y_mean, sxx, sxy


def _constant_predictor(design: SimpleDesign, sxx: float) -> bool:
    """Slope is undefined when x has no spread, exactly or after centering."""
    return is_constant(design.x) or sxx == 0.0


def _degeneracy_warnings(constant_predictor: bool, constant_response: bool) -> tuple[str, ...]:
    warnings: list[str] = []
    if constant_predictor:
        warnings.append(CONSTANT_PREDICTOR_WARNING)
    if constant_response:
        warnings.append(CONSTANT_RESPONSE_WARNING)
    return tuple(warnings)


class CPUMomentsBackend:
    """
    Closed-form OLS from centered moments.
    
    Implements the Backend protocol for SimpleDesign -> LinearParams.
    
        slope     = Σ(x - x̄)(y - ȳ) / Σ(x - x̄)²
        intercept = ȳ - slope · x̄
        R²        = 1 - RSS / TSS
    
    Stateless; safe to share between threads.
    """
    
    @property
    def name(self) -> str:
        return 'cpu_moments'
    
    def solve(self, design: SimpleDesign) -> Result[LinearParams]:
        timer = Timer()
        timer.start()
        
        constant_response = is_constant(design.y)
        
        with timer.section('moments'):
            x_mean, y_mean, sxx, sxy = _centered_moments(design)
        
        with timer.section('coefficients'):
            constant_predictor = _constant_predictor(design, sxx)
            if constant_predictor:
                slope = float('nan')
                intercept = float('nan')
            else:
                slope = sxy / sxx
                intercept = y_mean - slope * x_mean
        
        with timer.section('r_squared'):
            rss, tss, r_squared = _goodness_of_fit(
                design, intercept, slope, constant_response
            )
        
        timer.stop()
        
        params = LinearParams(
            intercept=intercept,
            slope=slope,
            rss=rss,
            tss=tss,
            r_squared=r_squared,
            n=design.n,
            constant_predictor=constant_predictor,
            constant_response=constant_response,
        )
        
        info: dict[str, Any] = {
            'method': 'moments',
            'sxx': sxx,
            'sxy': sxy,
        }
        
        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=_degeneracy_warnings(constant_predictor, constant_response),
        )


class CPUQRBackend:
    """
    OLS via QR decomposition of the [1, x] design matrix.
    
    Algorithm:
        1. Compute QR decomposition: X = QR
        2. If x has no spread: report NaN coefficients
        3. If rank(X) == 2: solve β = R⁻¹ Q'y
        4. Otherwise x varies below the rank tolerance: solve the
           centered least-squares problem, slope = Sxy / Sxx
    """
    
    @property
    def name(self) -> str:
        return 'cpu_qr'
    
    def solve(self, design: SimpleDesign) -> Result[LinearParams]:
        timer = Timer()
        timer.start()
        
        constant_response = is_constant(design.y)
        
        with timer.section('qr_decomposition'):
            qr_result = qr_cpu(design.design_matrix(), mode='reduced')
        
        with timer.section('moments'):
            x_mean, y_mean, sxx, sxy = _centered_moments(design)
        constant_predictor = _constant_predictor(design, sxx)
        method = 'qr'
        
        with timer.section('solve'):
            if constant_predictor:
                intercept = float('nan')
                slope = float('nan')
            elif qr_result.rank == 2:
                beta = qr_solve_cpu(qr_result, design.y)
                intercept = float(beta[0])
                slope = float(beta[1])
            else:
                method = 'centered_lstsq'
                slope = sxy / sxx
                intercept = y_mean - slope * x_mean
        
        with timer.section('r_squared'):
            rss, tss, r_squared = _goodness_of_fit(
                design, intercept, slope, constant_response
            )
        
        timer.stop()
        
        params = LinearParams(
            intercept=intercept,
            slope=slope,
            rss=rss,
            tss=tss,
            r_squared=r_squared,
            n=design.n,
            constant_predictor=constant_predictor,
            constant_response=constant_response,
        )
        
        info: dict[str, Any] = {
            'method': method,
            'rank': qr_result.rank,
        }
        
        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=_degeneracy_warnings(constant_predictor, constant_response),
        )
