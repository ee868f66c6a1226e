"""
QR decomposition helpers.

Used by the QR regression backend as an independent route to the
least-squares solution.
"""

from dataclasses import dataclass
from typing import Literal, Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.
    
    Attributes:
        Q: Orthogonal matrix (n x k where k = min(n, p) for reduced mode)
        R: Upper triangular matrix (k x p)
        rank: Numerical rank determined from R diagonal
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int


def qr_cpu(
    X: NDArray[np.floating[Any]],
    mode: Literal['reduced', 'complete'] = 'reduced'
) -> QRResult:
    """
    QR decomposition using LAPACK (via NumPy).
    
    Computes X = QR where Q is orthogonal and R is upper triangular.
    
    Args:
        X: Matrix to decompose (n x p)
        mode: 'reduced' for economy QR, 'complete' for full QR
        
    Returns:
        QRResult with Q, R, and numerical rank
    """
    Q, R = np.linalg.qr(X, mode=mode)
    
    diag_R = np.abs(np.diag(R))
    if len(diag_R) > 0 and diag_R[0] > 0:
        tol = max(X.shape) * np.finfo(X.dtype).eps * diag_R[0]
        rank = int(np.sum(diag_R > tol))
    else:
        rank = 0
    
    return QRResult(Q=Q, R=R, rank=rank)


def qr_solve_cpu(
    qr_result: QRResult,
    y: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Least-squares coefficients from a full-rank QR decomposition.
    
    Solves R β = Q'y by back substitution.
    
    Args:
        qr_result: Decomposition of the design matrix (n x p), rank p
        y: Response vector (n,)
        
    Returns:
        Coefficient vector β (p,)
    """
    p = qr_result.R.shape[1]
    Qty = qr_result.Q.T @ y
    return solve_triangular(qr_result.R[:p, :p], Qty[:p], lower=False)
