"""
Regression backends.

Available backends:
    CPUMomentsBackend: closed-form reference implementation
    CPUQRBackend: QR decomposition cross-check
"""

from regbench.regression.backends.cpu import CPUMomentsBackend, CPUQRBackend

__all__ = [
    "CPUMomentsBackend",
    "CPUQRBackend",
]
