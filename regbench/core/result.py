"""
Generic result container for regbench computations.

The Result class provides a standardized envelope that every backend
returns. This enables shared tooling for timing, logging and warnings
while allowing each component to define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, rank, degeneracy flags)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so results can cross threads safely
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a single computation.
    
    Type Parameters:
        P: The component-specific parameter payload type
        
    Attributes:
        params: Component-specific parameters (coefficients, sums of squares)
        info: Structured metadata (method, rank, degenerate flags)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        
    Examples:
        >>> Result(
        ...     params=LinearParams(intercept=1.0, slope=2.0, ...),
        ...     info={'method': 'moments'},
        ...     timing={'total_seconds': 1e-5},
        ...     backend_name='cpu_moments'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    
    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
