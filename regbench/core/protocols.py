"""
Core protocols for regbench.

These define structural interfaces that backend implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so a
backend is any object with the right shape.
"""

from typing import Protocol, TypeVar, runtime_checkable

from regbench.core.result import Result

D = TypeVar('D')  # Design type
P = TypeVar('P')  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.
    
    Each backend knows how to take a validated design and produce a
    parameter payload wrapped in a Result.
    
    Backends are stateless. A single instance may be shared by any number
    of threads solving disjoint or identical designs at the same time.
    
    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """
    
    @property
    def name(self) -> str:
        """
        Backend identifier.
        
        Convention: '{device}_{algorithm}'
        Examples: 'cpu_moments', 'cpu_qr'
        """
        ...
    
    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.
        
        Numerical degeneracies are reported through the payload and
        Result.warnings, never raised.
        """
        ...
