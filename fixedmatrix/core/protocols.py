"""
Core protocols for fixedmatrix.

We use Protocol (structural typing) rather than ABC (nominal typing) so
that any object with the right shape can act as a linear-system backend.
"""

from typing import Protocol, TypeVar, runtime_checkable

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)      # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for elimination backends.

    A backend takes a validated design and returns its parameter payload,
    diagnostics (timing, conditioning warnings) included. Backends are
    stateless.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_gauss_jordan'
        """
        ...

    def solve(self, design: D) -> P:
        """
        Run the elimination.

        Raises:
            SingularMatrixError: If the coefficient block has no usable pivot
        """
        ...
