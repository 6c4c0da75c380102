"""
Linear system module.

Solves square systems A X = B by elimination and reports the diagnostics
the elimination produces along the way (pivots, row swaps, determinant,
conditioning warnings, timing).

Public API:
    solve_system(system, rhs=None, method='gauss_jordan')
"""

from fixedmatrix.linsolve.design import LinearSystemDesign
from fixedmatrix.linsolve.solution import LinearSystemParams, LinearSystemSolution
from fixedmatrix.linsolve.solvers import solve_system

__all__ = [
    "solve_system",
    "LinearSystemDesign",
    "LinearSystemParams",
    "LinearSystemSolution",
]
