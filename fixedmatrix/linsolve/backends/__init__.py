"""Computational backends for linear systems."""

from fixedmatrix.linsolve.backends.cpu import CPUGaussBackend, CPUGaussJordanBackend

__all__ = ["CPUGaussBackend", "CPUGaussJordanBackend"]
