"""Convenience imports for trend indicators."""

from .regression import fit, fitted_line

__all__ = ["fit", "fitted_line"]
