"""Synthetic climate series generation."""

from .generator import BASE_YEAR, generate

__all__ = ["BASE_YEAR", "generate"]
