"""Ordinary least-squares trend fitting over (year, value) samples."""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

import numpy as np

from core.models import LinearModel, Sample

LOGGER = logging.getLogger(__name__)


def fit(samples: Iterable[Sample]) -> LinearModel:
    """Fit ``value = slope * year + intercept`` to ``samples``.

    The regression runs against absolute calendar years, so a series starting
    in 1900 with a slope of 0.1 per year has an intercept near -190.

    Parameters
    ----------
    samples:
        Observations in any order. The input is never modified.

    Returns
    -------
    LinearModel
        ``LinearModel(0.0, 0.0)`` when the input is empty or the least-squares
        denominator is zero (a single sample, or all samples in one year).
    """

    points = list(samples)
    n = len(points)
    if n == 0:
        return LinearModel(0.0, 0.0)

    x = np.fromiter((p.year for p in points), dtype=float, count=n)
    y = np.fromiter((p.value for p in points), dtype=float, count=n)
    sum_x = float(x.sum())
    sum_y = float(y.sum())
    sum_xy = float(np.dot(x, y))
    sum_xx = float(np.dot(x, x))

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        LOGGER.debug("Degenerate fit over %s samples, returning flat model", n)
        return LinearModel(0.0, 0.0)
    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return LinearModel(slope=slope, intercept=intercept)


def fitted_line(samples: Iterable[Sample], model: LinearModel) -> List[Tuple[int, float]]:
    """Return ``(year, predicted)`` for every sample year."""

    return [(p.year, model.predict(p.year)) for p in samples]


__all__ = ["fit", "fitted_line"]
