"""Synthetic temperature anomaly series with a linear trend and uniform noise."""

from __future__ import annotations

import numbers
from typing import List, Optional

import numpy as np

from core.models import GenerationParams, InvalidArgument, Sample

BASE_YEAR = 1900


def _validate(params: GenerationParams) -> None:
    if isinstance(params.count, bool) or not isinstance(params.count, numbers.Integral):
        raise InvalidArgument(f"count must be an integer, got {params.count!r}")
    if params.count < 0:
        raise InvalidArgument(f"count must be non-negative, got {params.count}")
    if params.noise_amplitude < 0:
        raise InvalidArgument(f"noise_amplitude must be non-negative, got {params.noise_amplitude}")


def generate(params: GenerationParams, rng: Optional[np.random.Generator] = None) -> List[Sample]:
    """Return ``params.count`` samples starting at :data:`BASE_YEAR`.

    Parameters
    ----------
    params:
        Series length, starting value, warming per decade and noise level.
    rng:
        Source of the noise term. A fresh unseeded generator is used when
        omitted; pass ``np.random.default_rng(seed)`` for repeatable output.

    Returns
    -------
    list of Sample
        A new list on every call. Each value is
        ``base_value + (i / 10) * trend_per_decade`` plus noise drawn uniformly
        from ``[-noise_amplitude / 2, noise_amplitude / 2]``.
    """

    _validate(params)
    count = int(params.count)
    if count == 0:
        return []

    rng = rng if rng is not None else np.random.default_rng()
    half = float(params.noise_amplitude) / 2.0
    noise = rng.uniform(-half, half, size=count)
    samples: List[Sample] = []
    for i in range(count):
        value = params.base_value + (i / 10) * params.trend_per_decade + float(noise[i])
        samples.append(Sample(year=BASE_YEAR + i, value=value))
    return samples


__all__ = ["BASE_YEAR", "generate"]
