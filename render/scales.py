"""Map samples and fitted lines into chart and scene coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

import numpy as np
import pandas as pd

from core.models import LinearModel, Sample

SCENE_X_RANGE = (-40.0, 40.0)
SCENE_Y_RANGE = (-30.0, 30.0)
SCENE_VALUE_PADDING = 1.0
CHART_VALUE_PADDING = 0.5


def linear_scale(domain: Tuple[float, float], range_: Tuple[float, float]) -> Callable[[float], float]:
    """Return a function mapping ``domain`` linearly onto ``range_``.

    A degenerate domain maps every input to the middle of the range.
    """

    d0, d1 = float(domain[0]), float(domain[1])
    r0, r1 = float(range_[0]), float(range_[1])
    span = d1 - d0
    if span == 0:
        mid = (r0 + r1) / 2.0
        return lambda _value: mid
    return lambda value: r0 + (float(value) - d0) / span * (r1 - r0)


def value_domain(values: Sequence[float], padding: float) -> Tuple[float, float]:
    """Return the value extent widened by ``padding`` on both sides."""

    if not len(values):
        return (-padding, padding)
    return (float(min(values)) - padding, float(max(values)) + padding)


@dataclass(slots=True)
class SceneGeometry:
    """Point cloud and fitted line positions, each an ``(n, 3)`` array."""

    points: np.ndarray
    line: np.ndarray


def scene_geometry(samples: Sequence[Sample], model: LinearModel) -> SceneGeometry:
    if not samples:
        empty = np.empty((0, 3), dtype=float)
        return SceneGeometry(points=empty, line=empty.copy())

    years = [s.year for s in samples]
    values = [s.value for s in samples]
    x_scale = linear_scale((min(years), max(years)), SCENE_X_RANGE)
    y_scale = linear_scale(value_domain(values, SCENE_VALUE_PADDING), SCENE_Y_RANGE)

    points = np.array([(x_scale(s.year), y_scale(s.value), 0.0) for s in samples], dtype=float)
    line = np.array([(x_scale(s.year), y_scale(model.predict(s.year)), 0.0) for s in samples], dtype=float)
    return SceneGeometry(points=points, line=line)


def chart_frame(samples: Sequence[Sample], model: LinearModel) -> pd.DataFrame:
    """Tabulate ``year``, ``value`` and ``predicted`` for the 2D chart."""

    return pd.DataFrame(
        {
            "year": [s.year for s in samples],
            "value": [s.value for s in samples],
            "predicted": [model.predict(s.year) for s in samples],
        },
        columns=["year", "value", "predicted"],
    )


__all__ = [
    "CHART_VALUE_PADDING",
    "SceneGeometry",
    "chart_frame",
    "linear_scale",
    "scene_geometry",
    "value_domain",
]
