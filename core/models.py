"""Value types shared by the generator, the estimator and the renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


class InvalidArgument(ValueError):
    """Raised when generation parameters cannot produce a series."""


@dataclass(frozen=True, slots=True)
class Sample:
    """One synthetic observation: calendar year and temperature anomaly."""

    year: int
    value: float


@dataclass(slots=True)
class GenerationParams:
    """Inputs of a single generation call."""

    count: int
    base_value: float = 0.0
    trend_per_decade: float = 0.0
    noise_amplitude: float = 0.0


@dataclass(frozen=True, slots=True)
class LinearModel:
    """Least-squares line ``value = slope * year + intercept``."""

    slope: float = 0.0
    intercept: float = 0.0

    def predict(self, year: float) -> float:
        return self.slope * year + self.intercept

    @property
    def trend_per_decade(self) -> float:
        return self.slope * 10.0


@dataclass(slots=True)
class SimulationResult:
    """Series and fitted model produced by one pipeline run."""

    params: GenerationParams
    samples: List[Sample] = field(default_factory=list)
    model: LinearModel = field(default_factory=LinearModel)


__all__ = ["InvalidArgument", "Sample", "GenerationParams", "LinearModel", "SimulationResult"]
