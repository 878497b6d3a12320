"""Configuration loader for the climate trend demo."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

import yaml
from dotenv import load_dotenv

from core.models import GenerationParams

BASE_PATH = Path(__file__).resolve().parents[1]


def _range(value: object, name: str) -> Tuple[float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{name} must be a [min, max] pair")
    low, high = float(value[0]), float(value[1])
    if low > high:
        raise ValueError(f"{name} minimum exceeds maximum")
    return low, high


def _section(cls, data: Optional[Dict[str, object]], name: str):
    if not data:
        return cls()
    if not isinstance(data, dict):
        raise ValueError(f"{name} section must be a mapping")
    try:
        return cls(**data)
    except TypeError as exc:
        raise ValueError(f"invalid {name} section: {exc}") from exc


@dataclass
class SimulationConfig:
    """Default generation parameters and seeding."""

    years: int = 100
    base_value: float = 0.0
    trend_per_decade: float = 0.2
    noise_amplitude: float = 0.5
    seed: Optional[int] = None
    seed_env: Optional[str] = None

    def __post_init__(self) -> None:
        if self.years < 0:
            raise ValueError("simulation.years must be non-negative")
        if self.noise_amplitude < 0:
            raise ValueError("simulation.noise_amplitude must be non-negative")

    @property
    def resolved_seed(self) -> Optional[int]:
        """Seed from ``seed_env`` when that variable is set, else ``seed``."""

        if self.seed_env:
            raw = os.getenv(self.seed_env)
            if raw:
                try:
                    return int(raw)
                except ValueError as exc:
                    raise ValueError(f"{self.seed_env} must be an integer, got {raw!r}") from exc
        return self.seed

    def to_params(self) -> GenerationParams:
        return GenerationParams(
            count=self.years,
            base_value=self.base_value,
            trend_per_decade=self.trend_per_decade,
            noise_amplitude=self.noise_amplitude,
        )

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, object]]) -> "SimulationConfig":
        return _section(cls, data, "simulation")


@dataclass
class UIConfig:
    """Slider bounds for the dashboard."""

    trend_range: Tuple[float, float] = (-2.0, 2.0)
    trend_step: float = 0.1
    noise_range: Tuple[float, float] = (0.0, 2.0)
    noise_step: float = 0.1
    years_range: Tuple[int, int] = (10, 200)

    def __post_init__(self) -> None:
        self.trend_range = _range(self.trend_range, "ui.trend_range")
        self.noise_range = _range(self.noise_range, "ui.noise_range")
        low, high = _range(self.years_range, "ui.years_range")
        self.years_range = (int(low), int(high))
        if self.noise_range[0] < 0:
            raise ValueError("ui.noise_range cannot go below zero")
        if self.years_range[0] < 0:
            raise ValueError("ui.years_range cannot go below zero")

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, object]]) -> "UIConfig":
        return _section(cls, data, "ui")


@dataclass
class RenderConfig:
    """Figure styling shared by the CLI and the dashboard."""

    point_size: float = 12.0
    line_width: float = 2.0
    figure_size: Tuple[float, float] = (8.0, 5.0)
    dpi: int = 100
    elevation: float = 25.0
    azimuth: float = -60.0
    point_color: str = "#3b82f6"
    line_color: str = "#dc2626"

    def __post_init__(self) -> None:
        width, height = (float(v) for v in self.figure_size)
        self.figure_size = (width, height)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, object]]) -> "RenderConfig":
        return _section(cls, data, "render")


@dataclass
class AppConfig:
    """Top level configuration model."""

    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, object]]) -> "AppConfig":
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("configuration root must be a mapping")
        unknown = set(data) - {"simulation", "ui", "render"}
        if unknown:
            raise ValueError(f"unknown configuration sections: {sorted(unknown)}")
        return cls(
            simulation=SimulationConfig.from_dict(data.get("simulation")),
            ui=UIConfig.from_dict(data.get("ui")),
            render=RenderConfig.from_dict(data.get("render")),
        )


def load_config(
    config_path: Optional[Path] = None,
    env_path: Optional[Path] = None,
) -> AppConfig:
    """Load application configuration from YAML and environment variables."""

    if config_path is None:
        config_path = BASE_PATH / "config.yaml"
    if env_path is None:
        default_env = BASE_PATH / ".env"
        if default_env.exists():
            env_path = default_env

    config_path = Path(config_path)
    if not config_path.exists():
        raise ValueError(f"config file not found: {config_path}")

    if env_path is not None:
        load_dotenv(dotenv_path=env_path, override=False)

    with open(config_path, "r", encoding="utf-8") as fp:
        try:
            data = yaml.safe_load(fp) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"malformed config file {config_path}: {exc}") from exc

    return AppConfig.from_dict(data)


__all__ = ["AppConfig", "RenderConfig", "SimulationConfig", "UIConfig", "load_config"]
