from __future__ import annotations

"""Command line entry point: simulate a series, fit its trend, write charts."""

import argparse
import logging
from pathlib import Path
from typing import Iterable, Optional

import numpy as np

from core.config_loader import AppConfig, load_config
from core.models import GenerationParams, InvalidArgument, SimulationResult
from core.pipeline import run_simulation
from render.charts import build_chart_figure, build_scene_figure, save_figure
from render.scales import chart_frame, scene_geometry

LOGGER = logging.getLogger(__name__)

CHART_FILENAME = "trend_chart.png"
SCENE_FILENAME = "trend_scene.png"


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Synthetic climate trend demo")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    parser.add_argument("--years", type=int, default=None, help="Number of years to simulate")
    parser.add_argument("--trend", type=float, default=None, help="Warming trend per decade")
    parser.add_argument("--noise", type=float, default=None, help="Noise amplitude")
    parser.add_argument("--base-value", type=float, default=None, help="Starting anomaly")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the noise generator")
    parser.add_argument("--elev", type=float, default=None, help="3D camera elevation in degrees")
    parser.add_argument("--azim", type=float, default=None, help="3D camera azimuth in degrees")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("out"),
        help="Directory where the charts will be written",
    )
    return parser.parse_args(argv)


def _params(args: argparse.Namespace, config: AppConfig) -> GenerationParams:
    params = config.simulation.to_params()
    if args.years is not None:
        params.count = args.years
    if args.trend is not None:
        params.trend_per_decade = args.trend
    if args.noise is not None:
        params.noise_amplitude = args.noise
    if args.base_value is not None:
        params.base_value = args.base_value
    return params


def render(result: SimulationResult, config: AppConfig, output_dir: Path,
           elev: Optional[float] = None, azim: Optional[float] = None) -> list[Path]:
    chart = build_chart_figure(chart_frame(result.samples, result.model), config.render)
    scene = build_scene_figure(scene_geometry(result.samples, result.model), config.render, elev=elev, azim=azim)
    return [
        save_figure(chart, output_dir / CHART_FILENAME),
        save_figure(scene, output_dir / SCENE_FILENAME),
    ]


def main(argv: Optional[Iterable[str]] = None) -> SimulationResult:
    configure_logging()
    args = parse_args(argv)
    try:
        config = load_config(config_path=args.config)
        seed = args.seed if args.seed is not None else config.simulation.resolved_seed
    except ValueError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc
    params = _params(args, config)
    try:
        result = run_simulation(params, rng=np.random.default_rng(seed))
    except InvalidArgument as exc:
        raise SystemExit(f"Invalid parameters: {exc}") from exc

    print(f"Slope: {result.model.slope:.6f}")
    print(f"Intercept: {result.model.intercept:.4f}")
    print(f"Trend per decade: {result.model.trend_per_decade:.4f}")
    render(result, config, args.output_dir, elev=args.elev, azim=args.azim)
    LOGGER.info("Charts written to %s", args.output_dir)
    return result


if __name__ == "__main__":
    main()
