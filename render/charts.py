"""Matplotlib figures for the 2D trend chart and the 3D scene."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import pandas as pd
from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

from core.config_loader import RenderConfig
from render.scales import CHART_VALUE_PADDING, SCENE_X_RANGE, SCENE_Y_RANGE, SceneGeometry, value_domain

LOGGER = logging.getLogger(__name__)


def build_chart_figure(frame: pd.DataFrame, config: Optional[RenderConfig] = None) -> Figure:
    """Draw the simulated series and its fitted line with labelled axes."""

    config = config or RenderConfig()
    fig, ax = plt.subplots(figsize=config.figure_size, dpi=config.dpi)
    ax.plot(frame["year"], frame["value"], color=config.point_color, linewidth=1.2, label="Simulated")
    ax.plot(
        frame["year"],
        frame["predicted"],
        color=config.line_color,
        linewidth=config.line_width,
        linestyle="--",
        label="Trend",
    )
    if len(frame) > 1:
        ax.set_xlim(frame["year"].min(), frame["year"].max())
    if not frame.empty:
        ax.set_ylim(*value_domain(frame["value"].tolist(), CHART_VALUE_PADDING))
    ax.xaxis.set_major_locator(MaxNLocator(integer=True))
    ax.set_xlabel("Year")
    ax.set_ylabel("Temperature Anomaly (°C)")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper left")
    fig.tight_layout()
    return fig


def build_scene_figure(
    geometry: SceneGeometry,
    config: Optional[RenderConfig] = None,
    elev: Optional[float] = None,
    azim: Optional[float] = None,
) -> Figure:
    """Draw the point cloud and fitted line in a 3D view box."""

    config = config or RenderConfig()
    fig = plt.figure(figsize=config.figure_size, dpi=config.dpi)
    ax = fig.add_subplot(projection="3d")
    if len(geometry.points):
        ax.scatter(
            geometry.points[:, 0],
            geometry.points[:, 2],
            geometry.points[:, 1],
            s=config.point_size,
            c=config.point_color,
            alpha=0.8,
            depthshade=False,
        )
    if len(geometry.line):
        ax.plot(
            geometry.line[:, 0],
            geometry.line[:, 2],
            geometry.line[:, 1],
            color=config.line_color,
            linewidth=config.line_width,
        )
    ax.set_xlim(*SCENE_X_RANGE)
    ax.set_ylim(*SCENE_X_RANGE)
    ax.set_zlim(*SCENE_Y_RANGE)
    ax.set_xlabel("Year")
    ax.set_zlabel("Anomaly")
    ax.view_init(
        elev=config.elevation if elev is None else elev,
        azim=config.azimuth if azim is None else azim,
    )
    return fig


def close_figure(fig: Figure) -> None:
    """Release a figure once it has been displayed or saved."""

    plt.close(fig)


def save_figure(fig: Figure, output: Path) -> Path:
    """Write ``fig`` to ``output``, creating parent directories, and close it."""

    output.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output)
    close_figure(fig)
    LOGGER.info("Wrote %s", output)
    return output


__all__ = ["build_chart_figure", "build_scene_figure", "close_figure", "save_figure"]
