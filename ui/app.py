"""Streamlit dashboard for the climate trend demo."""

from __future__ import annotations

# --- path setup ---
import sys
import os
# make the project root importable when launched via ``streamlit run ui/app.py``
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
# ------------------

from typing import Optional

import numpy as np
import streamlit as st

from core.config_loader import AppConfig, load_config
from core.models import GenerationParams, InvalidArgument, SimulationResult
from core.pipeline import run_simulation
from render.charts import build_chart_figure, build_scene_figure, close_figure
from render.scales import chart_frame, scene_geometry


def _controls(config: AppConfig) -> GenerationParams:
    st.sidebar.header("Simulation")
    sim = config.simulation
    ui = config.ui
    trend = st.sidebar.slider(
        "Warming trend per decade (°C)",
        min_value=float(ui.trend_range[0]),
        max_value=float(ui.trend_range[1]),
        value=float(min(max(sim.trend_per_decade, ui.trend_range[0]), ui.trend_range[1])),
        step=float(ui.trend_step),
    )
    noise = st.sidebar.slider(
        "Noise level",
        min_value=float(ui.noise_range[0]),
        max_value=float(ui.noise_range[1]),
        value=float(min(max(sim.noise_amplitude, ui.noise_range[0]), ui.noise_range[1])),
        step=float(ui.noise_step),
    )
    years = st.sidebar.slider(
        "Number of years",
        min_value=int(ui.years_range[0]),
        max_value=int(ui.years_range[1]),
        value=int(min(max(sim.years, ui.years_range[0]), ui.years_range[1])),
        step=1,
    )
    return GenerationParams(
        count=years,
        base_value=sim.base_value,
        trend_per_decade=trend,
        noise_amplitude=noise,
    )


def _seed_input(config: AppConfig) -> Optional[int]:
    default = config.simulation.resolved_seed
    fixed = st.sidebar.checkbox("Fixed seed", value=default is not None)
    if not fixed:
        return None
    return int(st.sidebar.number_input("Seed", value=default or 0, step=1))


def _summary(result: SimulationResult) -> None:
    cols = st.columns(3)
    cols[0].metric("Slope (°C / year)", f"{result.model.slope:.4f}")
    cols[1].metric("Intercept (°C)", f"{result.model.intercept:.2f}")
    cols[2].metric("Detected trend per decade", f"{result.model.trend_per_decade:.3f}")


def _scene_panel(result: SimulationResult, config: AppConfig) -> None:
    st.subheader("3D view")
    cols = st.columns(2)
    with cols[0]:
        elev = st.slider("Camera elevation", min_value=-90, max_value=90, value=int(config.render.elevation))
    with cols[1]:
        azim = st.slider("Camera azimuth", min_value=-180, max_value=180, value=int(config.render.azimuth))
    fig = build_scene_figure(scene_geometry(result.samples, result.model), config.render, elev=elev, azim=azim)
    st.pyplot(fig)
    close_figure(fig)


def _chart_panel(result: SimulationResult, config: AppConfig) -> None:
    st.subheader("Temperature anomaly")
    frame = chart_frame(result.samples, result.model)
    fig = build_chart_figure(frame, config.render)
    st.pyplot(fig)
    close_figure(fig)
    with st.expander("Data"):
        st.dataframe(frame)


def main() -> None:
    st.set_page_config(page_title="Climate Trend Demo", layout="wide")
    if "config" not in st.session_state:
        try:
            st.session_state["config"] = load_config()
        except ValueError as exc:
            st.error(f"Invalid configuration: {exc}")
            return
    config = st.session_state["config"]

    st.title("Climate trend detection")
    st.caption("Synthetic anomaly series with a least-squares trend line.")
    if st.sidebar.button("Reload config"):
        st.session_state.pop("config", None)
        st.rerun()

    params = _controls(config)
    try:
        seed = _seed_input(config)
    except ValueError as exc:
        st.error(f"Invalid configuration: {exc}")
        return
    try:
        result = run_simulation(params, rng=np.random.default_rng(seed))
    except InvalidArgument as exc:
        st.error(f"Invalid parameters: {exc}")
        return

    _summary(result)
    cols = st.columns(2)
    with cols[0]:
        _scene_panel(result, config)
    with cols[1]:
        _chart_panel(result, config)


if __name__ == "__main__":
    main()
