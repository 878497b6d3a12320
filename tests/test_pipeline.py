import logging
import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.models import GenerationParams, InvalidArgument
from core.pipeline import run_simulation


def test_run_simulation_returns_series_and_model(caplog):
    params = GenerationParams(count=30, trend_per_decade=1.0)
    with caplog.at_level(logging.INFO, logger="core.pipeline"):
        result = run_simulation(params, rng=np.random.default_rng(0))
    assert result.params is params
    assert len(result.samples) == 30
    assert result.model.slope == pytest.approx(0.1, abs=1e-9)
    assert "Simulated 30 years" in caplog.text


def test_run_simulation_propagates_invalid_argument():
    with pytest.raises(InvalidArgument):
        run_simulation(GenerationParams(count=-1))


def test_run_simulation_empty_series():
    result = run_simulation(GenerationParams(count=0))
    assert result.samples == []
    assert result.model.slope == 0.0 and result.model.intercept == 0.0
