import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.models import GenerationParams, InvalidArgument, Sample
from synthesis import BASE_YEAR, generate


@pytest.mark.parametrize("count", [0, 1, 7, 150])
def test_generate_returns_contiguous_years(count):
    samples = generate(GenerationParams(count=count, noise_amplitude=0.8), rng=np.random.default_rng(3))
    assert len(samples) == count
    assert [s.year for s in samples] == list(range(BASE_YEAR, BASE_YEAR + count))


def test_generate_without_noise_is_exact():
    params = GenerationParams(count=40, base_value=-0.3, trend_per_decade=1.7, noise_amplitude=0.0)
    samples = generate(params)
    for i, sample in enumerate(samples):
        assert sample.value == -0.3 + (i / 10) * 1.7


def test_generate_noise_stays_within_half_amplitude():
    amplitude = 1.5
    params = GenerationParams(count=500, base_value=0.2, trend_per_decade=-0.8, noise_amplitude=amplitude)
    samples = generate(params, rng=np.random.default_rng(11))
    deviations = [s.value - (0.2 + (i / 10) * -0.8) for i, s in enumerate(samples)]
    assert all(abs(d) <= amplitude / 2 + 1e-12 for d in deviations)
    # 500 uniform draws spread across the band
    assert max(deviations) > amplitude / 4
    assert min(deviations) < -amplitude / 4


def test_generate_concrete_series():
    samples = generate(GenerationParams(count=3, base_value=0, trend_per_decade=1, noise_amplitude=0))
    assert [s.year for s in samples] == [1900, 1901, 1902]
    assert [s.value for s in samples] == pytest.approx([0.0, 0.1, 0.2])


def test_generate_same_seed_is_repeatable():
    params = GenerationParams(count=25, trend_per_decade=0.4, noise_amplitude=1.0)
    first = generate(params, rng=np.random.default_rng(42))
    second = generate(params, rng=np.random.default_rng(42))
    assert first == second


def test_generate_returns_new_list_each_call():
    params = GenerationParams(count=5)
    first = generate(params)
    second = generate(params)
    assert first == second
    assert first is not second
    first.append(Sample(year=0, value=0.0))
    assert len(second) == 5


def test_negative_count_rejected():
    with pytest.raises(InvalidArgument):
        generate(GenerationParams(count=-1))


@pytest.mark.parametrize("count", [2.5, "10", True])
def test_non_integer_count_rejected(count):
    with pytest.raises(InvalidArgument):
        generate(GenerationParams(count=count))


def test_negative_noise_rejected():
    with pytest.raises(InvalidArgument):
        generate(GenerationParams(count=3, noise_amplitude=-0.1))


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        generate(GenerationParams(count=-5))
