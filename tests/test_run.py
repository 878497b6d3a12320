import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import run


def test_main_writes_charts(tmp_path: Path, capsys):
    out_dir = tmp_path / "out"
    result = run.main(
        [
            "--config", str(ROOT / "config.yaml"),
            "--years", "3",
            "--trend", "1",
            "--noise", "0",
            "--base-value", "0",
            "--seed", "1",
            "--output-dir", str(out_dir),
        ]
    )
    assert [s.year for s in result.samples] == [1900, 1901, 1902]
    assert result.model.slope == pytest.approx(0.1, abs=1e-9)
    assert result.model.intercept == pytest.approx(-190.0, abs=1e-9)
    assert (out_dir / run.CHART_FILENAME).exists()
    assert (out_dir / run.SCENE_FILENAME).exists()
    assert "Slope: 0.100000" in capsys.readouterr().out


def test_main_same_seed_repeats(tmp_path: Path):
    args = ["--config", str(ROOT / "config.yaml"), "--years", "20", "--noise", "1.0", "--seed", "3"]
    first = run.main(args + ["--output-dir", str(tmp_path / "a")])
    second = run.main(args + ["--output-dir", str(tmp_path / "b")])
    assert first.samples == second.samples


def test_main_rejects_negative_years(tmp_path: Path):
    out_dir = tmp_path / "out"
    with pytest.raises(SystemExit) as excinfo:
        run.main(["--config", str(ROOT / "config.yaml"), "--years", "-1", "--output-dir", str(out_dir)])
    assert "Invalid parameters" in str(excinfo.value)
    assert not out_dir.exists()


def test_main_rejects_bad_seed_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text('simulation:\n  seed_env: "CLIMATE_RUN_SEED"\n', encoding="utf-8")
    monkeypatch.setenv("CLIMATE_RUN_SEED", "not-a-number")
    out_dir = tmp_path / "out"
    with pytest.raises(SystemExit) as excinfo:
        run.main(["--config", str(cfg_path), "--output-dir", str(out_dir)])
    assert "CLIMATE_RUN_SEED must be an integer" in str(excinfo.value)
    assert not out_dir.exists()


def test_main_rejects_missing_config(tmp_path: Path):
    with pytest.raises(SystemExit) as excinfo:
        run.main(["--config", str(tmp_path / "missing.yaml"), "--output-dir", str(tmp_path / "out")])
    assert "config file not found" in str(excinfo.value)
