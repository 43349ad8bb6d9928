from __future__ import annotations

import csv
import json
import sys
from datetime import datetime
from pathlib import Path

import pytest

from runner.export_bulletin import EXPORT_FILES, run_export
from stellar.config import StellarConfig


def test_export_writes_all_outputs(tmp_path: Path, fixed_now: datetime) -> None:
    out_dir = run_export(StellarConfig(rng_seed=1), tmp_path / "run", save_figs=True, now=fixed_now)

    names = {path.name for path in out_dir.iterdir()}
    assert set(EXPORT_FILES).issubset(names)
    assert {"forecast.png", "residual_histogram.png", "qq_plot.png"}.issubset(names)

    with (out_dir / "bulletin.csv").open(newline="", encoding="utf-8") as handle:
        rows = list(csv.DictReader(handle))
    assert len(rows) == 25 * 8
    assert rows[0]["satellite_id"] == "G01"
    assert rows[0]["horizon"] == "15m"
    assert rows[0]["uncertainty_ns"] == "1.0300"

    with (out_dir / "forecast.csv").open(newline="", encoding="utf-8") as handle:
        kinds = [row["type"] for row in csv.DictReader(handle)]
    assert kinds.count("historical") == 96
    assert kinds.count("forecast") == 96

    kpi = json.loads((out_dir / "kpi.json").read_text(encoding="utf-8"))
    assert kpi["satellite_status"]["total"] == 25
    bulletin = json.loads((out_dir / "bulletin.json").read_text(encoding="utf-8"))
    assert len(bulletin[0]["forecasts"]) == 8


def test_seeded_export_is_byte_identical(tmp_path: Path, fixed_now: datetime) -> None:
    cfg = StellarConfig(rng_seed=123)
    first = run_export(cfg, tmp_path / "a", save_figs=False, now=fixed_now)
    second = run_export(cfg, tmp_path / "b", save_figs=False, now=fixed_now)

    for name in EXPORT_FILES:
        assert (first / name).read_bytes() == (second / name).read_bytes()


def test_no_plots_does_not_import_plot_module(tmp_path: Path) -> None:
    sys.modules.pop("stellar.plots", None)
    run_export(StellarConfig(rng_seed=2), tmp_path / "no_plots", save_figs=False)
    assert "stellar.plots" not in sys.modules


def test_export_quiet_unless_verbose(tmp_path: Path, capsys) -> None:
    run_export(StellarConfig(rng_seed=3), tmp_path / "quiet", save_figs=False)
    quiet_out = capsys.readouterr().out
    assert "Shapiro-Wilk" not in quiet_out
    assert "Saved outputs to" in quiet_out

    run_export(StellarConfig(rng_seed=3), tmp_path / "verbose", save_figs=False, verbose=True)
    verbose_out = capsys.readouterr().out
    assert "Shapiro-Wilk" in verbose_out
    assert "Uncertainty at +24.00 h" in verbose_out


def test_offline_report_summarises_run(tmp_path: Path, fixed_now: datetime) -> None:
    pytest.importorskip("pandas")
    from runner.offline_report import build_report

    run_dir = run_export(
        StellarConfig(rng_seed=4, residual_samples=200), tmp_path / "run", save_figs=False, now=fixed_now
    )
    report = build_report(run_dir)

    assert report["residual_count"] == 200
    assert 0.0 < report["residuals"]["rms"] < 1.0
    assert 0.9 < report["shapiro_wilk"]["w"] <= 1.0
    assert report["bulletin_rows"] == 200
    assert report["bulletin_satellites"] == 25
    assert sum(report["risk_levels"].values()) == 200
    assert report["historical_points"] == 96
    assert report["forecast_points"] == 96
    horizons = list(report["uncertainty_by_horizon_ns"])
    assert horizons[0] == "15m"
    assert horizons[-1] == "24h"


def test_offline_report_requires_residuals(tmp_path: Path) -> None:
    from runner.offline_report import build_report

    with pytest.raises(FileNotFoundError):
        build_report(tmp_path)
