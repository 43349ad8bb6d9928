"""Offline summary report for an export run directory.

Usage:
  python -m runner.offline_report --run-dir <run_output_dir>
"""

from __future__ import annotations

import argparse
import json
import math
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from stellar.logger import load_residuals_csv
from stellar.stats.normality import shapiro_wilk_test


def _stats(series: pd.Series) -> dict[str, float]:
    values = pd.to_numeric(series, errors="coerce").to_numpy(dtype=float)
    values = values[np.isfinite(values)]
    if values.size == 0:
        return {"mean": float("nan"), "std": float("nan"), "rms": float("nan"), "max_abs": float("nan"), "p95_abs": float("nan")}
    return {
        "mean": float(values.mean()),
        "std": float(values.std(ddof=1)) if values.size > 1 else 0.0,
        "rms": float(np.sqrt(np.mean(values**2))),
        "max_abs": float(np.abs(values).max()),
        "p95_abs": float(np.percentile(np.abs(values), 95)),
    }


def sanitize_json(obj: Any) -> Any:
    """Convert NaN/Inf to None so json.dumps(..., allow_nan=False) succeeds."""
    if isinstance(obj, float):
        return None if (math.isnan(obj) or math.isinf(obj)) else obj
    if isinstance(obj, dict):
        return {k: sanitize_json(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [sanitize_json(v) for v in obj]
    return obj


def build_report(run_dir: Path) -> dict:
    residual_path = run_dir / "residuals.csv"
    if not residual_path.exists():
        raise FileNotFoundError(f"Missing residuals.csv in {run_dir}")

    residuals = pd.Series(load_residuals_csv(residual_path), dtype=float)
    report: dict[str, object] = {
        "run_dir": str(run_dir),
        "residual_count": int(len(residuals)),
        "residuals": _stats(residuals),
    }
    if len(residuals) >= 3:
        sw = shapiro_wilk_test(residuals.to_numpy(dtype=float))
        report["shapiro_wilk"] = {"w": sw.w, "p_value": sw.p_value, "hypothesis": sw.hypothesis}

    bulletin_path = run_dir / "bulletin.csv"
    if bulletin_path.exists():
        bd = pd.read_csv(bulletin_path)
        report["bulletin_rows"] = int(len(bd))
        report["bulletin_satellites"] = int(bd["satellite_id"].nunique()) if "satellite_id" in bd else 0
        report["risk_levels"] = {str(k): int(v) for k, v in bd.get("risk_level", pd.Series([], dtype=str)).value_counts().items()}
        report["uncertainty_by_horizon_ns"] = {
            str(k): float(v)
            for k, v in bd.groupby("horizon", sort=False)["uncertainty_ns"].mean().items()
        } if {"horizon", "uncertainty_ns"}.issubset(bd.columns) else {}

    forecast_path = run_dir / "forecast.csv"
    if forecast_path.exists():
        fd = pd.read_csv(forecast_path)
        kinds = fd.get("type", pd.Series([], dtype=str))
        report["historical_points"] = int((kinds == "historical").sum())
        report["forecast_points"] = int((kinds == "forecast").sum())
        report["forecast_uncertainty"] = _stats(fd.loc[kinds == "forecast", "uncertainty"]) if "uncertainty" in fd else {}

    return sanitize_json(report)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Summarise a STELLAR export run directory.")
    parser.add_argument("--run-dir", type=str, required=True)
    parser.add_argument("--out", type=str, default=None)
    args = parser.parse_args(argv)

    run_dir = Path(args.run_dir)
    report = build_report(run_dir)
    out_path = Path(args.out) if args.out else (run_dir / "summary_report.json")
    out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    print(f"Wrote {out_path}")


if __name__ == "__main__":
    main()
