"""Export a forecast bulletin run: series, residuals, bulletin, KPIs and plots."""

from __future__ import annotations

import argparse
from dataclasses import replace
from datetime import datetime
from pathlib import Path

from stellar.catalog.satellites import resolve_satellite
from stellar.config import StellarConfig
from stellar.forecast.timeseries import generate_forecast_data
from stellar.logger import (
    save_bulletin_csv,
    save_bulletin_json,
    save_forecast_csv,
    save_kpi_json,
    save_residuals_csv,
)
from stellar.models import SIGNALS
from stellar.report.bulletin import generate_bulletin_data, risk_counts
from stellar.report.kpi import generate_kpi_metrics
from stellar.stats.normality import shapiro_wilk_test
from stellar.stats.residuals import generate_residual_data
from stellar.utils.logging import get_logger

EXPORT_FILES = ("forecast.csv", "residuals.csv", "bulletin.csv", "bulletin.json", "kpi.json")


def run_export(
    cfg: StellarConfig,
    out_dir: str | Path,
    *,
    satellite_id: str = "G01",
    signal: str = "clock",
    save_figs: bool = True,
    verbose: bool = False,
    now: datetime | None = None,
) -> Path:
    """Generate every product for one run and write it to ``out_dir``.

    A single generator seeded from ``cfg.rng_seed`` drives all products, so
    a fixed seed (and ``now``) reproduces the files byte for byte.
    """

    logger = get_logger("stellar")
    output_dir = Path(out_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    rng = cfg.make_rng()

    sat = resolve_satellite(satellite_id)
    series = generate_forecast_data(sat.id, signal, rng=rng, now=now, config=cfg)
    residuals = generate_residual_data(cfg.residual_samples, rng=rng)
    bulletins = generate_bulletin_data(rng=rng, now=now, config=cfg)
    kpis = generate_kpi_metrics(rng=rng, now=now)

    save_forecast_csv(output_dir / "forecast.csv", series)
    save_residuals_csv(output_dir / "residuals.csv", residuals)
    save_bulletin_csv(output_dir / "bulletin.csv", bulletins)
    save_bulletin_json(output_dir / "bulletin.json", bulletins)
    save_kpi_json(output_dir / "kpi.json", kpis)
    logger.info("Wrote %d satellite bulletins to %s", len(bulletins), output_dir)

    if save_figs:
        from stellar.plots import save_run_plots

        save_run_plots(series, residuals, out_dir=output_dir, num_bins=cfg.histogram_bins)

    if verbose:
        print(f"Satellite: {sat.id} ({sat.name}, {sat.constellation}, {sat.clock_type})")
        print(f"Current {series.signal} error: {series.current:.4f}")
        last = series.forecast[-1] if series.forecast else None
        if last is not None:
            print(f"Uncertainty at +{last.horizon_h:.2f} h: {last.uncertainty:.4f}")
        if residuals.size >= 3:
            sw = shapiro_wilk_test(residuals)
            print(f"Shapiro-Wilk W={sw.w:.4f} p={sw.p_value:.4f}")
        print(f"Bulletin risk levels: {risk_counts(bulletins)}")

    print(f"Saved outputs to {output_dir}")
    return output_dir


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Export a synthetic GNSS forecast bulletin run.")
    add_export_arguments(parser)
    return parser


def add_export_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--out-dir", type=str, default="out")
    parser.add_argument("--run-name", type=str, default=None)
    parser.add_argument("--satellite", type=str, default="G01", help="Satellite id, e.g. G01 or E07")
    parser.add_argument("--signal", type=str, default="clock", choices=SIGNALS)
    parser.add_argument("--rng-seed", type=int, default=None)
    parser.add_argument("--residual-samples", type=int, default=StellarConfig.residual_samples)
    parser.add_argument("--bins", type=int, default=StellarConfig.histogram_bins)
    parser.add_argument("--no-plots", action="store_true", help="Skip saving plot PNGs")
    parser.add_argument("--verbose", action="store_true")


def run_from_args(args: argparse.Namespace) -> Path:
    cfg = replace(
        StellarConfig(),
        rng_seed=args.rng_seed,
        residual_samples=args.residual_samples,
        histogram_bins=args.bins,
    )
    run_name = args.run_name or datetime.now().strftime("%Y%m%d_%H%M%S")
    return run_export(
        cfg,
        Path(args.out_dir) / run_name,
        satellite_id=args.satellite,
        signal=args.signal,
        save_figs=not args.no_plots,
        verbose=args.verbose,
    )


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    run_from_args(args)


if __name__ == "__main__":
    main()
