"""Unified CLI entrypoint.

Subcommands:
  1) export     (headless run, writes CSV/JSON + plots)
  2) report     (summarise an export directory)
  3) satellites (print the reference fleet)
"""

from __future__ import annotations

import argparse


def _cmd_export(args: argparse.Namespace) -> None:
    from runner.export_bulletin import run_from_args

    run_from_args(args)


def _cmd_report(args: argparse.Namespace) -> None:
    from runner.offline_report import main as report_main

    argv = ["--run-dir", args.run_dir]
    if args.out:
        argv += ["--out", args.out]
    report_main(argv)


def _cmd_satellites(args: argparse.Namespace) -> None:
    from stellar.catalog import SATELLITES, get_error_characteristics

    for sat in SATELLITES:
        if args.constellation and sat.constellation != args.constellation:
            continue
        chars = get_error_characteristics(sat.constellation)
        print(
            f"{sat.id:4s} {sat.constellation:8s} {sat.orbit:4s} {sat.clock_type:4s} "
            f"{sat.status:8s} clk_rms={chars.broadcast_clock_rms:5.1f} ns  {sat.name}"
        )


def build_parser() -> argparse.ArgumentParser:
    from runner.export_bulletin import add_export_arguments

    parser = argparse.ArgumentParser(prog="stellar", description="STELLAR synthetic GNSS forecast runner")
    sub = parser.add_subparsers(dest="cmd", required=True)

    export = sub.add_parser("export", help="Generate and save a forecast bulletin run")
    add_export_arguments(export)
    export.set_defaults(func=_cmd_export)

    report = sub.add_parser("report", help="Summarise an export run directory")
    report.add_argument("--run-dir", type=str, required=True)
    report.add_argument("--out", type=str, default=None)
    report.set_defaults(func=_cmd_report)

    sats = sub.add_parser("satellites", help="List the reference satellite fleet")
    sats.add_argument("--constellation", type=str, default=None)
    sats.set_defaults(func=_cmd_satellites)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
