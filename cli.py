#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
cli.py
Wire gauge voltage drop calculator: drop per AWG size and recommended gauge.

Usage:
  python cli.py --voltage 12 --current 10 --distance 25
  python cli.py -v 14.5 -c 8 -d 10 --gauges 8,10,12,14,16,18,22
  python cli.py -v 120 -c 15 -d 100 --max-drop 5
  python cli.py -v 24 -c 30 -d 40 --gauges 2/0,4/0 --log-level INFO
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from core.calculate import build_input, run_calculation
from core.configuration import build_effective_config, load_configuration
from core.errors import InvalidInput
from reports.text_report import render_report

logger = logging.getLogger(__name__)


# ==========================================================
# Arguments
# ==========================================================
def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="wire-util",
        description="Calculate voltage drop for common wire gauges (copper, 75°C).",
    )
    ap.add_argument("-v", "--voltage", type=float, required=True, help="Voltage in volts")
    ap.add_argument("-c", "--current", type=float, required=True, help="Current in amps")
    ap.add_argument("-d", "--distance", type=float, required=True, help="One-way distance in feet")
    ap.add_argument(
        "-m",
        "--max-drop",
        type=float,
        default=None,
        help="Maximum acceptable voltage drop percentage (default: 3%%, or the config value)",
    )
    ap.add_argument("--gauges", default=None, help="Wire gauges to show (comma-separated, e.g. 10,12,14 or 2/0)")
    ap.add_argument("--config", default=None, help="YAML defaults file (default: config/defaults.yaml)")
    ap.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ...)")
    return ap


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _error(msg: object) -> int:
    print(f"Error: {msg}", file=sys.stderr)
    return 1


# ==========================================================
# Main
# ==========================================================
def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = build_effective_config(
            load_configuration(args.config),
            {"max_drop_pct": args.max_drop, "log_level": args.log_level},
        )
    except (OSError, ValueError) as e:
        return _error(e)

    _setup_logging(cfg.log_level)

    try:
        inputs = build_input(
            voltage=args.voltage,
            current=args.current,
            distance_ft=args.distance,
            max_drop_pct=cfg.max_drop_pct,
            gauges=args.gauges,
        )
        res = run_calculation(inputs)
    except InvalidInput as e:
        return _error(e)

    sys.stdout.write(render_report(res))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
