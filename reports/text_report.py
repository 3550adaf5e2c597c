# reports/text_report.py
from __future__ import annotations

from typing import List

import numpy as np
import pandas as pd

from core.calculate import CalculationResult

STATUS_OK = "✓ OK"
STATUS_FAIL = "✗ Too much drop"

COLUMNS = ["Wire Gauge", "Resistance (Ω)", "Voltage Drop (V)", "Drop (%)", "Status"]

NO_GAUGE_WARNING = "WARNING: Even the largest gauge exceeds acceptable voltage drop!"


def num(x: float) -> str:
    """Echo of an input value in plain decimal: 8.0 -> "8", 14.5 -> "14.5", 1e-05 -> "0.00001"."""
    return np.format_float_positional(float(x), trim="-")


def results_frame(res: CalculationResult, *, formatted: bool = True) -> pd.DataFrame:
    """
    One row per evaluated gauge, thin -> thick.

    formatted=True renders the numbers as fixed-decimal text (4/3/2 places);
    formatted=False keeps floats, for interactive tables.
    """
    rows = []
    for r in res.results:
        if formatted:
            rows.append([
                r.gauge.label,
                f"{r.round_trip_resistance_ohms:.4f}",
                f"{r.voltage_drop_volts:.3f}",
                f"{r.voltage_drop_percent:.2f}",
                STATUS_OK if r.meets_threshold else STATUS_FAIL,
            ])
        else:
            rows.append([
                r.gauge.label,
                r.round_trip_resistance_ohms,
                r.voltage_drop_volts,
                r.voltage_drop_percent,
                STATUS_OK if r.meets_threshold else STATUS_FAIL,
            ])
    return pd.DataFrame(rows, columns=COLUMNS)


def _header(res: CalculationResult) -> List[str]:
    p = res.inputs
    lines = [
        "",
        "=== Wire Gauge Voltage Drop Calculator ===",
        "",
        "Input Parameters:",
        f"  Voltage: {num(p.voltage)} V",
        f"  Current: {num(p.current)} A",
        f"  Distance: {num(p.one_way_distance_ft)} ft (one way)",
        f"  Max Acceptable Drop: {num(p.max_drop_percent)}%",
    ]
    if p.gauge_filter:
        # from the evaluated rows: the raw filter may hold aliases ("2/0", "10 AWG")
        ids = [r.gauge.identifier for r in res.results]
        lines.append(f"  Filtered Gauges: {', '.join(ids)}")
    lines.append("")
    return lines


def recommendation_lines(res: CalculationResult) -> List[str]:
    rec = res.recommendation
    if rec is None:
        return [NO_GAUGE_WARNING]
    return [
        f"Recommended gauge: {rec.gauge.label}",
        f"  Voltage drop: {rec.voltage_drop_volts:.3f} V ({rec.voltage_drop_percent:.2f}%)",
    ]


def render_report(res: CalculationResult) -> str:
    lines = _header(res)
    lines.append(results_frame(res).to_string(index=False))
    lines.append("")
    lines.extend(recommendation_lines(res))
    return "\n".join(lines) + "\n"
