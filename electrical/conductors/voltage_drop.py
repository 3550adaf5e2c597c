"""
voltage_drop.py

Voltage drop engine over the Cu 75°C gauge table.

Responsibility:
- Per-gauge round-trip resistance, drop (V) and drop (%) for a given load.
- Pass/fail against the max-drop threshold (inclusive).
- Recommendation: first passing gauge scanning thin -> thick, i.e. the
  thinnest wire that still meets the threshold.

Model (DC resistive, two conductors out and back):

    R  = r_1000ft * (2 * L_ft / 1000)
    VD = I * R
    VD% = 100 * VD / V
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from core.model import DropInput
from core.validation import validate_input

from .gauge_table import all_gauges, resolve_filter
from .models import GaugeResult, GaugeSpec, Recommendation


def select_gauges(gauge_filter: Optional[Iterable[object]] = None) -> Tuple[GaugeSpec, ...]:
    """
    Working set in table order, whatever the order of the filter.

    An unknown identifier raises UnknownGauge instead of being skipped.
    """
    keys = resolve_filter(gauge_filter)
    if keys is None:
        return all_gauges()
    return tuple(g for g in all_gauges() if g.identifier in keys)


def compute_result(
    gauge: GaugeSpec,
    *,
    voltage: float,
    current: float,
    one_way_distance_ft: float,
    max_drop_percent: float,
) -> GaugeResult:
    r_total = gauge.resistance_ohms_per_1000ft * (one_way_distance_ft * 2.0 / 1000.0)
    vd = r_total * current
    vd_pct = (vd / voltage) * 100.0
    return GaugeResult(
        gauge=gauge,
        round_trip_resistance_ohms=r_total,
        voltage_drop_volts=vd,
        voltage_drop_percent=vd_pct,
        meets_threshold=vd_pct <= max_drop_percent,
    )


def recommend(results: Iterable[GaugeResult]) -> Optional[Recommendation]:
    for r in results:
        if r.meets_threshold:
            return Recommendation(result=r)
    return None


def evaluate(p: DropInput) -> Tuple[Tuple[GaugeResult, ...], Optional[Recommendation]]:
    # All checks happen before the first row is computed.
    validate_input(p)
    gauges = select_gauges(p.gauge_filter)

    v = float(p.voltage)
    i = float(p.current)
    l_ft = float(p.one_way_distance_ft)
    vd_max = float(p.max_drop_percent)

    results = tuple(
        compute_result(g, voltage=v, current=i, one_way_distance_ft=l_ft, max_drop_percent=vd_max)
        for g in gauges
    )
    return results, recommend(results)
