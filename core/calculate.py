# core/calculate.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from core.errors import InvalidInput, MissingRequiredArgument
from core.model import DEFAULT_MAX_DROP_PCT, DropInput
from electrical.conductors import GaugeResult, Recommendation, evaluate, split_gauge_list

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationResult:
    inputs: DropInput
    results: Tuple[GaugeResult, ...]
    recommendation: Optional[Recommendation]

    @property
    def has_recommendation(self) -> bool:
        return self.recommendation is not None


def _required(name: str, value: object) -> object:
    if value is None:
        raise MissingRequiredArgument(name)
    return value


def build_input(
    *,
    voltage: Optional[float],
    current: Optional[float],
    distance_ft: Optional[float],
    max_drop_pct: Optional[float] = None,
    gauges: Union[str, Iterable[object], None] = None,
) -> DropInput:
    """
    Builds DropInput from raw CLI/UI values.

    gauges accepts "10,12,14" or an iterable of identifiers; None = all gauges.
    An empty selection counts as no filter. Identifiers are checked later, in
    evaluate(), after the numeric checks.
    """
    v = _required("voltage", voltage)
    i = _required("current", current)
    d = _required("distance", distance_ft)

    if isinstance(gauges, str):
        sel = split_gauge_list(gauges)
    elif gauges is not None:
        sel = [str(g) for g in gauges]
    else:
        sel = []

    return DropInput(
        voltage=v,  # type: ignore[arg-type]
        current=i,  # type: ignore[arg-type]
        one_way_distance_ft=d,  # type: ignore[arg-type]
        max_drop_percent=DEFAULT_MAX_DROP_PCT if max_drop_pct is None else max_drop_pct,
        gauge_filter=frozenset(sel) if sel else None,
    )


def run_calculation(inputs: DropInput) -> CalculationResult:
    logger.info(
        "Voltage drop: V=%s I=%s L=%s ft max=%s%% gauges=%s",
        inputs.voltage,
        inputs.current,
        inputs.one_way_distance_ft,
        inputs.max_drop_percent,
        sorted(inputs.gauge_filter) if inputs.gauge_filter else "all",
    )
    try:
        results, rec = evaluate(inputs)
    except InvalidInput as e:
        logger.warning("Rejected input: %s", e)
        raise

    for r in results:
        logger.debug(
            "%s: R=%.4f ohm VD=%.3f V (%.2f%%) ok=%s",
            r.gauge.label,
            r.round_trip_resistance_ohms,
            r.voltage_drop_volts,
            r.voltage_drop_percent,
            r.meets_threshold,
        )

    if rec is None:
        logger.info("No gauge meets %s%% drop", inputs.max_drop_percent)
    else:
        logger.info("Recommended %s (%.2f%%)", rec.gauge.label, rec.voltage_drop_percent)

    return CalculationResult(inputs=inputs, results=results, recommendation=rec)
