"""
Conductors domain — Wire Util

Public API:
- Cu 75°C gauge table (lookup / all_gauges)
- Voltage drop per gauge and recommendation (evaluate)

Architectural rule:
Other modules must NOT import the internal files.
Always import from:
    electrical.conductors
"""

from .gauge_table import (
    WIRE_GAUGES,
    all_gauges,
    gauge_ids,
    gauge_index,
    is_valid_gauge,
    lookup,
    split_gauge_list,
)
from .models import GaugeResult, GaugeSpec, Recommendation
from .voltage_drop import compute_result, evaluate, select_gauges

__all__ = [
    "WIRE_GAUGES",
    "all_gauges",
    "gauge_ids",
    "gauge_index",
    "is_valid_gauge",
    "lookup",
    "split_gauge_list",
    "GaugeResult",
    "GaugeSpec",
    "Recommendation",
    "compute_result",
    "evaluate",
    "select_gauges",
]
