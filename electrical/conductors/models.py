# electrical/conductors/models.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GaugeSpec:
    identifier: str
    resistance_ohms_per_1000ft: float  # Cu 75°C

    @property
    def label(self) -> str:
        return f"{self.identifier} AWG"

    @property
    def ohms_per_foot(self) -> float:
        return self.resistance_ohms_per_1000ft / 1000.0


@dataclass(frozen=True)
class GaugeResult:
    gauge: GaugeSpec
    round_trip_resistance_ohms: float
    voltage_drop_volts: float
    voltage_drop_percent: float
    meets_threshold: bool


@dataclass(frozen=True)
class Recommendation:
    result: GaugeResult

    @property
    def gauge(self) -> GaugeSpec:
        return self.result.gauge

    @property
    def voltage_drop_volts(self) -> float:
        return self.result.voltage_drop_volts

    @property
    def voltage_drop_percent(self) -> float:
        return self.result.voltage_drop_percent
