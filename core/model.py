# core/model.py
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional

DEFAULT_MAX_DROP_PCT = 3.0


@dataclass(frozen=True)
class DropInput:
    voltage: float
    current: float
    one_way_distance_ft: float
    max_drop_percent: float = DEFAULT_MAX_DROP_PCT
    gauge_filter: Optional[FrozenSet[str]] = None  # None = all gauges

    @property
    def round_trip_distance_ft(self) -> float:
        return self.one_way_distance_ft * 2.0
