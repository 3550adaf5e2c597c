# core/validation.py
from __future__ import annotations

import math

from core.errors import InvalidInput
from core.model import DropInput


def _positive(name: str, value: object) -> float:
    try:
        x = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"{name} must be a number. Value={value!r}") from e
    if not math.isfinite(x):
        raise InvalidInput(f"{name} must be a finite number. Value={value!r}")
    if x <= 0:
        raise InvalidInput(f"{name} must be > 0. Value={value!r}")
    return x


def validate_input(p: DropInput) -> None:
    """Numeric checks only; gauge filter membership is checked against the table."""
    _positive("voltage", p.voltage)
    _positive("current", p.current)
    _positive("distance", p.one_way_distance_ft)
    _positive("max drop", p.max_drop_percent)
