# core/errors.py
from __future__ import annotations

from typing import Iterable, Tuple


class InvalidInput(ValueError):
    """Bad numeric input or gauge identifier; raised before any calculation runs."""


class GaugeNotFound(InvalidInput):
    def __init__(self, identifier: object, valid: Iterable[str] = ()) -> None:
        self.identifier = identifier
        self.valid: Tuple[str, ...] = tuple(valid)
        msg = f"Invalid gauge: {identifier!r}."
        if self.valid:
            msg += f" Valid gauges are: {', '.join(self.valid)}"
        super().__init__(msg)


# Name used for unknown identifiers in the --gauges filter
UnknownGauge = GaugeNotFound


class MissingRequiredArgument(InvalidInput):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing required argument: {name}")
