# electrical/conductors/gauge_table.py
from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Tuple

from core.errors import GaugeNotFound

from .models import GaugeSpec


# ==========================================================
# Table: single source of truth
# ==========================================================
# Notes:
# - Copper, 75°C, ohms per 1000 ft.
# - Ordered thin -> thick; the order drives the recommendation.
# - To adjust a value, change it ONLY in TABLE_CU_75C.
# ==========================================================

TABLE_CU_75C: Tuple[Tuple[str, float], ...] = (
    ("28", 64.90),
    ("26", 40.81),
    ("24", 25.67),
    ("22", 16.14),
    ("20", 10.15),
    ("18", 6.385),
    ("16", 4.016),
    ("14", 2.51),
    ("12", 1.588),
    ("10", 0.999),
    ("8", 0.628),
    ("6", 0.395),
    ("4", 0.248),
    ("2", 0.156),
    ("1", 0.123),
    ("0", 0.0983),
    ("00", 0.0780),
    ("000", 0.0619),
    ("0000", 0.0491),
)

WIRE_GAUGES: Tuple[GaugeSpec, ...] = tuple(
    GaugeSpec(identifier=awg, resistance_ohms_per_1000ft=r) for awg, r in TABLE_CU_75C
)

# O(1) lookups, derived from the table
_IDX: Dict[str, GaugeSpec] = {g.identifier: g for g in WIRE_GAUGES}
_POS: Dict[str, int] = {g.identifier: k for k, g in enumerate(WIRE_GAUGES)}

GAUGE_IDS: Tuple[str, ...] = tuple(g.identifier for g in WIRE_GAUGES)

# "2/0" style names for the multi-zero sizes
_ALIASES: Dict[str, str] = {"1/0": "0", "2/0": "00", "3/0": "000", "4/0": "0000"}

_SUFFIX = re.compile(r"\s*AWG$", re.IGNORECASE)


# ==========================================================
# Public API
# ==========================================================

def normalize_identifier(identifier: object) -> Optional[str]:
    """
    Canonical table key for an identifier, or None if it is not in the table.

    Accepts "14", " 14 AWG", "2/0" and plain ints (14). Zeros are significant:
    "00" and "0" are different gauges, so ints only reach the single-digit 0.
    """
    if isinstance(identifier, bool):
        return None
    if isinstance(identifier, int):
        identifier = str(identifier)
    if not isinstance(identifier, str):
        return None
    key = _SUFFIX.sub("", identifier.strip())
    key = _ALIASES.get(key, key)
    return key if key in _IDX else None


def lookup(identifier: object) -> GaugeSpec:
    key = normalize_identifier(identifier)
    if key is None:
        raise GaugeNotFound(identifier, GAUGE_IDS)
    return _IDX[key]


def all_gauges() -> Tuple[GaugeSpec, ...]:
    """All gauges, thin -> thick."""
    return WIRE_GAUGES


def gauge_ids() -> List[str]:
    return list(GAUGE_IDS)


def is_valid_gauge(identifier: object) -> bool:
    return normalize_identifier(identifier) is not None


def gauge_index(identifier: object) -> int:
    """Table position (higher = thicker); -1 if unknown."""
    key = normalize_identifier(identifier)
    return _POS[key] if key is not None else -1


def split_gauge_list(text: str) -> List[str]:
    """
    Splits a comma-separated list ("10,12, 14") into trimmed items.

    Empty items are skipped. Items are NOT checked here: evaluate() resolves
    them against the table after the numeric checks.
    """
    return [raw.strip() for raw in (text or "").split(",") if raw.strip()]


def resolve_filter(identifiers: Optional[Iterable[object]]) -> Optional[frozenset]:
    """Filter as a frozenset of canonical keys; None means "all gauges"."""
    if identifiers is None:
        return None
    return frozenset(lookup(x).identifier for x in identifiers)
