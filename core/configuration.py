# core/configuration.py
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from core.model import DEFAULT_MAX_DROP_PCT

BASE_DIR = Path(__file__).resolve().parents[1]
CONFIG_DIR = BASE_DIR / "config"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "defaults.yaml"

DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config (must be a mapping): {path}")
    return data


def _section(doc: Dict[str, Any], key: str, path: Path) -> Dict[str, Any]:
    sec = doc.get(key) or {}
    if not isinstance(sec, dict):
        raise ValueError(f"'{key}' must be a mapping in {path}")
    return sec


@dataclass(frozen=True)
class CalculationConfig:
    max_drop_pct: float = DEFAULT_MAX_DROP_PCT
    log_level: str = DEFAULT_LOG_LEVEL


def _max_drop(value: Any, path: Path) -> float:
    try:
        x = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"'calculation.max_drop_pct' must be numeric in {path}. Value={value!r}") from e
    if x <= 0:
        raise ValueError(f"'calculation.max_drop_pct' must be > 0 in {path}. Value={value!r}")
    return x


def _log_level(value: Any, path: Path) -> str:
    name = str(value).strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"'logging.level' is not a logging level in {path}. Value={value!r}")
    return name


def load_configuration(path: Optional[Union[str, Path]] = None) -> CalculationConfig:
    """
    Reads the YAML defaults.

    - path=None: config/defaults.yaml; if it is missing, built-in defaults.
    - explicit path: must exist (FileNotFoundError otherwise).
    """
    if path is None:
        cfg_path = DEFAULT_CONFIG_PATH
        if not cfg_path.exists():
            logger.debug("No %s; using built-in defaults", cfg_path)
            return CalculationConfig()
    else:
        cfg_path = Path(path)

    doc = _read_yaml(cfg_path)
    calc = _section(doc, "calculation", cfg_path)
    log = _section(doc, "logging", cfg_path)

    return CalculationConfig(
        max_drop_pct=_max_drop(calc.get("max_drop_pct", DEFAULT_MAX_DROP_PCT), cfg_path),
        log_level=_log_level(log.get("level", DEFAULT_LOG_LEVEL), cfg_path),
    )


def build_effective_config(cfg_base: CalculationConfig, overrides: Optional[dict]) -> CalculationConfig:
    if not overrides:
        return cfg_base
    vals = {k: v for k, v in overrides.items() if v is not None and k in ("max_drop_pct", "log_level")}
    if "log_level" in vals:
        vals["log_level"] = str(vals["log_level"]).strip().upper()
    return replace(cfg_base, **vals)
