"""
Runtime Config Loader
=====================
Load engine configurations from JSON/YAML files and normalize them into
an EngineConfig.

Recognised layout (every section optional):

    region: AU
    projection:
      growth_model: uniform
      base_growth_rate: 0.075
      optimistic_multiplier: 1.3
      pessimistic_multiplier: 0.75
      horizon_cap_years: 30
    scoring:
      concentration_penalty: 20
    monte_carlo:
      simulations: 1000
      seed: 42
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from wealth_engine.config.settings import DEFAULT_CONFIG, EngineConfig
from wealth_engine.utils.exceptions import ConfigurationError
from wealth_engine.utils.logger import get_logger

logger = get_logger(__name__)

CONFIG_PATH_ENV = "WEALTH_ENGINE_CONFIG"

_SECTION_KEYS = {
    "projection": {
        "growth_model": "growth_model",
        "base_growth_rate": "base_growth_rate",
        "optimistic_multiplier": "optimistic_multiplier",
        "pessimistic_multiplier": "pessimistic_multiplier",
        "horizon_cap_years": "horizon_cap_years",
    },
    "scoring": {
        "concentration_penalty": "concentration_penalty",
        "neutral_risk_score": "neutral_risk_score",
    },
    "monte_carlo": {
        "simulations": "monte_carlo_simulations",
        "seed": "monte_carlo_seed",
    },
}


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ConfigurationError("YAML config must be a mapping at top level.")
    return data


def load_config_file(path: str) -> Dict[str, Any]:
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    suffix = file_path.suffix.lower()
    if suffix in {".yml", ".yaml"}:
        return _load_yaml(file_path)
    if suffix == ".json":
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ConfigurationError("JSON config must be an object at top level.")
        return data

    raise ConfigurationError(f"Unsupported config format: {suffix}. Use .json or .yaml/.yml.")


def build_engine_config(raw: Dict[str, Any], base: Optional[EngineConfig] = None) -> EngineConfig:
    """
    Normalize an external config mapping into an EngineConfig.

    Unknown keys inside a known section are rejected; unknown top-level
    sections are ignored with a warning.
    """
    overrides: Dict[str, Any] = {}

    for section, mapping in _SECTION_KEYS.items():
        # Accept "projection" or "PROJECTION"
        values = raw.get(section) or raw.get(section.upper())
        if values is None:
            continue
        if not isinstance(values, dict):
            raise ConfigurationError(f"Section '{section}' must be a mapping.")
        for key, value in values.items():
            if key not in mapping:
                raise ConfigurationError(f"Unknown key '{key}' in section '{section}'.")
            overrides[mapping[key]] = value

    region = raw.get("region") or raw.get("REGION")
    if region:
        overrides["region"] = str(region).upper()

    known = set(_SECTION_KEYS) | {"region"}
    for key in raw:
        if str(key).lower() not in known:
            logger.warning(f"Ignoring unknown config section '{key}'")

    try:
        return (base or DEFAULT_CONFIG).with_overrides(**overrides)
    except TypeError as exc:
        raise ConfigurationError(f"Invalid config value: {exc}") from exc


def load_engine_config(path: Optional[str] = None) -> EngineConfig:
    """
    Load an EngineConfig from `path`, or from $WEALTH_ENGINE_CONFIG, or
    fall back to the defaults.
    """
    config_path = path or os.environ.get(CONFIG_PATH_ENV)
    if not config_path:
        return DEFAULT_CONFIG
    logger.info(f"Using external config: {config_path}")
    return build_engine_config(load_config_file(config_path))
