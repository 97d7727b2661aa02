"""
Holdings File Loader
====================
Read raw holdings from JSON, YAML or CSV files for the CLI.

The engine itself never persists holdings; this only turns an exported
holdings file into the raw records the normalizer accepts.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd
import yaml

from wealth_engine.utils.exceptions import ConfigurationError
from wealth_engine.utils.logger import get_logger

logger = get_logger(__name__)


def _unwrap(data: Any, path: Path) -> List[Dict[str, Any]]:
    # Accept a bare list or {"holdings": [...]}
    if isinstance(data, dict):
        data = data.get("holdings", data.get("HOLDINGS"))
    if not isinstance(data, list):
        raise ConfigurationError(f"{path}: expected a list of holdings or a 'holdings' key")
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise ConfigurationError(f"{path}: holding #{i} is not a mapping")
    return data


def load_holdings_file(path: str) -> List[Dict[str, Any]]:
    """
    Load raw holding records from a .json, .yaml/.yml or .csv file.

    Returns:
        List of raw holding mappings (not yet normalized)
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Holdings file not found: {path}")

    suffix = file_path.suffix.lower()
    if suffix == ".csv":
        frame = pd.read_csv(file_path)
        records = frame.to_dict(orient="records")
    elif suffix in {".yml", ".yaml"}:
        with file_path.open("r", encoding="utf-8") as f:
            records = _unwrap(yaml.safe_load(f), file_path)
    elif suffix == ".json":
        with file_path.open("r", encoding="utf-8") as f:
            records = _unwrap(json.load(f), file_path)
    else:
        raise ConfigurationError(f"Unsupported holdings format: {suffix}. Use .json, .yaml/.yml or .csv.")

    logger.info(f"Loaded {len(records)} holdings from {file_path.name}")
    return records
