"""
Export Module
=============
Serialization helpers for callers running the engine out of process.

Include:
- to_serializable: engine results -> plain JSON-compatible structures
- export_to_json: write results to a JSON file
- series_to_frame: projection series -> pandas DataFrame
"""

import json
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

from wealth_engine.models.portfolio import ProjectionSeries, ScenarioBundle, WhatIfResult
from wealth_engine.utils.logger import get_logger

logger = get_logger(__name__)


def to_serializable(value: Any) -> Any:
    """Recursively convert engine results into JSON-compatible values."""
    if hasattr(value, 'to_dict'):
        return to_serializable(value.to_dict())
    if isinstance(value, ProjectionSeries):
        return value.to_list()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {str(to_serializable(k)): to_serializable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_serializable(v) for v in value]
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, np.floating):
        return float(value)
    if isinstance(value, float) and value == float('inf'):
        return None
    return value


def export_to_json(results: Dict[str, Any], filepath: str, indent: int = 2) -> str:
    """
    Write results to JSON with an export metadata header.

    Returns:
        str: Path to saved JSON file
    """
    payload = {
        'metadata': {
            'export_timestamp': datetime.now().isoformat(),
            'version': '1.0',
        },
        'results': to_serializable(results),
    }
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open('w', encoding='utf-8') as f:
        json.dump(payload, f, indent=indent)
    logger.info(f"Exported results to {path}")
    return str(path)


def series_to_frame(result: Any, start_year: Optional[int] = None) -> pd.DataFrame:
    """
    DataFrame view of a ProjectionSeries, ScenarioBundle or WhatIfResult.

    start_year only applies to a single ProjectionSeries.
    """
    if isinstance(result, ProjectionSeries):
        return result.to_frame(start_year=start_year)
    if isinstance(result, (ScenarioBundle, WhatIfResult)):
        return result.to_frame()
    raise TypeError(f"Cannot build a frame from {type(result).__name__}")
