"""
Snapshot Hashing
================
Stable content hashes of holdings + assumptions.

The engine caches nothing; callers that poll (e.g. a dashboard refreshing
every 30s) can key their own memoization on these hashes.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, Sequence

import numpy as np

from wealth_engine.models.portfolio import UnifiedAsset


def _normalize_for_hash(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return _normalize_for_hash({f.name: getattr(value, f.name) for f in fields(value)})
    if isinstance(value, dict):
        return {str(k): _normalize_for_hash(v) for k, v in sorted(value.items(), key=lambda x: str(x[0]))}
    if isinstance(value, (list, tuple)):
        return [_normalize_for_hash(v) for v in value]
    if isinstance(value, set):
        return [_normalize_for_hash(v) for v in sorted(value, key=lambda x: str(x))]
    if isinstance(value, (np.integer,)):
        return int(value)
    if isinstance(value, (np.floating,)):
        return float(value)
    if isinstance(value, (np.ndarray,)):
        return [_normalize_for_hash(v) for v in value.tolist()]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def _canonical_json(data: Any) -> str:
    normalized = _normalize_for_hash(data)
    return json.dumps(normalized, sort_keys=True, separators=(",", ":"), ensure_ascii=True, default=str)


def _asset_key(asset: UnifiedAsset) -> dict:
    # Descriptive metadata does not affect any computed number and is never copied
    return {f.name: getattr(asset, f.name) for f in fields(asset) if f.name != "metadata"}


def build_snapshot_hash(assets: Sequence[UnifiedAsset], assumptions: Optional[Any] = None) -> str:
    """
    sha256 of the canonical JSON of the assets (order-sensitive) and
    optional assumptions (dict, dataclass or EngineConfig).
    """
    payload = {
        "assets": [_asset_key(a) for a in assets],
        "assumptions": assumptions,
    }
    return hashlib.sha256(_canonical_json(payload).encode("utf-8")).hexdigest()
