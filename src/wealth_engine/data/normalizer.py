"""
Asset Normalizer
================
Maps heterogeneous holding records onto UnifiedAsset.

Accepted inputs:
- mappings with dashboard keys (type, currentPrice, purchaseDate, ...)
- mappings with holdings-table keys (asset_type, current_price, ...)
- a pandas DataFrame with either key style, one row per holding
- UnifiedAsset instances (passed through)

Never drops a record. Missing optional fields get category defaults;
negative quantities / prices are clamped to zero. Only a present but
non-numeric quantity or price raises InvalidHoldingError.
"""

import math
from datetime import date, datetime
from decimal import Decimal
from numbers import Real
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import numpy as np
import pandas as pd

from wealth_engine.config.regional import get_regional_config
from wealth_engine.config.settings import EngineConfig, get_config
from wealth_engine.data.definitions.categories import (
    FALLBACK_CATEGORY,
    default_expected_return,
    default_volatility,
    resolve_category,
)
from wealth_engine.models.portfolio import UnifiedAsset
from wealth_engine.utils.exceptions import InvalidHoldingError
from wealth_engine.utils.logger import get_logger

logger = get_logger(__name__)

HoldingsInput = Union[pd.DataFrame, Iterable[Union[Mapping[str, Any], UnifiedAsset]]]


# ================================================================================
# FIELD ALIASES
# ================================================================================
# First key present (and not None/NaN) wins.

FIELD_ALIASES: Dict[str, tuple] = {
    'id': ('id', 'holding_id'),
    'category': ('category', 'type', 'asset_type', 'assetType'),
    'quantity': ('quantity', 'units', 'qty'),
    'purchase_price': ('purchase_price', 'purchasePrice'),
    'current_price': ('current_price', 'currentPrice', 'price'),
    'currency': ('currency',),
    'region': ('region',),
    'exchange': ('exchange', 'exchangeName'),
    'purchase_date': ('purchase_date', 'purchaseDate'),
    'expected_return': ('expected_return', 'expectedReturn'),
    'volatility': ('volatility',),
    'symbol': ('symbol', 'ticker'),
    'name': ('name',),
    'metadata': ('metadata',),
}


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if value is pd.NaT:
        return True
    return False


def _pick(record: Mapping[str, Any], field: str) -> Any:
    for key in FIELD_ALIASES[field]:
        if key in record and not _is_missing(record[key]):
            return record[key]
    return None


def _to_number(value: Any, index: int, field: str) -> float:
    """Coerce a present value to a finite float or raise InvalidHoldingError."""
    if isinstance(value, bool) or isinstance(value, (complex, np.complexfloating)):
        raise InvalidHoldingError(index, field, value)
    if isinstance(value, (Real, Decimal, np.number)):
        try:
            number = float(value)
        except (ValueError, OverflowError):
            raise InvalidHoldingError(index, field, value) from None
    elif isinstance(value, str):
        try:
            number = float(value.strip().replace(',', ''))
        except ValueError:
            raise InvalidHoldingError(index, field, value) from None
    else:
        raise InvalidHoldingError(index, field, value)

    if not math.isfinite(number):
        raise InvalidHoldingError(index, field, value)
    return number


def _clamp_non_negative(number: float, index: int, field: str) -> float:
    if number < 0:
        logger.warning(f"Holding #{index}: negative {field} {number} clamped to 0")
        return 0.0
    return number


def _optional_rate(value: Any, index: int, field: str, default: float) -> float:
    """Optional per-asset rate: unusable values fall back to the default."""
    if value is None:
        return default
    try:
        return _to_number(value, index, field)
    except InvalidHoldingError:
        logger.warning(f"Holding #{index}: ignoring non-numeric {field} {value!r}, using default {default}")
        return default


def _parse_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        parsed = pd.to_datetime(value)
    except (ValueError, TypeError):
        logger.debug(f"Unparseable purchase date {value!r}")
        return None
    if parsed is pd.NaT:
        return None
    return parsed.date()


# ================================================================================
# PUBLIC API
# ================================================================================

def normalize_holding(
    record: Union[Mapping[str, Any], UnifiedAsset],
    index: int = 0,
    config: Optional[EngineConfig] = None,
) -> UnifiedAsset:
    """
    Normalize one raw holding record.

    Args:
        record: Raw holding mapping (or an already normalized asset)
        index: Position in the input list, used for ids and error messages
        config: Engine config; its region supplies currency / region defaults

    Returns:
        UnifiedAsset

    Raises:
        InvalidHoldingError: quantity or a price is present but non-numeric
    """
    if isinstance(record, UnifiedAsset):
        return record

    regional = get_regional_config(get_config(config).region)

    raw_category = _pick(record, 'category')
    category = resolve_category(raw_category)
    if category is None:
        logger.warning(
            f"Holding #{index}: unrecognised type {raw_category!r}, treating as {FALLBACK_CATEGORY.value}"
        )
        category = FALLBACK_CATEGORY

    raw_quantity = _pick(record, 'quantity')
    quantity = 0.0 if raw_quantity is None else _clamp_non_negative(
        _to_number(raw_quantity, index, 'quantity'), index, 'quantity'
    )

    raw_current = _pick(record, 'current_price')
    current_price = 0.0 if raw_current is None else _clamp_non_negative(
        _to_number(raw_current, index, 'current_price'), index, 'current_price'
    )

    raw_purchase = _pick(record, 'purchase_price')
    purchase_price = current_price if raw_purchase is None else _clamp_non_negative(
        _to_number(raw_purchase, index, 'purchase_price'), index, 'purchase_price'
    )

    metadata = _pick(record, 'metadata')
    raw_id = _pick(record, 'id')
    symbol = _pick(record, 'symbol')

    return UnifiedAsset(
        id=str(raw_id) if raw_id is not None else f"holding-{index}",
        category=category,
        quantity=quantity,
        purchase_price=purchase_price,
        current_price=current_price,
        expected_return=_optional_rate(
            _pick(record, 'expected_return'), index, 'expected_return', default_expected_return(category)
        ),
        volatility=abs(_optional_rate(
            _pick(record, 'volatility'), index, 'volatility', default_volatility(category)
        )),
        currency=str(_pick(record, 'currency') or regional.currency),
        region=str(_pick(record, 'region') or regional.region),
        exchange=str(_pick(record, 'exchange') or ''),
        purchase_date=_parse_date(_pick(record, 'purchase_date')),
        symbol=str(symbol) if symbol is not None else None,
        name=str(_pick(record, 'name') or ''),
        metadata=dict(metadata) if isinstance(metadata, Mapping) else {},
    )


def normalize_holdings(holdings: HoldingsInput, config: Optional[EngineConfig] = None) -> List[UnifiedAsset]:
    """
    Normalize a holdings list (or DataFrame) into UnifiedAssets, in order.

    Output length always equals input length.
    """
    if isinstance(holdings, pd.DataFrame):
        records = holdings.to_dict(orient='records')
    else:
        records = list(holdings)

    assets = [normalize_holding(record, index, config) for index, record in enumerate(records)]

    ids = pd.Series([asset.id for asset in assets], dtype=object)
    duplicated = sorted(set(ids[ids.duplicated()]))
    if duplicated:
        logger.warning(f"Duplicate holding ids in snapshot: {', '.join(duplicated)}")

    logger.debug(f"Normalized {len(assets)} holdings")
    return assets
