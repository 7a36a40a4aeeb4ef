"""
Coordinates module: repair malformed decimal coordinate strings.

The source table stores latitude/longitude as digit strings whose dots were
shifted or duplicated on export (e.g. '-33.66.95'). The repair is a
fixed-format one: strip every separator, then put a single decimal point back
after the first three characters (sign included) and keep three decimals.
It is only correct for coordinates shaped like the source data
(two integer digits plus sign, at least three decimals).
"""

import math
import re

import numpy as np
import pandas as pd

from . import config

_REPAIRED_PATTERN = re.compile(r"[+-]?\d*\.\d*")


def _strip_separators(raw, separators=config.COORDINATE_SEPARATORS):
    if raw is None:
        return None
    if isinstance(raw, float) and math.isnan(raw):
        return None
    text = str(raw).strip()
    for sep in separators:
        text = text.replace(sep, "")
    return text


def normalize_coordinate(raw, separators=config.COORDINATE_SEPARATORS,
                         split_at=config.COORDINATE_SPLIT_AT,
                         decimals=config.COORDINATE_DECIMALS) -> float:
    """
    Repair a coordinate string into a float.

    Args:
        raw: Raw value ('-336695', '-33.66.95', -33.6695, ...)
        separators: Characters removed before re-inserting the decimal point
        split_at: Characters kept before the decimal point (sign included)
        decimals: Characters kept after the decimal point

    Returns:
        float, or NaN when the value is missing or not numeric after repair

    Example:
        >>> normalize_coordinate("-336695")
        -33.669
    """
    digits = _strip_separators(raw, separators)
    if not digits:
        return np.nan

    repaired = digits[:split_at] + "." + digits[split_at:split_at + decimals]
    # float() also accepts '_' separators, exponents and 'inf'
    if not _REPAIRED_PATTERN.fullmatch(repaired):
        return np.nan
    try:
        return float(repaired)
    except ValueError:
        return np.nan


def is_short_coordinate(raw, min_digits=config.COORDINATE_MIN_DIGITS,
                        separators=config.COORDINATE_SEPARATORS) -> bool:
    """True when the stripped value is too short for the fixed 3+3 format."""
    digits = _strip_separators(raw, separators)
    return digits is not None and len(digits) < min_digits


def normalize_coordinate_series(s: pd.Series, **kwargs) -> pd.Series:
    """Apply normalize_coordinate element-wise (NaN for unrepairable values)."""
    return s.apply(lambda val: normalize_coordinate(val, **kwargs)).astype(float)
