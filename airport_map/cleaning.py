"""
Cleaning module: turn raw airport operations rows into normalized airport records.
"""

from dataclasses import dataclass
import math

import numpy as np
import pandas as pd

from . import config
from .coordinates import normalize_coordinate, normalize_coordinate_series, is_short_coordinate
from .spatial import within_bounds


@dataclass(frozen=True)
class AirportRecord:
    """One airport, 2019 vs 2020 domestic operations."""
    identifier: str
    latitude: float
    longitude: float
    prior_value: float
    current_value: float
    reduction_percent: float


def _to_number(val):
    num = pd.to_numeric(val, errors="coerce")
    return float(num) if pd.notna(num) else np.nan


def normalize_record(row):
    """
    Normalize a single raw row (mapping with the raw CSV column names).

    Returns:
        AirportRecord, or None if coordinates or reduction cannot be repaired
    """
    lat = normalize_coordinate(row.get("lat"))
    lon = normalize_coordinate(row.get("lon"))
    var_pct = _to_number(row.get("var_pct_20_vs_19"))

    if math.isnan(lat) or math.isnan(lon) or math.isnan(var_pct):
        return None

    return AirportRecord(
        identifier=str(row.get("codigo", "")).strip(),
        latitude=lat,
        longitude=lon,
        prior_value=_to_number(row.get("ops_2019")),
        current_value=_to_number(row.get("ops_2020")),
        reduction_percent=abs(var_pct),
    )


def clean_airports(df_raw):
    """
    Clean airport operations: repair coordinates, coerce counts, compute reduction.

    Args:
        df_raw: Raw DataFrame with codigo, lat, lon, ops_2019, ops_2020, var_pct_20_vs_19

    Returns:
        Cleaned DataFrame (codigo, lat, lon, ops_2019, ops_2020, reduction_pct) and log info
    """
    log = []
    df_clean = df_raw.copy()

    # 1. Normalize column names
    df_clean.columns = [str(col).strip().lower().replace(' ', '_') for col in df_clean.columns]
    log.append(f"✓ Column names normalized")

    missing = [c for c in config.REQUIRED_COLUMNS if c not in df_clean.columns]
    if missing:
        raise ValueError(f"Missing required columns in airports table: {missing}")

    # 2. Identifier
    df_clean['codigo'] = df_clean['codigo'].astype(str).str.strip()

    # 3. Repair coordinates
    short = df_clean['lat'].apply(is_short_coordinate) | df_clean['lon'].apply(is_short_coordinate)
    if short.sum() > 0:
        log.append(f"⚠️  {short.sum()} rows have fewer than {config.COORDINATE_MIN_DIGITS} "
                   f"coordinate digits; repaired values may be truncated")

    df_clean['lat'] = normalize_coordinate_series(df_clean['lat'])
    df_clean['lon'] = normalize_coordinate_series(df_clean['lon'])

    before = len(df_clean)
    df_clean = df_clean.dropna(subset=['lat', 'lon'])
    removed = before - len(df_clean)
    if removed > 0:
        log.append(f"⚠️  Removed {removed} airports with unrepairable coordinates")
    log.append(f"✓ Coordinates repaired for {len(df_clean)} airports")

    # 4. Operations and reduction
    for col in ['ops_2019', 'ops_2020', 'var_pct_20_vs_19']:
        df_clean[col] = pd.to_numeric(df_clean[col], errors='coerce')

    before = len(df_clean)
    df_clean = df_clean.dropna(subset=['var_pct_20_vs_19'])
    removed = before - len(df_clean)
    if removed > 0:
        log.append(f"⚠️  Removed {removed} airports with missing variation")

    # Variation is negative for a drop; displayed as a positive reduction
    df_clean['reduction_pct'] = df_clean['var_pct_20_vs_19'].abs()
    log.append(f"✓ reduction_pct computed "
               f"({df_clean['reduction_pct'].min():.1f}% to {df_clean['reduction_pct'].max():.1f}%)"
               if len(df_clean) else f"✓ reduction_pct computed (no rows)")

    # 5. Bounds check (kept, only reported)
    in_bounds = [within_bounds(lat, lon) for lat, lon in zip(df_clean['lat'], df_clean['lon'])]
    outside = len(in_bounds) - sum(in_bounds)
    if outside > 0:
        log.append(f"⚠️  {outside} airports fall outside {config.COUNTRY_NAME} bounds {config.COUNTRY_BOUNDS}")

    keep_cols = ['codigo', 'lat', 'lon', 'ops_2019', 'ops_2020', 'reduction_pct']
    df_clean = df_clean[keep_cols].reset_index(drop=True)

    log.append(f"✓ Airports cleaning complete: {df_raw.shape} → {df_clean.shape}")

    return df_clean, log


def records_from_frame(df_clean):
    """Convert a cleaned airports DataFrame into AirportRecord objects."""
    return [
        AirportRecord(
            identifier=row.codigo,
            latitude=float(row.lat),
            longitude=float(row.lon),
            prior_value=float(row.ops_2019),
            current_value=float(row.ops_2020),
            reduction_percent=float(row.reduction_pct),
        )
        for row in df_clean.itertuples(index=False)
    ]
