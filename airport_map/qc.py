"""
Quality Control (QC) module: Assertions and data quality checks.
"""

import numpy as np

from . import config
from .spatial import within_bounds


def check_unique_ids(df, id_col='codigo'):
    """Assert IDs are unique (no duplicates)."""
    assert df[id_col].duplicated().sum() == 0, f"Duplicate {id_col} values found!"
    assert df[id_col].isnull().sum() == 0, f"Null {id_col} values found!"
    return f"✓ {id_col} is unique (n={len(df)})"

def check_coordinates_finite(df, lat_col='lat', lon_col='lon'):
    """Assert every airport has finite coordinates."""
    bad = (~np.isfinite(df[lat_col]) | ~np.isfinite(df[lon_col])).sum()
    assert bad == 0, f"Found {bad} airports with non-finite coordinates!"
    return f"✓ All {len(df)} coordinates are finite"

def check_coordinates_in_bounds(df, bounds=config.COUNTRY_BOUNDS, lat_col='lat', lon_col='lon'):
    """Check coordinates against the country bounding box (logs outliers)."""
    outside = [
        code for code, lat, lon in zip(df['codigo'], df[lat_col], df[lon_col])
        if not within_bounds(lat, lon, bounds)
    ]
    if outside:
        return f"⚠️  {len(outside)} airports outside bounds: {outside[:10]}"
    return f"✓ All airports inside bounds {bounds}"

def check_reduction_range(df, col='reduction_pct'):
    """Assert reduction is non-negative; logs values above 100%."""
    assert (df[col] >= 0).all(), f"Negative {col} values found!"
    above = (df[col] > 100).sum()
    if above > 0:
        return f"⚠️  {above} airports above 100% reduction (colored as 100%)"
    return f"✓ {col} in range 0-100%"

def check_palette(palette):
    """Assert palette endpoints and strictly increasing positions."""
    positions = [p.position for p in palette]
    assert positions[0] == 0.0 and positions[-1] == 1.0, f"Palette must span 0-1, got {positions}"
    assert all(b > a for a, b in zip(positions[:-1], positions[1:])), "Palette positions not increasing!"
    return f"✓ Palette valid ({len(positions)} control points)"

def check_geometry_validity(gdf):
    """Assert all geometries are valid."""
    assert (~gdf.geometry.is_valid).sum() == 0, "Found invalid geometries!"
    assert gdf.geometry.is_empty.sum() == 0, "Found empty geometries!"
    return f"✓ All {len(gdf)} geometries are valid"

def check_crs(gdf, expected_crs=config.CRS_WEB):
    """Assert CRS matches expected."""
    assert gdf.crs == expected_crs, f"CRS mismatch: {gdf.crs} != {expected_crs}"
    return f"✓ CRS is {expected_crs}"

def print_qc_report(checks):
    """
    Print formatted QC report.

    Args:
        checks: List of (name, check_func, kwargs) tuples

    Returns:
        Number of failed (assertion) checks
    """
    print("\n" + "=" * 80)
    print("QUALITY CONTROL REPORT")
    print("=" * 80)

    failed = 0
    for name, check_func, kwargs in checks:
        try:
            result = check_func(**kwargs)
            print(f"\n{name}")
            print(f"  {result}")
        except AssertionError as e:
            failed += 1
            print(f"\n❌ {name}")
            print(f"  ERROR: {e}")
        except Exception as e:
            print(f"\n⚠️  {name}")
            print(f"  WARNING: {e}")

    print("\n" + "=" * 80)
    return failed
