#!/usr/bin/env python3
"""
Quality assurance checks for map inputs and artifacts.

Scope:
- Required input files
- Airports CSV schema and coordinate repair rate
- Boundary GeoJSON readability, CRS, and country presence
- Rendered outputs (if already built)

This script exits with code 1 if blocking errors are detected.
"""

import sys

import pandas as pd

from airport_map import config
from airport_map.cleaning import clean_airports
from airport_map.io import load_airports_csv, load_geojson
from airport_map.spatial import select_country

EXPECTED_WEB_CRS = config.CRS_WEB


def print_header() -> None:
    print("=" * 80)
    print("MAP INPUTS QUALITY ASSURANCE")
    print("=" * 80)


def print_check_result(check_id: int, name: str, passed: bool) -> None:
    status = "PASS" if passed else "FAIL"
    print(f"\n[{check_id}] {name}: {status}")


def format_size(num_bytes: int) -> str:
    if num_bytes >= 1_000_000:
        return f"{num_bytes / 1_000_000:.1f} MB"
    if num_bytes >= 1_000:
        return f"{num_bytes / 1_000:.1f} KB"
    return f"{num_bytes} B"


def check_required_files(errors: list[str]) -> bool:
    failed = False
    for label, path in config.INPUT_FILES.items():
        if path.exists():
            print(f"  - {label}: FOUND ({format_size(path.stat().st_size)})")
        else:
            failed = True
            errors.append(f"Missing file: {label} at {path}")
            print(f"  - {label}: NOT FOUND")
    return not failed


def check_airports_table(errors: list[str], warnings: list[str]) -> tuple[bool, pd.DataFrame | None]:
    try:
        df_raw = load_airports_csv(config.INPUT_FILES["airports"])
        df_clean, log = clean_airports(df_raw)
    except (FileNotFoundError, ValueError) as e:
        errors.append(f"Airports table: {e}")
        return False, None

    for line in log:
        print(f"  {line}")
        if line.startswith("⚠️"):
            warnings.append(line.strip("⚠️ "))

    if len(df_clean) == 0:
        errors.append("Airports table has no usable rows after cleaning")
        return False, None

    repaired = len(df_clean) / len(df_raw) if len(df_raw) else 0
    print(f"  - Usable rows: {len(df_clean)} / {len(df_raw)} ({repaired:.0%})")
    return True, df_clean


def check_boundaries(errors: list[str], warnings: list[str]) -> bool:
    try:
        gdf_world = load_geojson(config.INPUT_FILES["world"])
    except FileNotFoundError as e:
        errors.append(str(e))
        return False

    print(f"  - Features: {len(gdf_world)}")
    if str(gdf_world.crs) != EXPECTED_WEB_CRS:
        warnings.append(f"Boundary CRS is {gdf_world.crs}; expected {EXPECTED_WEB_CRS}")

    try:
        gdf_country, log = select_country(gdf_world)
    except ValueError as e:
        errors.append(str(e))
        return False

    for line in log:
        print(f"  {line}")
    return True


def check_outputs(warnings: list[str]) -> None:
    for key in ("interactive_map", "static_map"):
        path = config.OUTPUT_FILES[key]
        if path.exists():
            print(f"  - {key}: FOUND ({format_size(path.stat().st_size)})")
        else:
            warnings.append(f"{key} not built yet ({path})")
            print(f"  - {key}: NOT BUILT")


def main() -> int:
    errors: list[str] = []
    warnings: list[str] = []

    print_header()

    passed = check_required_files(errors)
    print_check_result(1, "Required files", passed)

    if passed:
        ok, _ = check_airports_table(errors, warnings)
        print_check_result(2, "Airports table", ok)

        ok = check_boundaries(errors, warnings)
        print_check_result(3, "Boundaries", ok)

    check_outputs(warnings)
    print_check_result(4, "Rendered outputs", True)

    print("\n" + "=" * 80)
    if warnings:
        print("WARNINGS:")
        for w in warnings:
            print(f"  - {w}")
    if errors:
        print("ERRORS:")
        for e in errors:
            print(f"  - {e}")
        print("=" * 80)
        return 1

    print("All blocking checks passed.")
    print("=" * 80)
    return 0


if __name__ == "__main__":
    sys.exit(main())
