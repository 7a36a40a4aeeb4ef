#!/usr/bin/env python
"""
Build the airport traffic reduction maps
=========================================

Steps:
1. Load raw airport operations CSV and world boundaries GeoJSON
2. Repair coordinates, compute reduction (2020 vs 2019)
3. Select Chile outline, run QC checks
4. Render interactive HTML (folium) and static PNG (matplotlib)

Inputs:
- data/original/domestic_air_ops.csv
- data/original/world.geojson

Outputs:
- data/processed/airports_clean.csv
- data/processed/airports_points.geojson
- outputs/maps/airport_reduction_map.html
- reports/figures/fig_airport_reduction_map.png
"""

import sys

from airport_map import config, qc
from airport_map.cleaning import clean_airports
from airport_map.colors import ColorInterpolator, Palette
from airport_map.io import load_airports_csv, load_geojson, save_csv, save_geojson
from airport_map.layout import build_render_context
from airport_map.render import render_outputs
from airport_map.spatial import airports_to_geodataframe, select_country


def print_log(log):
    if config.VERBOSE:
        for line in log:
            print(f"  {line}")


def main():
    config.print_config()

    print("[1] Loading inputs...")
    try:
        df_raw = load_airports_csv(config.INPUT_FILES["airports"])
        gdf_world = load_geojson(config.INPUT_FILES["world"])
    except FileNotFoundError as e:
        print(f"  ✗ {e}")
        sys.exit(1)
    print(f"  ✓ Airports: {len(df_raw)} rows")
    print(f"  ✓ Boundaries: {len(gdf_world)} features")

    print("\n[2] Cleaning airports...")
    try:
        df_airports, log = clean_airports(df_raw)
    except ValueError as e:
        print(f"  ✗ Error cleaning airports: {e}")
        sys.exit(1)
    print_log(log)

    if len(df_airports) == 0:
        print("  ✗ No airport data left after cleaning")
        sys.exit(1)

    save_csv(df_airports, config.OUTPUT_FILES["airports_clean"])
    save_geojson(airports_to_geodataframe(df_airports), config.OUTPUT_FILES["airports_points"])

    print("\n[3] Selecting country outline...")
    try:
        gdf_country, log = select_country(gdf_world)
    except ValueError as e:
        print(f"  ✗ {e}")
        sys.exit(1)
    print_log(log)

    palette = Palette.from_hex_stops(config.DEFAULT_PALETTE)
    failed = qc.print_qc_report([
        ("Unique airport codes", qc.check_unique_ids, {"df": df_airports}),
        ("Finite coordinates", qc.check_coordinates_finite, {"df": df_airports}),
        ("Coordinates within country", qc.check_coordinates_in_bounds, {"df": df_airports}),
        ("Reduction range", qc.check_reduction_range, {"df": df_airports}),
        ("Outline geometry", qc.check_geometry_validity, {"gdf": gdf_country}),
        ("Outline CRS", qc.check_crs, {"gdf": gdf_country}),
        ("Palette", qc.check_palette, {"palette": palette}),
    ])
    if failed:
        print(f"  ✗ {failed} QC checks failed")
        sys.exit(1)

    print("\n[4] Rendering maps...")
    ctx = build_render_context(gdf_country, colors=ColorInterpolator(palette))
    print(f"  → Map size: {ctx.dimensions.width:.0f} x {ctx.dimensions.height:.0f} px, "
          f"marker radius {ctx.marker_radius:.1f} px")
    _, log = render_outputs(ctx, gdf_country, df_airports)
    print_log(log)

    print("\n✓ Done")


if __name__ == "__main__":
    main()
