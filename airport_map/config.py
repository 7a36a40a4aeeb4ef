"""
Configuration module: paths, CRS constants, palette, layout and global settings.
"""

from pathlib import Path
import os

# ============================================================================
# PROJECT PATHS (zero hardcoding - all relative to PROJECT_ROOT)
# ============================================================================

# Detect PROJECT_ROOT: env override, cwd, or parent if in scripts/webmap
def get_project_root():
    """Auto-detect project root by checking for data/ and airport_map/ folders."""
    env_root = os.getenv("AIRPORT_MAP_PROJECT_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    cwd = Path.cwd()

    # If already in project root
    if (cwd / "data").exists() and (cwd / "airport_map").exists():
        return cwd

    # If in scripts/ or webmap/
    if cwd.name in ["scripts", "webmap"] and (cwd.parent / "data").exists():
        return cwd.parent

    # Fallback: the checkout this module lives in
    return Path(__file__).resolve().parent.parent

PROJECT_ROOT = get_project_root()

# Core data paths
DATA_DIR = PROJECT_ROOT / "data"
ORIGINAL_DIR = DATA_DIR / "original"
PROCESSED_DIR = DATA_DIR / "processed"
OUTPUTS_DIR = PROJECT_ROOT / "outputs"
MAPS_DIR = OUTPUTS_DIR / "maps"
FIGURES_DIR = PROJECT_ROOT / "reports" / "figures"

# Input files (raw data)
INPUT_FILES = {
    "airports": ORIGINAL_DIR / "domestic_air_ops.csv",
    "world": ORIGINAL_DIR / "world.geojson",
}

# Output files
OUTPUT_FILES = {
    "airports_clean": PROCESSED_DIR / "airports_clean.csv",
    "airports_points": PROCESSED_DIR / "airports_points.geojson",
    "interactive_map": MAPS_DIR / "airport_reduction_map.html",
    "static_map": FIGURES_DIR / "fig_airport_reduction_map.png",
}

# ============================================================================
# GEOSPATIAL & CRS CONSTANTS
# ============================================================================

# Geographic CRS of both inputs (WGS84)
CRS_WEB = "EPSG:4326"

# Planar CRS used before fitting to screen (Web Mercator, same as d3.geoMercator)
CRS_SCREEN = "EPSG:3857"

# Country drawn as outline (matched case-insensitively against feature names)
COUNTRY_NAME = "chile"
COUNTRY_NAME_FIELD = "name"

# Approximate bounding box of continental Chile: (min_lon, min_lat, max_lon, max_lat)
COUNTRY_BOUNDS = (-76.0, -56.0, -66.0, -17.5)

# ============================================================================
# TABULAR SCHEMA
# ============================================================================

REQUIRED_COLUMNS = ["codigo", "lat", "lon", "ops_2019", "ops_2020", "var_pct_20_vs_19"]

# Raw coordinates come as digit strings with misplaced dots, e.g. "-33.66.95"
COORDINATE_SEPARATORS = (".", ",")
COORDINATE_SPLIT_AT = 3     # characters kept before the decimal point (sign included)
COORDINATE_DECIMALS = 3     # characters kept after the decimal point
COORDINATE_MIN_DIGITS = 6

# ============================================================================
# COLOR SCALE
# ============================================================================

# (position, hex) control points, light blue (0% reduction) to coral red (100%)
DEFAULT_PALETTE = [
    (0.0, "#4fc3f7"),   # Light blue
    (0.2, "#42a5f5"),   # Medium blue
    (0.4, "#7e57c2"),   # Purple
    (0.6, "#ac26c4ff"), # Magenta
    (0.8, "#ec407a"),   # Pink
    (1.0, "#ef5350"),   # Coral red
]

REDUCTION_DOMAIN = (0, 100)
LEGEND_STEP = 0.02
LEGEND_LABEL_VALUES = [0, 25, 50, 75, 100]

# ============================================================================
# LAYOUT
# ============================================================================

CONTAINER_PADDING = 40

# Narrow and tall: Chile spans ~39 degrees of latitude and ~10 of longitude
MAP_WIDTH_MIN = 250
MAP_WIDTH_MAX = 350
MAP_HEIGHT_MIN = 500
MAP_HEIGHT_MAX = 700
MAP_HEIGHT_VIEWPORT_FRACTION = 0.6

MARKER_RADIUS_MIN = 3
MARKER_RADIUS_MAX = 6
MARKER_RADIUS_DIVISOR = 50

LEGEND_WIDTH_MIN = 120
LEGEND_HEIGHT_MIN = 200
LEGEND_RECT_WIDTH = 50
LEGEND_RECT_HEIGHT_FRACTION = 0.7
LEGEND_LABEL_OFFSET_X = 10
LEGEND_LABEL_OFFSET_Y = 5

# Default viewport used by scripts (no browser to measure)
DEFAULT_CONTAINER_WIDTH = 390
DEFAULT_VIEWPORT_HEIGHT = 1000
DEFAULT_LEGEND_SIZE = (140, 320)

# ============================================================================
# ZOOM
# ============================================================================

ZOOM_SCALE_EXTENT = (0.5, 8)
ZOOM_STEP = 1.5

# ============================================================================
# OUTPUT SETTINGS
# ============================================================================

FIGURE_DPI = 150
OUTLINE_COLOR = "#555555"
OUTLINE_FILL = "#f2f2f2"
MARKER_STROKE = "#ffffff"
TILES = None  # outline only; no third-party basemap

# ============================================================================
# VERBOSITY
# ============================================================================

VERBOSE = True

def print_config():
    """Print all configuration settings."""
    print("\n" + "=" * 80)
    print("MAP CONFIGURATION")
    print("=" * 80)
    print(f"\n📁 PROJECT ROOT: {PROJECT_ROOT}")
    print(f"📂 DATA DIR: {DATA_DIR}")
    print(f"📂 OUTPUTS DIR: {OUTPUTS_DIR}")
    print(f"\n🗺️  CRS Settings:")
    print(f"   Web (input): {CRS_WEB}")
    print(f"   Screen (projection): {CRS_SCREEN}")
    print(f"   Country: {COUNTRY_NAME} {COUNTRY_BOUNDS}")
    print(f"\n🎨 Palette: {len(DEFAULT_PALETTE)} control points")
    print(f"\n✓ Configuration loaded successfully")
    print("=" * 80 + "\n")
