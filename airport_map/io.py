"""
I/O module: Load and save data in various formats (CSV, GeoJSON, HTML, PNG).
"""

import pandas as pd
import geopandas as gpd
from pathlib import Path
import warnings

from . import config


def load_csv(filepath, **kwargs):
    """
    Load CSV file with error handling.

    Args:
        filepath: Path to CSV file
        **kwargs: Additional arguments for pd.read_csv()

    Returns:
        pd.DataFrame
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    return pd.read_csv(filepath, **kwargs)


def load_airports_csv(filepath=None):
    """
    Load the raw airport operations table.

    Coordinates are read as text so the repair sees the original digits
    (a float parse would already drop or misplace them).
    """
    filepath = filepath or config.INPUT_FILES["airports"]
    return load_csv(filepath, dtype={"lat": str, "lon": str, "codigo": str})


def load_geojson(filepath, **kwargs):
    """
    Load GeoJSON file with CRS validation.

    Args:
        filepath: Path to GeoJSON file
        **kwargs: Additional arguments for gpd.read_file()

    Returns:
        geopandas.GeoDataFrame
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"GeoJSON file not found: {filepath}")

    gdf = gpd.read_file(filepath, **kwargs)

    if gdf.crs is None:
        warnings.warn(f"⚠️  CRS missing in {filepath.name}. Assuming {config.CRS_WEB}")
        gdf = gdf.set_crs(config.CRS_WEB)

    return gdf


def save_geojson(gdf, filepath, **kwargs):
    """
    Save GeoDataFrame to GeoJSON (always EPSG:4326).

    Returns:
        Path to saved file
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    if gdf.crs != config.CRS_WEB:
        gdf = gdf.to_crs(config.CRS_WEB)

    gdf.to_file(filepath, driver="GeoJSON", **kwargs)

    return filepath


def save_csv(df, filepath, **kwargs):
    """
    Save DataFrame to CSV.

    Returns:
        Path to saved file
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    df.to_csv(filepath, index=False, **kwargs)

    return filepath


def save_html(folium_map, filepath):
    """Save a folium Map as a standalone HTML file."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    folium_map.save(str(filepath))

    return filepath


def save_figure(fig, filepath, dpi=config.FIGURE_DPI):
    """Save a matplotlib Figure (PNG by extension)."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    fig.savefig(filepath, dpi=dpi, bbox_inches="tight")

    return filepath


def file_size_mb(filepath):
    """Get file size in MB."""
    return Path(filepath).stat().st_size / (1024 ** 2)
