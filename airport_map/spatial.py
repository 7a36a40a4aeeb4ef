"""
Spatial module: country outline selection, point geometries, and fitting the
outline into screen space.
"""

from dataclasses import dataclass

import pandas as pd
import geopandas as gpd
from shapely import affinity

from . import config


def within_bounds(lat, lon, bounds=config.COUNTRY_BOUNDS):
    """True if (lat, lon) lies inside bounds = (min_lon, min_lat, max_lon, max_lat)."""
    min_lon, min_lat, max_lon, max_lat = bounds
    return (min_lat <= lat <= max_lat) and (min_lon <= lon <= max_lon)


def select_country(gdf_world, name=config.COUNTRY_NAME, name_field=config.COUNTRY_NAME_FIELD):
    """
    Select the country outline from a world boundaries GeoDataFrame.

    Args:
        gdf_world: World GeoDataFrame with a name column
        name: Case-insensitive substring to match against the name column

    Returns:
        GeoDataFrame with the first matching feature and log info
    """
    log = []

    if name_field not in gdf_world.columns:
        raise ValueError(f"'{name_field}' column not found in boundary data")

    matches = gdf_world[
        gdf_world[name_field].astype(str).str.contains(name, case=False, na=False)
    ]
    if len(matches) == 0:
        raise ValueError(f"Country '{name}' not found in boundary data")
    if len(matches) > 1:
        log.append(f"⚠️  {len(matches)} features match '{name}'; using the first "
                   f"({matches.iloc[0][name_field]})")

    gdf_country = matches.iloc[[0]].copy()

    if gdf_country.crs is None:
        log.append(f"⚠️  CRS missing; assuming {config.CRS_WEB}")
        gdf_country = gdf_country.set_crs(config.CRS_WEB)

    invalid = (~gdf_country.geometry.is_valid).sum()
    if invalid > 0:
        log.append(f"⚠️  Outline geometry invalid; repairing...")
        gdf_country.geometry = gdf_country.geometry.buffer(0)

    log.append(f"✓ Selected outline: {gdf_country.iloc[0][name_field]}")

    return gdf_country, log


def airports_to_geodataframe(df_airports):
    """
    Convert cleaned airports (lat/lon columns) to a GeoDataFrame of Points in EPSG:4326.
    """
    if 'lat' not in df_airports.columns or 'lon' not in df_airports.columns:
        raise ValueError("'lat' and 'lon' columns required")

    return gpd.GeoDataFrame(
        df_airports.copy(),
        geometry=gpd.points_from_xy(df_airports['lon'], df_airports['lat']),
        crs=config.CRS_WEB,
    )


@dataclass(frozen=True)
class ScreenProjection:
    """
    Web Mercator projection fitted into a width x height screen box.

    Planar coordinates (metres, EPSG:3857) are scaled uniformly and centred;
    screen y grows downwards.
    """
    width: float
    height: float
    scale: float
    translate_x: float
    translate_y: float
    crs: str = config.CRS_SCREEN

    def _to_planar(self, geoseries):
        if geoseries.crs is None:
            geoseries = geoseries.set_crs(config.CRS_WEB)
        return geoseries.to_crs(self.crs)

    def planar_to_screen(self, mx, my):
        return (mx * self.scale + self.translate_x, self.translate_y - my * self.scale)

    def project(self, lon, lat):
        """Project one geographic point to screen (x, y)."""
        pt = self._to_planar(gpd.GeoSeries(gpd.points_from_xy([lon], [lat]), crs=config.CRS_WEB)).iloc[0]
        return self.planar_to_screen(pt.x, pt.y)

    def project_frame(self, gdf_points):
        """Screen coordinates for a GeoDataFrame/GeoSeries of points (DataFrame with x, y)."""
        geoms = gdf_points.geometry if isinstance(gdf_points, gpd.GeoDataFrame) else gdf_points
        planar = self._to_planar(geoms)
        x, y = self.planar_to_screen(planar.x.to_numpy(), planar.y.to_numpy())
        return pd.DataFrame({'x': x, 'y': y}, index=gdf_points.index)

    def project_geometry(self, gdf):
        """Screen-space geometries (GeoSeries without CRS) for any geometry type."""
        geoms = gdf.geometry if isinstance(gdf, gpd.GeoDataFrame) else gdf
        planar = self._to_planar(geoms)
        matrix = [self.scale, 0, 0, -self.scale, self.translate_x, self.translate_y]
        return gpd.GeoSeries([affinity.affine_transform(g, matrix) for g in planar], index=planar.index)


def fit_projection(gdf_outline, width, height, crs=config.CRS_SCREEN):
    """
    Fit the outline into [0, width] x [0, height] (equivalent of d3 fitSize).

    Returns:
        ScreenProjection
    """
    geoms = gdf_outline.geometry if isinstance(gdf_outline, gpd.GeoDataFrame) else gdf_outline
    if geoms.crs is None:
        geoms = geoms.set_crs(config.CRS_WEB)
    min_x, min_y, max_x, max_y = geoms.to_crs(crs).total_bounds
    dx, dy = max_x - min_x, max_y - min_y
    if dx <= 0 or dy <= 0:
        raise ValueError("Cannot fit a projection to an outline with zero extent")

    k = min(width / dx, height / dy)
    translate_x = (width - k * dx) / 2 - min_x * k
    translate_y = (height - k * dy) / 2 + max_y * k

    return ScreenProjection(
        width=float(width),
        height=float(height),
        scale=float(k),
        translate_x=float(translate_x),
        translate_y=float(translate_y),
        crs=crs,
    )
