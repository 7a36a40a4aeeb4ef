import pandas as pd
import pytest

from airport_map.spatial import (
    airports_to_geodataframe,
    fit_projection,
    select_country,
    within_bounds,
)


def test_select_country_is_case_insensitive(world):
    gdf_country, log = select_country(world, name="CHILE")
    assert len(gdf_country) == 1
    assert gdf_country.iloc[0]["name"] == "Chile"
    assert log[-1] == "✓ Selected outline: Chile"


def test_select_country_missing(world):
    with pytest.raises(ValueError, match="not found"):
        select_country(world, name="peru")


def test_select_country_requires_name_column(world):
    with pytest.raises(ValueError):
        select_country(world.rename(columns={"name": "admin"}))


def test_within_bounds():
    assert within_bounds(-33.669, -70.645)
    assert not within_bounds(-27.16, -109.42)
    assert not within_bounds(10.0, -70.0)


def test_airports_to_geodataframe():
    gdf = airports_to_geodataframe(pd.DataFrame({"lat": [-33.669], "lon": [-70.645]}))
    assert str(gdf.crs) == "EPSG:4326"
    assert gdf.geometry.iloc[0].x == pytest.approx(-70.645)
    with pytest.raises(ValueError):
        airports_to_geodataframe(pd.DataFrame({"latitude": [1.0]}))


def test_fit_projection_fills_screen_box(chile_outline):
    proj = fit_projection(chile_outline, 350, 700)
    min_x, min_y, max_x, max_y = proj.project_geometry(chile_outline).total_bounds

    # Tall outline: height is the limiting side, width is centred
    assert min_y == pytest.approx(0, abs=1e-6)
    assert max_y == pytest.approx(700, abs=1e-6)
    assert min_x >= -1e-6
    assert max_x <= 350 + 1e-6
    assert min_x == pytest.approx(350 - max_x, abs=1e-6)


def test_project_points_inside_and_oriented(chile_outline):
    proj = fit_projection(chile_outline, 350, 700)
    x_north, y_north = proj.project(-69.0, -20.0)
    x_south, y_south = proj.project(-70.0, -50.0)

    assert 0 <= x_north <= 350 and 0 <= y_north <= 700
    assert 0 <= x_south <= 350 and 0 <= y_south <= 700
    # screen y grows southwards
    assert y_north < y_south


def test_project_frame_matches_single_point(chile_outline):
    proj = fit_projection(chile_outline, 350, 700)
    gdf = airports_to_geodataframe(pd.DataFrame({"lat": [-33.669, -41.438], "lon": [-70.645, -73.093]}))
    xy = proj.project_frame(gdf)
    assert list(xy.columns) == ["x", "y"]
    assert (xy.iloc[0]["x"], xy.iloc[0]["y"]) == pytest.approx(proj.project(-70.645, -33.669))


def test_fit_projection_rejects_degenerate_outline():
    import geopandas as gpd
    from shapely.geometry import Point

    with pytest.raises(ValueError):
        fit_projection(gpd.GeoDataFrame(geometry=[Point(-70, -33)], crs="EPSG:4326"), 350, 700)
