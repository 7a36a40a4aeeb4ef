"""Shared fixtures: a simplified Chile outline and raw airport rows."""

import matplotlib

matplotlib.use("Agg")

import geopandas as gpd
import pandas as pd
import pytest
from shapely.geometry import Polygon


@pytest.fixture
def chile_outline():
    polygon = Polygon([(-75, -55), (-67, -55), (-67, -18), (-70, -18), (-75, -40)])
    return gpd.GeoDataFrame({"name": ["Chile"]}, geometry=[polygon], crs="EPSG:4326")


@pytest.fixture
def world(chile_outline):
    argentina = Polygon([(-66, -55), (-54, -55), (-54, -22), (-66, -22)])
    return gpd.GeoDataFrame(
        {"name": ["Argentina", "Chile"]},
        geometry=[argentina, chile_outline.geometry.iloc[0]],
        crs="EPSG:4326",
    )


@pytest.fixture
def raw_airports():
    return pd.DataFrame({
        "codigo": ["SCL", "PMC", "ANF", "BAD"],
        "lat": ["-336695", "-41.43.89", "-23.44.45", "abc"],
        "lon": ["-706453", "-73.09.39", "-70.44.51", "-70.1"],
        "ops_2019": ["100", "12345", "8000", "10"],
        "ops_2020": ["40", "6789", "6000", "5"],
        "var_pct_20_vs_19": ["-60", "-45.0", "-25", "-50"],
    })
