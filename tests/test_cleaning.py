import pandas as pd
import pytest

from airport_map.cleaning import (
    AirportRecord,
    clean_airports,
    normalize_record,
    records_from_frame,
)
from airport_map.spatial import within_bounds


def test_normalize_record_round_trip():
    record = normalize_record({
        "codigo": "SCL",
        "lat": "-336695",
        "lon": "-706453",
        "ops_2019": "100",
        "ops_2020": "40",
        "var_pct_20_vs_19": "-60",
    })
    assert record == AirportRecord("SCL", -33.669, -70.645, 100.0, 40.0, 60.0)
    assert record.reduction_percent == 60.0
    assert within_bounds(record.latitude, record.longitude)


def test_normalize_record_skips_bad_coordinates():
    assert normalize_record({"codigo": "X", "lat": "abc", "lon": "-706453",
                             "ops_2019": "1", "ops_2020": "1", "var_pct_20_vs_19": "0"}) is None


def test_clean_airports_drops_bad_rows(raw_airports):
    df_clean, log = clean_airports(raw_airports)

    assert list(df_clean['codigo']) == ["SCL", "PMC", "ANF"]
    assert list(df_clean.columns) == ['codigo', 'lat', 'lon', 'ops_2019', 'ops_2020', 'reduction_pct']
    assert df_clean.loc[0, 'lat'] == pytest.approx(-33.669)
    assert df_clean.loc[1, 'lon'] == pytest.approx(-73.093)
    assert list(df_clean['reduction_pct']) == [60.0, 45.0, 25.0]
    assert any("Removed 1 airports with unrepairable coordinates" in line for line in log)
    assert log[-1].startswith("✓ Airports cleaning complete")


def test_clean_airports_normalizes_column_names(raw_airports):
    raw = raw_airports.rename(columns={"codigo": "CODIGO", "lat": "Lat"})
    df_clean, _ = clean_airports(raw)
    assert len(df_clean) == 3


def test_clean_airports_requires_columns(raw_airports):
    with pytest.raises(ValueError, match="var_pct_20_vs_19"):
        clean_airports(raw_airports.drop(columns=["var_pct_20_vs_19"]))


def test_clean_airports_reports_out_of_bounds():
    raw = pd.DataFrame({
        "codigo": ["IPC"],
        "lat": ["-27.16.48"],
        "lon": ["-109.42.16"],
        "ops_2019": ["500"],
        "ops_2020": ["100"],
        "var_pct_20_vs_19": ["-80"],
    })
    df_clean, log = clean_airports(raw)
    # Three-digit longitudes do not fit the fixed format; the row is kept and flagged
    assert len(df_clean) == 1
    assert any("outside" in line for line in log)


def test_clean_airports_drops_missing_variation(raw_airports):
    raw = raw_airports.copy()
    raw.loc[0, "var_pct_20_vs_19"] = "n/a"
    df_clean, log = clean_airports(raw)
    assert "SCL" not in set(df_clean['codigo'])
    assert any("missing variation" in line for line in log)


def test_records_from_frame(raw_airports):
    df_clean, _ = clean_airports(raw_airports)
    records = records_from_frame(df_clean)
    assert [r.identifier for r in records] == ["SCL", "PMC", "ANF"]
    assert records[1].prior_value == 12345.0
    assert records[1].current_value == 6789.0
