import math

import numpy as np
import pandas as pd
import pytest

from airport_map.coordinates import (
    is_short_coordinate,
    normalize_coordinate,
    normalize_coordinate_series,
)


@pytest.mark.parametrize("raw, expected", [
    ("-336695", -33.669),
    ("-706453", -70.645),
    ("-33.66.95", -33.669),
    ("-3.36695", -33.669),
    ("-33,6695", -33.669),
    (" -336695 ", -33.669),
    (-33.6695, -33.669),
    (-336695, -33.669),
])
def test_repairs_fixed_format_coordinates(raw, expected):
    assert normalize_coordinate(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", [None, "", "abc", "-33.6a.95", float("nan"), np.nan])
def test_unrepairable_values_are_nan(raw):
    assert math.isnan(normalize_coordinate(raw))


@pytest.mark.parametrize("raw", ["3_36695", "-3_3669", "1e5000", "inf000", "-"])
def test_non_digit_text_that_float_accepts_is_nan(raw):
    assert math.isnan(normalize_coordinate(raw))


def test_short_input_is_truncated_not_rejected():
    assert normalize_coordinate("-3366") == pytest.approx(-33.66)
    assert is_short_coordinate("-3366")
    assert not is_short_coordinate("-33.66.95")
    assert not is_short_coordinate(None)


def test_custom_split():
    assert normalize_coordinate("1234567", split_at=2, decimals=4) == pytest.approx(12.3456)


def test_series_form():
    s = pd.Series(["-336695", "bad", "-70.64.53"])
    out = normalize_coordinate_series(s)
    assert out.dtype == float
    assert out.iloc[0] == pytest.approx(-33.669)
    assert math.isnan(out.iloc[1])
    assert out.iloc[2] == pytest.approx(-70.645)
