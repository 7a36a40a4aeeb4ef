import numpy as np
import pandas as pd
import pytest

from airport_map import qc
from airport_map.colors import default_palette


@pytest.fixture
def airports():
    return pd.DataFrame({
        "codigo": ["SCL", "PMC"],
        "lat": [-33.669, -41.438],
        "lon": [-70.645, -73.093],
        "reduction_pct": [60.0, 45.0],
    })


def test_passing_checks(airports, chile_outline):
    assert qc.check_unique_ids(airports).startswith("✓")
    assert qc.check_coordinates_finite(airports).startswith("✓")
    assert qc.check_coordinates_in_bounds(airports).startswith("✓")
    assert qc.check_reduction_range(airports).startswith("✓")
    assert qc.check_palette(default_palette()).startswith("✓")
    assert qc.check_geometry_validity(chile_outline).startswith("✓")
    assert qc.check_crs(chile_outline).startswith("✓")


def test_failing_checks(airports):
    dup = pd.concat([airports, airports])
    with pytest.raises(AssertionError):
        qc.check_unique_ids(dup)

    bad = airports.assign(lat=[np.nan, -41.438])
    with pytest.raises(AssertionError):
        qc.check_coordinates_finite(bad)

    with pytest.raises(AssertionError):
        qc.check_reduction_range(airports.assign(reduction_pct=[-1.0, 5.0]))


def test_soft_checks_warn(airports):
    outside = airports.assign(lon=[-10.942, -73.093])
    assert qc.check_coordinates_in_bounds(outside).startswith("⚠️")
    assert qc.check_reduction_range(airports.assign(reduction_pct=[120.0, 5.0])).startswith("⚠️")


def test_print_qc_report_counts_failures(airports, capsys):
    failed = qc.print_qc_report([
        ("ok", qc.check_unique_ids, {"df": airports}),
        ("fails", qc.check_reduction_range, {"df": airports.assign(reduction_pct=[-1.0, 5.0])}),
        ("errors", qc.check_unique_ids, {"df": airports, "id_col": "missing"}),
    ])
    out = capsys.readouterr().out
    assert failed == 1
    assert "❌ fails" in out
    assert "⚠️  errors" in out
