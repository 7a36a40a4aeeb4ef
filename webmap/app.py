#!/usr/bin/env python
"""
Interactive web map of domestic airport traffic reduction in Chile (2020 vs 2019).

Purpose
-------
Show each airport as a marker colored by how much its operations dropped,
over the country outline, with hover details, zoom/pan and a gradient legend.

Expected inputs
---------------
- data/original/domestic_air_ops.csv
- data/original/world.geojson (EPSG:4326)

Output
------
Rendered Streamlit interface (no file writes).
"""

import streamlit as st
import streamlit.components.v1 as components
from pathlib import Path
import os

# ============================================================================
# SETUP
# ============================================================================
st.set_page_config(page_title="Chile - Airport Traffic Reduction", layout="wide")
st.markdown("# Interactive Map: Domestic Airport Operations, 2020 vs 2019")
st.markdown("Each marker is an airport; color shows the reduction in operations.")


def resolve_project_root() -> Path:
    env_root = os.getenv("AIRPORT_MAP_PROJECT_ROOT")
    candidates = []
    if env_root:
        candidates.append(Path(env_root).expanduser().resolve())
    candidates.append(Path.cwd().resolve())
    candidates.append(Path(__file__).resolve().parent.parent)

    for root in candidates:
        if (root / "webmap" / "app.py").exists():
            return root
    return Path(__file__).resolve().parent.parent


PROJECT_ROOT = resolve_project_root()
os.environ.setdefault("AIRPORT_MAP_PROJECT_ROOT", str(PROJECT_ROOT))

from airport_map import config  # noqa: E402  (reads AIRPORT_MAP_PROJECT_ROOT)
from airport_map.cleaning import clean_airports, records_from_frame  # noqa: E402
from airport_map.interaction import on_hover  # noqa: E402
from airport_map.io import load_airports_csv, load_geojson  # noqa: E402
from airport_map.layout import build_render_context, get_map_dimensions, resize_needed  # noqa: E402
from airport_map.render import build_interactive_map, legend_svg  # noqa: E402
from airport_map.spatial import select_country  # noqa: E402


def get_missing_paths(required_paths: dict[str, Path]) -> list[str]:
    return [
        f"{name}: {path}"
        for name, path in required_paths.items()
        if not path.exists()
    ]

# ============================================================================
# LOAD DATA
# ============================================================================
@st.cache_data
def load_data():
    missing_paths = get_missing_paths(config.INPUT_FILES)
    if missing_paths:
        raise FileNotFoundError(
            "Missing required map inputs.\n"
            f"Project root in use: {PROJECT_ROOT}\n"
            f"Current working directory: {Path.cwd()}\n"
            "Missing files:\n- "
            + "\n- ".join(missing_paths)
        )

    df_airports, log = clean_airports(load_airports_csv(config.INPUT_FILES["airports"]))
    gdf_country, country_log = select_country(load_geojson(config.INPUT_FILES["world"]))
    return df_airports, gdf_country, log + country_log

try:
    df_airports, gdf_country, load_log = load_data()
except Exception as e:
    st.error(f"Error loading data: {e}")
    st.stop()

if len(df_airports) == 0:
    st.error("No airport data loaded.")
    st.stop()

for line in load_log:
    if line.startswith("⚠️"):
        st.warning(line)

# ============================================================================
# SIDEBAR CONTROLS
# ============================================================================
st.sidebar.markdown("## Filters & Options")

min_reduction = st.sidebar.slider(
    "Minimum reduction (%)",
    0, 100,
    0,
    step=5
)

show_outline = st.sidebar.checkbox("Show country outline", value=True)

st.sidebar.markdown("## Layout")
container_width = st.sidebar.slider("Container width (px)", 200, 600, config.DEFAULT_CONTAINER_WIDTH, step=10)
viewport_height = st.sidebar.slider("Viewport height (px)", 600, 1400, config.DEFAULT_VIEWPORT_HEIGHT, step=50)

# ============================================================================
# FILTER DATA
# ============================================================================
df_filtered = df_airports[df_airports['reduction_pct'] >= min_reduction].copy()
st.sidebar.markdown(f"### Filtered results: {len(df_filtered)} / {len(df_airports)} airports")

# ============================================================================
# MAP DISPLAY
# ============================================================================
dims = get_map_dimensions(container_width, viewport_height)
ctx = st.session_state.get("render_context")
if ctx is None or resize_needed(ctx, dims):
    ctx = build_render_context(
        gdf_country,
        container_width=container_width,
        viewport_height=viewport_height,
    )
    st.session_state["render_context"] = ctx
m = build_interactive_map(ctx, gdf_country, df_filtered, show_outline=show_outline)

col_map, col_legend = st.columns([3, 1])

with col_map:
    st.markdown("### Map")
    components.html(m.get_root().render(), width=int(ctx.dimensions.width) + 20, height=int(ctx.dimensions.height) + 20)

with col_legend:
    st.markdown("### Reducción de operaciones")
    st.markdown(legend_svg(ctx), unsafe_allow_html=True)

# ============================================================================
# SUMMARY STATISTICS
# ============================================================================
st.markdown("---")
st.markdown("## Summary Statistics (Current Filter)")

col1, col2 = st.columns(2)

with col1:
    st.markdown("### Operations")
    if len(df_filtered) > 0:
        st.metric("Operations 2019", f"{df_filtered['ops_2019'].sum():,.0f}")
        st.metric("Operations 2020", f"{df_filtered['ops_2020'].sum():,.0f}")

with col2:
    st.markdown("### Reduction")
    if len(df_filtered) > 0:
        st.metric("Mean reduction", f"{df_filtered['reduction_pct'].mean():.1f}%")
        st.metric("Max reduction", f"{df_filtered['reduction_pct'].max():.1f}%")

st.markdown("### Most affected airports")
for record in sorted(records_from_frame(df_filtered), key=lambda r: -r.reduction_percent)[:5]:
    st.markdown(on_hover(record).html(), unsafe_allow_html=True)
