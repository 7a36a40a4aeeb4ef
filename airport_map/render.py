"""
Render module: interactive (folium) and static (matplotlib) airport reduction maps.

Every drawing function receives a RenderContext; nothing here keeps state
between calls.
"""

import html

import numpy as np
import folium
import matplotlib.pyplot as plt
from matplotlib.colors import LinearSegmentedColormap

from . import config
from .cleaning import records_from_frame
from .interaction import on_hover
from .io import save_html, save_figure
from .layout import base_zoom_for
from .spatial import airports_to_geodataframe


# ============================================================================
# LEGEND
# ============================================================================

def legend_svg(ctx, gradient_id="legend-gradient"):
    """Inline SVG: vertical gradient bar (0% bottom, 100% top) and % labels."""
    lg = ctx.legend
    stops = "".join(
        f'<stop offset="{offset:g}%" stop-color="{color}"/>'
        for offset, color in ctx.colors.legend_stops()
    )
    labels = "".join(
        f'<text class="legend-label" x="{lab.x:g}" y="{lab.y:g}" '
        f'font-size="12" fill="#333">{html.escape(lab.text)}</text>'
        for lab in lg.labels
    )
    return (
        f'<svg width="{lg.width:g}" height="{lg.height:g}" '
        f'viewBox="0 0 {lg.width:g} {lg.height:g}" preserveAspectRatio="xMidYMid meet">'
        f'<defs><linearGradient id="{gradient_id}" x1="0%" y1="100%" x2="0%" y2="0%">'
        f'{stops}</linearGradient></defs>'
        f'<rect class="legend-gradient-rect" x="{lg.rect_x:g}" y="{lg.rect_y:g}" '
        f'width="{lg.rect_width:g}" height="{lg.rect_height:g}" rx="8" '
        f'fill="url(#{gradient_id})"/>'
        f'{labels}</svg>'
    )


def legend_html(ctx, title="Reducción de operaciones"):
    """Legend box pinned to the map's lower right corner."""
    return (
        '<div class="legend-scale" style="position: fixed; bottom: 30px; right: 20px; '
        'z-index: 1000; background: rgba(255, 255, 255, 0.85); border-radius: 8px; '
        'padding: 8px; font-family: Arial, sans-serif;">'
        f'<div style="font-size: 13px; font-weight: 600; text-align: center;">{html.escape(title)}</div>'
        f'{legend_svg(ctx)}</div>'
    )


def reset_control_html(map_name, bounds, label="Restablecer vista"):
    """Button pinned to the map's upper right corner; fits the map back to bounds."""
    (min_lat, min_lon), (max_lat, max_lon) = bounds
    return (
        f'<button class="reset-zoom" type="button" '
        f'onclick="{map_name}.fitBounds([[{min_lat}, {min_lon}], [{max_lat}, {max_lon}]]);" '
        'style="position: fixed; top: 12px; right: 20px; z-index: 1000; '
        'background: rgba(255, 255, 255, 0.85); border: 1px solid #999; border-radius: 8px; '
        'padding: 4px 10px; font-family: Arial, sans-serif; font-size: 12px; cursor: pointer;">'
        f'{html.escape(label)}</button>'
    )


# ============================================================================
# INTERACTIVE MAP
# ============================================================================

def build_interactive_map(ctx, gdf_outline, df_airports, show_outline=True):
    """
    Build a folium map: country outline, one colored marker per airport, legend
    and a reset-zoom button. Zoom buttons scale by ctx.zoom.step.

    Args:
        ctx: RenderContext
        gdf_outline: Country outline GeoDataFrame
        df_airports: Cleaned airports DataFrame (see cleaning.clean_airports)

    Returns:
        folium.Map
    """
    outline = gdf_outline.to_crs(config.CRS_WEB)
    min_lon, min_lat, max_lon, max_lat = outline.total_bounds

    base_zoom = base_zoom_for(ctx.projection)
    min_zoom, max_zoom = ctx.zoom.leaflet_zoom_range(base_zoom)

    m = folium.Map(
        location=[(min_lat + max_lat) / 2, (min_lon + max_lon) / 2],
        zoom_start=base_zoom,
        min_zoom=min_zoom,
        max_zoom=max_zoom,
        zoom_snap=0,
        zoom_delta=ctx.zoom.leaflet_zoom_delta(),
        tiles=config.TILES,
        width=int(ctx.dimensions.width),
        height=int(ctx.dimensions.height),
    )

    if show_outline:
        folium.GeoJson(
            outline[['geometry']].__geo_interface__,
            name="country-outline",
            style_function=lambda x: {
                'fillColor': config.OUTLINE_FILL,
                'color': config.OUTLINE_COLOR,
                'weight': 1,
                'fillOpacity': 0.4,
            },
        ).add_to(m)

    for record in records_from_frame(df_airports):
        color = ctx.colors.scale(record.reduction_percent).hex()
        folium.CircleMarker(
            location=[record.latitude, record.longitude],
            radius=ctx.marker_radius,
            color=config.MARKER_STROKE,
            weight=1,
            fill=True,
            fill_color=color,
            fill_opacity=0.9,
            tooltip=folium.Tooltip(on_hover(record).html()),
        ).add_to(m)

    bounds = [[min_lat, min_lon], [max_lat, max_lon]]
    m.fit_bounds(bounds)
    m.get_root().html.add_child(folium.Element(legend_html(ctx)))
    m.get_root().html.add_child(folium.Element(reset_control_html(m.get_name(), bounds)))

    return m


# ============================================================================
# STATIC MAP
# ============================================================================

def legend_colormap(ctx):
    """Colormap built from the legend gradient stops (0% → 100%)."""
    stops = ctx.colors.legend_stops()
    return LinearSegmentedColormap.from_list(
        "reduction",
        [(offset / 100, ctx.colors.color_at(offset / 100).as_unit_tuple()) for offset, _ in stops],
    )


def build_static_map(ctx, gdf_outline, df_airports, dpi=config.FIGURE_DPI, title=None):
    """
    Draw outline and markers in fitted screen space plus the gradient legend.

    Returns:
        matplotlib Figure
    """
    dims, lg = ctx.dimensions, ctx.legend
    total_w = dims.width + lg.width
    total_h = max(dims.height, lg.height)

    fig = plt.figure(figsize=(total_w / dpi, total_h / dpi), dpi=dpi)
    ax_map = fig.add_axes([0, 1 - dims.height / total_h, dims.width / total_w, dims.height / total_h])
    ax_legend = fig.add_axes([
        dims.width / total_w,
        (total_h - lg.height) / 2 / total_h,
        lg.width / total_w,
        lg.height / total_h,
    ])

    # Map: screen coordinates, y grows downwards
    outline_screen = ctx.projection.project_geometry(gdf_outline)
    outline_screen.plot(ax=ax_map, facecolor=config.OUTLINE_FILL, edgecolor=config.OUTLINE_COLOR, linewidth=0.8)

    if len(df_airports) > 0:
        gdf_points = airports_to_geodataframe(df_airports)
        xy = ctx.projection.project_frame(gdf_points)
        colors = [ctx.colors.scale(v).as_unit_tuple() for v in df_airports['reduction_pct']]
        # radius in px -> scatter size in pt^2
        size = (2 * ctx.marker_radius * 72 / dpi) ** 2
        ax_map.scatter(xy['x'], xy['y'], s=size, c=colors, edgecolors=config.MARKER_STROKE,
                       linewidths=0.5, zorder=3)

    ax_map.set_xlim(0, dims.width)
    ax_map.set_ylim(dims.height, 0)
    ax_map.set_aspect('equal')
    ax_map.set_axis_off()
    if title:
        ax_map.set_title(title)

    # Legend: gradient bar, 100% at the top
    gradient = np.linspace(1, 0, 256)[:, None]
    ax_legend.imshow(
        gradient,
        aspect='auto',
        cmap=legend_colormap(ctx),
        vmin=0,
        vmax=1,
        extent=[lg.rect_x, lg.rect_x + lg.rect_width, lg.rect_y + lg.rect_height, lg.rect_y],
    )
    for lab in lg.labels:
        ax_legend.text(lab.x, lab.y, lab.text, fontsize=8, va='baseline', ha='left')
    ax_legend.set_xlim(0, lg.width)
    ax_legend.set_ylim(lg.height, 0)
    ax_legend.set_axis_off()

    return fig


# ============================================================================
# OUTPUTS
# ============================================================================

def render_outputs(ctx, gdf_outline, df_airports, output_files=None):
    """
    Write the interactive HTML map and the static PNG.

    Returns:
        dict of output name → Path, and log info
    """
    log = []
    output_files = output_files or config.OUTPUT_FILES

    m = build_interactive_map(ctx, gdf_outline, df_airports)
    html_path = save_html(m, output_files["interactive_map"])
    log.append(f"✓ Interactive map saved: {html_path}")

    fig = build_static_map(ctx, gdf_outline, df_airports)
    try:
        png_path = save_figure(fig, output_files["static_map"])
    finally:
        plt.close(fig)
    log.append(f"✓ Static map saved: {png_path}")

    return {"interactive_map": html_path, "static_map": png_path}, log
