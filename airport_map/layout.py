"""
Layout module: responsive map dimensions, marker size, legend geometry, zoom
limits and the immutable render context passed to every drawing call.
"""

from dataclasses import dataclass, field
import math

from . import config
from .colors import ColorInterpolator
from .spatial import ScreenProjection, fit_projection


# Earth circumference in EPSG:3857 metres; Leaflet zoom z shows it over 256 * 2**z px
WEB_MERCATOR_WORLD_M = 40075016.686
TILE_SIZE = 256


@dataclass(frozen=True)
class MapDimensions:
    width: float
    height: float


def get_map_dimensions(container_width, viewport_height):
    """
    Narrow, tall map sized from the container and viewport.

    width  = clamp(container_width - padding, 250, 350)
    height = clamp(0.6 * viewport_height, 500, 700)
    """
    max_width = min(config.MAP_WIDTH_MAX, container_width - config.CONTAINER_PADDING)
    height = min(config.MAP_HEIGHT_MAX, viewport_height * config.MAP_HEIGHT_VIEWPORT_FRACTION)
    return MapDimensions(
        width=max(config.MAP_WIDTH_MIN, max_width),
        height=max(config.MAP_HEIGHT_MIN, height),
    )


def marker_radius(width):
    return max(config.MARKER_RADIUS_MIN, min(config.MARKER_RADIUS_MAX, width / config.MARKER_RADIUS_DIVISOR))


@dataclass(frozen=True)
class LegendLabel:
    value: int
    x: float
    y: float

    @property
    def text(self) -> str:
        return f"{self.value}%"


@dataclass(frozen=True)
class LegendGeometry:
    width: float
    height: float
    rect_x: float
    rect_y: float
    rect_width: float
    rect_height: float
    labels: tuple

    def value_to_y(self, value, domain=config.REDUCTION_DOMAIN):
        """Linear scale: domain[0] at the rect bottom, domain[1] at the rect top."""
        d0, d1 = domain
        bottom = self.rect_y + self.rect_height
        return bottom + (value - d0) / (d1 - d0) * (self.rect_y - bottom)


def legend_geometry(container_width, container_height, label_values=config.LEGEND_LABEL_VALUES):
    """
    Vertical gradient bar centred in the legend box, labels to its right.
    """
    width = max(config.LEGEND_WIDTH_MIN, container_width)
    height = max(config.LEGEND_HEIGHT_MIN, container_height)
    rect_width = config.LEGEND_RECT_WIDTH
    rect_height = height * config.LEGEND_RECT_HEIGHT_FRACTION
    rect_x = (width - rect_width) / 2
    rect_y = (height - rect_height) / 2

    geom = LegendGeometry(width, height, rect_x, rect_y, rect_width, rect_height, labels=())
    labels = tuple(
        LegendLabel(
            value=v,
            x=rect_x + rect_width + config.LEGEND_LABEL_OFFSET_X,
            y=geom.value_to_y(v) + config.LEGEND_LABEL_OFFSET_Y,
        )
        for v in label_values
    )
    return LegendGeometry(width, height, rect_x, rect_y, rect_width, rect_height, labels=labels)


@dataclass(frozen=True)
class ZoomBehavior:
    """Relative zoom scale limited to scale_extent; buttons multiply by step."""
    scale_extent: tuple = config.ZOOM_SCALE_EXTENT
    step: float = config.ZOOM_STEP

    def leaflet_zoom_delta(self):
        """Leaflet zoom levels per button press: a scale factor of step is log2(step) levels."""
        return math.log2(self.step)

    def leaflet_zoom_range(self, base_zoom):
        """Leaflet (min_zoom, max_zoom) equivalent to the scale extent around base_zoom."""
        lo, hi = self.scale_extent
        return (
            max(0, base_zoom + math.floor(math.log2(lo))),
            base_zoom + math.ceil(math.log2(hi)),
        )


def base_zoom_for(projection: ScreenProjection):
    """Largest integer Leaflet zoom at which the fitted outline still fits the screen box."""
    pixels_per_metre = projection.scale
    z = math.log2(pixels_per_metre * WEB_MERCATOR_WORLD_M / TILE_SIZE)
    return max(0, int(math.floor(z)))


@dataclass(frozen=True)
class RenderContext:
    dimensions: MapDimensions
    projection: ScreenProjection
    marker_radius: float
    legend: LegendGeometry
    zoom: ZoomBehavior = field(default_factory=ZoomBehavior)
    colors: ColorInterpolator = field(default_factory=ColorInterpolator)


def build_render_context(gdf_outline,
                         container_width=config.DEFAULT_CONTAINER_WIDTH,
                         viewport_height=config.DEFAULT_VIEWPORT_HEIGHT,
                         legend_size=config.DEFAULT_LEGEND_SIZE,
                         colors=None,
                         zoom=None):
    """Compute dimensions, fit the projection and bundle everything for drawing."""
    dims = get_map_dimensions(container_width, viewport_height)
    return RenderContext(
        dimensions=dims,
        projection=fit_projection(gdf_outline, dims.width, dims.height),
        marker_radius=marker_radius(dims.width),
        legend=legend_geometry(*legend_size),
        zoom=zoom if zoom is not None else ZoomBehavior(),
        colors=colors if colors is not None else ColorInterpolator(),
    )


def resize_needed(ctx, dims):
    """True when new dimensions differ from the context's (map must be redrawn)."""
    return dims.width != ctx.dimensions.width or dims.height != ctx.dimensions.height
