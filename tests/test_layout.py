import dataclasses

import pytest

from airport_map.colors import ColorInterpolator
from airport_map.layout import (
    MapDimensions,
    ZoomBehavior,
    base_zoom_for,
    build_render_context,
    get_map_dimensions,
    legend_geometry,
    marker_radius,
    resize_needed,
)


@pytest.mark.parametrize("container_width, viewport_height, expected", [
    (1000, 2000, MapDimensions(350, 700)),
    (100, 100, MapDimensions(250, 500)),
    (330, 1000, MapDimensions(290, 600)),
])
def test_map_dimensions_are_clamped(container_width, viewport_height, expected):
    assert get_map_dimensions(container_width, viewport_height) == expected


@pytest.mark.parametrize("width, expected", [(350, 6), (250, 5), (100, 3)])
def test_marker_radius(width, expected):
    assert marker_radius(width) == expected


def test_legend_geometry_is_centred():
    lg = legend_geometry(140, 320)
    assert (lg.width, lg.height) == (140, 320)
    assert lg.rect_width == 50
    assert lg.rect_height == pytest.approx(224)
    assert lg.rect_x == pytest.approx(45)
    assert lg.rect_y == pytest.approx(48)

    labels = {lab.value: lab for lab in lg.labels}
    assert [lab.text for lab in lg.labels] == ["0%", "25%", "50%", "75%", "100%"]
    assert labels[0].y == pytest.approx(277)
    assert labels[50].y == pytest.approx(165)
    assert labels[100].y == pytest.approx(53)
    assert all(lab.x == pytest.approx(105) for lab in lg.labels)


def test_legend_geometry_minimum_size():
    lg = legend_geometry(50, 50)
    assert (lg.width, lg.height) == (120, 200)


def test_leaflet_zoom_delta_scales_by_step():
    assert 2 ** ZoomBehavior().leaflet_zoom_delta() == pytest.approx(1.5)
    assert ZoomBehavior(step=2).leaflet_zoom_delta() == 1


def test_leaflet_zoom_range():
    assert ZoomBehavior().leaflet_zoom_range(4) == (3, 7)
    assert ZoomBehavior().leaflet_zoom_range(0) == (0, 3)


def test_build_render_context(chile_outline):
    colors = ColorInterpolator()
    ctx = build_render_context(chile_outline, container_width=1000, viewport_height=2000, colors=colors)

    assert ctx.dimensions == MapDimensions(350, 700)
    assert ctx.marker_radius == 6
    assert ctx.projection.width == 350
    assert ctx.colors is colors
    assert base_zoom_for(ctx.projection) == 4

    with pytest.raises(dataclasses.FrozenInstanceError):
        ctx.marker_radius = 3


def test_resize_needed(chile_outline):
    ctx = build_render_context(chile_outline, container_width=1000, viewport_height=2000)
    assert not resize_needed(ctx, MapDimensions(350, 700))
    assert resize_needed(ctx, get_map_dimensions(300, 2000))
