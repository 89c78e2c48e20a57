import pytest

from trace_timeline.config import DEFAULT_CONFIG
from trace_timeline.rendering.viewport_controller import ViewportController

MARGIN = DEFAULT_CONFIG.view.margin_side
TOP = DEFAULT_CONFIG.top_offset


@pytest.fixture
def viewport():
    viewport = ViewportController()
    viewport.set_content(max_time=920.0, content_height=78.0)
    viewport.reset_view(1000, 600)
    return viewport


def test_reset_view_fits_time_extent(viewport):
    assert viewport.state.scale == pytest.approx(1.0)
    assert viewport.state.x == MARGIN
    assert viewport.state.y == TOP
    assert viewport.content_width == pytest.approx(viewport.drawable_width)


def test_reset_view_is_noop_without_content():
    viewport = ViewportController()
    before = (viewport.state.x, viewport.state.y, viewport.state.scale)

    assert viewport.reset_view(1000, 600) is False
    assert (viewport.state.x, viewport.state.y, viewport.state.scale) == before


def test_zoom_is_noop_without_content():
    viewport = ViewportController()
    viewport.resize(1000, 600)

    assert viewport.zoom(500, 2.0) is False


@pytest.mark.parametrize('cursor_x,factor', [(500, 1.15), (40, 3.0), (960, 1.5), (123.4, 7.0)])
def test_zoom_keeps_time_under_cursor(viewport, cursor_x, factor):
    viewport.zoom(300, 4.0)
    before = (cursor_x - viewport.state.x) / viewport.state.scale

    viewport.zoom(cursor_x, factor)

    after = (cursor_x - viewport.state.x) / viewport.state.scale
    assert after == pytest.approx(before)


def test_zoom_out_stops_at_full_fit(viewport):
    viewport.zoom(700, 0.5)

    assert viewport.state.scale == pytest.approx(viewport.min_scale)
    assert viewport.state.x == MARGIN


def test_zoom_in_is_capped(viewport):
    for _ in range(200):
        viewport.zoom(500, 2.0)

    assert viewport.state.scale == DEFAULT_CONFIG.view.max_scale


@pytest.mark.parametrize('x', [-1e9, -5000.0, -300.0, 0.0, 39.0, 41.0, 500.0, 1e9])
def test_clamp_keeps_x_in_range_when_zoomed(viewport, x):
    viewport.zoom(500, 5.0)
    assert viewport.content_width > viewport.drawable_width

    viewport.state.x = x
    viewport.clamp_view()

    min_x = viewport.width - viewport.content_width - MARGIN
    assert min_x <= viewport.state.x <= MARGIN


@pytest.mark.parametrize('x', [-1000.0, 0.0, 40.0, 400.0])
def test_clamp_pins_x_when_content_fits(viewport, x):
    viewport.state.x = x
    viewport.clamp_view()

    assert viewport.state.x == MARGIN


def test_clamp_pins_y_when_content_fits(viewport):
    viewport.pan(0, -200)

    assert viewport.state.y == TOP


def test_vertical_clamp_for_tall_content(viewport):
    viewport.set_content(920.0, 2000.0)

    viewport.pan(0, -100000)
    assert viewport.state.y == 600 - 2000.0 - DEFAULT_CONFIG.view.bottom_margin

    viewport.pan(0, 100000)
    assert viewport.state.y == TOP


def test_pan_moves_origin(viewport):
    viewport.zoom(500, 4.0)
    x_before = viewport.state.x

    viewport.pan(-25, 0)

    assert viewport.state.x == pytest.approx(x_before - 25)


def test_wheel_factor_direction():
    viewport = ViewportController()

    assert viewport.zoom_factor_for_wheel(120) == pytest.approx(0.85)
    assert viewport.zoom_factor_for_wheel(-120) == pytest.approx(1.15)


def test_visible_time_range(viewport):
    start, end = viewport.visible_time_range()

    assert start == pytest.approx(-40.0)
    assert end == pytest.approx(960.0)


def test_resize_reclamps(viewport):
    viewport.zoom(500, 4.0)

    viewport.resize(400, 600)

    min_x, max_x = viewport.clamp_range_x()
    assert min_x <= viewport.state.x <= max_x


def test_time_pixel_conversion(viewport):
    viewport.zoom(300, 2.5)

    assert viewport.pixel_to_time(viewport.time_to_pixel(123.0)) == pytest.approx(123.0)
    assert viewport.time_to_pixel(0) == pytest.approx(viewport.state.x)


def test_zoom_refuses_degenerate_scale(viewport):
    viewport.state.scale = 0.0

    assert viewport.zoom(500, 1.15) is False
    assert viewport.state.scale == 0.0
