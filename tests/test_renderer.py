"""Tests for chipplot/renderer.py."""
import logging

from chipplot.models import Network
from chipplot.network import ChipLayout
from chipplot.paths import Arc, ChannelPath, LineSegment
from chipplot.renderer import ChipRenderer, RenderConfig, Theme, path_bounds, render_to_svg


def test_render_draws_channel_path_commands(layout):
    svg = render_to_svg(layout)
    assert 'd="M 0 0 L 40 0 A 10 10 0 0 1 50 10"' in svg
    assert 'd="M 50 10 L 50 40"' in svg
    assert 'id="channel-10"' in svg
    assert 'id="channel-11"' in svg


def test_render_without_inversion(layout):
    svg = render_to_svg(layout, config=RenderConfig(invert_y=False))
    assert 'd="M 0 0 L 40 0 A 10 10 0 0 0 50 10"' in svg


def test_render_skips_unrouted_channels(layout, caplog):
    with caplog.at_level(logging.INFO, logger="chipplot.renderer"):
        svg = render_to_svg(layout)
    assert 'id="channel-12"' not in svg
    assert "Skipping 1 unrouted channel(s): 12" in caplog.text


def test_render_nodes_and_modules(layout):
    svg = render_to_svg(layout)
    for node_id in (1, 2, 3):
        assert f'id="node-{node_id}"' in svg
    assert 'id="module-7"' in svg


def test_render_hides_nodes_and_modules(layout):
    config = RenderConfig(show_nodes=False, show_modules=False)
    svg = render_to_svg(layout, config=config)
    assert 'id="node-1"' not in svg
    assert 'id="module-7"' not in svg


def test_render_uses_theme_colors(layout):
    svg = render_to_svg(layout, theme=Theme(channel_color="#ff0000"))
    assert 'stroke="#ff0000"' in svg


def test_render_empty_network():
    drawing = ChipRenderer().render(ChipLayout(network=Network()))
    assert "<svg" in drawing.as_svg()


def test_render_to_file(layout, tmp_path):
    target = tmp_path / "chip"
    svg = render_to_svg(layout, str(target))
    written = (tmp_path / "chip.svg").read_text()
    assert 'id="channel-10"' in written
    assert 'id="channel-10"' in svg


# --- path_bounds ---

def test_path_bounds_empty():
    assert path_bounds(ChannelPath()) is None


def test_path_bounds_line():
    path = ChannelPath((LineSegment((3, -1), (-2, 4)),))
    assert path_bounds(path) == (-2, -1, 3, 4)


def test_path_bounds_include_arc_circle():
    path = ChannelPath((Arc(start=(0, 10), end=(10, 0), center=(0, 0), right=True),))
    assert path_bounds(path) == (-10, -10, 10, 10)
