"""Tests for chipplot/network.py."""
import math

import pytest

from chipplot.models import Channel, Network, Node, RectangularShape
from chipplot.network import (
    ChipLayout, build_graph, channel_lengths, node_positions, total_length, unrouted_channels,
)
from chipplot.paths import ChannelPath


def test_build_graph_nodes_and_channel_keys(network):
    graph = build_graph(network)
    assert sorted(graph.nodes) == [1, 2, 3]
    assert sorted(k for _, _, k in graph.edges(keys=True)) == [10, 11, 12]
    assert graph.edges[1, 2, 10]["channel"] is network.channels[0]


def test_build_graph_keeps_parallel_channels():
    shape = RectangularShape(1.0, 1.0)
    network = Network(
        nodes=(Node(1), Node(2)),
        channels=(Channel(1, 1, 2, shape), Channel(2, 2, 1, shape)),
    )
    graph = build_graph(network)
    assert graph.number_of_edges(1, 2) == 2


def test_build_graph_adds_unlisted_endpoints():
    network = Network(channels=(Channel(1, 5, 6, RectangularShape(1.0, 1.0)),))
    assert sorted(build_graph(network).nodes) == [5, 6]


def test_channel_lengths(layout):
    lengths = channel_lengths(layout)
    assert abs(lengths[10] - (40 + 5 * math.pi)) < 1e-12
    assert lengths[11] == 30.0
    assert lengths[12] == 0.0


def test_total_length(layout):
    assert abs(total_length(layout) - (70 + 5 * math.pi)) < 1e-12


def test_total_length_empty_network():
    assert total_length(ChipLayout(network=Network())) == 0.0


def test_unrouted_channels(layout):
    assert [c.id for c in unrouted_channels(layout)] == [12]


def test_missing_path_is_empty(layout):
    assert layout.path(12) == ChannelPath()


def test_layout_paths_are_read_only(layout):
    try:
        layout.paths[12] = ChannelPath()
    except TypeError:
        pass
    else:
        raise AssertionError("layout.paths accepted an assignment")


def test_node_positions_from_path_endpoints(layout):
    positions = node_positions(layout)
    assert positions == {1: (0, 0), 2: (50, 10), 3: (50, 40)}


def test_node_positions_skip_unrouted(network):
    assert node_positions(ChipLayout(network=network)) == {}


def test_layouts_compare_by_value_but_are_unhashable(layout):
    assert ChipLayout(network=layout.network, paths=dict(layout.paths)) == layout
    with pytest.raises(TypeError):
        hash(layout)
