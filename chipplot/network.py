"""Network graph view and per-channel path aggregation using NetworkX."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

import networkx as nx

from .paths import ChannelPath

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .models import Channel, Network, NodeId, Point


@dataclass(frozen=True)
class ChipLayout:
    """A network together with the centerline paths of its channels.

    Paths are keyed by channel id. Channels without an entry are unrouted.
    Layouts compare by value but are not hashable.
    """

    network: Network
    paths: Mapping[int, ChannelPath] = field(default_factory=dict)

    __hash__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "paths", MappingProxyType(dict(self.paths)))

    def path(self, channel_id: int) -> ChannelPath:
        """Path of a channel, empty if the channel is unrouted."""
        return self.paths.get(channel_id, ChannelPath())


def build_graph(network: Network) -> nx.MultiGraph:
    """Build an undirected multigraph of the network.

    Nodes are node ids. Each channel becomes one edge keyed by its channel
    id, with the ``Channel`` stored under the ``channel`` attribute.
    Channel endpoints missing from ``network.nodes`` are added implicitly.
    """
    graph = nx.MultiGraph()
    for node in network.nodes:
        graph.add_node(node.id)
    for channel in network.channels:
        graph.add_edge(channel.node_a, channel.node_b, key=channel.id, channel=channel)
    return graph


def channel_lengths(layout: ChipLayout) -> dict[int, float]:
    """Centerline length per channel id; unrouted channels have length 0."""
    return {
        channel.id: layout.path(channel.id).length()
        for channel in layout.network.channels
    }


def total_length(layout: ChipLayout) -> float:
    """Summed centerline length of all channels."""
    return sum(channel_lengths(layout).values(), 0.0)


def unrouted_channels(layout: ChipLayout) -> list[Channel]:
    """Channels that have no path or an empty one."""
    return [
        channel for channel in layout.network.channels
        if not layout.path(channel.id).pieces
    ]


def node_positions(layout: ChipLayout) -> dict[NodeId, Point]:
    """Derive node positions from the endpoints of routed channels.

    ``node_a`` sits at the start of a channel's path and ``node_b`` at its
    end. When several channels meet at a node, the first one in the
    graph's edge order wins.
    """
    graph = build_graph(layout.network)
    positions: dict[NodeId, Point] = {}

    for node_id in graph.nodes:
        for _, _, channel in graph.edges(node_id, data="channel"):
            path = layout.path(channel.id)
            if not path.pieces:
                continue
            positions[node_id] = path.start if channel.node_a == node_id else path.end
            break

    return positions
