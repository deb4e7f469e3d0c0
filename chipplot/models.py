"""Data models for microfluidic chip networks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class Point(NamedTuple):
    """A two-dimensional point in space."""

    x: float
    y: float


class Dimensions(NamedTuple):
    """Extent in x and y direction."""

    x: float
    y: float


NodeId = int


@dataclass(frozen=True)
class RectangularShape:
    """Rectangular channel cross-section."""

    width: float
    height: float


@dataclass(frozen=True)
class CylindricalShape:
    """Round channel cross-section."""

    radius: float


Shape = RectangularShape | CylindricalShape


def shape_width(shape: Shape) -> float:
    """Width of a channel cross-section as seen from above."""
    if isinstance(shape, RectangularShape):
        return shape.width
    if isinstance(shape, CylindricalShape):
        return 2 * shape.radius
    raise TypeError(f"Unknown channel shape: {shape!r}")


@dataclass(frozen=True)
class Channel:
    """A microfluidic channel between two network nodes.

    The channel carries no geometry; its centerline lives in a separately
    produced ``ChannelPath`` keyed by the channel id.
    """

    id: int
    node_a: NodeId
    node_b: NodeId
    shape: Shape


@dataclass(frozen=True)
class Node:
    """Microfluidic network node."""

    id: NodeId


@dataclass(frozen=True)
class Module:
    """A placed functional block of the chip."""

    id: int
    position: Point
    size: Dimensions
    # Node ids that are part of the interface of this module
    nodes: tuple[NodeId, ...] = ()


@dataclass(frozen=True)
class Network:
    """A microfluidic channel network."""

    nodes: tuple[Node, ...] = ()
    channels: tuple[Channel, ...] = ()
    modules: tuple[Module, ...] = ()

    def node(self, node_id: NodeId) -> Node:
        """Look up a node by id."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        raise KeyError(f"No node with id {node_id}")

    def channel(self, channel_id: int) -> Channel:
        """Look up a channel by id."""
        for channel in self.channels:
            if channel.id == channel_id:
                return channel
        raise KeyError(f"No channel with id {channel_id}")
