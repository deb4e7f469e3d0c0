"""Shared fixtures for chipplot tests."""
import pytest

from chipplot.models import (
    Channel, CylindricalShape, Dimensions, Module, Network, Node, Point, RectangularShape,
)
from chipplot.network import ChipLayout
from chipplot.paths import ChannelPathBuilder


@pytest.fixture
def line_then_arc():
    """Straight run of 40 followed by a quarter turn of radius 10."""
    return (
        ChannelPathBuilder(start=(0, 0))
        .line_to((40, 0))
        .arc_to((50, 10), center=(40, 10), right=False)
        .build()
    )


@pytest.fixture
def network():
    """Three nodes, three channels (the last one unrouted) and one module."""
    return Network(
        nodes=(Node(1), Node(2), Node(3)),
        channels=(
            Channel(id=10, node_a=1, node_b=2, shape=RectangularShape(width=4.0, height=2.0)),
            Channel(id=11, node_a=2, node_b=3, shape=CylindricalShape(radius=1.5)),
            Channel(id=12, node_a=3, node_b=1, shape=RectangularShape(width=4.0, height=2.0)),
        ),
        modules=(
            Module(id=7, position=Point(-10, -10), size=Dimensions(20, 20), nodes=(1,)),
        ),
    )


@pytest.fixture
def layout(network, line_then_arc):
    """Layout with channels 10 and 11 routed."""
    riser = ChannelPathBuilder(start=(50, 10)).line_to((50, 40)).build()
    return ChipLayout(network=network, paths={10: line_then_arc, 11: riser})
