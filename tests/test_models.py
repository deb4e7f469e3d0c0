"""Tests for chipplot/models.py."""
import dataclasses

import pytest

from chipplot.models import CylindricalShape, Point, RectangularShape, shape_width


def test_point_fields():
    p = Point(1.5, -2.0)
    assert (p.x, p.y) == (1.5, -2.0)
    assert p == (1.5, -2.0)


def test_point_equality_is_exact():
    assert Point(0.1 + 0.2, 0) != Point(0.3, 0)


def test_shape_width():
    assert shape_width(RectangularShape(width=4.0, height=1.0)) == 4.0
    assert shape_width(CylindricalShape(radius=1.5)) == 3.0


def test_shape_width_rejects_unknown():
    with pytest.raises(TypeError):
        shape_width("round")


def test_network_lookups(network):
    assert network.node(2).id == 2
    assert network.channel(11).shape == CylindricalShape(radius=1.5)


def test_network_lookup_unknown_id(network):
    with pytest.raises(KeyError, match="channel"):
        network.channel(99)
    with pytest.raises(KeyError, match="node"):
        network.node(99)


def test_records_are_frozen(network):
    with pytest.raises(dataclasses.FrozenInstanceError):
        network.channels[0].node_a = 5
