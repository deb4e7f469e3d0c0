"""Pydantic records describing the serialized form of chip layouts.

Keys are snake_case, points are ``[x, y]`` arrays and unions are
externally tagged, e.g. ``{"arc": {...}}`` or ``{"rectangular": {...}}``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt

# Numbers and flags are strict: no strings, no bools as numbers
PointRecord = tuple[StrictFloat, StrictFloat]


class Record(BaseModel):
    """Base for all records; unknown keys and non-finite numbers are rejected."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)


class RectangularShapeRecord(Record):
    """Rectangular channel cross-section."""

    width: StrictFloat
    height: StrictFloat


class CylindricalShapeRecord(Record):
    """Round channel cross-section."""

    radius: StrictFloat


class RectangularVariant(Record):
    rectangular: RectangularShapeRecord


class CylindricalVariant(Record):
    cylindrical: CylindricalShapeRecord


ShapeRecord = RectangularVariant | CylindricalVariant


class ChannelRecord(Record):
    """A channel connecting two nodes."""

    id: StrictInt
    node_a: StrictInt
    node_b: StrictInt
    shape: ShapeRecord


class NodeRecord(Record):
    """Network node."""

    id: StrictInt


class ModuleRecord(Record):
    """Placed module with its interface nodes."""

    id: StrictInt
    position: PointRecord
    size: PointRecord
    nodes: list[StrictInt]


class NetworkRecord(Record):
    """A microfluidic channel network."""

    nodes: list[NodeRecord]
    channels: list[ChannelRecord]
    modules: list[ModuleRecord]


class LineSegmentRecord(Record):
    """Straight path piece."""

    start: PointRecord
    end: PointRecord


class ArcRecord(Record):
    """Arc path piece; right=True rotates clockwise (Y axis up)."""

    right: StrictBool
    start: PointRecord
    end: PointRecord
    center: PointRecord


class ArcVariant(Record):
    arc: ArcRecord


class LineSegmentVariant(Record):
    line_segment: LineSegmentRecord


PathPieceRecord = ArcVariant | LineSegmentVariant


class ChannelPathRecord(Record):
    """Ordered pieces of a channel centerline."""

    pieces: list[PathPieceRecord]


class ChipLayoutRecord(Record):
    """A network plus channel paths keyed by channel id."""

    network: NetworkRecord
    paths: dict[int, ChannelPathRecord] = {}
