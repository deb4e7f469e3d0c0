"""Serialization boundary and host-facing function adapter.

Every public operation is exposed as a pure function from a serializable
input record to a serializable output record. ``interface_function``
wraps such a function so a host (another runtime, a CLI, a web handler)
can call it with plain dicts:

    >>> channel_path_command({"path": {"pieces": []}, "invert_y": True})
    {'command': ''}
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import StrictBool, ValidationError

from .models import (
    Channel,
    CylindricalShape,
    Dimensions,
    Module,
    Network,
    Node,
    Point,
    RectangularShape,
    Shape,
)
from .network import ChipLayout, channel_lengths, total_length
from .paths import Arc, ChannelPath, LineSegment, PathPiece
from .schema import (
    ArcRecord,
    ArcVariant,
    ChannelPathRecord,
    ChannelRecord,
    ChipLayoutRecord,
    CylindricalShapeRecord,
    CylindricalVariant,
    LineSegmentRecord,
    LineSegmentVariant,
    ModuleRecord,
    NetworkRecord,
    NodeRecord,
    PathPieceRecord,
    Record,
    RectangularShapeRecord,
    RectangularVariant,
    ShapeRecord,
)

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R", bound=Record)


class SerializationError(ValueError):
    """Raised when boundary data does not match the expected record."""


# ============================================================
# Domain -> record
# ============================================================
def _shape_record(shape: Shape) -> ShapeRecord:
    if isinstance(shape, RectangularShape):
        return RectangularVariant(
            rectangular=RectangularShapeRecord(width=shape.width, height=shape.height)
        )
    if isinstance(shape, CylindricalShape):
        return CylindricalVariant(cylindrical=CylindricalShapeRecord(radius=shape.radius))
    raise TypeError(f"Unknown channel shape: {shape!r}")


def _line_record(line: LineSegment) -> LineSegmentRecord:
    return LineSegmentRecord(start=tuple(line.start), end=tuple(line.end))


def _arc_record(arc: Arc) -> ArcRecord:
    return ArcRecord(
        right=arc.right,
        start=tuple(arc.start),
        end=tuple(arc.end),
        center=tuple(arc.center),
    )


def _piece_record(piece: PathPiece) -> PathPieceRecord:
    if isinstance(piece, Arc):
        return ArcVariant(arc=_arc_record(piece))
    if isinstance(piece, LineSegment):
        return LineSegmentVariant(line_segment=_line_record(piece))
    raise TypeError(f"Unknown path piece: {piece!r}")


def _path_record(path: ChannelPath) -> ChannelPathRecord:
    return ChannelPathRecord(pieces=[_piece_record(piece) for piece in path.pieces])


def _channel_record(channel: Channel) -> ChannelRecord:
    return ChannelRecord(
        id=channel.id,
        node_a=channel.node_a,
        node_b=channel.node_b,
        shape=_shape_record(channel.shape),
    )


def _node_record(node: Node) -> NodeRecord:
    return NodeRecord(id=node.id)


def _module_record(module: Module) -> ModuleRecord:
    return ModuleRecord(
        id=module.id,
        position=tuple(module.position),
        size=tuple(module.size),
        nodes=list(module.nodes),
    )


def _network_record(network: Network) -> NetworkRecord:
    return NetworkRecord(
        nodes=[_node_record(node) for node in network.nodes],
        channels=[_channel_record(channel) for channel in network.channels],
        modules=[_module_record(module) for module in network.modules],
    )


def _layout_record(layout: ChipLayout) -> ChipLayoutRecord:
    return ChipLayoutRecord(
        network=_network_record(layout.network),
        paths={channel_id: _path_record(path) for channel_id, path in layout.paths.items()},
    )


# ============================================================
# Record -> domain
# ============================================================
def _shape(record: ShapeRecord) -> Shape:
    if isinstance(record, RectangularVariant):
        return RectangularShape(record.rectangular.width, record.rectangular.height)
    return CylindricalShape(record.cylindrical.radius)


def _line(record: LineSegmentRecord) -> LineSegment:
    return LineSegment(Point(*record.start), Point(*record.end))


def _arc(record: ArcRecord) -> Arc:
    return Arc(
        start=Point(*record.start),
        end=Point(*record.end),
        center=Point(*record.center),
        right=record.right,
    )


def _piece(record: PathPieceRecord) -> PathPiece:
    if isinstance(record, ArcVariant):
        return _arc(record.arc)
    return _line(record.line_segment)


def _path(record: ChannelPathRecord) -> ChannelPath:
    return ChannelPath(tuple(_piece(piece) for piece in record.pieces))


def _channel(record: ChannelRecord) -> Channel:
    return Channel(
        id=record.id,
        node_a=record.node_a,
        node_b=record.node_b,
        shape=_shape(record.shape),
    )


def _node(record: NodeRecord) -> Node:
    return Node(record.id)


def _module(record: ModuleRecord) -> Module:
    return Module(
        id=record.id,
        position=Point(*record.position),
        size=Dimensions(*record.size),
        nodes=tuple(record.nodes),
    )


def _network(record: NetworkRecord) -> Network:
    return Network(
        nodes=tuple(_node(node) for node in record.nodes),
        channels=tuple(_channel(channel) for channel in record.channels),
        modules=tuple(_module(module) for module in record.modules),
    )


def _layout(record: ChipLayoutRecord) -> ChipLayout:
    return ChipLayout(
        network=_network(record.network),
        paths={channel_id: _path(path) for channel_id, path in record.paths.items()},
    )


# Domain type -> (record type, to record, from record)
_CODECS: dict[type, tuple[type[Record], Callable[[Any], Record], Callable[[Any], Any]]] = {
    Network: (NetworkRecord, _network_record, _network),
    Node: (NodeRecord, _node_record, _node),
    Module: (ModuleRecord, _module_record, _module),
    Channel: (ChannelRecord, _channel_record, _channel),
    RectangularShape: (
        RectangularShapeRecord,
        lambda s: RectangularShapeRecord(width=s.width, height=s.height),
        lambda r: RectangularShape(r.width, r.height),
    ),
    CylindricalShape: (
        CylindricalShapeRecord,
        lambda s: CylindricalShapeRecord(radius=s.radius),
        lambda r: CylindricalShape(r.radius),
    ),
    LineSegment: (LineSegmentRecord, _line_record, _line),
    Arc: (ArcRecord, _arc_record, _arc),
    ChannelPath: (ChannelPathRecord, _path_record, _path),
    ChipLayout: (ChipLayoutRecord, _layout_record, _layout),
}

# Names accepted by ``json_schema_for``
SCHEMA_NAMES: dict[str, type] = {
    "network": Network,
    "node": Node,
    "module": Module,
    "channel": Channel,
    "line_segment": LineSegment,
    "arc": Arc,
    "channel_path": ChannelPath,
    "chip_layout": ChipLayout,
}


def _codec(cls: type) -> tuple[type[Record], Callable[[Any], Record], Callable[[Any], Any]]:
    try:
        return _CODECS[cls]
    except KeyError:
        raise TypeError(f"{cls.__name__} is not serializable") from None


def _validate(record_type: type[R], data: Any, *, json: bool = False) -> R:
    try:
        if json:
            return record_type.model_validate_json(data)
        return record_type.model_validate(data)
    except ValidationError as exc:
        raise SerializationError(
            f"Invalid {record_type.__name__} data: {exc}"
        ) from exc


def to_data(obj: Any) -> dict[str, Any]:
    """Serialize a domain object to JSON-compatible plain data."""
    _, to_record, _ = _codec(type(obj))
    return to_record(obj).model_dump(mode="json")


def from_data(cls: type[T], data: Any) -> T:
    """Deserialize plain data into a domain object of type ``cls``."""
    record_type, _, from_record = _codec(cls)
    return from_record(_validate(record_type, data))


def to_json(obj: Any) -> str:
    """Serialize a domain object to a JSON string."""
    _, to_record, _ = _codec(type(obj))
    return to_record(obj).model_dump_json()


def from_json(cls: type[T], text: str | bytes) -> T:
    """Deserialize a JSON string into a domain object of type ``cls``."""
    record_type, _, from_record = _codec(cls)
    return from_record(_validate(record_type, text, json=True))


def json_schema(cls: type) -> dict[str, Any]:
    """JSON schema of the serialized form of ``cls``."""
    record_type, _, _ = _codec(cls)
    return record_type.model_json_schema()


def json_schema_for(name: str) -> dict[str, Any]:
    """JSON schema by snake_case type name, e.g. ``"channel_path"``."""
    try:
        cls = SCHEMA_NAMES[name]
    except KeyError:
        known = ", ".join(sorted(SCHEMA_NAMES))
        raise KeyError(f"Unknown schema '{name}', expected one of: {known}") from None
    return json_schema(cls)


# ============================================================
# Function adapter
# ============================================================
def interface_function(
    input_type: type[R],
) -> Callable[[Callable[[R], Record]], Callable[[Any], dict[str, Any]]]:
    """Expose a typed pure function as a plain-data function.

    The wrapped function receives a validated ``input_type`` record and
    returns an output record, which is dumped to JSON-compatible data.
    The typed function stays reachable as ``__wrapped__``.

    Args:
        input_type: Record type the incoming data is validated against

    Returns:
        Decorator producing the host-facing function
    """

    def decorator(func: Callable[[R], Record]) -> Callable[[Any], dict[str, Any]]:
        @functools.wraps(func)
        def wrapper(data: Any) -> dict[str, Any]:
            parameters = _validate(input_type, data)
            logger.debug("Calling %s", func.__name__)
            return func(parameters).model_dump(mode="json")

        return wrapper

    return decorator


class ChannelPathCommandInput(Record):
    path: ChannelPathRecord
    invert_y: StrictBool = False


class ChannelPathCommandOutput(Record):
    command: str


class ChannelPathLengthInput(Record):
    path: ChannelPathRecord


class ChannelPathLengthOutput(Record):
    length: float


class LayoutLengthsInput(Record):
    layout: ChipLayoutRecord


class LayoutLengthsOutput(Record):
    lengths: dict[int, float]
    total: float


@interface_function(ChannelPathCommandInput)
def channel_path_command(parameters: ChannelPathCommandInput) -> ChannelPathCommandOutput:
    """SVG path command of a channel path."""
    path = _path(parameters.path)
    return ChannelPathCommandOutput(command=path.svg_path_command(parameters.invert_y))


@interface_function(ChannelPathLengthInput)
def channel_path_length(parameters: ChannelPathLengthInput) -> ChannelPathLengthOutput:
    """Centerline length of a channel path."""
    return ChannelPathLengthOutput(length=_path(parameters.path).length())


@interface_function(LayoutLengthsInput)
def layout_lengths(parameters: LayoutLengthsInput) -> LayoutLengthsOutput:
    """Centerline length of every channel in a layout, plus their sum."""
    layout = _layout(parameters.layout)
    return LayoutLengthsOutput(lengths=channel_lengths(layout), total=total_length(layout))
