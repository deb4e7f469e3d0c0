"""Channel centerline paths made of straight segments and circular arcs.

A ``ChannelPath`` is rendered to an SVG path command (``M``, ``L`` and
``A`` tokens) and measured along its centerline. Arcs are authored as
start, end and center points plus a rotation direction in a Y-up
coordinate system; ``Arc.svg_parameters`` turns that into the endpoint
parameterization SVG expects.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .models import Point
from .predicates import orient2d

if TYPE_CHECKING:
    from collections.abc import Iterator


class GeometryError(ValueError):
    """Raised for impossible geometry operations."""


class DegenerateGeometryError(GeometryError):
    """Raised when an arc's points do not describe a drawable arc."""


class PathValidationError(GeometryError):
    """Raised when a path breaks contiguity or an arc leaves its circle."""


def format_number(value: float) -> str:
    """Shortest round-trip text for a coordinate, integers without ``.0``."""
    value = float(value)
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class ArcParameters:
    """Endpoint parameterization of an arc as used by SVG ``A`` commands."""

    radius: float
    large_arc: bool
    sweep: bool


@dataclass(frozen=True)
class LineSegment:
    """A straight line segment."""

    start: Point
    end: Point

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", Point(*self.start))
        object.__setattr__(self, "end", Point(*self.end))

    def svg_path_command(self, invert_y: bool = False) -> str:
        """Line-to command ending at this segment's end point."""
        x, y = self.end
        return f"L {format_number(x)} {format_number(y)}"

    def length(self) -> float:
        """Euclidean length of the segment."""
        sx, sy = self.start
        ex, ey = self.end
        return math.hypot(sx - ex, sy - ey)


@dataclass(frozen=True)
class Arc:
    """A circular arc segment.

    ``right`` is True for a clockwise rotation from start to end,
    counterclockwise otherwise. A mathematical (Y-up) axis is assumed.
    Start and end must lie on the same circle around ``center``; this is
    not checked here.
    """

    start: Point
    end: Point
    center: Point
    right: bool

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", Point(*self.start))
        object.__setattr__(self, "end", Point(*self.end))
        object.__setattr__(self, "center", Point(*self.center))

    @property
    def radius(self) -> float:
        """Distance from center to start."""
        cx, cy = self.center
        sx, sy = self.start
        return math.hypot(sx - cx, sy - cy)

    def svg_parameters(self, invert: bool = False) -> ArcParameters:
        """Classify the arc into radius, large-arc flag and sweep flag.

        Two orientation tests decide which of the two arcs between start
        and end is meant: ``o0`` tells on which side of the chord the
        center lies, ``o1`` on which side of the tangent at start the end
        point lies.

        Args:
            invert: True if the target coordinate system's Y axis points
                down. Flips the sweep flag only.

        Returns:
            ArcParameters for the renderer

        Raises:
            DegenerateGeometryError: If start equals center, or the
                orientation tests contradict a valid circle.
        """
        radius = self.radius

        # Full circle, independent of direction
        if self.start == self.end:
            return ArcParameters(radius, True, False)
        if self.start == self.center:
            raise DegenerateGeometryError(
                f"Arc start {self.start} coincides with its center"
            )

        sx, sy = self.start
        cx, cy = self.center
        tangent = (sx + sy - cy, sy + cx - sx)

        o0 = orient2d(self.start, self.center, self.end)
        o1 = orient2d(self.start, tangent, self.end)

        large_arc, sweep = _arc_flags(o0, o1, self.right)
        # Inversion applies to every branch, the o0 == o1 == 0 case included
        return ArcParameters(radius, large_arc, sweep != invert)

    def svg_path_command(self, invert_y: bool = False) -> str:
        """Arc-to command ending at this arc's end point."""
        params = self.svg_parameters(invert_y)
        r = format_number(params.radius)
        laf = "1" if params.large_arc else "0"
        sf = "1" if params.sweep else "0"
        x, y = self.end
        return f"A {r} {r} 0 {laf} {sf} {format_number(x)} {format_number(y)}"

    def length(self) -> float:
        """Length of the arc along its circle."""
        large_arc = self.svg_parameters().large_arc
        r = self.radius
        two_r = 2 * r
        sx, sy = self.start
        ex, ey = self.end
        chord = math.hypot(sx - ex, sy - ey)

        # Antipodal points may round the chord up to the diameter
        if chord < two_r:
            short = two_r * math.asin(chord / two_r)
        else:
            short = r * math.pi

        if large_arc:
            return 2 * math.pi * r - short
        return short


def _arc_flags(o0: float, o1: float, right: bool) -> tuple[bool, bool]:
    """Large-arc and sweep flags from the two orientation values."""
    if o0 > 0:
        if o1 > 0:
            return not right, not right
        if o1 < 0:
            return not right, right
    elif o0 < 0:
        if o1 > 0:
            return right, not right
        if o1 < 0:
            return right, right
    else:
        # Center on the chord: a half circle
        if o1 > 0:
            return False, not right
        if o1 < 0:
            return False, right
        return False, False

    raise DegenerateGeometryError(
        "End point lies on the tangent at start while the center is off the chord"
    )


PathPiece = Arc | LineSegment


@dataclass(frozen=True)
class ChannelPath:
    """A continuous channel path of arcs and straight segments.

    Consecutive pieces share their end and start points.
    """

    pieces: tuple[PathPiece, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "pieces", tuple(self.pieces))

    def __iter__(self) -> Iterator[PathPiece]:
        return iter(self.pieces)

    def __len__(self) -> int:
        return len(self.pieces)

    @property
    def start(self) -> Point | None:
        """Start point of the first piece, None for an empty path."""
        return self.pieces[0].start if self.pieces else None

    @property
    def end(self) -> Point | None:
        """End point of the last piece, None for an empty path."""
        return self.pieces[-1].end if self.pieces else None

    def svg_path_command(self, invert_y: bool = False) -> str:
        """SVG path data for the whole path.

        Args:
            invert_y: True if the SVG's Y axis is flipped relative to the
                coordinates the path was authored in

        Returns:
            Move-to the first start point followed by one command per
            piece, or an empty string for an empty path
        """
        if not self.pieces:
            return ""

        x, y = self.pieces[0].start
        commands = [f"M {format_number(x)} {format_number(y)}"]
        for piece in self.pieces:
            commands.append(piece.svg_path_command(invert_y))
        return " ".join(commands)

    def length(self) -> float:
        """Sum of all piece lengths."""
        return sum((piece.length() for piece in self.pieces), 0.0)


def validate_path(path: ChannelPath, rel_tol: float = 1e-9) -> None:
    """Check that pieces connect and that every arc stays on its circle.

    Contiguity uses exact point equality; the on-circle check compares the
    center-start and center-end distances with ``rel_tol``.

    Raises:
        PathValidationError: On the first violation found.
    """
    previous: PathPiece | None = None
    for index, piece in enumerate(path.pieces):
        if previous is not None and previous.end != piece.start:
            raise PathValidationError(
                f"Piece {index} starts at {piece.start}, "
                f"previous piece ends at {previous.end}"
            )
        if isinstance(piece, Arc):
            cx, cy = piece.center
            ex, ey = piece.end
            end_radius = math.hypot(ex - cx, ey - cy)
            if not math.isclose(piece.radius, end_radius, rel_tol=rel_tol, abs_tol=1e-12):
                raise PathValidationError(
                    f"Arc {index} end is off its circle: "
                    f"radius {piece.radius} at start, {end_radius} at end"
                )
        previous = piece


class ChannelPathBuilder:
    """Append-only construction of a ``ChannelPath``.

    Usage:
        path = (
            ChannelPathBuilder(start=(0, 0))
            .line_to((10, 0))
            .arc_to((20, 10), center=(10, 10), right=False)
            .build()
        )
    """

    def __init__(self, start: Point | tuple[float, float] | None = None):
        self._pieces: list[PathPiece] = []
        self._current = Point(*start) if start is not None else None

    @property
    def current_point(self) -> Point | None:
        """End of the last appended piece (or the start point)."""
        return self._current

    def add(self, piece: PathPiece) -> ChannelPathBuilder:
        """Append a piece. Contiguity with the previous piece is not checked."""
        self._pieces.append(piece)
        self._current = piece.end
        return self

    def line_to(self, end: Point | tuple[float, float]) -> ChannelPathBuilder:
        """Append a straight segment from the current point."""
        return self.add(LineSegment(self._require_current(), end))

    def arc_to(
        self,
        end: Point | tuple[float, float],
        center: Point | tuple[float, float],
        right: bool,
    ) -> ChannelPathBuilder:
        """Append an arc from the current point."""
        return self.add(Arc(self._require_current(), end, center, right))

    def build(self, validate: bool = False) -> ChannelPath:
        """Finalize the pieces appended so far into an immutable path."""
        path = ChannelPath(tuple(self._pieces))
        if validate:
            validate_path(path)
        return path

    def _require_current(self) -> Point:
        if self._current is None:
            raise GeometryError("Path has no current point; pass start= or add a piece first")
        return self._current
