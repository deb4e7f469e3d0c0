"""chipplot - Microfluidic chip networks with arc-and-line channel paths.

Example usage:
    from chipplot import ChannelPathBuilder

    path = (
        ChannelPathBuilder(start=(0, 0))
        .line_to((40, 0))
        .arc_to((50, 10), center=(40, 10), right=False)
        .build()
    )
    path.svg_path_command(invert_y=True)  # "M 0 0 L 40 0 A 10 10 0 0 1 50 10"
    path.length()                         # 40 + 5 * pi
"""

from .interfaces import (
    SerializationError,
    channel_path_command,
    channel_path_length,
    from_data,
    from_json,
    interface_function,
    json_schema,
    layout_lengths,
    to_data,
    to_json,
)
from .models import (
    Channel,
    CylindricalShape,
    Dimensions,
    Module,
    Network,
    Node,
    NodeId,
    Point,
    RectangularShape,
    Shape,
    shape_width,
)
from .network import (
    ChipLayout,
    build_graph,
    channel_lengths,
    node_positions,
    total_length,
    unrouted_channels,
)
from .paths import (
    Arc,
    ArcParameters,
    ChannelPath,
    ChannelPathBuilder,
    DegenerateGeometryError,
    GeometryError,
    LineSegment,
    PathPiece,
    PathValidationError,
    validate_path,
)
from .predicates import orient2d, orientation
from .renderer import (
    DEFAULT_THEME,
    ChipRenderer,
    RenderConfig,
    Theme,
    render_to_svg,
)

__version__ = "0.1.0"

__all__ = [
    # Models
    "Point",
    "Dimensions",
    "NodeId",
    "Node",
    "Module",
    "Network",
    "Channel",
    "Shape",
    "RectangularShape",
    "CylindricalShape",
    "shape_width",
    # Paths
    "Arc",
    "ArcParameters",
    "LineSegment",
    "PathPiece",
    "ChannelPath",
    "ChannelPathBuilder",
    "validate_path",
    "GeometryError",
    "DegenerateGeometryError",
    "PathValidationError",
    # Predicates
    "orient2d",
    "orientation",
    # Network
    "ChipLayout",
    "build_graph",
    "channel_lengths",
    "total_length",
    "unrouted_channels",
    "node_positions",
    # Serialization
    "to_data",
    "from_data",
    "to_json",
    "from_json",
    "json_schema",
    "interface_function",
    "channel_path_command",
    "channel_path_length",
    "layout_lengths",
    "SerializationError",
    # Rendering
    "render_to_svg",
    "ChipRenderer",
    "RenderConfig",
    "Theme",
    "DEFAULT_THEME",
    # Version
    "__version__",
]
