"""SVG renderer using drawsvg."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import drawsvg as draw

from .models import shape_width
from .network import node_positions, unrouted_channels
from .paths import Arc

if TYPE_CHECKING:
    from .models import Channel, Module
    from .network import ChipLayout
    from .paths import ChannelPath

logger = logging.getLogger(__name__)


class Theme:
    """Color theme for chip drawings."""

    def __init__(
        self,
        background: str = "#ffffff",
        channel_color: str = "#2563eb",
        module_fill: str = "#f1f5f9",
        module_stroke: str = "#94a3b8",
        node_color: str = "#1e293b",
        text_color: str = "#475569",
    ):
        self.background = background
        self.channel_color = channel_color
        self.module_fill = module_fill
        self.module_stroke = module_stroke
        self.node_color = node_color
        self.text_color = text_color


DEFAULT_THEME = Theme()


@dataclass
class RenderConfig:
    """Configuration for rendering a chip layout."""

    # SVG's Y axis points down while paths are authored Y-up
    invert_y: bool = True
    padding: float = 20.0
    node_radius: float = 3.0
    show_nodes: bool = True
    show_modules: bool = True
    module_label_size: float = 10.0


def path_bounds(path: ChannelPath) -> tuple[float, float, float, float] | None:
    """Bounding box (min_x, min_y, max_x, max_y) of a path, None if empty.

    Arcs contribute their whole circle, which over-approximates but never
    clips the drawing.
    """
    xs: list[float] = []
    ys: list[float] = []
    for piece in path.pieces:
        xs.extend((piece.start[0], piece.end[0]))
        ys.extend((piece.start[1], piece.end[1]))
        if isinstance(piece, Arc):
            cx, cy = piece.center
            r = piece.radius
            xs.extend((cx - r, cx + r))
            ys.extend((cy - r, cy + r))
    if not xs:
        return None
    return min(xs), min(ys), max(xs), max(ys)


class ChipRenderer:
    """Renders chip layouts to SVG."""

    def __init__(
        self,
        theme: Theme | None = None,
        config: RenderConfig | None = None,
    ):
        self.theme = theme or DEFAULT_THEME
        self.config = config or RenderConfig()

    def render(self, layout: ChipLayout) -> draw.Drawing:
        """Render a layout to an SVG Drawing object."""
        min_x, min_y, max_x, max_y = self._bounds(layout)
        pad = self.config.padding
        width = max_x - min_x + 2 * pad
        height = max_y - min_y + 2 * pad

        d = draw.Drawing(width, height, origin=(min_x - pad, min_y - pad))

        d.append(
            draw.Rectangle(
                min_x - pad, min_y - pad, width, height,
                fill=self.theme.background,
            )
        )

        if self.config.show_modules:
            for module in layout.network.modules:
                self._render_module(d, module)

        skipped = unrouted_channels(layout)
        if skipped:
            logger.info(
                "Skipping %d unrouted channel(s): %s",
                len(skipped), ", ".join(str(c.id) for c in skipped),
            )

        # Channels above modules, nodes on top
        for channel in layout.network.channels:
            path = layout.path(channel.id)
            if path.pieces:
                self._render_channel(d, channel, path)

        if self.config.show_nodes:
            for node_id, (x, y) in sorted(node_positions(layout).items()):
                d.append(
                    draw.Circle(
                        x, y, self.config.node_radius,
                        fill=self.theme.node_color,
                        id=f"node-{node_id}",
                    )
                )

        return d

    def _bounds(self, layout: ChipLayout) -> tuple[float, float, float, float]:
        """Extent of everything drawn, before padding."""
        boxes = []
        for channel in layout.network.channels:
            box = path_bounds(layout.path(channel.id))
            if box is not None:
                half = shape_width(channel.shape) / 2
                boxes.append((box[0] - half, box[1] - half, box[2] + half, box[3] + half))
        if self.config.show_modules:
            for module in layout.network.modules:
                x, y = module.position
                w, h = module.size
                boxes.append((x, y, x + w, y + h))

        if not boxes:
            return (0, 0, 0, 0)

        return (
            min(b[0] for b in boxes),
            min(b[1] for b in boxes),
            max(b[2] for b in boxes),
            max(b[3] for b in boxes),
        )

    def _render_module(self, d: draw.Drawing, module: Module) -> None:
        """Render a module as a labelled rectangle."""
        x, y = module.position
        w, h = module.size
        d.append(
            draw.Rectangle(
                x, y, w, h,
                fill=self.theme.module_fill,
                stroke=self.theme.module_stroke,
                stroke_width=1,
                id=f"module-{module.id}",
            )
        )
        d.append(
            draw.Text(
                f"M{module.id}",
                self.config.module_label_size,
                x + 4, y + self.config.module_label_size + 2,
                fill=self.theme.text_color,
                font_family="JetBrains Mono, Consolas, monospace",
            )
        )

    def _render_channel(self, d: draw.Drawing, channel: Channel, path: ChannelPath) -> None:
        """Render a channel centerline stroked with the channel's width."""
        d.append(
            draw.Path(
                d=path.svg_path_command(self.config.invert_y),
                stroke=self.theme.channel_color,
                stroke_width=shape_width(channel.shape),
                stroke_linecap="round",
                stroke_linejoin="round",
                fill="none",
                id=f"channel-{channel.id}",
            )
        )


def render_to_svg(
    layout: ChipLayout,
    filename: str | None = None,
    config: RenderConfig | None = None,
    theme: Theme | None = None,
) -> str:
    """Render a chip layout to SVG.

    Args:
        layout: The layout to render
        filename: Optional filename to save to (without extension)
        config: Rendering options
        theme: Colors

    Returns:
        SVG content as string
    """
    renderer = ChipRenderer(theme=theme, config=config)
    drawing = renderer.render(layout)

    if filename:
        drawing.save_svg(f"{filename}.svg")
        logger.info("SVG written to %s.svg", filename)

    return drawing.as_svg()
