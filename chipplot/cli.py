"""Command-line interface: render layouts, report lengths, print schemas."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from .interfaces import SerializationError, from_json, json_schema_for
from .network import ChipLayout, channel_lengths, total_length
from .paths import GeometryError
from .renderer import RenderConfig, render_to_svg

if TYPE_CHECKING:
    from collections.abc import Sequence

log = logging.getLogger("chipplot")


def _load_layout(path: str) -> ChipLayout:
    return from_json(ChipLayout, Path(path).read_text(encoding="utf-8"))


def _cmd_render(args: argparse.Namespace) -> int:
    layout = _load_layout(args.layout)
    config = RenderConfig(
        invert_y=args.invert_y,
        padding=args.padding,
        show_nodes=not args.hide_nodes,
        show_modules=not args.hide_modules,
    )
    output = args.output
    if output is None:
        output = str(Path(args.layout).with_suffix(""))
    elif output.endswith(".svg"):
        output = output[: -len(".svg")]
    render_to_svg(layout, output, config=config)
    return 0


def _cmd_lengths(args: argparse.Namespace) -> int:
    layout = _load_layout(args.layout)
    report = {
        "lengths": {str(k): v for k, v in channel_lengths(layout).items()},
        "total": total_length(layout),
    }
    print(json.dumps(report, indent=2))
    return 0


def _cmd_schema(args: argparse.Namespace) -> int:
    print(json.dumps(json_schema_for(args.name), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chipplot",
        description="Render microfluidic chip layouts and measure channel paths.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a layout JSON file to SVG")
    render.add_argument("layout", help="Path to a chip layout JSON file")
    render.add_argument("-o", "--output", help="Output SVG path (default: next to the input)")
    render.add_argument(
        "--no-invert-y", dest="invert_y", action="store_false",
        help="Do not flip arc sweep for SVG's downward Y axis",
    )
    render.add_argument("--padding", type=float, default=RenderConfig.padding)
    render.add_argument("--hide-nodes", action="store_true")
    render.add_argument("--hide-modules", action="store_true")
    render.set_defaults(func=_cmd_render)

    lengths = sub.add_parser("lengths", help="Print per-channel centerline lengths as JSON")
    lengths.add_argument("layout", help="Path to a chip layout JSON file")
    lengths.set_defaults(func=_cmd_lengths)

    schema = sub.add_parser("schema", help="Print the JSON schema of a record type")
    schema.add_argument("name", help="Record name, e.g. network, channel_path, chip_layout")
    schema.set_defaults(func=_cmd_schema)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    try:
        return args.func(args)
    except (OSError, SerializationError, GeometryError, KeyError) as exc:
        log.error("%s failed: %s", args.command, exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
