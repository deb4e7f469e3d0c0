"""Example chip layouts rendered with chipplot."""

import os

from chipplot import (
    Channel,
    ChannelPathBuilder,
    ChipLayout,
    CylindricalShape,
    Dimensions,
    Module,
    Network,
    Node,
    Point,
    RectangularShape,
    channel_lengths,
    render_to_svg,
    to_json,
    total_length,
)


def serpentine_example():
    """Serpentine mixer: straight runs joined by half-circle turns."""
    run, radius, turns = 100.0, 10.0, 4

    builder = ChannelPathBuilder(start=(0, 0))
    y = 0.0
    for i in range(turns):
        # Even rows run to the right and turn left, odd rows the opposite
        x_end = run if i % 2 == 0 else 0.0
        builder.line_to((x_end, y))
        builder.arc_to((x_end, y + 2 * radius), center=(x_end, y + radius), right=i % 2 == 1)
        y += 2 * radius
    builder.line_to((run if turns % 2 == 0 else 0.0, y))
    path = builder.build(validate=True)

    network = Network(
        nodes=(Node(1), Node(2)),
        channels=(Channel(id=1, node_a=1, node_b=2, shape=RectangularShape(width=4.0, height=2.0)),),
    )
    layout = ChipLayout(network=network, paths={1: path})

    render_to_svg(layout, "output/serpentine")
    print(f"Serpentine: {path.length():.2f} length units, saved to serpentine.svg")
    return layout


def junction_example():
    """Two inlets merging into one outlet between modules."""
    inlet_a = (
        ChannelPathBuilder(start=(20, 60))
        .line_to((60, 60))
        .arc_to((80, 40), center=(60, 40), right=True)
        .line_to((80, 30))
        .build()
    )
    inlet_b = (
        ChannelPathBuilder(start=(20, 0))
        .line_to((60, 0))
        .arc_to((80, 20), center=(60, 20), right=False)
        .line_to((80, 30))
        .build()
    )
    outlet = ChannelPathBuilder(start=(80, 30)).line_to((160, 30)).build()

    network = Network(
        nodes=(Node(1), Node(2), Node(3), Node(4)),
        channels=(
            Channel(id=1, node_a=1, node_b=3, shape=RectangularShape(width=3.0, height=1.0)),
            Channel(id=2, node_a=2, node_b=3, shape=RectangularShape(width=3.0, height=1.0)),
            Channel(id=3, node_a=3, node_b=4, shape=CylindricalShape(radius=2.5)),
        ),
        modules=(
            Module(id=1, position=Point(0, -10), size=Dimensions(20, 80), nodes=(1, 2)),
            Module(id=2, position=Point(160, 10), size=Dimensions(30, 40), nodes=(4,)),
        ),
    )
    layout = ChipLayout(network=network, paths={1: inlet_a, 2: inlet_b, 3: outlet})

    render_to_svg(layout, "output/junction")
    for channel_id, length in channel_lengths(layout).items():
        print(f"  channel {channel_id}: {length:.2f}")
    print(f"Junction: {total_length(layout):.2f} total, saved to junction.svg")
    return layout


if __name__ == "__main__":
    os.makedirs("output", exist_ok=True)
    serpentine_example()
    layout = junction_example()
    with open("output/junction.json", "w", encoding="utf-8") as f:
        f.write(to_json(layout))
