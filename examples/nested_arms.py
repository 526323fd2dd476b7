#!/usr/bin/env python3
"""Draw a three-joint arm with nested subturtles.

Each joint is a subturtle of the previous one, so bending a joint
carries every segment after it along.  The script also shows how to
find a point given in world coordinates from inside the last joint.
"""

from __future__ import annotations

import argparse
import math
from pathlib import Path

from turtle3d import colors
from turtle3d.ezdxf_surface import ezdxfSurface
from turtle3d.turtle import PenLine, Turtle


def build(surface, bend: float):
    base = Turtle(surface)
    base.pen_size(3)
    base.pen_color = colors.color(200, 200, 255)
    base.pitch = -math.pi / 2  # point up the Y axis
    base.forward(40)
    base.mark(6)

    joint = base
    for length in (30, 20):
        joint = joint.assign_child(inherit_style=True)
        joint.yaw = bend
        joint.forward(length)
        joint.mark(4)

    tip = joint.assign_child()
    tip.pen_line = PenLine.LINE
    tip.pen_color = colors.RED
    # draw a line from the tip of the arm to the world origin
    tip.move_to(tip.pos_in_top_context(0, 0, 0))
    return base


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("output", type=Path, help="DXF file to write")
    parser.add_argument("--bend", type=float, default=0.6, help="joint yaw in radians")
    args = parser.parse_args(argv)

    surface = ezdxfSurface()
    build(surface, args.bend)
    surface.saveas(args.output)
    print(f"wrote {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
