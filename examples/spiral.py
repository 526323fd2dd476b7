#!/usr/bin/env python3
"""Draw a rising square spiral of boxes and write it to a DXF file."""

from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path

from turtle3d.config import DEFAULT_CONFIG, load_config
from turtle3d.ezdxf_surface import ezdxfSurface
from turtle3d.turtle import Turtle


def build(surface, config, turns: int, step: float, rise: float) -> Turtle:
    t = Turtle(surface, config=config)
    for i in range(turns * 4):
        t.forward(step + i * 0.5 * step)
        t.dot()
        t.yaw_rotate(math.pi / 2)
        t.y = t.y - rise
    return t


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("output", type=Path, help="DXF file to write")
    parser.add_argument("--config", type=Path, help="YAML turtle settings")
    parser.add_argument("--turns", type=int, default=5)
    parser.add_argument("--step", type=float, default=10.0)
    parser.add_argument("--rise", type=float, default=2.0)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    config = load_config(args.config) if args.config else DEFAULT_CONFIG

    surface = ezdxfSurface(circle_segments=config.circle_segments)
    build(surface, config, args.turns, args.step, args.rise)
    surface.saveas(args.output)
    print(f"wrote {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
