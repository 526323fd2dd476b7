"""Packed 32-bit ARGB colors.

A color is an ``int`` laid out as ``0xAARRGGBB``.  Turtles treat colors
as opaque values; only surfaces unpack them.
"""

from __future__ import annotations

from typing import Optional, Tuple

from turtle3d.geom import isgoodnum


def _channel(v) -> int:
    if not isgoodnum(v):
        raise ValueError(f"bad color channel: {v!r}")
    return max(0, min(255, int(v)))


def color(r, g=None, b=None, a=255) -> int:
    """Pack a color.

    ``color(gray)`` gives an opaque gray level, ``color(gray, alpha)``
    a translucent one, and ``color(r, g, b[, a])`` a full ARGB value.
    """

    if g is None and b is None:
        r = g = b = r
    elif b is None:
        a = g
        r = g = b = r
    return (_channel(a) << 24) | (_channel(r) << 16) | (_channel(g) << 8) | _channel(b)


def iscolor(c) -> bool:
    return isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 0xFFFFFFFF


def unpack(c: int) -> Tuple[int, int, int, int]:
    """Return ``(a, r, g, b)`` for a packed color."""

    if not iscolor(c):
        raise ValueError(f"bad packed color: {c!r}")
    return (c >> 24) & 0xFF, (c >> 16) & 0xFF, (c >> 8) & 0xFF, c & 0xFF


def rgb(c: Optional[int]) -> Optional[Tuple[int, int, int]]:
    if c is None:
        return None
    _, r, g, b = unpack(c)
    return r, g, b


WHITE = color(255)
BLACK = color(0)
RED = color(255, 0, 0)
GREEN = color(0, 255, 0)
BLUE = color(0, 0, 255)
