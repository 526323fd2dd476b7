"""
Exceptions raised by turtle3d.

Validation errors subclass ``ValueError`` and link-state errors subclass
``RuntimeError`` so callers that only know the builtin types still catch
them.  Everything is raised before the offending operation mutates a
turtle or emits a draw call.
"""

from turtle3d.geom import isfinitenum, normangle


class TurtleError(Exception):
    """Base class for all turtle3d errors."""


class InvalidCoordinate(TurtleError, ValueError):
    """A position component (or a distance) is NaN or infinite."""


class InvalidAngle(TurtleError, ValueError):
    """A yaw, pitch or spin value is NaN or infinite."""


class InvalidPenSize(TurtleError, ValueError):
    """A pen width or height is negative, NaN or infinite."""


class InvalidState(TurtleError, RuntimeError):
    """An operation needs a link or stack entry that does not exist."""


## validators shared by turtles and configuration loading

def check_coordinate(px):
    if not isfinitenum(px):
        raise InvalidCoordinate('invalid coordinate: {!r}'.format(px))
    return px


def check_angle(rad):
    """reject a non-finite angle and fold the rest into [0, 2*pi)"""
    if not isfinitenum(rad):
        raise InvalidAngle('invalid angle: {!r}'.format(rad))
    return normangle(rad)


def check_pen_size(px):
    if not isfinitenum(px) or px < 0:
        raise InvalidPenSize('invalid pen size: {!r}'.format(px))
    return px
