"""Transform chains for nested turtles.

A turtle's *local* transform is translate(position), rotateY(yaw),
rotateX(pitch), rotateZ(spin), composed in that order.  A child turtle
lives in the frame its parent's local transform sets up, so the
transform in effect when a turtle draws is the product of every local
transform from the root of its chain down to the turtle itself.

The coordinate converter runs the same chain backwards: starting at the
root it applies the inverse of each ancestor's local transform, which
carries a point given in the root (top) context into the frame where
the turtle's own position is expressed.

Chains are walked iteratively; a turtle has at most one child, so the
lineage of any turtle is a simple path.
"""

from __future__ import annotations

from typing import List, Sequence

from turtle3d.errors import InvalidState
from turtle3d.geom import point, unit
from turtle3d.xform import Matrix


def lineage(turtle) -> List:
    """Return ``turtle`` and its ancestors, root first."""

    chain = [turtle]
    current = turtle.parent
    while current is not None:
        chain.append(current)
        current = current.parent
    chain.reverse()
    return chain


def local_matrix(turtle, include_translation: bool = True, include_rotation: bool = True) -> Matrix:
    """Return the local transform of a single turtle."""

    matrix = Matrix()
    if include_translation:
        matrix.translate(turtle.position)
    if include_rotation:
        matrix.rotatey(turtle.yaw)
        matrix.rotatex(turtle.pitch)
        matrix.rotatez(turtle.spin)
    return matrix


def context_matrix(turtle) -> Matrix:
    """Return the transform of the frame ``turtle``'s position lives in:
    the product of all ancestor transforms, identity for a root."""

    matrix = Matrix()
    for ancestor in lineage(turtle)[:-1]:
        matrix = matrix.mul(local_matrix(ancestor))
    return matrix


def active_matrix(turtle, final_rotation: bool = True) -> Matrix:
    """Return the transform in effect when ``turtle`` draws.

    With ``final_rotation=False`` the turtle's own yaw, pitch and spin
    are left out, leaving only its translation on top of the ancestors.
    """

    return context_matrix(turtle).mul(local_matrix(turtle, include_rotation=final_rotation))


def apply_chain(turtle, surface, final_rotation: bool = True) -> None:
    """Issue the active transform of ``turtle`` on ``surface``, as a
    sequence of translate/rotate calls, root first."""

    chain = lineage(turtle)
    for current in chain:
        pos = current.position
        surface.translate(pos[0], pos[1], pos[2])
        if current is turtle and not final_rotation:
            break
        surface.rotatey(current.yaw)
        surface.rotatex(current.pitch)
        surface.rotatez(current.spin)


def _cancel(turtle, vector: Sequence[float], rotation_only: bool) -> list:
    result = point(vector)
    for ancestor in lineage(turtle)[:-1]:
        inverse = local_matrix(ancestor, include_translation=not rotation_only).inverse()
        if rotation_only:
            result = inverse.apply_direction(result)
        else:
            result = inverse.apply_point(result)
    return result


def to_local_point(turtle, p: Sequence[float]) -> list:
    """Convert a point from the top (root) context into the context of
    ``turtle``.  Identity for a root turtle."""

    return _cancel(turtle, p, rotation_only=False)


def to_local_direction(turtle, d: Sequence[float]) -> list:
    """Convert a direction from the top context into the context of
    ``turtle``.  The result is renormalized unless ``turtle`` is a root,
    in which case the direction comes back unchanged."""

    if turtle.parent is None:
        return point(d)
    try:
        return unit(_cancel(turtle, d, rotation_only=True))
    except ValueError:
        raise InvalidState(f"cannot convert zero-length direction: {d!r}") from None


def to_top_point(turtle, p: Sequence[float]) -> list:
    """Convert a point in ``turtle``'s context back into the top context."""

    return context_matrix(turtle).apply_point(p)


def to_top_direction(turtle, d: Sequence[float]) -> list:
    if turtle.parent is None:
        return point(d)
    try:
        return unit(context_matrix(turtle).apply_direction(d))
    except ValueError:
        raise InvalidState(f"cannot convert zero-length direction: {d!r}") from None
