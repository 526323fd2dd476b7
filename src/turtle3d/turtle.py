## stateful 3D turtle for turtle3d
## Copyright (c) 2026 turtle3d contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""stateful 3D turtle for **turtle3d**

====================
OVERVIEW
====================

A ``Turtle`` keeps a position, an orientation and a pen, and draws on a
``turtle3d.surface.Surface`` as it moves.  Orientation is stored as
three angles in radians, always folded into `[0, 2*pi)`:

- ``yaw``, rotation about the Y axis, applied first
- ``pitch``, rotation about the X axis, applied second
- ``spin``, rotation about the Z axis, applied last

With all three at zero the turtle faces +Z.  Its direction vector is
``(sin(yaw)*cos(pitch), -sin(pitch), cos(yaw)*cos(pitch))``.

subturtles
==========

A turtle may own one child turtle, created with ``assign_child()``.
The child's coordinates are relative to its parent: its origin is the
parent's position, and zero angles point along the parent's direction.
Children can have children of their own, so the turtles form a chain.
The parent holds its child; the child only keeps a weak reference back
to its parent.  ``pos_in_top_context()`` and ``dir_in_top_context()``
convert coordinates given in the root turtle's space into the space a
turtle moves in.

drawing
=======

When the pen is down, ``forward()``, ``move_to()`` and ``dot()`` push
the turtle's active transform on the surface, draw one primitive, and
pop it again.  With the pen up they only update state and leave the
surface untouched.  ``mark()`` is a debugging overlay and draws
regardless of the pen.
"""

import logging
import weakref
from math import atan2, cos, sin, sqrt

import turtle3d.chain as chain
import turtle3d.colors as colors
from turtle3d.config import DEFAULT_CONFIG, PenLine, TurtleConfig
from turtle3d.errors import (InvalidCoordinate, InvalidState, check_angle,
                             check_coordinate, check_pen_size)
from turtle3d.geom import (add, dist, epsilon, halfpi, isfinitepoint, mag,
                           point, scale3, unit, vstr)

logger = logging.getLogger(__name__)

__all__ = ['Turtle', 'PenLine']


def _coords(x,y=None,z=None,default_z=0.0):
    """accept either a point-like sequence or separate x, y[, z]
    scalars, and return a validated point"""
    if isinstance(x,(tuple,list)):
        if len(x) < 3:
            raise InvalidCoordinate('point needs three coordinates: {}'.format(x))
        p = point(x)
    else:
        if y is None:
            raise InvalidCoordinate('missing y coordinate')
        p = [x,y,default_z if z is None else z,1.0]
    for i in range(3):
        check_coordinate(p[i])
    return p


class Turtle:
    """Turtle that draws 3D shapes on a surface, keeping track of
    position and angle as it draws.  The pen starts down."""

    def __init__(self,surface,x=0.0,y=0.0,z=0.0,config=None):
        if config is None:
            config = DEFAULT_CONFIG
        elif not isinstance(config,TurtleConfig):
            raise ValueError('bad turtle config: {}'.format(config))
        self.__surface = surface
        self.__config = config

        self.__pos = _coords(x,y,z)

        self.__yaw = 0.0
        self.__pitch = 0.0
        self.__spin = 0.0

        self.__penwidth = config.pen_width
        self.__penheight = config.pen_height
        self.__pendown = config.pen_down
        self.__pencolor = config.pen_color
        self.__penline = config.pen_line

        self.__child = None
        self.__parent = None

    def __repr__(self):
        return 'Turtle(pos={}, yaw={}, pitch={}, spin={}, depth={})'.format(
            vstr(self.__pos),self.__yaw,self.__pitch,self.__spin,self.depth)

    @property
    def surface(self):
        return self.__surface

    @property
    def config(self):
        return self.__config

    ## position
    ## --------

    @property
    def position(self):
        """copy of the current position, as a point"""
        return list(self.__pos)

    @position.setter
    def position(self,p):
        """move without drawing"""
        self.__pos = _coords(p)

    @property
    def x(self):
        return self.__pos[0]

    @x.setter
    def x(self,value):
        self.__pos[0] = check_coordinate(value)

    @property
    def y(self):
        return self.__pos[1]

    @y.setter
    def y(self,value):
        self.__pos[1] = check_coordinate(value)

    @property
    def z(self):
        return self.__pos[2]

    @z.setter
    def z(self,value):
        self.__pos[2] = check_coordinate(value)

    ## orientation
    ## -----------

    @property
    def yaw(self):
        return self.__yaw

    @yaw.setter
    def yaw(self,value):
        self.__yaw = check_angle(value)

    def yaw_rotate(self,increment):
        self.__yaw = check_angle(self.__yaw + increment)

    @property
    def pitch(self):
        return self.__pitch

    @pitch.setter
    def pitch(self,value):
        self.__pitch = check_angle(value)

    def pitch_rotate(self,increment):
        self.__pitch = check_angle(self.__pitch + increment)

    @property
    def spin(self):
        return self.__spin

    @spin.setter
    def spin(self,value):
        self.__spin = check_angle(value)

    def spin_rotate(self,increment):
        self.__spin = check_angle(self.__spin + increment)

    ## pen
    ## ---

    @property
    def pen_width(self):
        return self.__penwidth

    @pen_width.setter
    def pen_width(self,px):
        self.__penwidth = check_pen_size(px)

    @property
    def pen_height(self):
        return self.__penheight

    @pen_height.setter
    def pen_height(self,px):
        self.__penheight = check_pen_size(px)

    def pen_size(self,px):
        """set pen width and height together"""
        check_pen_size(px)
        self.__penwidth = px
        self.__penheight = px

    @property
    def pen_down(self):
        return self.__pendown

    @pen_down.setter
    def pen_down(self,down):
        self.__pendown = bool(down)

    def toggle_pen(self):
        self.__pendown = not self.__pendown

    @property
    def pen_color(self):
        return self.__pencolor

    @pen_color.setter
    def pen_color(self,c):
        if not colors.iscolor(c):
            raise TypeError('pen color must be a packed ARGB integer: {!r}'.format(c))
        self.__pencolor = c

    @property
    def pen_line(self):
        return self.__penline

    @pen_line.setter
    def pen_line(self,mode):
        self.__penline = PenLine.coerce(mode)

    ## direction
    ## ---------

    def direction(self):
        """unit vector the turtle is facing"""
        return unit([sin(self.__yaw)*cos(self.__pitch),
                     -sin(self.__pitch),
                     cos(self.__yaw)*cos(self.__pitch),
                     1.0])

    def set_direction(self,d):
        """face along ``d``.  A zero vector leaves the orientation as
        it is, exactly as face() does for the turtle's own position."""
        d = _coords(d)
        self.face(add(self.__pos,d))

    def add_directions(self,*ds):
        """add any number of vectors to the current direction and face
        along the (normalized) sum"""
        result = self.direction()
        for d in ds:
            result = add(result,_coords(d))
        if mag(result) < epsilon:
            raise InvalidState('directions cancel out to a zero vector')
        self.set_direction(unit(result))

    def face(self,x,y=None,z=None):
        """turn to face a point.  With two scalar coordinates the
        turtle's own z is used.  Facing the turtle's own position is a
        no-op."""
        target = _coords(x,y,z,default_z=self.__pos[2])
        dx = target[0] - self.__pos[0]
        dy = target[1] - self.__pos[1]
        dz = target[2] - self.__pos[2]
        if dx == 0 and dy == 0 and dz == 0:
            return
        yaw = check_angle(halfpi - atan2(dz,dx))
        pitch = check_angle(atan2(-dy,sqrt(dx*dx + dz*dz)))
        self.__yaw = yaw
        self.__pitch = pitch

    ## movement
    ## --------

    def forward(self,distance):
        """move forward by ``distance``, drawing if the pen is down"""
        check_coordinate(distance)
        dest = add(self.__pos,scale3(self.direction(),distance))
        if not isfinitepoint(dest):
            raise InvalidCoordinate('forward({}) leaves finite space'.format(distance))
        self.forward_project(distance)
        self.__pos = dest

    def backward(self,distance):
        check_coordinate(distance)
        self.forward(-distance)

    def forward_project(self,distance):
        """draw as if moving forward by ``distance``, without moving"""
        if not self.__pendown:
            return
        check_coordinate(distance)
        surface = self.__surface
        with surface.transformed():
            chain.apply_chain(self,surface)
            if self.__penline is PenLine.BOX:
                surface.fill_color = self.__pencolor
                # boxes are drawn about their center
                surface.translate(0,0,distance/2.0)
                surface.scale(self.__penwidth,self.__penheight,distance)
                surface.draw_box(1,1,1)
            else:
                surface.stroke_color = self.__pencolor
                surface.stroke_weight = self.__penwidth
                surface.draw_line(0,0,0,0,0,distance)

    def move_to(self,x,y=None,z=None):
        """move in a straight line to a point, drawing if the pen is
        down.  The orientation is unchanged afterwards and the final
        position is exactly the target."""
        target = _coords(x,y,z,default_z=self.__pos[2])
        if not self.__pendown:
            self.__pos = target
            return
        yaw = self.__yaw
        pitch = self.__pitch
        try:
            self.face(target)
            self.forward_project(dist(target,self.__pos))
        finally:
            self.__yaw = yaw
            self.__pitch = pitch
        self.__pos = target

    def imitate(self,other):
        """move to another turtle's position (drawing if the pen is
        down) and take its yaw and pitch"""
        self.move_to(other.position)
        self.__yaw = other.yaw
        self.__pitch = other.pitch

    ## markers
    ## -------

    def dot(self,radius=None):
        """draw a sphere at the current position"""
        if radius is None:
            radius = self.__config.dot_scale*self.__penwidth
        check_pen_size(radius)
        if not self.__pendown:
            return
        surface = self.__surface
        with surface.transformed():
            chain.apply_chain(self,surface)
            surface.fill_color = self.__pencolor
            surface.draw_sphere(radius)

    def mark(self,radius=None):
        """draw two circles and two radii showing the turtle's yaw (red)
        and pitch (green)"""
        if radius is None:
            radius = self.__config.dot_scale*self.__penwidth
        check_pen_size(radius)
        surface = self.__surface
        with surface.transformed():
            chain.apply_chain(self,surface,final_rotation=False)
            surface.fill_color = None
            surface.stroke_weight = self.__config.mark_weight

            # yaw plane
            surface.rotatey(self.__yaw)
            surface.rotatex(halfpi)
            surface.stroke_color = colors.color(255,0,0,127)
            surface.draw_circle(2*radius)
            surface.stroke_color = colors.RED
            surface.draw_line(0,0,0,0,radius,0)

            # pitch plane
            surface.rotatey(halfpi)
            surface.stroke_color = colors.color(0,255,0,127)
            surface.draw_circle(2*radius)
            surface.rotatez(self.__pitch)
            surface.stroke_color = colors.WHITE
            surface.draw_line(0,0,0,0,radius,0)

    ## copies
    ## ------

    def clone(self):
        """new root turtle with this turtle's position, orientation and
        pen.  Parent and child links are not copied."""
        other = Turtle(self.__surface,config=self.__config)
        other.position = self.__pos
        other.yaw = self.__yaw
        other.pitch = self.__pitch
        other.spin = self.__spin
        other.pen_down = self.__pendown
        other.pen_color = self.__pencolor
        other.pen_width = self.__penwidth
        other.pen_height = self.__penheight
        other.pen_line = self.__penline
        return other

    ## subturtles
    ## ----------

    @property
    def parent(self):
        """the turtle that owns this one, or None for a root"""
        if self.__parent is None:
            return None
        return self.__parent()

    @property
    def child(self):
        return self.__child

    @property
    def depth(self):
        """number of ancestors"""
        return len(chain.lineage(self)) - 1

    def origin(self):
        """the root of this turtle's chain"""
        current = self
        while current.parent is not None:
            current = current.parent
        return current

    def assign_child(self,inherit_style=False):
        """create a new child turtle at this turtle's local origin,
        replacing any existing child, and return it"""
        if self.__child is not None:
            self.discard_child()
        child = Turtle(self.__surface,config=self.__config)
        if inherit_style:
            child.pen_width = self.__penwidth
            child.pen_height = self.__penheight
            child.pen_color = self.__pencolor
        child.__parent = weakref.ref(self)
        self.__child = child
        logger.debug('assigned child at depth %d',child.depth)
        return child

    def discard_child(self):
        """release this turtle's child, which becomes a root turtle
        (keeping any child of its own), and return it"""
        child = self.__child
        if child is None:
            raise InvalidState('turtle has no child to discard')
        child.__parent = None
        self.__child = None
        logger.debug('discarded child at depth %d',self.depth + 1)
        return child

    def discard(self):
        """release this turtle from its parent and return the parent"""
        parent = self.parent
        if parent is None:
            raise InvalidState('cannot discard a root turtle')
        parent.discard_child()
        return parent

    ## transforms and coordinate conversion
    ## ------------------------------------

    def transformation_matrix(self,include_translation=True):
        """local transform this turtle applies before drawing"""
        return chain.local_matrix(self,include_translation=include_translation)

    def active_matrix(self,final_rotation=True):
        return chain.active_matrix(self,final_rotation=final_rotation)

    def pos_in_top_context(self,x,y=None,z=None):
        """convert a point given in the root turtle's space into the
        space this turtle moves in"""
        return chain.to_local_point(self,_coords(x,y,z))

    def dir_in_top_context(self,d):
        """convert a direction given in the root turtle's space into the
        space this turtle moves in"""
        return chain.to_local_direction(self,_coords(d))

    def pos_to_top_context(self,x,y=None,z=None):
        """inverse of pos_in_top_context()"""
        return chain.to_top_point(self,_coords(x,y,z))

    def dir_to_top_context(self,d):
        return chain.to_top_direction(self,_coords(d))
