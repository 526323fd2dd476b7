## base class of drawing surfaces for turtle3d
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

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Optional, Tuple

import turtle3d.colors as colors
import turtle3d.xform as xform
from turtle3d.errors import InvalidState
from turtle3d.geom import isfinitenum

logger = logging.getLogger(__name__)

## A surface keeps a current transformation matrix and a stack of
## saved matrices, in the manner of an OpenGL or Processing renderer.
## Primitives are drawn in the local coordinates of the current
## matrix: boxes and spheres are centered on the origin, circles lie
## in the XY plane, lines run between two local points.

class Surface:
    """Base class for turtle3d drawing surfaces"""

    def __init__(self):
        self.__matrix = xform.Matrix()
        self.__stack = []
        self.__fillcolor = colors.WHITE
        self.__strokecolor = colors.BLACK
        self.__strokeweight = 1.0

    ## transform stack
    ## ---------------

    @property
    def matrix(self):
        """copy of the current transformation matrix"""
        return self.__matrix.copy()

    @property
    def depth(self):
        """number of saved transforms"""
        return len(self.__stack)

    def push_transform(self):
        self.__stack.append(self.__matrix.copy())

    def pop_transform(self):
        if not self.__stack:
            raise InvalidState('pop_transform called on an empty transform stack')
        self.__matrix = self.__stack.pop()

    @contextmanager
    def transformed(self):
        """push the current transform, and pop it again however the
        block exits"""
        self.push_transform()
        try:
            yield self
        finally:
            self.pop_transform()

    def translate(self,x,y=0,z=0):
        self.__matrix.translate(x,y,z)

    def rotatex(self,rad):
        self.__matrix.rotatex(rad)

    def rotatey(self,rad):
        self.__matrix.rotatey(rad)

    def rotatez(self,rad):
        self.__matrix.rotatez(rad)

    def scale(self,sx,sy=None,sz=None):
        """scale by ``sx`` on every axis, or per axis when more than
        one factor is given; a missing factor is 1"""
        if sy is None and sz is None:
            sy = sz = sx
        self.__matrix.scale(sx,
                            1.0 if sy is None else sy,
                            1.0 if sz is None else sz)

    ## style
    ## -----

    @property
    def fill_color(self):
        return self.__fillcolor

    def _set_fill_color(self,c):
        self.__fillcolor = c

    @fill_color.setter
    def fill_color(self,c):
        if c is None or colors.iscolor(c):
            self._set_fill_color(c)
        else:
            raise ValueError('bad fill color: {}'.format(c))

    @property
    def stroke_color(self):
        return self.__strokecolor

    def _set_stroke_color(self,c):
        self.__strokecolor = c

    @stroke_color.setter
    def stroke_color(self,c):
        if c is None or colors.iscolor(c):
            self._set_stroke_color(c)
        else:
            raise ValueError('bad stroke color: {}'.format(c))

    @property
    def stroke_weight(self):
        return self.__strokeweight

    def _set_stroke_weight(self,w):
        self.__strokeweight = w

    @stroke_weight.setter
    def stroke_weight(self,w):
        if not isfinitenum(w) or w < 0:
            raise ValueError('bad stroke weight: {}'.format(w))
        self._set_stroke_weight(w)

    ## pure virtual functions -- override for a specific rendering
    ## system
    ## -------------------------------------------------------------

    def draw_box(self,w,h,d):
        logger.debug("pure virtual draw_box called: %s, %s, %s",w,h,d)

    def draw_sphere(self,r):
        logger.debug("pure virtual draw_sphere called: %s",r)

    def draw_line(self,x1,y1,z1,x2,y2,z2):
        logger.debug("pure virtual draw_line called: %s, %s, %s, %s, %s, %s",
                     x1,y1,z1,x2,y2,z2)

    def draw_circle(self,diameter):
        logger.debug("pure virtual draw_circle called: %s",diameter)

    ## non-virtual utility functions
    ## -----------------------------

    def world_point(self,p):
        """map a local point through the current transform"""
        return self.__matrix.apply_point(p)

    def display(self):
        pass


@dataclass(frozen=True)
class SurfaceCall:
    """One recorded surface operation.  ``matrix`` is the world
    transform in effect for primitives, and ``None`` otherwise."""

    name: str
    args: Tuple
    matrix: Optional[xform.Matrix] = None


class RecordingSurface(Surface):
    """Surface that draws nothing and remembers every call made on it"""

    PRIMITIVES = ('draw_box','draw_sphere','draw_line','draw_circle')

    def __init__(self):
        super().__init__()
        self.calls = []

    def __repr__(self):
        return 'RecordingSurface({} calls, depth {})'.format(len(self.calls),self.depth)

    def _record(self,name,*args):
        matrix = self.matrix if name in self.PRIMITIVES else None
        self.calls.append(SurfaceCall(name,tuple(args),matrix))

    def clear(self):
        self.calls = []

    def names(self):
        return [c.name for c in self.calls]

    def count(self,name):
        return sum(1 for c in self.calls if c.name == name)

    def primitives(self):
        return [c for c in self.calls if c.name in self.PRIMITIVES]

    def push_transform(self):
        self._record('push_transform')
        super().push_transform()

    def pop_transform(self):
        self._record('pop_transform')
        super().pop_transform()

    def translate(self,x,y=0,z=0):
        self._record('translate',x,y,z)
        super().translate(x,y,z)

    def rotatex(self,rad):
        self._record('rotatex',rad)
        super().rotatex(rad)

    def rotatey(self,rad):
        self._record('rotatey',rad)
        super().rotatey(rad)

    def rotatez(self,rad):
        self._record('rotatez',rad)
        super().rotatez(rad)

    def scale(self,sx,sy=None,sz=None):
        self._record('scale',sx,sy,sz)
        super().scale(sx,sy,sz)

    def _set_fill_color(self,c):
        self._record('fill_color',c)
        super()._set_fill_color(c)

    def _set_stroke_color(self,c):
        self._record('stroke_color',c)
        super()._set_stroke_color(c)

    def _set_stroke_weight(self,w):
        self._record('stroke_weight',w)
        super()._set_stroke_weight(w)

    def draw_box(self,w,h,d):
        self._record('draw_box',w,h,d)

    def draw_sphere(self,r):
        self._record('draw_sphere',r)

    def draw_line(self,x1,y1,z1,x2,y2,z2):
        self._record('draw_line',x1,y1,z1,x2,y2,z2)

    def draw_circle(self,diameter):
        self._record('draw_circle',diameter)
