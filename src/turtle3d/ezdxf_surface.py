## turtle3d drawing surface that renders 3D DXF entities using the
## ezdxf package.
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

import ezdxf
from ezdxf import colors as dxfcolors
from ezdxf.math import Matrix44
from ezdxf.render import forms

import turtle3d.colors as colors
import turtle3d.surface as surface

logger = logging.getLogger(__name__)

## Boxes and spheres become MESH entities, lines become LINE entities
## and circles closed 3D polylines.  Every vertex is placed in world
## coordinates using the surface's current matrix, so the resulting
## drawing needs no block references or UCS juggling.

## class to provide dxf drawing functionality
class ezdxfSurface(surface.Surface):

    def __init__(self,circle_segments=32,sphere_segments=16):
        super().__init__()

        # setup=False avoids creating default blocks (like _CLOSEDFILLED) that
        # contain SOLID entities unsupported by some CAD programs (e.g., FreeCAD)
        self.__doc = ezdxf.new(dxfversion='R2010', setup=False)
        self.__doc.header['$MEASUREMENT'] = 1 # metric
        self.__doc.header['$INSUNITS'] = 4 # millimeters
        self.__doc.layers.new('TURTLE', dxfattribs={'color': 7}) #white
        self.__msp = self.__doc.modelspace()
        self.__filename = "turtle3d-out"
        self.__layer = 'TURTLE'
        if circle_segments < 3 or sphere_segments < 3:
            raise ValueError('bad segment counts: {}, {}'.format(circle_segments,sphere_segments))
        self.__circlesegments = circle_segments
        self.__spheresegments = sphere_segments

    def __repr__(self):
        return 'an instance of ezdxfSurface'

    ## properties

    @property
    def doc(self):
        return self.__doc

    @property
    def modelspace(self):
        return self.__msp

    @property
    def filename(self):
        return self.__filename

    @filename.setter
    def filename(self,name):
        if not isinstance(name,str):
            raise ValueError('bad (non-string) filename: '+str(name))
        self.__filename = name

    @property
    def layer(self):
        return self.__layer

    @layer.setter
    def layer(self,name):
        if not isinstance(name,str):
            raise ValueError('bad (non-string) layer: '+str(name))
        if name not in self.__doc.layers:
            self.__doc.layers.new(name)
        self.__layer = name

    ## helpers

    def _matrix44(self):
        # ezdxf uses row vectors, so its matrix is the transpose of ours
        m = self.matrix
        return Matrix44([m.get(c,r) for r in range(4) for c in range(4)])

    def _attribs(self,c):
        attribs = {'layer': self.__layer}
        a,r,g,b = colors.unpack(c)
        attribs['true_color'] = dxfcolors.rgb2int((r,g,b))
        if a < 255:
            attribs['transparency'] = dxfcolors.float2transparency(1.0 - a/255.0)
        return attribs

    def _solid_color(self):
        if self.fill_color is not None:
            return self.fill_color
        return self.stroke_color

    def _render(self,mesh):
        c = self._solid_color()
        if c is None:
            return
        mesh.transform(self._matrix44())
        mesh.render_mesh(self.__msp,dxfattribs=self._attribs(c))

    ## overload virtual turtle3d.surface base class drawing methods

    def draw_box(self,w,h,d):
        mesh = forms.cube(center=True)
        mesh.scale(w,h,d)
        self._render(mesh)

    def draw_sphere(self,r):
        mesh = forms.sphere(count=self.__spheresegments,
                            stacks=max(2,self.__spheresegments//2),
                            radius=r)
        self._render(mesh)

    def draw_line(self,x1,y1,z1,x2,y2,z2):
        if self.stroke_color is None:
            return
        p1 = self.world_point([x1,y1,z1,1.0])
        p2 = self.world_point([x2,y2,z2,1.0])
        self.__msp.add_line((p1[0],p1[1],p1[2]),(p2[0],p2[1],p2[2]),
                            dxfattribs=self._attribs(self.stroke_color))

    def draw_circle(self,diameter):
        if self.stroke_color is None:
            return
        verts = forms.circle(self.__circlesegments,radius=diameter/2.0)
        verts = list(self._matrix44().transform_vertices(verts))
        self.__msp.add_polyline3d(verts,close=True,
                                  dxfattribs=self._attribs(self.stroke_color))

    def saveas(self,path):
        self.__doc.saveas(path)
        logger.debug('wrote %d entities to %s',len(self.__msp),path)

    def display(self):
        self.saveas("{}.dxf".format(self.filename))
