## matrix transformation operations for 3D homogeneous coordinates in
## turtle3d
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

from math import *
import turtle3d.geom as geom

## a matrix is represented as a list of four four-vectors, one per
## row.  Vectors are plain lists, so we assume that operations like
## Mx imply a column vector: the translation lives in the last column.

## The in-place operations (translate, rotatex, ...) post-multiply,
## M <- M * T, which is how a graphics transform stack behaves: the
## first operation applied is the outermost one, and a point is
## carried through the last operation first.

## All angles are in radians.


class Matrix:
    """4x4 transformation matrix class for transforming homogeneous 3D coordinates"""

    def __init__(self,a=False):
        self.m = [[1,0,0,0],
                  [0,1,0,0],
                  [0,0,1,0],
                  [0,0,0,1]]

        if isinstance(a,Matrix):
            for i in range(4):
                self.setrow(i,a.getrow(i))

        elif isinstance(a,(tuple,list)):
            if len(a) == 4:
                if len(a[0]) == len(a[1]) == len(a[2]) == len(a[3]) == 4:
                    for i in range(4):
                        for j in range(4):
                            x =a[i][j]
                            if geom.isgoodnum(x):
                                self.m[i][j]=x
                            else:
                                raise ValueError('bad element in matrix initialization: {}'.format(x))
                else:
                    raise ValueError('bad rows in matrix initialization: {}'.format(a))
            elif len(a)==16:
                for i in range(4):
                    for j in range(4):
                        x = a[i*4+j]
                        if geom.isgoodnum(x):
                            self.m[i][j]=x
                        else:
                            raise ValueError('bad element in matrix initialization: {}'.format(x))
            else:
                raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
        elif a is not False:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

    def __repr__(self):
        return "Matrix({},{},{},{})".format(self.m[0],self.m[1],
                                            self.m[2],self.m[3])

    def copy(self):
        return Matrix(self)

    #return value indexed by i,j
    def get(self,i,j):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to get: {},{}'.format(i,j))
        return self.m[i][j]

    #set value indexed by i,j
    def set(self,i,j,x):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to set: {},{}'.format(i,j))
        if not geom.isgoodnum(x):
            raise ValueError('bad value passed to set: {}'.format(x))
        self.m[i][j]=x

    def getrow(self,i):
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        return list(self.m[i])

    def getcol(self,j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return [self.m[0][j],
                self.m[1][j],
                self.m[2][j],
                self.m[3][j]]

    def setrow(self,i,x):
        if not geom.isvect(x):
            raise ValueError('bad non-vector passed to setrow: {}'.format(x))
        if i < 0 or i > 3:
            raise ValueError('bad row index passed to setrow: {}'.format(i))
        self.m[i] = list(x)

    def setcol(self,j,x):
        if not geom.isvect(x):
            raise ValueError('bad non-vector passed to setcol: {}'.format(x))
        if j < 0 or j > 3:
            raise ValueError('bad column index passed to setcol: {}'.format(j))
        for i in range(4):
            self.m[i][j] = x[i]

    # matrix multiply.  If x is a matrix, compute MX.  If X is a
    # vector, compute Mx. If x is a scalar, compute xM.

    def mul(self,x):
        if isinstance(x,Matrix):
            result = Matrix()
            for i in range(4):
                row = self.getrow(i)
                for j in range(4):
                    result.m[i][j] = geom.dot4(row,x.getcol(j))
            return result
        elif geom.isvect(x):
            result = geom.vect()
            for i in range(4):
                result[i]=geom.dot4(self.getrow(i),x)
            return result
        elif geom.isgoodnum(x):
            result = Matrix()
            for i in range(4):
                result.setrow(i,geom.scale4(self.getrow(i),x))
            return result

        raise ValueError('bad thing passed to mul(): {}'.format(x))

    ## in-place composition
    ## --------------------

    def _compose(self,x):
        self.m = self.mul(x).m
        return self

    def reset(self):
        """return to the identity transform"""
        self.m = [[1,0,0,0],
                  [0,1,0,0],
                  [0,0,1,0],
                  [0,0,0,1]]
        return self

    def translate(self,x,y=False,z=False):
        if geom.isgoodnum(x):
            delta = [x,
                     y if geom.isgoodnum(y) else 0,
                     z if geom.isgoodnum(z) else 0]
        else:
            delta = x
        return self._compose(Translation(delta))

    def rotatex(self,rad):
        return self._compose(RotationX(rad))

    def rotatey(self,rad):
        return self._compose(RotationY(rad))

    def rotatez(self,rad):
        return self._compose(RotationZ(rad))

    def scale(self,x,y=False,z=False):
        return self._compose(Scale(x,y,z))

    ## application to points and directions
    ## ------------------------------------

    def apply_point(self,p):
        """transform point ``p``, including translation.  Returns a
        point in the w=1 plane."""
        r = self.mul([p[0],p[1],p[2],1.0])
        if r[3] != 1.0:
            if r[3] == 0:
                raise ValueError('point transformed to infinity: {}'.format(p))
            return [r[0]/r[3],r[1]/r[3],r[2]/r[3],1.0]
        return r

    def apply_direction(self,d):
        """transform direction ``d``; translation is ignored"""
        r = self.mul([d[0],d[1],d[2],0.0])
        return [r[0],r[1],r[2],1.0]

    ## inversion
    ## ---------

    def isrigid(self):
        """is this a pure rotation plus translation, i.e. an
        orthonormal upper 3x3 and a [0, 0, 0, 1] bottom row?"""
        if not (geom.close(self.get(3,0),0) and geom.close(self.get(3,1),0)
                and geom.close(self.get(3,2),0) and geom.close(self.get(3,3),1)):
            return False
        for i in range(3):
            for j in range(3):
                d = sum(self.get(i,k)*self.get(j,k) for k in range(3))
                if not geom.close(d,1.0 if i == j else 0.0):
                    return False
        return True

    def inverse(self):
        """return the inverse of this matrix as a new matrix.  Rigid
        transforms are inverted analytically, anything else by
        Gauss-Jordan elimination."""
        if self.isrigid():
            return self._rigid_inverse()
        return self._general_inverse()

    def invert(self):
        """invert this matrix in place"""
        self.m = self.inverse().m
        return self

    def _rigid_inverse(self):
        result = Matrix()
        for i in range(3):
            for j in range(3):
                result.m[i][j] = self.get(j,i)
        t = [self.get(0,3),self.get(1,3),self.get(2,3)]
        for i in range(3):
            result.m[i][3] = -(result.m[i][0]*t[0] +
                               result.m[i][1]*t[1] +
                               result.m[i][2]*t[2])
        return result

    def _general_inverse(self):
        a = [self.getrow(i) + [1.0 if i == j else 0.0 for j in range(4)]
             for i in range(4)]
        for col in range(4):
            pivot = max(range(col,4),key=lambda r: abs(a[r][col]))
            if abs(a[pivot][col]) < geom.epsilon*geom.epsilon:
                raise ValueError('singular matrix cannot be inverted: {}'.format(self))
            a[col],a[pivot] = a[pivot],a[col]
            pv = a[col][col]
            a[col] = [x/pv for x in a[col]]
            for r in range(4):
                if r != col:
                    f = a[r][col]
                    if f != 0.0:
                        a[r] = [x - f*y for x,y in zip(a[r],a[col])]
        return Matrix([row[4:] for row in a])

    def isclose(self,other,tol=geom.epsilon):
        """element-wise comparison with another matrix"""
        for i in range(4):
            for j in range(4):
                if abs(self.get(i,j)-other.get(i,j)) >= tol:
                    return False
        return True


# return the generalized 4x4 arbitrary axis rotation matrix, angle in
# radians
def Rotation(axis,angle,inverse=False):
    m = geom.mag(axis)
    u = axis
    if m < geom.epsilon:
        raise ValueError('zero-length rotation axis not allowed')
    if not geom.close(m,1.0):
        u = geom.scale3(axis,1.0/m)

    if inverse:
        angle *= -1.0

    ux = u[0]
    uy = u[1]
    uz = u[2]

    cang = cos(angle)
    cmin = 1.0-cang
    sang = sin(angle)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin-uz*sang, ux*uz*cmin+uy*sang,0],
         [uy*ux*cmin+uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang,0],
         [uz*ux*cmin-uy*sang, uz*uy*cmin+ux*sang, cang+uz*uz*cmin,0],
         [0,0,0,1]]

    return Matrix(R)

## axis rotations, same handedness as Rotation() about the cardinal
## axes but without the general-axis round-off

def RotationX(angle,inverse=False):
    if inverse:
        angle = -angle
    c = cos(angle)
    s = sin(angle)
    return Matrix([[1,0,0,0],
                   [0,c,-s,0],
                   [0,s,c,0],
                   [0,0,0,1]])

def RotationY(angle,inverse=False):
    if inverse:
        angle = -angle
    c = cos(angle)
    s = sin(angle)
    return Matrix([[c,0,s,0],
                   [0,1,0,0],
                   [-s,0,c,0],
                   [0,0,0,1]])

def RotationZ(angle,inverse=False):
    if inverse:
        angle = -angle
    c = cos(angle)
    s = sin(angle)
    return Matrix([[c,-s,0,0],
                   [s,c,0,0],
                   [0,0,1,0],
                   [0,0,0,1]])

def Translation(delta,inverse=False):
    if inverse:
        delta = geom.scale3(delta,-1.0)
    dx = delta[0]
    dy = delta[1]
    dz = delta[2]
    T = [[1,0,0,dx],
         [0,1,0,dy],
         [0,0,1,dz],
         [0,0,0,1]]
    return Matrix(T)

def Scale(x,y=False,z=False,inverse=False):
    sx = sy = sz = 1.0
    if geom.isgoodnum(x):
        sx = x
        if geom.isgoodnum(y) and geom.isgoodnum(z):
            sy = y
            sz = z
        else:
            sy = sz = x
    elif isinstance(x,(tuple,list)) and len(x) >= 3:
        sx = x[0]
        sy = x[1]
        sz = x[2]
    else:
        raise ValueError('bad scaling values passed to Scale')

    if inverse:
        if sx == 0 or sy == 0 or sz == 0:
            raise ValueError('cannot invert a zero scale')
        sx = 1.0/sx
        sy = 1.0/sy
        sz = 1.0/sz

    S = [[sx,0,0,0],
         [0,sy,0,0],
         [0,0,sz,0],
         [0,0,0,1.0]]
    return Matrix(S)
