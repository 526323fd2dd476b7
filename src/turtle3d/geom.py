## vector and scalar helpers for turtle3d
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

"""vector and scalar helpers for **turtle3d**

Vectors are lists of four numbers, ``[x, y, z, w]``.  Points lie in
the w=1 hyperplane; directions carry w=0 when they are pushed through
a transformation matrix, so that translation does not affect them.
Most operations here only look at the x, y, z components and return
w=1, which keeps the results usable as points.

Angles are always in radians.  ``normangle()`` folds any finite angle
into the half-open interval `[0, 2*pi)`.
"""

from math import *

## constants
epsilon = 0.000005
pi2 = 2.0*pi
halfpi = pi/2.0

## operations on scalars
## -----------------------

## booleans are ints as far as isinstance() is concerned, but a
## boolean is never a coordinate
def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n,bool)) and isinstance(n,(int,float))

def isfinitenum(n):
    """ is it a real number that is neither NaN nor infinite?"""
    return isgoodnum(n) and isfinite(n)

def close(a,b):
    """ are two scalars the same within epsilon
    """
    return abs(a-b) < epsilon

def normangle(rad):
    """fold an angle in radians into `[0, 2*pi)`.  The caller is
    responsible for rejecting non-finite input."""
    r = rad % pi2
    # a tiny negative angle can round up to exactly 2*pi
    if r >= pi2:
        r = 0.0
    return r

## operations on vectors
## ------------------------

def vect(a=False,b=False,c=False,d=False):
    """Convenience function for making a homogeneous coordinates 4 vector
from practically anything
    """
    r = [0,0,0,1]
    if isgoodnum(a):
        r[0]=a
        if isgoodnum(b):
            r[1]=b
            if isgoodnum(c):
                r[2]=c
                if isgoodnum(d):
                    r[3]=d
    elif isinstance(a,(tuple,list)):
        for i in range(min(4,len(a))):
            x=a[i]
            if isgoodnum(x):
                r[i]=x
    return r

def point(x=False,y=False,z=False):
    """Point creation from a point-like sequence or scalars.  The
    result always lies in the w=1 plane."""
    if isinstance(x,(tuple,list)):
        if len(x) < 3:
            raise ValueError('point needs three coordinates: {}'.format(x))
        return [x[0],x[1],x[2],1.0]
    r = vect(x,y,z)
    r[3] = 1.0
    return r

def isvect(x):
    """
    check to see if argument is a proper vector for our purposes
    """
    return isinstance(x,list) and len(x) == 4 and isgoodnum(x[0]) and isgoodnum(x[1]) and isgoodnum(x[2]) and isgoodnum(x[3])

def isfinitepoint(x):
    """ are the x, y, z components of ``x`` all finite numbers?"""
    return isinstance(x,(tuple,list)) and len(x) >= 3 and \
        isfinitenum(x[0]) and isfinitenum(x[1]) and isfinitenum(x[2])

## R^3 -> R^3 functions: ignore w component
## ------------------------------------------------
def add(a,b):
    """ 3 vector, `a + b`"""
    return [a[0]+b[0],a[1]+b[1],a[2]+b[2],1.0]

def sub(a,b):
    """ 3 vector, `a - b`"""
    return [a[0]-b[0],a[1]-b[1],a[2]-b[2],1.0]

def scale3(a,c):
    """ 3 vector, vector ''a'' times scalar ``c``, `a * c`"""
    return [a[0]*c,a[1]*c,a[2]*c,1.0]

## R^4 -> R^4 functions: operate on w component
def scale4(a,c):
    """ 4 vector ``a`` times scalar ``c``"""
    return [a[0]*c,a[1]*c,a[2]*c,a[3]*c]

## R^3 -> R functions -- ignore w component
## ----------------------------------------
def dot(a,b):
    """ 3 vector ``a`` dot ``b`` """
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]

def mag(a):
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])

def dist(a,b):
    """ compute the euclidean distance between two 3 vector points ``a`` and ``b``"""
    return mag(sub(a,b))

def unit(a):
    """ return the unit vector pointing along ``a``.  Raises
    ValueError for a zero-length vector."""
    m = mag(a)
    if m == 0.0 or not isfinite(m):
        raise ValueError('cannot normalize vector: {}'.format(a))
    return scale3(a,1.0/m)

def vclose(a,b):
    """ are two vectors the same, to within epsilon"""
    return close(mag(sub(a,b)),0)

## R^4 -> R functions
## ----------------------------------------
def dot4(a,b):
    """ 4 vect dot product"""
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]+a[3]*b[3]

# pretty printing string formatter for vectors.  Falls back to str()
def vstr(a):
    if not isvect(a):
        return str(a)
    if abs(a[3]-1.0) > epsilon: # not in w=1
        return "[{}, {}, {}, {}]".format(a[0],a[1],a[2],a[3])
    return "[{}, {}, {}]".format(a[0],a[1],a[2])
