'''
mcest.geometry
==============

Point and sphere value types, and the deterministic geometry used by the
sphere volume estimator: bounding boxes, containment counts and the
theoretical (non-overlap-corrected) volume of a sphere set.
'''

from collections import namedtuple

import numpy as np
from astropy.table import Table




class Point(namedtuple('Point', ['x', 'y', 'z'])):
    '''A point in 3-D space.'''

    __slots__ = ()

    def to_string(self):

        return "({:g}, {:g}, {:g})".format(self.x, self.y, self.z)




class Sphere(namedtuple('Sphere', ['center', 'radius'])):
    '''
    A solid sphere.  A radius of 0 is a valid point-sphere with no volume.
    '''

    __slots__ = ()

    def __new__(cls, center, radius):

        if not radius >= 0:

            raise ValueError("Sphere radius must be non-negative, got {}".format(radius))

        return super().__new__(cls, Point(*center), float(radius))


    @property
    def volume(self):

        return 4.*np.pi*self.radius**3/3.


    def to_string(self):

        return "Center: {}; Radius: {:g}".format(self.center.to_string(), self.radius)




class BoundingBox(namedtuple('BoundingBox', ['min', 'max'])):
    '''
    Axis-aligned box given by its minimum and maximum corners.
    '''

    __slots__ = ()

    @property
    def dimensions(self):
        '''Side lengths of the box along x, y and z.'''

        return tuple(hi - lo for lo, hi in zip(self.min, self.max))


    @property
    def volume(self):

        return float(np.prod(self.dimensions))




def to_array(spheres):
    '''
    Convert a set of spheres to arrays of centers and radii.

    Parameters
    ==========

    spheres : astropy.table.Table, sequence of Sphere, or array_like of shape (N, 4)
        Table columns must be x, y, z and either r or radius.  Array rows are
        (x, y, z, r).

    Returns
    =======

    centers : numpy.ndarray of shape (N, 3)

    radii : numpy.ndarray of shape (N,)

    Raises
    ======

    ValueError
        If any radius is negative, any value is not finite, or the input has
        the wrong shape.
    '''

    if isinstance(spheres, Table):

        radius_name = 'r' if 'r' in spheres.colnames else 'radius'

        centers = np.array([spheres['x'], spheres['y'], spheres['z']], dtype=np.float64).T

        radii = np.array(spheres[radius_name], dtype=np.float64)

    elif len(spheres) > 0 and isinstance(spheres[0], Sphere):

        centers = np.array([s.center for s in spheres], dtype=np.float64)

        radii = np.array([s.radius for s in spheres], dtype=np.float64)

    else:

        array = np.asarray(spheres, dtype=np.float64).reshape(-1, 4)

        centers = array[:,:3]

        radii = array[:,3]

    centers = centers.reshape(-1, 3)

    if not np.all(np.isfinite(centers)) or not np.all(np.isfinite(radii)):

        raise ValueError("Sphere centers and radii must be finite")

    if np.any(radii < 0):

        raise ValueError("Sphere radii must be non-negative")

    return centers, radii




def to_spheres(spheres):
    '''Convert any accepted sphere set representation to a list of Sphere.'''

    centers, radii = to_array(spheres)

    return [Sphere(c, r) for c, r in zip(centers, radii)]




def bounding_box(spheres):
    '''
    Find the tightest axis-aligned box containing every sphere's full extent.

    Parameters
    ==========

    spheres : see `to_array`

    Returns
    =======

    BoundingBox

    Raises
    ======

    ValueError
        If the sphere set is empty, since the box is then undefined.
    '''

    centers, radii = to_array(spheres)

    if len(radii) == 0:

        raise ValueError("Cannot bound an empty set of spheres")

    xmin = np.min(centers - radii[:,np.newaxis], axis=0)

    xmax = np.max(centers + radii[:,np.newaxis], axis=0)

    return BoundingBox(Point(*xmin), Point(*xmax))




def containment_count(points, centers, radii):
    '''
    Count how many spheres contain each point.

    A point on a sphere's surface counts as inside.  Squared distances are
    compared to avoid a square root.

    Parameters
    ==========

    points : numpy.ndarray of shape (M, 3)

    centers : numpy.ndarray of shape (N, 3)

    radii : numpy.ndarray of shape (N,)

    Returns
    =======

    counts : numpy.ndarray of ints, shape (M,)
    '''

    points = np.atleast_2d(points)

    counts = np.zeros(len(points), dtype=np.int64)

    # One pass per sphere keeps memory at O(M) whatever the number of spheres
    for center, radius in zip(centers, radii):

        dist2 = np.sum((points - center)**2, axis=1)

        counts += dist2 <= radius*radius

    return counts




def is_inside_region(points, centers, radii, limit=1):
    '''
    True for each point inside at least `limit` of the spheres.
    '''

    return containment_count(points, centers, radii) >= limit




def theoretical_volume(spheres):
    '''
    Sum of 4/3 pi r^3 over the spheres, with no correction for overlaps.

    This is the total volume of the spheres, not the volume of their union;
    the two agree only when no spheres overlap.
    '''

    centers, radii = to_array(spheres)

    return float(np.sum(4.*np.pi*radii**3/3.))
