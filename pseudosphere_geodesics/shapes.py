"""Rectangles and circles in the plane.

`Rect` describes viewports and displayed ranges; `Circle` carries the
maps between models of the hyperbolic plane which are defined relative
to a circle: inversion in the circle, and the conversion between the
Poincare and Klein disk models when the circle is the boundary of the
disk.

"""

import numpy as np

from pseudosphere_geodesics import utils
from pseudosphere_geodesics.base import GeometryError, DomainError

#how close to the center/boundary we let points get before refusing
#to map them
ERROR_THRESHOLD = 1e-12

class Rect:
    """An axis-aligned rectangle, given by an origin (the corner with
    minimal coordinates) and a nonnegative size vector.

    """
    def __init__(self, origin, size):
        origin = np.asarray(origin, dtype=float)
        size = np.asarray(size, dtype=float)

        if origin.shape != (2,) or size.shape != (2,):
            raise GeometryError(
                "Rect expects a 2D origin and size, got shapes {} and {}".format(
                    origin.shape, size.shape)
            )
        if (size < 0).any():
            raise GeometryError(
                "Rect size must be nonnegative, got {}".format(size)
            )

        self.origin = origin
        self.size = size

    @property
    def xmin(self):
        return self.origin[0]

    @property
    def ymin(self):
        return self.origin[1]

    @property
    def xmax(self):
        return self.origin[0] + self.size[0]

    @property
    def ymax(self):
        return self.origin[1] + self.size[1]

    @property
    def width(self):
        return self.size[0]

    @property
    def height(self):
        return self.size[1]

    @property
    def center(self):
        return self.origin + self.size / 2

    def corners(self):
        """Corners of the rectangle, counterclockwise from the origin."""
        return np.array([[self.xmin, self.ymin],
                         [self.xmax, self.ymin],
                         [self.xmax, self.ymax],
                         [self.xmin, self.ymax]])

    def contains(self, points):
        points = np.asarray(points, dtype=float)
        return ((points[..., 0] >= self.xmin) & (points[..., 0] <= self.xmax) &
                (points[..., 1] >= self.ymin) & (points[..., 1] <= self.ymax))

    def __repr__(self):
        return "Rect({}, {})".format(list(self.origin), list(self.size))

class Circle:
    """A circle in the plane, given by its center and (positive)
    radius.

    """
    def __init__(self, center, radius):
        if radius <= 0:
            raise GeometryError(
                "Circle radius must be positive, got {}".format(radius)
            )
        self.center = np.asarray(center, dtype=float)
        self.radius = float(radius)

    def bounding_rect(self):
        return Rect(self.center - self.radius,
                    np.array([2 * self.radius, 2 * self.radius]))

    def boundary_points(self, num_points=100):
        return utils.ellipse_points(self.center,
                                    [self.radius, 0.],
                                    [0., self.radius],
                                    num_points)

    def _unit_coords(self, points):
        return (np.asarray(points, dtype=float) - self.center) / self.radius

    def _from_unit_coords(self, points):
        return self.center + points * self.radius

    def invert(self, points):
        """Invert points in this circle.

        A point p is sent to c + r^2 (p - c) / |p - c|^2. Inversion is an
        involution away from the center of the circle.

        Raises
        ------
        DomainError
            Raised if any of the points is the center of the circle.

        """
        disp = np.asarray(points, dtype=float) - self.center
        dist_sq = utils.normsq(disp)

        if (dist_sq < ERROR_THRESHOLD).any():
            raise DomainError(
                "Cannot invert the center {} of a circle".format(self.center)
            )

        scale = self.radius * self.radius / dist_sq
        return self.center + disp * np.expand_dims(scale, axis=-1)

    def _assert_inside(self, unit_points):
        if (utils.normsq(unit_points) >= 1 - ERROR_THRESHOLD).any():
            raise DomainError(
                "Disk model conversions expect points strictly inside the"
                " circle of radius {} about {}".format(self.radius, self.center)
            )

    def poincare_to_klein(self, points):
        """Convert Poincare disk coordinates to Klein disk coordinates,
        using this circle as the boundary of both disks.

        A point at Poincare radius rho lies at Klein radius
        2 rho / (1 + rho^2) along the same ray.

        """
        unit = self._unit_coords(points)
        self._assert_inside(unit)

        mult_factor = 2 / (1 + utils.normsq(unit))
        return self._from_unit_coords(unit * np.expand_dims(mult_factor, axis=-1))

    def klein_to_poincare(self, points):
        """Convert Klein disk coordinates to Poincare disk coordinates,
        using this circle as the boundary of both disks.

        """
        unit = self._unit_coords(points)
        self._assert_inside(unit)

        mult_factor = 1 / (1 + np.sqrt(1 - utils.normsq(unit)))
        return self._from_unit_coords(unit * np.expand_dims(mult_factor, axis=-1))

    def __repr__(self):
        return "Circle({}, {})".format(list(self.center), self.radius)

UNIT_CIRCLE = Circle((0., 0.), 1.)

#inversion in this circle exchanges the upper half-plane and the unit
#disk; its center sits below the region we ever draw
HALFPLANE_INVERSION_CIRCLE = Circle((0., -1.), np.sqrt(2))
