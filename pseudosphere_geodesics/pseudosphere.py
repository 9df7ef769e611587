r"""Embed a strip of the hyperbolic plane in R^3 as the pseudosphere.

The pseudosphere is the surface of revolution of a tractrix about the
z-axis. In coordinates (v, u) with u >= 0 it is parametrized by

    (sech(u) cos(v), sech(u) sin(v), u - tanh(u)),

and the coordinate change (x, y) -> (x, acosh(y)) identifies it with
the region y >= 1 of the upper half-plane (modulo x -> x + 2 pi), which
is how points enter the embedding here.

This module also provides a direct way to trace geodesics on the
embedded surface, by repeatedly extending a short chord along the
surface. This is much slower (and less exact) than getting geodesics
as straight lines in the Klein model, and it is mostly useful as a
check on that construction:

```python
from pseudosphere_geodesics import pseudosphere

pts = pseudosphere.trace_geodesic([-1., 5.1], [-0.99, 5.1], max_points=2000)
```

    """

import numpy as np

from pseudosphere_geodesics import utils
from pseudosphere_geodesics.base import DomainError
from pseudosphere_geodesics.transforms import Transform, Inverse

#roundoff we forgive when a point should be on or above the line y = 1
BOUNDARY_THRESHOLD = 1e-9

#the inverse of z(u) is searched for on this interval
U_SEARCH_RANGE = (0., 1e6)
SEARCH_TOLERANCE = 1e-6
SEARCH_ITERATIONS = 200

#the tracer looks for its next point by rotating the previous one
#through an angle in this range
TRACE_ANGLE_RANGE = (np.pi / 2, 3 * np.pi / 2)

def halfplane_to_embedding_input(points):
    """Take upper half-plane coordinates (x, y) to embedding coordinates
    (v, u) = (x, acosh(y)).

    Raises
    ------
    DomainError
        Raised if any point has y < 1, since those points are not part
        of the embedded strip.

    """
    points = np.asarray(points, dtype=float)
    y = points[..., 1]

    if (y < 1 - BOUNDARY_THRESHOLD).any() or np.isnan(y).any():
        raise DomainError(
            "Only the region y >= 1 of the upper half-plane embeds in the"
            " pseudosphere"
        )

    embedding_coords = np.array(points)
    embedding_coords[..., 1] = np.arccosh(np.maximum(y, 1.))
    return embedding_coords

def embedding_input_to_halfplane(points):
    points = np.asarray(points, dtype=float)
    halfplane_coords = np.array(points)
    halfplane_coords[..., 1] = np.cosh(points[..., 1])
    return halfplane_coords

def radius_from_u(u):
    return 1 / np.cosh(u)

def z_from_u(u):
    return u - np.tanh(u)

def u_from_z(z, full_output=False):
    """Invert z(u) = u - tanh(u) numerically.

    z is increasing in u, so we can just bisect. If `z` is negative (or
    too large) the search can't converge and returns the nearest end of
    `U_SEARCH_RANGE`; see `utils.bisection_search`.

    """
    lower, upper = U_SEARCH_RANGE
    return utils.bisection_search(z_from_u, z, lower, upper,
                                  tolerance=SEARCH_TOLERANCE,
                                  max_iterations=SEARCH_ITERATIONS,
                                  full_output=full_output)

def embed(points):
    """Map upper half-plane points (with y >= 1) to points on the
    pseudosphere in R^3.

    """
    embedding_coords = halfplane_to_embedding_input(points)
    v = embedding_coords[..., 0]
    u = embedding_coords[..., 1]

    radius = radius_from_u(u)
    theta = v

    return np.stack([radius * np.cos(theta),
                     radius * np.sin(theta),
                     z_from_u(u)], axis=-1)

def surface_normal(points):
    """Get the outward unit normal to the pseudosphere at the embedded
    image of some upper half-plane points.

    The normal is undefined along the rim y = 1 of the surface (where
    the profile curve has a cusp), and comes out as NaN there.

    """
    embedding_coords = halfplane_to_embedding_input(points)
    v = embedding_coords[..., 0]
    u = embedding_coords[..., 1]

    dr_du = -np.tanh(u) / np.cosh(u)
    dz_du = np.tanh(u) ** 2

    # rotate the tangent of the profile curve by 90 degrees in the XZ
    # plane, then spin it around the z-axis
    profile_normal = utils.normalize(
        np.stack([dz_du, np.zeros_like(u), -dr_du], axis=-1)
    )
    return np.stack([profile_normal[..., 0] * np.cos(v),
                     profile_normal[..., 0] * np.sin(v),
                     profile_normal[..., 2]], axis=-1)

class PseudosphereTransform(Transform):
    """Upper half-plane coordinates to points on the pseudosphere.

    There is no backward map: recovering half-plane coordinates from a
    point in R^3 would need the point to be known to lie on the
    surface.

    """
    def __init__(self):
        Transform.__init__(self, embed, None, Inverse.UNSUPPORTED,
                           name="pseudosphere")

def _funnel_error(point):
    """Signed distance (measured horizontally) from a point in R^3 to the
    pseudosphere: positive inside, negative outside."""
    actual_radius = utils.norm(point[..., :2])

    # below the rim there's no surface to compare to, so we measure
    # against the rim itself
    z = max(0., point[2])
    expected_radius = radius_from_u(u_from_z(z))

    return expected_radius - actual_radius

def iter_geodesic_points(a, b, max_points):
    """Walk along the pseudosphere following the geodesic through the
    (embedded images of the) upper half-plane points `a` and `b`.

    Each step rotates the previous surface point about the current one,
    around the axis perpendicular to both the incoming chord and the
    surface normal, until it lands back on the surface. The walk stops
    when it runs off the bottom rim of the surface (z < 0), or after
    `max_points` new points.

    Yields
    ------
    ndarray
        `a`, `b`, then each new point of the geodesic, in upper
        half-plane coordinates.

    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)

    surface_a = embed(a)
    surface_b = embed(b)

    yield a
    yield b

    lower, upper = TRACE_ANGLE_RANGE

    for _ in range(max_points):
        normal = surface_normal(b)
        incoming = surface_b - surface_a
        axis = utils.normalize(utils.cross(incoming, normal))

        def candidate(theta):
            return utils.rotate_about_axis(surface_a, surface_b, axis, theta)

        theta = utils.bisection_search(
            lambda theta: _funnel_error(candidate(theta)), 0., lower, upper,
            tolerance=SEARCH_TOLERANCE, max_iterations=SEARCH_ITERATIONS
        )
        surface_c = candidate(theta)

        if not surface_c[2] >= 0:
            # we've walked off the rim of the embedding (a NaN here
            # means the walk degenerated on the rim itself)
            return

        u = u_from_z(surface_c[2])
        delta_v = utils.signed_angle_xy(surface_b, surface_c)
        c = embedding_input_to_halfplane(np.array([b[0] + delta_v, u]))

        yield c

        surface_a, surface_b = surface_b, surface_c
        b = c

def trace_geodesic(a, b, max_points):
    """Get an array of upper half-plane points along the geodesic through
    `a` and `b`, traced directly on the pseudosphere.

    The result has at most `max_points + 2` points (`a` and `b`
    included), and fewer if the walk reaches the rim of the surface.

    """
    return np.array(list(iter_geodesic_points(a, b, max_points)))
