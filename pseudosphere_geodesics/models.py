"""Link the models of the hyperbolic plane together.

Every model is reached from a common set of coordinates, namely the
upper half-plane. For each `ModelKind`, `update_transform` builds the
chain of transforms taking upper half-plane coordinates to the screen
coordinates of a panel showing that model.

Geodesics are computed in the Klein model, where they are straight
chords. A `Geodesic` only stores its endpoints; its points are
recomputed from the current endpoints whenever they're asked for.

```python
from pseudosphere_geodesics import models, config

screen_rect = config.panel_rects(1800, 500)[2]
to_screen = models.update_transform("pseudosphere", screen_rect,
                                    config.ViewConfig())

geodesic = models.Geodesic([-6., 1.], [4., 1.])
geodesic.screen_points(models.ModelKind.PSEUDOSPHERE, to_screen)
```

    """

from enum import Enum

import numpy as np

from pseudosphere_geodesics import utils
from pseudosphere_geodesics import transforms
from pseudosphere_geodesics.base import GeometryError
from pseudosphere_geodesics.camera import Camera
from pseudosphere_geodesics.config import PALETTE
from pseudosphere_geodesics.pseudosphere import (PseudosphereTransform,
                                                 BOUNDARY_THRESHOLD)
from pseudosphere_geodesics.shapes import (Rect, Circle, ERROR_THRESHOLD,
                                           HALFPLANE_INVERSION_CIRCLE)

class ModelKind(Enum):
    """Enumerate the linked models of the hyperbolic plane.

    Each kind has several aliases, and compares equal (case
    insensitive) to any of its alias names.

    """
    UPPER_HALF_PLANE = "halfplane"
    HALFPLANE = "halfplane"
    HALFSPACE = "halfplane"
    POINCARE_DISK = "poincare"
    POINCARE = "poincare"
    PSEUDOSPHERE = "pseudosphere"
    KLEIN_DISK = "klein"
    KLEIN = "klein"

    def aliases(self):
        """List all of the different accepted names for this model."""
        return [name for name, member in ModelKind.__members__.items()
                if member is self]

    @property
    def title(self):
        return TITLES[self]

    def __eq__(self, other):
        if self is other:
            return True

        try:
            if other.upper() in self.aliases():
                return True
        except AttributeError:
            pass

        return False

    def __hash__(self):
        return hash(self._name_)

def get_model(model):
    """Get the `ModelKind` for either a `ModelKind` or an alias name."""
    for kind in ModelKind:
        if kind == model:
            return kind

    raise GeometryError("Unknown model of the hyperbolic plane: '{}'".format(
        model))

TITLES = {
    ModelKind.UPPER_HALF_PLANE: "Upper half-plane",
    ModelKind.POINCARE_DISK: "Poincaré disk model",
    ModelKind.PSEUDOSPHERE: "Pseudosphere",
    ModelKind.KLEIN_DISK: "Klein disk model",
}

#geodesics are straight in the Klein model, so two points are enough
#there. The other models stretch them out, the pseudosphere most of all.
GEODESIC_SAMPLES = {
    ModelKind.UPPER_HALF_PLANE: 500,
    ModelKind.POINCARE_DISK: 500,
    ModelKind.PSEUDOSPHERE: 3000,
    ModelKind.KLEIN_DISK: 2,
}

#part of each model shown in its panel
HALFPLANE_RANGE = Rect((-7.5, 0.), (15., 15.))
POINCARE_VIEW = Circle((0., -0.5), 0.6)
KLEIN_VIEW = Circle((0., -0.5), 0.8)
PSEUDOSPHERE_RANGE = Rect((-np.pi, 1.), (2 * np.pi, 60.))

def klein_chart():
    """Upper half-plane coordinates to Klein disk coordinates (and
    back)."""
    return transforms.compose(
        transforms.circle_inversion(HALFPLANE_INVERSION_CIRCLE),
        transforms.poincare_klein(),
        require=transforms.Inverse.EXACT
    )

def _halfplane_transform(screen_rect, config):
    return transforms.compose(
        transforms.flip_y(HALFPLANE_RANGE),
        transforms.LinearTransform2D(HALFPLANE_RANGE, screen_rect)
    )

def _poincare_transform(screen_rect, config):
    return transforms.compose(
        transforms.circle_inversion(HALFPLANE_INVERSION_CIRCLE),
        transforms.LinearTransform2D(POINCARE_VIEW.bounding_rect(),
                                     screen_rect)
    )

def _pseudosphere_transform(screen_rect, config):
    camera = Camera.orbit(config.horizontal_view_angle,
                          config.vertical_view_angle,
                          screen_center=screen_rect.center)
    return transforms.compose(
        transforms.flip_x(),
        PseudosphereTransform(),
        camera.transform()
    )

def _klein_transform(screen_rect, config):
    return transforms.compose(
        klein_chart(),
        transforms.LinearTransform2D(KLEIN_VIEW.bounding_rect(), screen_rect)
    )

_TRANSFORM_BUILDERS = {
    ModelKind.UPPER_HALF_PLANE: _halfplane_transform,
    ModelKind.POINCARE_DISK: _poincare_transform,
    ModelKind.PSEUDOSPHERE: _pseudosphere_transform,
    ModelKind.KLEIN_DISK: _klein_transform,
}

def update_transform(model, screen_rect, config):
    """Build the transform from upper half-plane coordinates to screen
    coordinates for a panel showing the given model.

    Parameters
    ----------
    model : ModelKind or str
        which model the panel shows.
    screen_rect : Rect
        where the panel is on screen.
    config : ViewConfig
        current view settings. Only the pseudosphere uses these (to
        place its camera).

    Returns
    -------
    Transform

    """
    return _TRANSFORM_BUILDERS[get_model(model)](screen_rect, config)

def in_domain(model, points):
    """Determine which upper half-plane points the transform for a model
    can take.

    The disk models need points whose image stays strictly inside the
    boundary circle (the real axis goes to the boundary), and the
    pseudosphere only embeds the region y >= 1.

    """
    model = get_model(model)
    points = np.asarray(points, dtype=float)
    x, y = points[..., 0], points[..., 1]

    if model == ModelKind.UPPER_HALF_PLANE:
        return ~np.isnan(y)
    if model == ModelKind.PSEUDOSPHERE:
        return y >= 1 - BOUNDARY_THRESHOLD

    # 1 - |w|^2 for the image w of (x, y) in the unit disk
    with np.errstate(divide="ignore", invalid="ignore"):
        depth = 4 * y / (x * x + (y + 1) ** 2)
    return depth > ERROR_THRESHOLD

def screen_points(model, transform, points):
    """Apply the transform for a model to a polyline, sending any points
    outside the model's domain to NaN (so the polyline breaks
    there)."""
    points = np.asarray(points, dtype=float)
    valid = in_domain(model, points)

    screen = np.full(points.shape[:-1] + (2,), np.nan)
    if valid.any():
        screen[valid] = transform.forward(points[valid])
    return screen

def klein_geodesic(p1, p2, num_points, chart=None):
    """Get points along the geodesic segment between two upper
    half-plane points.

    The segment is sampled evenly as a straight chord in the Klein
    model, and the samples are mapped back to the upper half-plane.

    Parameters
    ----------
    p1, p2 : ndarray
        endpoints of the segment, in upper half-plane coordinates.
    num_points : int
        number of points to sample (at least 2).
    chart : Transform
        transform from upper half-plane to Klein coordinates. Defaults
        to `klein_chart()`.

    """
    if chart is None:
        chart = klein_chart()

    klein_endpoints = chart.forward(np.array([p1, p2], dtype=float))
    chord = utils.line_points(klein_endpoints[0], klein_endpoints[1],
                              num_points)
    return chart.backward(chord)

class Geodesic:
    """An editable geodesic segment in the hyperbolic plane.

    The endpoints are stored in upper half-plane coordinates and can be
    moved freely; the points of the geodesic are derived from them on
    every call.

    """
    def __init__(self, p1, p2, color="black"):
        self.endpoints = np.array([p1, p2], dtype=float)
        self.color = color
        self.highlighted = [False, False]

    def set_endpoint(self, index, point):
        self.endpoints[index] = point

    def points(self, num_points):
        """Sample the geodesic in upper half-plane coordinates."""
        return klein_geodesic(self.endpoints[0], self.endpoints[1],
                              num_points)

    def screen_points(self, model, transform, num_points=None):
        """Sample the geodesic, with as many points as the given model
        needs, and map it to the screen."""
        model = get_model(model)
        if num_points is None:
            num_points = GEODESIC_SAMPLES[model]
        return screen_points(model, transform, self.points(num_points))

    def nearest_endpoint(self, screen_point, model, transform, radius):
        """Find the endpoint (if any) within `radius` of a point on the
        screen, e.g. to start dragging it.

        Returns
        -------
        int or None
            index of the closest endpoint within range.

        """
        screen_ends = screen_points(model, transform, self.endpoints)
        dists = utils.distance(screen_ends, screen_point)
        dists = np.where(np.isnan(dists), np.inf, dists)

        index = int(np.argmin(dists))
        if dists[index] > radius:
            return None
        return index

    def highlight(self, index=None):
        """Highlight one endpoint (or none, if `index` is `None`)."""
        self.highlighted = [i == index for i in range(2)]

    def __repr__(self):
        return "Geodesic({}, {}, color={!r})".format(
            list(self.endpoints[0]), list(self.endpoints[1]), self.color)

def default_geodesics():
    endpoints = [([-6., 1.], [4., 1.]),
                 ([-1.5, 1.], [2., 1.])]
    return [Geodesic(p1, p2, color)
            for (p1, p2), color in zip(endpoints, PALETTE)]
