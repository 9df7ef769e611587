r"""
pseudosphere_geodesics
======================

`pseudosphere_geodesics` draws the same geodesics of the hyperbolic
plane in several models at once: the upper half-plane, the Poincare
disk, the Klein disk, and the pseudosphere (a surface of revolution in
R^3 with constant negative curvature).

The package is built on top of [numpy](https://numpy.org),
[scipy](https://scipy.org) and [matplotlib](https://matplotlib.org),
and provides modules to:

- compose invertible maps between coordinate spaces, keeping track of
  which maps can actually be inverted (`transforms`)

- convert between the models of the hyperbolic plane (`shapes`,
  `models`), embed a strip of the plane in the pseudosphere
  (`pseudosphere`) and look at it through a pinhole camera (`camera`)

- trace geodesics directly on the pseudosphere, as a check on the
  geodesics obtained from straight lines in the Klein model

- draw linked pictures of all of the models (`drawtools`)

## Example usage

To get points along a geodesic segment in the upper half-plane, and the
corresponding points on the pseudosphere:

```python
from pseudosphere_geodesics import models, pseudosphere

geodesic = models.Geodesic([-6., 1.], [4., 1.])

halfplane_pts = geodesic.points(500)
surface_pts = pseudosphere.embed(halfplane_pts)
```

"""

from pseudosphere_geodesics.base import (GeometryError, DomainError,
                                         TransformError, ConvergenceWarning)
