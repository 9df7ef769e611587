"""Compose maps between coordinate spaces.

A `Transform` is a pair of vectorized functions, `forward` and
`backward`, each taking an ndarray of points (coordinates along the last
axis) to another. Every transform declares how trustworthy its backward
leg is via the `Inverse` enumeration, and composing transforms keeps
track of that declaration, so that a chain which passes through e.g. a
camera projection refuses to run backwards instead of silently
returning garbage.

```python
from pseudosphere_geodesics import transforms, shapes

unit_square = shapes.Rect((0., 0.), (1., 1.))
screen = shapes.Rect((40., 50.), (300., 300.))

to_screen = transforms.compose(
    transforms.flip_y(unit_square),
    transforms.LinearTransform2D(unit_square, screen)
)

to_screen.forward([0.5, 0.25])
```
    array([190., 275.])

    """

from enum import IntEnum

import numpy as np

from pseudosphere_geodesics.base import GeometryError, TransformError
from pseudosphere_geodesics.shapes import UNIT_CIRCLE

class Inverse(IntEnum):
    """How well the backward leg of a transform inverts its forward
    leg. Ordered from weakest to strongest.

    """
    UNSUPPORTED = 0
    APPROXIMATE = 1
    EXACT = 2

def _unsupported(points):
    raise TransformError("This transform has no backward map")

class Transform:
    """A pair of maps (forward, backward) between two coordinate
    spaces.

    """
    def __init__(self, forward, backward=None, inverse=Inverse.EXACT,
                 name=None):
        """Parameters
        ----------
        forward : callable
            map taking an ndarray of points to an ndarray of points.
        backward : callable
            map going the other way. If `None`, the transform has no
            backward map and `inverse` is forced to
            `Inverse.UNSUPPORTED`.
        inverse : Inverse
            how exactly `backward` undoes `forward`.
        name : str
            label used when reporting errors.

        """
        if backward is None:
            inverse = Inverse.UNSUPPORTED

        self._forward = forward
        self._backward = backward
        self.inverse = Inverse(inverse)
        self.name = name or self.__class__.__name__

    @property
    def stages(self):
        return (self,)

    def forward(self, points):
        return self._forward(np.asarray(points, dtype=float))

    def backward(self, points):
        """Apply the backward map.

        Raises
        ------
        TransformError
            Raised if this transform does not support a backward map.

        """
        if self.inverse == Inverse.UNSUPPORTED:
            raise TransformError(
                "Transform '{}' does not support a backward map".format(
                    self.name)
            )
        return self._backward(np.asarray(points, dtype=float))

    def inv(self):
        """Get the transform with forward and backward legs swapped."""
        if self.inverse == Inverse.UNSUPPORTED:
            raise TransformError(
                "Cannot invert transform '{}'".format(self.name)
            )
        return Transform(self.backward, self.forward, self.inverse,
                         name="inverse of {}".format(self.name))

    def __call__(self, points):
        return self.forward(points)

    def __matmul__(self, other):
        """`self @ other` applies `other` first."""
        return ComposedTransform(other, self)

    def __repr__(self):
        return "<{} '{}' ({})>".format(self.__class__.__name__, self.name,
                                      self.inverse.name.lower())

class ComposedTransform(Transform):
    """A chain of transforms, applied left to right going forward and
    right to left going backward.

    """
    def __init__(self, *transforms, require=None):
        """Parameters
        ----------
        transforms : Transform
            stages of the chain, in the order the forward maps are
            applied. Nested chains are flattened.
        require : Inverse
            if given, raise `TransformError` unless every stage has a
            backward map at least this good.

        """
        stages = []
        for transform in transforms:
            stages.extend(transform.stages)

        if len(stages) == 0:
            raise GeometryError("Cannot compose an empty chain of transforms")

        self._stages = tuple(stages)
        self.inverse = min(stage.inverse for stage in self._stages)
        self.name = " -> ".join(stage.name for stage in self._stages)

        if require is not None and self.inverse < require:
            weak = [stage.name for stage in self._stages
                    if stage.inverse < require]
            raise TransformError(
                "Backward map required to be {}, but not provided by: {}".format(
                    Inverse(require).name.lower(), ", ".join(weak))
            )

    @property
    def stages(self):
        return self._stages

    def forward(self, points):
        for stage in self._stages:
            points = stage.forward(points)
        return points

    def backward(self, points):
        if self.inverse == Inverse.UNSUPPORTED:
            raise TransformError(
                "Transform chain '{}' does not support a backward map".format(
                    self.name)
            )
        for stage in reversed(self._stages):
            points = stage.backward(points)
        return points

    def inv(self):
        return ComposedTransform(*[stage.inv() for stage in
                                   reversed(self._stages)])

def compose(*transforms, require=None):
    """Chain transforms together, applying them in the given order."""
    return ComposedTransform(*transforms, require=require)

def identity():
    return Transform(lambda points: points, lambda points: points,
                     name="identity")

class LinearTransform2D(Transform):
    """Map one rectangle affinely onto another, axis by axis."""
    def __init__(self, source, target):
        if (source.size == 0).any():
            raise GeometryError(
                "Cannot map out of the degenerate rectangle {}".format(source)
            )
        self.source = source
        self.target = target

        scale = target.size / source.size
        inv_scale = np.zeros_like(scale)
        nonzero = scale != 0
        inv_scale[nonzero] = 1 / scale[nonzero]

        def forward(points):
            return target.origin + (points - source.origin) * scale

        def backward(points):
            return source.origin + (points - target.origin) * inv_scale

        inverse = Inverse.EXACT if nonzero.all() else Inverse.APPROXIMATE
        Transform.__init__(self, forward, backward, inverse,
                           name="rect to rect")

def flip_x():
    """Mirror in the y-axis."""
    def mirror(points):
        flipped = np.array(points)
        flipped[..., 0] = -points[..., 0]
        return flipped

    return Transform(mirror, mirror, name="flip x")

def flip_y(rect):
    """Mirror a rectangle in place, top to bottom."""
    def mirror(points):
        flipped = np.array(points)
        flipped[..., 1] = rect.ymax - points[..., 1] + rect.ymin
        return flipped

    return Transform(mirror, mirror, name="flip y")

def circle_inversion(circle):
    return Transform(circle.invert, circle.invert,
                     name="inversion in {}".format(circle))

def poincare_klein(circle=UNIT_CIRCLE):
    """Poincare disk coordinates to Klein disk coordinates (and back)."""
    return Transform(circle.poincare_to_klein, circle.klein_to_poincare,
                     name="poincare to klein")
