import pytest
import numpy as np

from pseudosphere_geodesics import shapes
from pseudosphere_geodesics import GeometryError, DomainError

@pytest.fixture
def rng():
    return np.random.default_rng(42)

@pytest.fixture
def circle():
    return shapes.Circle((1., -2.), 3.)

@pytest.fixture
def disk_points(rng):
    radii = np.sqrt(rng.random(200)) * 0.999
    angles = rng.random(200) * 2 * np.pi
    return np.stack([radii * np.cos(angles), radii * np.sin(angles)], axis=-1)

def test_rect_properties():
    rect = shapes.Rect((-7.5, 0.), (15., 15.))

    assert rect.xmin == -7.5
    assert rect.xmax == 7.5
    assert rect.ymin == 0.
    assert rect.ymax == 15.
    assert np.allclose(rect.center, [0., 7.5])
    assert rect.contains([0., 1.])
    assert not rect.contains([8., 1.])

def test_bad_rect():
    with pytest.raises(GeometryError):
        shapes.Rect((0., 0.), (-1., 1.))

    with pytest.raises(GeometryError):
        shapes.Rect((0., 0., 0.), (1., 1., 1.))

def test_bad_circle():
    with pytest.raises(GeometryError):
        shapes.Circle((0., 0.), 0.)

def test_bounding_rect(circle):
    rect = circle.bounding_rect()
    assert np.allclose(rect.origin, [-2., -5.])
    assert np.allclose(rect.size, [6., 6.])

def test_inversion_involution(circle, rng):
    points = rng.random((100, 2)) * 20 - 10
    inverted = circle.invert(points)

    assert np.allclose(circle.invert(inverted), points)

    # the inverse point lies on the same ray, r^2 / d away
    dist = np.linalg.norm(points - circle.center, axis=-1)
    inv_dist = np.linalg.norm(inverted - circle.center, axis=-1)
    assert np.allclose(dist * inv_dist, circle.radius ** 2)

def test_inversion_fixes_circle(circle):
    boundary = circle.boundary_points(20)
    assert np.allclose(circle.invert(boundary), boundary)

def test_inversion_at_center(circle):
    with pytest.raises(DomainError):
        circle.invert(circle.center)

    with pytest.raises(DomainError):
        circle.invert(np.array([[0., 0.], circle.center]))

def test_halfplane_inversion():
    circle = shapes.HALFPLANE_INVERSION_CIRCLE

    # the real axis goes to the unit circle, and i goes to the origin
    real_axis = np.stack([np.linspace(-10, 10, 21), np.zeros(21)], axis=-1)
    assert np.allclose(np.linalg.norm(circle.invert(real_axis), axis=-1), 1.)
    assert np.allclose(circle.invert([0., 1.]), [0., 0.])

def test_klein_poincare_round_trip(disk_points):
    unit = shapes.UNIT_CIRCLE
    klein = unit.poincare_to_klein(disk_points)

    assert np.allclose(unit.klein_to_poincare(klein), disk_points)
    assert np.allclose(unit.poincare_to_klein(unit.klein_to_poincare(klein)),
                       klein)

def test_klein_radius():
    rho = 0.5
    klein = shapes.UNIT_CIRCLE.poincare_to_klein([rho, 0.])
    assert np.allclose(klein, [2 * rho / (1 + rho ** 2), 0.])

def test_klein_poincare_other_circle(circle, disk_points):
    points = circle.center + disk_points * circle.radius
    klein = circle.poincare_to_klein(points)
    assert np.allclose(circle.klein_to_poincare(klein), points)

def test_disk_conversion_domain():
    unit = shapes.UNIT_CIRCLE

    with pytest.raises(DomainError):
        unit.poincare_to_klein([1., 0.])

    with pytest.raises(DomainError):
        unit.klein_to_poincare([[0., 0.], [0., 2.]])
