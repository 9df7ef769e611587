import warnings

import pytest
import numpy as np

from pseudosphere_geodesics import utils
from pseudosphere_geodesics import ConvergenceWarning

@pytest.fixture
def rng():
    return np.random.default_rng(1729)

def test_normalize(rng):
    vectors = rng.random((10, 3)) * 2 - 1
    normalized = utils.normalize(vectors)

    assert np.allclose(utils.norm(normalized), 1.)
    assert np.allclose(utils.cross(normalized, vectors), 0.)

def test_distance():
    assert np.isclose(utils.distance(utils.point(1., 2.),
                                     utils.point(4., 6.)), 5.)

def test_rotate_xy():
    rotated = utils.rotate_xy(utils.point(1., 0., 3.), np.pi / 2)
    assert np.allclose(rotated, [0., 1., 3.])

def test_rotate_about_axis(rng):
    points = rng.random((20, 3))
    pivot = np.array([0.5, -1., 2.])
    axis = np.array([1., 2., -0.5])
    angle = 0.7

    rotated = utils.rotate_about_axis(points, pivot, axis, angle)

    # rotation preserves distance to the pivot, and position along the axis
    assert np.allclose(utils.distance(rotated, pivot),
                       utils.distance(points, pivot))
    k = utils.normalize(axis)
    assert np.allclose(utils.dot(rotated - pivot, k),
                       utils.dot(points - pivot, k))

    back = utils.rotate_about_axis(rotated, pivot, axis, -angle)
    assert np.allclose(back, points)

def test_rotate_about_z_axis():
    rotated = utils.rotate_about_axis(utils.point(1., 0., 0.),
                                      np.zeros(3), [0., 0., 1.], np.pi / 2)
    assert np.allclose(rotated, [0., 1., 0.])

def test_signed_angle_xy():
    a = utils.point(1., 0., 5.)
    b = utils.point(0., 2., -1.)

    assert np.isclose(utils.signed_angle_xy(a, b), np.pi / 2)
    assert np.isclose(utils.signed_angle_xy(b, a), -np.pi / 2)

def test_line_points():
    pts = utils.line_points([0., 0.], [2., 4.], 5)

    assert pts.shape == (5, 2)
    assert np.allclose(pts[0], [0., 0.])
    assert np.allclose(pts[-1], [2., 4.])
    assert np.allclose(np.diff(pts, axis=0), [0.5, 1.])

    with pytest.raises(ValueError):
        utils.line_points([0., 0.], [1., 1.], 1)

def test_ellipse_points():
    pts = utils.ellipse_points([1., 1.], [2., 0.], [0., 1.], 50)
    x, y = (pts - [1., 1.]).T
    assert np.allclose((x / 2) ** 2 + y ** 2, 1.)
    assert np.allclose(pts[0], pts[-1])

def test_bisection_linear():
    root = utils.bisection_search(lambda x: x - 5, 0., 0., 10.,
                                  tolerance=1e-6)
    assert abs(root - 5) < 1e-6

def test_bisection_target():
    root = utils.bisection_search(np.exp, 3., 0., 10., tolerance=1e-9)
    assert np.isclose(root, np.log(3.))

def test_bisection_decreasing():
    root, converged = utils.bisection_search(lambda x: -x ** 3, -8., 0., 10.,
                                             full_output=True)
    assert converged
    assert abs(root - 2) < 2e-6

def test_bisection_endpoint_root():
    root, converged = utils.bisection_search(lambda x: x, 0., 0., 1.,
                                             full_output=True)
    assert converged
    assert root == 0.

def test_bisection_unbracketed():
    root, converged = utils.bisection_search(lambda x: x, 20., 0., 10.,
                                             full_output=True)
    assert not converged
    assert root == 10.

    with pytest.warns(ConvergenceWarning):
        root = utils.bisection_search(lambda x: x, -3., 0., 10.)
    assert root == 0.

def test_bisection_iteration_cap():
    root, converged = utils.bisection_search(lambda x: x - np.pi, 0., 0., 10.,
                                             tolerance=1e-12,
                                             max_iterations=5,
                                             full_output=True)
    assert not converged
    assert 0. <= root <= 10.

    with pytest.warns(ConvergenceWarning):
        utils.bisection_search(lambda x: x - np.pi, 0., 0., 10.,
                               tolerance=1e-12, max_iterations=5)

def test_bisection_converged_quietly():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        utils.bisection_search(lambda x: x - 1, 0., 0., 10.)
