import pytest
import numpy as np

from pseudosphere_geodesics import transforms, shapes
from pseudosphere_geodesics import TransformError, GeometryError
from pseudosphere_geodesics.transforms import Inverse

from pseudosphere_geodesics.utils.testing import *

@pytest.fixture
def rng():
    return np.random.default_rng(2021)

@pytest.fixture
def halfplane_points(rng):
    x = rng.random(100) * 20 - 10
    y = rng.random(100) * 10 + 0.1
    return np.stack([x, y], axis=-1)

@pytest.fixture
def source_rect():
    return shapes.Rect((-7.5, 0.), (15., 15.))

@pytest.fixture
def target_rect():
    return shapes.Rect((40., 50.), (300., 300.))

@pytest.fixture
def inversion():
    return transforms.circle_inversion(shapes.HALFPLANE_INVERSION_CIRCLE)

@pytest.fixture
def exact_chain(inversion, target_rect):
    return transforms.compose(
        transforms.flip_x(),
        inversion,
        transforms.poincare_klein(),
        transforms.LinearTransform2D(
            shapes.Circle((0., -0.5), 0.8).bounding_rect(), target_rect
        )
    )

@pytest.fixture
def forward_only():
    return transforms.Transform(lambda pts: pts * 2, name="doubling")

def test_linear_transform(source_rect, target_rect):
    linear = transforms.LinearTransform2D(source_rect, target_rect)

    assert np.allclose(linear.forward(source_rect.corners()),
                       target_rect.corners())
    assert np.allclose(linear.forward(source_rect.center), target_rect.center)
    assert linear.inverse == Inverse.EXACT

def test_degenerate_linear_transform(source_rect):
    with pytest.raises(GeometryError):
        transforms.LinearTransform2D(shapes.Rect((0., 0.), (0., 1.)),
                                     source_rect)

    flattening = transforms.LinearTransform2D(
        source_rect, shapes.Rect((0., 0.), (0., 1.))
    )
    assert flattening.inverse == Inverse.APPROXIMATE

def test_flip_y(source_rect):
    flip = transforms.flip_y(source_rect)
    assert np.allclose(flip.forward([[1., 0.], [2., 15.], [0., 5.]]),
                       [[1., 15.], [2., 0.], [0., 10.]])
    assert_round_trip(flip, source_rect.corners())

def test_flip_x():
    assert np.allclose(transforms.flip_x().forward([3., 4.]), [-3., 4.])

def test_compose_order():
    add_one = transforms.Transform(lambda pts: pts + 1, lambda pts: pts - 1)
    double = transforms.Transform(lambda pts: pts * 2, lambda pts: pts / 2)

    chain = transforms.compose(add_one, double)
    assert np.allclose(chain.forward([1., 1.]), [4., 4.])
    assert np.allclose(chain.backward([4., 4.]), [1., 1.])

    # g @ f applies f first
    assert np.allclose((double @ add_one).forward([1., 1.]), [4., 4.])
    assert np.allclose((add_one @ double).forward([1., 1.]), [3., 3.])

def test_compose_associative(exact_chain, halfplane_points):
    stages = exact_chain.stages
    left = transforms.compose(transforms.compose(*stages[:2]), *stages[2:])
    right = transforms.compose(stages[0], transforms.compose(*stages[1:]))

    assert len(left.stages) == len(right.stages) == len(stages)
    assert np.allclose(left.forward(halfplane_points),
                       right.forward(halfplane_points))
    assert np.allclose(left.forward(halfplane_points),
                       exact_chain.forward(halfplane_points))

def test_exact_chain_round_trip(exact_chain, halfplane_points):
    assert exact_chain.inverse == Inverse.EXACT
    assert_round_trip(exact_chain, halfplane_points)

def test_inverse_chain(exact_chain, halfplane_points):
    screen = exact_chain.forward(halfplane_points)
    assert np.allclose(exact_chain.inv().forward(screen), halfplane_points)

def test_inversion_involution(inversion, halfplane_points):
    assert np.allclose(inversion.forward(inversion.forward(halfplane_points)),
                       halfplane_points)

def test_unsupported_backward(forward_only, exact_chain):
    assert np.allclose(forward_only.forward([1., 2.]), [2., 4.])
    assert forward_only.inverse == Inverse.UNSUPPORTED

    with pytest.raises(TransformError):
        forward_only.backward([1., 2.])

    with pytest.raises(TransformError):
        forward_only.inv()

    chain = transforms.compose(exact_chain, forward_only)
    assert chain.inverse == Inverse.UNSUPPORTED
    chain.forward([0., 1.])

    with pytest.raises(TransformError):
        chain.backward([0., 1.])

def test_required_inverse(forward_only, exact_chain):
    transforms.compose(exact_chain, require=Inverse.EXACT)

    with pytest.raises(TransformError):
        transforms.compose(exact_chain, forward_only, require=Inverse.EXACT)

def test_weakest_inverse():
    approx = transforms.Transform(np.sin, np.arcsin,
                                  inverse=Inverse.APPROXIMATE)
    chain = transforms.compose(transforms.identity(), approx)
    assert chain.inverse == Inverse.APPROXIMATE

def test_empty_compose():
    with pytest.raises(GeometryError):
        transforms.compose()
