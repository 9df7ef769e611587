import numpy as np

def assert_round_trip(transform, points, atol=1e-8):
    """Check that `transform.backward` undoes `transform.forward` on an
    array of points."""
    there = transform.forward(points)
    back = transform.backward(there)

    assert back.shape == np.shape(points)
    assert np.allclose(back, points, atol=atol)

def assert_monotonic(values):
    steps = np.diff(values)
    assert np.all(steps > 0) or np.all(steps < 0)
