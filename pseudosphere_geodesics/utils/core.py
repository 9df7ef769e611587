"""Vector arithmetic on ndarrays of points.

Points are plain float ndarrays whose last axis holds the coordinates,
so every function here broadcasts over any leading axes.

"""

import numpy as np

def point(*coords):
    """Build a point (a float ndarray) from its coordinates."""
    return np.array(coords, dtype=float)

def dot(v1, v2):
    return (np.asarray(v1) * np.asarray(v2)).sum(-1)

def normsq(vectors):
    """squared euclidean norm of an ndarray of vectors"""
    return dot(vectors, vectors)

def norm(vectors):
    return np.sqrt(normsq(vectors))

def distance(p1, p2):
    return norm(np.asarray(p2) - np.asarray(p1))

def normalize(vectors):
    vectors = np.asarray(vectors, dtype=float)
    norms = norm(vectors)
    with np.errstate(divide="ignore", invalid="ignore"):
        return vectors / np.expand_dims(norms, axis=-1)

def cross(v1, v2):
    return np.cross(v1, v2)

def rotation_matrix(angle):
    """Get a 2x2 rotation matrix rotating counterclockwise by the
    specified angle.

    """
    return np.array([[np.cos(angle), -1*np.sin(angle)],
                     [np.sin(angle), np.cos(angle)]])

def rotate_xy(vectors, angle):
    """Rotate 3D vectors counterclockwise about the z-axis."""
    vectors = np.asarray(vectors, dtype=float)
    rotated = np.array(vectors)
    rotated[..., :2] = vectors[..., :2] @ rotation_matrix(angle).T
    return rotated

def rotate_about_axis(points, pivot, axis, angle):
    """Rotate 3D points about the line through `pivot` with direction
    `axis`, by `angle` (right-handed).

    Parameters
    ----------
    points : ndarray
        points to rotate, shape (..., 3).
    pivot : ndarray
        a point on the rotation axis.
    axis : ndarray
        direction of the rotation axis. Need not be normalized.
    angle : float or ndarray
        rotation angle(s), in radians.

    Returns
    -------
    ndarray
        the rotated points.

    """
    k = normalize(axis)
    v = np.asarray(points, dtype=float) - pivot
    angle = np.expand_dims(np.asarray(angle, dtype=float), axis=-1)

    # Rodrigues' rotation formula
    rotated = (v * np.cos(angle) +
               np.cross(k, v) * np.sin(angle) +
               k * np.expand_dims(dot(k, v), axis=-1) * (1 - np.cos(angle)))

    return rotated + pivot

def signed_angle_xy(v1, v2):
    """Signed angle about the z-axis taking the xy-projection of `v1` to
    the xy-projection of `v2`, in (-pi, pi].

    """
    v1 = np.asarray(v1, dtype=float)
    v2 = np.asarray(v2, dtype=float)
    det = v1[..., 0] * v2[..., 1] - v1[..., 1] * v2[..., 0]
    inner = v1[..., 0] * v2[..., 0] + v1[..., 1] * v2[..., 1]
    return np.arctan2(det, inner)

def line_points(p1, p2, num_points):
    """Get `num_points` evenly spaced points on the segment from `p1` to
    `p2`, endpoints included.

    """
    if num_points < 2:
        raise ValueError(
            "Need at least 2 points to sample a segment, got {}".format(
                num_points)
        )
    p1 = np.asarray(p1, dtype=float)
    p2 = np.asarray(p2, dtype=float)
    t = np.linspace(0., 1., num_points)[:, np.newaxis]
    return p1 + t * (p2 - p1)

def ellipse_points(center, axis1, axis2, num_points=100):
    """Get a closed polyline around the ellipse center + cos(t) axis1 +
    sin(t) axis2.

    """
    t = np.linspace(0., 2 * np.pi, num_points)[:, np.newaxis]
    return (np.asarray(center, dtype=float) +
            np.cos(t) * np.asarray(axis1, dtype=float) +
            np.sin(t) * np.asarray(axis2, dtype=float))
