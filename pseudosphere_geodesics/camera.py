"""A pinhole camera projecting points in R^3 to screen coordinates.

Screen coordinates follow the usual raster convention: x grows to the
right and y grows *downward*.

    """

import numpy as np

from pseudosphere_geodesics import utils
from pseudosphere_geodesics.base import GeometryError
from pseudosphere_geodesics.transforms import Transform, Inverse

#the orbiting camera used to look at the pseudosphere
ORBIT_DISTANCE = 10.
ORBIT_LOOK_AT = (0., 0., 0.7)
ORBIT_UP = (0., 0., 1.)
ORBIT_FOCAL_LENGTH = 1500.

class Camera:
    """A pinhole camera.

    The projection is computed from the camera's fields on every call,
    so the fields (in particular `position`) can be changed in place to
    move the camera.

    """
    def __init__(self, position, look_at, up, focal_length,
                 screen_center=(0., 0.)):
        """Parameters
        ----------
        position : ndarray
            location of the eye in R^3.
        look_at : ndarray
            point in R^3 which projects to the center of the screen.
        up : ndarray
            direction in R^3 which should point up on screen. Must not
            be parallel to the viewing direction.
        focal_length : float
            distance from the eye to the image plane, in screen units.
        screen_center : ndarray
            screen coordinates of the center of the image.

        """
        if focal_length <= 0:
            raise GeometryError(
                "Focal length must be positive, got {}".format(focal_length)
            )

        self.position = np.array(position, dtype=float)
        self.look_at = np.array(look_at, dtype=float)
        self.up = np.array(up, dtype=float)
        self.focal_length = float(focal_length)
        self.screen_center = np.array(screen_center, dtype=float)

    @staticmethod
    def orbit(horizontal_angle, height, screen_center=(0., 0.),
              distance=ORBIT_DISTANCE, focal_length=ORBIT_FOCAL_LENGTH):
        """Get a camera circling the z-axis, looking at the neck of the
        pseudosphere.

        Parameters
        ----------
        horizontal_angle : float
            angle of the eye around the z-axis, in radians.
        height : float
            z-coordinate of the eye.

        """
        camera = Camera(np.zeros(3), ORBIT_LOOK_AT, ORBIT_UP, focal_length,
                        screen_center)
        camera.set_view(horizontal_angle, height, distance)
        return camera

    def set_view(self, horizontal_angle, height, distance=ORBIT_DISTANCE):
        """Move the eye to the given angle around (and height along) the
        z-axis."""
        self.position[0] = distance * np.cos(horizontal_angle)
        self.position[1] = distance * np.sin(horizontal_angle)
        self.position[2] = height

    def basis(self):
        """Get an orthonormal (right, up, forward) frame for the camera.

        Raises
        ------
        GeometryError
            Raised if the eye sits on its look-at point or the up
            vector is parallel to the viewing direction.

        """
        forward = self.look_at - self.position
        if utils.normsq(forward) == 0:
            raise GeometryError("Camera position and look-at point coincide")
        forward = utils.normalize(forward)

        # Gram-Schmidt the up vector against the viewing direction
        up = self.up - utils.dot(self.up, forward) * forward
        if utils.normsq(up) < 1e-12:
            raise GeometryError(
                "Camera up vector {} is parallel to the viewing direction".format(
                    self.up)
            )
        up = utils.normalize(up)
        right = utils.cross(forward, up)

        return right, up, forward

    def project(self, points):
        """Project points in R^3 to screen coordinates.

        Points on or behind the plane of the eye have no image, and are
        sent to NaN.

        """
        right, up, forward = self.basis()
        rel = np.asarray(points, dtype=float) - self.position

        depth = utils.dot(rel, forward)
        depth = np.where(depth > 0, depth, np.nan)

        scale = self.focal_length / depth
        screen_x = utils.dot(rel, right) * scale
        screen_y = utils.dot(rel, up) * scale

        return self.screen_center + np.stack([screen_x, -screen_y], axis=-1)

    def transform(self):
        """Wrap this camera's projection as a (forward-only) transform.

        The transform reads the camera's fields when it's applied, so it
        follows the camera if it moves.

        """
        # TODO: a backward map would intersect the camera ray with the
        # pseudosphere
        return Transform(self.project, None, Inverse.UNSUPPORTED,
                         name="camera")

    def __repr__(self):
        return "Camera(position={}, look_at={}, up={}, focal_length={})".format(
            list(self.position), list(self.look_at), list(self.up),
            self.focal_length)
