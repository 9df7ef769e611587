"""View configuration for the linked model drawings.

Module-level constants give the defaults; a `ViewConfig` carries the
state which changes while the user is looking at the drawing (the
camera angles), so that the transforms built from it stay pure
functions of their inputs.

"""

import numpy as np

from pseudosphere_geodesics.shapes import Rect

#range of the upper half-plane covered by the grid in the disk models
DEFAULT_RANGE = Rect((-20., 0.), (40., 40.))

#slider positions run from 0 to 100
SLIDER_MAX = 100.

#panel layout, in screen units
PANEL_MARGIN = 40.
PANEL_TOP = 50.

#(guaranteed to be random)
PALETTE = ["#1c3fa3", "#2f9705", "#2387c4", "#0db29f", "#58152f",
           "#620b4d", "#9fa019", "#626790", "#9d26c7", "#ab25c7"]

TRACE_COLOR = "#c878c8"
MAJOR_AXIS_COLOR = "#323232"
MINOR_AXIS_COLOR = "#d2d2d2"
UNIT_LINE_COLOR = "#963232"
BACKGROUND_COLOR = "#f0f0f0"
PANEL_COLOR = "white"

#spacing of the grid lines drawn in each model
GRID_STEP = 0.5

def vertical_angle_from_slider(position):
    return 20. - 40. * position / SLIDER_MAX

def horizontal_angle_from_slider(position):
    return 2 * np.pi * position / SLIDER_MAX

class ViewConfig:
    """Adjustable state of the view.

    Attributes
    ----------
    horizontal_view_angle : float
        angle of the camera around the axis of the pseudosphere, in
        radians.
    vertical_view_angle : float
        height of the camera above the plane z = 0. (The name is
        historical: the slider controlling it is labeled as an angle.)
    range : Rect
        part of the upper half-plane to draw grid lines over.

    """
    def __init__(self, horizontal_view_angle=np.pi, vertical_view_angle=0.,
                 range=DEFAULT_RANGE):
        self.horizontal_view_angle = horizontal_view_angle
        self.vertical_view_angle = vertical_view_angle
        self.range = range

    @staticmethod
    def from_sliders(vertical_position=SLIDER_MAX / 2,
                     horizontal_position=SLIDER_MAX / 2, **kwargs):
        return ViewConfig(
            horizontal_view_angle=horizontal_angle_from_slider(horizontal_position),
            vertical_view_angle=vertical_angle_from_slider(vertical_position),
            **kwargs
        )

    def set_sliders(self, vertical_position=None, horizontal_position=None):
        if vertical_position is not None:
            self.vertical_view_angle = vertical_angle_from_slider(
                vertical_position)
        if horizontal_position is not None:
            self.horizontal_view_angle = horizontal_angle_from_slider(
                horizontal_position)

    def __repr__(self):
        return "ViewConfig(horizontal_view_angle={}, vertical_view_angle={})".format(
            self.horizontal_view_angle, self.vertical_view_angle)

def panel_rects(width, height, count=4, margin=PANEL_MARGIN, top=PANEL_TOP):
    """Lay out `count` square panels side by side on a screen of the
    given size."""
    size = min(height - margin * 2, (width - margin * (count + 1)) / count)
    if size <= 0:
        raise ValueError(
            "A {}x{} screen is too small for {} panels".format(
                width, height, count)
        )

    return [Rect((margin + (margin + size) * i, top), (size, size))
            for i in range(count)]
