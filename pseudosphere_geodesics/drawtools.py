"""This submodule provides an interface between the
`pseudosphere_geodesics.models` submodule and
[matplotlib](https://matplotlib.org/).

The central class in this module is `LinkedDrawing`, which lays out one
panel per model of the hyperbolic plane side by side, and draws the
same geodesics in each of them.

```python
from pseudosphere_geodesics import drawtools, models

drawing = drawtools.LinkedDrawing()
drawing.draw_models()
for geodesic in models.default_geodesics():
    drawing.draw_geodesic(geodesic)

drawing.show()
```

Everything is drawn in screen coordinates, with y growing downward.

    """

import numpy as np

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
from matplotlib.collections import LineCollection

from pseudosphere_geodesics import config as view_config
from pseudosphere_geodesics import models, shapes, utils
from pseudosphere_geodesics.base import DomainError
from pseudosphere_geodesics.models import ModelKind

#points per grid line. The pseudosphere bends the grid the most.
GRID_SAMPLES = {
    ModelKind.UPPER_HALF_PLANE: 200,
    ModelKind.POINCARE_DISK: 200,
    ModelKind.PSEUDOSPHERE: 500,
    ModelKind.KLEIN_DISK: 200,
}

#how far outside its panel a label sits
LABEL_OFFSET = 15

MODEL_ORDER = [ModelKind.UPPER_HALF_PLANE, ModelKind.POINCARE_DISK,
               ModelKind.PSEUDOSPHERE, ModelKind.KLEIN_DISK]

class DrawingError(Exception):
    """Thrown if we try and draw an object in a model which isn't part of
    the drawing.

    """
    pass

class Panel:
    """One model of the hyperbolic plane, drawn in a rectangle on the
    screen."""
    def __init__(self, model, screen_rect, transform=None):
        self.model = models.get_model(model)
        self.screen_rect = screen_rect
        self.transform = transform

    def to_screen(self, points):
        return models.screen_points(self.model, self.transform, points)

def grid_lines(grid_range, step=view_config.GRID_STEP, num_points=200):
    """Get horizontal and vertical lines of a grid covering a range of the
    upper half-plane, as a list of polylines.

    Vertical lines are placed symmetrically about x = 0, which is drawn
    separately as an axis.

    """
    lines = []
    for y in np.arange(grid_range.ymin, grid_range.ymax + step / 2, step):
        lines.append(utils.line_points([grid_range.xmin, y],
                                       [grid_range.xmax, y], num_points))

    xs = np.concatenate([np.arange(step, grid_range.xmax + step / 2, step),
                         -np.arange(step, -grid_range.xmin + step / 2, step)])
    for x in xs:
        lines.append(utils.line_points([x, grid_range.ymin],
                                       [x, grid_range.ymax], num_points))

    return lines

class LinkedDrawing:
    def __init__(self, width=1800, height=500, dpi=100,
                 ax=None,
                 fig=None,
                 view=None,
                 model_order=MODEL_ORDER):

        if ax is None or fig is None:
            fig, ax = plt.subplots(figsize=(width / dpi, height / dpi),
                                   dpi=dpi)

        self.width, self.height = width, height
        self.ax, self.fig = ax, fig

        self.ax.axis("off")
        self.ax.set_aspect("equal")
        self.ax.set_xlim((0, width))
        # screen coordinates grow downward
        self.ax.set_ylim((height, 0))
        self.ax.add_patch(Rectangle((0, 0), width, height,
                                    facecolor=view_config.BACKGROUND_COLOR,
                                    edgecolor="none", zorder=-2))

        self.view = view
        if view is None:
            self.view = view_config.ViewConfig()

        rects = view_config.panel_rects(width, height, count=len(model_order))
        self.panels = [Panel(model, rect)
                       for model, rect in zip(model_order, rects)]
        self.update_transforms()

    def update_transforms(self):
        """Rebuild each panel's transform from the current view
        settings."""
        for panel in self.panels:
            panel.transform = models.update_transform(
                panel.model, panel.screen_rect, self.view
            )

    def get_panel(self, model):
        for panel in self.panels:
            if panel.model == model:
                return panel

        raise DrawingError(
            "Model '{}' is not part of this drawing".format(model)
        )

    def _clip_to(self, artist, panel):
        rect = panel.screen_rect
        clip = Rectangle(rect.origin, rect.width, rect.height,
                         transform=self.ax.transData)
        artist.set_clip_path(clip)

    def draw_polylines(self, panel, polylines, **kwargs):
        """Draw polylines given in upper half-plane coordinates in one
        panel."""
        default_kwargs = {
            "color": "black",
            "linewidth": 1
        }
        for key, value in kwargs.items():
            default_kwargs[key] = value

        segments = [panel.to_screen(line) for line in polylines]
        lines = LineCollection(segments, **default_kwargs)
        self._clip_to(lines, panel)
        self.ax.add_collection(lines)
        return lines

    def draw_panel(self, panel, **kwargs):
        default_kwargs = {
            "facecolor": view_config.PANEL_COLOR,
            "edgecolor": "none",
            "zorder": -1
        }
        for key, value in kwargs.items():
            default_kwargs[key] = value

        rect = panel.screen_rect
        self.ax.add_patch(Rectangle(rect.origin, rect.width, rect.height,
                                    **default_kwargs))
        self.ax.text(rect.center[0], rect.ymin - LABEL_OFFSET,
                     panel.model.title, ha="center", va="center",
                     fontsize=12)

    def draw_grid(self, panel, **kwargs):
        default_kwargs = {
            "color": view_config.MINOR_AXIS_COLOR,
            "linewidth": 0.5
        }
        for key, value in kwargs.items():
            default_kwargs[key] = value

        if panel.model == ModelKind.UPPER_HALF_PLANE:
            grid_range = models.HALFPLANE_RANGE
        elif panel.model == ModelKind.PSEUDOSPHERE:
            grid_range = models.PSEUDOSPHERE_RANGE
        else:
            grid_range = self.view.range

        lines = grid_lines(grid_range, num_points=GRID_SAMPLES[panel.model])
        return self.draw_polylines(panel, lines, **default_kwargs)

    def draw_axes(self, panel):
        """Draw the y-axis, the line y = 1, and the boundary of the
        model (if it has one in view)."""
        grid_range = self.view.range
        samples = GRID_SAMPLES[panel.model]

        unit_line = utils.line_points([grid_range.xmin, 1.],
                                      [grid_range.xmax, 1.], 500)
        y_axis = utils.line_points([0., grid_range.ymin],
                                   [0., grid_range.ymax], 700)

        self.draw_polylines(panel, [unit_line],
                            color=view_config.UNIT_LINE_COLOR)
        self.draw_polylines(panel, [y_axis],
                            color=view_config.MAJOR_AXIS_COLOR)

        if panel.model == ModelKind.UPPER_HALF_PLANE:
            x_axis = utils.line_points([models.HALFPLANE_RANGE.xmin, 0.],
                                       [models.HALFPLANE_RANGE.xmax, 0.],
                                       samples)
            self.draw_polylines(panel, [x_axis],
                                color=view_config.MAJOR_AXIS_COLOR)

        elif (panel.model == ModelKind.POINCARE_DISK or
              panel.model == ModelKind.KLEIN_DISK):
            # the boundary circle is the image of the x-axis, which is
            # outside the domain of the chain itself
            screen_map = panel.transform.stages[-1]
            circle = screen_map.forward(
                shapes.UNIT_CIRCLE.boundary_points(samples)
            )
            lines = LineCollection([circle],
                                   color=view_config.MAJOR_AXIS_COLOR,
                                   linewidth=1)
            self._clip_to(lines, panel)
            self.ax.add_collection(lines)

    def draw_models(self):
        for panel in self.panels:
            self.draw_panel(panel)
            self.draw_grid(panel)
            self.draw_axes(panel)

    def draw_geodesic(self, geodesic, endpoint_size=6, **kwargs):
        """Draw a geodesic segment in every panel, with its endpoints
        marked."""
        default_kwargs = {
            "color": geodesic.color,
            "linewidth": 2
        }
        for key, value in kwargs.items():
            default_kwargs[key] = value

        for panel in self.panels:
            points = geodesic.screen_points(panel.model, panel.transform)
            lines = LineCollection([points], **default_kwargs)
            self._clip_to(lines, panel)
            self.ax.add_collection(lines)

            ends = panel.to_screen(geodesic.endpoints)
            sizes = [endpoint_size * (2 if highlighted else 1)
                     for highlighted in geodesic.highlighted]
            for end, size in zip(ends, sizes):
                marker, = self.ax.plot(end[0], end[1], marker="o",
                                       markersize=size,
                                       color=default_kwargs["color"],
                                       linestyle="none")
                self._clip_to(marker, panel)

    def draw_traced_geodesic(self, points, **kwargs):
        """Draw a polyline of upper half-plane points (e.g. one obtained
        from `pseudosphere.trace_geodesic`) in every panel."""
        default_kwargs = {
            "color": view_config.TRACE_COLOR,
            "linewidth": 2
        }
        for key, value in kwargs.items():
            default_kwargs[key] = value

        for panel in self.panels:
            self.draw_polylines(panel, [points], **default_kwargs)

    def pick_endpoint(self, screen_point, geodesics, radius=10.):
        """Find the geodesic endpoint under a point on the screen.

        Returns
        -------
        tuple or None
            `(geodesic, endpoint index, panel)` for the first endpoint
            within `radius` of `screen_point`, or `None`.

        """
        for panel in self.panels:
            if not panel.screen_rect.contains(screen_point):
                continue
            for geodesic in geodesics:
                index = geodesic.nearest_endpoint(screen_point, panel.model,
                                                  panel.transform, radius)
                if index is not None:
                    return geodesic, index, panel
        return None

    def drag_endpoint(self, geodesic, index, panel, screen_point):
        """Move a geodesic endpoint to the half-plane point under
        `screen_point` in a panel.

        Only panels whose transform has a backward map can be dragged
        in; see `transforms.Inverse`. Points off the hyperbolic plane
        (outside a disk, or below the real axis) raise `DomainError` and
        leave the endpoint where it was.

        """
        point = panel.transform.backward(np.asarray(screen_point, dtype=float))
        if not models.in_domain(ModelKind.POINCARE_DISK, point):
            raise DomainError(
                "Screen point {} is not in the hyperbolic plane".format(
                    screen_point)
            )
        geodesic.set_endpoint(index, point)

    def show(self):
        plt.show()
