from pseudosphere_geodesics import config, drawtools, models, pseudosphere

# look at the pseudosphere from slightly above, a quarter turn around
view = config.ViewConfig.from_sliders(vertical_position=40.,
                                      horizontal_position=25.)

drawing = drawtools.LinkedDrawing(view=view)
drawing.draw_models()

for geodesic in models.default_geodesics():
    drawing.draw_geodesic(geodesic)

# trace one geodesic on the surface itself; it should follow the
# half-circle of radius 5.1 centered at -0.995 in the upper half-plane
traced = pseudosphere.trace_geodesic([-1., 5.1], [-0.99, 5.1], max_points=2000)
drawing.draw_traced_geodesic(traced)

drawing.show()
