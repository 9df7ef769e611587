class GeometryError(Exception):
    """Thrown if there's an attempt to construct a geometric object with
    numerical data that doesn't make sense for that type of object.

    """
    pass

class DomainError(GeometryError):
    """Thrown if a map is applied to a point outside of its domain, e.g. a
    circle inversion at the center of the circle.

    """
    pass

class TransformError(GeometryError):
    """Thrown if a transform is used in a direction it does not
    support.

    """
    pass

class ConvergenceWarning(UserWarning):
    """Issued when a numerical search stops before reaching its
    tolerance.

    """
    pass
