import warnings

import numpy as np
from scipy.optimize import bisect

from ..base import ConvergenceWarning

#defaults shared by every inverse without a closed form
TOLERANCE = 1e-6
MAX_ITERATIONS = 200

def bisection_search(func, target, lower, upper, tolerance=TOLERANCE,
                     max_iterations=MAX_ITERATIONS, full_output=False):
    """Find x in [lower, upper] with func(x) == target.

    `func` must be monotonic on the interval, but may be either
    increasing or decreasing.

    Parameters
    ----------
    func : callable
        scalar function of one real variable.
    target : float
        value to solve for.
    lower, upper : float
        bracketing interval.
    tolerance : float
        width of the final bracket.
    max_iterations : int
        maximum number of halvings.
    full_output : bool
        if `True`, return a pair `(root, converged)` instead of
        warning on non-convergence.

    Returns
    -------
    float or tuple
        the best available estimate of the root (and, if
        `full_output` is specified, whether the search converged).

    """
    def residual(x):
        return func(x) - target

    f_lower = residual(lower)
    f_upper = residual(upper)

    if f_lower == 0:
        return _result(lower, True, full_output)
    if f_upper == 0:
        return _result(upper, True, full_output)

    if np.sign(f_lower) == np.sign(f_upper) or np.isnan(f_lower * f_upper):
        # target isn't bracketed, so the closest bound is the best we have
        root = lower
        if np.abs(f_upper) < np.abs(f_lower):
            root = upper
        return _result(root, False, full_output,
                       "target {} is not bracketed on [{}, {}]".format(
                           target, lower, upper))

    root, results = bisect(residual, lower, upper, xtol=tolerance,
                           maxiter=max_iterations, full_output=True,
                           disp=False)

    return _result(root, results.converged, full_output,
                   "bisection did not converge in {} iterations".format(
                       max_iterations))

def _result(root, converged, full_output, message=None):
    if full_output:
        return root, converged

    if not converged:
        warnings.warn(message, ConvergenceWarning, stacklevel=3)

    return root
