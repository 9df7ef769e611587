"""Provide vector arithmetic and numerical utilities used by the
various geometry tools in this package.

"""

from .core import *

from . import numerical, testing
from .numerical import bisection_search
