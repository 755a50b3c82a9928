"""
Shaped random sampling: draws from simple distributions, returned as a
single value, a flat list or nested lists depending on a shape descriptor.
"""

# The distributions (see random/__init__.py) are one-line transforms of a
# uniform [0, 1) draw. Each builds a closure computing a single sample and
# hands it to shape.build, which calls it once per element of the requested
# shape. All draws go through a RandomSource which can be passed explicitly
# or replaced process-wide.
#
# Configuration is read from the environment at import time:
#   SAMPY_SEED     seed for the default random source
#   SAMPY_VERBOSE  0 (silent), 1 (info) or 2 (debug) logging

import logging
from os import getenv

import numpy

from .errors import (
    GeneratorError,
    InvalidParameterError,
    InvalidShapeError,
    SampyError,
)
from .shape import build

__version__ = "0.2"

_log = logging.getLogger(__name__)
_log.addHandler(logging.NullHandler())


# Lazy load submodules
def __getattr__(name):
    if name == "random":
        import sampy.random as random

        return random
    raise AttributeError(f"module 'sampy' has no attribute '{name}'")


def _env_int(name, lo=None, hi=None):
    val = getenv(name)
    if val is None:
        return None
    try:
        ival = int(val)
    except ValueError:
        raise ValueError(f"Invalid {name} value '{val}': not an integer")
    if (lo is not None and ival < lo) or (hi is not None and ival > hi):
        raise ValueError(f"Invalid {name} value '{val}': out of range")
    return ival


_sampy_seed = _env_int("SAMPY_SEED", lo=0)
_sampy_verbose = _env_int("SAMPY_VERBOSE", lo=0, hi=2) or 0

if _sampy_verbose:
    _handler = logging.StreamHandler()
    _handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    _log.addHandler(_handler)
    _log.setLevel(logging.DEBUG if _sampy_verbose > 1 else logging.INFO)


def to_numpy(a):
    "Convert a sampled value (float or nested lists) to a float64 ndarray."
    return numpy.asarray(a, dtype=numpy.float64)
