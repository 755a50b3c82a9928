import logging
import math
from numbers import Real

import numpy as np

from .. import _sampy_seed
from ..errors import GeneratorError, InvalidParameterError
from ..shape import build, normalize

_log = logging.getLogger(__name__)


def _real(name, x):
    if isinstance(x, bool) or not isinstance(x, Real):
        raise InvalidParameterError(
            f"{name} must be a real number, got {type(x).__name__}"
        )
    return x


class RandomSource:
    """Uniform [0, 1) draws from a zero-argument callable.

    Without a callable, draws come from a numpy Generator seeded with
    `seed`. A value outside [0, 1) raises GeneratorError; exceptions from
    the callable itself are not caught.
    """

    def __init__(self, func=None, seed=None):
        if func is not None and not callable(func):
            raise TypeError(
                f"random source must be callable, got {type(func).__name__}"
            )
        self._func = np.random.default_rng(seed).random if func is None else func

    def get(self):
        v = self._func()
        if isinstance(v, bool) or not isinstance(v, Real) or not 0.0 <= v < 1.0:
            raise GeneratorError(f"random source returned {v!r}, expected [0, 1)")
        return float(v)

    __call__ = get

    def seed(self, s=None):
        "Switch to a numpy Generator seeded with s, replacing any wrapped callable."
        self._func = np.random.default_rng(s).random


_source = RandomSource(seed=_sampy_seed)
if _sampy_seed is not None:
    _log.info("default random source seeded with %d", _sampy_seed)


def _resolve(source):
    if source is None:
        return _source
    return source if isinstance(source, RandomSource) else RandomSource(source)


def get_source():
    return _source


def set_source(source):
    """Replace the default random source, returning the previous one.

    `source` is a RandomSource or any callable returning floats in [0, 1).
    No locking is done; do not swap sources while other threads sample.
    """
    global _source
    prev = _source
    _source = source if isinstance(source, RandomSource) else RandomSource(source)
    _log.debug("default random source replaced by %r", source)
    return prev


def seed(s=None):
    """Reseed the default source.

    The default source then draws from numpy, even if set_source installed
    a different callable before.
    """
    _source.seed(s)
    _log.debug("default random source seeded with %r", s)


def uniform(low=None, high=None, shape=None, *, source=None):
    """Draw from the uniform distribution over [low, high).

    A single bound means [0, bound): uniform(5) is uniform(0, 5), and
    uniform() is uniform(0, 1). `shape` is None, an integer or a sequence
    of integers and determines the structure of the result.
    """
    if high is None:
        high = 1.0 if low is None else low
        low = 0.0
    elif low is None:
        low = 0.0
    _real("low", low)
    _real("high", high)
    if not low < high:
        raise InvalidParameterError("low must be less than high")

    draw = _resolve(source)
    span = high - low

    def sample():
        v = low + draw() * span
        # rounding can land on high itself
        return math.nextafter(high, low) if v >= high else v

    return build(sample, shape)


def exponential(lam, shape=None, *, source=None):
    """Draw from the exponential distribution with rate `lam`.

    Uses the inverse CDF -log(1 - u) / lam; u < 1 keeps it finite.
    """
    _real("rate parameter", lam)
    if not lam > 0:
        raise InvalidParameterError("rate parameter must be greater than 0")

    draw = _resolve(source)
    return build(lambda: -math.log1p(-draw()) / lam, shape)


def rand(*shape, source=None):
    "Uniform [0, 1) draws of the given dimensions; rand() is one float."
    return uniform(0.0, 1.0, normalize(shape) or None, source=source)
