"""
Shape broadcasting for sampling functions.

A shape descriptor is either None (a single value), a non-negative
integer (a flat list of that length) or a sequence of non-negative
integers (nested lists, outermost dimension first).
"""
#
# Dimensions are validated lazily: build() only checks the head of the
# shape at the level it is about to fill, so a malformed inner dimension
# is reported once the recursion reaches it. [0, -1] therefore is [].
#
from numbers import Integral

from .errors import InvalidShapeError


def _dim(d):
    # bool is an Integral but never a meaningful extent
    if isinstance(d, bool) or not isinstance(d, Integral):
        raise InvalidShapeError(
            f"shape dimensions must be integers, got {type(d).__name__}"
        )
    if d < 0:
        raise InvalidShapeError(f"negative dimensions are not allowed: {d}")
    return int(d)


def _fill(sample, shape, level):
    n = _dim(shape[level])
    if level == len(shape) - 1:
        return [sample() for _ in range(n)]
    return [_fill(sample, shape, level + 1) for _ in range(n)]


def build(sample, shape=None):
    """Call sample() once per element of shape and return the result.

    Returns sample() itself if shape is None or empty, a list of n draws
    if shape is an integer n and nested lists for a sequence of integers.
    Every element is a separate call of sample().
    """
    if shape is None:
        return sample()
    if isinstance(shape, (list, tuple)):
        if len(shape) == 0:
            return sample()
        return _fill(sample, tuple(shape), 0)
    if isinstance(shape, Integral) and not isinstance(shape, bool):
        return _fill(sample, (shape,), 0)
    raise InvalidShapeError(
        f"shape must be None, an integer or a sequence of integers, got {type(shape).__name__}"
    )


def normalize(shape):
    "Eagerly validate shape and return it as a tuple of ints (or None)."
    if shape is None:
        return None
    if isinstance(shape, (list, tuple)):
        return tuple(_dim(d) for d in shape)
    if isinstance(shape, Integral) and not isinstance(shape, bool):
        return (_dim(shape),)
    raise InvalidShapeError(
        f"shape must be None, an integer or a sequence of integers, got {type(shape).__name__}"
    )
