"""
Exceptions raised by sampy.
"""


class SampyError(Exception):
    "Base class of all sampy errors"


class InvalidParameterError(SampyError, ValueError):
    "A distribution parameter is out of its domain"


class InvalidShapeError(SampyError, ValueError):
    "A shape descriptor (or one of its dimensions) is malformed"


class GeneratorError(SampyError, RuntimeError):
    "The random source produced a value outside [0, 1)"
