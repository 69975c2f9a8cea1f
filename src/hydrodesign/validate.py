"""Argument checks shared by the geometry, flow, and design modules.

Every public calculation re-validates its numeric inputs before evaluating
a formula so that bad input surfaces as :class:`InvalidInputError` rather
than as a silent NaN or infinity."""

from contextlib import contextmanager
from math import isfinite

from . import _logger

__author__ = "hydrodesign developers"
__license__ = "mit"


class InvalidInputError(ValueError):
    """A required numeric parameter is missing, non-finite, or out of range

    Attributes:
        name (str): name of the offending parameter
        value (float): value that was rejected
    """

    def __init__(self, name, value, reason):
        self.name = name
        self.value = value
        super().__init__('Invalid {0:s} ({1!r}): {2:s}'
                         .format(name, value, reason))


def _as_float(name, value):
    try:
        fvalue = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(name, value, 'not a number')

    if not isfinite(fvalue):
        raise InvalidInputError(name, value, 'not finite')

    return fvalue


def positive(name, value):
    """Return ``value`` as a float if it is finite and strictly positive

    Args:
        name (str): parameter name for error messages
        value (float): value to check

    Returns:
        (float): validated value

    Raises:
        InvalidInputError: value is non-numeric, non-finite, or <= 0
    """
    fvalue = _as_float(name, value)
    if fvalue <= 0.0:
        _logger.debug('Rejected {0:s} = {1!r}; must be > 0'
                      .format(name, value))
        raise InvalidInputError(name, value, 'must be greater than zero')
    return fvalue


def nonnegative(name, value):
    """Return ``value`` as a float if it is finite and zero or positive

    Raises:
        InvalidInputError: value is non-numeric, non-finite, or < 0
    """
    fvalue = _as_float(name, value)
    if fvalue < 0.0:
        _logger.debug('Rejected {0:s} = {1!r}; must be >= 0'
                      .format(name, value))
        raise InvalidInputError(name, value, 'must not be negative')
    return fvalue


def at_most(name, value, limit_name, limit):
    """Raise unless ``value <= limit``"""
    if value > limit:
        raise InvalidInputError(name, value, 'must not exceed {0:s} ({1!r})'
                                .format(limit_name, limit))
    return value


@contextmanager
def numeric(name):
    """Report arithmetic overflow or underflow in a formula as invalid input

    Args:
        name (str): quantity being evaluated, for error messages

    Raises:
        InvalidInputError: the enclosed block raised an ArithmeticError
    """
    try:
        yield
    except ArithmeticError as err:
        _logger.debug('Arithmetic failure evaluating {0:s}: {1:s}'
                      .format(name, str(err)))
        raise InvalidInputError(name, None, 'numerically degenerate ({0:s})'
                                .format(str(err)))
