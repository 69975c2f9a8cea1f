""" Cross-section geometry for open channels and circular conduits

Each function maps a section shape and its fill dimensions to wetted area,
wetted perimeter, and hydraulic radius, returned as a
:class:`SectionGeometry` named tuple. Lengths are in meters."""

from collections import namedtuple
from math import acos, sin, sqrt

import scipy.constants as sc

from . import _logger
from . import constants as hc
from . import validate

__author__ = "hydrodesign developers"
__license__ = "mit"

#: Wetted area (m**2), wetted perimeter (m), and hydraulic radius (m)
SectionGeometry = namedtuple('SectionGeometry',
                             ['area', 'perimeter', 'hradius'])

SHAPES = ('rectangular', 'trapezoidal', 'circular')


def _section(area, perimeter):
    """Close out a section; reject perimeters too small to divide by"""
    area = validate.positive('area', area)
    perimeter = validate.positive('perimeter', perimeter)
    if perimeter < hc.min_perimeter:
        raise validate.InvalidInputError(
            'perimeter', perimeter,
            'section is degenerate (wetted perimeter ~ 0)')
    return SectionGeometry(area, perimeter, area / perimeter)


def rectangular(width, depth):
    """Rectangular channel section

    Args:
        width (float): channel width, in meters
        depth (float): water depth, in meters

    Returns:
        (SectionGeometry): area, wetted perimeter, hydraulic radius

    Raises:
        InvalidInputError: width or depth is not positive
    """
    width = validate.positive('width', width)
    depth = validate.positive('depth', depth)

    with validate.numeric('area'):
        return _section(width * depth, width + 2.0 * depth)


def trapezoidal(bottom_width, depth, side_slope):
    """Trapezoidal channel section

    Args:
        bottom_width (float): channel bed width, in meters
        depth (float): water depth, in meters
        side_slope (float): bank slope z, horizontal run per unit rise;
          zero gives a rectangle

    Returns:
        (SectionGeometry): area, wetted perimeter, hydraulic radius

    Raises:
        InvalidInputError: bottom width or depth not positive, or negative
          side slope
    """
    bottom_width = validate.positive('bottom_width', bottom_width)
    depth = validate.positive('depth', depth)
    side_slope = validate.nonnegative('side_slope', side_slope)

    with validate.numeric('area'):
        area = (bottom_width + side_slope * depth) * depth
        perimeter = bottom_width + 2.0 * depth * sqrt(1.0 + side_slope**2)
        return _section(area, perimeter)


def central_angle(diameter, depth):
    """Angle subtended at the pipe center by the free surface, radians

    Args:
        diameter (float): pipe inner diameter, in meters
        depth (float): water depth above the invert, in meters

    Returns:
        (float): central angle, 0 < theta <= 2 pi
    """
    radius = diameter / 2.0
    if depth < radius:
        return 2.0 * acos((radius - depth) / radius)
    return 2.0 * sc.pi - 2.0 * acos((depth - radius) / radius)


def circular_partial(diameter, depth):
    """Partially filled circular section

    A depth equal to the diameter is the full pipe limit (central angle of
    2 pi). Depths so close to zero that the wetted perimeter vanishes are
    rejected.

    Args:
        diameter (float): pipe inner diameter, in meters
        depth (float): water depth above the invert, in meters

    Returns:
        (SectionGeometry): area, wetted perimeter, hydraulic radius

    Raises:
        InvalidInputError: non-positive dimensions, depth above the crown,
          or a degenerate wetted perimeter
    """
    diameter = validate.positive('diameter', diameter)
    depth = validate.positive('depth', depth)
    validate.at_most('depth', depth, 'diameter', diameter)

    radius = diameter / 2.0
    theta = central_angle(diameter, depth)
    _logger.debug('Circular section D={0:0.4E} y={1:0.4E} theta={2:0.6f}'
                  .format(diameter, depth, theta))

    with validate.numeric('area'):
        area = radius**2 / 2.0 * (theta - sin(theta))
        perimeter = radius * theta
        return _section(area, perimeter)


def circular_full(diameter):
    """Full circular section; closed form of ``circular_partial(D, D)``"""
    diameter = validate.positive('diameter', diameter)
    with validate.numeric('area'):
        area = validate.positive('area', sc.pi * diameter**2 / 4.0)
    return SectionGeometry(area, sc.pi * diameter, diameter / 4.0)


def dimension(dims, name):
    """Fetch a named dimension from a keyword mapping

    Raises:
        InvalidInputError: the dimension is missing
    """
    if name not in dims:
        raise validate.InvalidInputError(name, None,
                                         'required for this section shape')
    return dims[name]


def section(shape, **dims):
    """Dispatch to a section function by shape name

    Args:
        shape (str): one of 'rectangular', 'trapezoidal', or 'circular'
        dims: keyword dimensions accepted by the matching function

    Returns:
        (SectionGeometry): area, wetted perimeter, hydraulic radius

    Raises:
        ValueError: unknown shape name
        InvalidInputError: a dimension the shape needs is missing or invalid
    """
    key = str(shape).strip().lower()
    if key == 'rectangular':
        return rectangular(dimension(dims, 'width'),
                           dimension(dims, 'depth'))
    elif key == 'trapezoidal':
        return trapezoidal(dimension(dims, 'bottom_width'),
                           dimension(dims, 'depth'),
                           dims.get('side_slope', 0.0))
    elif key == 'circular':
        return circular_partial(dimension(dims, 'diameter'),
                                dimension(dims, 'depth'))

    raise ValueError('Unknown section shape "{0:s}"; expected one of {1:s}'
                     .format(str(shape), ', '.join(SHAPES)))
