""" Sampled performance curves for plotting and export

Each function returns an ordered tuple of :class:`CurvePoint` pairs: the
independent variable (depth or flow) and the dependent one (discharge or
head loss). Curves are for display only; no design decision reads them."""

from collections import namedtuple

import numpy as np

from . import _logger
from . import constants as hc
from . import validate
from .flow import darcy_weisbach, hazen_williams, manning
from .geometry import dimension, rectangular, section

__author__ = "hydrodesign developers"
__license__ = "mit"

CurvePoint = namedtuple('CurvePoint', ['x', 'y'])


def grid(start, stop, step):
    """Evenly spaced values from ``start`` to ``stop`` inclusive

    Values are built as ``start + k * step`` and rounded, so a 0.1 m grid
    yields exactly 0.3 rather than an accumulated 0.30000000000000004.

    Args:
        start (float): first value
        stop (float): last value (included if it lies on the grid)
        step (float): spacing, > 0

    Returns:
        (tuple): grid values as floats; empty if ``stop < start``
    """
    step = validate.positive('step', step)
    if stop < start:
        return ()
    count = int(np.floor((stop - start) / step + 1.0E-9)) + 1
    values = np.round(start + step * np.arange(count), 10)
    return tuple(float(v) for v in values)


def design_curve(width, slope, manning_n, depth,
                 step=hc.design_curve_step, span=hc.design_curve_span):
    """Depth-discharge curve of a rectangular channel at a chosen depth

    Depths run from ``step`` to ``span`` times the chosen depth.

    Args:
        width (float): channel width, in meters
        slope (float): bed slope, m/m
        manning_n (float): Manning roughness coefficient
        depth (float): chosen design depth, in meters

    Returns:
        (tuple): CurvePoint(depth, discharge) pairs
    """
    points = []
    for yval in grid(step, span * depth, step):
        qval = manning(rectangular(width, yval), slope, manning_n).discharge
        points.append(CurvePoint(yval, qval))
    return tuple(points)


def depth_discharge_curve(shape, slope, manning_n, depth, **dims):
    """Manning discharge against depth for any supported section

    Depths step by a tenth of the reference depth, from 0.1 m up to twice
    the reference depth. Circular sections start at 0.05 m and stop at the
    pipe crown.

    Args:
        shape (str): 'rectangular', 'trapezoidal', or 'circular'
        slope (float): bed slope, m/m
        manning_n (float): Manning roughness coefficient
        depth (float): reference water depth, in meters
        dims: remaining section dimensions (``width``, ``bottom_width`` and
          ``side_slope``, or ``diameter``)

    Returns:
        (tuple): CurvePoint(depth, discharge) pairs
    """
    depth = validate.positive('depth', depth)
    stop = 2.0 * depth
    start = 0.1
    if str(shape).strip().lower() == 'circular':
        start = 0.05
        stop = min(stop, validate.positive(
            'diameter', dimension(dims, 'diameter')))

    points = []
    for yval in grid(start, stop, depth / 10.0):
        geom = section(shape, depth=yval, **dims)
        points.append(CurvePoint(yval,
                                 manning(geom, slope, manning_n).discharge))

    _logger.debug('Sampled {0:d} depth-discharge points for {1:s} section'
                  .format(len(points), str(shape)))
    return tuple(points)


def darcy_headloss_curve(length, diameter, vol_flow, froughness,
                         npoints=20):
    """Darcy-Weisbach head loss against flow, up to twice ``vol_flow``

    Zero flow is undefined (Reynolds number of zero) and is skipped, so
    the curve has ``npoints`` points starting one step above zero.

    Returns:
        (tuple): CurvePoint(flow, head_loss) pairs
    """
    vol_flow = validate.positive('vol_flow', vol_flow)
    step = 2.0 * vol_flow / npoints
    points = []
    for qval in step * np.arange(1, npoints + 1):
        qval = float(qval)
        hloss = darcy_weisbach(length, diameter, qval, froughness).head_loss
        points.append(CurvePoint(qval, hloss))
    return tuple(points)


def hazen_headloss_curve(length, diameter, vol_flow, chw, npoints=20):
    """Hazen-Williams head loss against flow from 0.01 m**3/s in
    ``npoints`` steps spanning twice ``vol_flow``

    Returns:
        (tuple): CurvePoint(flow, head_loss) pairs
    """
    vol_flow = validate.positive('vol_flow', vol_flow)
    points = []
    for qval in grid(0.01, 2.0 * vol_flow, 2.0 * vol_flow / npoints):
        hloss = hazen_williams(length, diameter, qval, chw).head_loss
        points.append(CurvePoint(qval, hloss))
    return tuple(points)
