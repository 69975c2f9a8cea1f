""" Channel and pipe dimension design

Two searches recommend dimensions that carry a target discharge:

* :func:`design_channel` grid-searches rectangular channel widths and depths
  for the section with the smallest wetted perimeter (the "best hydraulic
  section" heuristic for lining and excavation cost).
* :func:`select_pipe_size` picks the smallest standard circular pipe whose
  full-flow Manning capacity meets the target, falling back to a
  closed-form theoretical minimum diameter when the catalog runs out.

Both report infeasible designs as a result status rather than raising;
only invalid input raises :class:`~hydrodesign.validate.InvalidInputError`.
"""

from collections import namedtuple
from math import sqrt

import scipy.constants as sc

from . import _logger
from . import constants as hc
from . import validate
from .curves import design_curve, grid
from .flow import manning
from .geometry import circular_full, rectangular

__author__ = "hydrodesign developers"
__license__ = "mit"

MODES = ('channel', 'pipe')

DesignRequest = namedtuple('DesignRequest',
                           ['mode', 'target', 'slope', 'manning_n'],
                           defaults=(None,))

ChannelDesignResult = namedtuple('ChannelDesignResult',
                                 ['status', 'width', 'depth', 'perimeter',
                                  'flow', 'curve'])

PipeDesignResult = namedtuple('PipeDesignResult',
                              ['status', 'diameter', 'capacity',
                               'min_diameter'])

#: Full-pipe Manning constant folding area and hydraulic radius terms,
#: Q = K D**(8/3) sqrt(S) / n with K = (pi/4) 4**(-2/3)
K_FULL_PIPE = sc.pi / 4.0 * 4.0**(-2.0 / 3.0)


def design_channel(target, slope, manning_n,
                   width_grid=hc.channel_width_grid,
                   depth_grid=hc.channel_depth_grid):
    """Find the rectangular channel of least wetted perimeter carrying
    ``target``

    For each width, depths are scanned in increasing order and the first one
    whose Manning discharge reaches the target is taken as the minimal
    feasible depth for that width. That early exit assumes discharge is
    strictly increasing in depth at fixed width, slope and roughness, which
    holds for rectangular sections; another shape would need the same
    property established before reusing this search.

    Among feasible (width, depth) pairs the smallest perimeter
    ``width + 2 depth`` wins; on equal perimeters the narrower, earlier
    candidate is kept.

    Args:
        target (float): design discharge, in cubic meters per second
        slope (float): bed slope, m/m
        manning_n (float): Manning roughness coefficient
        width_grid (tuple): (start, stop, step) of widths, in meters
        depth_grid (tuple): (start, stop, step) of depths, in meters

    Returns:
        (ChannelDesignResult): status 'ok' with the chosen section, its
          ManningResult and a depth-discharge curve, or status
          'no_solution' with the other fields set to None

    Raises:
        InvalidInputError: non-positive target, slope, or roughness
    """
    target = validate.positive('target', target)
    slope = validate.positive('slope', slope)
    manning_n = validate.positive('manning_n', manning_n)

    widths = grid(*width_grid)
    depths = grid(*depth_grid)

    best = None
    best_perimeter = float('inf')
    for width in widths:
        for depth in depths:
            geom = rectangular(width, depth)
            flow = manning(geom, slope, manning_n)
            if flow.discharge >= target:
                _logger.debug('Width {0:0.2f} m: minimal depth {1:0.2f} m, '
                              'Q={2:0.4f}, P={3:0.4f}'
                              .format(width, depth, flow.discharge,
                                      geom.perimeter))
                if geom.perimeter < best_perimeter:
                    best_perimeter = geom.perimeter
                    best = (width, depth, flow)
                break
        else:
            _logger.debug('Width {0:0.2f} m: target not reached by {1:0.2f} m'
                          ' depth'.format(width, depths[-1] if depths
                                          else 0.0))

    if best is None:
        _logger.warning('No rectangular channel in the search grid carries '
                        '{0:0.4E} m**3/s'.format(target))
        return ChannelDesignResult('no_solution', None, None, None, None, ())

    width, depth, flow = best
    _logger.info('Channel design: width {0:0.2f} m, depth {1:0.2f} m, '
                 'Q={2:0.4f} m**3/s'.format(width, depth, flow.discharge))

    return ChannelDesignResult('ok', width, depth, best_perimeter, flow,
                               design_curve(width, slope, manning_n, depth))


def full_pipe_capacity(diameter, slope, manning_n=hc.pipe_manning_n):
    """Manning discharge of a circular pipe flowing full, m**3/s"""
    return manning(circular_full(diameter), slope, manning_n).discharge


def theoretical_min_diameter(target, slope, manning_n=hc.pipe_manning_n):
    """Invert the full-pipe Manning formula for diameter

    ``Q = K D**(8/3) sqrt(S) / n`` gives ``D = (Q n / (K sqrt(S)))**(3/8)``.

    Args:
        target (float): discharge, in cubic meters per second
        slope (float): pipe slope, m/m
        manning_n (float): Manning roughness coefficient

    Returns:
        (float): diameter, in meters, whose full-flow capacity is ``target``
    """
    target = validate.positive('target', target)
    slope = validate.positive('slope', slope)
    manning_n = validate.positive('manning_n', manning_n)

    with validate.numeric('min_diameter'):
        dmin = (target * manning_n
                / (K_FULL_PIPE * sqrt(slope)))**(3.0 / 8.0)
    return validate.positive('min_diameter', dmin)


def select_pipe_size(target, slope, manning_n=hc.pipe_manning_n,
                     catalog=hc.standard_diameters):
    """Choose the smallest standard pipe carrying ``target`` flowing full

    Capacity grows strictly with diameter, so the first catalog entry that
    meets the target is also the smallest.

    Args:
        target (float): design discharge, in cubic meters per second
        slope (float): pipe slope, m/m
        manning_n (float): Manning roughness coefficient
        catalog (tuple): strictly ascending standard diameters, in meters

    Returns:
        (PipeDesignResult): status 'ok' with the chosen diameter and its
          capacity, or 'no_standard_size'; ``min_diameter`` always holds the
          theoretical minimum diameter

    Raises:
        InvalidInputError: non-positive inputs or an empty or unsorted
          catalog
    """
    min_diameter = theoretical_min_diameter(target, slope, manning_n)

    catalog = tuple(validate.positive('catalog diameter', d) for d in catalog)
    if not catalog:
        raise validate.InvalidInputError('catalog', catalog, 'is empty')
    for smaller, larger in zip(catalog, catalog[1:]):
        if larger <= smaller:
            raise validate.InvalidInputError('catalog', catalog,
                                             'must be strictly ascending')

    for diameter in catalog:
        capacity = full_pipe_capacity(diameter, slope, manning_n)
        _logger.debug('D={0:0.3f} m carries {1:0.4E} m**3/s'
                      .format(diameter, capacity))
        if capacity >= target:
            _logger.info('Pipe design: D={0:0.3f} m, capacity {1:0.4f} '
                         'm**3/s'.format(diameter, capacity))
            return PipeDesignResult('ok', diameter, capacity, min_diameter)

    _logger.warning('No standard pipe up to {0:0.3f} m carries {1:0.4E} '
                    'm**3/s; theoretical minimum diameter is {2:0.4f} m'
                    .format(catalog[-1], target, min_diameter))
    return PipeDesignResult('no_standard_size', None, None, min_diameter)


def design(request):
    """Run the designer matching ``request.mode``

    Args:
        request (DesignRequest): mode ('channel' or 'pipe'), target, slope,
          and Manning's n (optional for pipes)

    Returns:
        (ChannelDesignResult or PipeDesignResult): design outcome

    Raises:
        ValueError: unknown mode, or a channel request without Manning's n
    """
    mode = str(request.mode).strip().lower()
    if mode == 'channel':
        if request.manning_n is None:
            raise validate.InvalidInputError('manning_n', None,
                                             'required for channel design')
        return design_channel(request.target, request.slope,
                              request.manning_n)
    elif mode == 'pipe':
        manning_n = request.manning_n
        if manning_n is None:
            manning_n = hc.pipe_manning_n
        return select_pipe_size(request.target, request.slope, manning_n)

    raise ValueError('Unknown design mode "{0:s}"; expected one of {1:s}'
                     .format(str(request.mode), ', '.join(MODES)))
