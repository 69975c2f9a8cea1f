""" Uniform-flow formulas: Manning, Darcy-Weisbach, and Hazen-Williams

Functions here are pure; each validates its inputs and returns a named tuple
of results in SI units. The three laws are also wrapped as
:class:`FlowFormula` variants so callers can select a formula by name
without branching on it."""

from collections import namedtuple
from math import log10, sqrt

from fluids.friction import friction_laminar
import scipy.constants as sc

from . import _logger
from . import constants as hc
from . import validate
from .geometry import SectionGeometry

__author__ = "hydrodesign developers"
__license__ = "mit"

ManningResult = namedtuple('ManningResult',
                           ['discharge', 'velocity', 'area', 'hradius'])

DarcyWeisbachResult = namedtuple('DarcyWeisbachResult',
                                 ['head_loss', 'friction', 'Re', 'vflow',
                                  'regime'])

HazenWilliamsResult = namedtuple('HazenWilliamsResult', ['head_loss'])

REGIMES = ('laminar', 'transitional', 'turbulent')


def manning_discharge(area, hradius, slope, manning_n):
    """Calculate Manning velocity and discharge for a wetted section

    Args:
        area (float): wetted area, in square meters
        hradius (float): hydraulic radius, in meters
        slope (float): energy (bed) slope, m/m
        manning_n (float): Manning roughness coefficient

    Returns:
        (ManningResult): discharge (m**3/s), velocity (m/s), area, hradius

    Raises:
        InvalidInputError: any argument is not positive, or the discharge
          is not finite
    """
    area = validate.positive('area', area)
    hradius = validate.positive('hradius', hradius)
    slope = validate.positive('slope', slope)
    manning_n = validate.positive('manning_n', manning_n)

    with validate.numeric('discharge'):
        velocity = hradius**(2.0 / 3.0) * sqrt(slope) / manning_n
        discharge = velocity * area
    discharge = validate.positive('discharge', discharge)
    return ManningResult(discharge, velocity, area, hradius)


def manning(geometry, slope, manning_n):
    """Manning flow through a :class:`SectionGeometry`"""
    return manning_discharge(geometry.area, geometry.hradius, slope,
                             manning_n)


def flow_regime(Re):
    """Classify flow by Reynolds number

    The laminar limit is inclusive; between the laminar and turbulent limits
    the flow is labelled transitional.

    Args:
        Re (float): Reynolds number

    Returns:
        (str): 'laminar', 'transitional', or 'turbulent'
    """
    if Re <= hc.re_laminar:
        return 'laminar'
    elif Re > hc.re_turbulent:
        return 'turbulent'
    return 'transitional'


def friction_factor(Re, eroughness):
    """Darcy-Weisbach friction factor

    Uses 64/Re in the laminar regime and the explicit Swamee-Jain
    correlation otherwise, transitional flow included.

    Args:
        Re (float): Reynolds number, > 0
        eroughness (float): relative roughness (absolute roughness over
          diameter), >= 0

    Returns:
        (float): Darcy friction factor, dimensionless
    """
    Re = validate.positive('Re', Re)
    eroughness = validate.nonnegative('eroughness', eroughness)

    if flow_regime(Re) == 'laminar':
        return friction_laminar(Re)
    # Swamee-Jain (1976), 5.74/Re**0.9 form
    with validate.numeric('friction'):
        return 0.25 / log10(eroughness / 3.7 + 5.74 / Re**0.9)**2


def darcy_weisbach(length, diameter, vol_flow, froughness,
                   kin_visc=hc.kin_visc, grav=hc.grav):
    """Calculate Darcy-Weisbach head loss for full pipe flow

    Calculates head loss (m), the Darcy-Weisbach friction factor, and the
    intermediate Reynolds number and flow velocity (m/s), along with a flow
    regime label.

    Args:
        length (float): pipe length, in meters
        diameter (float): pipe inner diameter, in meters
        vol_flow (float): volumetric flow, in cubic meters per second
        froughness (float): absolute pipe roughness, in meters
        kin_visc (float): kinematic viscosity, in square meters per second
        grav (float): gravitational acceleration, in meters per second
          squared

    Returns:
        (DarcyWeisbachResult): Results and intermediate quantities

    Raises:
        InvalidInputError: non-positive length, diameter or flow, negative
          roughness, or intermediates that underflow or overflow
    """
    length = validate.positive('length', length)
    diameter = validate.positive('diameter', diameter)
    vol_flow = validate.positive('vol_flow', vol_flow)
    froughness = validate.nonnegative('froughness', froughness)
    kin_visc = validate.positive('kin_visc', kin_visc)
    grav = validate.positive('grav', grav)

    with validate.numeric('head_loss'):
        flow_area = validate.positive('flow_area',
                                      sc.pi * diameter**2 / 4.0)
        flow_vel = validate.positive('vflow', vol_flow / flow_area)
        Re = validate.positive('Re', flow_vel * diameter / kin_visc)
        friction = friction_factor(Re, froughness / diameter)
        head_loss = validate.positive(
            'head_loss',
            friction * (length / diameter) * flow_vel**2 / (2.0 * grav))

    _logger.debug('Darcy-Weisbach: V={0:0.4E} Re={1:0.4E} f={2:0.5f} '
                  'hf={3:0.4E}'.format(flow_vel, Re, friction, head_loss))

    return DarcyWeisbachResult(head_loss, friction, Re, flow_vel,
                               flow_regime(Re))


def hazen_williams(length, diameter, vol_flow, chw):
    """Calculate Hazen-Williams head loss (SI form)

    Args:
        length (float): pipe length, in meters
        diameter (float): pipe inner diameter, in meters
        vol_flow (float): volumetric flow, in cubic meters per second
        chw (float): Hazen-Williams coefficient

    Returns:
        (HazenWilliamsResult): head loss, in meters

    Raises:
        InvalidInputError: any argument is not positive, or the head
          loss underflows or overflows
    """
    length = validate.positive('length', length)
    diameter = validate.positive('diameter', diameter)
    vol_flow = validate.positive('vol_flow', vol_flow)
    chw = validate.positive('chw', chw)

    with validate.numeric('head_loss'):
        head_loss = hc.ahws_si * length * vol_flow**hc.echw \
            / (chw**hc.echw * diameter**hc.edhw)
    return HazenWilliamsResult(validate.positive('head_loss', head_loss))


class FlowFormula(object):
    """Common capability of the uniform-flow laws

    Subclasses set ``name`` and ``parameters`` and implement ``_evaluate``.

    Attributes:
        name (str): registry key
        parameters (tuple): keyword arguments ``evaluate`` requires
    """
    name = None
    parameters = ()

    def evaluate(self, **kwargs):
        """Evaluate the formula from keyword arguments

        Raises:
            InvalidInputError: a required parameter is missing or invalid
        """
        for param in self.parameters:
            if param not in kwargs:
                raise validate.InvalidInputError(
                    param, None, 'required by {0:s}'.format(self.name))
        return self._evaluate(**kwargs)

    def _evaluate(self, **kwargs):
        raise NotImplementedError

    def __repr__(self):
        return '{0:s}()'.format(type(self).__name__)


class ManningFormula(FlowFormula):
    """Manning discharge through a section; accepts either ``geometry``
    or ``area`` and ``hradius``"""
    name = 'manning'
    parameters = ('slope', 'manning_n')

    def _evaluate(self, slope, manning_n, geometry=None, area=None,
                  hradius=None):
        if geometry is None:
            geometry = SectionGeometry(area, None, hradius)
        return manning_discharge(geometry.area, geometry.hradius, slope,
                                 manning_n)


class DarcyWeisbachFormula(FlowFormula):
    """Darcy-Weisbach head loss with regime detection"""
    name = 'darcy-weisbach'
    parameters = ('length', 'diameter', 'vol_flow', 'froughness')

    def _evaluate(self, **kwargs):
        return darcy_weisbach(**kwargs)


class HazenWilliamsFormula(FlowFormula):
    """Hazen-Williams head loss"""
    name = 'hazen-williams'
    parameters = ('length', 'diameter', 'vol_flow', 'chw')

    def _evaluate(self, **kwargs):
        return hazen_williams(**kwargs)


#: Registered flow formulas, by name
FORMULAS = {formula.name: formula for formula in
            (ManningFormula(), DarcyWeisbachFormula(),
             HazenWilliamsFormula())}


def evaluate(name, **kwargs):
    """Evaluate a registered flow formula by name

    Args:
        name (str): formula name, e.g. 'manning', 'darcy-weisbach',
          'hazen-williams'
        kwargs: formula parameters

    Raises:
        ValueError: unknown formula name
    """
    key = str(name).strip().lower()
    if key not in FORMULAS:
        raise ValueError('Unknown flow formula "{0:s}"; expected one of {1:s}'
                         .format(str(name), ', '.join(sorted(FORMULAS))))
    return FORMULAS[key].evaluate(**kwargs)
