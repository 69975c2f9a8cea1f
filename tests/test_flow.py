#!/usr/bin/env python
# -*- coding: utf-8 -*-

from math import isfinite, log10, pi, sqrt

from pytest import approx, raises
import hydrodesign.flow as hf
from hydrodesign.curves import grid
from hydrodesign.geometry import rectangular, trapezoidal
from hydrodesign.validate import InvalidInputError

__author__ = "hydrodesign developers"
__license__ = "mit"


def test_manning_rectangular_example():
    geom = rectangular(2.0, 1.0)
    flow = hf.manning(geom, 0.001, 0.015)

    velocity = (1.0 / 0.015) * 0.5**(2.0 / 3.0) * sqrt(0.001)
    assert flow.area == approx(2.0)
    assert flow.hradius == approx(0.5)
    assert flow.velocity == approx(velocity)
    assert flow.velocity == approx(1.328, abs=1.0E-3)
    assert flow.discharge == approx(2.0 * velocity)
    assert flow.discharge == approx(2.656, abs=1.0E-3)

    assert hf.manning_discharge(2.0, 0.5, 0.001, 0.015) == flow


def test_manning_monotonic_in_depth():
    for geom_fn in (lambda d: rectangular(1.5, d),
                    lambda d: trapezoidal(1.5, d, 1.0)):
        discharges = [hf.manning(geom_fn(d), 0.001, 0.015).discharge
                      for d in grid(0.1, 5.0, 0.1)]
        assert len(discharges) == 50
        for q1, q2 in zip(discharges, discharges[1:]):
            assert q1 < q2


def test_manning_invalid():
    with raises(InvalidInputError):
        hf.manning_discharge(2.0, 0.5, 0.0, 0.015)

    with raises(InvalidInputError):
        hf.manning_discharge(2.0, 0.5, 0.001, 0.0)

    with raises(InvalidInputError):
        hf.manning_discharge(2.0, 0.5, -0.001, 0.015)


def test_regime_boundary():
    assert hf.flow_regime(2300.0) == 'laminar'
    assert hf.flow_regime(2301.0) == 'transitional'
    assert hf.flow_regime(4000.0) == 'transitional'
    assert hf.flow_regime(4001.0) == 'turbulent'

    f_lam = hf.friction_factor(2300.0, 1.0E-4)
    f_trans = hf.friction_factor(2301.0, 1.0E-4)
    assert f_lam == approx(64.0 / 2300.0)

    swamee_jain = 0.25 / log10(1.0E-4 / 3.7 + 5.74 / 2301.0**0.9)**2
    assert f_trans == approx(swamee_jain)

    # The correlations do not meet at the boundary but the jump is bounded
    assert isfinite(f_trans)
    assert f_lam < f_trans < 3.0 * f_lam


def test_darcy_weisbach_turbulent():
    length, diameter, vol_flow, froughness = 100.0, 0.1, 0.01, 1.0E-4
    result = hf.darcy_weisbach(length, diameter, vol_flow, froughness)

    vflow = vol_flow / (pi * diameter**2 / 4.0)
    Re = vflow * diameter / 1.0E-6
    friction = 0.25 / log10(froughness / (3.7 * diameter)
                            + 5.74 / Re**0.9)**2
    assert result.vflow == approx(vflow)
    assert result.Re == approx(Re)
    assert result.regime == 'turbulent'
    assert result.friction == approx(friction)
    assert result.head_loss == approx(friction * (length / diameter)
                                      * vflow**2 / (2.0 * 9.81))


def test_darcy_weisbach_laminar():
    result = hf.darcy_weisbach(10.0, 0.1, 1.0E-5, 0.0)
    assert result.regime == 'laminar'
    assert result.Re == approx(127.324, abs=1.0E-3)
    assert result.friction == approx(64.0 / result.Re)


def test_darcy_weisbach_invalid():
    with raises(InvalidInputError):
        hf.darcy_weisbach(100.0, 0.1, 0.0, 1.0E-4)

    with raises(InvalidInputError):
        hf.darcy_weisbach(100.0, 0.1, 0.01, -1.0E-4)

    with raises(InvalidInputError):
        hf.darcy_weisbach(0.0, 0.1, 0.01, 1.0E-4)


def test_darcy_weisbach_regime_boundary():
    # Flows giving Re just either side of 2300 in a 1 m pipe
    diameter = 1.0
    below = hf.darcy_weisbach(100.0, diameter,
                              2299.0 * pi * diameter * 1.0E-6 / 4.0, 0.0)
    above = hf.darcy_weisbach(100.0, diameter,
                              2301.0 * pi * diameter * 1.0E-6 / 4.0, 0.0)

    assert below.Re == approx(2299.0)
    assert below.regime == 'laminar'
    assert below.friction == approx(64.0 / below.Re)

    assert above.Re == approx(2301.0)
    assert above.regime == 'transitional'
    assert above.friction == approx(0.25 / log10(5.74 / above.Re**0.9)**2)
    assert above.friction > below.friction


def test_degenerate_magnitudes():
    # Diameter whose area underflows to zero
    with raises(InvalidInputError):
        hf.darcy_weisbach(100.0, 1.0E-200, 0.01, 0.0)

    # Velocity squared overflows
    with raises(InvalidInputError):
        hf.darcy_weisbach(100.0, 0.1, 1.0E300, 1.0E-4)

    with raises(InvalidInputError):
        hf.hazen_williams(100.0, 0.3, 1.0E200, 120.0)

    with raises(InvalidInputError):
        hf.hazen_williams(100.0, 1.0E-100, 0.05, 120.0)

    with raises(InvalidInputError):
        hf.manning_discharge(1.0E300, 1.0E300, 1.0, 1.0E-300)


def test_hazen_williams():
    result = hf.hazen_williams(100.0, 0.3, 0.05, 120.0)
    reference = 10.67 * 100.0 * 0.05**1.852 / (120.0**1.852 * 0.3**4.8655)
    assert result.head_loss == approx(reference, rel=1.0E-6)
    assert result.head_loss == approx(0.2051, abs=1.0E-3)

    with raises(InvalidInputError):
        hf.hazen_williams(100.0, 0.3, 0.05, 0.0)


def test_formula_registry():
    geom = rectangular(2.0, 1.0)
    assert set(hf.FORMULAS) == {'manning', 'darcy-weisbach',
                                'hazen-williams'}

    assert hf.evaluate('manning', geometry=geom, slope=0.001,
                       manning_n=0.015) == hf.manning(geom, 0.001, 0.015)
    assert hf.evaluate('Manning', area=2.0, hradius=0.5, slope=0.001,
                       manning_n=0.015).discharge \
        == approx(2.656, abs=1.0E-3)
    assert hf.evaluate('darcy-weisbach', length=100.0, diameter=0.1,
                       vol_flow=0.01, froughness=1.0E-4) \
        == hf.darcy_weisbach(100.0, 0.1, 0.01, 1.0E-4)
    assert hf.evaluate('hazen-williams', length=100.0, diameter=0.3,
                       vol_flow=0.05, chw=120.0) \
        == hf.hazen_williams(100.0, 0.3, 0.05, 120.0)

    with raises(InvalidInputError):
        hf.evaluate('hazen-williams', length=100.0, diameter=0.3,
                    vol_flow=0.05)

    with raises(ValueError):
        hf.evaluate('chezy', slope=0.001)
