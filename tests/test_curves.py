#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pytest import approx, raises
import hydrodesign.curves as hcv
from hydrodesign.flow import darcy_weisbach, hazen_williams
from hydrodesign.validate import InvalidInputError

__author__ = "hydrodesign developers"
__license__ = "mit"


def test_grid():
    assert hcv.grid(0.5, 10.0, 0.5) == tuple(0.5 * k for k in range(1, 21))
    depths = hcv.grid(0.1, 5.0, 0.1)
    assert len(depths) == 50
    assert depths[2] == 0.3
    assert depths[-1] == 5.0
    assert hcv.grid(1.0, 0.5, 0.1) == ()

    with raises(InvalidInputError):
        hcv.grid(0.1, 1.0, 0.0)


def test_depth_discharge_curve():
    curve = hcv.depth_discharge_curve('rectangular', 0.001, 0.015, 1.0,
                                      width=2.0)
    assert len(curve) == 20
    assert curve[0].x == approx(0.1)
    assert curve[-1].x == approx(2.0)
    assert curve[9].y == approx(2.656, abs=1.0E-3)

    trap = hcv.depth_discharge_curve('trapezoidal', 0.001, 0.015, 1.0,
                                     bottom_width=2.0, side_slope=1.5)
    for p1, p2 in zip(trap, trap[1:]):
        assert p1.y < p2.y

    circ = hcv.depth_discharge_curve('circular', 0.001, 0.013, 0.3,
                                     diameter=0.5)
    assert circ[0].x == approx(0.05)
    assert circ[-1].x <= 0.5
    assert all(pt.y > 0.0 for pt in circ)

    with raises(InvalidInputError):
        hcv.depth_discharge_curve('circular', 0.001, 0.013, 0.3)

    with raises(InvalidInputError):
        hcv.depth_discharge_curve('rectangular', 0.001, 0.015, 1.0)


def test_headloss_curves():
    darcy = hcv.darcy_headloss_curve(100.0, 0.1, 0.01, 1.0E-4)
    assert len(darcy) == 20
    assert darcy[0].x == approx(0.001)
    assert darcy[-1].x == approx(0.02)
    assert darcy[9].y == approx(
        darcy_weisbach(100.0, 0.1, 0.01, 1.0E-4).head_loss)

    hazen = hcv.hazen_headloss_curve(100.0, 0.3, 0.05, 120.0)
    assert hazen[0].x == approx(0.01)
    assert hazen[-1].x <= 0.1
    assert hazen[0].y == approx(
        hazen_williams(100.0, 0.3, 0.01, 120.0).head_loss)
    for p1, p2 in zip(hazen, hazen[1:]):
        assert p1.y < p2.y


def test_design_curve():
    curve = hcv.design_curve(1.5, 0.001, 0.015, 1.1)
    assert [pt.x for pt in curve] == list(hcv.grid(0.1, 1.6, 0.1))
