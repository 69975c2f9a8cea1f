#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pytest import fixture, raises
import hydrodesign.cli as hcli
from hydrodesign.input import InputLine

__author__ = "hydrodesign developers"
__license__ = "mit"

DECK = """\
# Test deck
RECT    2.0  1.0  0.001  0.015

TRAP    2.0  1.0  1.5  0.001  0.015
CIRC    0.5  0.25  0.001  0.013
DARCY   100.0  0.1  0.01  1.0E-4
HAZEN   100.0  0.3  0.05  120.0
CHANNEL 2.0  0.001  0.015
PIPE    0.05  0.001
PIPE    1.0   0.001  0.013
RECT    2.0  -1.0  0.001  0.015
WEIR    1.0  2.0
"""


@fixture
def deck(tmp_path):
    path = tmp_path / 'cases.inp'
    path.write_text(DECK)
    return path


def test_main(deck, capsys):
    nfail = hcli.main([str(deck)])
    out = capsys.readouterr().out

    assert nfail == 2
    assert 'Manning flow' in out
    assert 'Darcy-Weisbach head loss' in out
    assert 'Hazen-Williams head loss' in out
    assert 'Channel design' in out
    assert 'depth [m]' in out
    assert 'Pipe design: no standard size suffices' in out
    assert '! Case defined on line 11 of {0:s} failed'.format(str(deck)) \
        in out
    assert '! Case defined on line 12 of {0:s} failed'.format(str(deck)) \
        in out


def test_process_case():
    out = hcli.process_case(InputLine('pipe 0.05 0.001'), tablefmt='plain')
    assert out.startswith('Pipe design\n')
    assert 'ok' in out

    out = hcli.process_case(InputLine('CHANNEL 1000.0 0.001 0.015'))
    assert 'no solution' in out

    with raises(ValueError):
        hcli.process_case(InputLine('WEIR 1.0 2.0'))

    with raises(ValueError):
        hcli.process_case(InputLine('HAZEN 100.0 0.3 0.05'))


def test_parse_args():
    args = hcli.parse_args(['-vv', '--tablefmt', 'plain'])
    assert args.loglevel == 10
    assert args.tablefmt == 'plain'

    with raises(SystemExit):
        hcli.parse_args(['--version'])


def test_main_continues_after_degenerate_case(tmp_path, capsys):
    path = tmp_path / 'overflow.inp'
    path.write_text('HAZEN   100.0  0.3  1.0E200  120.0\n'
                    'RECT    2.0  1.0  0.001  0.015\n')
    nfail = hcli.main([str(path)])
    out = capsys.readouterr().out

    assert nfail == 1
    assert '! Case defined on line 1 of {0:s} failed'.format(str(path)) \
        in out
    assert 'Manning flow' in out


def test_process_case_material_names():
    assert hcli.process_case(InputLine('HAZEN 100.0 0.3 0.05 cast_iron')) \
        == hcli.process_case(InputLine('HAZEN 100.0 0.3 0.05 100.0'))

    assert hcli.process_case(InputLine('RECT 2.0 1.0 0.001 Gravel')) \
        == hcli.process_case(InputLine('RECT 2.0 1.0 0.001 0.030'))

    assert hcli.process_case(InputLine('PIPE 0.05 0.001 plastic')) \
        == hcli.process_case(InputLine('PIPE 0.05 0.001 0.009'))

    with raises(ValueError):
        hcli.process_case(InputLine('HAZEN 100.0 0.3 0.05 unobtainium'))

    # Only coefficient fields accept names
    with raises(ValueError):
        hcli.process_case(InputLine('RECT wide 1.0 0.001 0.015'))
