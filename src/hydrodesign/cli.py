#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Batch front end for the hydrodesign formula engine and design optimizers.

Each data line of an input deck is one case: a keyword naming the
calculation followed by its numeric fields in SI units::

    RECT    width depth slope n
    TRAP    bottom_width depth side_slope slope n
    CIRC    diameter depth slope n
    DARCY   length diameter flow roughness
    HAZEN   length diameter flow chw
    CHANNEL target slope n
    PIPE    target slope [n]

A lining or material name may stand in for ``n`` on any line,
``roughness`` (DARCY) or ``chw`` (HAZEN), with underscores for spaces,
e.g. ``HAZEN 100.0 0.3 0.05 cast_iron``.

Then run `pip install .` which will install the command `hydrodesign`
inside your current environment.
"""

import argparse
from collections import OrderedDict
import logging
import sys

from . import _logger
from . import __version__
from . import materials
from .design import design_channel, select_pipe_size
from .flow import darcy_weisbach, hazen_williams, manning
from .geometry import circular_partial, rectangular, trapezoidal
from .input import InputLine
from .report import as_table, curve_table

__author__ = "hydrodesign developers"
__license__ = "mit"


def _manning_case(geometry_fn, dims):
    def run_case(vals, tablefmt):
        geom = geometry_fn(*(vals[d] for d in dims))
        flow = manning(geom, vals['slope'], vals['manning_n'])
        return as_table('Manning flow, perimeter {0:0.4f} m'
                        .format(geom.perimeter), flow, tablefmt=tablefmt)
    return run_case


def _darcy_case(vals, tablefmt):
    return as_table('Darcy-Weisbach head loss', darcy_weisbach(**vals),
                    tablefmt=tablefmt)


def _hazen_case(vals, tablefmt):
    return as_table('Hazen-Williams head loss', hazen_williams(**vals),
                    tablefmt=tablefmt)


def _channel_case(vals, tablefmt):
    result = design_channel(vals['target'], vals['slope'], vals['manning_n'])
    if result.status != 'ok':
        return 'Channel design: no solution found within search bounds'
    return '\n'.join((
        as_table('Channel design', result, tablefmt=tablefmt),
        as_table('Design flow', result.flow, tablefmt=tablefmt),
        curve_table(result.curve, headers=('depth [m]', 'Q [m³/s]'),
                    tablefmt=tablefmt)))


def _pipe_case(vals, tablefmt):
    result = select_pipe_size(**vals)
    title = 'Pipe design'
    if result.status != 'ok':
        title = 'Pipe design: no standard size suffices'
    return as_table(title, result, tablefmt=tablefmt)


#: Case keyword -> (required fields, optional fields, handler)
CASES = OrderedDict([
    ('RECT', (('width', 'depth', 'slope', 'manning_n'), (),
              _manning_case(rectangular, ('width', 'depth')))),
    ('TRAP', (('bottom_width', 'depth', 'side_slope', 'slope', 'manning_n'),
              (),
              _manning_case(trapezoidal,
                            ('bottom_width', 'depth', 'side_slope')))),
    ('CIRC', (('diameter', 'depth', 'slope', 'manning_n'), (),
              _manning_case(circular_partial, ('diameter', 'depth')))),
    ('DARCY', (('length', 'diameter', 'vol_flow', 'froughness'), (),
               _darcy_case)),
    ('HAZEN', (('length', 'diameter', 'vol_flow', 'chw'), (),
               _hazen_case)),
    ('CHANNEL', (('target', 'slope', 'manning_n'), (), _channel_case)),
    ('PIPE', (('target', 'slope'), ('manning_n',), _pipe_case)),
])

#: Field name -> material lookup for fields given by name instead of value
LOOKUPS = {
    'manning_n': materials.manning_n,
    'chw': materials.hazen_williams_c,
    'froughness': materials.absolute_roughness,
}


def parse_args(args):
    """Parse command line parameters

    Args:
      args ([str]): command line parameters as list of strings

    Returns:
      :obj:`argparse.Namespace`: command line parameters namespace
    """
    parser = argparse.ArgumentParser(
        description="Open channel and pipe flow calculator and designer")
    parser.add_argument(
        '--version',
        action='version',
        version='hydrodesign-python {ver}'.format(ver=__version__))
    parser.add_argument(
        dest="file",
        help="input files (STDIN if not specified)",
        type=argparse.FileType('r'),
        nargs='*',
        default=[sys.stdin],
        metavar="FILE")
    parser.add_argument(
        '--tablefmt',
        dest="tablefmt",
        help="output table format (see tabulate); default psql",
        default='psql')
    parser.add_argument(
        '-v',
        '--verbose',
        dest="loglevel",
        help="set loglevel to INFO",
        action='store_const',
        const=logging.INFO)
    parser.add_argument(
        '-vv',
        '--very-verbose',
        dest="loglevel",
        help="set loglevel to DEBUG",
        action='store_const',
        const=logging.DEBUG)
    return parser.parse_args(args)


def setup_logging(loglevel):
    """Setup basic logging

    Args:
      loglevel (int): minimum loglevel for emitting messages
    """
    logformat = "[%(asctime)s] %(levelname)s:%(name)s: %(message)s"
    logging.basicConfig(level=loglevel, stream=sys.stdout,
                        format=logformat, datefmt="%Y-%m-%d %H:%M:%S")


def process_case(iline, tablefmt='psql'):
    """Evaluate one data line of a case deck

    Args:
        iline (InputLine): pre-processed data line
        tablefmt (str): tabulate table format

    Returns:
        (str): formatted results

    Raises:
        ValueError: unknown keyword, malformed fields, or invalid input
    """
    if iline.keyword not in CASES:
        raise ValueError('Unknown case keyword "{0:s}"; expected one of {1:s}'
                         .format(iline.keyword, ', '.join(CASES)))

    names, optional, handler = CASES[iline.keyword]
    vals = iline.values(names, optional, lookups=LOOKUPS)
    return handler(vals, tablefmt)


def main(args):
    """Main entry point allowing external calls

    Args:
        args ([str]): command line parameter list

    Returns:
        (int): number of failed cases
    """
    args = parse_args(args)
    setup_logging(args.loglevel)
    _logger.info("Starting hydrodesign")

    nfail = 0
    for fh in args.file:
        _logger.info('Processing file: {0:s}'.format(fh.name))

        for ict, rawline in enumerate(fh):
            iline = InputLine(line=rawline, ipos=ict + 1)
            _logger.debug(iline.as_log())

            if iline.typecode != 'D':
                continue

            _logger.info('Processing data line:')
            _logger.info(iline.as_log())
            try:
                print(process_case(iline, tablefmt=args.tablefmt))
            except (ValueError, ArithmeticError) as err:
                # Report errors with line and source file name, then carry
                # on with the next case
                nfail += 1
                _logger.error('Case not processed due to input error: '
                              '{0:s}'.format(str(err)))
                print('! Case defined on line {0:d} of {1:s} failed'
                      .format(iline.ipos, fh.name))

    _logger.info("Ending hydrodesign")
    return nfail


def run():
    """Entry point for console_scripts
    """
    sys.exit(1 if main(sys.argv[1:]) else 0)


if __name__ == "__main__":
    run()
