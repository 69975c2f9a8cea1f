# -*- coding: utf-8 -*-
from importlib.metadata import version, PackageNotFoundError

import logging

from pint import UnitRegistry

try:
    # Change here if project is renamed and does not equal the package name
    dist_name = 'hydrodesign-python'
    __version__ = version(dist_name)
except PackageNotFoundError:
    __version__ = 'unknown'

# Set default logging handler to avoid "No handler found" warnings.
_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())

# Pint unit registry
# Share with all functions in an application via 'from . import ureg, Q_'
ureg = UnitRegistry()
Q_ = ureg.Quantity
