#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
    Setup file for hydrodesign.

    Open channel and pipe flow formulas (Manning, Darcy-Weisbach,
    Hazen-Williams) with channel and pipe dimension design.
"""

from setuptools import setup, find_packages

# Add here console scripts and other entry points in ini-style format
entry_points = """
[console_scripts]
# script_name = hydrodesign.module:function
hydrodesign = hydrodesign.cli:run
"""


def setup_package():
    setup(name='hydrodesign-python',
          version='0.1.0',
          description='Open channel and pipe flow calculator and designer',
          license='mit',
          package_dir={'': 'src'},
          packages=find_packages(where='src'),
          python_requires='>=3.8',
          install_requires=[
              'fluids',
              'numpy',
              'pint',
              'scipy',
              'tabulate',
          ],
          extras_require={
              'testing': ['pytest'],
          },
          entry_points=entry_points)


if __name__ == "__main__":
    setup_package()
