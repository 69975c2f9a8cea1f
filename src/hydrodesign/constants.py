"""Physical constants, correlation coefficients, and search bounds used by
the hydrodesign formula engine and design optimizers.

All values are SI. Note that the Hazen-Williams and Manning correlations are
*dimensional*, not dimensionless; the leading coefficients below are only
valid for lengths in meters and flows in cubic meters per second."""

__author__ = "hydrodesign developers"
__license__ = "mit"

#: Gravitational acceleration used in velocity head, m/s**2
grav = 9.81

#: Kinematic viscosity of water near 20 C, m**2/s
kin_visc = 1.0E-6

#: Largest Reynolds number treated as laminar (inclusive)
re_laminar = 2300.0

#: Reynolds number above which flow is labelled fully turbulent
re_turbulent = 4000.0

#: Exponent on *C* and *Q* terms of Hazen-Williams head loss correlation
echw = 1.852

#: Exponent on *D* term of Hazen-Williams head loss correlation
edhw = 4.8655

#: Leading coefficient on Hazen-Williams head loss correlation, SI units
ahws_si = 10.67

#: Manning's n assumed for standard sewer/concrete pipe sizing
pipe_manning_n = 0.013

#: Standard circular pipe inner diameters, m, strictly ascending
standard_diameters = (0.1, 0.15, 0.2, 0.25, 0.3, 0.4, 0.5, 1.0)

#: Rectangular channel search grid: width (start, stop, step), m
channel_width_grid = (0.5, 10.0, 0.5)

#: Rectangular channel search grid: depth (start, stop, step), m
channel_depth_grid = (0.1, 5.0, 0.1)

#: Depth increment of the depth-discharge curve at the chosen design, m
design_curve_step = 0.1

#: Design curve extends to this multiple of the chosen depth
design_curve_span = 1.5

#: Smallest wetted perimeter accepted before a section is called degenerate
min_perimeter = 1.0E-9
