""" Text tables of calculation and design results

Result fields are tagged with units through the shared Pint registry and
laid out with ``tabulate``."""

from tabulate import tabulate

from . import Q_

__author__ = "hydrodesign developers"
__license__ = "mit"

#: Units of result fields, by field name; unlisted fields are shown as-is
FIELD_UNITS = {
    'discharge': 'm**3/s',
    'capacity': 'm**3/s',
    'velocity': 'm/s',
    'vflow': 'm/s',
    'area': 'm**2',
    'hradius': 'm',
    'perimeter': 'm',
    'head_loss': 'm',
    'width': 'm',
    'depth': 'm',
    'diameter': 'm',
    'min_diameter': 'm',
}

#: Descriptions of result fields, by field name
FIELD_LABELS = {
    'discharge': 'discharge',
    'capacity': 'full-flow capacity',
    'velocity': 'flow velocity',
    'vflow': 'flow velocity',
    'area': 'wetted area',
    'hradius': 'hydraulic radius',
    'perimeter': 'wetted perimeter',
    'head_loss': 'head loss',
    'friction': 'darcy-weisbach friction factor',
    'Re': 'reynolds number',
    'regime': 'flow regime',
    'width': 'channel width',
    'depth': 'water depth',
    'diameter': 'pipe diameter',
    'min_diameter': 'theoretical minimum diameter',
    'status': 'status',
}


def as_quantity(field, value):
    """Tag ``value`` with the SI unit of ``field`` if it has one"""
    if field in FIELD_UNITS and isinstance(value, (int, float)):
        return Q_(value, FIELD_UNITS[field])
    return value


def _display(value):
    if hasattr(value, 'magnitude'):
        return '{0:0.4f~P}'.format(value)
    elif isinstance(value, float):
        return '{0:0.5g}'.format(value)
    return value


def as_table(title, result, tablefmt='psql', skip=('flow', 'curve')):
    """Display a result record as a two-column table

        Args:
            title (str): heading printed above the table
            result (namedtuple): result record, e.g. ManningResult or
              PipeDesignResult
            tablefmt (str): Table format; see `tabulate` documentation
            skip ([str]): fields not to list (nested records, curves)

        Returns:
            str: Text table of result fields
    """
    rows = []
    for field, value in result._asdict().items():
        if field in skip or value is None:
            continue
        rows.append((FIELD_LABELS.get(field, field),
                     _display(as_quantity(field, value))))

    return '{0:s}\n{1:s}'.format(title, tabulate(rows, tablefmt=tablefmt))


def curve_table(points, headers=('x', 'y'), tablefmt='psql'):
    """Display sampled curve points as a table

        Args:
            points ([CurvePoint]): ordered (x, y) pairs
            headers ([str]): column headings
            tablefmt (str): Table format; see `tabulate` documentation

        Returns:
            str: Text table of curve points
    """
    return tabulate([tuple(pt) for pt in points], headers=list(headers),
                    tablefmt=tablefmt, floatfmt='0.4f')
