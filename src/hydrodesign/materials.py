""" Reference roughness coefficients by material

Manning's n and Hazen-Williams C tables for common channel and pipe
linings, plus absolute pipe roughness looked up from the ``fluids``
material database."""

from fluids.friction import material_roughness, nearest_material_roughness

from . import _logger

__author__ = "hydrodesign developers"
__license__ = "mit"

#: Typical Manning's n by channel or pipe lining
MANNING_N_VALUES = (
    ('Concrete (finished)', 0.012),
    ('Concrete (rough)', 0.015),
    ('Earth, straight, clean', 0.022),
    ('Earth, winding, sluggish', 0.035),
    ('Gravel', 0.030),
    ('Plastic (HDPE, PVC)', 0.009),
)

#: Typical Hazen-Williams C by pipe material and condition
HAZEN_WILLIAMS_C_VALUES = (
    ('Plastic (PVC)', 150.0),
    ('Copper', 140.0),
    ('New steel', 120.0),
    ('Cast iron', 100.0),
    ('Old pipe / corroded', 80.0),
)


def _lookup(table, material, kind):
    key = str(material).strip().lower()
    matches = [(name, value) for name, value in table
               if key and key in name.lower()]
    if not matches:
        raise ValueError('No {0:s} listed for material "{1:s}"'
                         .format(kind, str(material)))
    if len(matches) > 1:
        # Prefer an exact name; otherwise the first table entry
        exact = [m for m in matches if m[0].lower() == key]
        matches = exact or matches
        _logger.info('Material "{0:s}" matches {1:d} entries; using "{2:s}"'
                     .format(str(material), len(matches), matches[0][0]))
    return matches[0][1]


def manning_n(material):
    """Manning's n for a lining, matched case-insensitively by substring

    Raises:
        ValueError: no table entry matches ``material``
    """
    return _lookup(MANNING_N_VALUES, material, "Manning's n")


def hazen_williams_c(material):
    """Hazen-Williams C for a pipe material, matched case-insensitively by
    substring

    Raises:
        ValueError: no table entry matches ``material``
    """
    return _lookup(HAZEN_WILLIAMS_C_VALUES, material, 'Hazen-Williams C')


def absolute_roughness(surface, is_clean=True):
    """Absolute pipe wall roughness from the fluids material database

    Args:
        surface (str): text description of pipe surface
        is_clean (bool): pipe cleanliness

    Returns:
        (float): absolute roughness, in meters

    Raises:
        ValueError: Failed to find surface roughness for material
            description.
    """
    surface_key = nearest_material_roughness(surface, clean=is_clean)

    lc_surface = str(surface).lower().strip()
    if lc_surface not in str(surface_key).lower():
        raise ValueError('Surface specified "{0:s}" too different '
                         'from surface found "{1:s}"'
                         .format(surface, surface_key))

    froughness = material_roughness(surface_key)
    _logger.info('Surface roughness for "{0:s}" set to {1:0.4E} m from '
                 '"{2:s}"'.format(surface, froughness, surface_key))
    return froughness
