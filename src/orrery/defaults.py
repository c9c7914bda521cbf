"""
Default Bodies and Catalogs
==============================

Mean orbital elements of the Sun, the eight planets and the Moon, and a
factory for the default solar system catalog.

Elements are J2000 mean values (a in AU, angles in degrees) referred to
the ecliptic, from the JPL "Approximate Positions of the Planets" table
and, for the Moon, its mean geocentric orbit. Radii and colors are
display values for a scene scaled in AU, not physical sizes.

Examples
--------
>>> from orrery import solar_system, evaluate_all
>>> states, summary = evaluate_all(solar_system(), 100.0)
"""
from .body import Body
from .catalog import BodyCatalog
from .orbital_elements import OrbitalElements

# (M_earth + M_moon) / M_sun
EARTH_MOON_MASS_RATIO = 3.0404e-6

"""
Predefined orbits
"""
MERCURY_ORBIT = OrbitalElements(
    a=0.38709927, e=0.20563593, i=7.00497902,
    omega=48.33076593, w=29.12703035, M0=174.79252722,
    parent='Sun'
)

VENUS_ORBIT = OrbitalElements(
    a=0.72333566, e=0.00677672, i=3.39467605,
    omega=76.67984255, w=54.92262463, M0=50.37663232,
    parent='Sun'
)

EARTH_ORBIT = OrbitalElements(
    a=1.00000261, e=0.01671123, i=0.0,
    omega=0.0, w=102.93768193, M0=357.52688973,
    parent='Sun'
)

MOON_ORBIT = OrbitalElements(
    [0.00256955, 0.0549, 5.145, 125.08, 318.15, 135.27],
    parent='Earth', mass_ratio=EARTH_MOON_MASS_RATIO
)

MARS_ORBIT = OrbitalElements(
    a=1.52371034, e=0.09339410, i=1.84969142,
    omega=49.55953891, w=286.49683150, M0=19.39019754,
    parent='Sun'
)

JUPITER_ORBIT = OrbitalElements(
    a=5.20288700, e=0.04838624, i=1.30439695,
    omega=100.47390909, w=274.25457074, M0=19.66796068,
    parent='Sun'
)

SATURN_ORBIT = OrbitalElements(
    a=9.53667594, e=0.05386179, i=2.48599187,
    omega=113.66242448, w=338.93645383, M0=317.35536592,
    parent='Sun'
)

URANUS_ORBIT = OrbitalElements(
    a=19.18916464, e=0.04725744, i=0.77263783,
    omega=74.01692503, w=96.93735127, M0=142.28382821,
    parent='Sun'
)

NEPTUNE_ORBIT = OrbitalElements(
    a=30.06992276, e=0.00859048, i=1.77004347,
    omega=131.78422574, w=273.18053653, M0=259.91520804,
    parent='Sun'
)

"""
Predefined bodies
"""
SUN = Body('Sun', radius=0.35, color='#ffcc33', is_light_source=True)

MERCURY = Body('Mercury', radius=0.03, color='#b1a39a',
               orbit=MERCURY_ORBIT)

VENUS = Body('Venus', radius=0.05, color='#e3c27a',
             orbit=VENUS_ORBIT)

EARTH = Body('Earth', radius=0.05, color='#3b82f6',
             orbit=EARTH_ORBIT)

MOON = Body('Moon', radius=0.015, color='#cbd5e1', focusable=False,
            orbit=MOON_ORBIT)

MARS = Body('Mars', radius=0.04, color='#d9573b',
            orbit=MARS_ORBIT)

JUPITER = Body('Jupiter', radius=0.15, color='#d8b48a',
               orbit=JUPITER_ORBIT)

SATURN = Body('Saturn', radius=0.13, color='#e8d29a',
              orbit=SATURN_ORBIT)

URANUS = Body('Uranus', radius=0.09, color='#8fd8e8',
              orbit=URANUS_ORBIT)

NEPTUNE = Body('Neptune', radius=0.09, color='#4f6fe8',
               orbit=NEPTUNE_ORBIT)


def solar_system(include_moon: bool = True) -> BodyCatalog:
    """
    Create the default solar system catalog.

    Parameters
    ----------
    include_moon : bool, optional
        If True (default), the Moon is included as a child of Earth.

    Returns
    -------
    BodyCatalog
        Sun first, then the planets outward, the Moon after Earth
    """
    bodies = [SUN, MERCURY, VENUS, EARTH]
    if include_moon:
        bodies.append(MOON)
    bodies += [MARS, JUPITER, SATURN, URANUS, NEPTUNE]
    return BodyCatalog(bodies)


def inner_planets() -> BodyCatalog:
    """Sun, Mercury, Venus, Earth and Mars"""
    return BodyCatalog([SUN, MERCURY, VENUS, EARTH, MARS])
