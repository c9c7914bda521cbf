'''Orbital element handling for the orrery package
OrbitalElements class definition'''

import math
import numpy as np
from typing import Optional
from .config import config
from .utils import validation_error


class OrbitalElements:
    """
    Keplerian orbital elements of a body about its parent.
    Angles are stored in degrees, the semi-major axis in astronomical units.
    OrbitalElements is immutable, use .replace() to derive a modified copy

    Parameters
    ----------
    elements : array-like, optional
        6-element array [a, e, i, omega, w, M0]
    parent : str, optional
        Name of the body this orbit is centered on. None means the origin.
    mu : float, optional
        Gravitational parameter [AU^3/day^2]. Defaults to the gaussian
        value config.GM, evaluated when the orbit is used.
    mass_ratio : float, optional
        Central mass in solar masses, used instead of mu. The gravitational
        parameter is then config.GM * mass_ratio, evaluated when the orbit
        is used.
    validate : bool, optional
        Whether to validate elements (default True)
    **kwargs : dict
        Named parameters (a, e, i, omega, w, M0) used instead of elements

    Notes
    -----
    A non-positive semi-major axis is accepted: such an orbit is degenerate
    and always evaluates to a zero position with an undefined period. The
    remaining elements of a degenerate orbit are not checked.

    Equal orbits always hash equally. The hash ignores the element values,
    which are compared with a tolerance, so orbits about the same parent
    share a hash bucket.

    Examples
    --------
    >>> earth = OrbitalElements(a=1.0, e=0.0167, i=0.0, omega=-11.26,
    ...                         w=114.21, M0=358.62)
    >>> moon = OrbitalElements([0.00257, 0.0549, 5.145, 125.08, 318.15, 135.27],
    ...                        parent='Earth', mass_ratio=3.0404e-6)
    """
    # ========== CLASS CONSTANTS ==========
    _NAMES = ('a', 'e', 'i', 'omega', 'w', 'M0')
    # non-element keys accepted by from_dict()
    OPTION_KEYS = {'parent': 'parent', 'mu': 'mu',
                    'mass_ratio': 'mass_ratio', 'massRatio': 'mass_ratio'}

    # ========== CONSTRUCTION ==========
    def __init__(self, elements=None, parent: Optional[str] = None,
                 mu: Optional[float] = None, mass_ratio: Optional[float] = None,
                 validate: bool = True, **kwargs):
        if elements is not None:
            if kwargs:
                raise ValueError(
                    "Provide either an elements array or named parameters, not both")
            self._elements = np.array(elements, dtype=float)
        elif kwargs:
            self._elements = self._from_named_params(kwargs)
        else:
            raise ValueError(
                "Must provide either:\n"
                "  - elements array [a, e, i, omega, w, M0], or\n"
                "  - named parameters (a, e, i, omega, w, M0)"
            )
        # Ensure immutability of elements array
        self._elements.flags.writeable = False
        if mu is not None and mass_ratio is not None:
            raise ValueError("Provide either mu or mass_ratio, not both")
        self._parent = parent
        self._mu = None if mu is None else float(mu)
        self._mass_ratio = None if mass_ratio is None else float(mass_ratio)
        # run validation checks on input parameters (if not flagged otherwise)
        if validate:
            self._validate()

    # ========== VALIDATION ==========
    def _validate(self):
        """Check that the elements describe a closed orbit.
        A semi-major axis <= 0 marks a degenerate orbit, whose other
        elements are never evaluated and so are not checked
        """
        if self._elements.shape != (6,):
            raise ValueError("Orbital elements must be 6-element vector")
        if not self._elements[0] <= 0:
            if not np.all(np.isfinite(self._elements)):
                validation_error(
                    f"Elements contain NaN or Inf: {self._elements.tolist()}")
            e = self._elements[1]
            if not 0 <= e < 1:
                validation_error(
                    f"Eccentricity must be in [0, 1) for a closed orbit, got e={e}")
        if self._mu is not None and not self._mu > 0:
            validation_error(
                f"Gravitational parameter must be positive, got mu={self._mu}")
        if self._mass_ratio is not None and not self._mass_ratio > 0:
            validation_error(
                f"Mass ratio must be positive, got mass_ratio={self._mass_ratio}")
        if self._parent is not None and not isinstance(self._parent, str):
            raise TypeError(f"parent must be a body name (str), "
                            f"got {type(self._parent)}")

    # ========== FACTORY METHODS ==========
    @classmethod
    def from_dict(cls, data: dict, validate: bool = True):
        """
        Create OrbitalElements from a mapping.

        Accepts the short names (a, e, i, omega, w, M0) or the long names
        (semi_major_axis, eccentricity, inclination,
        longitude_of_ascending_node, argument_of_periapsis,
        mean_anomaly_at_epoch), in snake_case or camelCase. Missing angles
        default to zero. 'parent', 'mu' and 'mass_ratio' (or 'massRatio')
        are optional.

        Raises
        ------
        ValueError
            If the semi-major axis or eccentricity is missing, or an
            unknown key is present
        """
        values = {}
        options = {'parent': None, 'mu': None, 'mass_ratio': None}
        for key, value in data.items():
            if key in cls.OPTION_KEYS:
                options[cls.OPTION_KEYS[key]] = value
                continue
            name = cls._parse_element_name(key)
            if name in values:
                raise ValueError(f"Element '{name}' given more than once")
            values[name] = value
        for required in ('a', 'e'):
            if required not in values:
                raise ValueError(
                    f"Orbit definition is missing '{required}': {dict(data)}")
        elements = [values.get(name, 0.0) for name in cls._NAMES]
        return cls(elements, validate=validate, **options)

    # ========== PROPERTY ACCESS ==========
    @property
    def elements(self):
        """Read-only element array [a, e, i, omega, w, M0]"""
        return self._elements

    @property
    def a(self):
        """Semi-major axis [AU]"""
        return float(self._elements[0])

    @property
    def e(self):
        """Eccentricity"""
        return float(self._elements[1])

    @property
    def i(self):
        """Inclination [deg]"""
        return float(self._elements[2])

    @property
    def omega(self):
        """Longitude of the ascending node [deg]"""
        return float(self._elements[3])

    @property
    def w(self):
        """Argument of periapsis [deg]"""
        return float(self._elements[4])

    @property
    def M0(self):
        """Mean anomaly at epoch [deg]"""
        return float(self._elements[5])

    # long-form aliases
    semi_major_axis = a
    eccentricity = e
    inclination = i
    longitude_of_ascending_node = omega
    argument_of_periapsis = w
    mean_anomaly_at_epoch = M0

    @property
    def parent(self) -> Optional[str]:
        """Name of the parent body, None if the orbit is about the origin"""
        return self._parent

    @property
    def mu(self) -> float:
        """Gravitational parameter [AU^3/day^2]"""
        if self._mu is not None:
            return self._mu
        if self._mass_ratio is not None:
            return config.GM * self._mass_ratio
        return config.GM

    @property
    def mass_ratio(self) -> Optional[float]:
        """Central mass in solar masses, None unless given"""
        return self._mass_ratio

    @property
    def is_degenerate(self) -> bool:
        """True if the semi-major axis is not positive"""
        return not self._elements[0] > 0

    # ========== ORBITAL PROPERTIES ==========
    def radians(self):
        """Angles (i, omega, w, M0) converted to radians"""
        return tuple(math.radians(x) for x in self._elements[2:])

    def mean_motion(self) -> Optional[float]:
        """
        Calculate mean motion (n = sqrt(mu/a^3))

        Returns
        -------
        float or None
            Mean motion [rad/day], None for a degenerate orbit
        """
        if self.is_degenerate:
            return None
        return math.sqrt(self.mu / self.a**3)

    def orbital_period(self) -> Optional[float]:
        """
        Calculate orbital period

        Returns period in days, None for a degenerate orbit
        """
        n = self.mean_motion()
        if n is None:
            return None
        return 2 * math.pi / n

    def rotation_matrix(self):
        """
        Direction cosine matrix from the perifocal frame to the parent frame.

        R = R3(omega) @ R1(i) @ R3(w). The first two columns are the
        perifocal unit vectors (periapsis direction and the in-plane normal
        to it) expressed in the parent frame.
        """
        i, omega, w, _ = self.radians()
        # rotation about z-axis by RAAN
        R3_omega = np.array([
            [np.cos(omega), -np.sin(omega), 0],
            [np.sin(omega),  np.cos(omega), 0],
            [0,              0,              1]
        ])
        # rotation about x-axis by inclination
        R1_i = np.array([
            [1,  0,             0            ],
            [0,  np.cos(i),    -np.sin(i)    ],
            [0,  np.sin(i),     np.cos(i)    ]
        ])
        # rotation about z-axis by argument of periapsis
        R3_w = np.array([
            [np.cos(w), -np.sin(w), 0],
            [np.sin(w),  np.cos(w), 0],
            [0,          0,          1]
        ])
        return R3_omega @ R1_i @ R3_w

    # ========== UTILITY METHODS ==========
    def replace(self, **changes):
        """
        Create a new OrbitalElements with some values changed.

        Examples
        --------
        >>> wider = orbit.replace(a=2 * orbit.a)
        >>> about_sun = orbit.replace(parent=None)
        """
        values = dict(zip(self._NAMES, self._elements.tolist()))
        parent = changes.pop('parent', self._parent)
        # a new mu replaces the mass ratio and vice versa
        if 'mu' in changes:
            mu, mass_ratio = changes.pop('mu'), changes.pop('mass_ratio', None)
        elif 'mass_ratio' in changes:
            mu, mass_ratio = None, changes.pop('mass_ratio')
        else:
            mu, mass_ratio = self._mu, self._mass_ratio
        for key, value in changes.items():
            values[self._parse_element_name(key)] = value
        return OrbitalElements([values[name] for name in self._NAMES],
                               parent=parent, mu=mu, mass_ratio=mass_ratio)

    def to_dict(self) -> dict:
        """Elements as a plain dict with short names, parent, mu and mass_ratio"""
        data = dict(zip(self._NAMES, self._elements.tolist()))
        data['parent'] = self._parent
        data['mu'] = self._mu
        data['mass_ratio'] = self._mass_ratio
        return data

    # ========== BATCH OPERATIONS ==========
    class Batch:
        """
        Batch operations on collections of OrbitalElements.
        """
        @staticmethod
        def orbital_period(orbits):
            """Get orbital periods for multiple orbits (NaN where undefined)"""
            periods = [o.orbital_period() for o in orbits]
            return np.array([np.nan if p is None else p for p in periods])

        @staticmethod
        def to_numpy(orbits):
            """Convert list of OrbitalElements to an array of shape (n, 6)"""
            return np.array([o.elements for o in orbits]).reshape(-1, 6)

        @staticmethod
        def to_dataframe(orbits, index=None):
            """
            Convert list of OrbitalElements to pandas DataFrame.

            Parameters
            ----------
            orbits : list of OrbitalElements
            index : array-like, optional
                Index for the DataFrame (e.g., body names).
                If None, uses integer index.

            Returns
            -------
            pd.DataFrame
                Columns ['a', 'e', 'i', 'omega', 'w', 'M0', 'parent']
            """
            import pandas as pd

            columns = list(OrbitalElements._NAMES) + ['parent']
            if not orbits:
                return pd.DataFrame(columns=columns)
            if index is not None and len(index) != len(orbits):
                raise ValueError(
                    f"Index length ({len(index)}) must match "
                    f"number of orbits ({len(orbits)})"
                )
            df = pd.DataFrame(OrbitalElements.Batch.to_numpy(orbits),
                              columns=list(OrbitalElements._NAMES), index=index)
            df['parent'] = [o.parent for o in orbits]
            return df

    # ========== SPECIAL METHODS ==========
    def __len__(self):
        #Length of element vector (always 6)
        return 6

    def __getitem__(self, key):
        #Allow indexing like orbit[0]
        return self._elements[key]

    def __iter__(self):
        #Allow iteration over elements
        return iter(self._elements)

    def __repr__(self):
        #Machine-readable representation
        extra = ""
        if self._mass_ratio is not None:
            extra = f", mass_ratio={self._mass_ratio!r}"
        return (f"OrbitalElements({self._elements.tolist()}, "
                f"parent={self._parent!r}, mu={self._mu!r}{extra})")

    def __str__(self):
        #Human-readable representation
        a, e, i, omega, w, M0 = self._elements
        center = self._parent if self._parent is not None else "origin"
        return (f"Keplerian Elements (about {center}):\n"
                f"  a     = {a:12.6f} AU\n"
                f"  e     = {e:12.6f}\n"
                f"  i     = {i:12.4f}°\n"
                f"  RAAN  = {omega:12.4f}°\n"
                f"  ω     = {w:12.4f}°\n"
                f"  M0    = {M0:12.4f}°")

    def __eq__(self, other):
        #Check equality with tolerance
        if not isinstance(other, OrbitalElements):
            return NotImplemented
        return (self._parent == other._parent and
                self._mu == other._mu and
                self._mass_ratio == other._mass_ratio and
                np.allclose(self._elements, other._elements,
                            rtol=config.EQUALITY_RTOL,
                            atol=config.EQUALITY_ATOL))

    def __hash__(self):
        #Only the exactly compared fields; rounded element values can
        #straddle a rounding boundary while still being allclose
        return hash((self._parent, self._mu, self._mass_ratio))

    # ========== STATIC METHODS ==========
    @staticmethod
    def _parse_element_name(key):
        """Map a short, long or camelCase element name to its short name"""
        name_map = {
            'a': 'a',
            'semi_major_axis': 'a',
            'semiMajorAxis': 'a',
            'e': 'e',
            'eccentricity': 'e',
            'i': 'i',
            'inclination': 'i',
            'omega': 'omega',
            'RAAN': 'omega',
            'longitude_of_ascending_node': 'omega',
            'longitudeOfAscendingNode': 'omega',
            'w': 'w',
            'argument_of_periapsis': 'w',
            'argumentOfPeriapsis': 'w',
            'M0': 'M0',
            'mean_anomaly_at_epoch': 'M0',
            'meanAnomalyAtEpoch': 'M0',
        }
        if key in name_map:
            return name_map[key]
        raise ValueError(f"Unknown orbital element '{key}'. "
                         f"Use: {list(name_map.keys())}")

    @staticmethod
    def _from_named_params(kwargs):
        """Convert named parameters to a 6-element array"""
        names = OrbitalElements._NAMES
        missing = [k for k in names if k not in kwargs]
        extra = [k for k in kwargs if k not in names]
        if missing or extra:
            raise ValueError(
                f"Could not build elements from parameters: {list(kwargs)}\n"
                f"Keplerian requires: {list(names)}"
            )
        return np.array([kwargs[k] for k in names], dtype=float)


# Abbreviation
OE = OrbitalElements
