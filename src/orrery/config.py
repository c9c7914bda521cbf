"""
Global Configuration for Orrery Package
========================================

This module provides package-wide configuration settings that users can modify
to control solver tolerances, validation behavior, clock units and default
path sampling.

Examples
--------
View current configuration:

>>> import orrery
>>> print(orrery.config)

Modify settings:

>>> orrery.config.KEPLER_TOLERANCE = 1e-12  # Stricter Newton convergence
>>> orrery.config.DEFAULT_ORBIT_SEGMENTS = 512  # Smoother orbit paths

Reset to defaults:

>>> orrery.config.reset()

Temporarily modify settings:

>>> with orrery.temp_config(REPORT_NONCONVERGENCE=True):
...     # Warn if the Kepler solver hits its iteration cap
...     orrery.evaluate(orbit, 1000.0)

Notes
-----
These settings affect package-wide behavior. Modifying them will impact
all subsequent operations until changed again or reset.
"""

from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class OrreryConfig:
    """
    Global configuration for Orrery package.
    
    Attributes
    ----------
    GAUSSIAN_GRAVITATIONAL_CONSTANT : float
        Gaussian gravitational constant k [AU^(3/2) / day].
        The default gravitational parameter is GM = k^2 [AU^3/day^2].
        Default: 0.01720209895
    KEPLER_MAX_ITERATIONS : int
        Newton iteration cap for Kepler's equation.
        Default: 12
    KEPLER_TOLERANCE : float
        Newton step magnitude [rad] below which the solver stops.
        Default: 1e-8
    HIGH_ECCENTRICITY_THRESHOLD : float
        Above this eccentricity the solver starts from E = pi instead of E = M.
        Default: 0.8
    REPORT_NONCONVERGENCE : bool
        If True, a KeplerConvergenceWarning is issued whenever the solver
        reaches its iteration cap without converging.
        Default: False
    DAYS_PER_REAL_SECOND : float
        Simulated days per real second at a speed multiplier of 1.
        Default: 1.0
    DEFAULT_TIME_SCALE : float
        Speed multiplier of a freshly created SimulationClock.
        Default: 50.0
    DEFAULT_ORBIT_SEGMENTS : int
        Default number of segments for orbit path tessellation.
        Default: 128
    PATH_CACHE_SIZE : int
        Maximum number of memoized orbit paths.
        Default: 256
    EQUALITY_RTOL : float
        Relative tolerance for floating-point equality comparisons.
        Default: 1e-12
    EQUALITY_ATOL : float
        Absolute tolerance for floating-point equality comparisons.
        Default: 1e-14
    STRICT_VALIDATION : bool
        If True, validation failures raise exceptions.
        If False, validation failures issue warnings.
        Default: True
    DEFAULT_BODY_RADIUS : float
        Display radius used for bodies authored without one.
        Default: 0.05
    DEFAULT_BODY_COLOR : str
        Display color used for bodies authored without one.
        Default: '#ffffff'
    DEFAULT_ORBIT_COLOR : str
        Display color used for orbit paths of bodies without a color.
        Default: '#aaaaaa'
    NO_BODY_LABEL : str
        Text shown for an empty summary slot.
        Default: '-'
    """
    
    # Physical constants
    GAUSSIAN_GRAVITATIONAL_CONSTANT: float = 0.01720209895

    # Kepler solver
    KEPLER_MAX_ITERATIONS: int = 12
    KEPLER_TOLERANCE: float = 1e-8
    HIGH_ECCENTRICITY_THRESHOLD: float = 0.8
    REPORT_NONCONVERGENCE: bool = False

    # Simulation clock
    DAYS_PER_REAL_SECOND: float = 1.0
    DEFAULT_TIME_SCALE: float = 50.0

    # Orbit paths
    DEFAULT_ORBIT_SEGMENTS: int = 128
    PATH_CACHE_SIZE: int = 256
    
    # Numerical tolerance for equality comparisons
    EQUALITY_RTOL: float = 1e-12
    EQUALITY_ATOL: float = 1e-14
    
    # Validation behavior
    STRICT_VALIDATION: bool = True
    
    # Display fallbacks
    DEFAULT_BODY_RADIUS: float = 0.05
    DEFAULT_BODY_COLOR: str = '#ffffff'
    DEFAULT_ORBIT_COLOR: str = '#aaaaaa'
    NO_BODY_LABEL: str = '-'

    @property
    def GM(self) -> float:
        """Default gravitational parameter k^2 [AU^3/day^2]"""
        return self.GAUSSIAN_GRAVITATIONAL_CONSTANT**2

    def reset(self):
        """
        Reset all configuration values to package defaults.
        
        Examples
        --------
        >>> import orrery
        >>> orrery.config.KEPLER_MAX_ITERATIONS = 50  # Modify
        >>> orrery.config.reset()  # Back to defaults
        >>> orrery.config.KEPLER_MAX_ITERATIONS
        12
        """
        defaults = OrreryConfig()
        for key in self.__dataclass_fields__:
            setattr(self, key, getattr(defaults, key))
    
    def __repr__(self):
        """Return formatted string showing all configuration values."""
        lines = ["OrreryConfig:"]
        lines.append("  Physical Constants:")
        lines.append(f"    GAUSSIAN_GRAVITATIONAL_CONSTANT = "
                     f"{self.GAUSSIAN_GRAVITATIONAL_CONSTANT}")
        lines.append(f"    GM = {self.GM:.12e}")
        lines.append("  Kepler Solver:")
        lines.append(f"    KEPLER_MAX_ITERATIONS = {self.KEPLER_MAX_ITERATIONS}")
        lines.append(f"    KEPLER_TOLERANCE = {self.KEPLER_TOLERANCE}")
        lines.append(f"    HIGH_ECCENTRICITY_THRESHOLD = "
                     f"{self.HIGH_ECCENTRICITY_THRESHOLD}")
        lines.append(f"    REPORT_NONCONVERGENCE = {self.REPORT_NONCONVERGENCE}")
        lines.append("  Clock:")
        lines.append(f"    DAYS_PER_REAL_SECOND = {self.DAYS_PER_REAL_SECOND}")
        lines.append(f"    DEFAULT_TIME_SCALE = {self.DEFAULT_TIME_SCALE}")
        lines.append("  Orbit Paths:")
        lines.append(f"    DEFAULT_ORBIT_SEGMENTS = {self.DEFAULT_ORBIT_SEGMENTS}")
        lines.append(f"    PATH_CACHE_SIZE = {self.PATH_CACHE_SIZE}")
        lines.append("  Numerical Tolerances:")
        lines.append(f"    EQUALITY_RTOL = {self.EQUALITY_RTOL}")
        lines.append(f"    EQUALITY_ATOL = {self.EQUALITY_ATOL}")
        lines.append("  Behavior:")
        lines.append(f"    STRICT_VALIDATION = {self.STRICT_VALIDATION}")
        lines.append("  Display:")
        lines.append(f"    DEFAULT_BODY_RADIUS = {self.DEFAULT_BODY_RADIUS}")
        lines.append(f"    DEFAULT_BODY_COLOR = '{self.DEFAULT_BODY_COLOR}'")
        lines.append(f"    DEFAULT_ORBIT_COLOR = '{self.DEFAULT_ORBIT_COLOR}'")
        lines.append(f"    NO_BODY_LABEL = '{self.NO_BODY_LABEL}'")
        return "\n".join(lines)


# Global configuration instance
config = OrreryConfig()


@contextmanager
def temp_config(**kwargs):
    """
    Context manager for temporarily modifying configuration values.
    
    Configuration is automatically restored when the context exits,
    even if an exception occurs.
    
    Parameters
    ----------
    **kwargs
        Configuration attributes to temporarily modify.
    
    Examples
    --------
    >>> import orrery
    >>> with orrery.temp_config(STRICT_VALIDATION=False):
    ...     # Bad elements only warn inside this block
    ...     orbit = orrery.OE(a=1.0, e=1.5, i=0, omega=0, w=0, M0=0)
    >>> # Original config restored here
    >>> orrery.config.STRICT_VALIDATION
    True
    
    Raises
    ------
    AttributeError
        If an invalid configuration attribute is specified.
    """
    old_values = {}
    for key, value in kwargs.items():
        if key not in config.__dataclass_fields__:
            raise AttributeError(
                f"OrreryConfig has no attribute '{key}'. "
                f"Valid attributes: {list(config.__dataclass_fields__.keys())}"
            )
        old_values[key] = getattr(config, key)
        setattr(config, key, value)
    
    try:
        yield config
    finally:
        for key, value in old_values.items():
            setattr(config, key, value)
