'''Celestial body definition for the orrery package
Body dataclass definition'''

import math
from dataclasses import dataclass
from typing import Optional
from .config import config
from .orbital_elements import OrbitalElements
from .utils import validation_error


@dataclass(frozen=True)
class Body:
    """
    Immutable authored description of a celestial body.

    Attributes
    ----------
    name : str
        Unique identifier within a catalog
    radius : float, optional
        Display radius [scene units]
    color : str, optional
        Display color, e.g. '#ffcc33'
    is_light_source : bool
        Whether the body emits light (e.g. a star)
    focusable : bool
        Whether a camera may target the body (default True)
    orbit : OrbitalElements, optional
        Orbit about the parent named in orbit.parent. A body without an
        orbit is stationary at the origin.
    """
    name: str
    radius: Optional[float] = None
    color: Optional[str] = None
    is_light_source: bool = False
    focusable: bool = True
    orbit: Optional[OrbitalElements] = None

    def __post_init__(self):
        #Validate parameters
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Body name must be a non-empty string, got {self.name!r}")
        if self.orbit is not None and not isinstance(self.orbit, OrbitalElements):
            raise TypeError(f"orbit must be OrbitalElements, got {type(self.orbit)}")
        if self.radius is not None and not (math.isfinite(self.radius)
                                            and self.radius >= 0):
            validation_error(f"Radius of '{self.name}' must be non-negative, "
                             f"got {self.radius}")
        if self.orbit is not None and self.orbit.parent == self.name:
            validation_error(f"Body '{self.name}' cannot orbit itself")

    @property
    def parent(self) -> Optional[str]:
        """Name of the parent body, None for bodies about the origin"""
        if self.orbit is None:
            return None
        return self.orbit.parent

    @property
    def is_stationary(self) -> bool:
        return self.orbit is None

    @property
    def display_radius(self) -> float:
        """Radius, falling back to config.DEFAULT_BODY_RADIUS"""
        if not self.radius:
            return config.DEFAULT_BODY_RADIUS
        return self.radius

    @property
    def display_color(self) -> str:
        """Color, falling back to config.DEFAULT_BODY_COLOR"""
        return self.color or config.DEFAULT_BODY_COLOR

    @property
    def orbit_color(self) -> str:
        """Orbit path color, falling back to config.DEFAULT_ORBIT_COLOR"""
        return self.color or config.DEFAULT_ORBIT_COLOR

    @classmethod
    def from_dict(cls, data: dict, validate: bool = True) -> "Body":
        """
        Create a Body from a mapping.

        Body fields may be snake_case or camelCase (isLightSource). The orbit
        is read from an 'orbit' mapping, or from element keys placed directly
        on the record.

        Examples
        --------
        >>> Body.from_dict({'name': 'Sun', 'isLightSource': True})
        >>> Body.from_dict({'name': 'Moon', 'orbit': {'parent': 'Earth',
        ...                 'semiMajorAxis': 0.00257, 'eccentricity': 0.0549}})
        """
        key_map = {
            'name': 'name',
            'radius': 'radius',
            'color': 'color',
            'is_light_source': 'is_light_source',
            'isLightSource': 'is_light_source',
            'focusable': 'focusable',
        }
        kwargs = {}
        orbit_data = {}
        for key, value in data.items():
            if key in key_map:
                kwargs[key_map[key]] = value
            elif key == 'orbit':
                if value is not None:
                    orbit_data.update(value)
            else:
                orbit_data[key] = value
        if 'name' not in kwargs:
            raise ValueError(f"Body record is missing 'name': {dict(data)}")
        if set(orbit_data) - set(OrbitalElements.OPTION_KEYS):
            kwargs['orbit'] = OrbitalElements.from_dict(orbit_data, validate=validate)
        elif any(v is not None for v in orbit_data.values()):
            raise ValueError(
                f"Body '{kwargs['name']}' has {list(orbit_data)} but no orbital elements")
        return cls(**kwargs)

    def __str__(self):
        if self.orbit is None:
            return f"{self.name} (stationary at origin)"
        center = self.parent if self.parent is not None else "origin"
        return f"{self.name} (orbits {center}, a = {self.orbit.a:.6f} AU)"
