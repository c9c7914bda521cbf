'''Orbital state transform
Evaluates Keplerian elements at an elapsed time, relative to the parent body'''

import math
import numpy as np
from dataclasses import dataclass
from typing import Optional, Tuple
from .kepler import normalize_angle, solve_kepler, true_anomaly
from .orbital_elements import OrbitalElements
from .utils import frozen_vector


@dataclass(frozen=True, eq=False)
class OrbitalState:
    """
    Instantaneous state of an orbit, in the parent body's frame.

    Attributes
    ----------
    position : np.ndarray
        Position relative to the parent [AU], read-only 3-vector
    radius_vector : float
        Distance from the parent [AU]
    true_anomaly : float
        True anomaly [rad]
    orbital_period : float or None
        Period [days], None for a degenerate orbit
    orbital_plane_position : np.ndarray
        (x, y) position in the orbital plane [AU], periapsis along +x
    mean_anomaly : float
        Mean anomaly at the evaluated time [rad], in [0, 2*pi)
    eccentric_anomaly : float
        Eccentric anomaly [rad]
    """
    position: np.ndarray
    radius_vector: float
    true_anomaly: float
    orbital_period: Optional[float]
    orbital_plane_position: np.ndarray
    mean_anomaly: float = 0.0
    eccentric_anomaly: float = 0.0

    @classmethod
    def degenerate(cls) -> "OrbitalState":
        """Zero state returned for orbits with a non-positive semi-major axis"""
        return cls(position=frozen_vector([0.0, 0.0, 0.0]),
                   radius_vector=0.0,
                   true_anomaly=0.0,
                   orbital_period=None,
                   orbital_plane_position=frozen_vector([0.0, 0.0]))

    @property
    def is_degenerate(self) -> bool:
        return self.orbital_period is None


def perifocal_basis(elements: OrbitalElements) -> Tuple[np.ndarray, np.ndarray]:
    """
    Unit vectors of the orbital plane expressed in the parent frame.

    Returns
    -------
    u : np.ndarray
        Direction of periapsis
    v : np.ndarray
        In-plane direction 90 degrees ahead of periapsis
    """
    DCM = elements.rotation_matrix()
    return DCM[:, 0], DCM[:, 1]


def evaluate(elements: OrbitalElements, elapsed_days: float) -> OrbitalState:
    """
    Position of an orbiting body relative to its parent at a given time.

    Parameters
    ----------
    elements : OrbitalElements
        Orbit definition (angles in degrees, a in AU)
    elapsed_days : float
        Simulated days since epoch

    Returns
    -------
    OrbitalState
        Zero state with an undefined period if a <= 0

    Examples
    --------
    >>> state = evaluate(OE(a=1, e=0, i=0, omega=0, w=0, M0=0), 0.0)
    >>> state.position
    array([1., 0., 0.])
    """
    if elements.is_degenerate:
        return OrbitalState.degenerate()

    a = elements.a
    e = elements.e
    _, _, _, M0 = elements.radians()
    n = elements.mean_motion()

    M = normalize_angle(M0 + n * elapsed_days)
    E = solve_kepler(M, e)
    nu = float(true_anomaly(E, e))
    r = a * (1 - e * math.cos(E))

    # position in perifocal frame
    x_o = r * math.cos(nu)
    y_o = r * math.sin(nu)

    u, v = perifocal_basis(elements)
    position = u * x_o + v * y_o

    return OrbitalState(position=frozen_vector(position),
                        radius_vector=r,
                        true_anomaly=nu,
                        orbital_period=2 * math.pi / n,
                        orbital_plane_position=frozen_vector([x_o, y_o]),
                        mean_anomaly=M,
                        eccentric_anomaly=E)
