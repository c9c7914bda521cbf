'''Kepler's equation solver and angle helpers

Solves M = E - e*sin(E) for the eccentric anomaly E by Newton-Raphson
iteration. Scalars and NumPy arrays of mean anomaly are both accepted.'''

import warnings
import numpy as np
from typing import Optional, Union
from .config import config

TWO_PI = 2 * np.pi

ArrayLike = Union[float, np.ndarray]


class KeplerConvergenceWarning(RuntimeWarning):
    """Issued when the Kepler solver reaches its iteration cap unconverged."""


def normalize_angle(angle: ArrayLike) -> ArrayLike:
    """
    Wrap an angle (or array of angles) into [0, 2*pi).

    Parameters
    ----------
    angle : float or np.ndarray
        Angle(s) in radians

    Returns
    -------
    float or np.ndarray
        Equivalent angle(s) in [0, 2*pi)
    """
    wrapped = np.mod(angle, TWO_PI)
    # np.mod can round a tiny negative input up to exactly 2*pi
    wrapped = np.where(wrapped >= TWO_PI, 0.0, wrapped)
    if np.ndim(wrapped) == 0:
        return float(wrapped)
    return wrapped


def solve_kepler(mean_anomaly: ArrayLike, eccentricity: float,
                 max_iterations: Optional[int] = None,
                 tolerance: Optional[float] = None,
                 report: Optional[bool] = None) -> ArrayLike:
    """
    Solve Kepler's equation for the eccentric anomaly.

    Newton-Raphson on f(E) = E - e*sin(E) - M, starting from E = M, or from
    E = pi when e exceeds config.HIGH_ECCENTRICITY_THRESHOLD. Iteration
    stops when every Newton step is smaller than the tolerance or when the
    iteration cap is reached. Reaching the cap is not an error: the last
    estimate is returned.

    Parameters
    ----------
    mean_anomaly : float or np.ndarray
        Mean anomaly M [rad]
    eccentricity : float
        Orbital eccentricity, expected in [0, 1)
    max_iterations : int, optional
        Iteration cap (default: config.KEPLER_MAX_ITERATIONS)
    tolerance : float, optional
        Newton step tolerance [rad] (default: config.KEPLER_TOLERANCE)
    report : bool, optional
        Warn if the cap is reached unconverged
        (default: config.REPORT_NONCONVERGENCE)

    Returns
    -------
    float or np.ndarray
        Eccentric anomaly E [rad], float for scalar input

    Warns
    -----
    KeplerConvergenceWarning
        If reporting is enabled and the solver did not converge

    Examples
    --------
    >>> solve_kepler(1.0, 0.0)
    1.0
    >>> E = solve_kepler(np.linspace(0, 2*np.pi, 5), 0.5)
    """
    if max_iterations is None:
        max_iterations = config.KEPLER_MAX_ITERATIONS
    if tolerance is None:
        tolerance = config.KEPLER_TOLERANCE
    if report is None:
        report = config.REPORT_NONCONVERGENCE

    M = np.asarray(mean_anomaly, dtype=float)
    e = float(eccentricity)
    if e > config.HIGH_ECCENTRICITY_THRESHOLD:
        E = np.full_like(M, np.pi)
    else:
        E = M.copy()

    converged = False
    for _ in range(max_iterations):
        f = E - e*np.sin(E) - M
        f_prime = 1 - e*np.cos(E)
        delta = f / f_prime
        E = E - delta
        if np.all(np.abs(delta) < tolerance):
            converged = True
            break

    if report and not converged:
        warnings.warn(
            f"Kepler solver reached {max_iterations} iterations without "
            f"converging to {tolerance} rad (e={e}); returning best estimate",
            KeplerConvergenceWarning,
            stacklevel=2
        )

    if E.ndim == 0:
        return float(E)
    return E


def true_anomaly(eccentric_anomaly: ArrayLike, eccentricity: float) -> ArrayLike:
    """True anomaly [rad] from eccentric anomaly, in (-pi, pi]"""
    e = eccentricity
    return np.arctan2(np.sqrt(1 - e**2) * np.sin(eccentric_anomaly),
                      np.cos(eccentric_anomaly) - e)
