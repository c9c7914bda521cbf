'''Orbit path tessellation
Samples one full revolution of an orbit as a closed polyline'''

from functools import lru_cache
import numpy as np
from typing import Optional
from .config import config
from .kepler import TWO_PI, solve_kepler, true_anomaly
from .orbital_elements import OrbitalElements
from .transform import perifocal_basis


def tessellate(elements: Optional[OrbitalElements],
               segment_count: Optional[int] = None) -> np.ndarray:
    """
    Sample an orbit at evenly spaced mean anomalies over one revolution.

    Points are in the parent body's frame and do not depend on time. The
    path is closed: segment_count + 1 points, the last equal to the first.

    Parameters
    ----------
    elements : OrbitalElements or None
        Orbit definition
    segment_count : int, optional
        Number of segments (default: config.DEFAULT_ORBIT_SEGMENTS)

    Returns
    -------
    np.ndarray
        Array of shape (segment_count + 1, 3) [AU], or shape (0, 3) if the
        orbit is missing or degenerate

    Raises
    ------
    ValueError
        If segment_count is less than 1

    Examples
    --------
    >>> points = tessellate(OE(a=1, e=0.5, i=10, omega=0, w=0, M0=0), 64)
    >>> points.shape
    (65, 3)
    """
    if segment_count is None:
        segment_count = config.DEFAULT_ORBIT_SEGMENTS
    if int(segment_count) != segment_count or segment_count < 1:
        raise ValueError(f"segment_count must be a positive integer, got {segment_count}")
    segment_count = int(segment_count)

    if elements is None or elements.is_degenerate:
        return np.empty((0, 3))

    a = elements.a
    e = elements.e
    M = TWO_PI * np.arange(segment_count + 1) / segment_count
    E = solve_kepler(M, e)
    nu = true_anomaly(E, e)
    r = a * (1 - e * np.cos(E))

    # positions in perifocal frame, shape (n, 2)
    planar = np.column_stack((r * np.cos(nu), r * np.sin(nu)))
    u, v = perifocal_basis(elements)
    points = planar @ np.vstack((u, v))
    # close the loop exactly
    points[-1] = points[0]
    return points


def _read_only_path(elements: OrbitalElements, segment_count: int) -> np.ndarray:
    points = tessellate(elements, segment_count)
    points.flags.writeable = False
    return points


# built on first use, and rebuilt when config.PATH_CACHE_SIZE changes
_cached_path = None


def _path_cache():
    global _cached_path
    size = config.PATH_CACHE_SIZE
    if _cached_path is None or _cached_path.cache_parameters()['maxsize'] != size:
        _cached_path = lru_cache(maxsize=size)(_read_only_path)
    return _cached_path


def tessellate_cached(elements: Optional[OrbitalElements],
                      segment_count: Optional[int] = None) -> np.ndarray:
    """
    Memoized tessellate(), returning a read-only array.

    Orbit paths are time independent, so the same elements always produce
    the same path. Paths are kept in a least-recently-used cache holding at
    most config.PATH_CACHE_SIZE entries; changing that size starts a new,
    empty cache.
    """
    if segment_count is None:
        segment_count = config.DEFAULT_ORBIT_SEGMENTS
    if elements is None:
        return tessellate(None, segment_count)
    return _path_cache()(elements, segment_count)


def clear_path_cache():
    """Discard all memoized orbit paths"""
    if _cached_path is not None:
        _cached_path.cache_clear()
