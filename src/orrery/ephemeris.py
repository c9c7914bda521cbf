'''Ephemeris aggregation for a body catalog
Evaluates every body at one simulated time and summarizes the result'''

import numpy as np
from dataclasses import dataclass
from functools import reduce
from typing import Iterable, NamedTuple, Optional, Tuple, Union
from .body import Body
from .catalog import BodyCatalog
from .config import config
from .transform import evaluate
from .utils import frozen_vector

_ORIGIN = frozen_vector([0.0, 0.0, 0.0])


@dataclass(frozen=True, eq=False)
class BodyState:
    """
    State of one body at one simulated time.

    Attributes
    ----------
    body : Body
        The authored body
    position : np.ndarray
        Absolute position [AU], read-only 3-vector
    relative_position : np.ndarray
        Position relative to the parent [AU], read-only 3-vector
    orbital_period : float or None
        Period [days], None for stationary bodies and degenerate orbits
    distance_from_origin : float
        |position| [AU]
    distance_from_parent : float
        |relative_position| [AU]
    true_anomaly : float
        True anomaly [rad], 0 for stationary bodies
    """
    body: Body
    position: np.ndarray
    relative_position: np.ndarray
    orbital_period: Optional[float]
    distance_from_origin: float
    distance_from_parent: float
    true_anomaly: float = 0.0

    @property
    def name(self) -> str:
        return self.body.name

    def __str__(self):
        x, y, z = self.position
        return (f"{self.name}: r = [{x:10.6f}, {y:10.6f}, {z:10.6f}] AU, "
                f"|r| = {self.distance_from_origin:.6f} AU")


@dataclass(frozen=True)
class EphemerisSummary:
    """
    Summary statistics over one evaluation pass.

    Attributes
    ----------
    fastest_orbiter : str or None
        Name of the body with the shortest defined orbital period
    farthest_body : str or None
        Name of the body farthest from the origin
    """
    fastest_orbiter: Optional[str] = None
    farthest_body: Optional[str] = None

    def __str__(self):
        fastest = self.fastest_orbiter or config.NO_BODY_LABEL
        farthest = self.farthest_body or config.NO_BODY_LABEL
        return f"Fastest orbit: {fastest} | Farthest body: {farthest}"


class Ephemeris(NamedTuple):
    """Body states in authored order and their summary; unpacks as a pair"""
    states: Tuple[BodyState, ...]
    summary: EphemerisSummary

    def state_of(self, name: str) -> BodyState:
        """Look up the state of a body by name"""
        for state in self.states:
            if state.name == name:
                return state
        raise KeyError(f"No body named '{name}' in ephemeris")

    def to_dataframe(self):
        """
        Export body states to a pandas DataFrame indexed by body name.

        Returns
        -------
        pd.DataFrame
            Columns: parent, x, y, z, rel_x, rel_y, rel_z, orbital_period,
            distance_from_origin, distance_from_parent, true_anomaly
        """
        import pandas as pd

        columns = ['parent', 'x', 'y', 'z', 'rel_x', 'rel_y', 'rel_z',
                   'orbital_period', 'distance_from_origin',
                   'distance_from_parent', 'true_anomaly']
        rows = []
        for state in self.states:
            rows.append([state.body.parent,
                         *state.position.tolist(),
                         *state.relative_position.tolist(),
                         np.nan if state.orbital_period is None else state.orbital_period,
                         state.distance_from_origin,
                         state.distance_from_parent,
                         state.true_anomaly])
        index = pd.Index([state.name for state in self.states], name='name')
        return pd.DataFrame(rows, columns=columns, index=index)


def _fold_summary(summary: Tuple[Optional[BodyState], Optional[BodyState]],
                  state: BodyState):
    fastest, farthest = summary
    period = state.orbital_period
    if period is not None and (fastest is None or period < fastest.orbital_period):
        fastest = state
    if farthest is None or state.distance_from_origin > farthest.distance_from_origin:
        farthest = state
    return fastest, farthest


def summarize(states: Iterable[BodyState]) -> EphemerisSummary:
    """
    Reduce body states to the fastest orbiter and the farthest body.

    Ties keep the earlier state. Either field is None when no state
    qualifies (e.g. an empty sequence, or no body with a defined period).
    """
    fastest, farthest = reduce(_fold_summary, states, (None, None))
    return EphemerisSummary(
        fastest_orbiter=fastest.name if fastest is not None else None,
        farthest_body=farthest.name if farthest is not None else None,
    )


def evaluate_all(bodies: Union[BodyCatalog, Iterable[Body]],
                 elapsed_days: float) -> Ephemeris:
    """
    Evaluate every body at one simulated time.

    Bodies are evaluated parent-first (see BodyCatalog.evaluation_order), so
    each absolute position is the parent's absolute position plus the
    orbit's relative position. Bodies without an orbit sit at the origin.

    Parameters
    ----------
    bodies : BodyCatalog or iterable of Body
        Bodies to evaluate; a plain iterable is validated as a BodyCatalog
    elapsed_days : float
        Simulated days since epoch

    Returns
    -------
    Ephemeris
        (states, summary), states in the authored body order

    Raises
    ------
    CatalogError
        If a plain iterable of bodies fails catalog validation

    Examples
    --------
    >>> states, summary = evaluate_all(solar_system(), 365.25)
    >>> summary.fastest_orbiter
    'Moon'
    """
    catalog = bodies if isinstance(bodies, BodyCatalog) else BodyCatalog(bodies)

    computed = {}
    for body in catalog.evaluation_order:
        if body.orbit is None:
            computed[body.name] = BodyState(
                body=body,
                position=_ORIGIN,
                relative_position=_ORIGIN,
                orbital_period=None,
                distance_from_origin=0.0,
                distance_from_parent=0.0,
            )
            continue

        parent = catalog.parent_of(body.name)
        parent_position = _ORIGIN if parent is None else computed[parent].position
        orbit_state = evaluate(body.orbit, elapsed_days)
        position = frozen_vector(parent_position + orbit_state.position)
        computed[body.name] = BodyState(
            body=body,
            position=position,
            relative_position=orbit_state.position,
            orbital_period=orbit_state.orbital_period,
            distance_from_origin=float(np.linalg.norm(position)),
            distance_from_parent=float(np.linalg.norm(orbit_state.position)),
            true_anomaly=orbit_state.true_anomaly,
        )

    states = tuple(computed[body.name] for body in catalog)
    return Ephemeris(states, summarize(states))
