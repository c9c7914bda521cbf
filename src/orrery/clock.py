'''Simulation clock
Turns real-time frame deltas into accumulated simulated days'''

import math
from dataclasses import dataclass, replace
from typing import Optional
from .config import config


def _clamp(value) -> float:
    """Negative and non-finite inputs count as zero"""
    value = float(value)
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


@dataclass(frozen=True)
class ClockState:
    """
    Immutable snapshot of the simulation clock.

    Attributes
    ----------
    elapsed_days : float
        Accumulated simulated time [days]
    last_sample : float or None
        Real timestamp [s] of the last tick, None until a baseline exists
    speed : float
        Speed multiplier in effect
    paused : bool
        Whether simulated time is frozen
    """
    elapsed_days: float = 0.0
    last_sample: Optional[float] = None
    speed: float = 1.0
    paused: bool = False


def advance_clock(state: ClockState, real_delta_seconds: float, speed: float,
                  paused: bool, sample_time: Optional[float] = None) -> ClockState:
    """
    Pure clock transition for one frame.

    If the speed multiplier or the paused flag differs from the previous
    frame, this frame only re-establishes the baseline and contributes no
    simulated time. Otherwise, while unpaused, the elapsed time grows by
    real_delta_seconds * speed * config.DAYS_PER_REAL_SECOND.

    Parameters
    ----------
    state : ClockState
        Previous clock state
    real_delta_seconds : float
        Real time since the previous frame [s], clamped to >= 0
    speed : float
        Speed multiplier, clamped to >= 0
    paused : bool
        Whether simulated time is frozen
    sample_time : float, optional
        Real timestamp of this frame, recorded as the new baseline

    Returns
    -------
    ClockState
        New state; the input state is not modified
    """
    speed = _clamp(speed)
    paused = bool(paused)
    delta = _clamp(real_delta_seconds)

    if speed != state.speed or paused != state.paused:
        # controls changed: new baseline, no retroactive contribution
        return ClockState(state.elapsed_days, sample_time, speed, paused)

    elapsed = state.elapsed_days
    if not paused:
        elapsed += delta * speed * config.DAYS_PER_REAL_SECOND
    return ClockState(elapsed, sample_time, speed, paused)


class SimulationClock:
    """
    Accumulates simulated days from a per-frame refresh callback.

    The clock holds the only mutable state of the package: the current
    ClockState, replaced wholesale on every frame.

    Parameters
    ----------
    speed : float, optional
        Initial speed multiplier (default: config.DEFAULT_TIME_SCALE)
    paused : bool, optional
        Initial paused flag (default False)

    Examples
    --------
    >>> clock = SimulationClock(speed=50)
    >>> clock.advance(1.0, speed=50, paused=False)
    50.0
    >>> clock.advance(1.0, speed=100, paused=False)  # speed change, new baseline
    50.0
    >>> clock.advance(1.0, speed=100, paused=False)
    150.0
    """
    def __init__(self, speed: Optional[float] = None, paused: bool = False):
        if speed is None:
            speed = config.DEFAULT_TIME_SCALE
        self._initial = ClockState(speed=_clamp(speed), paused=bool(paused))
        self._state = self._initial

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def elapsed_days(self) -> float:
        return self._state.elapsed_days

    @property
    def speed(self) -> float:
        return self._state.speed

    @property
    def paused(self) -> bool:
        return self._state.paused

    def advance(self, real_delta_seconds: float, speed: float, paused: bool) -> float:
        """
        Advance by a real-time delta.

        Returns
        -------
        float
            Accumulated simulated days
        """
        self._state = advance_clock(self._state, real_delta_seconds, speed, paused)
        return self._state.elapsed_days

    def tick(self, timestamp_seconds: float, speed: float, paused: bool) -> float:
        """
        Advance to an absolute real timestamp, as supplied by a refresh signal.

        The first tick, and the first tick after a control change, only
        record the baseline.

        Returns
        -------
        float
            Accumulated simulated days
        """
        previous = self._state.last_sample
        delta = 0.0 if previous is None else timestamp_seconds - previous
        self._state = advance_clock(self._state, delta, speed, paused,
                                    sample_time=timestamp_seconds)
        return self._state.elapsed_days

    def reset(self):
        """Return to zero elapsed time with the initial controls"""
        self._state = self._initial

    def rebase(self):
        """Forget the last timestamp so the next tick starts a new baseline"""
        self._state = replace(self._state, last_sample=None)

    def __repr__(self):
        s = self._state
        return (f"SimulationClock(elapsed_days={s.elapsed_days}, "
                f"speed={s.speed}, paused={s.paused})")
