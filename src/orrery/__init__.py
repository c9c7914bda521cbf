"""
Orrery: Keplerian Ephemerides for Hierarchical Body Systems

A Python package that places bodies of a parent-child orbital hierarchy
at any simulated time from their Keplerian elements, samples their orbit
paths for display, and turns real-time frame deltas into simulated days.
"""

# Configuration
from .config import config, temp_config, OrreryConfig

# Core classes
from .orbital_elements import OrbitalElements, OrbitalElements as OE
from .body import Body
from .catalog import BodyCatalog, CatalogError

# Core operations
from .kepler import solve_kepler, normalize_angle, KeplerConvergenceWarning
from .transform import OrbitalState, evaluate, perifocal_basis
from .ephemeris import (BodyState, EphemerisSummary, Ephemeris,
                        evaluate_all, summarize)
from .tessellate import tessellate, tessellate_cached, clear_path_cache
from .clock import ClockState, SimulationClock, advance_clock

# Default catalog
from .defaults import (SUN, MERCURY, VENUS, EARTH, MOON, MARS,
                       JUPITER, SATURN, URANUS, NEPTUNE,
                       solar_system, inner_planets)

# Package metadata
__version__ = "0.1.0"

# Define what gets imported with "from orrery import *"
__all__ = [
    # Configuration
    "config",
    "temp_config",
    "OrreryConfig",
    # Classes
    "OrbitalElements",
    "Body",
    "BodyCatalog",
    "OrbitalState",
    "BodyState",
    "EphemerisSummary",
    "Ephemeris",
    "ClockState",
    "SimulationClock",
    # Abbreviations
    "OE",
    # Operations
    "solve_kepler",
    "normalize_angle",
    "evaluate",
    "perifocal_basis",
    "evaluate_all",
    "summarize",
    "tessellate",
    "tessellate_cached",
    "clear_path_cache",
    "advance_clock",
    # Errors and warnings
    "CatalogError",
    "KeplerConvergenceWarning",
    # Bodies
    "SUN",
    "MERCURY",
    "VENUS",
    "EARTH",
    "MOON",
    "MARS",
    "JUPITER",
    "SATURN",
    "URANUS",
    "NEPTUNE",
    "solar_system",
    "inner_planets",
]
