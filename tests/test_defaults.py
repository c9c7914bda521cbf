"""
Test suite for the default solar system catalog.

Tests cover:
- Catalog contents and order
- Periods against known values
- Epoch positions and summary of the full system
"""

import pytest
import numpy as np
from orrery import (
    solar_system, inner_planets, evaluate_all, evaluate, temp_config, EARTH, MOON, SUN
)


class TestCatalog:
    """Contents of the default catalogs."""

    def test_solar_system(self):
        catalog = solar_system()
        assert len(catalog) == 10
        assert catalog.names[0] == 'Sun'
        assert catalog.names.index('Moon') == catalog.names.index('Earth') + 1
        assert catalog.parent_of('Moon') == 'Earth'
        assert [b.name for b in catalog.roots] == ['Sun']

    def test_without_moon(self):
        catalog = solar_system(include_moon=False)
        assert len(catalog) == 9
        assert 'Moon' not in catalog

    def test_inner_planets(self):
        assert inner_planets().names == ['Sun', 'Mercury', 'Venus', 'Earth', 'Mars']

    def test_sun_is_only_light_source(self):
        catalog = solar_system()
        assert [b.name for b in catalog.light_sources()] == ['Sun']
        assert SUN.is_stationary

    def test_moon_not_focusable(self):
        assert 'Moon' not in solar_system().focusable_names()
        assert 'Earth' in solar_system().focusable_names()


class TestPeriods:
    """Periods from the Gaussian gravitational constant."""

    def test_earth_year(self):
        assert EARTH.orbit.orbital_period() == pytest.approx(365.25, rel=1e-3)

    def test_sidereal_month(self):
        assert MOON.orbit.orbital_period() == pytest.approx(27.32, rel=0.01)

    def test_moon_follows_gravitational_constant(self):
        month = MOON.orbit.orbital_period()
        year = EARTH.orbit.orbital_period()
        with temp_config(GAUSSIAN_GRAVITATIONAL_CONSTANT=2 * 0.01720209895):
            assert MOON.orbit.orbital_period() == pytest.approx(month / 2)
            assert EARTH.orbit.orbital_period() == pytest.approx(year / 2)

    def test_neptune_slowest(self):
        states, _ = evaluate_all(solar_system(), 0.0)
        periods = {s.name: s.orbital_period for s in states if s.orbital_period}
        assert max(periods, key=periods.get) == 'Neptune'
        assert periods['Neptune'] == pytest.approx(164.8 * 365.25, rel=0.01)


class TestEpochState:
    """The full system at and after the epoch."""

    def test_earth_near_one_au(self):
        states, _ = evaluate_all(solar_system(), 0.0)
        earth = next(s for s in states if s.name == 'Earth')
        assert 0.98 < earth.distance_from_origin < 1.02

    @pytest.mark.parametrize("days", [0.0, 10.0, 1000.0])
    def test_moon_stays_near_earth(self, days):
        states, _ = evaluate_all(solar_system(), days)
        moon = next(s for s in states if s.name == 'Moon')
        a, e = MOON.orbit.a, MOON.orbit.e
        assert a * (1 - e) - 1e-12 <= moon.distance_from_parent <= a * (1 + e) + 1e-12

    def test_summary(self):
        _, summary = evaluate_all(solar_system(), 0.0)
        assert summary.fastest_orbiter == 'Moon'
        assert summary.farthest_body == 'Neptune'
        assert str(summary) == "Fastest orbit: Moon | Farthest body: Neptune"

    def test_summary_without_moon(self):
        _, summary = evaluate_all(solar_system(include_moon=False), 0.0)
        assert summary.fastest_orbiter == 'Mercury'

    def test_all_positions_finite(self):
        states, _ = evaluate_all(solar_system(), 12345.6)
        assert all(np.all(np.isfinite(s.position)) for s in states)

    def test_relative_matches_evaluate(self):
        states, _ = evaluate_all(solar_system(), 42.0)
        earth = next(s for s in states if s.name == 'Earth')
        assert np.allclose(earth.relative_position, evaluate(EARTH.orbit, 42.0).position)
