"""Shared fixtures for the orrery test suite."""

import pytest
from orrery import config, clear_path_cache, OrbitalElements, Body


@pytest.fixture(autouse=True)
def restore_config():
    """Every test starts and ends with default configuration."""
    config.reset()
    clear_path_cache()
    yield
    config.reset()
    clear_path_cache()


@pytest.fixture
def unit_circle():
    """Circular, equatorial 1 AU orbit starting at periapsis."""
    return OrbitalElements(a=1.0, e=0.0, i=0.0, omega=0.0, w=0.0, M0=0.0)


@pytest.fixture
def sun():
    return Body('Sun', radius=0.3, color='#ffcc33', is_light_source=True)


@pytest.fixture
def earth():
    return Body('Earth', orbit=OrbitalElements(
        a=1.0, e=0.0, i=0.0, omega=0.0, w=0.0, M0=0.0, parent='Sun'))


@pytest.fixture
def moon():
    return Body('Moon', focusable=False, orbit=OrbitalElements(
        a=0.1, e=0.0, i=0.0, omega=0.0, w=0.0, M0=0.0, parent='Earth'))
