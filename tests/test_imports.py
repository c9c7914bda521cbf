"""Smoke tests to verify package imports work."""

def test_package_imports():
    """Test that all main classes can be imported."""
    from orrery import OrbitalElements, Body, BodyCatalog, SimulationClock
    assert OrbitalElements is not None
    assert Body is not None
    assert BodyCatalog is not None
    assert SimulationClock is not None

def test_version_exists():
    """Test that version is defined."""
    import orrery
    assert hasattr(orrery, '__version__')
    assert orrery.__version__ == "0.1.0"

def test_all_exports_resolve():
    """Everything listed in __all__ is importable."""
    import orrery
    for name in orrery.__all__:
        assert hasattr(orrery, name), name

def test_can_create_orbital_elements():
    """Test basic OrbitalElements creation."""
    from orrery import OE
    oe = OE([1.0, 0.01, 0.1, 0, 0, 0])
    assert oe.a == 1.0

def test_can_evaluate_default_catalog():
    """Test basic end-to-end evaluation."""
    from orrery import solar_system, evaluate_all
    states, summary = evaluate_all(solar_system(), 0.0)
    assert len(states) == 10
