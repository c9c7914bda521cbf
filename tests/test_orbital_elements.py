"""
Test suite for the OrbitalElements class.

Tests include:
1. Construction (array and named parameters)
2. Validation and degenerate orbits
3. Derived quantities (mean motion, period, rotation matrix)
4. Factory methods, equality and batch export
"""

import warnings
import pytest
import numpy as np
import pandas as pd
from orrery import OrbitalElements, OE, config, temp_config


# =============================================================================
# Test Configuration
# =============================================================================

# Tolerance for numerical comparisons
RTOL = 1e-12
ATOL = 1e-14

# Period of a 1 AU orbit under the gaussian gravitational constant [days]
YEAR_DAYS = 2 * np.pi / 0.01720209895


# =============================================================================
# Construction
# =============================================================================

class TestConstruction:
    """Elements can be built from an array or named parameters."""

    def test_array_construction(self):
        oe = OrbitalElements([1.5, 0.1, 2.0, 30.0, 40.0, 50.0])
        assert oe.a == 1.5
        assert oe.e == 0.1
        assert oe.i == 2.0
        assert oe.omega == 30.0
        assert oe.w == 40.0
        assert oe.M0 == 50.0
        assert oe.parent is None

    def test_named_construction(self):
        oe = OE(a=1.5, e=0.1, i=2.0, omega=30.0, w=40.0, M0=50.0, parent='Sun')
        assert np.array_equal(oe.elements, [1.5, 0.1, 2.0, 30.0, 40.0, 50.0])
        assert oe.parent == 'Sun'

    def test_long_name_aliases(self):
        oe = OE(a=1.5, e=0.1, i=2.0, omega=30.0, w=40.0, M0=50.0)
        assert oe.semi_major_axis == oe.a
        assert oe.eccentricity == oe.e
        assert oe.inclination == oe.i
        assert oe.longitude_of_ascending_node == oe.omega
        assert oe.argument_of_periapsis == oe.w
        assert oe.mean_anomaly_at_epoch == oe.M0

    def test_missing_named_parameter(self):
        with pytest.raises(ValueError, match="Keplerian requires"):
            OE(a=1.0, e=0.0, i=0.0, omega=0.0, w=0.0)

    def test_no_arguments(self):
        with pytest.raises(ValueError):
            OrbitalElements()

    def test_array_and_names_together(self):
        with pytest.raises(ValueError):
            OrbitalElements([1, 0, 0, 0, 0, 0], a=1.0)

    def test_wrong_length(self):
        with pytest.raises(ValueError, match="6-element"):
            OrbitalElements([1.0, 0.0, 0.0])

    def test_elements_are_read_only(self):
        oe = OE(a=1.0, e=0.0, i=0.0, omega=0.0, w=0.0, M0=0.0)
        with pytest.raises(ValueError):
            oe.elements[0] = 2.0

    def test_input_array_not_shared(self):
        source = np.array([1.0, 0.0, 0.0, 0.0, 0.0, 0.0])
        oe = OrbitalElements(source)
        source[0] = 5.0
        assert oe.a == 1.0

    def test_sequence_protocol(self):
        oe = OrbitalElements([1.0, 0.2, 3.0, 4.0, 5.0, 6.0])
        assert len(oe) == 6
        assert oe[1] == 0.2
        assert list(oe) == [1.0, 0.2, 3.0, 4.0, 5.0, 6.0]


# =============================================================================
# Validation
# =============================================================================

class TestValidation:
    """Malformed elements are configuration errors, degenerate ones are not."""

    @pytest.mark.parametrize("e", [-0.1, 1.0, 1.5])
    def test_eccentricity_out_of_range(self, e):
        with pytest.raises(ValueError, match="Eccentricity"):
            OE(a=1.0, e=e, i=0.0, omega=0.0, w=0.0, M0=0.0)

    @pytest.mark.parametrize("bad", [np.nan, np.inf])
    def test_non_finite_values(self, bad):
        with pytest.raises(ValueError, match="NaN or Inf"):
            OrbitalElements([1.0, 0.1, bad, 0.0, 0.0, 0.0])

    def test_non_positive_mu(self):
        with pytest.raises(ValueError, match="Gravitational parameter"):
            OrbitalElements([1.0, 0.1, 0.0, 0.0, 0.0, 0.0], mu=0.0)

    def test_parent_must_be_name(self):
        with pytest.raises(TypeError):
            OrbitalElements([1.0, 0.1, 0.0, 0.0, 0.0, 0.0], parent=3)

    def test_relaxed_validation_warns(self):
        with temp_config(STRICT_VALIDATION=False):
            with pytest.warns(UserWarning, match="Eccentricity"):
                oe = OE(a=1.0, e=1.5, i=0.0, omega=0.0, w=0.0, M0=0.0)
        assert oe.e == 1.5

    def test_validation_can_be_skipped(self):
        oe = OrbitalElements([1.0, 2.0, 0.0, 0.0, 0.0, 0.0], validate=False)
        assert oe.e == 2.0

    @pytest.mark.parametrize("a", [0.0, -1.0, -1e-9])
    def test_degenerate_axis_accepted(self, a):
        oe = OE(a=a, e=0.3, i=10.0, omega=20.0, w=30.0, M0=40.0)
        assert oe.is_degenerate

    @pytest.mark.parametrize("elements", [
        [0.0, 1.0, 0.0, 0.0, 0.0, 0.0],
        [0.0, 1.5, 0.0, 0.0, 0.0, 0.0],
        [0.0, -0.2, 0.0, 0.0, 0.0, 0.0],
        [-1.0, 0.1, np.nan, 0.0, 0.0, 0.0],
    ])
    def test_degenerate_skips_other_checks(self, elements):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            oe = OrbitalElements(elements)
        assert oe.is_degenerate
        assert oe.orbital_period() is None

    def test_nan_axis_rejected(self):
        with pytest.raises(ValueError, match="NaN or Inf"):
            OrbitalElements([np.nan, 0.1, 0.0, 0.0, 0.0, 0.0])

    def test_non_positive_mass_ratio(self):
        with pytest.raises(ValueError, match="Mass ratio"):
            OrbitalElements([1.0, 0.1, 0.0, 0.0, 0.0, 0.0], mass_ratio=-1.0)

    def test_mu_and_mass_ratio_exclusive(self):
        with pytest.raises(ValueError, match="not both"):
            OrbitalElements([1.0, 0.1, 0.0, 0.0, 0.0, 0.0], mu=1e-4, mass_ratio=0.5)


# =============================================================================
# Orbital Properties
# =============================================================================

class TestOrbitalProperties:
    """Mean motion, period and orientation."""

    def test_one_au_period(self):
        oe = OE(a=1.0, e=0.0, i=0.0, omega=0.0, w=0.0, M0=0.0)
        assert oe.orbital_period() == pytest.approx(YEAR_DAYS, rel=RTOL)
        assert oe.orbital_period() == pytest.approx(365.25, rel=1e-3)

    def test_mean_motion(self):
        oe = OE(a=4.0, e=0.2, i=0.0, omega=0.0, w=0.0, M0=0.0)
        assert oe.mean_motion() == pytest.approx(config.GM**0.5 / 8.0, rel=RTOL)

    @pytest.mark.parametrize("a", [0.0, -2.0])
    def test_degenerate_period_undefined(self, a):
        oe = OE(a=a, e=0.0, i=0.0, omega=0.0, w=0.0, M0=0.0)
        assert oe.mean_motion() is None
        assert oe.orbital_period() is None

    def test_custom_mu(self):
        base = OE(a=1.0, e=0.0, i=0.0, omega=0.0, w=0.0, M0=0.0)
        heavy = base.replace(mu=4 * config.GM)
        assert heavy.orbital_period() == pytest.approx(base.orbital_period() / 2)

    def test_default_mu_follows_config(self):
        oe = OE(a=1.0, e=0.0, i=0.0, omega=0.0, w=0.0, M0=0.0)
        with temp_config(GAUSSIAN_GRAVITATIONAL_CONSTANT=0.02):
            assert oe.mu == pytest.approx(0.0004)

    def test_mass_ratio_follows_config(self):
        oe = OE(a=1.0, e=0.0, i=0.0, omega=0.0, w=0.0, M0=0.0, mass_ratio=0.25)
        assert oe.mu == pytest.approx(0.25 * config.GM)
        with temp_config(GAUSSIAN_GRAVITATIONAL_CONSTANT=0.02):
            assert oe.mu == pytest.approx(0.0001)
            assert oe.orbital_period() == pytest.approx(2 * np.pi / 0.01)

    def test_replace_switches_between_mu_and_mass_ratio(self):
        oe = OE(a=1.0, e=0.0, i=0.0, omega=0.0, w=0.0, M0=0.0, mass_ratio=0.5)
        assert oe.replace(a=2.0).mass_ratio == 0.5
        fixed = oe.replace(mu=1e-4)
        assert fixed.mass_ratio is None
        assert fixed.mu == 1e-4
        assert fixed.replace(mass_ratio=2.0).mu == pytest.approx(2.0 * config.GM)

    def test_radians(self):
        oe = OE(a=1.0, e=0.0, i=90.0, omega=180.0, w=45.0, M0=360.0)
        assert np.allclose(oe.radians(), [np.pi/2, np.pi, np.pi/4, 2*np.pi])

    @pytest.mark.parametrize("angles", [
        (0.0, 0.0, 0.0),
        (23.4, 0.0, 0.0),
        (5.1, 125.0, 318.0),
        (170.0, 300.0, 10.0),
    ])
    def test_rotation_matrix_orthonormal(self, angles):
        i, omega, w = angles
        oe = OE(a=1.0, e=0.1, i=i, omega=omega, w=w, M0=0.0)
        R = oe.rotation_matrix()
        assert np.allclose(R @ R.T, np.eye(3), atol=1e-12)
        assert np.linalg.det(R) == pytest.approx(1.0)

    def test_rotation_matrix_identity_for_zero_angles(self):
        oe = OE(a=1.0, e=0.1, i=0.0, omega=0.0, w=0.0, M0=0.0)
        assert np.allclose(oe.rotation_matrix(), np.eye(3))


# =============================================================================
# Factories, equality and batch export
# =============================================================================

class TestFromDict:
    """Orbit definitions authored as mappings."""

    def test_camel_case_keys(self):
        oe = OrbitalElements.from_dict({
            'semiMajorAxis': 1.52, 'eccentricity': 0.093, 'inclination': 1.85,
            'longitudeOfAscendingNode': 49.6, 'argumentOfPeriapsis': 286.5,
            'meanAnomalyAtEpoch': 19.4, 'parent': 'Sun'})
        assert np.allclose(oe.elements, [1.52, 0.093, 1.85, 49.6, 286.5, 19.4])
        assert oe.parent == 'Sun'

    def test_missing_angles_default_to_zero(self):
        oe = OrbitalElements.from_dict({'a': 2.0, 'e': 0.1})
        assert np.array_equal(oe.elements[2:], np.zeros(4))

    def test_missing_axis(self):
        with pytest.raises(ValueError, match="missing 'a'"):
            OrbitalElements.from_dict({'e': 0.1})

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown orbital element"):
            OrbitalElements.from_dict({'a': 1.0, 'e': 0.1, 'period': 3.0})

    def test_duplicate_key(self):
        with pytest.raises(ValueError, match="more than once"):
            OrbitalElements.from_dict({'a': 1.0, 'semiMajorAxis': 1.0, 'e': 0.1})

    def test_to_dict_roundtrip(self):
        oe = OE(a=1.0, e=0.2, i=3.0, omega=4.0, w=5.0, M0=6.0, parent='Sun')
        assert OrbitalElements.from_dict(oe.to_dict()) == oe

    def test_mass_ratio_key(self):
        oe = OrbitalElements.from_dict({'a': 0.0026, 'e': 0.05, 'parent': 'Earth',
                                        'massRatio': 3e-6})
        assert oe.mass_ratio == 3e-6
        assert oe.mu == pytest.approx(3e-6 * config.GM)

    def test_degenerate_record_with_bad_eccentricity(self):
        oe = OrbitalElements.from_dict({'a': 0.0, 'e': 2.0})
        assert oe.is_degenerate


class TestEquality:
    """Tolerance-based equality consistent with hashing."""

    def test_equal_within_tolerance(self):
        a = OE(a=1.0, e=0.2, i=3.0, omega=4.0, w=5.0, M0=6.0)
        b = OE(a=1.0 + 1e-15, e=0.2, i=3.0, omega=4.0, w=5.0, M0=6.0)
        assert a == b
        assert hash(a) == hash(b)

    @pytest.mark.parametrize("M0", [300.0, 359.99999, 123.456789])
    def test_equal_large_angles_hash_equally(self, M0):
        a = OE(a=5.2, e=0.05, i=1.3, omega=100.5, w=274.3, M0=M0)
        b = a.replace(M0=M0 + 1e-10)
        assert a == b
        assert hash(a) == hash(b)
        assert {a: 'path'}[b] == 'path'

    def test_mass_ratio_matters(self):
        a = OE(a=1.0, e=0.2, i=3.0, omega=4.0, w=5.0, M0=6.0, mass_ratio=1e-6)
        assert a != a.replace(mass_ratio=2e-6)
        assert a != a.replace(mu=a.mu)

    def test_parent_matters(self):
        a = OE(a=1.0, e=0.2, i=3.0, omega=4.0, w=5.0, M0=6.0, parent='Sun')
        b = a.replace(parent='Earth')
        assert a != b

    def test_not_equal_to_other_types(self):
        oe = OE(a=1.0, e=0.2, i=3.0, omega=4.0, w=5.0, M0=6.0)
        assert oe != [1.0, 0.2, 3.0, 4.0, 5.0, 6.0]

    def test_replace_keeps_original(self):
        oe = OE(a=1.0, e=0.2, i=3.0, omega=4.0, w=5.0, M0=6.0, parent='Sun')
        wider = oe.replace(a=2.0, inclination=10.0)
        assert oe.a == 1.0
        assert wider.a == 2.0
        assert wider.i == 10.0
        assert wider.parent == 'Sun'

    def test_str_and_repr(self):
        oe = OE(a=1.0, e=0.2, i=3.0, omega=4.0, w=5.0, M0=6.0, parent='Sun')
        assert "about Sun" in str(oe)
        assert repr(oe).startswith("OrbitalElements([1.0, 0.2")


class TestBatch:
    """Batch helpers over lists of elements."""

    def test_to_dataframe(self):
        orbits = [OE(a=1.0, e=0.0, i=0.0, omega=0.0, w=0.0, M0=0.0, parent='Sun'),
                  OE(a=2.0, e=0.1, i=1.0, omega=2.0, w=3.0, M0=4.0)]
        df = OrbitalElements.Batch.to_dataframe(orbits, index=['inner', 'outer'])
        assert list(df.columns) == ['a', 'e', 'i', 'omega', 'w', 'M0', 'parent']
        assert df.loc['outer', 'a'] == 2.0
        assert df.loc['inner', 'parent'] == 'Sun'

    def test_to_dataframe_empty(self):
        df = OrbitalElements.Batch.to_dataframe([])
        assert isinstance(df, pd.DataFrame)
        assert df.empty

    def test_to_dataframe_index_mismatch(self):
        orbits = [OE(a=1.0, e=0.0, i=0.0, omega=0.0, w=0.0, M0=0.0)]
        with pytest.raises(ValueError, match="Index length"):
            OrbitalElements.Batch.to_dataframe(orbits, index=['a', 'b'])

    def test_orbital_period_with_degenerate(self):
        orbits = [OE(a=1.0, e=0.0, i=0.0, omega=0.0, w=0.0, M0=0.0),
                  OE(a=0.0, e=0.0, i=0.0, omega=0.0, w=0.0, M0=0.0)]
        periods = OrbitalElements.Batch.orbital_period(orbits)
        assert periods[0] == pytest.approx(YEAR_DAYS)
        assert np.isnan(periods[1])
