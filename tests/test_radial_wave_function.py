import math

import numpy as np
import pytest
from scipy import integrate
from scipy.special import genlaguerre

from orbital_cloud.helpers.radial_wave_function import (
    radial_normalization,
    radial_wave_function,
    radial_probability_density,
    max_radial_extent,
    most_probable_radius,
)
from orbital_cloud.utils import ErrorHandler, QuantumNumberWarning

def test_normalization_known_cases():
    assert radial_normalization(1, 0, 1) == pytest.approx(2.0)
    assert radial_normalization(2, 1, 1) == pytest.approx(1 / (2 * math.sqrt(6)))
    # N for 2s multiplies L_1^1(0) = 2, so R_20(0) = 1/√2
    assert radial_normalization(2, 0, 1) == pytest.approx(1 / (2 * math.sqrt(2)))
    assert radial_wave_function(2, 0, 0.0, 1) == pytest.approx(1 / math.sqrt(2))

@pytest.mark.parametrize("r", [0.0, 1.0, 2.0])
def test_1s_matches_analytic(r):
    assert radial_wave_function(1, 0, r, 1) == pytest.approx(2 * math.exp(-r), abs=1e-5)

@pytest.mark.parametrize("r", [0.0, 1.0, 2.0])
def test_2s_matches_analytic(r):
    expected = (1 / math.sqrt(2)) * (1 - r / 2) * math.exp(-r / 2)
    assert radial_wave_function(2, 0, r, 1) == pytest.approx(expected, abs=1e-5)

def test_2s_node():
    assert abs(radial_wave_function(2, 0, 2.0, 1)) < 1e-12

@pytest.mark.parametrize("r", [0.0, 1.0, 2.0])
def test_2p_matches_analytic(r):
    expected = (1 / (2 * math.sqrt(6))) * r * math.exp(-r / 2)
    assert radial_wave_function(2, 1, r, 1) == pytest.approx(expected, abs=1e-5)

@pytest.mark.parametrize("n, l", [(0, 0), (1, 1), (2, -1), (3, 3)])
def test_invalid_quantum_numbers_return_zero(n, l):
    handler = ErrorHandler()
    with pytest.warns(QuantumNumberWarning):
        assert radial_wave_function(n, l, 1.0, 1, handler) == 0.0
    assert handler.has_warnings()
    assert handler.warnings[0]["details"] == {"n": n, "l": l}

def test_invalid_quantum_numbers_keep_array_shape():
    with pytest.warns(QuantumNumberWarning):
        values = radial_wave_function(1, 1, np.linspace(0, 1, 5))
    np.testing.assert_array_equal(values, np.zeros(5))

@pytest.mark.parametrize("n, l, Z", [(1, 0, 1.0), (2, 1, 1.0), (3, 2, 1.0), (4, 0, 2.5), (5, 3, 3.0), (6, 2, 1.0)])
def test_radial_probability_is_normalized(n, l, Z):
    total, _ = integrate.quad(lambda r: radial_probability_density(n, l, r, Z), 0, 3 * max_radial_extent(n, l, Z), limit=200)
    assert total == pytest.approx(1.0, abs=1e-6)

def test_matches_scipy_laguerre_form():
    n, l, Z = 6, 2, 1.7
    r = np.linspace(0.0, 40.0, 81)
    rho = 2 * Z * r / n
    expected = radial_normalization(n, l, Z) * rho ** l * np.exp(-rho / 2) * genlaguerre(n - l - 1, 2 * l + 1)(rho)
    np.testing.assert_allclose(radial_wave_function(n, l, r, Z), expected, rtol=1e-9, atol=1e-12)

def test_effective_charge_scaling():
    r = np.linspace(0.1, 5.0, 20)
    Z = 3.0
    scaled = Z ** 1.5 * radial_wave_function(3, 1, Z * r, 1.0)
    np.testing.assert_allclose(radial_wave_function(3, 1, r, Z), scaled, rtol=1e-10)

def test_extent_and_peak_heuristics():
    assert max_radial_extent(1, 0, 1) == pytest.approx(4.0)
    assert max_radial_extent(3, 2, 2) == pytest.approx(18.0)
    assert most_probable_radius(1, 0, 1) == pytest.approx(1.0)
    assert most_probable_radius(3, 2, 1) == pytest.approx(6.0)
    assert most_probable_radius(2, 1, 2) == pytest.approx(1.5)

def test_1s_radial_peak_is_inside_extent():
    r = np.linspace(0.0, max_radial_extent(1, 0, 1), 4001)
    density = radial_probability_density(1, 0, r, 1)
    assert r[np.argmax(density)] == pytest.approx(1.0, abs=1e-3)
