import math

import numpy as np
import pytest
from scipy.special import genlaguerre, lpmv

from orbital_cloud.helpers import special_functions
from orbital_cloud.helpers.special_functions import (
    factorial,
    double_factorial,
    associated_laguerre,
    associated_legendre,
)

def test_factorial_values():
    assert factorial(0) == 1
    assert factorial(1) == 1
    assert factorial(5) == 120
    assert factorial(10) == 3628800
    assert factorial(25) == math.factorial(25)

def test_factorial_negative_returns_one():
    assert factorial(-1) == 1
    assert factorial(-5) == 1

def test_factorial_table_only_grows():
    factorial(12)
    size = len(special_functions._factorial_table)
    factorial(3)
    assert len(special_functions._factorial_table) == size
    factorial(size + 4)
    assert len(special_functions._factorial_table) == size + 5
    assert special_functions._factorial_table[12] == math.factorial(12)

def test_double_factorial():
    assert double_factorial(-1) == 1
    assert double_factorial(0) == 1
    assert double_factorial(5) == 15
    assert double_factorial(6) == 48

def test_laguerre_low_orders():
    assert associated_laguerre(0, 0, 5.0) == 1.0
    assert associated_laguerre(0, 5, 5.0) == 1.0
    assert associated_laguerre(1, 0, 5.0) == pytest.approx(1 + 0 - 5)
    assert associated_laguerre(1, 5, 5.0) == pytest.approx(1 + 5 - 5)
    x = 3.0
    assert associated_laguerre(2, 1, x) == pytest.approx(0.5 * (x * x - 6 * x + 6))

@pytest.mark.parametrize("k, alpha", [(0, 1), (1, 3), (2, 3), (3, 1), (4, 5), (6, 3), (10, 7)])
def test_laguerre_matches_scipy(k, alpha):
    x = np.linspace(0.0, 30.0, 61)
    expected = genlaguerre(k, alpha)(x)
    np.testing.assert_allclose(associated_laguerre(k, alpha, x), expected, rtol=1e-9, atol=1e-9)

def test_laguerre_scalar_returns_float():
    value = associated_laguerre(3, 2, 1.5)
    assert isinstance(value, float)
    assert value == pytest.approx(genlaguerre(3, 2)(1.5))

@pytest.mark.parametrize("l, m", [(0, 0), (1, 0), (1, 1), (2, 1), (2, 2), (3, 0), (3, 3), (5, 2), (6, 4)])
def test_legendre_matches_scipy(l, m):
    x = np.linspace(-1.0, 1.0, 41)
    np.testing.assert_allclose(associated_legendre(l, m, x), lpmv(m, l, x), rtol=1e-10, atol=1e-12)

def test_legendre_uses_absolute_order():
    x = np.linspace(-0.9, 0.9, 7)
    np.testing.assert_allclose(associated_legendre(3, -2, x), associated_legendre(3, 2, x))

def test_legendre_order_above_degree_is_zero():
    assert associated_legendre(1, 2, 0.3) == 0.0
    np.testing.assert_array_equal(associated_legendre(2, 3, np.array([0.1, 0.5])), np.zeros(2))

def test_legendre_known_values():
    x = 0.4
    assert associated_legendre(2, 0, x) == pytest.approx(0.5 * (3 * x * x - 1))
    assert associated_legendre(1, 1, x) == pytest.approx(-math.sqrt(1 - x * x))
