"""
Radial part R_nl(r) of hydrogen-like orbitals.

R_nl(r) = N * ρ^l * exp(-ρ/2) * L_{n-l-1}^{2l+1}(ρ),  ρ = 2Zr / (n a0)

Lengths are in Bohr radii (a0 = 1).
"""
import numpy as np
from orbital_cloud.helpers.constant import Constants
from orbital_cloud.helpers.special_functions import factorial, associated_laguerre
from orbital_cloud.utils import ErrorHandler, ErrorCode, ErrorLevel

def is_valid_radial(n: int, l: int) -> bool:
    return n >= 1 and 0 <= l < n

def radial_normalization(n: int, l: int, Z: float = 1.0) -> float:
    """
    Normalization constant of R_nl.

    N = sqrt((2Z/(n a0))³ * (n-l-1)! / (2n * (n+l)!))

    Args:
        n: Principal quantum number
        l: Azimuthal quantum number
        Z: Effective nuclear charge

    Returns:
        N such that ∫ R_nl(r)² r² dr = 1
    """
    prefactor = (2.0 * Z / (n * Constants.a0)) ** 3
    numerator = factorial(n - l - 1)
    denominator = 2 * n * factorial(n + l)
    return float(np.sqrt(prefactor * numerator / denominator))

def radial_wave_function(n: int, l: int, r, Z: float = 1.0, error_handler: ErrorHandler | None = None):
    """
    Radial wave function R_nl(r).

    Invalid quantum numbers (n < 1, l < 0, l >= n) return 0 and record a
    warning instead of raising.

    Args:
        n: Principal quantum number (1, 2, 3, ...)
        l: Azimuthal quantum number (0 to n-1)
        r: Radial distance, scalar or numpy array
        Z: Effective nuclear charge
        error_handler: Handler collecting the invalid-quantum-number warning

    Returns:
        R_nl(r) with the same shape as r
    """
    if not is_valid_radial(n, l):
        error_handler = error_handler or ErrorHandler()
        error_handler.handle(
            f"Invalid quantum numbers for the radial wave function: n={n}, l={l}",
            ErrorCode.INVALID_QUANTUM_NUMBERS,
            ErrorLevel.WARNING,
            {"n": n, "l": l}
        )
        return _zeros_like(r)

    r = np.asarray(r, dtype=np.float64)
    rho = 2.0 * Z * r / (n * Constants.a0)

    normalization = radial_normalization(n, l, Z)
    laguerre = associated_laguerre(n - l - 1, 2 * l + 1, rho)
    value = normalization * np.power(rho, l) * np.exp(-rho / 2.0) * laguerre

    if np.ndim(value) == 0:
        return float(value)
    return value

def radial_probability_density(n: int, l: int, r, Z: float = 1.0, error_handler: ErrorHandler | None = None):
    """
    |R_nl(r)|² r², the probability per unit radius integrated over all angles.
    """
    R = radial_wave_function(n, l, r, Z, error_handler)
    return R * R * np.square(r)

def max_radial_extent(n: int, l: int, Z: float = 1.0) -> float:
    # 4n²/Z leaves a generous margin past the classical turning point
    return 4.0 * n * n / Z * Constants.a0

def most_probable_radius(n: int, l: int, Z: float = 1.0) -> float:
    """
    Approximate peak of the radial probability density, used to bias the
    ceiling search of the sampler.
    """
    return (n * n - l * (l + 1) / 2.0) / Z * Constants.a0

def _zeros_like(r):
    if np.ndim(r) == 0:
        return 0.0
    return np.zeros(np.shape(r), dtype=np.float64)
