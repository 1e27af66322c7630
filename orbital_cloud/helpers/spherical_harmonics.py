import numpy as np
from orbital_cloud.helpers.constant import orbital_name
from orbital_cloud.helpers.special_functions import factorial, associated_legendre
from orbital_cloud.utils import ErrorHandler, ErrorCode, ErrorLevel

# real orbital orientation labels, keyed by l then m
orbital_orientations = {
    1: {-1: "y", 0: "z", 1: "x"},
    2: {-2: "xy", -1: "yz", 0: "z²", 1: "xz", 2: "x²-y²"},
    3: {
        -3: "y(3x²-y²)", -2: "xyz", -1: "yz²",
        0: "z³", 1: "xz²", 2: "z(x²-y²)", 3: "x(x²-3y²)",
    },
}

def spherical_harmonic_normalization(l: int, m: int) -> float:
    """
    N_lm = sqrt((2l+1)/(4π) * (l-|m|)!/(l+|m|)!)
    """
    abs_m = abs(m)
    numerator = (2 * l + 1) * factorial(l - abs_m)
    denominator = 4 * np.pi * factorial(l + abs_m)
    return float(np.sqrt(numerator / denominator))

def spherical_harmonic(l: int, m: int, theta, phi, error_handler: ErrorHandler | None = None):
    """
    Calculate the real spherical harmonic Y_l^m(θ,φ).

    Real combinations of the complex harmonics are used so that every m maps
    to one of the familiar orbital lobes:
        m > 0:  N * √2 * P_l^m(cos θ) * cos(mφ)
        m < 0:  N * √2 * P_l^|m|(cos θ) * sin(|m|φ)
        m = 0:  N * P_l^0(cos θ)

    Args:
        l: Angular momentum quantum number
        m: Magnetic quantum number (-l ≤ m ≤ l)
        theta: Polar angle (0 to π), scalar or numpy array
        phi: Azimuthal angle (0 to 2π), scalar or numpy array
        error_handler: Handler collecting the invalid-quantum-number warning

    Returns:
        Y_l^m(θ,φ), or 0 when l < 0 or |m| > l
    """
    if l < 0 or abs(m) > l:
        error_handler = error_handler or ErrorHandler()
        error_handler.handle(
            f"Invalid quantum numbers for the spherical harmonic: l={l}, m={m}",
            ErrorCode.INVALID_QUANTUM_NUMBERS,
            ErrorLevel.WARNING,
            {"l": l, "m": m}
        )
        shape = np.broadcast(np.asarray(theta), np.asarray(phi)).shape
        return 0.0 if shape == () else np.zeros(shape)

    theta = np.asarray(theta, dtype=np.float64)
    phi = np.asarray(phi, dtype=np.float64)
    normalization = spherical_harmonic_normalization(l, m)
    legendre_val = associated_legendre(l, abs(m), np.cos(theta))

    if m > 0:
        value = normalization * np.sqrt(2.0) * legendre_val * np.cos(m * phi)
    elif m < 0:
        value = normalization * np.sqrt(2.0) * legendre_val * np.sin(abs(m) * phi)
    else:
        value = normalization * legendre_val * np.ones_like(phi)

    if np.ndim(value) == 0:
        return float(value)
    return value

def angular_probability_density(l: int, m: int, theta, phi, error_handler: ErrorHandler | None = None):
    Y = spherical_harmonic(l, m, theta, phi, error_handler)
    return Y * Y

def get_orbital_name(n: int, l: int, m: int) -> str:
    """
    Orbital label such as "1s", "2p(x)" or "3d(x²-y²)".
    """
    letter = orbital_name[l] if 0 <= l < len(orbital_name) else f"l{l}"
    orient = orbital_orientations.get(l, {}).get(m, "")
    return f"{n}{letter}({orient})" if orient else f"{n}{letter}"

def get_magnetic_quantum_numbers(l: int) -> list[int]:
    return list(range(-l, l + 1))
