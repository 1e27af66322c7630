"""
Probability density |Ψ_nlm(r,θ,φ)|² = R_nl(r)² Y_lm(θ,φ)², coordinate
conversions and the max-density cache used as a rejection ceiling.
"""
from typing import Callable, Hashable
import logging
import numpy as np
from orbital_cloud.helpers.radial_wave_function import radial_wave_function, max_radial_extent
from orbital_cloud.helpers.spherical_harmonics import spherical_harmonic
from orbital_cloud.utils import ErrorHandler

logger = logging.getLogger(__name__)

MAX_DENSITY_MARGIN = 1.2

def probability_density(n: int, l: int, m: int, r, theta, phi, Z: float = 1.0, error_handler: ErrorHandler | None = None):
    """
    Full probability density |Ψ_nlm(r,θ,φ)|².

    Args:
        n: Principal quantum number
        l: Azimuthal quantum number
        m: Magnetic quantum number
        r: Radial distance from the nucleus
        theta: Polar angle (0 to π)
        phi: Azimuthal angle (0 to 2π)
        Z: Effective nuclear charge
        error_handler: Handler collecting invalid-quantum-number warnings

    Returns:
        |Ψ|² at the given point(s); scalars in, float out
    """
    R = radial_wave_function(n, l, r, Z, error_handler)
    Y = spherical_harmonic(l, m, theta, phi, error_handler)
    return R * R * Y * Y

def spherical_to_cartesian(r, theta, phi):
    sin_theta = np.sin(theta)
    return (
        r * sin_theta * np.cos(phi),
        r * sin_theta * np.sin(phi),
        r * np.cos(theta),
    )

def cartesian_to_spherical(x, y, z):
    """
    Convert Cartesian to spherical coordinates (r, θ, φ).

    θ and φ are 0 at the origin. φ is returned in (-π, π].
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    z = np.asarray(z, dtype=np.float64)
    r = np.sqrt(x * x + y * y + z * z)
    at_origin = r == 0
    safe_r = np.where(at_origin, 1.0, r)
    theta = np.where(at_origin, 0.0, np.arccos(np.clip(z / safe_r, -1.0, 1.0)))
    phi = np.where(at_origin, 0.0, np.arctan2(y, x))
    if r.ndim == 0:
        return float(r), float(theta), float(phi)
    return r, theta, phi

def probability_density_cartesian(n: int, l: int, m: int, x, y, z, Z: float = 1.0, error_handler: ErrorHandler | None = None):
    r, theta, phi = cartesian_to_spherical(x, y, z)
    return probability_density(n, l, m, r, theta, phi, Z, error_handler)

def estimate_max_density(n: int, l: int, m: int, Z: float = 1.0, samples: int = 1000,
                         rng: np.random.Generator | None = None) -> float:
    """
    Estimate the maximum of |Ψ|² inside the sampling sphere.

    Draws uniform points (r in [0, maxR], cos θ uniform, φ uniform) and
    returns the observed maximum times 1.2. This is a rejection ceiling, not
    the exact maximum.
    """
    rng = rng if rng is not None else np.random.default_rng()
    max_r = max_radial_extent(n, l, Z)

    r = rng.random(samples) * max_r
    theta = np.arccos(2.0 * rng.random(samples) - 1.0)
    phi = rng.random(samples) * 2.0 * np.pi

    P = probability_density(n, l, m, r, theta, phi, Z)
    return float(np.max(P, initial=0.0)) * MAX_DENSITY_MARGIN

class MaxDensityCache:
    """
    Ceiling estimates keyed by (n, l, m, Z, kind).

    `kind` separates quantities that share one orbital: DENSITY holds the
    |Ψ|² maximum from estimate_max_density, WEIGHTED holds the P·r²·sin θ
    ceiling used by the sampler. Entries are computed once and never expire.
    The owner must call clear() whenever Z or the active element changes,
    otherwise stale ceilings are reused. Concurrent writers of the same key
    store equivalent values, so no locking is done.
    """
    DENSITY = "density"
    WEIGHTED = "weighted"

    def __init__(self) -> None:
        self._entries: dict[Hashable, float] = {}

    @staticmethod
    def make_key(n: int, l: int, m: int, Z: float, kind: str = DENSITY) -> tuple[int, int, int, float, str]:
        return (int(n), int(l), int(m), float(Z), kind)

    def get(self, n: int, l: int, m: int, Z: float, kind: str = DENSITY) -> float | None:
        return self._entries.get(self.make_key(n, l, m, Z, kind))

    def store(self, n: int, l: int, m: int, Z: float, value: float, kind: str = DENSITY) -> None:
        self._entries[self.make_key(n, l, m, Z, kind)] = float(value)

    def get_or_compute(self, n: int, l: int, m: int, Z: float, compute: Callable[[], float],
                       kind: str = DENSITY) -> float:
        key = self.make_key(n, l, m, Z, kind)
        value = self._entries.get(key)
        if value is None:
            value = float(compute())
            self._entries[key] = value
            logger.debug(f"Cached ceiling {value:.4e} for {key}")
        return value

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: tuple) -> bool:
        # (n, l, m, Z) looks up the DENSITY entry
        return self.make_key(*key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

def get_max_density(n: int, l: int, m: int, Z: float, cache: MaxDensityCache,
                    rng: np.random.Generator | None = None, samples: int = 2000) -> float:
    """
    Cached estimate_max_density; computed once per (n, l, m, Z) until cache.clear().
    """
    return cache.get_or_compute(n, l, m, Z, lambda: estimate_max_density(n, l, m, Z, samples, rng))

def evaluate_density(n: int, l: int, m: int, r: float, theta: float, phi: float, Z: float = 1.0) -> float:
    return float(probability_density(n, l, m, r, theta, phi, Z))
