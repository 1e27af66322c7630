"""
Monte Carlo rejection sampling of hydrogen-like orbitals.

Points are accepted in proportion to the weighted density
P(r,θ,φ) * r² * sin θ, so that the resulting cloud reproduces |Ψ|² per unit
volume. Work per orbital is bounded by point_count * attempts_per_point
candidates; when the budget runs out the shorter buffer is returned and a
SamplingShortfallWarning is recorded.
"""
from dataclasses import dataclass, field
from typing import Any, Iterable
import logging
import math
import numpy as np
from numba import jit
from tqdm import tqdm
from orbital_cloud.helpers.probability_density import (
    MaxDensityCache,
    probability_density,
    spherical_to_cartesian,
)
from orbital_cloud.helpers.radial_wave_function import max_radial_extent, most_probable_radius
from orbital_cloud.helpers.spherical_harmonics import get_orbital_name
from orbital_cloud.tasks.pre_processing.settings import Settings
from orbital_cloud.tasks.pre_processing.electron_configuration import (
    OrbitalDescriptor,
    distribute_subshell_electrons,
)
from orbital_cloud.utils import ErrorHandler, ErrorCode, ErrorLevel

logger = logging.getLogger(__name__)

PEAK_BIAS_PROBABILITY = 0.7
PEAK_WINDOW = (0.3, 1.7)
MIN_PRESAMPLE_RADIUS = 0.01
ADAPT_INTERVAL = 1000
MIN_ACCEPTANCE_RATE = 0.01
BATCH_SIZE = 8192
MAX_WARNING_RECORDS = 1000

@jit(nopython=True, nogil=True, cache=True)
def accept_candidates(
    weighted: np.ndarray,
    u: np.ndarray,
    max_p: float,
    accepted: int,
    attempts: int,
    target: int,
    max_attempts: int,
    ceiling_margin: float,
) -> tuple:
    """
    Sequential rejection test over one batch of candidates.

    A candidate whose weighted density exceeds the working ceiling raises the
    ceiling before it is tested. Every ADAPT_INTERVAL attempts the ceiling is
    doubled if fewer than MIN_ACCEPTANCE_RATE of the attempts so far were
    accepted. Stops at the target count or the attempt budget.

    Returns (mask, max_p, accepted, attempts).
    """
    mask = np.zeros(weighted.shape[0], dtype=np.bool_)
    for i in range(weighted.shape[0]):
        if accepted >= target or attempts >= max_attempts:
            break
        attempts += 1
        w = weighted[i]
        if w > max_p:
            max_p = w * ceiling_margin
        if u[i] * max_p < w:
            mask[i] = True
            accepted += 1
        if attempts % ADAPT_INTERVAL == 0 and accepted < attempts * MIN_ACCEPTANCE_RATE:
            max_p *= 2.0
    return mask, max_p, accepted, attempts

def weighted_density(n: int, l: int, m: int, r, theta, phi, Z: float = 1.0):
    """
    P(r,θ,φ) * r² * sin θ, the density per unit (r, θ, φ) coordinate volume.
    """
    return probability_density(n, l, m, r, theta, phi, Z) * np.square(r) * np.sin(theta)

def is_valid_orbital(n: int, l: int, m: int) -> bool:
    return n >= 1 and 0 <= l < n and abs(m) <= l

@dataclass
class SamplingResult:
    coordinates: np.ndarray  # flat float32 [x0, y0, z0, x1, ...]
    requested: int
    attempts: int
    ceiling: float

    @property
    def point_count(self) -> int:
        return len(self.coordinates) // 3

    @property
    def shortfall(self) -> int:
        return self.requested - self.point_count

    @property
    def points(self) -> np.ndarray:
        return self.coordinates.reshape(-1, 3)

@dataclass
class SubshellSample:
    m: int
    electrons: int
    coordinates: np.ndarray = field(repr=False)

class OrbitalSampler:
    """
    Generates point clouds for hydrogen-like orbitals.

    The sampler owns a random generator, a ceiling cache and an error handler.
    Ceilings are cached under (n, l, m, Z) with the WEIGHTED kind, apart from
    the |Ψ|² maxima of get_max_density. The cache is never invalidated on its own;
    call clear_density_cache() when the element or Z changes.

    Args:
        settings: Sampling parameters (attempts_per_point, presample_count,
            ceiling_margin, seed). Defaults are used when omitted.
        rng: numpy Generator. Created from settings.seed when omitted.
        cache: Ceiling cache. Pass use_cache=False to re-estimate every call.
        error_handler: Collects invalid-input and shortfall warnings. The default
            handler keeps only the newest MAX_WARNING_RECORDS entries; a handler
            passed in is used as is, so call its clear() between sweeps.
    """

    def __init__(self,
                 settings: Settings | None = None,
                 rng: np.random.Generator | None = None,
                 cache: MaxDensityCache | None = None,
                 error_handler: ErrorHandler | None = None,
                 use_cache: bool = True) -> None:
        self.settings = settings if settings is not None else Settings()
        self.rng = rng if rng is not None else np.random.default_rng(self.settings.seed)
        self.cache = cache if cache is not None else MaxDensityCache()
        self.use_cache = use_cache
        self.error_handler = error_handler if error_handler is not None else ErrorHandler(MAX_WARNING_RECORDS)

    def clear_density_cache(self) -> None:
        self.cache.clear()

    def estimate_ceiling(self, n: int, l: int, m: int, Z: float, rng: np.random.Generator | None = None) -> float:
        """
        Weighted-density ceiling from biased pre-sampling.

        70% of the radii are drawn around the most probable radius to find the
        peak quickly, the rest uniformly over [0, maxR]. The bias only affects
        the ceiling, not the accepted points.
        """
        rng = rng if rng is not None else self.rng
        samples = self.settings.presample_count
        max_r = max_radial_extent(n, l, Z)
        r_peak = most_probable_radius(n, l, Z)

        near_peak = rng.random(samples) < PEAK_BIAS_PROBABILITY
        low, high = PEAK_WINDOW
        r_near = r_peak * (low + (high - low) * rng.random(samples))
        r_full = max_r * rng.random(samples)
        r = np.clip(np.where(near_peak, r_near, r_full), MIN_PRESAMPLE_RADIUS, max_r)
        theta = np.arccos(2.0 * rng.random(samples) - 1.0)
        phi = rng.random(samples) * 2.0 * np.pi

        weighted = weighted_density(n, l, m, r, theta, phi, Z)
        return float(np.max(weighted)) * self.settings.ceiling_margin

    def _ceiling(self, n: int, l: int, m: int, Z: float, rng: np.random.Generator) -> float:
        if not self.use_cache:
            return self.estimate_ceiling(n, l, m, Z, rng)
        return self.cache.get_or_compute(n, l, m, Z, lambda: self.estimate_ceiling(n, l, m, Z, rng),
                                         MaxDensityCache.WEIGHTED)

    def sample(self, n: int, l: int, m: int, point_count: int, Z: float = 1.0,
               rng: np.random.Generator | None = None) -> SamplingResult:
        """
        Sample one orbital and report how the run went.

        Args:
            n: Principal quantum number
            l: Azimuthal quantum number
            m: Magnetic quantum number
            point_count: Number of points requested
            Z: Effective nuclear charge
            rng: Generator for this call; the sampler's own one when omitted

        Returns:
            SamplingResult whose coordinates hold at most point_count points
        """
        rng = rng if rng is not None else self.rng
        point_count = max(0, int(point_count))
        empty = np.zeros(0, dtype=np.float32)

        if not is_valid_orbital(n, l, m):
            self.error_handler.handle(
                f"Invalid quantum numbers: n={n}, l={l}, m={m}. No points generated.",
                ErrorCode.INVALID_QUANTUM_NUMBERS,
                ErrorLevel.WARNING,
                {"n": n, "l": l, "m": m}
            )
            return SamplingResult(empty, point_count, 0, 0.0)
        if point_count == 0:
            return SamplingResult(empty, 0, 0, 0.0)

        max_r = max_radial_extent(n, l, Z)
        max_p = self._ceiling(n, l, m, Z, rng)
        max_attempts = point_count * self.settings.attempts_per_point

        points = np.empty((point_count, 3), dtype=np.float32)
        accepted = 0
        attempts = 0
        while accepted < point_count and attempts < max_attempts:
            batch = min(BATCH_SIZE, max_attempts - attempts)
            r = max_r * rng.random(batch)
            theta = np.pi * rng.random(batch)
            phi = 2.0 * np.pi * rng.random(batch)
            u = rng.random(batch)

            weighted = weighted_density(n, l, m, r, theta, phi, Z)
            start = accepted
            mask, max_p, accepted, attempts = accept_candidates(
                weighted, u, max_p, accepted, attempts, point_count, max_attempts,
                self.settings.ceiling_margin,
            )
            x, y, z = spherical_to_cartesian(r[mask], theta[mask], phi[mask])
            points[start:accepted] = np.column_stack((x, y, z))

        result = SamplingResult(points[:accepted].reshape(-1).copy(), point_count, attempts, float(max_p))
        if result.shortfall > 0:
            self.error_handler.handle(
                f"Only generated {result.point_count} of {point_count} points for {get_orbital_name(n, l, m)} "
                f"(n={n}, l={l}, m={m}) after {attempts} attempts",
                ErrorCode.SAMPLING_SHORTFALL,
                ErrorLevel.WARNING,
                {"n": n, "l": l, "m": m, "requested": point_count,
                 "generated": result.point_count, "shortfall": result.shortfall}
            )
        logger.debug(f"{get_orbital_name(n, l, m)}: {result.point_count}/{point_count} points, "
                     f"{attempts} attempts, ceiling {max_p:.4e}")
        return result

    def sample_orbital(self, n: int, l: int, m: int, point_count: int, Z: float = 1.0,
                       rng: np.random.Generator | None = None) -> np.ndarray:
        """
        Flat float32 [x, y, z, ...] buffer for one orbital, of length at most
        point_count * 3.
        """
        return self.sample(n, l, m, point_count, Z, rng).coordinates

    def sample_subshell(self, n: int, l: int, total_electrons: int, points_per_electron: float,
                        Z: float = 1.0) -> list[SubshellSample]:
        """
        Sample every occupied orbital of the (n, l) subshell.

        Electrons are spread over m = -l..l singly before pairing; each
        occupied orbital gets ceil(points_per_electron * electrons) points.
        """
        capacity = 2 * (2 * l + 1)
        if total_electrons > capacity or total_electrons < 0:
            self.error_handler.handle(
                f"A subshell with l={l} holds 0 to {capacity} electrons, got {total_electrons}. The count is clamped.",
                ErrorCode.INVALID_INPUT,
                ErrorLevel.WARNING,
                {"n": n, "l": l, "total_electrons": total_electrons}
            )
        occupancy = distribute_subshell_electrons(l, total_electrons)
        child_rngs = self.rng.spawn(len(occupancy))

        results = []
        for m, electrons, child in zip(range(-l, l + 1), occupancy, child_rngs):
            if electrons <= 0:
                continue
            point_count = math.ceil(points_per_electron * electrons)
            results.append(SubshellSample(m, electrons, self.sample_orbital(n, l, m, point_count, Z, child)))
        return results

    def sample_multiple_orbitals(self, orbitals: Iterable[Any], points_per_electron: float, Z: float = 1.0,
                                 show_progress: bool = False) -> dict[str, np.ndarray]:
        """
        Sample a batch of orbitals.

        Args:
            orbitals: OrbitalDescriptor objects, mappings with n/l/m/electrons
                keys or (n, l, m, electrons) tuples
            points_per_electron: Points generated per electron
            Z: Effective nuclear charge
            show_progress: Show a tqdm progress bar

        Returns:
            Mapping "n,l,m" -> flat coordinate buffer, in input order
        """
        descriptors = [OrbitalDescriptor.from_any(orbital) for orbital in orbitals]
        # one child generator per orbital keeps each result independent of evaluation order
        child_rngs = self.rng.spawn(len(descriptors))

        results: dict[str, np.ndarray] = {}
        for descriptor, child in tqdm(zip(descriptors, child_rngs), total=len(descriptors),
                                      desc="sampling orbitals", disable=not show_progress):
            point_count = math.ceil(points_per_electron * descriptor.electrons)
            results[descriptor.key] = self.sample_orbital(
                descriptor.n, descriptor.l, descriptor.m, point_count, Z, child
            )
        return results

def sample_orbital(n: int, l: int, m: int, point_count: int, Z: float = 1.0,
                   rng: np.random.Generator | None = None, cache: MaxDensityCache | None = None) -> np.ndarray:
    return OrbitalSampler(rng=rng, cache=cache).sample_orbital(n, l, m, point_count, Z)

def sample_subshell(n: int, l: int, total_electrons: int, points_per_electron: float, Z: float = 1.0,
                    rng: np.random.Generator | None = None, cache: MaxDensityCache | None = None) -> list[SubshellSample]:
    return OrbitalSampler(rng=rng, cache=cache).sample_subshell(n, l, total_electrons, points_per_electron, Z)

def sample_multiple_orbitals(orbitals: Iterable[Any], points_per_electron: float, Z: float = 1.0,
                             rng: np.random.Generator | None = None,
                             cache: MaxDensityCache | None = None) -> dict[str, np.ndarray]:
    return OrbitalSampler(rng=rng, cache=cache).sample_multiple_orbitals(orbitals, points_per_electron, Z)
