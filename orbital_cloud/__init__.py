"""
Point clouds of hydrogen-like atomic orbitals.

    >>> from orbital_cloud import OrbitalSampler
    >>> sampler = OrbitalSampler(rng=np.random.default_rng(0))
    >>> coords = sampler.sample_orbital(2, 1, 0, 5000, Z=1.0)
"""
from orbital_cloud.helpers.probability_density import MaxDensityCache, evaluate_density
from orbital_cloud.helpers.orbital_sampler import (
    OrbitalSampler,
    SamplingResult,
    SubshellSample,
    sample_orbital,
    sample_subshell,
    sample_multiple_orbitals,
)
from orbital_cloud.tasks.pre_processing import OrbitalDescriptor, Settings

__version__ = "0.1.0"
