from dataclasses import dataclass
import logging
import math
import numpy as np
from prefect import task
from prefect.cache_policies import NO_CACHE
from orbital_cloud.helpers.calc_Zeff import calc_Zeff
from orbital_cloud.helpers.orbital_sampler import OrbitalSampler
from orbital_cloud.tasks.pre_processing.settings import Settings
from orbital_cloud.tasks.pre_processing.electron_configuration import (
    OrbitalDescriptor,
    SubshellOccupation,
    distribute_subshell_electrons,
    generate_subshell_configuration,
)

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class OrbitalJob:
    orbital: OrbitalDescriptor
    Z: float
    point_count: int

def resolve_effective_charge(settings: Settings, subshell: SubshellOccupation,
                             configuration: list[SubshellOccupation]) -> float:
    """
    Z used for one subshell according to settings.z_mode.
    """
    if settings.z_mode == "fixed":
        return settings.z_value
    if settings.z_mode == "slater":
        return calc_Zeff((subshell.n, subshell.l), settings.atomic_number, configuration)
    return float(settings.atomic_number)

def build_orbital_jobs(settings: Settings) -> list[OrbitalJob]:
    """
    Expand the configured atom into one sampling job per occupied orbital.
    """
    configuration = generate_subshell_configuration(settings.total_electrons)
    points_per_electron = settings.resolved_points_per_electron

    jobs = []
    for subshell in configuration:
        Z = resolve_effective_charge(settings, subshell, configuration)
        occupancy = distribute_subshell_electrons(subshell.l, subshell.electrons)
        for m, electrons in zip(range(-subshell.l, subshell.l + 1), occupancy):
            if electrons == 0:
                continue
            orbital = OrbitalDescriptor(subshell.n, subshell.l, m, electrons)
            jobs.append(OrbitalJob(orbital, Z, math.ceil(points_per_electron * electrons)))
    logger.info(f"{len(jobs)} orbitals to sample for {settings.atom_name} ({settings.total_electrons} electrons)")
    return jobs

@task(name="sample orbital", cache_policy=NO_CACHE)
def sample_orbital_task(sampler: OrbitalSampler, job: OrbitalJob, rng: np.random.Generator) -> tuple[str, np.ndarray]:
    """
    sample one orbital with its own generator
    """
    orbital = job.orbital
    coordinates = sampler.sample_orbital(orbital.n, orbital.l, orbital.m, job.point_count, job.Z, rng)
    return orbital.key, coordinates
