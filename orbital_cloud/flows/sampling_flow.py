import os
import logging
from prefect import flow
import numpy as np

from orbital_cloud.helpers.cloud_writer import save_point_clouds
from orbital_cloud.helpers.orbital_sampler import OrbitalSampler
from orbital_cloud.tasks.pre_processing import import_settings, generate_subshell_configuration, format_configuration
from orbital_cloud.tasks.data_processing.sample_orbitals import build_orbital_jobs, sample_orbital_task

logger = logging.getLogger(__name__)

@flow(name="orbital point cloud pipeline")
def sampling_pipeline(
    config_path=None,
    output_path=None,
) -> dict[str, np.ndarray]:
    if config_path is None:
        config_path = "config/settings.yaml"

    settings = import_settings(config_path)
    if output_path is None:
        output_path = settings.output_path

    jobs = build_orbital_jobs(settings)
    sampler = OrbitalSampler(settings)
    child_rngs = sampler.rng.spawn(len(jobs))

    # orbitals are independent; each task gets its own generator
    futures = [sample_orbital_task.submit(sampler, job, rng) for job, rng in zip(jobs, child_rngs)]
    clouds = dict(future.result() for future in futures)

    configuration = generate_subshell_configuration(settings.total_electrons)
    save_point_clouds(
        clouds,
        output_path,
        atom_name=settings.atom_name,
        electron_count=settings.total_electrons,
        configuration=format_configuration(configuration),
        z_mode=settings.z_mode,
        seed=settings.seed,
    )

    total_points = sum(len(coords) // 3 for coords in clouds.values())
    logger.info(f"Saved {total_points:,} points for {len(clouds)} orbitals to {os.path.abspath(output_path)}")
    if sampler.error_handler.has_warnings():
        logger.warning(f"{len(sampler.error_handler.warnings)} sampling warnings were recorded")
    return clouds
