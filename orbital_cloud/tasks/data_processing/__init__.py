from orbital_cloud.tasks.data_processing.sample_orbitals import (
    OrbitalJob,
    build_orbital_jobs,
    resolve_effective_charge,
    sample_orbital_task,
)
