from orbital_cloud.tasks.pre_processing.settings import Settings, import_settings
from orbital_cloud.tasks.pre_processing.electron_configuration import (
    OrbitalDescriptor,
    SubshellOccupation,
    distribute_subshell_electrons,
    generate_electron_configuration,
    generate_subshell_configuration,
    format_configuration,
)
