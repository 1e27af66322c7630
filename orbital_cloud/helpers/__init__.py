from orbital_cloud.helpers.constant import Constants, orbital_name, orbital_magnetic_number, element_symbols, atomic_number
from orbital_cloud.helpers.special_functions import factorial, double_factorial, associated_laguerre, associated_legendre
from orbital_cloud.helpers.radial_wave_function import (
    radial_normalization,
    radial_wave_function,
    radial_probability_density,
    max_radial_extent,
    most_probable_radius,
)
from orbital_cloud.helpers.spherical_harmonics import (
    spherical_harmonic,
    spherical_harmonic_normalization,
    angular_probability_density,
    get_orbital_name,
    get_magnetic_quantum_numbers,
)
from orbital_cloud.helpers.probability_density import (
    MaxDensityCache,
    probability_density,
    probability_density_cartesian,
    spherical_to_cartesian,
    cartesian_to_spherical,
    estimate_max_density,
    get_max_density,
    evaluate_density,
)
