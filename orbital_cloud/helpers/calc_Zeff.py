import logging
from typing import Iterable
from orbital_cloud.helpers.constant import orbital_magnetic_number
from orbital_cloud.tasks.pre_processing.electron_configuration import SubshellOccupation

logger = logging.getLogger(__name__)

# Slater shielding constants
weights = {
    "same": 0.35,      # same group, excluding the electron itself
    "same_1s": 0.30,   # the other 1s electron
    "inner_1": 0.85,   # (n-1) shell, for ns/np electrons
    "inner": 1.00,     # (n-2) and lower, or any inner group for nd/nf
}

def _slater_group(n: int, l: int) -> tuple[int, int]:
    # [1s] [2s,2p] [3s,3p] [3d] [4s,4p] [4d] [4f] [5s,5p] ...
    return (n, 0) if l <= 1 else (n, l)

def parse_orbital_label(label: str) -> tuple[int, int]:
    """
    "3d" -> (3, 2)
    """
    return int(label[:-1]), orbital_magnetic_number[label[-1]]

def calc_Zeff(orbital: str | tuple[int, int], atomic_number: int, configuration: Iterable[SubshellOccupation]) -> float:
    """
    Effective nuclear charge felt by one electron of `orbital`, by Slater's rules.

    Args:
        orbital: Orbital label such as "4s" or an (n, l) pair
        atomic_number: Nuclear charge Z
        configuration: Subshell occupations of the atom or ion

    Returns:
        Z - S, where S is the Slater screening constant
    """
    n, l = parse_orbital_label(orbital) if isinstance(orbital, str) else orbital
    target = _slater_group(n, l)

    group_electrons: dict[tuple[int, int], int] = {}
    occupied = False
    for sub in configuration:
        group = _slater_group(sub.n, sub.l)
        group_electrons[group] = group_electrons.get(group, 0) + sub.electrons
        if (sub.n, sub.l) == (n, l) and sub.electrons > 0:
            occupied = True

    s = 0.0
    for group, n_e in group_electrons.items():
        if group == target:
            if occupied:
                n_e -= 1
            s += (weights["same_1s"] if target == (1, 0) else weights["same"]) * n_e
        elif group < target:
            if l <= 1 and group[0] == n - 1:
                s += weights["inner_1"] * n_e
            else:
                s += weights["inner"] * n_e

    z_eff = atomic_number - s
    logger.debug(f"Calculated Zeff for {n}{'spdfghi'[l]} (Z={atomic_number}): {z_eff}")
    return z_eff
