from dataclasses import dataclass
from typing import Any, Iterable, Mapping
from orbital_cloud.helpers.constant import orbital_name

# Aufbau filling order (n, l)
aufbau_order = [
    (1, 0), (2, 0), (2, 1), (3, 0), (3, 1), (4, 0), (3, 2), (4, 1), (5, 0), (4, 2),
    (5, 1), (6, 0), (4, 3), (5, 2), (6, 1), (7, 0), (5, 3), (6, 2), (7, 1),
]

superscripts = "⁰¹²³⁴⁵⁶⁷⁸⁹"

@dataclass(frozen=True)
class OrbitalDescriptor:
    """
    One (n, l, m) orbital slot and the number of electrons it holds (0, 1 or 2).
    """
    n: int
    l: int
    m: int
    electrons: int = 2

    @property
    def key(self) -> str:
        return f"{self.n},{self.l},{self.m}"

    @classmethod
    def from_any(cls, orbital: Any) -> "OrbitalDescriptor":
        """
        Accept an OrbitalDescriptor, a mapping with n/l/m/electrons keys or an
        (n, l, m, electrons) sequence.
        """
        if isinstance(orbital, cls):
            return orbital
        if isinstance(orbital, Mapping):
            return cls(int(orbital["n"]), int(orbital["l"]), int(orbital["m"]), int(orbital.get("electrons", 2)))
        n, l, m, *rest = orbital
        return cls(int(n), int(l), int(m), int(rest[0]) if rest else 2)

@dataclass(frozen=True)
class SubshellOccupation:
    n: int
    l: int
    electrons: int

    @property
    def label(self) -> str:
        return f"{self.n}{orbital_name[self.l]}"

def subshell_capacity(l: int) -> int:
    return 2 * (2 * l + 1)

def distribute_subshell_electrons(l: int, total_electrons: int) -> list[int]:
    """
    Occupancy of each m = -l..l orbital of a subshell, filling every orbital
    singly before any is paired.

    Example: l=1 with 4 electrons gives [2, 1, 1].
    """
    orbitals = 2 * l + 1
    total_electrons = max(0, min(int(total_electrons), 2 * orbitals))
    singles = min(total_electrons, orbitals)
    pairs = total_electrons - singles
    return [(1 if i < singles else 0) + (1 if i < pairs else 0) for i in range(orbitals)]

def generate_subshell_configuration(electron_count: int) -> list[SubshellOccupation]:
    """
    Ground-state subshell occupations by the Aufbau order, e.g. 8 electrons
    give 1s2 2s2 2p4.
    """
    config = []
    remaining = electron_count

    for n, l in aufbau_order:
        if remaining <= 0:
            break
        electrons = min(remaining, subshell_capacity(l))
        config.append(SubshellOccupation(n, l, electrons))
        remaining -= electrons

    return config

def generate_electron_configuration(electron_count: int) -> list[OrbitalDescriptor]:
    """
    Expand the Aufbau configuration into per-orbital descriptors. Only occupied
    orbitals are returned.
    """
    config = []
    for subshell in generate_subshell_configuration(electron_count):
        occupancy = distribute_subshell_electrons(subshell.l, subshell.electrons)
        for m, electrons in zip(range(-subshell.l, subshell.l + 1), occupancy):
            if electrons > 0:
                config.append(OrbitalDescriptor(subshell.n, subshell.l, m, electrons))
    return config

def format_configuration(config: Iterable[SubshellOccupation | OrbitalDescriptor]) -> str:
    """
    Format a configuration as "1s² 2s² 2p⁶". Per-orbital descriptors are
    summed per subshell.
    """
    subshells: dict[str, int] = {}
    for entry in config:
        key = f"{entry.n}{orbital_name[entry.l]}"
        subshells[key] = subshells.get(key, 0) + entry.electrons

    return " ".join(
        f"{key}{''.join(superscripts[int(d)] for d in str(count))}"
        for key, count in subshells.items()
    )
