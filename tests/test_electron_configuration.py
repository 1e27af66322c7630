import pytest

from orbital_cloud.tasks.pre_processing.electron_configuration import (
    OrbitalDescriptor,
    SubshellOccupation,
    distribute_subshell_electrons,
    format_configuration,
    generate_electron_configuration,
    generate_subshell_configuration,
    subshell_capacity,
)

def test_oxygen_subshells():
    config = generate_subshell_configuration(8)
    assert [(s.label, s.electrons) for s in config] == [("1s", 2), ("2s", 2), ("2p", 4)]

def test_aufbau_places_4s_before_3d():
    config = generate_subshell_configuration(26)
    assert [s.label for s in config] == ["1s", "2s", "2p", "3s", "3p", "4s", "3d"]
    assert config[-1].electrons == 6

def test_electron_count_is_conserved():
    for count in (1, 7, 29, 54, 86, 118):
        assert sum(s.electrons for s in generate_subshell_configuration(count)) == count
        assert sum(o.electrons for o in generate_electron_configuration(count)) == count

def test_zero_electrons():
    assert generate_subshell_configuration(0) == []
    assert generate_electron_configuration(0) == []

@pytest.mark.parametrize("l, electrons, expected", [
    (0, 1, [1]),
    (1, 2, [1, 1, 0]),
    (1, 4, [2, 1, 1]),
    (2, 3, [1, 1, 1, 0, 0]),
    (2, 7, [2, 2, 1, 1, 1]),
    (1, 9, [2, 2, 2]),
])
def test_single_occupation_before_pairing(l, electrons, expected):
    assert distribute_subshell_electrons(l, electrons) == expected

def test_nitrogen_orbitals_are_half_filled():
    orbitals = generate_electron_configuration(7)
    assert orbitals[-3:] == [
        OrbitalDescriptor(2, 1, -1, 1),
        OrbitalDescriptor(2, 1, 0, 1),
        OrbitalDescriptor(2, 1, 1, 1),
    ]

def test_carbon_orbitals():
    orbitals = generate_electron_configuration(6)
    assert [(o.key, o.electrons) for o in orbitals] == [
        ("1,0,0", 2), ("2,0,0", 2), ("2,1,-1", 1), ("2,1,0", 1),
    ]

def test_descriptor_conversion():
    expected = OrbitalDescriptor(3, 2, -1, 1)
    assert OrbitalDescriptor.from_any(expected) is expected
    assert OrbitalDescriptor.from_any({"n": 3, "l": 2, "m": -1, "electrons": 1}) == expected
    assert OrbitalDescriptor.from_any((3, 2, -1, 1)) == expected
    assert OrbitalDescriptor.from_any([3, 2, -1]).electrons == 2

def test_format_configuration():
    assert format_configuration(generate_subshell_configuration(10)) == "1s² 2s² 2p⁶"
    assert format_configuration(generate_electron_configuration(8)) == "1s² 2s² 2p⁴"
    assert format_configuration([SubshellOccupation(4, 3, 14)]) == "4f¹⁴"

def test_subshell_capacity():
    assert [subshell_capacity(l) for l in range(4)] == [2, 6, 10, 14]
