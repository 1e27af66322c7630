import pytest

from orbital_cloud.helpers.calc_Zeff import calc_Zeff, parse_orbital_label
from orbital_cloud.tasks.pre_processing.electron_configuration import generate_subshell_configuration

@pytest.mark.parametrize("orbital, atomic_number, expected", [
    ("1s", 2, 1.70),
    ("1s", 6, 5.70),
    ("2p", 6, 3.25),
    ("3s", 11, 2.20),
    ("3d", 26, 6.25),
    ("4s", 26, 3.75),
])
def test_slater_rules(orbital, atomic_number, expected):
    configuration = generate_subshell_configuration(atomic_number)
    assert calc_Zeff(orbital, atomic_number, configuration) == pytest.approx(expected)

def test_tuple_and_label_agree():
    configuration = generate_subshell_configuration(17)
    assert calc_Zeff((3, 1), 17, configuration) == calc_Zeff("3p", 17, configuration)

def test_hydrogen_is_unscreened():
    assert calc_Zeff("1s", 1, generate_subshell_configuration(1)) == pytest.approx(1.0)

def test_unoccupied_orbital_counts_every_electron_of_its_group():
    # an electron added to the empty 2p of lithium sees the 2s electron
    configuration = generate_subshell_configuration(3)
    assert calc_Zeff("2p", 3, configuration) == pytest.approx(3 - 2 * 0.85 - 0.35)

def test_parse_orbital_label():
    assert parse_orbital_label("4f") == (4, 3)
    assert parse_orbital_label("10s") == (10, 0)
