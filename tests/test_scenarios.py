import numpy as np
import pytest

from gravsim import ConfigurationError, ScenarioConfig, SimulationValidator, get_scenario, list_scenarios


def test_preset_catalogue():
    assert list_scenarios() == ["two_body", "tilted_binary", "three_body", "four_body"]
    four = get_scenario("four_body")
    assert four.n_bodies == 4
    np.testing.assert_array_equal(four.masses, [25.0, 3.0, 4.0, 500.0])


def test_unknown_preset():
    with pytest.raises(ConfigurationError, match="unknown scenario"):
        get_scenario("five_body")


def test_presets_are_fresh_objects():
    assert get_scenario("two_body") is not get_scenario("two_body")


def test_scenario_is_read_only():
    sc = get_scenario("two_body")
    with pytest.raises(ValueError):
        sc.init_positions[0, 0] = 3.0
    with pytest.raises(AttributeError):
        sc.name = "other"


def test_scenario_to_dict():
    d = get_scenario("two_body").to_dict()
    assert d["name"] == "two_body"
    assert d["masses"] == [1.0, 1.0]
    assert d["init_velocities"][0] == [0.0, 0.5, 0.0]


def test_validator_reports_all_problems():
    problems = SimulationValidator.problems([1.0, -2.0, float("inf")], np.zeros((3, 2)), np.zeros((2, 3)))
    assert any("positions" in p for p in problems)
    assert any("velocities" in p for p in problems)
    assert sum("mass[" in p for p in problems) == 2
    assert not SimulationValidator.state_is_valid([1.0], [[0, 0, 0]], [[0, 0, 0, 0]])


def test_validator_accepts_good_input():
    assert SimulationValidator.state_is_valid([1.0, 2.0], [[0, 0, 0], [1, 0, 0]], [[0, 0, 0], [0, 1, 0]])


def test_report_invalid_state_logs(caplog):
    with caplog.at_level("WARNING", logger="gravsim.simulation_validator"):
        SimulationValidator.report_invalid_state("demo", [1.0, 1.0], [[0, 0, 0], [0, 0, 0]], [[0, 0, 0], [0, 0, 0]])
    assert "share the same initial position" in caplog.text


def test_coincident_bodies_rejected():
    with pytest.raises(ConfigurationError, match="same initial position"):
        ScenarioConfig([1.0, 1.0, 1.0], [[0, 0, 0], [1, 1, 1], [1, 1, 1]], np.zeros((3, 3)))
