import pytest

from gravsim import SimConfig, Simulator, get_scenario


@pytest.fixture
def two_body():
    return get_scenario("two_body")


@pytest.fixture
def two_body_sim(two_body):
    sim = Simulator.from_scenario(two_body, SimConfig(dt=0.01))
    sim.reset()
    return sim
