import logging

import numpy as np
import pytest

from gravsim import (
    ConfigurationError,
    Diagnostics,
    InvalidStateAccess,
    NumericDegeneracy,
    SimConfig,
    Simulator,
    get_scenario,
    list_scenarios,
)


def _run(sim, n):
    return [sim.advance() for _ in range(n)]


def test_advance_before_reset_fails(two_body):
    sim = Simulator.from_scenario(two_body)
    assert not sim.is_ready
    with pytest.raises(InvalidStateAccess):
        sim.advance()


def test_seed_frame_is_normalized_initial_state(two_body_sim):
    t, pos = two_body_sim.advance()
    assert t == 0.0
    np.testing.assert_array_equal(pos, [[-1.0, 0.0, 0.0], [1.0, 0.0, 0.0]])


def test_second_frame_matches_circular_orbit(two_body_sim):
    two_body_sim.advance()
    t, pos = two_body_sim.advance()
    assert t == pytest.approx(0.01)
    expected = [[-0.999987, 0.005, 0.0], [0.999987, -0.005, 0.0]]
    np.testing.assert_allclose(pos, expected, atol=1e-4)
    np.testing.assert_allclose(pos[0], [-np.cos(0.005), np.sin(0.005), 0.0], atol=1e-9)


def test_time_sequence(two_body_sim):
    times = [t for t, _ in _run(two_body_sim, 200)]
    assert times == [n * 0.01 for n in range(200)]
    assert all(b > a for a, b in zip(times, times[1:]))


def test_barycentric_shift_applied():
    masses = [1.0, 3.0]
    pos = [[0.0, 0.0, 0.0], [4.0, 0.0, 0.0]]
    vel = [[0.0, 1.0, 0.0], [0.0, 1.0, 2.0]]
    sim = Simulator(masses, pos, vel)
    m = np.asarray(masses)
    np.testing.assert_allclose(m @ sim.initial_positions, 0.0, atol=1e-12)
    np.testing.assert_allclose(m @ sim.initial_velocities, 0.0, atol=1e-12)
    np.testing.assert_allclose(sim.initial_positions[0], [-3.0, 0.0, 0.0])
    np.testing.assert_allclose(sim.initial_velocities[1], [0.0, 0.0, 0.5])


@pytest.mark.parametrize("name", list_scenarios())
def test_presets_are_barycentric(name):
    sim = Simulator.from_scenario(get_scenario(name))
    m = sim.masses
    scale = float(np.sum(m))
    np.testing.assert_allclose(m @ sim.initial_positions / scale, 0.0, atol=1e-12)
    np.testing.assert_allclose(m @ sim.initial_velocities / scale, 0.0, atol=1e-12)


def test_determinism():
    a = Simulator.from_scenario(get_scenario("three_body"))
    b = Simulator.from_scenario(get_scenario("three_body"))
    a.reset()
    b.reset()
    for (ta, pa), (tb, pb) in zip(_run(a, 300), _run(b, 300)):
        assert ta == tb
        np.testing.assert_array_equal(pa, pb)


def test_reset_starts_an_identical_independent_trajectory(two_body_sim):
    first = _run(two_body_sim, 50)
    two_body_sim.reset()
    assert two_body_sim.time == 0.0
    assert two_body_sim.step_count == 0
    second = _run(two_body_sim, 50)
    for (t1, p1), (t2, p2) in zip(first, second):
        assert t1 == t2
        np.testing.assert_array_equal(p1, p2)


def test_returned_positions_do_not_alias_state(two_body_sim):
    _, pos = two_body_sim.advance()
    pos[:] = 1e6
    _, nxt = two_body_sim.advance()
    assert np.all(np.abs(nxt) < 2.0)


def test_input_arrays_are_copied():
    masses = np.array([1.0, 1.0])
    pos = np.array([[-1.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
    vel = np.array([[0.0, 0.5, 0.0], [0.0, -0.5, 0.0]])
    sim = Simulator(masses, pos, vel)
    masses[0] = 100.0
    pos[0, 0] = -50.0
    sim.reset()
    _, p = sim.advance()
    assert sim.masses[0] == 1.0
    assert p[0, 0] == -1.0
    with pytest.raises(ValueError):
        sim.masses[0] = 2.0


def test_momentum_conserved(two_body_sim):
    _run(two_body_sim, 1001)
    diag = Diagnostics(two_body_sim)
    np.testing.assert_allclose(diag.linear_momentum(), 0.0, atol=1e-10)


def test_circular_orbit_keeps_radius_and_energy(two_body_sim):
    diag = Diagnostics(two_body_sim)
    E0 = diag.energy()
    L0 = diag.angular_momentum()
    for _, pos in _run(two_body_sim, 1000):
        assert np.linalg.norm(pos[1] - pos[0]) == pytest.approx(2.0, abs=1e-6)
    assert diag.energy() == pytest.approx(E0, rel=1e-7)
    np.testing.assert_allclose(diag.angular_momentum(), L0, rtol=1e-7)


def test_min_separation_tracking(two_body_sim):
    t, pos, sep = two_body_sim.advance(with_min_separation=True)
    assert sep == pytest.approx(2.0)
    _run(two_body_sim, 100)
    assert two_body_sim.min_separation == pytest.approx(2.0, abs=1e-6)
    two_body_sim.reset()
    assert two_body_sim.min_separation == float("inf")


def test_min_separation_can_be_disabled(two_body):
    sim = Simulator.from_scenario(two_body, SimConfig(track_min_separation=False))
    sim.reset()
    _run(sim, 10)
    assert sim.min_separation == float("inf")


def test_dt_override_does_not_touch_shared_config(two_body):
    cfg = SimConfig(dt=0.01)
    sim = Simulator.from_scenario(two_body, cfg, dt=0.05)
    assert sim.dt == 0.05
    assert cfg.dt == 0.01
    sim.reset()
    sim.advance()
    assert sim.advance()[0] == pytest.approx(0.05)


@pytest.mark.parametrize(
    "masses, pos, vel",
    [
        ([1.0, 1.0], [[0, 0, 0]], [[0, 0, 0], [0, 0, 0]]),
        ([1.0], [[0, 0]], [[0, 0, 0]]),
        ([1.0, -1.0], [[0, 0, 0], [1, 0, 0]], [[0, 0, 0], [0, 0, 0]]),
        ([1.0, 0.0], [[0, 0, 0], [1, 0, 0]], [[0, 0, 0], [0, 0, 0]]),
        ([1.0, 1.0], [[0, 0, 0], [0, 0, 0]], [[0, 0, 0], [0, 0, 0]]),
        ([1.0, 1.0], [[0, 0, 0], [1, 0, float("nan")]], [[0, 0, 0], [0, 0, 0]]),
        ([], [], []),
        ([1.0, 1.0], [[0, 0, 0], [1, 0]], [[0, 0, 0], [0, 0, 0]]),
    ],
)
def test_bad_scenarios_fail_at_construction(masses, pos, vel):
    with pytest.raises(ConfigurationError):
        Simulator(masses, pos, vel)


@pytest.mark.parametrize("cfg", [SimConfig(dt=0.0), SimConfig(dt=-1.0), SimConfig(softening=-0.1)])
def test_bad_run_config(two_body, cfg):
    with pytest.raises(ConfigurationError):
        Simulator.from_scenario(two_body, cfg)


def _collapsing_pair(**cfg):
    tiny = 1e-160
    return Simulator(
        [1.0, 1.0],
        [[-tiny, 0.0, 0.0], [tiny, 0.0, 0.0]],
        [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]],
        SimConfig(**cfg),
    )


def test_degeneracy_detected_when_enabled():
    sim = _collapsing_pair(detect_degeneracy=True)
    sim.reset()
    sim.advance()
    with pytest.raises(NumericDegeneracy):
        sim.advance()


def test_degeneracy_propagates_silently_by_default(caplog):
    sim = _collapsing_pair()
    sim.reset()
    sim.advance()
    with caplog.at_level(logging.WARNING, logger="gravsim.simulation"):
        _, pos = sim.advance()
        sim.advance()
    assert not np.all(np.isfinite(pos))
    warnings = [r for r in caplog.records if "non-finite" in r.getMessage()]
    assert len(warnings) == 1


def test_single_body_drifts_nowhere():
    sim = Simulator([2.0], [[1.0, 2.0, 3.0]], [[1.0, 0.0, 0.0]])
    sim.reset()
    for _, pos in _run(sim, 5):
        np.testing.assert_array_equal(pos, [[0.0, 0.0, 0.0]])


def test_body_count_is_read_only(two_body):
    sim = Simulator.from_scenario(two_body)
    assert sim.n_bodies == 2
    with pytest.raises(AttributeError):
        sim.n_bodies = 3
