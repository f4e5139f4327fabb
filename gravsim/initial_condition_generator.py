"""
This module generates random, reproducible initial conditions for gravitational
scenarios.

The InitialConditionGenerator class draws masses from a uniform or log-uniform range,
positions from an isotropic Gaussian cloud, and velocities with random directions
scaled so that the kinetic energy is a chosen fraction of the virial value, plus a
small random perturbation. Positions and velocities are shifted to the barycentric
frame. A seeded numpy Generator makes every draw repeatable. generate_single returns a
ScenarioConfig, generate_batch returns a list of them, and create_simulation wraps one
directly in a Simulator.
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .geometry_cache import min_pair_separation, pair_distances, pair_potential
from .physics_utils import remove_center_of_mass, to_barycentric
from .scenarios import ScenarioConfig
from .sim_config import SimConfig
from .simulation import Simulator


@dataclass
class GeneratorConfig:
	mass_range: Tuple[float, float] = (0.1, 10.0)
	use_log_mass: bool = False
	position_scale: float = 1.0
	velocity_virial_fraction: float = 1.0
	velocity_perturbation: float = 0.1
	G: float = 1.0
	seed: Optional[int] = None


class InitialConditionGenerator:

	def __init__(self, config: GeneratorConfig | None = None):
		self.config: GeneratorConfig = config or GeneratorConfig()
		self.rng = np.random.default_rng(self.config.seed)

	def _generate_masses(self, n: int) -> np.ndarray:
		min_m, max_m = self.config.mass_range
		if self.config.use_log_mass:
			return np.exp(self.rng.uniform(np.log(min_m), np.log(max_m), n))
		return self.rng.uniform(min_m, max_m, n)

	def _generate_positions(self, n: int) -> np.ndarray:
		pos = self.rng.standard_normal((n, 3)) * self.config.position_scale
		while n >= 2 and min_pair_separation(pos) == 0.0:
			pos = self.rng.standard_normal((n, 3)) * self.config.position_scale
		return pos

	def _compute_mean_separation(self, positions: np.ndarray) -> float:
		if len(positions) < 2:
			return 1.0
		_, r = pair_distances(positions)
		return float(np.mean(r))

	def _compute_potential_energy(self, m: np.ndarray, pos: np.ndarray) -> float:
		return pair_potential(pos, m, self.config.G)

	def _generate_velocities(self, m: np.ndarray, pos: np.ndarray) -> np.ndarray:
		n, G = len(m), self.config.G

		U = self._compute_potential_energy(m, pos)
		K_target = -U / 2.0 * self.config.velocity_virial_fraction
		if K_target <= 0.0:
			v_char = np.sqrt(G * m.sum() / self._compute_mean_separation(pos))
		else:
			v_char = np.sqrt(2.0 * K_target / m.sum())

		vel = self.rng.standard_normal((n, 3))
		speed = np.linalg.norm(vel, axis=1, keepdims=True)
		vel = np.where(speed > 0, vel / speed * v_char, vel)

		vel = remove_center_of_mass(m, vel)
		vel += self.rng.standard_normal((n, 3)) * v_char * self.config.velocity_perturbation
		return vel

	def generate_single(self, n_bodies: int) -> ScenarioConfig:
		m = self._generate_masses(n_bodies)
		p = self._generate_positions(n_bodies)
		v = self._generate_velocities(m, p)
		p, v = to_barycentric(m, p, v)
		return ScenarioConfig(m, p, v, name=f"random_{n_bodies}")

	def generate_batch(
		self, n_systems: int, n_bodies_range: Tuple[int, int] = (3, 5)
	) -> List[ScenarioConfig]:
		out: list = []
		for _ in range(n_systems):
			n = int(self.rng.integers(n_bodies_range[0], n_bodies_range[1] + 1))
			out.append(self.generate_single(n))
		return out

	def create_simulation(self, n_bodies: int, config: SimConfig | None = None) -> Simulator:
		cfg = config.copy() if config is not None else SimConfig()
		cfg.G = self.config.G
		return Simulator.from_scenario(self.generate_single(n_bodies), cfg)
