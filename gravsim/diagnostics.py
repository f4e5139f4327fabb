from __future__ import annotations
import numpy as np
from typing import Dict, Tuple, TYPE_CHECKING
from .geometry_cache import min_pair_separation, pair_potential
from .physics_utils import center_of_mass
from .vector_ops import norm
if TYPE_CHECKING:
    from .simulation import Simulator

"""
This module computes conserved quantities and health metrics for a running simulation.
The Diagnostics class reads the simulator's current positions and velocities (the
barycentric initial state before the first step) and provides kinetic energy, potential
energy with the same softening as the force law, total energy, linear momentum, the
angular momentum vector about the origin, center of mass position and velocity, and the
current minimum pairwise separation. summary gathers them into a flat dict suitable for
a pandas row. In the barycentric frame the linear momentum and the center of mass
should stay at zero to roundoff.

"""


class Diagnostics:
	def __init__(self, simulation: "Simulator"):
		self.sim = simulation

	def _phase(self) -> Tuple[np.ndarray, np.ndarray]:
		return self.sim.state()

	def kinetic_energy(self) -> float:
		_, v = self._phase()
		m = self.sim.masses
		return 0.5 * float(np.sum(m * np.sum(v * v, axis=1)))

	def potential_energy(self) -> float:
		pos, _ = self._phase()
		return pair_potential(pos, self.sim.masses, self.sim.G, self.sim.softening)

	def energy(self) -> float:
		return self.kinetic_energy() + self.potential_energy()

	def linear_momentum(self) -> np.ndarray:
		_, v = self._phase()
		return np.sum(self.sim.masses[:, None] * v, axis=0)

	def angular_momentum(self) -> np.ndarray:
		pos, v = self._phase()
		p = self.sim.masses[:, None] * v
		return np.sum(np.cross(pos, p), axis=0)

	def center_of_mass(self) -> Tuple[np.ndarray, np.ndarray]:
		pos, v = self._phase()
		m = self.sim.masses
		return center_of_mass(m, pos), center_of_mass(m, v)

	def min_separation(self) -> float:
		pos, _ = self._phase()
		return min_pair_separation(pos)

	def summary(self) -> Dict[str, float]:
		T = self.kinetic_energy()
		U = self.potential_energy()
		com_pos, com_vel = self.center_of_mass()
		return {
			"time": float(self.sim.time),
			"kinetic_energy": T,
			"potential_energy": U,
			"total_energy": T + U,
			"momentum_norm": norm(self.linear_momentum()),
			"angular_momentum_norm": norm(self.angular_momentum()),
			"com_position": norm(com_pos),
			"com_velocity": norm(com_vel),
			"min_separation": self.min_separation(),
		}
