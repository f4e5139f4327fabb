import numpy as np
from .physics_utils import remove_center_of_mass, to_barycentric
from .scenarios import ScenarioConfig

"""
This module provides constructed scenarios with known orbital structure. The
SpecializedGenerators class offers static methods for a circular binary, a hierarchical
triple (inner binary plus a distant third body on a circular outer orbit) and an
equal-mass ring rotating at a chosen fraction of the circular speed. All bodies lie in
the z = 0 plane, velocities are barycentric, and every method returns a validated
ScenarioConfig ready for Simulator.from_scenario.

"""


class SpecializedGenerators:

	@staticmethod
	def circular_binary(
		m1: float = 1.0,
		m2: float = 1.0,
		separation: float = 2.0,
		G: float = 1.0,
	) -> ScenarioConfig:
		masses = np.array([m1, m2], dtype=float)
		M = float(masses.sum())
		x1 = -m2 * separation / M
		x2 = m1 * separation / M
		v_rel = np.sqrt(G * M / separation)
		positions = np.array([[x1, 0.0, 0.0], [x2, 0.0, 0.0]])
		velocities = np.array([
			[0.0, -m2 * v_rel / M, 0.0],
			[0.0, m1 * v_rel / M, 0.0],
		])
		return ScenarioConfig(masses, positions, velocities, name="circular_binary")

	@staticmethod
	def hierarchical_triple(
		mass_ratio1: float = 1.0,
		mass_ratio2: float = 0.5,
		separation_ratio: float = 10.0,
		G: float = 1.0,
	) -> ScenarioConfig:

		m1 = 1.0
		m2 = mass_ratio1
		m3 = mass_ratio2
		masses = np.array([m1, m2, m3])

		a_inner = 1.0

		x1 = -m2 * a_inner / (m1 + m2)
		x2 = m1 * a_inner / (m1 + m2)

		a_outer = max(separation_ratio * a_inner, 5.0 * a_inner)

		positions = np.array([
			[x1, 0.0, 0.0],
			[x2, 0.0, 0.0],
			[a_outer, 0.0, 0.0]
		])

		v_inner = np.sqrt(G * (m1 + m2) / a_inner)
		vy1 = -m2 * v_inner / (m1 + m2)
		vy2 = m1 * v_inner / (m1 + m2)

		v_outer = np.sqrt(G * (m1 + m2 + m3) / a_outer)

		velocities = np.array([
			[0.0, vy1, 0.0],
			[0.0, vy2, 0.0],
			[0.0, v_outer, 0.0]
		])

		positions, velocities = to_barycentric(masses, positions, velocities)
		return ScenarioConfig(masses, positions, velocities, name="hierarchical_triple")

	@staticmethod
	def equal_mass_ring(
		n_bodies: int,
		radius: float = 1.0,
		rotation_fraction: float = 0.5,
		G: float = 1.0,
	) -> ScenarioConfig:

		masses = np.ones(n_bodies)

		angles = np.linspace(0.0, 2.0 * np.pi, n_bodies, endpoint=False)
		positions = np.column_stack([
			radius * np.cos(angles),
			radius * np.sin(angles),
			np.zeros(n_bodies),
		])

		total_mass = float(np.sum(masses))
		v_scale = np.sqrt(G * total_mass / radius) * rotation_fraction

		velocities = np.column_stack([
			-v_scale * np.sin(angles),
			v_scale * np.cos(angles),
			np.zeros(n_bodies),
		])

		velocities = remove_center_of_mass(masses, velocities)
		return ScenarioConfig(masses, positions, velocities, name=f"ring_{n_bodies}")
