"""
This module provides validation for scenario inputs before any integration starts.

SimulationValidator.validate coerces masses to a 1-D float array and positions and
velocities to (N, 3) matrices, then raises ConfigurationError on the first problem:
mismatched body counts, wrong matrix shapes, empty scenarios, non-positive or non-finite
masses, non-finite coordinates, or two bodies sharing an initial position (which would
make the very first force evaluation divide by zero). state_is_valid is the boolean
form, and report_invalid_state logs each problem found for debugging.
"""

from __future__ import annotations
import logging
import math
from typing import List, Sequence, Tuple
import numpy as np

from .errors import ConfigurationError
from .geometry_cache import min_pair_separation

logger = logging.getLogger(__name__)


class SimulationValidator:
	@staticmethod
	def problems(masses, positions, velocities) -> List[str]:
		found: List[str] = []
		if masses is None or positions is None or velocities is None:
			return ["masses, positions and velocities are all required"]

		try:
			m = np.asarray(masses, dtype=float)
			r = np.asarray(positions, dtype=float)
			v = np.asarray(velocities, dtype=float)
		except (TypeError, ValueError) as exc:
			return [f"scenario arrays are not rectangular numeric data ({exc})"]

		if m.ndim != 1:
			found.append(f"masses must be a flat sequence, got shape {m.shape}")
			return found
		n = m.size
		if n == 0:
			found.append("a scenario needs at least one body")
			return found
		if r.ndim != 2 or r.shape[1] != 3:
			found.append(f"positions must be an (N, 3) matrix, got shape {r.shape}")
		elif r.shape[0] != n:
			found.append(f"{r.shape[0]} positions for {n} masses")
		if v.ndim != 2 or v.shape[1] != 3:
			found.append(f"velocities must be an (N, 3) matrix, got shape {v.shape}")
		elif v.shape[0] != n:
			found.append(f"{v.shape[0]} velocities for {n} masses")

		for i, m_i in enumerate(m):
			if not (math.isfinite(m_i) and m_i > 0.0):
				found.append(f"mass[{i}] must be a positive finite number, got {m_i}")

		if found:
			return found

		if not np.all(np.isfinite(r)):
			found.append("positions contain non-finite values")
		if not np.all(np.isfinite(v)):
			found.append("velocities contain non-finite values")
		if not found and n >= 2 and min_pair_separation(r) == 0.0:
			found.append("two bodies share the same initial position")
		return found

	@staticmethod
	def state_is_valid(masses, positions, velocities) -> bool:
		return not SimulationValidator.problems(masses, positions, velocities)

	@staticmethod
	def validate(
		masses: Sequence[float], positions, velocities
	) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
		found = SimulationValidator.problems(masses, positions, velocities)
		if found:
			raise ConfigurationError("; ".join(found))
		return (
			np.array(masses, dtype=np.float64),
			np.array(positions, dtype=np.float64),
			np.array(velocities, dtype=np.float64),
		)

	@staticmethod
	def report_invalid_state(label: str, masses=None, positions=None, velocities=None) -> None:
		for problem in SimulationValidator.problems(masses, positions, velocities):
			logger.warning("[invalid] %s: %s", label, problem)
