from __future__ import annotations
import math
from dataclasses import dataclass

from .errors import ConfigurationError

"""
This module defines SimConfig, the run-level settings shared by every simulator
instance. Key parameters are the fixed RK4 step size, the gravitational constant, an
optional Plummer softening length (zero keeps the bare inverse-square law), and two
diagnostic switches: minimum pair separation tracking and non-finite state detection.
Per-scenario data (masses, initial positions and velocities) lives in ScenarioConfig,
not here. The copy method gives an independent instance and validate raises
ConfigurationError for values that cannot drive an integration.
"""


@dataclass
class SimConfig:
	dt: float = 0.01
	G: float = 1.0
	softening: float = 0.0
	track_min_separation: bool = True
	detect_degeneracy: bool = False

	def copy(self) -> "SimConfig":
		new = object.__new__(SimConfig)
		new.__dict__ = dict(getattr(self, "__dict__", {}))
		return new

	def validate(self) -> "SimConfig":
		dt = float(self.dt)
		if not (math.isfinite(dt) and dt > 0.0):
			raise ConfigurationError(f"dt must be a finite positive number, got {self.dt!r}")
		if not math.isfinite(float(self.G)):
			raise ConfigurationError(f"G must be finite, got {self.G!r}")
		eps = float(self.softening)
		if not (math.isfinite(eps) and eps >= 0.0):
			raise ConfigurationError(f"softening must be finite and >= 0, got {self.softening!r}")
		return self
