from __future__ import annotations
import logging
import math
from typing import Optional, Sequence, Tuple, Union
import numpy as np

from .errors import InvalidStateAccess, NumericDegeneracy
from .forces import GravityModel, pack_state, positions_of, velocities_of
from .geometry_cache import min_pair_separation
from .physics_utils import to_barycentric
from .rk4_stepper import RK4Stepper
from .scenarios import ScenarioConfig
from .sim_config import SimConfig

"""
This module implements Simulator, the orchestrator that turns one scenario into a
restartable trajectory sampled once per frame.

Construction validates the scenario, shifts positions and velocities into the
barycentric frame and stores the result; nothing is integrated yet. reset() drops any
previous stepper and builds a fresh RK4Stepper over a GravityModel that holds its own
read-only copy of the masses, so every reset starts an independent trajectory from the
same normalized initial state. advance() performs one stepper call and returns
(time, positions), the first call after a reset returning the untouched seed frame.
Calling advance() before reset() raises InvalidStateAccess. The smallest pairwise
separation seen since the last reset is tracked as an optional diagnostic.

"""

logger = logging.getLogger(__name__)

Frame = Tuple[float, np.ndarray]
FrameWithSeparation = Tuple[float, np.ndarray, float]


class Simulator:
	def __init__(
		self,
		masses: Sequence[float],
		init_positions,
		init_velocities,
		config: SimConfig | None = None,
		*,
		dt: float | None = None,
		name: str = "custom",
	) -> None:
		cfg = config.copy() if config is not None else SimConfig()
		if dt is not None:
			cfg.dt = float(dt)
		self.cfg: SimConfig = cfg.validate()

		scenario = ScenarioConfig(masses, init_positions, init_velocities, name=name)
		self.scenario = scenario

		self._mass = scenario.masses
		pos0, vel0 = to_barycentric(self._mass, scenario.init_positions, scenario.init_velocities)
		pos0.setflags(write=False)
		vel0.setflags(write=False)
		self._init_pos = pos0
		self._init_vel = vel0

		self._stepper: Optional[RK4Stepper] = None
		self._time = 0.0
		self._state: Optional[np.ndarray] = None
		self._min_sep = math.inf
		self._warned_nonfinite = False

		logger.debug(
			"configured %s: %d bodies, dt=%g, softening=%g",
			scenario.name, self.n_bodies, self.cfg.dt, self.cfg.softening,
		)

	@classmethod
	def from_scenario(
		cls, scenario: ScenarioConfig, config: SimConfig | None = None, *, dt: float | None = None
	) -> "Simulator":
		return cls(
			scenario.masses,
			scenario.init_positions,
			scenario.init_velocities,
			config,
			dt=dt,
			name=scenario.name,
		)

	@property
	def masses(self) -> np.ndarray:
		return self._mass

	@property
	def n_bodies(self) -> int:
		return int(self._mass.size)

	@property
	def G(self) -> float:
		return float(self.cfg.G)

	@property
	def dt(self) -> float:
		return float(self.cfg.dt)

	@property
	def softening(self) -> float:
		return float(self.cfg.softening)

	@property
	def initial_positions(self) -> np.ndarray:
		return self._init_pos

	@property
	def initial_velocities(self) -> np.ndarray:
		return self._init_vel

	@property
	def is_ready(self) -> bool:
		return self._stepper is not None

	@property
	def time(self) -> float:
		return self._time

	@property
	def step_count(self) -> int:
		if self._stepper is None:
			return 0
		return self._stepper.step_count

	@property
	def min_separation(self) -> float:
		return self._min_sep

	def state(self) -> Tuple[np.ndarray, np.ndarray]:
		if self._state is None:
			return self._init_pos.copy(), self._init_vel.copy()
		return positions_of(self._state).copy(), velocities_of(self._state).copy()

	def reset(self) -> None:
		self._stepper = None
		model = GravityModel(self._mass, G=self.cfg.G, eps=self.cfg.softening)
		self._stepper = RK4Stepper(model, self.cfg.dt, pack_state(self._init_pos, self._init_vel))
		self._time = 0.0
		self._state = None
		self._min_sep = math.inf
		self._warned_nonfinite = False
		logger.debug("reset %s to t=0", self.scenario.name)

	def advance(self, with_min_separation: bool = False) -> Union[Frame, FrameWithSeparation]:
		if self._stepper is None:
			raise InvalidStateAccess("advance() called before reset()")

		t, state = self._stepper.advance()
		self._time = float(t)
		self._state = state
		self._check_finite(state)

		positions = positions_of(state).copy()
		if self.cfg.track_min_separation and self.n_bodies >= 2:
			sep = min_pair_separation(positions)
			if sep < self._min_sep:
				self._min_sep = sep

		if with_min_separation:
			return self._time, positions, self._min_sep
		return self._time, positions

	def _check_finite(self, state: np.ndarray) -> None:
		if np.all(np.isfinite(state)):
			return
		msg = f"non-finite state in {self.scenario.name} at t={self._time:g} (close encounter?)"
		if self.cfg.detect_degeneracy:
			raise NumericDegeneracy(msg)
		if not self._warned_nonfinite:
			logger.warning("[warning] %s", msg)
			self._warned_nonfinite = True

	def __repr__(self) -> str:
		return (
			f"Simulator(name={self.scenario.name!r}, n_bodies={self.n_bodies}, "
			f"dt={self.cfg.dt}, t={self._time})"
		)
