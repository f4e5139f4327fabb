"""
This module implements the classic fixed-step fourth-order Runge-Kutta integrator.

rk4_step performs one four-stage update of y' = f(t, y) for any state type that supports
addition and multiplication by a float (floats, numpy arrays). RK4Stepper wraps it in a
call-driven sequence: the first advance() hands back the seed pair (0, y0) untouched and
every later call performs exactly one step, returning (n * h, y_n). Returned states are
copies, so callers may modify them freely. Time is computed from the step counter
rather than accumulated, so it stays an exact multiple of h. A stepper cannot be
rewound; restarting means building a new one from the original initial state.
"""

from __future__ import annotations
import copy
import math
from typing import Any, Callable, Generic, Tuple, TypeVar

S = TypeVar("S")

Derivative = Callable[[float, Any], Any]


def rk4_step(f: Derivative, t: float, y: S, h: float) -> S:
	h2 = 0.5 * h
	k1 = f(t, y)
	k2 = f(t + h2, y + k1 * h2)
	k3 = f(t + h2, y + k2 * h2)
	k4 = f(t + h, y + k3 * h)
	return y + (k1 + k2 * 2.0 + k3 * 2.0 + k4) * (h / 6.0)


class RK4Stepper(Generic[S]):
	def __init__(self, func: Derivative, h: float, initial_state: S) -> None:
		h = float(h)
		if not (math.isfinite(h) and h > 0.0):
			raise ValueError(f"step size must be a finite positive number, got {h!r}")
		self._func = func
		self._h = h
		self._count = 0
		self._t = 0.0
		self._y: S = copy.deepcopy(initial_state)
		self._seeded = False

	@property
	def h(self) -> float:
		return self._h

	@property
	def t(self) -> float:
		return self._t

	@property
	def state(self) -> S:
		return copy.deepcopy(self._y)

	@property
	def step_count(self) -> int:
		return self._count

	def advance(self) -> Tuple[float, S]:
		if not self._seeded:
			self._seeded = True
			return self._t, copy.deepcopy(self._y)

		self._y = rk4_step(self._func, self._t, self._y, self._h)
		self._count += 1
		self._t = self._count * self._h
		return self._t, copy.deepcopy(self._y)
