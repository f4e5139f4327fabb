"""
This module implements the Newtonian N-body acceleration model and the state derivative
handed to the RK4 stepper.

accelerations sums, for every body i, the pull -G m_j (r_i - r_j) / |r_i - r_j|^3 of all
other bodies j. An optional Plummer softening length eps replaces |r|^2 with
|r|^2 + eps^2; the default eps = 0 keeps the bare law, so coincident bodies produce
non-finite accelerations that propagate into the state. The combined phase state is a
(2, N, 3) array holding positions in slot 0 and velocities in slot 1; state_derivative
maps it to (velocities, accelerations). GravityModel freezes masses, G and eps into an
immutable callable with the f(t, y) signature the stepper expects.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import numpy as np
from numpy.typing import ArrayLike, NDArray
from .geometry_cache import geometry_buffers
from .vector_ops import zeros


__all__ = [
    "accelerations",
    "pack_state",
    "positions_of",
    "velocities_of",
    "state_derivative",
    "GravityModel",
]


def accelerations(
    pos: np.ndarray,
    masses: np.ndarray,
    G: float = 1.0,
    eps: float = 0.0,
) -> NDArray[np.float64]:
    pos = np.asarray(pos, dtype=float)
    m = np.asarray(masses, dtype=float)

    if pos.shape[0] < 2 or G == 0.0:
        return zeros(pos.shape[0])

    dr, _, inv_r3 = geometry_buffers(pos, float(eps))
    with np.errstate(invalid="ignore", over="ignore"):
        weights = m[None, :] * inv_r3
        acc = -float(G) * np.einsum("ij,ijk->ik", weights, dr, optimize=True)
    return acc


def pack_state(pos: ArrayLike, vel: ArrayLike) -> NDArray[np.float64]:
    return np.stack([np.asarray(pos, dtype=float), np.asarray(vel, dtype=float)])


def positions_of(state: np.ndarray) -> NDArray[np.float64]:
    return state[0]


def velocities_of(state: np.ndarray) -> NDArray[np.float64]:
    return state[1]


def state_derivative(
    t: float,
    state: np.ndarray,
    masses: np.ndarray,
    G: float = 1.0,
    eps: float = 0.0,
) -> NDArray[np.float64]:
    acc = accelerations(positions_of(state), masses, G, eps)
    return np.stack([velocities_of(state), acc])


@dataclass(frozen=True, eq=False)
class GravityModel:
    masses: np.ndarray
    G: float = 1.0
    eps: float = 0.0
    n_bodies: int = field(init=False)

    def __post_init__(self) -> None:
        m = np.array(self.masses, dtype=float).ravel()
        m.setflags(write=False)
        object.__setattr__(self, "masses", m)
        object.__setattr__(self, "G", float(self.G))
        object.__setattr__(self, "eps", float(self.eps))
        object.__setattr__(self, "n_bodies", int(m.size))

    def __call__(self, t: float, state: np.ndarray) -> NDArray[np.float64]:
        return state_derivative(t, state, self.masses, self.G, self.eps)
