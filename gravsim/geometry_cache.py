from __future__ import annotations
import numpy as np
from typing import Tuple
from .vector_ops import row_norms

"""
This module provides the pairwise geometry kernels for N-body force and energy
evaluation. The geometry_buffers function computes all pairwise position differences,
squared distances and inverse cubed distances in one pass using Einstein summation.
Softening adds eps^2 to the squared distance before the power is taken. With eps = 0
two coincident bodies give an infinite inverse cube, which is left in place so the
degeneracy reaches the caller. The diagonal is always zeroed to exclude
self-interaction. pair_distances lists the (optionally softened) distance of every
distinct pair, min_pair_separation returns the smallest of them and pair_potential sums
-G m_i m_j / r over all pairs.

"""


__all__ = ["geometry_buffers", "pair_distances", "min_pair_separation", "pair_potential"]


def geometry_buffers(
    pos: np.ndarray,
    eps: float = 0.0,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    pos = np.asarray(pos, dtype=float)

    diff = pos[:, None, :] - pos[None, :, :]
    r2 = np.einsum("ijk,ijk->ij", diff, diff, optimize=True)

    r2_soft = r2 + eps * eps
    np.fill_diagonal(r2_soft, 1.0)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        inv_r3 = np.power(r2_soft, -1.5)

    np.fill_diagonal(inv_r3, 0.0)
    return diff, r2, inv_r3


def pair_distances(pos: np.ndarray, eps: float = 0.0) -> Tuple[Tuple[np.ndarray, np.ndarray], np.ndarray]:
    pos = np.asarray(pos, dtype=float)
    iu = np.triu_indices(pos.shape[0], 1)
    diff = pos[iu[0]] - pos[iu[1]]
    r = row_norms(diff)
    if eps:
        r = np.sqrt(r * r + eps * eps)
    return iu, r


def min_pair_separation(pos: np.ndarray) -> float:
    pos = np.asarray(pos, dtype=float)
    if pos.shape[0] < 2:
        return float("inf")
    _, r = pair_distances(pos)
    return float(np.min(r))


def pair_potential(pos: np.ndarray, masses: np.ndarray, G: float = 1.0, eps: float = 0.0) -> float:
    m = np.asarray(masses, dtype=float).ravel()
    if m.size < 2 or G == 0.0:
        return 0.0
    iu, r = pair_distances(pos, eps)
    with np.errstate(divide="ignore"):
        inv_r = 1.0 / r
    return -float(G) * float(np.sum(m[iu[0]] * m[iu[1]] * inv_r))
