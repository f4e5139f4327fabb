import numpy as np
from typing import Tuple
from .vector_ops import Matrix3, Vec3, as_matrix, scale, sub

"""
This module provides the barycentric frame helpers. center_of_mass returns the
mass-weighted mean of an (N, 3) matrix (positions or velocities), remove_center_of_mass
subtracts it from every row, and to_barycentric applies both shifts so that the center
of mass sits at the origin and the net momentum is zero. A single body is shifted to the
origin at rest. Masses are assumed positive; validation happens upstream.


"""


def center_of_mass(masses: np.ndarray, vectors: np.ndarray) -> Vec3:
	m = np.asarray(masses, dtype=float).ravel()
	vec = as_matrix(vectors, n_rows=m.size)
	total_mass = float(np.sum(m))
	if total_mass == 0 or vec.size == 0:
		return np.zeros(3)
	return scale(np.sum(m[:, None] * vec, axis=0), 1.0 / total_mass)


def remove_center_of_mass(masses: np.ndarray, vectors: np.ndarray) -> Matrix3:
	vec = as_matrix(vectors)
	cm = center_of_mass(masses, vec)
	return sub(vec, np.broadcast_to(cm, vec.shape))


def to_barycentric(
	masses: np.ndarray, positions: np.ndarray, velocities: np.ndarray
) -> Tuple[Matrix3, Matrix3]:
	return remove_center_of_mass(masses, positions), remove_center_of_mass(masses, velocities)
