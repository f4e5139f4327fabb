"""
This module provides the fixed-dimension linear algebra used by the integrator and the
force model.

Vectors are float64 numpy arrays of shape (3,) and body matrices are float64 arrays of
shape (N, 3). The constructors as_vec3 and as_matrix coerce input and reject anything
else, and the arithmetic helpers (add, sub, scale, norm, row, set_row) refuse operands
whose shapes differ instead of letting numpy broadcast them. A shape mismatch is a
caller bug, so it raises ValueError and is not meant to be recovered from.
"""

from __future__ import annotations
import numpy as np
from numpy.typing import ArrayLike, NDArray


__all__ = [
    "Vec3",
    "Matrix3",
    "as_vec3",
    "as_matrix",
    "zeros",
    "add",
    "sub",
    "scale",
    "norm",
    "row_norms",
    "row",
    "set_row",
]

Vec3 = NDArray[np.float64]
Matrix3 = NDArray[np.float64]


def _same_shape(a: np.ndarray, b: np.ndarray) -> None:
    if a.shape != b.shape:
        raise ValueError(f"shape mismatch: {a.shape} vs {b.shape}")


def as_vec3(values: ArrayLike) -> Vec3:
    arr = np.array(values, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-vector, got shape {arr.shape}")
    return arr


def as_matrix(values: ArrayLike, n_rows: int | None = None) -> Matrix3:
    arr = np.array(values, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"expected an (N, 3) matrix, got shape {arr.shape}")
    if n_rows is not None and arr.shape[0] != int(n_rows):
        raise ValueError(f"expected {n_rows} rows, got {arr.shape[0]}")
    return arr


def zeros(n_rows: int) -> Matrix3:
    return np.zeros((int(n_rows), 3), dtype=np.float64)


def add(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    _same_shape(a, b)
    return a + b


def sub(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    _same_shape(a, b)
    return a - b


def scale(a: np.ndarray, k: float) -> np.ndarray:
    return a * float(k)


def norm(v: Vec3) -> float:
    return float(np.sqrt(np.dot(v, v)))


def row_norms(m: Matrix3) -> NDArray[np.float64]:
    return np.sqrt(np.einsum("ij,ij->i", m, m))


def row(m: Matrix3, i: int) -> Vec3:
    return m[int(i)].copy()


def set_row(m: Matrix3, i: int, v: ArrayLike) -> Matrix3:
    out = m.copy()
    out[int(i)] = as_vec3(v)
    return out
