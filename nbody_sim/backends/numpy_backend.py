"""NumPy backend, the default and always available."""

from typing import Any, Optional
import numpy as np
from nbody_sim.backends.base import Backend


class NumPyBackend(Backend):
    """Backend computing directly on float64 ndarrays."""

    @property
    def name(self) -> str:
        return "numpy"

    def array(self, data: Any) -> np.ndarray:
        return np.array(data, dtype=np.float64)

    def copy(self, array: Any) -> np.ndarray:
        return np.array(array, dtype=np.float64, copy=True)

    def to_numpy(self, array: Any) -> np.ndarray:
        return np.asarray(array)

    def pairwise_displacements(self, positions: Any) -> np.ndarray:
        positions = np.asarray(positions)
        return positions[np.newaxis, :, :] - positions[:, np.newaxis, :]

    def norm(self, vectors: Any) -> np.ndarray:
        return np.sqrt(np.sum(np.square(vectors), axis=-1))

    def cross(self, a: Any, b: Any) -> np.ndarray:
        a, b = np.asarray(a), np.asarray(b)
        return a[..., 0] * b[..., 1] - a[..., 1] * b[..., 0]

    def scaled_add(self, x: Any, y: Any, factor: float) -> np.ndarray:
        return np.add(x, np.multiply(y, factor))

    def multiply(self, a: Any, b: Any) -> np.ndarray:
        return np.multiply(a, b)

    def divide(self, a: Any, b: Any) -> np.ndarray:
        return np.divide(a, b)

    def sum(self, array: Any, axis: Optional[int] = None) -> np.ndarray:
        return np.sum(array, axis=axis)

    def expand_dims(self, array: Any, axis: int) -> np.ndarray:
        return np.expand_dims(array, axis=axis)

    def equal(self, a: Any, b: Any) -> np.ndarray:
        return np.equal(a, b)

    def where(self, condition: Any, x: Any, y: Any) -> np.ndarray:
        return np.where(condition, x, y)
