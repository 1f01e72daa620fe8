"""Array operations the engine is written against."""

from abc import ABC, abstractmethod
from typing import Any, Optional
import numpy as np


class Backend(ABC):
    """Array library seam for the force kernel, integrator and diagnostics.

    State arrays are float64: positions and velocities have shape (n, 2),
    masses have shape (n,). Pairwise quantities have shape (n, n) or
    (n, n, 2), indexed [receiver, source].
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry name of this backend."""
        pass

    # Conversion

    @abstractmethod
    def array(self, data: Any) -> Any:
        """Build a float64 array from nested sequences or another array."""
        pass

    @abstractmethod
    def copy(self, array: Any) -> Any:
        """Return a copy that shares no memory with ``array``."""
        pass

    @abstractmethod
    def to_numpy(self, array: Any) -> np.ndarray:
        """Export an array for snapshots, rendering and reporting."""
        pass

    # Geometry

    @abstractmethod
    def pairwise_displacements(self, positions: Any) -> Any:
        """Displacement tensor d[i, j] = positions[j] - positions[i], shape (n, n, 2)."""
        pass

    @abstractmethod
    def norm(self, vectors: Any) -> Any:
        """Euclidean length along the last axis."""
        pass

    @abstractmethod
    def cross(self, a: Any, b: Any) -> Any:
        """z component of the planar cross product, a_x * b_y - a_y * b_x."""
        pass

    # Arithmetic

    @abstractmethod
    def scaled_add(self, x: Any, y: Any, factor: float) -> Any:
        """Return x + factor * y as a new array."""
        pass

    @abstractmethod
    def multiply(self, a: Any, b: Any) -> Any:
        pass

    @abstractmethod
    def divide(self, a: Any, b: Any) -> Any:
        pass

    @abstractmethod
    def sum(self, array: Any, axis: Optional[int] = None) -> Any:
        pass

    @abstractmethod
    def expand_dims(self, array: Any, axis: int) -> Any:
        pass

    # Masking

    @abstractmethod
    def equal(self, a: Any, b: Any) -> Any:
        pass

    @abstractmethod
    def where(self, condition: Any, x: Any, y: Any) -> Any:
        """Take x where condition holds, y elsewhere."""
        pass
