"""Pairwise gravitational acceleration.

Every acceleration is computed from one read-only position array and summed
into a fresh output buffer before anything is applied (sum-then-apply), so the
result does not depend on the order in which pairs are visited.
"""

from typing import Any, Literal
import numpy as np
from nbody_sim.backends.base import Backend

METHODS = ("vectorized", "direct")


class ForceCalculator:
    """Computes the acceleration each body receives from all the others.
    
    Coincident bodies (r == 0) contribute zero acceleration to each other.
    """

    def __init__(self, method: Literal["vectorized", "direct"] = "vectorized"):
        if method not in METHODS:
            raise ValueError(f"Unknown force method '{method}'. Available: {list(METHODS)}")
        self.method = method

    def compute_accelerations(
        self,
        positions: Any,
        masses: Any,
        backend: Backend,
        G: float,
    ) -> Any:
        """Compute gravitational accelerations.
        
        Args:
            positions: Array of shape (n, 2)
            masses: Array of shape (n,)
            backend: Compute backend
            G: Gravitational constant
            
        Returns:
            Array of shape (n, 2) with the summed acceleration on each body
        """
        if self.method == "direct":
            return self._compute_direct(positions, masses, backend, G)
        return self._compute_vectorized(positions, masses, backend, G)

    def _compute_vectorized(self, positions, masses, backend: Backend, G: float):
        diff = backend.pairwise_displacements(positions)
        r = backend.norm(diff)
        coincident = backend.equal(r, 0.0)  # includes the diagonal
        safe_r = backend.where(coincident, 1.0, r)

        # a = G * m_j / r^2, directed along d / r
        m_j = backend.expand_dims(masses, 0)
        magnitude = backend.divide(backend.multiply(G, m_j), backend.multiply(safe_r, safe_r))
        scale = backend.where(coincident, 0.0, backend.divide(magnitude, safe_r))

        contributions = backend.multiply(backend.expand_dims(scale, 2), diff)
        return backend.sum(contributions, axis=1)

    def _compute_direct(self, positions, masses, backend: Backend, G: float):
        """Loop-based calculation visiting each ordered pair (i, j) explicitly.

        Runs on exported NumPy scalars; the backend only wraps the result.
        """
        positions_np = np.asarray(backend.to_numpy(positions), dtype=np.float64)
        masses_np = np.asarray(backend.to_numpy(masses), dtype=np.float64)
        n = positions_np.shape[0]

        accelerations = np.zeros_like(positions_np)
        for i in range(n):
            for j in range(n):
                if i == j:
                    continue
                dist_x = positions_np[j, 0] - positions_np[i, 0]
                dist_y = positions_np[j, 1] - positions_np[i, 1]
                dist = np.sqrt(dist_x * dist_x + dist_y * dist_y)
                if dist == 0.0:
                    continue
                acc = G * masses_np[j] / (dist * dist)
                accelerations[i, 0] += acc * dist_x / dist
                accelerations[i, 1] += acc * dist_y / dist

        return backend.array(accelerations)
