"""Conserved-quantity diagnostics for monitoring a run.

Potential energy follows the same coincident-body policy as the force
calculation: a pair with r == 0 contributes nothing.
"""

from typing import Tuple
import numpy as np
from nbody_sim.backends.base import Backend


class Diagnostics:
    """Energy and momentum diagnostics for a set of point masses."""

    def __init__(self, backend: Backend, G: float):
        """Initialize diagnostics.

        Args:
            backend: Compute backend the quantities are evaluated with
            G: Gravitational constant used by the simulation
        """
        self.backend = backend
        self.G = G

    def _scalar(self, value) -> float:
        return float(self.backend.to_numpy(value))

    def _vector(self, value) -> np.ndarray:
        return np.asarray(self.backend.to_numpy(value), dtype=np.float64)

    def _weighted(self, masses, vectors):
        """m_i * v_i for every row."""
        return self.backend.multiply(self.backend.expand_dims(masses, 1), vectors)

    def compute_kinetic_energy(self, velocities, masses) -> float:
        """Kinetic energy: 0.5 * sum(m_i * v_i^2)."""
        b = self.backend
        v_sq = b.sum(b.multiply(velocities, velocities), axis=1)
        return 0.5 * self._scalar(b.sum(b.multiply(masses, v_sq)))

    def compute_potential_energy(self, positions, masses) -> float:
        """Potential energy: U = -G * sum_i sum_j>i (m_i * m_j / r_ij).

        Summed over all ordered pairs and halved.
        """
        b = self.backend
        r = b.norm(b.pairwise_displacements(positions))
        coincident = b.equal(r, 0.0)
        safe_r = b.where(coincident, 1.0, r)

        m_pairs = b.multiply(b.expand_dims(masses, 1), b.expand_dims(masses, 0))
        terms = b.where(coincident, 0.0, b.divide(m_pairs, safe_r))
        return -0.5 * self.G * self._scalar(b.sum(terms))

    def compute_energies(self, positions, velocities, masses) -> Tuple[float, float, float]:
        """Compute kinetic, potential and total energy.

        Returns:
            Tuple of (K, U, E)
        """
        K = self.compute_kinetic_energy(velocities, masses)
        U = self.compute_potential_energy(positions, masses)
        return K, U, K + U

    def compute_momentum(self, velocities, masses) -> np.ndarray:
        """Total linear momentum vector sum(m_i * v_i)."""
        return self._vector(self.backend.sum(self._weighted(masses, velocities), axis=0))

    def compute_angular_momentum(self, positions, velocities, masses) -> float:
        """Angular momentum about the origin, L_z = sum(m_i * (x_i * vy_i - y_i * vx_i))."""
        b = self.backend
        return self._scalar(b.sum(b.multiply(masses, b.cross(positions, velocities))))

    def compute_center_of_mass(self, positions, masses) -> np.ndarray:
        """Mass-weighted mean position."""
        b = self.backend
        total = b.sum(self._weighted(masses, positions), axis=0)
        return self._vector(b.divide(total, b.sum(masses)))
