"""Numerical integrators for N-body simulations."""

from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.integrators.symplectic_euler import SymplecticEulerIntegrator

__all__ = ["Integrator", "SymplecticEulerIntegrator"]
