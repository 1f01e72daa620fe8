"""Semi-implicit (symplectic) Euler integrator."""

from typing import Tuple
from nbody_sim.backends.base import Backend
from nbody_sim.physics.integrators.base import Integrator


class SymplecticEulerIntegrator(Integrator):
    """Semi-implicit Euler - first order, symplectic.
    
    Velocity is advanced first; the position update then uses the *new*
    velocity. Unlike explicit Euler, the energy error stays bounded on
    periodic orbits instead of drifting.
    """
    
    @property
    def name(self) -> str:
        return "symplectic_euler"
    
    @property
    def order(self) -> int:
        return 1
    
    def step(self, positions, velocities, accelerations, dt: float, backend: Backend) -> Tuple:
        """Symplectic Euler step: v_new = v + a*dt, r_new = r + v_new*dt.
        
        Args:
            positions: Current positions
            velocities: Current velocities
            accelerations: Accelerations computed from the current positions
            dt: Time step
            backend: Compute backend
            
        Returns:
            Tuple of (new_positions, new_velocities)
        """
        new_velocities = backend.scaled_add(velocities, accelerations, dt)
        new_positions = backend.scaled_add(positions, new_velocities, dt)
        return new_positions, new_velocities
