"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import Tuple


class Integrator(ABC):
    """Abstract interface for numerical integrators."""
    
    @abstractmethod
    def step(self, positions, velocities, accelerations, dt: float, backend) -> Tuple:
        """Perform one integration step.
        
        Args:
            positions: Current positions array (n, 2)
            velocities: Current velocities array (n, 2)
            accelerations: Accelerations at the current positions (n, 2)
            dt: Time step
            backend: Compute backend
            
        Returns:
            Tuple of (new_positions, new_velocities)
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass
    
    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass
