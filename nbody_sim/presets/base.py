"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import List, Optional
from nbody_sim.physics import constants
from nbody_sim.physics.body import Body


class Preset(ABC):
    """Abstract base class for preset scenarios."""
    
    def __init__(self, G: float = constants.G, seed: Optional[int] = None):
        """Initialize preset.
        
        Args:
            G: Gravitational constant used to derive orbital velocities
            seed: Random seed for reproducibility (ignored by deterministic presets)
        """
        self.G = G
        self.seed = seed
    
    @abstractmethod
    def generate(self) -> List[Body]:
        """Generate initial conditions.
        
        Returns:
            Ordered list of bodies
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
