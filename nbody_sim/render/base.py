"""Base renderer interface."""

from abc import ABC, abstractmethod
from typing import Optional
import numpy as np


class Renderer(ABC):
    """Abstract base class for renderers."""
    
    @abstractmethod
    def render(self, positions: np.ndarray, velocities: Optional[np.ndarray] = None, masses: Optional[np.ndarray] = None):
        """Render current frame.
        
        Args:
            positions: Body positions (n, 2)
            velocities: Optional velocities
            masses: Optional masses
        """
        pass
    
    @abstractmethod
    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array.
        
        Returns:
            Image array (H, W, 3) uint8
        """
        pass
    
    @abstractmethod
    def is_open(self) -> bool:
        """Return False once the output window has been closed."""
        pass
    
    @abstractmethod
    def clear(self):
        """Clear the renderer."""
        pass
    
    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass
