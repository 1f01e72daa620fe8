"""Point-mass body description and construction errors."""

import math
import numpy as np
from dataclasses import dataclass
from typing import Tuple


class InvalidBody(ValueError):
    """Raised when a body cannot take part in a simulation (e.g. mass <= 0)."""


@dataclass
class Body:
    """A point mass in the plane.
    
    Attributes:
        mass: Mass in kilograms, strictly positive
        position: (x, y) in meters
        velocity: (vx, vy) in meters per second
    """
    mass: float
    position: Tuple[float, float]
    velocity: Tuple[float, float] = (0.0, 0.0)

    def validate(self):
        """Check that this body describes well-defined attractive dynamics.
        
        Raises:
            InvalidBody: If mass is not a finite, strictly positive number, or
                position/velocity are not 2-vectors
        """
        try:
            mass = float(self.mass)
        except (TypeError, ValueError):
            raise InvalidBody(f"Body mass must be a number, got {self.mass!r}") from None
        if not math.isfinite(mass) or mass <= 0.0:
            raise InvalidBody(f"Body mass must be finite and strictly positive, got {self.mass}")
        for label, vec in (("position", self.position), ("velocity", self.velocity)):
            try:
                components = np.asarray(vec, dtype=np.float64)
            except (TypeError, ValueError):
                raise InvalidBody(f"Body {label} must be numeric, got {vec!r}") from None
            if components.shape != (2,):
                raise InvalidBody(f"Body {label} must be a 2-vector, got shape {components.shape}")
