"""Seeded random disk of light bodies around a central star."""

from typing import List
import numpy as np
from nbody_sim.physics import constants
from nbody_sim.physics.body import Body
from nbody_sim.presets.base import Preset


class RandomDisk(Preset):
    """Central star with n_bodies - 1 light bodies on near-circular orbits."""
    
    def __init__(
        self,
        G: float = constants.G,
        seed: int = None,
        n_bodies: int = 20,
        star_mass: float = constants.SUN_MASS,
        inner_radius: float = 0.3 * constants.AU,
        outer_radius: float = 3.0 * constants.AU,
        min_mass: float = 1.0e22,
        max_mass: float = 1.0e25,
        velocity_jitter: float = 0.05
    ):
        """Initialize random disk preset.
        
        Args:
            G: Gravitational constant
            seed: Random seed
            n_bodies: Total number of bodies including the star
            star_mass: Mass of the central star
            inner_radius: Minimum orbital radius
            outer_radius: Maximum orbital radius
            min_mass: Lower bound of the uniform mass distribution
            max_mass: Upper bound of the uniform mass distribution
            velocity_jitter: Relative random perturbation of the circular speed
        """
        super().__init__(G, seed)
        if n_bodies < 1:
            raise ValueError(f"n_bodies must be at least 1, got {n_bodies}")
        self.n_bodies = n_bodies
        self.star_mass = star_mass
        self.inner_radius = inner_radius
        self.outer_radius = outer_radius
        self.min_mass = min_mass
        self.max_mass = max_mass
        self.velocity_jitter = velocity_jitter
    
    @property
    def name(self) -> str:
        return "random_disk"
    
    def generate(self) -> List[Body]:
        """Generate disk initial conditions with prograde rotation."""
        rng = np.random.default_rng(self.seed)
        n = self.n_bodies - 1
        
        radii = rng.uniform(self.inner_radius, self.outer_radius, n)
        angles = rng.uniform(0.0, 2 * np.pi, n)
        masses = rng.uniform(self.min_mass, self.max_mass, n)
        speeds = np.sqrt(self.G * self.star_mass / radii)
        speeds *= 1.0 + self.velocity_jitter * rng.standard_normal(n)
        
        x, y = radii * np.cos(angles), radii * np.sin(angles)
        vx, vy = -speeds * np.sin(angles), speeds * np.cos(angles)
        
        bodies = [Body(self.star_mass, (0.0, 0.0), (0.0, 0.0))]
        for i in range(n):
            bodies.append(Body(float(masses[i]), (float(x[i]), float(y[i])), (float(vx[i]), float(vy[i]))))
        return bodies
