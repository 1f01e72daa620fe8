"""Sun plus the four inner planets on circular orbits."""

from typing import List
import numpy as np
from nbody_sim.physics import constants
from nbody_sim.physics.body import Body
from nbody_sim.presets.base import Preset

# (mass in kg, orbital radius in AU)
INNER_PLANETS = {
    "mercury": (3.30e23, 0.387),
    "venus": (4.87e24, 0.723),
    "earth": (constants.EARTH_MASS, 1.0),
    "mars": (6.42e23, 1.524),
}


class InnerPlanets(Preset):
    """Mercury, Venus, Earth and Mars orbiting a central star.
    
    Each planet starts on the +x axis at its own phase angle with the
    circular speed v = sqrt(G * M / r) around the star.
    """
    
    def __init__(
        self,
        G: float = constants.G,
        seed: int = None,
        star_mass: float = constants.SUN_MASS,
        spread_phases: bool = True
    ):
        """Initialize inner planets preset.
        
        Args:
            G: Gravitational constant
            seed: Unused, accepted for a uniform preset signature
            star_mass: Mass of the central star
            spread_phases: Start planets at different angles instead of all on +x
        """
        super().__init__(G, seed)
        self.star_mass = star_mass
        self.spread_phases = spread_phases
    
    @property
    def name(self) -> str:
        return "inner_planets"
    
    def generate(self) -> List[Body]:
        bodies = [Body(self.star_mass, (0.0, 0.0), (0.0, 0.0))]
        for k, (mass, radius_au) in enumerate(INNER_PLANETS.values()):
            r = radius_au * constants.AU
            v = np.sqrt(self.G * self.star_mass / r)
            phase = k * np.pi / 2 if self.spread_phases else 0.0
            position = (r * np.cos(phase), r * np.sin(phase))
            # Counter-clockwise: velocity perpendicular to the radius vector
            velocity = (-v * np.sin(phase), v * np.cos(phase))
            bodies.append(Body(mass, position, velocity))
        return bodies
