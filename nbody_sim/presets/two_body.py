"""Sun/Earth two-body preset."""

from typing import List
from nbody_sim.physics import constants
from nbody_sim.physics.body import Body
from nbody_sim.presets.base import Preset


class SunEarth(Preset):
    """A star at rest at the origin and a planet one AU away moving tangentially."""
    
    def __init__(
        self,
        G: float = constants.G,
        seed: int = None,
        star_mass: float = constants.SUN_MASS,
        planet_mass: float = constants.EARTH_MASS,
        distance: float = constants.AU,
        planet_speed: float = 30_000.0
    ):
        super().__init__(G, seed)
        self.star_mass = star_mass
        self.planet_mass = planet_mass
        self.distance = distance
        self.planet_speed = planet_speed
    
    @property
    def name(self) -> str:
        return "sun_earth"
    
    def generate(self) -> List[Body]:
        return [
            Body(self.star_mass, (0.0, 0.0), (0.0, 0.0)),
            Body(self.planet_mass, (0.0, self.distance), (self.planet_speed, 0.0)),
        ]
