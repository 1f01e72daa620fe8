"""Live 2D view of the Sun/Earth system."""

from nbody_sim import Simulation
from nbody_sim.presets import SunEarth
from nbody_sim.render import Renderer2D, Viewer

def main():
    """Render one frame per simulated day until the window is closed."""
    sim = Simulation(SunEarth().generate())
    viewer = Viewer(sim, Renderer2D())
    viewer.run()

if __name__ == "__main__":
    main()
