"""Frame loop connecting a simulation to a renderer."""

from typing import Optional
from nbody_sim.physics.simulation import Simulation
from nbody_sim.render.base import Renderer


class Viewer:
    """Drives a simulation once per scheduling tick and renders its snapshots.

    The viewer only reads snapshots; simulation state changes exclusively
    through Simulation.step().
    """

    def __init__(self, simulation: Simulation, renderer: Renderer, steps_per_frame: int = 1):
        if steps_per_frame < 1:
            raise ValueError(f"steps_per_frame must be at least 1, got {steps_per_frame}")
        self.simulation = simulation
        self.renderer = renderer
        self.steps_per_frame = steps_per_frame
        self.frame_count = 0

    def tick(self):
        """Render the current state, then advance the simulation."""
        snap = self.simulation.snapshot()
        self.renderer.render(snap.positions, snap.velocities, snap.masses)
        self.simulation.run(self.steps_per_frame)
        self.frame_count += 1

    def run(self, max_frames: Optional[int] = None):
        """Tick until max_frames is reached or the renderer window is closed.

        Args:
            max_frames: Frame limit; None runs until the window closes
        """
        try:
            while self.renderer.is_open():
                if max_frames is not None and self.frame_count >= max_frames:
                    break
                self.tick()
        finally:
            self.renderer.close()
