"""Tests for the renderer and viewer loop (off-screen)."""

import numpy as np
import pytest
from nbody_sim.physics.simulation import Simulation
from nbody_sim.render.base import Renderer
from nbody_sim.render.renderer_2d import Renderer2D
from nbody_sim.render.viewer import Viewer


class RecordingRenderer(Renderer):
    """Renderer that keeps every frame's positions."""

    def __init__(self):
        self.frames = []
        self.closed = False

    def render(self, positions, velocities=None, masses=None):
        self.frames.append(positions)

    def capture_frame(self):
        return np.zeros((1, 1, 3), dtype=np.uint8)

    def is_open(self):
        return not self.closed

    def clear(self):
        self.frames = []

    def close(self):
        self.closed = True


def test_renderer_2d_offscreen(sun_earth_bodies):
    """Rendering a snapshot produces an RGB frame of the figure size."""
    sim = Simulation(sun_earth_bodies)
    renderer = Renderer2D(figsize=(4, 3), dpi=50, interactive=False)
    snap = sim.snapshot()
    
    renderer.render(snap.positions, snap.velocities, snap.masses)
    frame = renderer.capture_frame()
    
    assert frame.shape == (150, 200, 3)
    assert frame.dtype == np.uint8
    assert renderer.ax.get_xlim() == pytest.approx((-6.0e11, 6.0e11))
    
    # Second frame reuses the scatter artist
    scatter = renderer.scatter
    sim.step()
    renderer.render(sim.snapshot().positions)
    assert renderer.scatter is scatter
    assert np.allclose(scatter.get_offsets(), sim.snapshot().positions)
    
    renderer.close()
    assert not renderer.is_open()


def test_capture_before_render():
    """Capturing without a figure is an error."""
    renderer = Renderer2D(interactive=False)
    with pytest.raises(RuntimeError):
        renderer.capture_frame()


def test_viewer_tick_renders_then_steps(sun_earth_bodies):
    """Each tick renders the pre-step snapshot, then advances."""
    sim = Simulation(sun_earth_bodies)
    renderer = RecordingRenderer()
    viewer = Viewer(sim, renderer, steps_per_frame=2)
    
    viewer.tick()
    
    assert sim.step_count == 2
    assert np.allclose(renderer.frames[0], [[0.0, 0.0], [0.0, 1.5e11]])


def test_viewer_run_limits_frames(sun_earth_bodies):
    """run() stops at max_frames and closes the renderer."""
    sim = Simulation(sun_earth_bodies)
    renderer = RecordingRenderer()
    viewer = Viewer(sim, renderer)
    
    viewer.run(max_frames=3)
    
    assert viewer.frame_count == 3
    assert sim.step_count == 3
    assert len(renderer.frames) == 3
    assert renderer.closed


def test_viewer_stops_when_window_closed(sun_earth_bodies):
    """A closed window ends the loop."""
    sim = Simulation(sun_earth_bodies)
    renderer = RecordingRenderer()
    renderer.closed = True
    
    Viewer(sim, renderer).run()
    
    assert sim.step_count == 0


def test_viewer_rejects_zero_steps(sun_earth_bodies):
    """At least one step per frame is required."""
    with pytest.raises(ValueError):
        Viewer(Simulation(sun_earth_bodies), RecordingRenderer(), steps_per_frame=0)
