"""Rendering for N-body simulations."""

from nbody_sim.render.base import Renderer
from nbody_sim.render.renderer_2d import Renderer2D
from nbody_sim.render.viewer import Viewer

__all__ = ["Renderer", "Renderer2D", "Viewer"]
