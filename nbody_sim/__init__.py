"""
N-Body Simulator - a fixed-step gravitational N-body engine.

Features:
- Pairwise Newtonian gravity with sum-then-apply accumulation
- Semi-implicit (symplectic) Euler integration
- Atomic snapshots for rendering collaborators
- Preset scenarios (sun_earth, inner_planets, random_disk)
- matplotlib 2D viewer and CLI
"""

__version__ = "0.1.0"

from nbody_sim.physics.body import Body, InvalidBody
from nbody_sim.physics.simulation import Simulation, Snapshot
from nbody_sim.backends.factory import get_backend, list_available_backends

__all__ = [
    "Body",
    "InvalidBody",
    "Simulation",
    "Snapshot",
    "get_backend",
    "list_available_backends",
]
